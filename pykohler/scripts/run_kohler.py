#!/usr/bin/env python
"""
CLI interface to solve batches of κ-Kohler hygroscopicity problems.

The namelist is a YAML file such as::

    mode: 4
    inputs:
      supersaturation: null
      critical_diameter: [0.05, 0.1, 0.2]
      kappa: 0.25
    constants:          # optional overrides of the physical constants
      T: 283.15
    search:             # optional settings for the mode 4 search
      maxiter: 500

"""
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter

import yaml

import pykohler as pk

parser = ArgumentParser(description=__doc__, formatter_class=RawDescriptionHelpFormatter)
parser.add_argument(
    "namelist",
    type=str,
    metavar="config.yml",
    help="YAML namelist controlling the calculation",
)
parser.add_argument(
    "-v", "--verbose", action="store_true", help="print each step of the calculation"
)

INPUT_FIELDS = ["supersaturation", "critical_diameter", "kappa"]


def read_namelist(fn):
    """Read a YAML namelist into an in-memory dictionary."""
    with open(fn, "rb") as f:
        y = yaml.safe_load(f)
    if not isinstance(y, dict) or "mode" not in y or "inputs" not in y:
        raise pk.KohlerError("Namelist {} must define 'mode' and 'inputs'".format(fn))
    return y


def run_namelist(y, console=False):
    """Solve the batch described by a namelist dictionary.

    Returns
    -------
    DataFrame
        See :func:`results_to_dataframe`.

    """
    inputs = y["inputs"]
    unknown = set(inputs) - set(INPUT_FIELDS)
    if unknown:
        raise pk.KohlerError("Unknown input fields: {}".format(sorted(unknown)))

    try:
        constants = pk.KohlerConstants(**(y.get("constants") or {}))
    except TypeError as e:
        raise pk.KohlerError("Bad constants override: {}".format(e))

    results = pk.solve(
        *[inputs.get(field) for field in INPUT_FIELDS],
        mode=y["mode"],
        constants=constants,
        console=console,
        **(y.get("search") or {})
    )
    return pk.results_to_dataframe(results)


def run_kohler():
    # Read command-line arguments
    args = parser.parse_args()

    try:
        print("Attempting to read namelist {}".format(args.namelist))
        y = read_namelist(args.namelist)
    except IOError:
        print("Couldn't read file {}".format(args.namelist))
        sys.exit(1)
    except (yaml.YAMLError, pk.KohlerError) as e:
        print("Couldn't parse namelist: {}".format(e))
        sys.exit(1)

    try:
        df = run_namelist(y, console=args.verbose)
    except (pk.KohlerError, ValueError, TypeError) as e:
        print("Something went wrong setting up the calculation: {}".format(e))
        sys.exit(1)

    print(df.to_string())

    if not (df["status"] == "ok").all():
        sys.exit(1)

    print("Done!")


if __name__ == "__main__":
    run_kohler()
