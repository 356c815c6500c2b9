""" Collection of output post-processing routines.
"""
import numpy as np
import pandas as pd

__all__ = ["results_to_dataframe"]


def results_to_dataframe(results):
    """Collect a batch of solutions into a table.

    Parameters
    ----------
    results : list of :class:`SolverResult`
        Output from :func:`solve`

    Returns
    -------
    DataFrame
        One row per element, indexed by its position in the batch, with the
        columns ``mode``, ``value``, ``wet_diameter``, ``iterations``,
        ``status`` ("ok" or the name of the error raised) and ``message``.
        Numeric columns are NaN where an element has no such output.

    """
    rows = {
        "mode": [],
        "value": [],
        "wet_diameter": [],
        "iterations": [],
        "status": [],
        "message": [],
    }
    for result in results:
        rows["mode"].append(None if result.mode is None else result.mode.name)
        rows["value"].append(np.nan if result.value is None else result.value)
        rows["wet_diameter"].append(
            np.nan if result.wet_diameter is None else result.wet_diameter
        )
        rows["iterations"].append(
            np.nan if result.iterations is None else float(result.iterations)
        )
        if result.ok:
            rows["status"].append("ok")
            rows["message"].append("")
        else:
            rows["status"].append(type(result.error).__name__)
            rows["message"].append(result.error.error_str)

    index = pd.Index([result.index for result in results], name="element")
    df = pd.DataFrame(rows, index=index)
    df["iterations"] = df["iterations"].astype("Int64")

    return df
