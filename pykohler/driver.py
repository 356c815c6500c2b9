""" Utilities for driving batches of hygroscopicity calculations.

A batch consists of three parallel sequences (supersaturation, critical
diameter, and hygroscopicity) and a single solution mode which names the
quantity to solve for. :func:`solve` pairs the sequences up into
:class:`InputTriple` records, maps the evaluator for the requested mode over
them, and returns one :class:`SolverResult` per element. Elements are fully
independent of one another, so a bad input only ever spoils its own result.

"""
import warnings
from collections import namedtuple
from enum import IntEnum
from functools import partial

import numpy as np

from . import constants as c
from .search import kohler_peak
from .thermo import critical_diameter, critical_kappa, critical_supersaturation
from .util import InvalidModeError, KohlerError, MissingInputError

__all__ = ["Mode", "InputTriple", "SolverResult", "parse_mode", "solve"]


class Mode(IntEnum):
    """Solution modes; each names the quantity solved for."""

    SUPERSAT_FROM_DIAM_KAPPA = 1
    DIAM_FROM_KAPPA_SUPERSAT = 2
    KAPPA_FROM_DIAM_SUPERSAT = 3
    MAX_SUPERSAT_SEARCH = 4


#: Input fields read by each mode; all others are ignored
REQUIRED_FIELDS = {
    Mode.SUPERSAT_FROM_DIAM_KAPPA: ("critical_diameter", "kappa"),
    Mode.DIAM_FROM_KAPPA_SUPERSAT: ("supersaturation", "kappa"),
    Mode.KAPPA_FROM_DIAM_SUPERSAT: ("supersaturation", "critical_diameter"),
    Mode.MAX_SUPERSAT_SEARCH: ("critical_diameter", "kappa"),
}

InputTriple = namedtuple("InputTriple", ["supersaturation", "critical_diameter", "kappa"])
InputTriple.__doc__ = """One element of a batch; an unset field is ``None``."""


class SolverResult(object):
    """Outcome of solving a single batch element.

    Exactly one of ``value`` and ``error`` is set. Results from the maximum
    supersaturation search additionally carry the wet diameter at the peak of
    the Kohler curve and the number of iterations the search used.

    Attributes
    ----------
    index : int
        Position of the element in the input batch.
    mode : :class:`Mode` or None
        Solution mode, or ``None`` if the requested mode was invalid.
    value : float or None
        Supersaturation (percent), critical diameter (micrometers) or kappa,
        depending on ``mode``.
    wet_diameter : float or None
        Wet diameter at the Kohler peak, micrometers (mode 4 only).
    iterations : int or None
        Simplex iterations used (mode 4 only).
    error : :class:`KohlerError` or None
        Why no value could be computed.

    """

    def __init__(
        self, index, mode=None, value=None, wet_diameter=None, iterations=None, error=None
    ):
        self.index = index
        self.mode = mode
        self.value = value
        self.wet_diameter = wet_diameter
        self.iterations = iterations
        self.error = error

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """Return ``value``, or raise the error which prevented computing it."""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self):
        if self.ok:
            return "SolverResult(index={}, mode={}, value={!r})".format(
                self.index, int(self.mode), self.value
            )
        return "SolverResult(index={}, error={})".format(self.index, self.error)


def parse_mode(mode):
    """Convert ``mode`` (a :class:`Mode`, an integer, or a member name) into a
    :class:`Mode`.

    Raises
    ------
    InvalidModeError
        If ``mode`` does not correspond to a known mode.

    """
    if isinstance(mode, str):
        try:
            return Mode[mode.strip().upper()]
        except KeyError:
            raise InvalidModeError(mode)
    if isinstance(mode, bool):
        raise InvalidModeError(mode)
    try:
        return Mode(mode)
    except (ValueError, TypeError):
        raise InvalidModeError(mode)


def _unset(x):
    return x is None or (isinstance(x, (float, np.floating)) and np.isnan(x))


def _as_field(values):
    """Coerce one input field to a list with ``None`` for every unset entry, or
    return a single value if a scalar was passed."""
    if values is None or np.isscalar(values):
        return None if _unset(values) else values
    return [None if _unset(x) else x for x in np.asarray(values, dtype=object).ravel()]


def _as_triples(supersaturation, critical_diameter, kappa):
    fields = [_as_field(x) for x in (supersaturation, critical_diameter, kappa)]

    lengths = {len(f) for f in fields if isinstance(f, list)}
    if len(lengths) > 1:
        raise ValueError(
            "supersaturation, critical_diameter and kappa must have equal "
            "lengths (got {})".format(
                [len(f) if isinstance(f, list) else "scalar" for f in fields]
            )
        )
    N = lengths.pop() if lengths else 1

    fields = [f if isinstance(f, list) else [f] * N for f in fields]
    return [InputTriple(*xs) for xs in zip(*fields)]


def _evaluate(mode, constants, search_kws, index, triple):
    """Solve a single element, capturing any calculation error in the result."""
    try:
        missing = [f for f in REQUIRED_FIELDS[mode] if getattr(triple, f) is None]
        if missing:
            raise MissingInputError(
                "mode {} requires {} to be set".format(int(mode), " and ".join(missing))
            )

        if mode == Mode.SUPERSAT_FROM_DIAM_KAPPA:
            value = critical_supersaturation(triple.critical_diameter, triple.kappa, constants)
        elif mode == Mode.DIAM_FROM_KAPPA_SUPERSAT:
            value = critical_diameter(triple.supersaturation, triple.kappa, constants)
        elif mode == Mode.KAPPA_FROM_DIAM_SUPERSAT:
            value = critical_kappa(triple.supersaturation, triple.critical_diameter, constants)
        else:
            D_wet, value, nit = kohler_peak(
                triple.critical_diameter,
                triple.kappa,
                constants,
                full_output=True,
                **search_kws
            )
            return SolverResult(index, mode, value, wet_diameter=D_wet, iterations=nit)
    except KohlerError as e:
        e.index = index
        return SolverResult(index, mode, iterations=getattr(e, "iterations", None), error=e)

    return SolverResult(index, mode, value)


def solve(
    supersaturation,
    critical_diameter,
    kappa,
    mode,
    constants=c.DEFAULT_CONSTANTS,
    maxiter=c.SEARCH_MAXITER,
    xatol=c.SEARCH_XATOL,
    fatol=c.SEARCH_FATOL,
    console=False,
):
    """Solve a batch of κ-Kohler problems for one unknown quantity.

    Modes
    -----
    1. supersaturation from critical diameter and kappa
    2. critical diameter from kappa and supersaturation
    3. kappa from critical diameter and supersaturation
    4. maximum supersaturation from a (guess) critical diameter and kappa,
       by numerical search for the peak of the Kohler curve

    Parameters
    ----------
    supersaturation : float or array_like
        Supersaturation, percent (0.1 means 100.1% relative humidity).
    critical_diameter : float or array_like
        Critical diameter, micrometers.
    kappa : float or array_like
        Hygroscopicity parameter.
    mode : int, str or :class:`Mode`
        Quantity to solve for; applies to every element.
    constants : :class:`KohlerConstants`, optional
        Physical constants to use.
    maxiter, xatol, fatol : optional
        Iteration cap and convergence tolerances for mode 4; see
        :func:`kohler_peak`.
    console : boolean, optional
        Print each element's outcome to the terminal.

    Fields a mode does not need should be passed as ``None`` (``NaN`` is also
    understood as unset) and are never read. Scalars are broadcast against
    the sequences.

    Returns
    -------
    list of :class:`SolverResult`
        One result per element, in input order. If ``mode`` is invalid, every
        result carries an :class:`InvalidModeError` and no value.

    Raises
    ------
    ValueError
        If the input sequences have different lengths.

    """
    triples = _as_triples(supersaturation, critical_diameter, kappa)

    try:
        mode = parse_mode(mode)
    except InvalidModeError as e:
        warnings.warn(e.error_str, stacklevel=2)
        if console:
            print(e.error_str)
        return [
            SolverResult(i, error=InvalidModeError(e.mode, index=i))
            for i in range(len(triples))
        ]

    search_kws = dict(maxiter=maxiter, xatol=xatol, fatol=fatol, console=console)
    evaluate = partial(_evaluate, mode, constants, search_kws)
    results = list(map(evaluate, range(len(triples)), triples))

    if console:
        print("SOLUTIONS ({})".format(mode.name))
        for result in results:
            print("    {}".format(result))

    return results
