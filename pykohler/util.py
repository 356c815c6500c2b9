"""
Software utilities

"""

__all__ = [
    "KohlerError",
    "InvalidModeError",
    "DomainError",
    "MissingInputError",
    "SearchNonConvergenceError",
]


class KohlerError(Exception):
    """Custom exception to throw during hygroscopicity calculations.

    ``index`` records which element of a batch produced the error; it is
    ``None`` when the error was raised by a scalar calculation.

    """

    def __init__(self, error_str, index=None):
        self.error_str = error_str
        self.index = index

    def __str__(self):
        if self.index is None:
            return repr(self.error_str)
        return repr("element {}: {}".format(self.index, self.error_str))


class InvalidModeError(KohlerError):
    """Requested solution mode is not one of the known modes."""

    def __init__(self, mode, index=None):
        self.mode = mode
        error_str = "No option selected: unrecognized mode {!r} (expected 1, 2, 3 or 4)".format(
            mode
        )
        super().__init__(error_str, index)


class DomainError(KohlerError):
    """Inputs for which the requested quantity is mathematically undefined."""


class MissingInputError(DomainError):
    """A field required by the selected mode was left unset."""


class SearchNonConvergenceError(KohlerError):
    """The maximum supersaturation search failed to locate the Kohler peak.

    Attributes
    ----------
    diameter : float
        Last wet diameter estimate held by the optimizer, micrometers
    iterations : int
        Number of iterations performed before giving up

    """

    def __init__(self, error_str, diameter=None, iterations=None, index=None):
        self.diameter = diameter
        self.iterations = iterations
        super().__init__(error_str, index)
