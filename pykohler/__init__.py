"""
κ-Kohler Hygroscopicity Solver
------------------------------

This module relates the hygroscopicity (κ) of an aerosol particle, its critical
diameter, and the supersaturation at which it activates into a cloud droplet,
following the single-parameter κ-Kohler theory of Petters and Kreidenweis
(2007). Any one of the three can be solved for from the other two in closed
form, and the maximum supersaturation along a particle's full Kohler curve can
be located numerically.

"""

from importlib.metadata import version as _version

try:
    __version__ = _version("pykohler")
except Exception:
    # This is a local copy, or a copy that was not installed via setuptools
    __version__ = "local"

from .constants import DEFAULT_CONSTANTS, KohlerConstants
from .driver import *
from .postprocess import *
from .search import *
from .thermo import *
from .util import *
