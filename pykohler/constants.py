""" Physical constants used in the κ-Kohler hygroscopicity equations, as well as
default numerical parameters for the maximum supersaturation search.

================= ============= ========== ==========        ======================
Symbol            Variable      Value      Units             Description
================= ============= ========== ==========        ======================
:math:`\\sigma_w`  ``sigma_w``   0.0728     N/m               surface tension of pure
                                                             water
:math:`M_w`       ``Mw``        0.018      kg/mol            molecular weight of water
:math:`R`         ``R``         8.314      J/mol/K           universal gas constant
:math:`R_v`       ``Rv``        461.0      J/kg/K            gas constant for water vapor
:math:`\\rho_w`    ``rho_w``     1000.0     kg m**-3          density of water
:math:`T`         ``T``         298.15     K                 absolute temperature
================= ============= ========== ==========        ======================

Values follow [SP2016]. The constants are also bundled into an immutable
:class:`KohlerConstants`, which carries the derived Kelvin coefficient

.. math::
    A = \\frac{4 \\sigma_w M_w}{\\rho_w R T}

in meters. ``DEFAULT_CONSTANTS`` holds the values above; alternative sets (e.g.
for temperature sensitivity tests) are created with keyword overrides,

>>> cold = KohlerConstants(T=273.15)

References
----------

.. [SP2016] Seinfeld, John H, and Spyros N Pandis. Atmospheric Chemistry
   and Physics: From Air Pollution to Climate Change. 3rd ed. Wiley, 2016.

"""
from collections import namedtuple

sigma_w = 0.0728  #: Surface tension of pure water, N/m
Mw = 18.0 / 1e3  #: Molecular weight of water, kg/mol
R = 8.314  #: Universal gas constant, J/(mol K)
Rv = 461.0  #: Gas constant for water vapor, J/(kg K)
rho_w = 1e3  #: Density of water, kg/m^3
T = 298.15  #: Absolute temperature, K

# Unit conversions
UM_TO_M = 1e-6  #: micrometers -> meters
M_TO_UM = 1e6  #: meters -> micrometers
PERCENT = 100.0  #: fractional -> percent supersaturation

# Maximum supersaturation search defaults
SEARCH_MAXITER = 2000  #: iteration cap for the simplex search
SEARCH_XATOL = 1e-8  #: simplex size tolerance, relative to the seed diameter
SEARCH_FATOL = 1e-12  #: objective spread tolerance, saturation ratio

_CONSTANT_FIELDS = ["sigma_w", "Mw", "R", "Rv", "rho_w", "T"]


class KohlerConstants(namedtuple("KohlerConstants", _CONSTANT_FIELDS)):
    """Immutable set of physical constants for κ-Kohler calculations.

    Every field defaults to the module-level constant of the same name.

    """

    __slots__ = ()

    @property
    def A(self):
        """Kelvin (curvature) coefficient, m."""
        return (4.0 * self.sigma_w * self.Mw) / (self.rho_w * self.R * self.T)


KohlerConstants.__new__.__defaults__ = (sigma_w, Mw, R, Rv, rho_w, T)

DEFAULT_CONSTANTS = KohlerConstants()
