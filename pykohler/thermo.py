# -*- coding: utf-8 -*-
""" κ-Kohler theory functions.

The following functions relate the hygroscopicity of an aerosol particle, its
critical diameter, and the supersaturation at which it activates. The closed
forms follow from the critical point of the κ-Kohler curve [PK2007]; the full
curve itself is exposed for the numerical peak search in :mod:`.search`.

Unless stated otherwise, diameters are passed and returned in micrometers and
supersaturations in percent (0.3 means a saturation ratio of 1.003).

References
----------

.. [PK2007] Petters, M. D., and S. M. Kreidenweis. "A Single Parameter
    Representation of Hygroscopic Growth and Cloud Condensation Nucleus
    Activity." Atmospheric Chemistry and Physics 7.8 (2007): 1961-1971

"""
import numpy as np

from . import constants as c
from .util import DomainError

__all__ = [
    "saturation_ratio",
    "equilibrium_supersaturation",
    "critical_supersaturation",
    "critical_diameter",
    "critical_kappa",
]


def _check_positive(name, value):
    """Coerce ``value`` to a float64, insisting it be finite and positive."""
    if isinstance(value, (str, bytes, bool, np.bool_)):
        raise DomainError("{} must be a number (got {!r})".format(name, value))
    try:
        value = np.float64(value)
    except (TypeError, ValueError):
        raise DomainError("{} must be a number (got {!r})".format(name, value))
    if not (np.isfinite(value) and value > 0):
        raise DomainError("{} must be finite and positive (got {})".format(name, value))
    return value


def _check_constants(constants):
    if not (np.isfinite(constants.A) and constants.A > 0):
        raise DomainError(
            "Kelvin coefficient must be finite and positive (got A = {})".format(constants.A)
        )


def _check_finite(name, value):
    if not np.isfinite(value):
        raise DomainError("{} is undefined for these inputs".format(name))
    return float(value)


def _critical_term(kappa, D, constants):
    """:math:`(4A^3 / 27\\kappa D^3)`, with ``D`` in meters."""
    A = constants.A
    return (4.0 * A**3) / (27.0 * kappa * D**3)


# KOHLER CURVE


def saturation_ratio(D, D_dry, kappa, constants=c.DEFAULT_CONSTANTS):
    """κ-Kohler equilibrium saturation ratio over a droplet.

    .. math::
        S(D) = \\frac{D^3 - D_0^3}{D^3 - D_0^3(1 - \\kappa)}
               \\exp\\left(\\frac{A}{D}\\right)

    where :math:`A` is the Kelvin coefficient of ``constants``. Works
    element-wise on arrays. No domain checks are made; the expression is
    singular where :math:`D^3 = D_0^3(1 - \\kappa)`.

    Parameters
    ----------
    D : float or array
        wet droplet diameter, m
    D_dry : float
        dry particle diameter, m
    kappa : float
        particle hygroscopicity parameter
    constants : :class:`KohlerConstants`, optional

    Returns
    -------
    float or array
        :math:`S(D)`, the saturation ratio (not supersaturation)

    See Also
    --------
    equilibrium_supersaturation : same curve, in micrometers and percent

    """
    D = np.asarray(D, dtype=np.float64)
    B = (D**3 - D_dry**3) / (D**3 - (D_dry**3) * (1.0 - kappa))
    return B * np.exp(constants.A / D)


def equilibrium_supersaturation(D, D_dry, kappa, constants=c.DEFAULT_CONSTANTS):
    """Equilibrium supersaturation (percent) over a droplet of wet diameter ``D``
    grown on a dry particle of diameter ``D_dry``, both in micrometers.

    """
    S = saturation_ratio(
        np.asarray(D, dtype=np.float64) * c.UM_TO_M, D_dry * c.UM_TO_M, kappa, constants
    )
    return (S - 1.0) * c.PERCENT


# CRITICAL POINT (CLOSED FORM) SOLUTIONS


def critical_supersaturation(D_crit, kappa, constants=c.DEFAULT_CONSTANTS):
    """Critical supersaturation from a critical diameter and hygroscopicity.

    At the critical point of the κ-Kohler curve,

    .. math::
        \\ln S_\\text{crit} = \\sqrt{\\frac{4A^3}{27\\kappa D_0^3}}

    and the supersaturation :math:`(S_\\text{crit} - 1)\\times 100` is evaluated
    from this logarithm directly with ``expm1``. This deliberately replaces the
    ``ln(x + 1)`` form of earlier implementations, which only approximates
    :math:`(S_\\text{crit} - 1)` and so is not the exact inverse of
    :func:`critical_diameter` and :func:`critical_kappa`.

    Parameters
    ----------
    D_crit : float
        critical (dry) diameter, micrometers
    kappa : float
        particle hygroscopicity parameter
    constants : :class:`KohlerConstants`, optional

    Returns
    -------
    float
        critical supersaturation, percent

    Raises
    ------
    DomainError
        If ``D_crit`` or ``kappa`` is not positive, or the result overflows
        (as it does when ``kappa`` tends to 0).

    """
    D = _check_positive("critical diameter", D_crit) * c.UM_TO_M
    kappa = _check_positive("kappa", kappa)
    _check_constants(constants)

    with np.errstate(over="ignore", divide="ignore"):
        ln_S = np.sqrt(_critical_term(kappa, D, constants))
        s_crit = np.expm1(ln_S) * c.PERCENT

    return _check_finite("critical supersaturation", s_crit)


def critical_diameter(supersat, kappa, constants=c.DEFAULT_CONSTANTS):
    """Critical diameter from a supersaturation and hygroscopicity.

    .. math::
        D_0 = \\left(\\frac{4A^3}{27\\kappa \\ln^2(s/100 + 1)}\\right)^{1/3}

    Parameters
    ----------
    supersat : float
        supersaturation, percent
    kappa : float
        particle hygroscopicity parameter
    constants : :class:`KohlerConstants`, optional

    Returns
    -------
    float
        critical diameter, micrometers

    """
    supersat = _check_positive("supersaturation", supersat)
    kappa = _check_positive("kappa", kappa)
    _check_constants(constants)

    ln_S = np.log1p(supersat / c.PERCENT)
    A = constants.A
    with np.errstate(over="ignore", divide="ignore"):
        D = np.cbrt((4.0 * A**3) / (27.0 * kappa * ln_S**2))

    return _check_finite("critical diameter", D * c.M_TO_UM)


def critical_kappa(supersat, D_crit, constants=c.DEFAULT_CONSTANTS):
    """Hygroscopicity from a critical diameter and supersaturation.

    .. math::
        \\kappa = \\frac{4A^3}{27 D_0^3 \\ln^2(s/100 + 1)}

    Parameters
    ----------
    supersat : float
        supersaturation, percent
    D_crit : float
        critical (dry) diameter, micrometers
    constants : :class:`KohlerConstants`, optional

    Returns
    -------
    float
        κ, dimensionless

    """
    supersat = _check_positive("supersaturation", supersat)
    D = _check_positive("critical diameter", D_crit) * c.UM_TO_M
    _check_constants(constants)

    ln_S = np.log1p(supersat / c.PERCENT)
    A = constants.A
    with np.errstate(over="ignore", divide="ignore"):
        kappa = (4.0 * A**3) / (27.0 * D**3 * ln_S**2)

    return _check_finite("kappa", kappa)
