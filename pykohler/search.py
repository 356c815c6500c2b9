""" Numerical search for the peak of a κ-Kohler curve.

There is no closed form for the wet diameter at which the full κ-Kohler curve
(:func:`.thermo.saturation_ratio`) attains its maximum, so it is located with a
derivative-free simplex search (e.g. Kruger et al., 2014;
doi:10.5194/amt-7-2615-2014).

"""
import numpy as np
from scipy.optimize import minimize

from . import constants as c
from .thermo import _check_constants, _check_positive, saturation_ratio
from .util import SearchNonConvergenceError

__all__ = ["kohler_peak"]


def kohler_peak(
    D_crit,
    kappa,
    constants=c.DEFAULT_CONSTANTS,
    maxiter=c.SEARCH_MAXITER,
    xatol=c.SEARCH_XATOL,
    fatol=c.SEARCH_FATOL,
    full_output=False,
    console=False,
):
    """Maximum supersaturation along the κ-Kohler curve of a particle.

    Minimizes :math:`-S(D)` with a Nelder-Mead simplex seeded at the supplied
    diameter. The search works on the ratio :math:`x = D / D_0` so that its
    tolerances do not depend on particle size, and the ratio is clamped to
    :math:`x \\geq 1`: a droplet is never smaller than the particle it grew on,
    which also keeps the search clear of the singularity at
    :math:`D^3 = D_0^3(1 - \\kappa)`.

    Parameters
    ----------
    D_crit : float
        critical (dry) diameter used to seed the search, micrometers
    kappa : float
        particle hygroscopicity parameter
    constants : :class:`KohlerConstants`, optional
    maxiter : int, optional (default=:const:`constants.SEARCH_MAXITER`)
        maximum number of simplex iterations
    xatol : float, optional (default=:const:`constants.SEARCH_XATOL`)
        convergence tolerance on the simplex size, as a fraction of ``D_crit``
    fatol : float, optional (default=:const:`constants.SEARCH_FATOL`)
        convergence tolerance on the spread of the objective (saturation ratio)
    full_output : boolean, optional
        Also return the number of iterations used.
    console : boolean, optional
        Print a summary of the search to the terminal.

    Returns
    -------
    (D_wet, s_max) : tuple of floats
        Wet diameter at the peak (micrometers) and the peak supersaturation
        (percent). If ``full_output`` is set, the iteration count is appended.

    Raises
    ------
    DomainError
        If ``D_crit`` or ``kappa`` is not positive, or ``constants`` give a
        non-positive Kelvin coefficient.
    SearchNonConvergenceError
        If the search exhausts ``maxiter`` before meeting both tolerances, or
        ends on a non-finite or degenerate point.

    See Also
    --------
    thermo.critical_supersaturation : closed-form critical supersaturation

    """
    D_0 = _check_positive("critical diameter", D_crit) * c.UM_TO_M
    kappa = _check_positive("kappa", kappa)
    _check_constants(constants)

    def neg_S(x):
        D = x[0] * D_0
        return -1.0 * saturation_ratio(D, D_0, kappa, constants)

    out = minimize(
        neg_S,
        x0=[1.0],
        method="Nelder-Mead",
        bounds=[(1.0, None)],
        options=dict(maxiter=maxiter, xatol=xatol, fatol=fatol),
    )
    D_wet = out.x[0] * D_0 * c.M_TO_UM

    if console:
        print("KOHLER PEAK SEARCH")
        print("    D_crit = {:.4e} um, kappa = {:.3f}".format(D_crit, kappa))
        print(
            "    {} iterations, D_wet = {:.4e} um, S = {:.8f} ({})".format(
                out.nit, D_wet, -out.fun, out.message
            )
        )

    if not out.success:
        raise SearchNonConvergenceError(
            "peak search did not converge: {}".format(out.message),
            diameter=D_wet,
            iterations=out.nit,
        )
    if not np.isfinite(out.fun) or out.x[0] <= 1.0:
        raise SearchNonConvergenceError(
            "peak search ended on a degenerate point",
            diameter=D_wet,
            iterations=out.nit,
        )

    s_max = (-1.0 * out.fun - 1.0) * c.PERCENT

    if full_output:
        return D_wet, s_max, out.nit
    return D_wet, s_max
