"""
Gompertz distributions for distrkit

References: Lenart, A. (2012). The Gompertz distribution and Maximum
Likelihood Estimation of its parameters - a revision. MPIDR Working Paper
WP 2012-008.
"""

from math import exp, expm1, isinf, isnan, log, log1p

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.distrkit_continuous import DistrkitContinuous
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig3 = [nb.float64(nb.float64, nb.float64, nb.float64)]


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gompertz_pdf(x: float, a: float, b: float) -> float:
    r"""
    Normalised Gompertz probability density function, w/ args: a, b. Its range of support is :math:`x\in[0,\infty)`,
    with :math:`a>0, b>0`. It computes:


    .. math::
        pdf(x, a, b) = a\exp\left(bx - \frac{a}{b}(e^{bx}-1)\right)


    Parameters
    ----------
    x
        The input data
    a
        The initial hazard rate
    b
        The growth rate of the hazard
    """

    if isnan(x) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0:
        return np.nan
    if x < 0 or isinf(x):
        return 0.0
    return a * exp(b * x - a / b * expm1(b * x))


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gompertz_logpdf(x: float, a: float, b: float) -> float:
    if isnan(x) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0:
        return np.nan
    if x < 0 or isinf(x):
        return -np.inf
    return log(a) + b * x - a / b * expm1(b * x)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gompertz_cdf(x: float, a: float, b: float) -> float:
    r"""
    Gompertz cumulative distribution, :math:`1-\exp\left(-\frac{a}{b}(e^{bx}-1)\right)`
    """

    if isnan(x) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0:
        return np.nan
    if x < 0:
        return 0.0
    if isinf(x):
        return 1.0
    return -expm1(-a / b * expm1(b * x))


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gompertz_ppf(p: float, a: float, b: float) -> float:
    r"""
    Gompertz quantile function, :math:`\frac{1}{b}\log\left(1-\frac{b}{a}\log(1-p)\right)`
    """

    if isnan(p) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0 or p < 0 or p > 1:
        return np.nan
    return log1p(-b / a * log1p(-p)) / b


def dgompertz(x, a=1.0, b=1.0, log: bool = False) -> np.ma.MaskedArray:
    """
    Density of the Gompertz distribution.

    Parameters
    ----------
    x
        The variates
    a, b
        The hazard parameters, both positive
    log
        Return the log-density
    """
    return broadcast.density(
        nb_gompertz_pdf, x, a, b, log=log, log_kernel=nb_gompertz_logpdf
    )


def pgompertz(
    q, a=1.0, b=1.0, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.cumulative(
        nb_gompertz_cdf, q, a, b, lower_tail=lower_tail, log_p=log_p
    )


def qgompertz(
    p, a=1.0, b=1.0, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.quantile(
        nb_gompertz_ppf, p, a, b, lower_tail=lower_tail, log_p=log_p
    )


def rgompertz(n: int, a=1.0, b=1.0, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    return broadcast.sample(nb_gompertz_ppf, n, a, b, rng=rng)


class GompertzGen(DistrkitContinuous):
    _pdf_kernel = nb_gompertz_pdf
    _logpdf_kernel = nb_gompertz_logpdf
    _cdf_kernel = nb_gompertz_cdf
    _ppf_kernel = nb_gompertz_ppf
    _required_args = ("a", "b")


gompertz = GompertzGen(a=0.0, name="gompertz", shapes="a, b")
