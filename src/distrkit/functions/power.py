"""
Power distributions for distrkit
"""

from math import isnan, log

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.distrkit_continuous import DistrkitContinuous
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig3 = [nb.float64(nb.float64, nb.float64, nb.float64)]


@nb.vectorize(_sig3, **nb_kwargs)
def nb_power_pdf(x: float, alpha: float, beta: float) -> float:
    r"""
    Normalised power probability density function, w/ args: alpha, beta. Its range of support is
    :math:`x\in(0,\alpha)`, with :math:`\alpha>0, \beta>0`. It computes:


    .. math::
        pdf(x, \alpha, \beta) = \begin{cases} \frac{\beta x^{\beta-1}}{\alpha^\beta} \quad , 0 < x < \alpha \\ 0 \quad , \text{otherwise} \end{cases}


    Parameters
    ----------
    x
        The input data
    alpha
        The upper edge of the support
    beta
        The shape of the distribution
    """

    if isnan(x) or isnan(alpha) or isnan(beta):
        return np.nan
    if alpha <= 0 or beta <= 0:
        return np.nan
    if x <= 0 or x >= alpha:
        return 0.0
    return beta * x ** (beta - 1) / alpha**beta


@nb.vectorize(_sig3, **nb_kwargs)
def nb_power_logpdf(x: float, alpha: float, beta: float) -> float:
    r"""
    Log of the power density, :math:`\log\beta + (\beta-1)\log x - \beta\log\alpha`
    """

    if isnan(x) or isnan(alpha) or isnan(beta):
        return np.nan
    if alpha <= 0 or beta <= 0:
        return np.nan
    if x <= 0 or x >= alpha:
        return -np.inf
    return log(beta) + log(x) * (beta - 1) - log(alpha) * beta


@nb.vectorize(_sig3, **nb_kwargs)
def nb_power_cdf(x: float, alpha: float, beta: float) -> float:
    r"""
    Normalised power cumulative distribution, w/ args: alpha, beta. It computes:


    .. math::
        cdf(x, \alpha, \beta) = \begin{cases} 0 \quad , x\leq 0 \\ \left(\frac{x}{\alpha}\right)^\beta \quad , 0 < x < \alpha \\ 1 \quad , x\geq\alpha \end{cases}

    """

    if isnan(x) or isnan(alpha) or isnan(beta):
        return np.nan
    if alpha <= 0 or beta <= 0:
        return np.nan
    if x <= 0:
        return 0.0
    if x >= alpha:
        return 1.0
    return (x / alpha) ** beta


@nb.vectorize(_sig3, **nb_kwargs)
def nb_power_ppf(p: float, alpha: float, beta: float) -> float:
    r"""
    Power quantile function, :math:`\alpha p^{1/\beta}`
    """

    if isnan(p) or isnan(alpha) or isnan(beta):
        return np.nan
    if alpha <= 0 or beta <= 0 or p < 0 or p > 1:
        return np.nan
    return alpha * p ** (1 / beta)


def dpower(x, alpha, beta, log: bool = False) -> np.ma.MaskedArray:
    r"""
    Density of the power distribution on :math:`(0, \alpha)`.

    Parameters
    ----------
    x
        The variates
    alpha
        The upper edge of the support, :math:`\alpha > 0`
    beta
        The shape, :math:`\beta > 0`
    log
        Return the log-density
    """
    return broadcast.density(
        nb_power_pdf, x, alpha, beta, log=log, log_kernel=nb_power_logpdf
    )


def ppower(
    q, alpha, beta, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.cumulative(
        nb_power_cdf, q, alpha, beta, lower_tail=lower_tail, log_p=log_p
    )


def qpower(
    p, alpha, beta, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.quantile(
        nb_power_ppf, p, alpha, beta, lower_tail=lower_tail, log_p=log_p
    )


def rpower(n: int, alpha, beta, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    return broadcast.sample(nb_power_ppf, n, alpha, beta, rng=rng)


class PowerGen(DistrkitContinuous):
    _pdf_kernel = nb_power_pdf
    _logpdf_kernel = nb_power_logpdf
    _cdf_kernel = nb_power_cdf
    _ppf_kernel = nb_power_ppf
    _required_args = ("alpha", "beta")

    def _get_support(self, alpha, beta):
        return np.zeros_like(alpha), alpha


power = PowerGen(a=0.0, name="power", shapes="alpha, beta")
