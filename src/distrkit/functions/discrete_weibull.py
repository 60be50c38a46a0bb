"""
Discrete Weibull distributions for distrkit

Nakagawa and Osaki (1975), "The Discrete Weibull Distribution", IEEE
Transactions on Reliability, R-24, pp. 300-301.
"""

from math import isnan, log

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig3 = [nb.float64(nb.float64, nb.float64, nb.float64)]


@nb.njit(**nb_kwargs)
def nb_is_integer(x: float) -> bool:
    """True if `x` has no fractional part (infinities included)."""
    return np.floor(x) == x


@nb.vectorize(_sig3, **nb_kwargs)
def nb_dweibull_pmf(x: float, q: float, beta: float) -> float:
    r"""
    Discrete Weibull probability mass function, w/ args: q, beta. Its range of support is
    :math:`x\in\{0, 1, 2, \dots\}`, with :math:`0<q<1, \beta>0`. It computes:


    .. math::
        pmf(x, q, \beta) = q^{x^\beta} - q^{(x+1)^\beta}


    Negative or fractional `x` have probability 0.


    Parameters
    ----------
    x
        The input data
    q
        The probability of surviving past 0, :math:`P(X > 0)`
    beta
        The shape of the distribution
    """

    if isnan(x) or isnan(q) or isnan(beta):
        return np.nan
    if q <= 0 or q >= 1 or beta <= 0:
        return np.nan
    if x < 0 or not nb_is_integer(x):
        return 0.0
    return q ** (x**beta) - q ** ((x + 1) ** beta)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_dweibull_cdf(x: float, q: float, beta: float) -> float:
    r"""
    Discrete Weibull cumulative distribution, :math:`1-q^{(\lfloor x\rfloor+1)^\beta}` for :math:`x\geq 0`
    """

    if isnan(x) or isnan(q) or isnan(beta):
        return np.nan
    if q <= 0 or q >= 1 or beta <= 0:
        return np.nan
    if x < 0:
        return 0.0
    return 1 - q ** ((np.floor(x) + 1) ** beta)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_dweibull_ppf(p: float, q: float, beta: float) -> float:
    r"""
    Discrete Weibull quantile function, :math:`\left\lceil\left(\frac{\log(1-p)}{\log q}\right)^{1/\beta} - 1\right\rceil`
    """

    if isnan(p) or isnan(q) or isnan(beta):
        return np.nan
    if q <= 0 or q >= 1 or beta <= 0 or p < 0 or p > 1:
        return np.nan
    if p == 0:
        return 0.0
    if p == 1:
        return np.inf
    return np.ceil((log(1 - p) / log(q)) ** (1 / beta) - 1)


def ddweibull(x, q, beta, log: bool = False) -> np.ma.MaskedArray:
    r"""
    Probability mass of the discrete Weibull distribution.

    Parameters
    ----------
    x
        The variates
    q
        :math:`0 < q < 1`
    beta
        The shape, :math:`\beta > 0`
    log
        Return the log-probability
    """
    return broadcast.density(nb_dweibull_pmf, x, q, beta, log=log)


def pdweibull(
    x, q, beta, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.cumulative(
        nb_dweibull_cdf, x, q, beta, lower_tail=lower_tail, log_p=log_p
    )


def qdweibull(
    p, q, beta, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.quantile(
        nb_dweibull_ppf, p, q, beta, lower_tail=lower_tail, log_p=log_p
    )


def rdweibull(n: int, q, beta, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    return broadcast.sample(nb_dweibull_ppf, n, q, beta, rng=rng)
