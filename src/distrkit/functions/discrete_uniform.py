"""
Discrete uniform distributions for distrkit
"""

from math import isinf, isnan

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.discrete_weibull import nb_is_integer
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig3 = [nb.float64(nb.float64, nb.float64, nb.float64)]


@nb.njit(**nb_kwargs)
def nb_dunif_invalid(lo: float, hi: float) -> bool:
    """Bounds must be finite integers with `lo` <= `hi`."""
    return (
        lo > hi
        or isinf(lo)
        or isinf(hi)
        or not nb_is_integer(lo)
        or not nb_is_integer(hi)
    )


@nb.vectorize(_sig3, **nb_kwargs)
def nb_dunif_pmf(x: float, lo: float, hi: float) -> float:
    r"""
    Discrete uniform probability mass function on the integers :math:`\{lo, \dots, hi\}`. It computes:


    .. math::
        pmf(x, lo, hi) = \frac{1}{hi-lo+1}


    Values outside the bounds, and fractional values, have probability 0.
    """

    if isnan(x) or isnan(lo) or isnan(hi):
        return np.nan
    if nb_dunif_invalid(lo, hi):
        return np.nan
    if x < lo or x > hi or not nb_is_integer(x):
        return 0.0
    return 1 / (hi - lo + 1)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_dunif_cdf(x: float, lo: float, hi: float) -> float:
    r"""
    Discrete uniform cumulative distribution, :math:`\frac{\lfloor x\rfloor-lo+1}{hi-lo+1}` on :math:`[lo, hi)`
    """

    if isnan(x) or isnan(lo) or isnan(hi):
        return np.nan
    if nb_dunif_invalid(lo, hi):
        return np.nan
    if x < lo:
        return 0.0
    if x >= hi:
        return 1.0
    return (np.floor(x) - lo + 1) / (hi - lo + 1)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_dunif_ppf(p: float, lo: float, hi: float) -> float:
    r"""
    Discrete uniform quantile function, :math:`\lceil p(hi-lo+1)+lo-1\rceil`
    """

    if isnan(p) or isnan(lo) or isnan(hi):
        return np.nan
    if nb_dunif_invalid(lo, hi) or p < 0 or p > 1:
        return np.nan
    if p == 0 or lo == hi:
        return lo
    return np.ceil(p * (hi - lo + 1) + lo - 1)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_dunif_rng(u: float, lo: float, hi: float) -> float:
    r"""
    Map a uniform draw :math:`u\in[0,1)` to :math:`\lceil U(lo-1, hi)\rceil`. The draw :math:`u=0`
    maps to `lo` rather than to :math:`lo-1`.
    """

    if isnan(u) or isnan(lo) or isnan(hi):
        return np.nan
    if nb_dunif_invalid(lo, hi):
        return np.nan
    if lo == hi:
        return lo
    return max(lo, np.ceil(lo - 1 + u * (hi - lo + 1)))


def ddunif(x, min, max, log: bool = False) -> np.ma.MaskedArray:
    """
    Probability mass of the discrete uniform distribution on the integers
    ``min, ..., max``.

    Parameters
    ----------
    x
        The variates
    min, max
        The integer bounds, ``min <= max``
    log
        Return the log-probability
    """
    return broadcast.density(nb_dunif_pmf, x, min, max, log=log)


def pdunif(
    q, min, max, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.cumulative(
        nb_dunif_cdf, q, min, max, lower_tail=lower_tail, log_p=log_p
    )


def qdunif(
    p, min, max, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.quantile(
        nb_dunif_ppf, p, min, max, lower_tail=lower_tail, log_p=log_p
    )


def rdunif(n: int, min, max, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    """
    Draw `n` discrete uniform variates as ``ceil(U(min - 1, max))``.
    """
    return broadcast.sample(nb_dunif_rng, n, min, max, rng=rng)
