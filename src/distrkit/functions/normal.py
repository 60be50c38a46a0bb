r"""
Standard normal primitives used as black boxes by the truncated normal and
the mixture of normals.

:func:`nb_phi` and :func:`nb_Phi` are scalar Numba functions that can be
called from inside other kernels. The inverse cdf has no Numba counterpart,
so :func:`Phi_inv` and :func:`log_Phi_inv` are numpy-vectorized wrappers around
:mod:`scipy.special`.
"""

from math import erfc, exp, log, log1p, pi, sqrt
from typing import Union

import numba as nb
import numpy as np
from scipy import special

from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

SQRT_2PI = sqrt(2 * pi)
LOG_SQRT_2PI = 0.5 * log(2 * pi)


@nb.njit(**nb_kwargs)
def nb_phi(z: float) -> float:
    r"""
    Standard normal density :math:`\phi(z) = e^{-z^2/2}/\sqrt{2\pi}`
    """

    return exp(-0.5 * z * z) / SQRT_2PI


@nb.njit(**nb_kwargs)
def nb_Phi(z: float) -> float:
    r"""
    Standard normal cdf, computed from the complementary error function so
    that the lower tail keeps its relative precision:

    .. math::
        \Phi(z) = \frac{1}{2}\text{erfc}\left(-\frac{z}{\sqrt{2}}\right)
    """

    return 0.5 * erfc(-z / sqrt(2.0))


@nb.njit(**nb_kwargs)
def nb_log_Phi_sf(z: float) -> float:
    r"""
    Log of the standard normal upper tail, :math:`\log(1-\Phi(z)) = \log\Phi(-z)`.

    Past :math:`z = 30` the tail is taken from the asymptotic expansion

    .. math::
        \log\Phi(-z) \approx -\frac{z^2}{2} - \log z - \log\sqrt{2\pi}
        + \log\left(1 - z^{-2} + 3z^{-4} - 15z^{-6} + 105z^{-8}\right)

    which stays finite long after :math:`\Phi(-z)` underflows.
    """

    if z < 30:
        return log(0.5 * erfc(z / sqrt(2.0)))
    z2 = z * z
    return (
        -0.5 * z2
        - log(z)
        - LOG_SQRT_2PI
        + log1p(-1 / z2 + 3 / z2**2 - 15 / z2**3 + 105 / z2**4)
    )


@nb.njit(**nb_kwargs)
def nb_log_Phi_diff(lo: float, hi: float) -> float:
    r"""
    :math:`\log(\Phi(hi)-\Phi(lo))` for :math:`lo \leq hi`. Intervals entirely on
    one side of the mean are taken as a difference of tails in log space.
    """

    if lo > 0:
        l_lo = nb_log_Phi_sf(lo)
        return l_lo + log1p(-exp(nb_log_Phi_sf(hi) - l_lo))
    if hi < 0:
        l_hi = nb_log_Phi_sf(-hi)
        return l_hi + log1p(-exp(nb_log_Phi_sf(-lo) - l_hi))
    return log(nb_Phi(hi) - nb_Phi(lo))


@nb.njit(**nb_kwargs)
def nb_norm_pdf(x: float, mu: float, sigma: float) -> float:
    """
    Normal density at `x` with mean `mu` and standard deviation `sigma`
    """

    return nb_phi((x - mu) / sigma) / sigma


@nb.njit(**nb_kwargs)
def nb_norm_cdf(x: float, mu: float, sigma: float) -> float:
    """
    Normal cdf at `x` with mean `mu` and standard deviation `sigma`
    """

    return nb_Phi((x - mu) / sigma)


def Phi(z: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Vectorized standard normal cdf."""
    return special.ndtr(z)


def Phi_inv(p: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    r"""
    Vectorized standard normal quantile :math:`\Phi^{-1}(p)`
    """
    return special.ndtri(p)


def log_Phi(z: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    r"""
    Vectorized :math:`\log\Phi(z)`, accurate far into the lower tail.
    Evaluated at :math:`-z` it gives the log upper tail.
    """
    return special.log_ndtr(z)


def log_Phi_inv(y: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    r"""
    Inverse of :func:`log_Phi`, the `z` such that :math:`\log\Phi(z) = y`. Keeps
    its precision when :math:`e^y` is too small to be represented.
    """
    return special.ndtri_exp(y)
