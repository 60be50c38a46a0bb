"""
Lomax distributions for distrkit
"""

from math import expm1, isnan, log, log1p

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.distrkit_continuous import DistrkitContinuous
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig3 = [nb.float64(nb.float64, nb.float64, nb.float64)]


@nb.vectorize(_sig3, **nb_kwargs)
def nb_lomax_pdf(x: float, lamb: float, kappa: float) -> float:
    r"""
    Normalised Lomax probability density function, w/ args: lamb, kappa. Its range of support is :math:`x\in(0,\infty)`,
    with :math:`\lambda>0, \kappa>0`. It computes:


    .. math::
        pdf(x, \lambda, \kappa) = \begin{cases} \frac{\lambda\kappa}{(1+\lambda x)^{\kappa+1}} \quad , x > 0 \\ 0 \quad , x\leq 0 \end{cases}


    As a Numba vectorized function, it is applied elementwise to arrays of equal length.
    Out-of-domain parameters return NaN.


    Parameters
    ----------
    x
        The input data
    lamb
        The scale (rate) of the distribution
    kappa
        The shape of the distribution
    """

    if isnan(x) or isnan(lamb) or isnan(kappa):
        return np.nan
    if lamb <= 0 or kappa <= 0:
        return np.nan
    if x <= 0:
        return 0.0
    return lamb * kappa / (1 + lamb * x) ** (kappa + 1)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_lomax_logpdf(x: float, lamb: float, kappa: float) -> float:
    r"""
    Log of the Lomax density, w/ args: lamb, kappa.

    .. math::
        \log pdf(x, \lambda, \kappa) = \log\lambda + \log\kappa - (\kappa+1)\log(1+\lambda x)

    Returns :math:`-\infty` outside the support.
    """

    if isnan(x) or isnan(lamb) or isnan(kappa):
        return np.nan
    if lamb <= 0 or kappa <= 0:
        return np.nan
    if x <= 0:
        return -np.inf
    return log(lamb) + log(kappa) - log1p(lamb * x) * (kappa + 1)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_lomax_cdf(x: float, lamb: float, kappa: float) -> float:
    r"""
    Normalised Lomax cumulative distribution, w/ args: lamb, kappa. Its range of support is :math:`x\in(0,\infty)`.
    It computes:


    .. math::
        cdf(x, \lambda, \kappa) = \begin{cases} 1-(1+\lambda x)^{-\kappa} \quad , x > 0 \\ 0 \quad , x\leq 0 \end{cases}


    Parameters
    ----------
    x
        The input data
    lamb
        The scale (rate) of the distribution
    kappa
        The shape of the distribution
    """

    if isnan(x) or isnan(lamb) or isnan(kappa):
        return np.nan
    if lamb <= 0 or kappa <= 0:
        return np.nan
    if x <= 0:
        return 0.0
    return -expm1(-kappa * log1p(lamb * x))


@nb.vectorize(_sig3, **nb_kwargs)
def nb_lomax_ppf(p: float, lamb: float, kappa: float) -> float:
    r"""
    Lomax quantile function, w/ args: lamb, kappa. It computes:


    .. math::
        ppf(p, \lambda, \kappa) = \frac{(1-p)^{-1/\kappa}-1}{\lambda}


    Parameters
    ----------
    p
        The probabilities, :math:`p\in[0,1]`
    lamb
        The scale (rate) of the distribution
    kappa
        The shape of the distribution
    """

    if isnan(p) or isnan(lamb) or isnan(kappa):
        return np.nan
    if lamb <= 0 or kappa <= 0 or p < 0 or p > 1:
        return np.nan
    return expm1(-log1p(-p) / kappa) / lamb


def dlomax(x, lamb, kappa, log: bool = False) -> np.ma.MaskedArray:
    r"""
    Density of the Lomax distribution.

    Parameters
    ----------
    x
        The variates
    lamb
        The scale (rate), :math:`\lambda > 0`
    kappa
        The shape, :math:`\kappa > 0`
    log
        Return the log-density

    Returns
    -------
    The densities, broadcast to the longest input. Missing inputs are masked,
    invalid parameters give NaN.
    """
    return broadcast.density(
        nb_lomax_pdf, x, lamb, kappa, log=log, log_kernel=nb_lomax_logpdf
    )


def plomax(
    q, lamb, kappa, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    """
    Cumulative distribution function of the Lomax distribution. See
    :func:`dlomax` for the parameters.
    """
    return broadcast.cumulative(
        nb_lomax_cdf, q, lamb, kappa, lower_tail=lower_tail, log_p=log_p
    )


def qlomax(
    p, lamb, kappa, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    """
    Quantile function of the Lomax distribution. See :func:`dlomax` for the
    parameters.
    """
    return broadcast.quantile(
        nb_lomax_ppf, p, lamb, kappa, lower_tail=lower_tail, log_p=log_p
    )


def rlomax(n: int, lamb, kappa, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    """
    Draw `n` Lomax variates by inverse-transform sampling.
    """
    return broadcast.sample(nb_lomax_ppf, n, lamb, kappa, rng=rng)


class LomaxGen(DistrkitContinuous):
    _pdf_kernel = nb_lomax_pdf
    _logpdf_kernel = nb_lomax_logpdf
    _cdf_kernel = nb_lomax_cdf
    _ppf_kernel = nb_lomax_ppf
    _required_args = ("lamb", "kappa")


lomax = LomaxGen(a=0.0, name="lomax", shapes="lamb, kappa")
