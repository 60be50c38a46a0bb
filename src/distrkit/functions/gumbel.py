"""
Gumbel distributions for distrkit
"""

from math import exp, isinf, isnan, log

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.distrkit_continuous import DistrkitContinuous
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig3 = [nb.float64(nb.float64, nb.float64, nb.float64)]


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gumbel_pdf(x: float, mu: float, sigma: float) -> float:
    r"""
    Normalised Gumbel (maximum extreme value) probability density function, w/ args: mu, sigma.
    Its support is :math:`x\in\mathbb{R}`, with :math:`\sigma>0`. It computes:


    .. math::
        pdf(x, \mu, \sigma) = \frac{1}{\sigma}e^{-(z+e^{-z})}, \quad z = \frac{x-\mu}{\sigma}


    Parameters
    ----------
    x
        The input data
    mu
        The location of the mode
    sigma
        The scale of the distribution
    """

    if isnan(x) or isnan(mu) or isnan(sigma):
        return np.nan
    if sigma <= 0:
        return np.nan
    if isinf(x):
        return 0.0
    z = (x - mu) / sigma
    return exp(-(z + exp(-z))) / sigma


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gumbel_logpdf(x: float, mu: float, sigma: float) -> float:
    if isnan(x) or isnan(mu) or isnan(sigma):
        return np.nan
    if sigma <= 0:
        return np.nan
    if isinf(x):
        return -np.inf
    z = (x - mu) / sigma
    return -(z + exp(-z)) - log(sigma)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gumbel_cdf(x: float, mu: float, sigma: float) -> float:
    r"""
    Gumbel cumulative distribution, :math:`e^{-e^{-z}}`
    """

    if isnan(x) or isnan(mu) or isnan(sigma):
        return np.nan
    if sigma <= 0:
        return np.nan
    z = (x - mu) / sigma
    return exp(-exp(-z))


@nb.vectorize(_sig3, **nb_kwargs)
def nb_gumbel_ppf(p: float, mu: float, sigma: float) -> float:
    r"""
    Gumbel quantile function, :math:`\mu - \sigma\log(-\log p)`
    """

    if isnan(p) or isnan(mu) or isnan(sigma):
        return np.nan
    if sigma <= 0 or p < 0 or p > 1:
        return np.nan
    return mu - sigma * log(-log(p))


def dgumbel(x, mu=0.0, sigma=1.0, log: bool = False) -> np.ma.MaskedArray:
    """
    Density of the Gumbel distribution.

    Parameters
    ----------
    x
        The variates
    mu
        The location
    sigma
        The scale, must be positive
    log
        Return the log-density
    """
    return broadcast.density(
        nb_gumbel_pdf, x, mu, sigma, log=log, log_kernel=nb_gumbel_logpdf
    )


def pgumbel(
    q, mu=0.0, sigma=1.0, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.cumulative(
        nb_gumbel_cdf, q, mu, sigma, lower_tail=lower_tail, log_p=log_p
    )


def qgumbel(
    p, mu=0.0, sigma=1.0, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    return broadcast.quantile(
        nb_gumbel_ppf, p, mu, sigma, lower_tail=lower_tail, log_p=log_p
    )


def rgumbel(n: int, mu=0.0, sigma=1.0, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    return broadcast.sample(nb_gumbel_ppf, n, mu, sigma, rng=rng)


class GumbelGen(DistrkitContinuous):
    _pdf_kernel = nb_gumbel_pdf
    _logpdf_kernel = nb_gumbel_logpdf
    _cdf_kernel = nb_gumbel_cdf
    _ppf_kernel = nb_gumbel_ppf
    _required_args = ("mu", "sigma")

    def _argcheck(self, mu, sigma):
        return np.isfinite(mu) & (sigma > 0)


gumbel = GumbelGen(name="gumbel", shapes="mu, sigma")
