"""
Kumaraswamy distributions for distrkit
"""

from math import expm1, isnan, log, log1p

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.distrkit_continuous import DistrkitContinuous
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig3 = [nb.float64(nb.float64, nb.float64, nb.float64)]


@nb.vectorize(_sig3, **nb_kwargs)
def nb_kumar_pdf(x: float, a: float, b: float) -> float:
    r"""
    Normalised Kumaraswamy probability density function, w/ args: a, b. Its range of support is :math:`x\in[0,1]`,
    with :math:`a>0, b>0`. It computes:


    .. math::
        pdf(x, a, b) = \begin{cases} abx^{a-1}(1-x^a)^{b-1} \quad , 0\leq x\leq 1 \\ 0 \quad , \text{otherwise} \end{cases}


    Parameters
    ----------
    x
        The input data
    a
        The first shape parameter
    b
        The second shape parameter
    """

    if isnan(x) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0:
        return np.nan
    if x < 0 or x > 1:
        return 0.0
    return a * b * x ** (a - 1) * (1 - x**a) ** (b - 1)


@nb.vectorize(_sig3, **nb_kwargs)
def nb_kumar_logpdf(x: float, a: float, b: float) -> float:
    if isnan(x) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0:
        return np.nan
    if x < 0 or x > 1:
        return -np.inf
    # a == 1 or b == 1 zero out a term that would be 0 * -inf at the edges
    lx = 0.0 if a == 1 else log(x) * (a - 1)
    l1x = 0.0 if b == 1 else log1p(-(x**a)) * (b - 1)
    return log(a) + log(b) + lx + l1x


@nb.vectorize(_sig3, **nb_kwargs)
def nb_kumar_cdf(x: float, a: float, b: float) -> float:
    r"""
    Normalised Kumaraswamy cumulative distribution, w/ args: a, b. It computes:


    .. math::
        cdf(x, a, b) = \begin{cases} 0 \quad , x < 0 \\ 1-(1-x^a)^b \quad , 0\leq x\leq 1 \\ 1 \quad , x > 1 \end{cases}

    """

    if isnan(x) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0:
        return np.nan
    if x <= 0:
        return 0.0
    if x >= 1:
        return 1.0
    return -expm1(b * log1p(-(x**a)))


@nb.vectorize(_sig3, **nb_kwargs)
def nb_kumar_ppf(p: float, a: float, b: float) -> float:
    r"""
    Kumaraswamy quantile function, :math:`(1-(1-p)^{1/b})^{1/a}`
    """

    if isnan(p) or isnan(a) or isnan(b):
        return np.nan
    if a <= 0 or b <= 0 or p < 0 or p > 1:
        return np.nan
    return (-expm1(log1p(-p) / b)) ** (1 / a)


def dkumar(x, a, b, log: bool = False) -> np.ma.MaskedArray:
    r"""
    Density of the Kumaraswamy distribution on :math:`[0, 1]`.

    Parameters
    ----------
    x
        The variates
    a, b
        The shape parameters, both :math:`> 0`
    log
        Return the log-density
    """
    return broadcast.density(nb_kumar_pdf, x, a, b, log=log, log_kernel=nb_kumar_logpdf)


def pkumar(q, a, b, lower_tail: bool = True, log_p: bool = False) -> np.ma.MaskedArray:
    return broadcast.cumulative(nb_kumar_cdf, q, a, b, lower_tail=lower_tail, log_p=log_p)


def qkumar(p, a, b, lower_tail: bool = True, log_p: bool = False) -> np.ma.MaskedArray:
    return broadcast.quantile(nb_kumar_ppf, p, a, b, lower_tail=lower_tail, log_p=log_p)


def rkumar(n: int, a, b, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    return broadcast.sample(nb_kumar_ppf, n, a, b, rng=rng)


class KumaraswamyGen(DistrkitContinuous):
    _pdf_kernel = nb_kumar_pdf
    _logpdf_kernel = nb_kumar_logpdf
    _cdf_kernel = nb_kumar_cdf
    _ppf_kernel = nb_kumar_ppf
    _required_args = ("a", "b")


kumaraswamy = KumaraswamyGen(a=0.0, b=1.0, name="kumaraswamy", shapes="a, b")
