"""
Truncated normal distributions for distrkit

The truncation interval :math:`(a, b)` is standardized to :math:`(z_a, z_b)`,
:math:`z = (x-\\mu)/\\sigma`. Whenever the interval lies entirely above the
mean, probabilities are computed from the upper tail :math:`\\Phi(-z)` in log space,
so that they keep their precision and stay finite far from the mean. Intervals
entirely below the mean are handled by symmetry.
"""

from math import exp, isnan, log

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.distrkit_continuous import DistrkitContinuous
from distrkit.functions.normal import (
    LOG_SQRT_2PI,
    SQRT_2PI,
    Phi,
    Phi_inv,
    log_Phi,
    log_Phi_inv,
    nb_log_Phi_diff,
)
from distrkit.random import get_rng
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs

_sig5 = [nb.float64(nb.float64, nb.float64, nb.float64, nb.float64, nb.float64)]

# wide intervals holding less normal mass than this are sampled by inversion,
# normal proposals would almost never land inside them
TAIL_MASS = 0.01


@nb.njit(**nb_kwargs)
def nb_tnorm_log_mass(mu: float, sigma: float, a: float, b: float) -> float:
    r"""
    Log of the parent normal probability of :math:`(a, b)`, :math:`\log(\Phi(z_b)-\Phi(z_a))`
    """

    return nb_log_Phi_diff((a - mu) / sigma, (b - mu) / sigma)


@nb.njit(**nb_kwargs)
def nb_tnorm_invalid(sigma: float, a: float, b: float) -> bool:
    return sigma <= 0 or a >= b


@nb.vectorize(_sig5, **nb_kwargs)
def nb_tnorm_pdf(x: float, mu: float, sigma: float, a: float, b: float) -> float:
    r"""
    Normalised truncated normal probability density function, w/ args: mu, sigma, a, b.
    Its range of support is :math:`x\in(a,b)`, with :math:`\sigma>0, a<b`. It computes:


    .. math::
        pdf(x, \mu, \sigma, a, b) = \frac{\phi(z)}{\sigma(\Phi(z_b)-\Phi(z_a))}


    where :math:`\phi` and :math:`\Phi` are the standard normal pdf and cdf.


    Parameters
    ----------
    x
        The input data
    mu
        The mean of the parent normal
    sigma
        The standard deviation of the parent normal
    a
        The lower truncation point
    b
        The upper truncation point
    """

    if isnan(x) or isnan(mu) or isnan(sigma) or isnan(a) or isnan(b):
        return np.nan
    if nb_tnorm_invalid(sigma, a, b):
        return np.nan
    if x <= a or x >= b:
        return 0.0
    z = (x - mu) / sigma
    return exp(-0.5 * z * z - LOG_SQRT_2PI - nb_tnorm_log_mass(mu, sigma, a, b)) / sigma


@nb.vectorize(_sig5, **nb_kwargs)
def nb_tnorm_logpdf(x: float, mu: float, sigma: float, a: float, b: float) -> float:
    if isnan(x) or isnan(mu) or isnan(sigma) or isnan(a) or isnan(b):
        return np.nan
    if nb_tnorm_invalid(sigma, a, b):
        return np.nan
    if x <= a or x >= b:
        return -np.inf
    z = (x - mu) / sigma
    return -0.5 * z * z - LOG_SQRT_2PI - log(sigma) - nb_tnorm_log_mass(mu, sigma, a, b)


@nb.vectorize(_sig5, **nb_kwargs)
def nb_tnorm_cdf(x: float, mu: float, sigma: float, a: float, b: float) -> float:
    r"""
    Truncated normal cumulative distribution, :math:`\frac{\Phi(z)-\Phi(z_a)}{\Phi(z_b)-\Phi(z_a)}` on :math:`(a, b)`,
    0 below and 1 above.
    """

    if isnan(x) or isnan(mu) or isnan(sigma) or isnan(a) or isnan(b):
        return np.nan
    if nb_tnorm_invalid(sigma, a, b):
        return np.nan
    if x <= a:
        return 0.0
    if x >= b:
        return 1.0
    za = (a - mu) / sigma
    return exp(
        nb_log_Phi_diff(za, (x - mu) / sigma) - nb_tnorm_log_mass(mu, sigma, a, b)
    )


def tnorm_std_ppf(p: np.ndarray, za: np.ndarray, zb: np.ndarray) -> np.ndarray:
    r"""
    Quantile of the standard normal truncated to :math:`(z_a, z_b)`:

    .. math::
        \Phi^{-1}\left(\Phi(z_a) + p(\Phi(z_b)-\Phi(z_a))\right)

    Intervals above the mean are inverted through the log upper tail,
    :math:`\log\Phi(-z) = \log\Phi(-z_a) + \log(1 - p(1 - \Phi(-z_b)/\Phi(-z_a)))`,
    and intervals below the mean through :math:`\log\Phi(z)` the same way. The
    result is clipped to the interval against rounding.
    """
    with np.errstate(all="ignore"):
        middle = Phi_inv(Phi(za) + p * (Phi(zb) - Phi(za)))

        la, lb = log_Phi(-za), log_Phi(-zb)
        upper = -log_Phi_inv(la + np.log1p(p * np.expm1(lb - la)))

        la, lb = log_Phi(za), log_Phi(zb)
        lower = log_Phi_inv(lb + np.log(np.exp(la - lb) - p * np.expm1(la - lb)))

        z = np.where(za > 0, upper, np.where(zb < 0, lower, middle))
        return np.minimum(np.maximum(z, za), zb)


def tnorm_ppf(
    p: np.ndarray, mu: np.ndarray, sigma: np.ndarray, a: np.ndarray, b: np.ndarray
) -> np.ndarray:
    """
    Truncated normal quantile function, elementwise over equal-length arrays.
    Out-of-domain parameters and probabilities give NaN.
    """
    with np.errstate(all="ignore"):
        invalid = (sigma <= 0) | (a >= b) | (p < 0) | (p > 1)
        x = mu + sigma * tnorm_std_ppf(p, (a - mu) / sigma, (b - mu) / sigma)
        # the clip above does not survive the rescaling exactly
        x = np.minimum(np.maximum(x, a), b)
        x = np.where(p == 0, a, np.where(p == 1, b, x))
    return np.where(invalid, np.nan, x)


def tnorm_std_rng(za: np.ndarray, zb: np.ndarray, rng: np.random.Generator) -> np.ndarray:
    r"""
    Standard normal variates truncated to :math:`(z_a, z_b)`, by rejection.

    Narrow intervals (:math:`z_b - z_a < \sqrt{2\pi}`) use a uniform envelope on the interval,
    accepting a candidate :math:`r` when :math:`u \leq e^{(z_a^2-r^2)/2}` if :math:`0 < z_a`,
    :math:`u \leq e^{(z_b^2-r^2)/2}` if :math:`z_b < 0` and :math:`u \leq e^{-r^2/2}` otherwise.
    Wider intervals draw untruncated normal candidates until they fall inside, except when the
    interval holds less than ``TAIL_MASS`` of the normal, where they are sampled by inversion.

    All pending positions are drawn at once and only the rejected ones are drawn again. Positions
    with a NaN bound are left NaN.
    """
    z = np.full(za.shape, np.nan)
    pending = za < zb
    with np.errstate(all="ignore"):
        narrow = zb - za < SQRT_2PI
        mass = np.where(za > 0, Phi(-za) - Phi(-zb), Phi(zb) - Phi(za))

    tail = np.flatnonzero(pending & ~narrow & (mass < TAIL_MASS))
    if tail.size:
        z[tail] = tnorm_std_ppf(rng.random(tail.size), za[tail], zb[tail])
        pending[tail] = False

    while pending.any():
        idx = np.flatnonzero(pending & narrow)
        if idx.size:
            lo, hi = za[idx], zb[idx]
            r = lo + (hi - lo) * rng.random(idx.size)
            u = rng.random(idx.size)
            bound = np.where(
                lo > 0,
                np.exp((lo**2 - r**2) / 2),
                np.where(hi < 0, np.exp((hi**2 - r**2) / 2), np.exp(-(r**2) / 2)),
            )
            accept = u <= bound
            z[idx[accept]] = r[accept]
            pending[idx[accept]] = False

        idx = np.flatnonzero(pending & ~narrow)
        if idx.size:
            r = rng.standard_normal(idx.size)
            accept = (r > za[idx]) & (r < zb[idx])
            z[idx[accept]] = r[accept]
            pending[idx[accept]] = False

    return z


def dtnorm(
    x, mu=0.0, sigma=1.0, a=-np.inf, b=np.inf, log: bool = False
) -> np.ma.MaskedArray:
    r"""
    Density of the normal distribution truncated to :math:`(a, b)`.

    Parameters
    ----------
    x
        The variates
    mu
        The mean of the parent normal
    sigma
        The standard deviation of the parent normal, :math:`\sigma > 0`
    a, b
        The truncation points, :math:`a < b`. Either may be infinite.
    log
        Return the log-density
    """
    return broadcast.density(
        nb_tnorm_pdf, x, mu, sigma, a, b, log=log, log_kernel=nb_tnorm_logpdf
    )


def ptnorm(
    q,
    mu=0.0,
    sigma=1.0,
    a=-np.inf,
    b=np.inf,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.ma.MaskedArray:
    return broadcast.cumulative(
        nb_tnorm_cdf, q, mu, sigma, a, b, lower_tail=lower_tail, log_p=log_p
    )


def qtnorm(
    p,
    mu=0.0,
    sigma=1.0,
    a=-np.inf,
    b=np.inf,
    lower_tail: bool = True,
    log_p: bool = False,
) -> np.ma.MaskedArray:
    return broadcast.quantile(
        tnorm_ppf, p, mu, sigma, a, b, lower_tail=lower_tail, log_p=log_p
    )


def rtnorm(
    n: int, mu=0.0, sigma=1.0, a=-np.inf, b=np.inf, rng: np.random.Generator = None
) -> np.ma.MaskedArray:
    """
    Draw `n` truncated normal variates by rejection sampling, see
    :func:`tnorm_std_rng`.
    """
    n = broadcast.sample_size(n)
    columns = broadcast.recycle_to(n, mu, sigma, a, b)
    missing = broadcast.missing_positions(*columns)
    mu, sigma, a, b = (col.filled(np.nan) for col in columns)

    with np.errstate(all="ignore"):
        valid = ~missing & (sigma > 0) & (a < b)
        za = np.where(valid, (a - mu) / sigma, np.nan)
        zb = np.where(valid, (b - mu) / sigma, np.nan)
    values = mu + sigma * tnorm_std_rng(za, zb, get_rng(rng))

    broadcast.flag_invalid(values, missing)
    return broadcast.wrap(values, missing)


class TruncNormGen(DistrkitContinuous):
    _pdf_kernel = nb_tnorm_pdf
    _logpdf_kernel = nb_tnorm_logpdf
    _cdf_kernel = nb_tnorm_cdf
    _ppf_kernel = tnorm_ppf
    _required_args = ("mu", "sigma", "a", "b")

    def _argcheck(self, mu, sigma, a, b):
        return np.isfinite(mu) & (sigma > 0) & (a < b)

    def _get_support(self, mu, sigma, a, b):
        return a, b


truncnorm = TruncNormGen(name="truncnorm", shapes="mu, sigma, a, b")
