r"""
Mixtures of normal distributions for distrkit

A mixture of :math:`K` normal components is described by three matrices with
:math:`K` columns each: the component means `mu`, standard deviations `sigma`
and mixing weights `alpha`. Each row holds one full set of parameters and
rows are recycled along the output like any other parameter. Weights are
normalized within their row, so they need not sum to one:

.. math::
    pdf(x) = \sum_{j=1}^K \frac{\alpha_j}{\sum_l \alpha_l}\phi(x; \mu_j, \sigma_j)

A row with any negative weight or non-positive standard deviation is invalid.
A row whose weights are all 0 cannot be normalized and is invalid as well.
"""

from __future__ import annotations

import numba as nb
import numpy as np

from distrkit.functions import broadcast
from distrkit.functions.normal import nb_norm_cdf, nb_norm_pdf
from distrkit.random import get_rng
from distrkit.utils import numba_math_defaults_kwargs as nb_kwargs


@nb.njit(**nb_kwargs(error_model="numpy"))
def nb_mixnorm_weights(sigma: np.ndarray, alpha: np.ndarray) -> np.ndarray:
    r"""
    Row-normalized mixing weights, one row per position. Rows with a negative
    weight or a non-positive standard deviation are set to NaN.
    """

    n, k = alpha.shape
    weights = np.empty((n, k))
    for i in range(n):
        total = 0.0
        invalid = False
        for j in range(k):
            if alpha[i, j] < 0 or sigma[i, j] <= 0:
                invalid = True
            total += alpha[i, j]
        for j in range(k):
            weights[i, j] = np.nan if invalid else alpha[i, j] / total
    return weights


@nb.njit(**nb_kwargs(error_model="numpy"))
def nb_mixnorm_pdf(
    x: np.ndarray, mu: np.ndarray, sigma: np.ndarray, alpha: np.ndarray
) -> np.ndarray:
    r"""
    Mixture-of-normals density at `x`, one row of `mu`, `sigma` and `alpha`
    per element of `x`.

    Parameters
    ----------
    x
        The input data, length :math:`n`
    mu, sigma, alpha
        :math:`n \times K` component parameters
    """

    weights = nb_mixnorm_weights(sigma, alpha)
    n, k = weights.shape
    if k == 0:
        return np.full(n, np.nan)
    y = np.zeros(n)
    for i in range(n):
        if np.isnan(weights[i, 0]):
            y[i] = np.nan
            continue
        for j in range(k):
            y[i] += weights[i, j] * nb_norm_pdf(x[i], mu[i, j], sigma[i, j])
    return y


@nb.njit(**nb_kwargs(error_model="numpy"))
def nb_mixnorm_cdf(
    x: np.ndarray, mu: np.ndarray, sigma: np.ndarray, alpha: np.ndarray
) -> np.ndarray:
    r"""
    Mixture-of-normals cumulative distribution,
    :math:`\sum_j \frac{\alpha_j}{\sum_l \alpha_l}\Phi(x; \mu_j, \sigma_j)`
    """

    weights = nb_mixnorm_weights(sigma, alpha)
    n, k = weights.shape
    if k == 0:
        return np.full(n, np.nan)
    y = np.zeros(n)
    for i in range(n):
        if np.isnan(weights[i, 0]):
            y[i] = np.nan
            continue
        for j in range(k):
            y[i] += weights[i, j] * nb_norm_cdf(x[i], mu[i, j], sigma[i, j])
    return y


@nb.njit(**nb_kwargs(error_model="numpy"))
def nb_mixnorm_rng(
    u: np.ndarray, z: np.ndarray, mu: np.ndarray, sigma: np.ndarray, alpha: np.ndarray
) -> np.ndarray:
    r"""
    Turn uniform draws `u` and standard normal draws `z` into mixture variates.

    Components are walked from last to first, subtracting each normalized
    weight from a running total that starts at 1. The first component at
    which `u` exceeds the running total is selected (the first component if
    none is), and the variate is :math:`\mu_j + \sigma_j z`.
    """

    weights = nb_mixnorm_weights(sigma, alpha)
    n, k = weights.shape
    if k == 0:
        return np.full(n, np.nan)
    y = np.empty(n)
    for i in range(n):
        if np.isnan(weights[i, 0]):
            y[i] = np.nan
            continue
        comp = 0
        p_tmp = 1.0
        for j in range(k - 1, -1, -1):
            p_tmp -= weights[i, j]
            if u[i] > p_tmp:
                comp = j
                break
        y[i] = mu[i, comp] + sigma[i, comp] * z[i]
    return y


def _mixture_columns(n: int, mu, sigma, alpha) -> tuple[list, np.ndarray]:
    """Recycle the component matrices to `n` rows and flag the missing rows."""
    columns = [broadcast.recycle(m, n) for m in (mu, sigma, alpha)]
    return columns, broadcast.missing_positions(*columns)


def _as_matrices(mu, sigma, alpha) -> tuple:
    mu, sigma, alpha = (broadcast.as_param_matrix(m) for m in (mu, sigma, alpha))
    broadcast.check_components(mu=mu, sigma=sigma, alpha=alpha)
    return mu, sigma, alpha


def _evaluate(kernel, x, mu, sigma, alpha) -> tuple[np.ndarray, np.ndarray]:
    mu, sigma, alpha = _as_matrices(mu, sigma, alpha)
    x = broadcast.as_param(x)
    n = broadcast.recycled_length(x, mu, sigma, alpha)

    x = broadcast.recycle(x, n)
    columns, missing = _mixture_columns(n, mu, sigma, alpha)
    missing |= np.ma.getmaskarray(x)

    with np.errstate(all="ignore"):
        values = kernel(x.filled(np.nan), *(col.filled(np.nan) for col in columns))
    values = np.array(values, dtype=np.float64, ndmin=1)
    broadcast.flag_invalid(values, missing)
    return values, missing


def dmixnorm(x, mu, sigma, alpha, log: bool = False) -> np.ma.MaskedArray:
    r"""
    Density of a mixture of normal distributions.

    Parameters
    ----------
    x
        The variates
    mu, sigma, alpha
        The component means, standard deviations and mixing weights. Matrices
        with one column per component; a flat sequence is a single row.
    log
        Return the log-density

    Raises
    ------
    ParameterShapeError
        if `mu`, `sigma` and `alpha` do not have the same number of columns
    """
    values, missing = _evaluate(nb_mixnorm_pdf, x, mu, sigma, alpha)
    if log:
        with np.errstate(divide="ignore", invalid="ignore"):
            values = np.log(values)
    return broadcast.wrap(values, missing)


def pmixnorm(
    q, mu, sigma, alpha, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    values, missing = _evaluate(nb_mixnorm_cdf, q, mu, sigma, alpha)
    if not lower_tail:
        values = 1.0 - values
    if log_p:
        with np.errstate(divide="ignore", invalid="ignore"):
            values = np.log(values)
    return broadcast.wrap(values, missing)


def rmixnorm(n: int, mu, sigma, alpha, rng: np.random.Generator = None) -> np.ma.MaskedArray:
    """
    Draw `n` variates from a mixture of normal distributions: pick a
    component with probability equal to its normalized weight, then draw
    from that component.

    Raises
    ------
    ParameterShapeError
        if `mu`, `sigma` and `alpha` do not have the same number of columns
    """
    n = broadcast.sample_size(n)
    mu, sigma, alpha = _as_matrices(mu, sigma, alpha)
    if min(len(mu), len(sigma), len(alpha)) == 0:
        return broadcast.wrap(np.full(n, np.nan), np.ones(n, dtype=bool))
    columns, missing = _mixture_columns(n, mu, sigma, alpha)

    rng = get_rng(rng)
    u = rng.random(n)
    z = rng.standard_normal(n)
    with np.errstate(all="ignore"):
        values = nb_mixnorm_rng(u, z, *(col.filled(np.nan) for col in columns))
    broadcast.flag_invalid(values, missing)
    return broadcast.wrap(values, missing)
