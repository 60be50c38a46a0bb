r"""
Elementwise broadcasting and parameter validation shared by every
distribution in :mod:`distrkit.functions`.

Every ``d*``, ``p*``, ``q*`` and ``r*`` function accepts its variate and its
parameters as sequences of possibly different lengths. The output has the
length of the longest input, and output element ``i`` reads element
``i % len(seq)`` of *every* input independently (:func:`element_at`). No
length compatibility check is made: shorter inputs are recycled cyclically
whether or not they divide the output length.

Each output element then goes through the same three-way dispatch:

1. the variate or any parameter is missing: the element is masked;
2. a parameter lies outside its domain: the element is ``NaN``;
3. otherwise: the value computed by the distribution's kernel.

Kernels are elementwise functions over equal-length ``float64`` arrays (in
practice :func:`numba.vectorize` ufuncs) that return ``NaN`` for domain
violations. Missing inputs reach the kernel as ``NaN`` and their outputs are
discarded. Unmasked ``NaN`` outputs are reported with a single ``"NaNs
produced"`` warning per call, through the module logger.

.. code-block:: python

    from distrkit.functions import broadcast

    values = broadcast.density(nb_lomax_pdf, [1, 2, 3], [1.0], [2.0])
"""

from __future__ import annotations

import logging
import operator
from typing import Callable

import numpy as np

from distrkit.errors import ParameterShapeError
from distrkit.random import get_rng

logger = logging.getLogger(__name__)

Kernel = Callable[..., np.ndarray]


def _to_masked(values, ndmin: int) -> np.ma.MaskedArray:
    if isinstance(values, np.ma.MaskedArray):
        data = np.ma.getdata(values)
        mask = np.ma.getmaskarray(values)
    else:
        data = np.asarray(values)
        mask = np.zeros(data.shape, dtype=bool)

    if data.dtype == object:
        # None is the missing marker for plain python sequences
        is_none = np.array([v is None for v in data.flat], dtype=bool)
        is_none = is_none.reshape(data.shape)
        data = np.where(is_none, np.nan, data)
        mask = mask | is_none

    data = np.array(data, dtype=np.float64, ndmin=ndmin)
    mask = np.array(mask, dtype=bool, ndmin=ndmin)
    mask = mask | np.isnan(data)
    data[mask] = np.nan
    return np.ma.MaskedArray(data, mask=mask)


def as_param(values) -> np.ma.MaskedArray:
    r"""
    Convert a variate or parameter to a flat ``float64`` masked array.

    Scalars become sequences of length one. Masked entries, ``None`` and
    ``NaN`` are all read as missing.

    Parameters
    ----------
    values
        scalar, sequence, :class:`numpy.ndarray` or :class:`numpy.ma.MaskedArray`
    """
    return _to_masked(values, ndmin=1).ravel()


def as_param_matrix(values) -> np.ma.MaskedArray:
    r"""
    Convert a matrix-valued parameter (one row per broadcast position, one
    column per mixture component) to a 2-D ``float64`` masked array. A flat
    sequence is a single row.
    """
    arr = _to_masked(values, ndmin=2)
    if arr.ndim != 2:
        raise ValueError(f"expected a matrix, got {arr.ndim} dimensions")
    return arr


def recycled_length(*params) -> int:
    """
    Length of the broadcast output: the largest length (number of rows, for
    matrices) among `params`, or 0 when any of them is empty.
    """
    lengths = [len(p) for p in params]
    if not lengths or min(lengths) == 0:
        return 0
    return max(lengths)


def element_at(seq, i):
    """
    Element of `seq` read at broadcast position `i`, i.e. ``seq[i % len(seq)]``.

    `i` may be an integer or an integer index array, in which case the
    recycled elements (rows, for matrices) are returned at once.
    """
    return seq[i % len(seq)]


def recycle(param, n: int):
    """Recycle `param` cyclically to length `n`."""
    return element_at(param, np.arange(n))


def check_components(**matrices) -> int:
    """
    Number of mixture components shared by all `matrices`.

    Raises
    ------
    ParameterShapeError
        if the matrices disagree on their number of columns
    """
    ncols = {name: m.shape[1] for name, m in matrices.items()}
    if len(set(ncols.values())) > 1:
        names = ", ".join(f"'{name}'" for name in matrices)
        raise ParameterShapeError(
            f"sizes of {names} do not match",
            shapes={name: m.shape for name, m in matrices.items()},
        )
    return next(iter(ncols.values()))


def missing_positions(*columns) -> np.ndarray:
    """
    Boolean array flagging the positions where any of the recycled
    `columns` is missing. Matrix columns flag a row if any of its entries is
    missing.
    """
    n = len(columns[0]) if columns else 0
    missing = np.zeros(n, dtype=bool)
    for col in columns:
        mask = np.ma.getmaskarray(col)
        if mask.ndim > 1:
            mask = mask.any(axis=1)
        missing |= mask
    return missing


def flag_invalid(values: np.ndarray, missing: np.ndarray) -> bool:
    """
    Report domain violations, i.e. ``NaN`` values at non-missing positions,
    with a single warning for the whole call.

    Returns
    -------
    True if any invalid element was found
    """
    invalid = bool(np.any(np.isnan(values) & ~missing))
    if invalid:
        logger.warning("NaNs produced")
    return invalid


def wrap(values: np.ndarray, missing: np.ndarray) -> np.ma.MaskedArray:
    """Assemble the output container, masking the missing positions."""
    values = np.asarray(values, dtype=np.float64)
    values[missing] = np.nan
    return np.ma.MaskedArray(values, mask=missing)


def evaluate(kernel: Kernel, *params) -> tuple[np.ndarray, np.ndarray]:
    r"""
    Broadcast `params` and apply `kernel` elementwise.

    Parameters
    ----------
    kernel
        elementwise function of as many equal-length ``float64`` arrays as
        there are `params`
    params
        the variate followed by the distribution parameters, in the order
        `kernel` expects them

    Returns
    -------
    values, missing
        the raw kernel output and the positions that are missing
    """
    params = [as_param(p) for p in params]
    n = recycled_length(*params)
    columns = [recycle(p, n) for p in params]
    missing = missing_positions(*columns)

    with np.errstate(all="ignore"):
        values = kernel(*(col.filled(np.nan) for col in columns))
    values = np.array(values, dtype=np.float64, ndmin=1)
    flag_invalid(values, missing)
    return values, missing


def density(
    kernel: Kernel, x, *params, log: bool = False, log_kernel: Kernel = None
) -> np.ma.MaskedArray:
    r"""
    Elementwise density (or mass) of `x`.

    Parameters
    ----------
    kernel
        the density kernel
    x
        the variates
    params
        the distribution parameters
    log
        return the log-density. Uses `log_kernel` when given, which avoids
        the underflow of ``log(pdf(x))`` far in the tails.
    log_kernel
        optional log-density kernel
    """
    if log and log_kernel is not None:
        values, missing = evaluate(log_kernel, x, *params)
        return wrap(values, missing)

    values, missing = evaluate(kernel, x, *params)
    if log:
        with np.errstate(divide="ignore", invalid="ignore"):
            values = np.log(values)
    return wrap(values, missing)


def cumulative(
    kernel: Kernel, x, *params, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    r"""
    Elementwise cumulative probability of `x`.

    Parameters
    ----------
    kernel
        the lower-tail cdf kernel
    lower_tail
        if `False` return :math:`P(X > x)` instead of :math:`P(X \leq x)`
    log_p
        return the log of the probability
    """
    values, missing = evaluate(kernel, x, *params)
    if not lower_tail:
        values = 1.0 - values
    if log_p:
        with np.errstate(divide="ignore", invalid="ignore"):
            values = np.log(values)
    return wrap(values, missing)


def quantile(
    kernel: Kernel, p, *params, lower_tail: bool = True, log_p: bool = False
) -> np.ma.MaskedArray:
    r"""
    Elementwise quantile of the probabilities `p`.

    The probabilities are exponentiated first when `log_p` is set, then
    complemented when `lower_tail` is `False`, then handed to `kernel`.
    Probabilities outside :math:`[0, 1]` are domain violations.
    """
    p = as_param(p)
    mask = np.ma.getmaskarray(p)
    probs = p.filled(np.nan)
    with np.errstate(over="ignore"):
        if log_p:
            probs = np.exp(probs)
        if not lower_tail:
            probs = 1.0 - probs
    values, missing = evaluate(kernel, np.ma.MaskedArray(probs, mask=mask), *params)
    return wrap(values, missing)


def sample_size(n) -> int:
    """Validate the number of variates requested from a sampler."""
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"invalid sample size n={n}")
    return n


def recycle_to(n: int, *params) -> list:
    """
    Recycle each parameter to exactly `n` positions, as samplers do. An empty
    parameter yields `n` missing positions.
    """
    out = []
    for p in params:
        p = as_param(p)
        if len(p) == 0:
            p = np.ma.masked_all(1, dtype=np.float64)
        out.append(recycle(p, n))
    return out


def sample(kernel: Kernel, n, *params, rng: np.random.Generator = None):
    r"""
    Draw `n` variates by inverse-transform sampling, ``kernel(u, *params)``
    with one uniform draw per variate. Parameters are recycled to `n`.

    Parameters
    ----------
    kernel
        the quantile kernel
    n
        number of variates
    rng
        random generator; the process-wide stream of :mod:`distrkit.random`
        if `None`
    """
    n = sample_size(n)
    columns = recycle_to(n, *params)
    u = get_rng(rng).random(n)
    return wrap(*evaluate(kernel, u, *columns))
