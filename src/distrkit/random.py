"""
Process-wide random stream used by the ``r*`` sampling functions.

Samplers only need two capabilities from a generator: ``random(size)``,
uniform variates on :math:`[0, 1)`, and ``standard_normal(size)``. Any
:class:`numpy.random.Generator` provides both, so tests and callers can pass
their own seeded generator (or a stub) through the ``rng`` argument. When no
generator is passed, the shared stream below is used and mutated.

>>> from distrkit import random
>>> random.seed(42)
>>> from distrkit.functions.gumbel import rgumbel
>>> x = rgumbel(5, 0, 1)  # reproducible after seeding
"""

from __future__ import annotations

import logging

import numpy as np

log = logging.getLogger(__name__)

_rng = np.random.default_rng()


def get_rng(rng: np.random.Generator = None) -> np.random.Generator:
    """Return `rng` if given, otherwise the process-wide generator."""
    if rng is not None:
        return rng
    return _rng


def seed(value: int = None) -> np.random.Generator:
    """Reseed the process-wide generator and return it.

    Parameters
    ----------
    value
        anything :func:`numpy.random.default_rng` accepts. `None` draws fresh
        entropy from the OS.
    """
    global _rng
    log.debug(f"reseeding process-wide generator with {value}")
    _rng = np.random.default_rng(value)
    return _rng
