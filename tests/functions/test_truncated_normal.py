import numpy as np
import pytest
from scipy import special
from scipy.stats import truncnorm as scipy_truncnorm

from distrkit.functions.truncated_normal import (
    dtnorm,
    ptnorm,
    qtnorm,
    rtnorm,
    truncnorm,
)


def scipy_args(mu, sigma, a, b):
    return (a - mu) / sigma, (b - mu) / sigma, mu, sigma


def test_dtnorm():
    x = np.linspace(-3, 6, 50)
    mu, sigma, a, b = 1, 2, -1, 4

    y = dtnorm(x, mu, sigma, a, b)
    assert np.allclose(y, scipy_truncnorm.pdf(x, *scipy_args(mu, sigma, a, b)), rtol=1e-8)
    inside = (x > a) & (x < b)
    assert np.allclose(
        dtnorm(x[inside], mu, sigma, a, b, log=True),
        scipy_truncnorm.logpdf(x[inside], *scipy_args(mu, sigma, a, b)),
    )
    assert np.array_equal(dtnorm([a, b], mu, sigma, a, b), [0, 0])


def test_dtnorm_defaults():
    x = np.linspace(-4, 4, 20)
    assert np.allclose(dtnorm(x), np.exp(-(x**2) / 2) / np.sqrt(2 * np.pi))
    assert np.allclose(dtnorm(x, a=0), 2 * np.exp(-(x**2) / 2) / np.sqrt(2 * np.pi) * (x > 0))


def test_dtnorm_far_tail():
    # interval far above the mean, where Phi(b) - Phi(a) would round to 0
    x = np.linspace(10.1, 11.9, 10)
    y = dtnorm(x, 0, 1, 10, 12)
    assert np.all(np.isfinite(y))
    assert np.allclose(y, scipy_truncnorm.pdf(x, 10, 12), rtol=1e-6)


def test_ptnorm():
    x = np.linspace(-3, 6, 50)
    mu, sigma, a, b = 1, 2, -1, 4

    y = ptnorm(x, mu, sigma, a, b)
    assert np.allclose(y, scipy_truncnorm.cdf(x, *scipy_args(mu, sigma, a, b)), rtol=1e-8)
    assert np.all(y[x <= a] == 0)
    assert np.all(y[x >= b] == 1)
    assert np.allclose(ptnorm(x, mu, sigma, a, b, lower_tail=False), 1 - y)

    inside = x > a
    assert np.allclose(ptnorm(x[inside], mu, sigma, a, b, log_p=True), np.log(y[inside]))


def test_qtnorm():
    p = np.linspace(0.01, 0.99, 30)
    mu, sigma, a, b = -2, 0.5, -3, np.inf

    x = qtnorm(p, mu, sigma, a, b)
    assert np.allclose(x, scipy_truncnorm.ppf(p, *scipy_args(mu, sigma, a, b)))
    assert np.allclose(ptnorm(x, mu, sigma, a, b), p)
    assert np.all(x > a)

    assert qtnorm(0, 0, 1, -1, 2)[0] == -1
    assert qtnorm(1, 0, 1, -1, 2)[0] == 2

    # far in the upper tail
    x = qtnorm(p, 0, 1, 8, 9)
    assert np.all((x >= 8) & (x <= 9))
    assert np.allclose(ptnorm(x, 0, 1, 8, 9), p)


def test_tnorm_invalid(caplog):
    y = dtnorm(0.5, 0, [1, 0, 1, 1], [0, 0, 1, 2], [1, 1, 1, 1])
    assert not np.isnan(y[0])
    assert np.isnan(y[1:]).all()
    assert caplog.text.count("NaNs produced") == 1


@pytest.mark.parametrize(
    "mu, sigma, a, b",
    [
        (0, 1, -0.5, 0.5),  # narrow, straddling the mean
        (0, 1, 1, 2),  # narrow, above the mean
        (1, 2, -5, -1),  # narrow, below the mean
        (0, 1, -1, 5),  # wide
        (0, 1, -np.inf, np.inf),
        (3, 0.5, 6, np.inf),  # wide, negligible mass
    ],
)
def test_rtnorm(rng, mu, sigma, a, b):
    x = rtnorm(10000, mu, sigma, a, b, rng=rng)
    assert len(x) == 10000
    assert not x.mask.any()
    assert np.all((x >= a) & (x <= b))

    za, zb, loc, scale = scipy_args(mu, sigma, a, b)
    mean = scipy_truncnorm.mean(za, zb, loc, scale)
    std = scipy_truncnorm.std(za, zb, loc, scale)
    assert abs(np.mean(x) - mean) < 5 * std / np.sqrt(len(x))


def test_rtnorm_missing_and_invalid(rng, caplog):
    x = rtnorm(4, [0, None, 0, 0], 1, [-1, -1, 2, -1], [1, 1, 1, 1], rng=rng)
    assert np.array_equal(x.mask, [False, True, False, False])
    assert np.isnan(x[2])
    assert -1 <= x[0] <= 1 and -1 <= x[3] <= 1
    assert caplog.text.count("NaNs produced") == 1


def test_truncnorm_scipy():
    x = np.linspace(-0.9, 3.9, 20)
    frozen = truncnorm(1, 2, -1, 4)
    assert np.allclose(frozen.pdf(x), scipy_truncnorm.pdf(x, *scipy_args(1, 2, -1, 4)))
    # the support is open, scipy's truncnorm includes its endpoints
    assert np.array_equal(frozen.pdf([-1, 4]), [0, 0])
    assert np.allclose(frozen.get_ppf([0.3]), scipy_truncnorm.ppf(0.3, *scipy_args(1, 2, -1, 4)))
    assert np.allclose(frozen.support(), (-1, 4))
    assert frozen.required_args() == ("mu", "sigma", "a", "b")


def test_tnorm_beyond_underflow(caplog):
    # Phi(-40) underflows to 0 in double precision
    a = 40
    x = np.array([40.01, 40.1, 40.5])
    log_mass = special.log_ndtr(-a)

    y = dtnorm(x, 0, 1, a, np.inf)
    assert np.all(np.isfinite(y)) and np.all(y > 0)
    log_y = -(x**2) / 2 - 0.5 * np.log(2 * np.pi) - log_mass
    assert np.allclose(dtnorm(x, 0, 1, a, np.inf, log=True), log_y, rtol=1e-10)
    assert np.allclose(y, np.exp(log_y), rtol=1e-8)

    p = ptnorm(x, 0, 1, a, np.inf)
    assert np.all((p > 0) & (p < 1))
    assert np.allclose(p, -np.expm1(special.log_ndtr(-x) - log_mass), rtol=1e-8)

    q = qtnorm([0.25, 0.5, 0.75], 0, 1, a, np.inf)
    assert np.all(np.isfinite(q)) and np.all(q > a)
    assert np.allclose(ptnorm(q, 0, 1, a, np.inf), [0.25, 0.5, 0.75])

    assert "NaNs produced" not in caplog.text


def test_tnorm_beyond_underflow_lower_tail():
    x = np.array([40.01, 40.1, 40.5])
    assert np.allclose(dtnorm(-x, 0, 1, -np.inf, -40), dtnorm(x, 0, 1, 40, np.inf))
    assert np.allclose(ptnorm(-x, 0, 1, -np.inf, -40), 1 - ptnorm(x, 0, 1, 40, np.inf))
    assert np.allclose(qtnorm(0.3, 0, 1, -np.inf, -40), -qtnorm(0.7, 0, 1, 40, np.inf))


def test_rtnorm_beyond_underflow(rng):
    x = rtnorm(1000, 0, 1, 40, np.inf, rng=rng)
    assert np.all(np.isfinite(x)) and np.all(x > 40)
    # the excess over a is close to exponential with rate a
    assert abs(np.mean(x - 40) - 1 / 40) < 5 * (1 / 40) / np.sqrt(len(x))

    x = rtnorm(1000, 0, 1, -np.inf, -40, rng=rng)
    assert np.all(np.isfinite(x)) and np.all(x < -40)
