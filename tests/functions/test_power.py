import numpy as np
from scipy.stats import powerlaw

from distrkit.functions.power import dpower, power, ppower, qpower, rpower


def test_dpower():
    x = np.linspace(0.05, 2.95, 30)
    alpha = 3
    beta = 2.5

    y = dpower(x, alpha, beta)
    assert np.allclose(y, powerlaw.pdf(x, beta, scale=alpha), rtol=1e-8)
    assert np.allclose(dpower(x, alpha, beta, log=True), powerlaw.logpdf(x, beta, scale=alpha))
    assert np.array_equal(dpower([-1, 0, 3, 4], alpha, beta), [0, 0, 0, 0])


def test_ppower():
    x = np.linspace(-1, 4, 30)
    alpha = 3
    beta = 0.5

    y = ppower(x, alpha, beta)
    assert np.allclose(y, powerlaw.cdf(x, beta, scale=alpha), rtol=1e-8)
    assert np.allclose(ppower(x, alpha, beta, lower_tail=False), 1 - y)


def test_qpower():
    p = np.linspace(0.01, 0.99, 20)
    x = qpower(p, 2, 3)
    assert np.allclose(x, powerlaw.ppf(p, 3, scale=2))
    assert np.allclose(ppower(x, 2, 3), p)
    assert np.allclose(qpower(np.log(p), 2, 3, log_p=True), x)


def test_power_invalid(caplog):
    y = dpower([1, 1, 1], [2, 0, 2], [1, 1, -2])
    assert np.isclose(y[0], 0.5)
    assert np.isnan(y[1]) and np.isnan(y[2])
    assert caplog.text.count("NaNs produced") == 1


def test_rpower(rng):
    x = rpower(10000, 5, 2, rng=rng)
    assert np.all((x >= 0) & (x <= 5))
    assert np.isclose(np.mean(x), powerlaw.mean(2, scale=5), rtol=0.05)


def test_power_scipy():
    x = np.linspace(0.05, 1.95, 20)
    frozen = power(2, 1.5)
    assert np.allclose(frozen.pdf(x), powerlaw.pdf(x, 1.5, scale=2))
    assert np.allclose(frozen.get_ppf([0.2, 0.7]), powerlaw.ppf([0.2, 0.7], 1.5, scale=2))
    assert np.allclose(frozen.support(), (0, 2))
