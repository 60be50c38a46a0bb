import numpy as np
from scipy.stats import gumbel_r

from distrkit.functions.gumbel import dgumbel, gumbel, pgumbel, qgumbel, rgumbel


def test_dgumbel():
    x = np.linspace(-5, 10, 40)
    mu = 1.5
    sigma = 2

    y = dgumbel(x, mu, sigma)
    assert np.allclose(y, gumbel_r.pdf(x, mu, sigma), rtol=1e-8)
    assert np.allclose(dgumbel(x, mu, sigma, log=True), gumbel_r.logpdf(x, mu, sigma))
    assert np.array_equal(dgumbel([-np.inf, np.inf]), [0, 0])
    assert np.allclose(dgumbel(x), gumbel_r.pdf(x))


def test_pgumbel():
    x = np.linspace(-5, 10, 40)
    y = pgumbel(x, -1, 0.5)
    assert np.allclose(y, gumbel_r.cdf(x, -1, 0.5), rtol=1e-8)
    assert np.allclose(pgumbel(x, -1, 0.5, lower_tail=False), gumbel_r.sf(x, -1, 0.5))
    assert np.allclose(pgumbel(x, -1, 0.5, log_p=True), np.log(y))


def test_qgumbel():
    assert np.isclose(qgumbel([0.5], [0], [1])[0], -np.log(-np.log(0.5)))
    assert np.isclose(qgumbel(0.5)[0], 0.3665, atol=1e-4)

    p = np.linspace(0.01, 0.99, 30)
    x = qgumbel(p, 3, 2)
    assert np.allclose(x, gumbel_r.ppf(p, 3, 2))
    assert np.allclose(pgumbel(x, 3, 2), p)


def test_gumbel_invalid(caplog):
    y = dgumbel([0, 0, 0], 0, [1, 0, -1])
    assert not np.isnan(y[0])
    assert np.isnan(y[1]) and np.isnan(y[2])
    assert caplog.text.count("NaNs produced") == 1


def test_rgumbel(rng):
    x = rgumbel(20000, 2, 3, rng=rng)
    assert np.isclose(np.mean(x), gumbel_r.mean(2, 3), rtol=0.05)
    assert np.isclose(np.std(x), gumbel_r.std(2, 3), rtol=0.05)


def test_gumbel_scipy():
    x = np.linspace(-5, 10, 40)
    frozen = gumbel(1, 2)
    assert np.allclose(frozen.pdf(x), gumbel_r.pdf(x, 1, 2))
    assert np.allclose(frozen.get_cdf(x), gumbel_r.cdf(x, 1, 2))
    assert np.isclose(frozen.median(), gumbel_r.median(1, 2))
