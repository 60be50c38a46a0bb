import numpy as np
from scipy.stats import beta as scipy_beta

from distrkit.functions.kumaraswamy import dkumar, kumaraswamy, pkumar, qkumar, rkumar


def test_dkumar():
    x = np.linspace(0.01, 0.99, 40)
    a = 2.0
    b = 3.0

    y = dkumar(x, a, b)
    assert np.allclose(y, a * b * x ** (a - 1) * (1 - x**a) ** (b - 1), rtol=1e-10)
    assert np.allclose(dkumar(x, a, b, log=True), np.log(y))
    assert np.array_equal(dkumar([-0.5, 1.5], a, b), [0, 0])

    # Kumaraswamy(1, b) is Beta(1, b) and Kumaraswamy(a, 1) is Beta(a, 1)
    assert np.allclose(dkumar(x, 1, 4), scipy_beta.pdf(x, 1, 4))
    assert np.allclose(dkumar(x, 3, 1), scipy_beta.pdf(x, 3, 1))


def test_pkumar():
    x = np.linspace(-0.5, 1.5, 41)
    assert np.allclose(pkumar(x, 1, 4), scipy_beta.cdf(x, 1, 4))
    assert np.allclose(pkumar(x, 0.5, 1), scipy_beta.cdf(x, 0.5, 1))

    y = pkumar(x, 2, 3)
    assert y[0] == 0 and y[-1] == 1
    assert np.allclose(pkumar(x, 2, 3, lower_tail=False), 1 - y)

    inside = (x > 0) & (x < 1)
    assert np.allclose(pkumar(x[inside], 2, 3, log_p=True), np.log(y[inside]))
    assert np.allclose(
        pkumar(x[inside], 2, 3, lower_tail=False, log_p=True), np.log1p(-y[inside])
    )


def test_qkumar():
    p = np.linspace(0.01, 0.99, 30)
    x = qkumar(p, 2, 5)
    assert np.allclose(pkumar(x, 2, 5), p)
    assert np.allclose(qkumar(p, 1, 4), scipy_beta.ppf(p, 1, 4))


def test_kumar_invalid(caplog):
    y = pkumar(0.5, [1, 0, 1], [1, 1, -1])
    assert np.isclose(y[0], 0.5)
    assert np.isnan(y[1:]).all()
    assert "NaNs produced" in caplog.text


def test_rkumar(rng):
    x = rkumar(10000, 1, 3, rng=rng)
    assert np.all((x >= 0) & (x <= 1))
    assert np.isclose(np.mean(x), scipy_beta.mean(1, 3), rtol=0.05)


def test_kumaraswamy_scipy():
    x = np.linspace(0.05, 0.95, 10)
    assert np.allclose(kumaraswamy.cdf(x, 3, 1), scipy_beta.cdf(x, 3, 1))
    assert np.allclose(kumaraswamy(1, 2).ppf(0.5), scipy_beta.ppf(0.5, 1, 2))
    assert kumaraswamy.required_args() == ("a", "b")
