import logging

import numpy as np
import pytest

from polykit.algorithms.polynomial.base import Polynomial
from polykit.algorithms.utils.exceptions import UnknownVariableError


@pytest.fixture
def x():
    return Polynomial("x")


def _sorted_roots(roots):
    return np.array(sorted(roots, key=lambda r: (round(r.real, 6), round(r.imag, 6))))


def test_derivative(x):
    p = x**3 + 2 * x + 5
    np.testing.assert_allclose(p.derivative().get_coefficients(), [2.0, 0.0, 3.0])
    np.testing.assert_allclose(p.derivative(2).get_coefficients(), [0.0, 6.0])
    np.testing.assert_allclose(p.derivative(3).get_coefficients(), [6.0])
    assert p.derivative(0) == p
    assert str(p.derivative(4)) == "0"


def test_derivative_of_constant():
    assert Polynomial(5.0).derivative().number_of_coefficients == 0


def test_negative_derivative_order(x):
    with pytest.raises(ValueError):
        x.derivative(-1)


def test_integral(x):
    p = 3 * x**2 + 1
    np.testing.assert_allclose(p.integral().get_coefficients(), [0.0, 1.0, 0.0, 1.0])
    np.testing.assert_allclose(p.integral(2.5).get_coefficients(), [2.5, 1.0, 0.0, 1.0])


def test_integral_needs_a_variable():
    with pytest.raises(UnknownVariableError):
        Polynomial(2.0).integral()


@pytest.mark.parametrize("coeffs", [
    [1.0, 2.0, 3.0],
    [0.0, -4.0, 0.5, 7.0],
    [2.0, 1.0],
])
def test_integral_derivative_round_trip(x, coeffs):
    p = Polynomial(coeffs[0])
    for power, c in enumerate(coeffs[1:], start=1):
        p += c * x**power
    assert p.integral().derivative().is_approx(p, 1e-10)
    assert p.integral(3.0).derivative().is_approx(p, 1e-10)


@pytest.mark.parametrize("high_precision", [False, True])
def test_roots_of_quadratic(x, high_precision):
    roots = _sorted_roots(((x - 2) * (x - 3)).roots(high_precision))
    np.testing.assert_allclose(roots, [2.0, 3.0], atol=1e-9)


@pytest.mark.parametrize("high_precision", [False, True])
def test_complex_roots(x, high_precision):
    roots = _sorted_roots((x**2 + 1).roots(high_precision))
    np.testing.assert_allclose(roots, [-1j, 1j], atol=1e-9)


def test_roots_of_cubic(x):
    p = (x - 1) * (x + 2) * (x - 0.5)
    roots = _sorted_roots(p.roots())
    np.testing.assert_allclose(roots, [-2.0, 0.5, 1.0], atol=1e-9)
    for r in roots:
        assert abs(p.value(complex(r))) < 1e-9


def test_roots_low_degree(x):
    np.testing.assert_allclose((2 * x - 4).roots(), [2.0])
    assert Polynomial(3.0).roots().shape == (0,)
    assert Polynomial().roots().shape == (0,)


def test_roots_ignore_zero_leading_coefficients(x):
    p = 0 * x**3 + x - 1
    np.testing.assert_allclose(p.roots(), [1.0])


def test_roots_logs_the_method(x, caplog):
    with caplog.at_level(logging.DEBUG, logger="polykit"):
        ((x - 1) * (x - 2)).roots(high_precision=True)
    assert "mpmath" in caplog.text
