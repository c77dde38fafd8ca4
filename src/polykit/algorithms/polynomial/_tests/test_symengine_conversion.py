import pytest
import symengine as se

from polykit.algorithms.polynomial.base import Polynomial
from polykit.algorithms.polynomial.conversion import (polynomial_to_symengine,
                                                      symengine_to_polynomial)
from polykit.algorithms.utils.exceptions import InvalidNameError

x1, y1, x2 = se.symbols("x1 y1 x2")


@pytest.fixture
def x():
    return Polynomial("x")


@pytest.fixture
def y():
    return Polynomial("y")


def test_polynomial_to_symengine(x, y):
    expr = polynomial_to_symengine(x**2 + 2 * x * y + 1)
    assert expr.free_symbols == {x1, y1}
    assert float(expr.subs({x1: 2, y1: 3})) == pytest.approx(17.0)


def test_empty_polynomial_to_symengine():
    assert polynomial_to_symengine(Polynomial()) == 0


def test_symengine_to_polynomial(x, y):
    poly = symengine_to_polynomial(x1**2 + 2 * x1 * y1 + 3)
    assert poly == x**2 + 2 * x * y + 3


def test_symengine_to_polynomial_expands(x):
    poly = symengine_to_polynomial((x1 - 1) * (x1 + 1))
    assert poly == x**2 - 1


def test_symengine_indexed_names():
    poly = symengine_to_polynomial(3 * x2)
    assert poly == 3 * Polynomial("x", 2)
    assert symengine_to_polynomial(se.Symbol("x") * 2) == 2 * Polynomial("x")


def test_symengine_zero():
    assert symengine_to_polynomial(se.Integer(0)).number_of_coefficients == 0


def test_round_trip(x, y):
    poly = 0.5 * x**3 * y - 4 * y + 2.25
    assert symengine_to_polynomial(polynomial_to_symengine(poly)) == poly


@pytest.mark.parametrize("expr", [1 / x1, se.sqrt(x1), se.sin(x1), x1**se.Rational(1, 2)])
def test_non_polynomial_terms(expr):
    with pytest.raises(ValueError):
        symengine_to_polynomial(expr)


def test_symbolic_coefficient():
    a = se.Symbol("A")
    with pytest.raises(InvalidNameError):
        symengine_to_polynomial(a * x1)
