import pytest

from polykit.algorithms.polynomial.naming import variable_name_to_id
from polykit.algorithms.polynomial.types import Monomial, Term

X = variable_name_to_id("x")
Y = variable_name_to_id("y")
Z = variable_name_to_id("z")


def test_term_power_must_be_positive():
    with pytest.raises(ValueError):
        Term(X, 0)


def test_term_str():
    assert str(Term(X)) == "x1"
    assert str(Term(Y, 3)) == "y1^3"


def test_create_merges_and_sorts_terms():
    mono = Monomial.create(2.0, [(Y, 1), Term(X, 1), (X, 2)])
    assert mono.terms == (Term(X, 3), Term(Y, 1))
    assert mono.variables == (X, Y)


def test_degree_is_product_of_powers():
    assert Monomial.create(1.0, [Term(X, 2), Term(Y, 3)]).degree == 6
    assert Monomial.create(1.0, [Term(X, 4)]).degree == 4
    assert Monomial(5.0).degree == 0
    assert Monomial(5.0).is_constant


def test_degree_of():
    mono = Monomial.create(1.0, [Term(X, 2), Term(Y, 3)])
    assert mono.degree_of(Y) == 3
    assert mono.degree_of(Z) == 0


def test_multiplication():
    a = Monomial.create(2.0, [Term(X, 1)])
    b = Monomial.create(3.0, [Term(X, 2), Term(Y, 1)])
    prod = a * b
    assert prod.coefficient == 6.0
    assert prod.terms == (Term(X, 3), Term(Y, 1))


def test_factor():
    mono = Monomial.create(6.0, [Term(X, 3), Term(Y, 1)])
    quotient = mono.factor(Monomial.create(2.0, [Term(X, 1)]))
    assert quotient == Monomial.create(3.0, [Term(X, 2), Term(Y, 1)])

    assert mono.factor(Monomial.create(1.0, [Term(X, 3), Term(Y, 1)])) == Monomial(6.0)


@pytest.mark.parametrize("divisor", [
    Monomial.create(1.0, [Term(Z, 1)]),
    Monomial.create(1.0, [Term(X, 4)]),
    Monomial.create(1.0, [Term(Y, 2)]),
])
def test_factor_failure(divisor):
    mono = Monomial.create(6.0, [Term(X, 3), Term(Y, 1)])
    assert mono.factor(divisor) is None


def test_same_exponents():
    a = Monomial.create(2.0, [Term(X, 1), Term(Y, 2)])
    b = Monomial.create(-1.0, [Term(Y, 2), Term(X, 1)])
    c = Monomial.create(2.0, [Term(X, 2), Term(Y, 1)])
    assert a.has_same_exponents(b)
    assert not a.has_same_exponents(c)


def test_evaluate():
    mono = Monomial.create(2.0, [Term(X, 2), Term(Y, 1)])
    assert mono.evaluate({X: 3.0, Y: -1.0}) == -18.0


def test_str():
    assert str(Monomial.create(2.0, [Term(X, 2)])) == "2*x1^2"
    assert str(Monomial.create(1.0, [Term(X, 2), Term(Y, 1)])) == "x1^2*y1"
    assert str(Monomial.create(-1.0, [Term(X, 1)])) == "-1*x1"
    assert str(Monomial(3.5)) == "3.5"
    assert str(Monomial(1.0)) == "1"


def test_constructor_normalises_terms():
    mono = Monomial(1.0, (Term(Y), Term(X), Term(X)))
    assert mono.terms == (Term(X, 2), Term(Y, 1))
    assert mono.degree == 2
    assert mono == Monomial.create(1.0, [Term(X, 2), Term(Y)])
