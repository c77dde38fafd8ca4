"""Terms and monomials of a multivariate polynomial.

A :class:`Term` pairs a variable identifier with a positive power and a
:class:`Monomial` is a coefficient times a product of terms over distinct
variables. Both are immutable; polynomial arithmetic builds new instances.
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Iterable, Mapping, Optional, Tuple

from polykit.algorithms.polynomial.naming import id_to_variable_name


@dataclass(frozen=True, order=True)
class Term:
    """A single variable raised to a positive integer power.

    Parameters
    ----------
    var : int
        Variable identifier, see :mod:`polykit.algorithms.polynomial.naming`.
    power : int, default=1
        Exponent, at least 1. A variable absent from a monomial has
        implicit power 0.
    """
    var: int
    power: int = 1

    def __post_init__(self):
        if self.power < 1:
            raise ValueError(f"term power must be >= 1, got {self.power}")

    def __str__(self) -> str:
        name = id_to_variable_name(self.var)
        if self.power == 1:
            return name
        return f"{name}^{self.power}"


def _merge_terms(terms: Iterable) -> Tuple[Term, ...]:
    """Merge terms on the same variable and sort them by variable."""
    powers = {}
    for term in terms:
        if not isinstance(term, Term):
            term = Term(*term)
        powers[term.var] = powers.get(term.var, 0) + term.power
    return tuple(Term(var, powers[var]) for var in sorted(powers))


def format_coefficient(coefficient) -> str:
    """Render a coefficient with six significant digits when it is real."""
    if isinstance(coefficient, Real):
        return format(coefficient, "g")
    return str(coefficient)


@dataclass(frozen=True)
class Monomial:
    """Coefficient times a product of variable powers.

    Terms on the same variable are merged and the terms are sorted by
    variable at construction, so two monomials with identical exponents
    always carry identical ``terms`` tuples.

    Parameters
    ----------
    coefficient : Any
        Numeric coefficient.
    terms : iterable of Term or (var, power) pairs
        Terms of the product, stored merged and sorted. An empty tuple
        represents a constant.
    """
    coefficient: Any
    terms: Tuple[Term, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "terms", _merge_terms(self.terms))

    @classmethod
    def create(cls, coefficient, terms: Iterable = ()) -> "Monomial":
        return cls(coefficient, terms)

    @property
    def is_constant(self) -> bool:
        return not self.terms

    @property
    def degree(self) -> int:
        """Product of all term powers, 0 for a constant.

        This is intentionally the product and not the sum: a monomial with
        powers 2 and 3 has degree 6.
        """
        if not self.terms:
            return 0
        degree = 1
        for term in self.terms:
            degree *= term.power
        return degree

    @property
    def variables(self) -> Tuple[int, ...]:
        return tuple(term.var for term in self.terms)

    def degree_of(self, var: int) -> int:
        """Power of *var* in this monomial, 0 if absent."""
        for term in self.terms:
            if term.var == var:
                return term.power
        return 0

    def has_same_exponents(self, other: "Monomial") -> bool:
        return self.terms == other.terms

    def with_coefficient(self, coefficient) -> "Monomial":
        return Monomial(coefficient, self.terms)

    def scaled(self, factor) -> "Monomial":
        return Monomial(self.coefficient * factor, self.terms)

    def __neg__(self) -> "Monomial":
        return Monomial(-self.coefficient, self.terms)

    def __mul__(self, other: "Monomial") -> "Monomial":
        if not isinstance(other, Monomial):
            return NotImplemented
        return Monomial.create(self.coefficient * other.coefficient, self.terms + other.terms)

    def factor(self, divisor: "Monomial") -> Optional["Monomial"]:
        """Divide by another monomial.

        Parameters
        ----------
        divisor : Monomial
            Monomial to divide by.

        Returns
        -------
        Monomial or None
            The quotient if every variable of *divisor* appears in this
            monomial with at least the same power, otherwise ``None``.
        """
        new_terms = []
        for term in self.terms:
            divisor_power = divisor.degree_of(term.var)
            if term.power < divisor_power:
                return None
            if term.power > divisor_power:
                new_terms.append(Term(term.var, term.power - divisor_power))
        for divisor_term in divisor.terms:
            if not self.degree_of(divisor_term.var):
                return None
        return Monomial(self.coefficient / divisor.coefficient, tuple(new_terms))

    def evaluate(self, values: Mapping[int, Any]):
        """Value of the monomial with every variable taken from *values*."""
        result = self.coefficient
        for term in self.terms:
            result = result * values[term.var] ** term.power
        return result

    def __str__(self) -> str:
        if not self.terms:
            return format_coefficient(self.coefficient)
        factors = "*".join(str(term) for term in self.terms)
        if self.coefficient == 1:
            return factors
        return f"{format_coefficient(self.coefficient)}*{factors}"
