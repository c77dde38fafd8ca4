"""Multivariate polynomials over a numeric coefficient type.

A :class:`Polynomial` is a sum of :class:`~polykit.algorithms.polynomial.types.Monomial`
objects. Monomials with identical exponents are merged after every mutating
operation, so the monomial list never holds two entries with the same
sorted term tuple.

Examples
--------
>>> x = Polynomial("x")
>>> poly = (x - 1) * (x - 1)
>>> poly.get_coefficients()
array([ 1., -2.,  1.])
"""

from __future__ import annotations

import copy
from numbers import Integral, Number, Real
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import numpy as np

from polykit.algorithms.polynomial.algebra import (_companion_roots,
                                                   _poly_eval_complex,
                                                   _poly_eval_real,
                                                   _trim_leading_zeros)
from polykit.algorithms.polynomial.naming import (NO_VARIABLE,
                                                  variable_name_to_id)
from polykit.algorithms.polynomial.types import Monomial, Term
from polykit.algorithms.utils.config import (NUMPY_DTYPE_COMPLEX,
                                             NUMPY_DTYPE_REAL, TOL,
                                             USE_ARBITRARY_PRECISION)
from polykit.algorithms.utils.exceptions import (UnknownVariableError,
                                                 UnsupportedOperationError)
from polykit.algorithms.utils.numeric import high_precision_polyroots
from polykit.utils.log_config import logger


def _is_polynomial_like(value) -> bool:
    return isinstance(value, Polynomial)


def _wraps_polynomial(value) -> bool:
    # wrappers such as TrigPoly implement the mixed arithmetic themselves
    return (not isinstance(value, Polynomial)
            and isinstance(getattr(value, "polynomial", None), Polynomial))


class Polynomial:
    """Sum of monomials over integer-identified variables.

    Parameters
    ----------
    value : Polynomial, str, scalar or None, optional
        ``None`` builds the zero polynomial (no monomials), a Polynomial is
        copied, a string builds the single variable of that name with
        coefficient 1, anything else is taken as the coefficient of a
        constant polynomial.
    m : int, default=1
        Index of the named variable, see
        :func:`~polykit.algorithms.polynomial.naming.variable_name_to_id`.

    Notes
    -----
    The ``is_univariate`` flag is recomputed after every operation that
    changes the monomial list. A polynomial without variables counts as
    univariate.
    """

    def __init__(self, value: Any = None, m: int = 1):
        self._monomials: list[Monomial] = []
        self._is_univariate = True
        if value is None:
            return
        if isinstance(value, Polynomial):
            self._monomials = list(value._monomials)
            self._is_univariate = value._is_univariate
            return
        if _wraps_polynomial(value):
            raise TypeError(f"cannot build a Polynomial from {type(value).__name__}, use its .polynomial")
        if isinstance(value, str):
            self._monomials.append(Monomial(1.0, (Term(variable_name_to_id(value, m), 1),)))
        else:
            self._monomials.append(Monomial(value))

    @classmethod
    def from_terms(cls, coefficient, terms: Iterable) -> "Polynomial":
        """Single monomial ``coefficient * prod(terms)``.

        *terms* may hold :class:`Term` objects or ``(var, power)`` pairs;
        terms on the same variable are merged by summing powers.
        """
        return cls.from_monomials([Monomial.create(coefficient, terms)])

    @classmethod
    def from_variable_id(cls, var: int, coefficient=1.0) -> "Polynomial":
        """Linear polynomial ``coefficient * var``."""
        return cls.from_monomials([Monomial(coefficient, (Term(var, 1),))])

    @classmethod
    def from_monomials(cls, monomials: Iterable[Monomial]) -> "Polynomial":
        """Sum of existing monomials, merged so that exponents are unique."""
        poly = cls()
        poly._monomials = list(monomials)
        poly._make_monomials_unique()
        return poly

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def monomials(self) -> Tuple[Monomial, ...]:
        return tuple(self._monomials)

    @property
    def number_of_coefficients(self) -> int:
        return len(self._monomials)

    @property
    def is_univariate(self) -> bool:
        return self._is_univariate

    @property
    def degree(self) -> int:
        """Largest monomial degree (see :attr:`Monomial.degree`)."""
        return max((m.degree for m in self._monomials), default=0)

    @property
    def variables(self) -> Tuple[int, ...]:
        """Sorted identifiers of all variables appearing in the polynomial."""
        return tuple(sorted({term.var for m in self._monomials for term in m.terms}))

    def get_simple_variable(self) -> int:
        """Identifier of the variable if the polynomial is exactly ``1*v``
        for some variable ``v``, otherwise ``NO_VARIABLE`` (0).

        Only the shape is checked: a single monomial holding a single term
        of power 1.
        """
        if len(self._monomials) != 1:
            return NO_VARIABLE
        terms = self._monomials[0].terms
        if len(terms) != 1 or terms[0].power != 1:
            return NO_VARIABLE
        return terms[0].var

    def copy(self) -> "Polynomial":
        poly = Polynomial()
        poly._monomials = list(self._monomials)
        poly._is_univariate = self._is_univariate
        return poly

    __copy__ = copy

    def __deepcopy__(self, memo) -> "Polynomial":
        poly = Polynomial()
        poly._monomials = copy.deepcopy(self._monomials, memo)
        poly._is_univariate = self._is_univariate
        return poly

    # ------------------------------------------------------------------
    # Internal bookkeeping
    # ------------------------------------------------------------------

    def _make_monomials_unique(self) -> None:
        """Merge monomials with identical exponents and refresh the
        univariate flag."""
        merged: Dict[Tuple[Term, ...], Any] = {}
        for monomial in self._monomials:
            if monomial.terms in merged:
                merged[monomial.terms] = merged[monomial.terms] + monomial.coefficient
            else:
                merged[monomial.terms] = monomial.coefficient
        self._monomials = [Monomial(coeff, terms) for terms, coeff in merged.items()]
        self._update_univariate()

    def _update_univariate(self) -> None:
        unique_var = NO_VARIABLE
        for monomial in self._monomials:
            if not monomial.terms:
                continue
            if len(monomial.terms) > 1:
                self._is_univariate = False
                return
            var = monomial.terms[0].var
            if unique_var == NO_VARIABLE:
                unique_var = var
            elif var != unique_var:
                self._is_univariate = False
                return
        self._is_univariate = True

    def _require_univariate(self, operation: str) -> None:
        if not self._is_univariate:
            raise UnsupportedOperationError(
                f"{operation} is only defined for univariate polynomials"
            )

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __iadd__(self, other) -> "Polynomial":
        if _wraps_polynomial(other):
            return NotImplemented
        if _is_polynomial_like(other):
            self._monomials.extend(other._monomials)
            self._make_monomials_unique()
            return self
        return self._add_scalar(other)

    def __isub__(self, other) -> "Polynomial":
        if _wraps_polynomial(other):
            return NotImplemented
        if _is_polynomial_like(other):
            self._monomials.extend(-m for m in other._monomials)
            self._make_monomials_unique()
            return self
        return self._add_scalar(-other)

    def __imul__(self, other) -> "Polynomial":
        if _wraps_polynomial(other):
            return NotImplemented
        if _is_polynomial_like(other):
            self._monomials = [a * b for a in self._monomials for b in other._monomials]
            self._make_monomials_unique()
            return self
        self._monomials = [m.scaled(other) for m in self._monomials]
        return self

    def __itruediv__(self, scalar) -> "Polynomial":
        if _is_polynomial_like(scalar) or _wraps_polynomial(scalar):
            return NotImplemented
        self._monomials = [m.with_coefficient(m.coefficient / scalar) for m in self._monomials]
        return self

    def _add_scalar(self, scalar) -> "Polynomial":
        """Fold *scalar* into the constant monomial, creating it if needed."""
        for i, monomial in enumerate(self._monomials):
            if monomial.is_constant:
                self._monomials[i] = monomial.with_coefficient(monomial.coefficient + scalar)
                return self
        self._monomials.append(Monomial(scalar))
        return self

    def __add__(self, other) -> "Polynomial":
        if _wraps_polynomial(other):
            return NotImplemented
        ret = self.copy()
        ret += other
        return ret

    def __radd__(self, other) -> "Polynomial":
        return self + other

    def __sub__(self, other) -> "Polynomial":
        if _wraps_polynomial(other):
            return NotImplemented
        ret = self.copy()
        ret -= other
        return ret

    def __rsub__(self, other) -> "Polynomial":
        ret = -self
        ret += other
        return ret

    def __mul__(self, other) -> "Polynomial":
        if _wraps_polynomial(other):
            return NotImplemented
        ret = self.copy()
        ret *= other
        return ret

    def __rmul__(self, other) -> "Polynomial":
        return self * other

    def __truediv__(self, scalar) -> "Polynomial":
        if _is_polynomial_like(scalar) or _wraps_polynomial(scalar):
            return NotImplemented
        ret = self.copy()
        ret /= scalar
        return ret

    def __neg__(self) -> "Polynomial":
        ret = self.copy()
        ret._monomials = [-m for m in ret._monomials]
        return ret

    def __pos__(self) -> "Polynomial":
        return self.copy()

    def __pow__(self, exponent: int) -> "Polynomial":
        if not isinstance(exponent, Integral) or exponent < 0:
            raise ValueError(f"exponent must be a non-negative integer, got {exponent!r}")
        result = Polynomial(1.0)
        for _ in range(exponent):
            result *= self
        return result

    # ------------------------------------------------------------------
    # Substitution and evaluation
    # ------------------------------------------------------------------

    def subs(self, orig: int, replacement: int) -> "Polynomial":
        """Rename variable *orig* to *replacement* in place.

        Returns
        -------
        Polynomial
            ``self``, to allow chaining.
        """
        self._monomials = [
            Monomial.create(
                m.coefficient,
                [Term(replacement if t.var == orig else t.var, t.power) for t in m.terms],
            )
            for m in self._monomials
        ]
        self._make_monomials_unique()
        return self

    def evaluate_partial(self, var_values: Mapping[int, Any]) -> "Polynomial":
        """Substitute numeric values for some variables.

        Each substituted term is removed from its monomial and its value
        raised to the term power is folded into the coefficient.
        Unsubstituted variables stay symbolic. Monomials that become
        identical are merged.
        """
        new_monomials = []
        for monomial in self._monomials:
            coefficient = monomial.coefficient
            new_terms = []
            for term in monomial.terms:
                if term.var in var_values:
                    coefficient = coefficient * var_values[term.var] ** term.power
                else:
                    new_terms.append(term)
            new_monomials.append(Monomial(coefficient, tuple(new_terms)))
        return Polynomial.from_monomials(new_monomials)

    def evaluate_multivariate(self, var_values: Mapping[int, Any]):
        """Value of the polynomial with every variable taken from *var_values*.

        Raises
        ------
        UnknownVariableError
            If a variable of the polynomial has no value.
        """
        missing = [v for v in self.variables if v not in var_values]
        if missing:
            raise UnknownVariableError(f"no value given for variables {missing}")
        result = 0.0
        for monomial in self._monomials:
            result = result + monomial.evaluate(var_values)
        return result

    def evaluate_univariate(self, x):
        """Value of a univariate polynomial at *x*."""
        coeffs = self.get_coefficients()
        if coeffs.dtype == np.dtype(NUMPY_DTYPE_REAL) and isinstance(x, Real):
            return _poly_eval_real(coeffs, float(x))
        if coeffs.dtype.kind in "fc" and isinstance(x, Number):
            return _poly_eval_complex(coeffs.astype(NUMPY_DTYPE_COMPLEX), complex(x))
        result = coeffs[-1]
        for c in coeffs[-2::-1]:
            result = result * x + c
        return result

    def value(self, x):
        """Evaluate at a scalar (univariate) or a ``{var: value}`` mapping."""
        if isinstance(x, Mapping):
            return self.evaluate_multivariate(x)
        return self.evaluate_univariate(x)

    __call__ = value

    # ------------------------------------------------------------------
    # Univariate operations
    # ------------------------------------------------------------------

    def get_coefficients(self) -> np.ndarray:
        """Dense coefficient vector indexed by power.

        Returns
        -------
        numpy.ndarray
            Array of length ``degree + 1``, zero-filled for missing powers.

        Raises
        ------
        UnsupportedOperationError
            If the polynomial is not univariate.
        """
        self._require_univariate("get_coefficients")
        coefficients = [0.0] * (self.degree + 1)
        for monomial in self._monomials:
            if monomial.is_constant:
                coefficients[0] = monomial.coefficient
            else:
                coefficients[monomial.terms[0].power] = monomial.coefficient
        return np.array(coefficients)

    def derivative(self, derivative_order: int = 1) -> "Polynomial":
        """Derivative of a univariate polynomial.

        Monomials whose power is below *derivative_order* vanish.
        """
        self._require_univariate("derivative")
        if derivative_order < 0:
            raise ValueError(f"derivative order must be >= 0, got {derivative_order}")
        if derivative_order == 0:
            return self.copy()

        monomials = []
        for monomial in self._monomials:
            if monomial.is_constant or monomial.terms[0].power < derivative_order:
                continue
            coefficient = monomial.coefficient
            power = monomial.terms[0].power
            for _ in range(derivative_order):
                coefficient = coefficient * power
                power -= 1
            terms = (Term(monomial.terms[0].var, power),) if power > 0 else ()
            monomials.append(Monomial(coefficient, terms))
        return Polynomial.from_monomials(monomials)

    def integral(self, integration_constant=0.0) -> "Polynomial":
        """Antiderivative of a univariate polynomial.

        Parameters
        ----------
        integration_constant : scalar, default=0.0
            Value of the result where the variable is zero.

        Raises
        ------
        UnsupportedOperationError
            If the polynomial is not univariate.
        UnknownVariableError
            If the polynomial has a constant monomial but no variable to
            integrate it against.
        """
        self._require_univariate("integral")
        variables = self.variables
        monomials = []
        for monomial in self._monomials:
            if monomial.is_constant:
                if not variables:
                    raise UnknownVariableError("don't know the variable name")
                monomials.append(Monomial(monomial.coefficient, (Term(variables[0], 1),)))
            else:
                term = monomial.terms[0]
                monomials.append(
                    Monomial(monomial.coefficient / (term.power + 1), (Term(term.var, term.power + 1),))
                )
        monomials.append(Monomial(integration_constant))
        return Polynomial.from_monomials(monomials)

    def roots(self, high_precision: Optional[bool] = None) -> np.ndarray:
        """All complex roots of a univariate polynomial.

        Parameters
        ----------
        high_precision : bool, optional
            Use mpmath instead of the companion matrix for degree >= 2.
            Defaults to ``USE_ARBITRARY_PRECISION`` from the config.

        Returns
        -------
        numpy.ndarray
            Complex roots in no particular order; empty for constants.
        """
        self._require_univariate("roots")
        if high_precision is None:
            high_precision = USE_ARBITRARY_PRECISION

        coefficients = _trim_leading_zeros(self.get_coefficients())
        degree = coefficients.shape[0] - 1
        if degree == 0:
            return np.zeros(0, dtype=NUMPY_DTYPE_COMPLEX)
        if degree == 1:
            return np.array([-coefficients[0] / coefficients[1]], dtype=NUMPY_DTYPE_COMPLEX)
        if high_precision:
            logger.debug(f"Finding {degree} roots with mpmath")
            return high_precision_polyroots(coefficients)
        logger.debug(f"Finding {degree} roots from the companion matrix")
        return _companion_roots(coefficients)

    def is_approx(self, other: "Polynomial", tol: float = TOL) -> bool:
        """Compare dense coefficient vectors elementwise within *tol*.

        Vectors of different length are zero-padded, so the comparison is
        meaningful for univariate polynomials of comparable degree.
        """
        a = self.get_coefficients()
        b = other.get_coefficients()
        size = max(a.shape[0], b.shape[0])
        a = np.pad(a, (0, size - a.shape[0]))
        b = np.pad(b, (0, size - b.shape[0]))
        return bool(np.all(np.abs(a - b) <= tol))

    # ------------------------------------------------------------------
    # Comparison and presentation
    # ------------------------------------------------------------------

    def __eq__(self, other) -> bool:
        if not _is_polynomial_like(other):
            return NotImplemented
        mine = {m.terms: m.coefficient for m in self._monomials}
        theirs = {m.terms: m.coefficient for m in other._monomials}
        return mine == theirs

    __hash__ = None

    def __str__(self) -> str:
        if not self._monomials:
            return "0"
        return " + ".join(str(m) for m in self._monomials)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self})"
