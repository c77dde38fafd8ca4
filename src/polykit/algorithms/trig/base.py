"""Polynomials containing sines and cosines of their variables.

A :class:`TrigPoly` is a :class:`~polykit.algorithms.polynomial.base.Polynomial`
some of whose variables stand for the sine or cosine of other variables.
Sines and cosines of affine combinations of variables are decomposed into
polynomials of the sines and cosines of individual variables with the
angle-sum (prosthaphaeresis) formulae.

Every variable that appears inside a trigonometric function must first be
registered in the sin/cos map, normally through :meth:`TrigPoly.from_angle`.

Examples
--------
>>> q, s, c = Polynomial("x"), Polynomial("s"), Polynomial("c")
>>> x = TrigPoly.from_angle(q, s, c)
>>> print(sin(x))
s1
>>> print(cos(x + x))
c1^2 + -1*s1^2
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from polykit.algorithms.polynomial.base import Polynomial
from polykit.algorithms.polynomial.naming import (NO_VARIABLE,
                                                  id_to_variable_name)
from polykit.algorithms.polynomial.types import Monomial
from polykit.algorithms.trig.types import SinCosMap, SinCosVars
from polykit.algorithms.utils.exceptions import (InvalidDegreeError,
                                                 UnmappedVariableError,
                                                 UnsupportedCoefficientError,
                                                 UnsupportedDegreeError)
from polykit.algorithms.utils.numeric import (coeff_cos, coeff_sin,
                                              is_finite_real)
from polykit.utils.log_config import logger


class TrigPoly:
    """Polynomial over an extended variable space with a sin/cos map.

    Parameters
    ----------
    p : Polynomial or scalar, optional
        Underlying polynomial. A scalar builds a constant, ``None`` the zero
        polynomial.
    sin_cos_map : mapping, optional
        Map from angle variable to its :class:`SinCosVars` placeholders.
    """

    def __init__(self, p: Any = None, sin_cos_map: Optional[Mapping[int, SinCosVars]] = None):
        if isinstance(p, Polynomial):
            self._poly = p.copy()
        elif p is None:
            self._poly = Polynomial()
        else:
            self._poly = Polynomial(p)
        self._sin_cos_map: SinCosMap = dict(sin_cos_map or {})

    @classmethod
    def from_angle(cls, q: Polynomial, s: Polynomial, c: Polynomial) -> "TrigPoly":
        """Angle variable *q* whose sine and cosine are the variables *s* and *c*.

        Raises
        ------
        InvalidDegreeError
            If any of *q*, *s*, *c* is not a single variable of degree 1.
        """
        for label, poly in (("q", q), ("s", s), ("c", c)):
            if poly.degree != 1 or poly.get_simple_variable() == NO_VARIABLE:
                raise InvalidDegreeError(
                    f"{label} must be a simple polynomial of degree 1, got {poly}"
                )
        sin_cos_map = {q.get_simple_variable(): SinCosVars(s.get_simple_variable(), c.get_simple_variable())}
        return cls(q, sin_cos_map)

    @property
    def polynomial(self) -> Polynomial:
        return self._poly.copy()

    @property
    def sin_cos_map(self) -> SinCosMap:
        return dict(self._sin_cos_map)

    def copy(self) -> "TrigPoly":
        return TrigPoly(self._poly, self._sin_cos_map)

    __copy__ = copy

    def __deepcopy__(self, memo) -> "TrigPoly":
        return self.copy()

    def sin(self) -> "TrigPoly":
        return sin(self)

    def cos(self) -> "TrigPoly":
        return cos(self)

    def evaluate(self, var_values: Mapping[int, Any]):
        """Evaluate with values for angles and any other variables.

        The sine and cosine placeholders of every angle present in
        *var_values* are derived from that angle unless given explicitly.
        """
        values = dict(var_values)
        for angle, sc in self._sin_cos_map.items():
            if angle in values:
                values.setdefault(sc.s, coeff_sin(values[angle]))
                values.setdefault(sc.c, coeff_cos(values[angle]))
        return self._poly.evaluate_multivariate(values)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __iadd__(self, other) -> "TrigPoly":
        if isinstance(other, TrigPoly):
            self._poly += other._poly
            self._sin_cos_map.update(other._sin_cos_map)
        else:
            self._poly += other
        return self

    def __isub__(self, other) -> "TrigPoly":
        if isinstance(other, TrigPoly):
            self._poly -= other._poly
            self._sin_cos_map.update(other._sin_cos_map)
        else:
            self._poly -= other
        return self

    def __imul__(self, other) -> "TrigPoly":
        if isinstance(other, TrigPoly):
            self._poly *= other._poly
            self._sin_cos_map.update(other._sin_cos_map)
        else:
            self._poly *= other
        return self

    def __itruediv__(self, scalar) -> "TrigPoly":
        self._poly /= scalar
        return self

    def __add__(self, other) -> "TrigPoly":
        ret = self.copy()
        ret += other
        return ret

    def __radd__(self, other) -> "TrigPoly":
        return self + other

    def __sub__(self, other) -> "TrigPoly":
        ret = self.copy()
        ret -= other
        return ret

    def __rsub__(self, other) -> "TrigPoly":
        ret = -self
        ret += other
        return ret

    def __mul__(self, other) -> "TrigPoly":
        ret = self.copy()
        ret *= other
        return ret

    def __rmul__(self, other) -> "TrigPoly":
        return self * other

    def __truediv__(self, scalar) -> "TrigPoly":
        ret = self.copy()
        ret /= scalar
        return ret

    def __neg__(self) -> "TrigPoly":
        return TrigPoly(-self._poly, self._sin_cos_map)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TrigPoly):
            return NotImplemented
        return self._poly == other._poly and self._sin_cos_map == other._sin_cos_map

    __hash__ = None

    def __str__(self) -> str:
        return str(self._poly)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._poly})"


def _check_argument(p: TrigPoly, func: str):
    poly = p._poly
    if poly.degree > 1:
        raise UnsupportedDegreeError(
            f"{func} of polynomials with degree > 1 is not supported"
        )
    monomials = poly.monomials
    for monomial in monomials:
        if len(monomial.terms) > 1:
            raise UnsupportedDegreeError(
                f"{func} of a product of variables ({monomial}) is not supported"
            )
    return monomials


def _placeholders(p: TrigPoly, monomial: Monomial, func: str) -> SinCosVars:
    var = monomial.terms[0].var
    sc = p._sin_cos_map.get(var)
    if sc is None:
        raise UnmappedVariableError(
            f"tried taking the {func} of {id_to_variable_name(var)}, "
            "which does not exist in the sin_cos_map"
        )
    k = monomial.coefficient
    if not is_finite_real(k) or int(k) != k:
        raise UnsupportedCoefficientError(
            f"{func} of {monomial} is not supported, coefficients must be integers"
        )
    return sc


def _split(p: TrigPoly, monomials):
    """Split ``a + b + ...`` into the first monomial and the rest."""
    a = TrigPoly(Polynomial.from_monomials(monomials[:1]), p._sin_cos_map)
    b = TrigPoly(Polynomial.from_monomials(monomials[1:]), p._sin_cos_map)
    return a, b


def _multiple_angle(p: TrigPoly, monomial: Monomial, sc: SinCosVars, func: str):
    """Return ``(sin(k*q), cos(k*q))`` for the monomial ``k*q``, ``k`` an integer.

    Built iteratively from ``sin(q)`` and ``cos(q)`` with

        sin((n+1)q) = sin(nq) cos(q) + cos(nq) sin(q)
        cos((n+1)q) = cos(nq) cos(q) - sin(nq) sin(q)
    """
    k = int(monomial.coefficient)
    s = TrigPoly(Polynomial.from_variable_id(sc.s), p._sin_cos_map)
    c = TrigPoly(Polynomial.from_variable_id(sc.c), p._sin_cos_map)
    logger.debug(f"Expanding {func}({monomial}) by {abs(k) - 1} angle additions")
    sin_n, cos_n = s, c
    for _ in range(abs(k) - 1):
        sin_n, cos_n = sin_n * c + cos_n * s, cos_n * c - sin_n * s
    if k < 0:
        sin_n = -sin_n
    return sin_n, cos_n


def sin(p: TrigPoly) -> TrigPoly:
    """Sine of a TrigPoly of degree 0 or 1.

    Raises
    ------
    UnsupportedDegreeError
        If *p* has degree > 1 or multiplies variables together.
    UnmappedVariableError
        If a variable of *p* has no sin/cos mapping.
    UnsupportedCoefficientError
        If a variable of *p* has a coefficient that is not a finite integer.
    """
    monomials = _check_argument(p, "sin")

    if not monomials:
        return TrigPoly(coeff_sin(0.0), p._sin_cos_map)

    if len(monomials) == 1:
        monomial = monomials[0]
        if monomial.is_constant:
            return TrigPoly(coeff_sin(monomial.coefficient), p._sin_cos_map)
        if monomial.coefficient == 0:
            return TrigPoly(coeff_sin(0.0), p._sin_cos_map)
        sc = _placeholders(p, monomial, "sin")
        if abs(monomial.coefficient) != 1:
            return _multiple_angle(p, monomial, sc, "sin")[0]
        ret = p.copy()
        # sin(-q) = -sin(q), the coefficient carries the sign
        ret._poly.subs(monomial.terms[0].var, sc.s)
        return ret

    # sin(a+b+...) = sin(a)cos(b+...) + cos(a)sin(b+...)
    a, b = _split(p, monomials)
    logger.debug(f"Expanding sin({p})")
    return sin(a) * cos(b) + cos(a) * sin(b)


def cos(p: TrigPoly) -> TrigPoly:
    """Cosine of a TrigPoly of degree 0 or 1.

    See :func:`sin` for the errors raised.
    """
    monomials = _check_argument(p, "cos")

    if not monomials:
        return TrigPoly(coeff_cos(0.0), p._sin_cos_map)

    if len(monomials) == 1:
        monomial = monomials[0]
        if monomial.is_constant:
            return TrigPoly(coeff_cos(monomial.coefficient), p._sin_cos_map)
        if monomial.coefficient == 0:
            return TrigPoly(coeff_cos(0.0), p._sin_cos_map)
        sc = _placeholders(p, monomial, "cos")
        if abs(monomial.coefficient) != 1:
            return _multiple_angle(p, monomial, sc, "cos")[1]
        ret = p.copy()
        ret._poly.subs(monomial.terms[0].var, sc.c)
        if monomial.coefficient == -1:
            ret *= -1  # cos(-q) => cos(q) => c (instead of -c)
        return ret

    # cos(a+b+...) = cos(a)cos(b+...) - sin(a)sin(b+...)
    a, b = _split(p, monomials)
    logger.debug(f"Expanding cos({p})")
    return cos(a) * cos(b) - sin(a) * sin(b)
