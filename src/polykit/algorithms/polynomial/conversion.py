"""Conversion between :class:`Polynomial` objects and symengine expressions.

Symbols are named after the rendered variable names (``x1``, ``s1`` ...), so
a round trip through symengine preserves the variable identifiers.
"""

from __future__ import annotations

import symengine as se

from polykit.algorithms.polynomial.base import Polynomial
from polykit.algorithms.polynomial.naming import (id_to_variable_name,
                                                  split_variable_name,
                                                  variable_name_to_id)
from polykit.algorithms.polynomial.types import Monomial, Term


def polynomial_to_symengine(poly: Polynomial) -> se.Basic:
    """Build the symengine expression of *poly*."""
    expr = se.Integer(0)
    for monomial in poly.monomials:
        term_expr = se.sympify(monomial.coefficient)
        for term in monomial.terms:
            term_expr = term_expr * se.Symbol(id_to_variable_name(term.var)) ** term.power
        expr = expr + term_expr
    return expr


def _numeric_coefficient(coeff_expr: se.Basic, term: se.Basic) -> float | complex:
    """Evaluate a numeric symengine coefficient to a Python number."""
    eval_coeff = coeff_expr.evalf()
    if isinstance(eval_coeff, (se.ComplexMPC, se.ComplexDouble)):
        return complex(eval_coeff)
    if isinstance(eval_coeff, (se.Integer, se.Rational, se.Float, se.RealDouble)):
        return float(eval_coeff)
    raise TypeError(
        f"Term '{term}' has an unresolved symbolic coefficient '{eval_coeff}'. "
        "All symbolic parameters should be substituted with numerical values before conversion."
    )


def _extract_symengine_term(term: se.Basic) -> Monomial:
    """
    Extracts coefficient and terms from a single symengine monomial
    (coeff * var1**exp1 * var2**exp2 ...).
    """
    if isinstance(term, se.Mul):
        factors = term.args
    else:
        factors = [term]

    coefficient = 1.0
    terms = []
    for factor in factors:
        if isinstance(factor, se.Pow):
            base, exp_obj = factor.args
            if not isinstance(exp_obj, se.Integer) or int(exp_obj) < 1:
                raise ValueError(f"Exponent in Pow '{factor}' is not a positive integer: {exp_obj}")
            if not isinstance(base, se.Symbol):
                raise ValueError(f"Base of '{factor}' in term '{term}' is not a symbol")
            terms.append(Term(_symbol_to_id(base), int(exp_obj)))
        elif isinstance(factor, se.Symbol):
            terms.append(Term(_symbol_to_id(factor), 1))
        elif isinstance(factor, se.Number):
            coefficient = coefficient * _numeric_coefficient(factor, term)
        else:
            raise ValueError(f"Unexpected factor type '{type(factor)}' (value: {factor}) in term '{term}'")
    return Monomial.create(coefficient, terms)


def _symbol_to_id(symbol: se.Symbol) -> int:
    name, m = split_variable_name(str(symbol))
    return variable_name_to_id(name, m)


def symengine_to_polynomial(expr: se.Basic) -> Polynomial:
    """
    Converts a symengine expression to a :class:`Polynomial`.

    The expression is expanded first. Every symbol must be a valid rendered
    variable name such as ``x`` or ``q12``.

    Raises
    ------
    ValueError
        If a term is not a monomial with positive integer exponents.
    TypeError
        If a coefficient is not numeric.
    InvalidNameError
        If a symbol name is not a valid variable name.
    """
    expanded_expr = se.expand(se.sympify(expr))

    if isinstance(expanded_expr, se.Add):
        terms_to_process = expanded_expr.args
    elif expanded_expr != 0:
        terms_to_process = [expanded_expr]
    else:
        terms_to_process = []

    return Polynomial.from_monomials(_extract_symengine_term(t) for t in terms_to_process)
