"""Multivariate polynomials with a trigonometric extension.

Examples
--------
>>> from polykit import Polynomial, TrigPoly, cos
>>> x = TrigPoly.from_angle(Polynomial("x"), Polynomial("s"), Polynomial("c"))
>>> print(cos(x + x))
c1^2 + -1*s1^2
"""

from .algorithms.polynomial import (Monomial, Polynomial, Term,
                                    decode_variable_id, id_to_variable_name,
                                    polynomial_to_symengine,
                                    symengine_to_polynomial,
                                    variable_name_to_id)
from .algorithms.trig import SinCosVars, TrigPoly, cos, sin
from .algorithms.utils.exceptions import (ConvergenceError, IdOverflowError,
                                          InvalidDegreeError,
                                          InvalidNameError, PolykitError,
                                          UnknownVariableError,
                                          UnmappedVariableError,
                                          UnsupportedCoefficientError,
                                          UnsupportedDegreeError,
                                          UnsupportedOperationError)

__version__ = "0.1.0"

__all__ = [
    "Polynomial",
    "Monomial",
    "Term",
    "TrigPoly",
    "SinCosVars",
    "sin",
    "cos",
    "variable_name_to_id",
    "decode_variable_id",
    "id_to_variable_name",
    "polynomial_to_symengine",
    "symengine_to_polynomial",
    "PolykitError",
    "UnsupportedOperationError",
    "UnknownVariableError",
    "InvalidNameError",
    "IdOverflowError",
    "UnmappedVariableError",
    "UnsupportedDegreeError",
    "UnsupportedCoefficientError",
    "InvalidDegreeError",
    "ConvergenceError",
]
