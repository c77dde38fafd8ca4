"""Multivariate polynomial module public API.

Exposes the polynomial container, its building blocks, the variable naming
scheme and the symengine converters.
"""

from .base import Polynomial
from .conversion import polynomial_to_symengine, symengine_to_polynomial
from .naming import (NAMING, NO_VARIABLE, NamingTable, decode_variable_id,
                     id_to_variable_name, is_valid_variable_name,
                     split_variable_name, variable_name_to_id)
from .types import Monomial, Term

__all__ = [
    "Polynomial",
    "Monomial",
    "Term",
    "NAMING",
    "NO_VARIABLE",
    "NamingTable",
    "decode_variable_id",
    "id_to_variable_name",
    "is_valid_variable_name",
    "split_variable_name",
    "variable_name_to_id",
    "polynomial_to_symengine",
    "symengine_to_polynomial",
]
