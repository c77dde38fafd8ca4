""" Public API for the :mod:`~polykit.algorithms` package.
"""

from .polynomial.base import Polynomial
from .polynomial.types import Monomial, Term
from .trig.base import TrigPoly, cos, sin
from .trig.types import SinCosVars

__all__ = [
    "Polynomial",
    "Monomial",
    "Term",
    "TrigPoly",
    "SinCosVars",
    "sin",
    "cos",
]
