"""Trigonometric polynomial module public API."""

from .base import TrigPoly, cos, sin
from .types import SinCosMap, SinCosVars

__all__ = [
    "TrigPoly",
    "sin",
    "cos",
    "SinCosMap",
    "SinCosVars",
]
