"""Types shared by the trigonometric polynomial layer."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SinCosVars:
    """Placeholder variables standing for the sine and cosine of an angle.

    Parameters
    ----------
    s : int
        Identifier of the variable representing ``sin(angle)``.
    c : int
        Identifier of the variable representing ``cos(angle)``.
    """
    s: int
    c: int


SinCosMap = Dict[int, SinCosVars]
