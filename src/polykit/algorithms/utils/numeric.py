"""
Numeric helpers for polynomial coefficients.

Coefficients are not restricted to ``float``: complex numbers, mpmath
numbers and derivative-carrying types used by differentiation-aware callers
all flow through the same code paths. The functions below dispatch the few
transcendental operations the algebra needs on the coefficient type, and
provide arbitrary precision root-finding through mpmath.
"""

import cmath
import math
from functools import singledispatch
from numbers import Complex, Real
from typing import Sequence

import mpmath as mp
import numpy as np
from mpmath.libmp import NoConvergence

from polykit.algorithms.utils.config import (MPMATH_DPS, MPMATH_MAXSTEPS,
                                             NUMPY_DTYPE_COMPLEX)
from polykit.algorithms.utils.exceptions import ConvergenceError


@singledispatch
def coeff_sin(value):
    """Sine of a coefficient.

    Falls back to :func:`numpy.sin`, which also handles objects exposing a
    ``sin()`` method.
    """
    return np.sin(value)


@coeff_sin.register(Real)
def _(value):
    return math.sin(value)


@coeff_sin.register(Complex)
def _(value):
    return cmath.sin(value)


@coeff_sin.register(mp.mpf)
@coeff_sin.register(mp.mpc)
def _(value):
    return mp.sin(value)


@singledispatch
def coeff_cos(value):
    """Cosine of a coefficient. See :func:`coeff_sin`."""
    return np.cos(value)


@coeff_cos.register(Real)
def _(value):
    return math.cos(value)


@coeff_cos.register(Complex)
def _(value):
    return cmath.cos(value)


@coeff_cos.register(mp.mpf)
@coeff_cos.register(mp.mpc)
def _(value):
    return mp.cos(value)


def with_precision(precision: int = None):
    """
    Context manager for setting mpmath precision.
    
    Parameters
    ----------
    precision : int, optional
        Number of decimal places. If None, uses MPMATH_DPS from config.
    """
    if precision is None:
        precision = MPMATH_DPS
    return mp.workdps(precision)


def high_precision_polyroots(coefficients: Sequence, precision: int = None) -> np.ndarray:
    """
    Find all roots of a univariate polynomial with mpmath.

    Parameters
    ----------
    coefficients : sequence
        Dense coefficients ordered by increasing power. The leading
        (last) coefficient must be non-zero.
    precision : int, optional
        Number of decimal places. If None, uses MPMATH_DPS from config.

    Returns
    -------
    numpy.ndarray
        Complex roots, rounded to the configured complex dtype.

    Raises
    ------
    ConvergenceError
        If mpmath does not converge within MPMATH_MAXSTEPS iterations.
    """
    with with_precision(precision):
        mp_coeffs = [mp.mpmathify(c) for c in reversed(list(coefficients))]
        try:
            roots = mp.polyroots(mp_coeffs, maxsteps=MPMATH_MAXSTEPS, extraprec=2 * mp.mp.prec)
        except NoConvergence as exc:
            raise ConvergenceError(
                f"mpmath.polyroots did not converge in {MPMATH_MAXSTEPS} steps"
            ) from exc
        if not isinstance(roots, (list, tuple)):
            roots = [roots]
        return np.array([complex(r) for r in roots], dtype=np.dtype(NUMPY_DTYPE_COMPLEX))


def is_finite_real(value) -> bool:
    """Whether *value* is a finite real scalar (Python, numpy or mpmath)."""
    if isinstance(value, mp.mpf):
        return bool(mp.isfinite(value))
    return isinstance(value, Real) and math.isfinite(value)
