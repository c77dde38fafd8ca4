"""Numba kernels operating on dense univariate coefficient vectors.

Coefficient vectors are ordered by increasing power, ``c[i]`` being the
coefficient of ``x**i``.
"""

import numpy as np
from numba import njit

from polykit.algorithms.utils.config import FASTMATH


@njit(fastmath=FASTMATH, cache=True)
def _poly_eval_real(coeffs: np.ndarray, x: float) -> float:
    """Evaluate a real coefficient vector at *x* with Horner's scheme."""
    acc = 0.0
    for i in range(coeffs.shape[0] - 1, -1, -1):
        acc = acc * x + coeffs[i]
    return acc


@njit(fastmath=FASTMATH, cache=True)
def _poly_eval_complex(coeffs: np.ndarray, z: complex) -> complex:
    """Evaluate a complex coefficient vector at *z* with Horner's scheme."""
    acc = 0.0 + 0.0j
    for i in range(coeffs.shape[0] - 1, -1, -1):
        acc = acc * z + coeffs[i]
    return acc


@njit(fastmath=FASTMATH, cache=True)
def _companion_matrix(coeffs: np.ndarray) -> np.ndarray:
    """Companion matrix whose eigenvalues are the roots of *coeffs*.

    The leading coefficient ``coeffs[-1]`` must be non-zero.
    """
    n = coeffs.shape[0] - 1
    companion = np.zeros((n, n), dtype=np.complex128)
    lead = coeffs[n]
    for i in range(1, n):
        companion[i, i - 1] = 1.0
    for i in range(n):
        companion[i, n - 1] = -coeffs[i] / lead
    return companion


def _trim_leading_zeros(coeffs: np.ndarray) -> np.ndarray:
    """Drop exactly-zero coefficients of the highest powers."""
    nonzero = np.flatnonzero(coeffs)
    if nonzero.size == 0:
        return coeffs[:1]
    return coeffs[: nonzero[-1] + 1]


def _companion_roots(coeffs: np.ndarray) -> np.ndarray:
    """Roots of a dense coefficient vector of degree >= 2."""
    companion = _companion_matrix(np.asarray(coeffs, dtype=np.complex128))
    return np.linalg.eigvals(companion)
