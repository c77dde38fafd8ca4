import math

import mpmath as mp
import numpy as np
import pytest

from polykit.algorithms.polynomial.algebra import (_companion_matrix,
                                                   _companion_roots,
                                                   _poly_eval_complex,
                                                   _poly_eval_real,
                                                   _trim_leading_zeros)
from polykit.algorithms.utils.numeric import (coeff_cos, coeff_sin,
                                              high_precision_polyroots,
                                              with_precision)


def test_poly_eval_real():
    coeffs = np.array([1.0, -3.0, 0.0, 2.0])
    for x in (-1.5, 0.0, 2.0):
        assert _poly_eval_real(coeffs, x) == pytest.approx(1.0 - 3.0 * x + 2.0 * x**3)


def test_poly_eval_complex():
    coeffs = np.array([1.0, 0.0, 1.0], dtype=np.complex128)
    assert abs(_poly_eval_complex(coeffs, 1j)) < 1e-15
    assert _poly_eval_complex(coeffs, 2.0 + 0j) == pytest.approx(5.0)


def test_companion_matrix():
    # x^2 - 5x + 6
    companion = _companion_matrix(np.array([6.0, -5.0, 1.0], dtype=np.complex128))
    np.testing.assert_allclose(companion, [[0.0, -6.0], [1.0, 5.0]])


def test_companion_matrix_scales_by_leading_coefficient():
    companion = _companion_matrix(np.array([12.0, -10.0, 2.0], dtype=np.complex128))
    np.testing.assert_allclose(companion, [[0.0, -6.0], [1.0, 5.0]])


def test_companion_roots():
    roots = np.sort_complex(_companion_roots(np.array([6.0, -5.0, 1.0])))
    np.testing.assert_allclose(roots, [2.0, 3.0], atol=1e-12)


def test_trim_leading_zeros():
    np.testing.assert_array_equal(_trim_leading_zeros(np.array([1.0, 2.0, 0.0, 0.0])), [1.0, 2.0])
    np.testing.assert_array_equal(_trim_leading_zeros(np.array([0.0, 0.0])), [0.0])
    np.testing.assert_array_equal(_trim_leading_zeros(np.array([0.0, 3.0])), [0.0, 3.0])


def test_high_precision_polyroots():
    roots = np.sort_complex(high_precision_polyroots([6.0, -5.0, 1.0]))
    assert roots.dtype == np.complex128
    np.testing.assert_allclose(roots, [2.0, 3.0], atol=1e-12)


def test_high_precision_polyroots_restores_precision():
    dps = mp.mp.dps
    high_precision_polyroots([-2.0, 0.0, 1.0], precision=80)
    assert mp.mp.dps == dps


def test_with_precision():
    with with_precision(30):
        assert mp.mp.dps == 30


def test_coefficient_trig_dispatch():
    assert coeff_sin(0.5) == math.sin(0.5)
    assert coeff_cos(2) == math.cos(2)
    assert coeff_sin(1j) == pytest.approx(complex(0.0, math.sinh(1.0)))
    assert isinstance(coeff_sin(mp.mpf("0.5")), mp.mpf)
    assert isinstance(coeff_cos(mp.mpc(1, 1)), mp.mpc)
    np.testing.assert_allclose(coeff_cos(np.array([0.0, math.pi])), [1.0, -1.0])
