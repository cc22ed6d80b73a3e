"""
Tests for determinant() — signed pivot product with near-zero snapping.
"""

import math

import numpy as np
import pytest
import scipy.linalg

from numkernel import determinant
from numkernel.core.compute.tolerances import CPU_FP64
from numkernel.core.exceptions import DimensionError


class TestKnownValues:

    @pytest.mark.parametrize("matrix, expected", [
        ([[1, 5], [6, 2]], -28.0),
        ([[2, 2], [2, 3]], 2.0),
        ([[1, 2, 3], [0, 4, 5], [1, 0, 6]], 22.0),
        ([[0, 2, 3], [0, 4, 5], [1, 0, 6]], -2.0),
        ([[1, 0], [0, 1]], 1.0),
        ([[4, 8, 2], [4, 6, 8], [4, 2, 8]], 96.0),
        ([[-40.54, 34.02], [91.81, 57.47]], -5453.21),
    ])
    def test_matches_hand_computed(self, matrix, expected):
        a = np.asarray(matrix, dtype=np.float64)
        np.testing.assert_allclose(determinant(a.ravel(), a.shape[0]), expected, rtol=1e-12)

    def test_returns_python_float(self):
        assert type(determinant([2.0], 1)) is float

    def test_empty_matrix_is_one(self):
        assert determinant([], 0) == 1.0

    def test_matches_lapack(self, well_conditioned):
        a, n = well_conditioned
        expected = scipy.linalg.det(a.reshape(n, n))
        np.testing.assert_allclose(determinant(a, n), expected, rtol=CPU_FP64.rtol)


class TestSingular:

    def test_zero_row_is_exact_zero(self, singular_zero_row):
        a, n = singular_zero_row
        assert determinant(a, n) == 0.0

    def test_zero_is_positive_zero(self):
        """A swap followed by a zero pivot yields -0.0 internally; 0.0 is returned."""
        det = determinant([0, 0, 1, 2], 2)
        assert det == 0.0
        assert math.copysign(1.0, det) == 1.0

    def test_rank_deficient_noise_snapped(self):
        """1..16 has rank 2; elimination noise below 1e-15 is reported as 0."""
        assert determinant(np.arange(1.0, 17.0), 4) == 0.0

    def test_small_but_regular_not_snapped(self):
        """Only |det| < 1e-15 is snapped."""
        det = determinant([1e-7, 0, 0, 1e-7], 2)
        np.testing.assert_allclose(det, 1e-14, rtol=1e-12)

    def test_below_threshold_snapped(self):
        assert determinant([1e-8, 0, 0, 1e-8], 2) == 0.0


class TestValidation:

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            determinant([1, 2, 3], 2)
