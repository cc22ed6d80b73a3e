"""
Tests for solve() — A·X = B through the LU factors.
"""

import numpy as np
import pytest
import scipy.linalg

from numkernel import solve
from numkernel.core.compute.tolerances import CPU_FP64
from numkernel.core.exceptions import DimensionError, SingularMatrixError


class TestSolve:

    def test_2x2_single_rhs(self):
        """3x + 2y = 7, 5x + 2y = 9 gives x = 1, y = 2."""
        result = solve([3, 2, 5, 2], [7, 9], 2)
        np.testing.assert_allclose(result, [1.0, 2.0], rtol=1e-12)

    def test_multiple_rhs_matches_lapack(self, rng, well_conditioned):
        a, n = well_conditioned
        b = rng.standard_normal((n, 3))
        result = solve(a, b.ravel(), n, 3)
        expected = scipy.linalg.solve(a.reshape(n, n), b)
        assert result.shape == (n * 3,)
        np.testing.assert_allclose(result, expected.ravel(),
                                   rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_residual(self, rng, well_conditioned):
        a, n = well_conditioned
        b = rng.standard_normal(n)
        x = solve(a, b, n)
        np.testing.assert_allclose(a.reshape(n, n) @ x, b, atol=1e-12)


class TestSolveErrors:

    def test_singular_raises(self, singular_zero_row):
        a, n = singular_zero_row
        with pytest.raises(SingularMatrixError, match="singular"):
            solve(a, np.ones(n), n)

    def test_rhs_length_mismatch(self):
        with pytest.raises(DimensionError, match="b: expected 4 values"):
            solve([1, 0, 0, 1], [1, 2, 3], 2, 2)
