"""
Tests for factorize() — LUSolution and its derived quantities.
"""

import numpy as np
import pytest

from numkernel import factorize, determinant, inverse, lu
from numkernel.core.exceptions import DimensionError, SingularMatrixError
from numkernel.linalg import LUSolution


class TestLUSolution:

    def test_type_and_metadata(self, well_conditioned):
        a, n = well_conditioned
        sol = factorize(a, n, n)
        assert isinstance(sol, LUSolution)
        assert sol.backend_name == 'cpu_lu'
        assert sol.info['method'] == 'doolittle'
        assert sol.info['zero_pivots'] == []
        assert 'elimination' in sol.timing
        assert sol.warnings == ()

    def test_encode_matches_lu(self, well_conditioned):
        a, n = well_conditioned
        np.testing.assert_array_equal(factorize(a, n, n).encode(), lu(a, n, n))

    def test_agrees_with_flat_functions(self, well_conditioned):
        """determinant() and inverse() come from the same elimination."""
        a, n = well_conditioned
        sol = factorize(a, n, n)
        assert sol.determinant() == determinant(a, n)
        np.testing.assert_array_equal(sol.inverse(), inverse(a, n))

    def test_solve(self):
        sol = factorize([3, 2, 5, 2], 2, 2)
        np.testing.assert_allclose(sol.solve([7, 9]), [1.0, 2.0], rtol=1e-12)

    def test_permutation_matrix(self):
        sol = factorize([3, 2, 5, 2], 2, 2)
        np.testing.assert_array_equal(sol.permutation_matrix, [[0, 1], [1, 0]])
        assert sol.sign == -1


class TestSingularFactorization:

    def test_zero_pivot_recorded(self):
        sol = factorize([0, 1, 0, 2], 2, 2)
        assert sol.info['zero_pivots'] == [0]
        assert "zero pivot at column 0" in sol.warnings
        assert sol.is_singular

    def test_determinant_zero(self, singular_zero_row):
        a, n = singular_zero_row
        assert factorize(a, n, n).determinant() == 0.0

    def test_inverse_raises(self, singular_zero_row):
        a, n = singular_zero_row
        with pytest.raises(SingularMatrixError) as exc_info:
            factorize(a, n, n).inverse()
        assert exc_info.value.pivot_index == 2


class TestRectangular:

    def test_rectangular_factors(self, rng):
        a = rng.standard_normal((4, 2))
        sol = factorize(a.ravel(), 4, 2)
        np.testing.assert_allclose(sol.permutation_matrix @ a, sol.lower @ sol.upper,
                                   atol=1e-12)

    def test_square_only_operations(self, rng):
        sol = factorize(rng.standard_normal(6), 2, 3)
        with pytest.raises(DimensionError, match="square"):
            sol.determinant()
        with pytest.raises(DimensionError):
            sol.is_singular
