"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Diagonally dominant 5x5 matrix as (flat buffer, n)."""
    n = 5
    a = rng.standard_normal((n, n)) + n * np.eye(n)
    return a.ravel(), n


@pytest.fixture
def singular_zero_row():
    """3x3 matrix whose last row is zero."""
    a = np.array([
        [2.0, 1.0, 3.0],
        [4.0, -1.0, 0.5],
        [0.0, 0.0, 0.0],
    ])
    return a.ravel(), 3
