"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square():
    """2 x 2 matrix used throughout the arithmetic tests."""
    return Matrix([[1, 2], [3, 4]])


@pytest.fixture
def random_int_matrix(rng):
    """Factory for small random integer-valued matrices."""
    def make(n_rows, n_cols, low=-5, high=6):
        return Matrix(rng.integers(low, high, size=(n_rows, n_cols)).astype(np.float64))
    return make
