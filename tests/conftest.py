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
def square_matrix(rng):
    """Well-conditioned 4x4 float matrix (diagonally dominant)."""
    A = rng.standard_normal((4, 4)) + 4.0 * np.eye(4)
    return Matrix(A)


@pytest.fixture
def singular_matrix():
    """3x3 matrix whose third row is the sum of the first two."""
    return Matrix([[1, 2, 3], [4, 5, 6], [5, 7, 9]])
