import pytest
import numpy as np
from space_divisor import SpaceDivisor


@pytest.fixture
def points_3d():
    """1000 points uniformly sampled in [-1.5, 0.5]^3."""
    rng = np.random.default_rng(1234)
    return rng.uniform(-1.5, 0.5, size=(1000, 3))


@pytest.fixture
def grid_3d(points_3d):
    """Grid over the indices of points_3d."""
    grid = SpaceDivisor(range(len(points_3d)), lambda i: points_3d[i])
    yield grid
    grid.close()


@pytest.fixture
def points_2d():
    """1000 points uniformly sampled in [-1.5, 0.5]^2."""
    rng = np.random.default_rng(42)
    return rng.uniform(-1.5, 0.5, size=(1000, 2))


@pytest.fixture
def grid_2d(points_2d):
    """Grid over the indices of points_2d."""
    grid = SpaceDivisor(range(len(points_2d)), lambda i: points_2d[i])
    yield grid
    grid.close()
