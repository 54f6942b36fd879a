"""
Space Divisor - Uniform N-dimensional grid index for neighbor queries

Divides the bounding box of a fixed set of elements into a regular lattice
of roughly N cells, so elements near a point can be retrieved without
scanning the whole set.

Key Features:
- O(N) construction, read-only afterwards
- Validating direct cell access by coordinate, element or vector
- Cross-shaped neighbor query
- Expanding shell query that never revisits a cell

Example Usage:
    import numpy as np
    from space_divisor import SpaceDivisor

    points = np.random.default_rng(42).uniform(-1.5, 0.5, size=(1000, 2))

    with SpaceDivisor(range(len(points)), lambda i: points[i]) as grid:
        for radius in range(grid.cells_per_axis):
            found = [i for i in grid.expanded_near(0, radius) if i != 0]
            if found:
                break
"""

__version__ = "0.1.0"

from .core.types import Normalizer
from .core.errors import (
    ErrorCode,
    SpaceDivisorError,
    EmptyInputError,
    DimensionMismatchError,
    NonFiniteValueError,
    CellIndexOutOfRangeError,
    GridClosedError,
)
from .params import GridParams, validate_params
from .spatial import (
    SpaceDivisor,
    compute_cells_per_axis,
    enumerate_n_dimensional_space,
    hypercube_shell,
)
from .analysis import OccupancyReport, compute_occupancy

__all__ = [
    "Normalizer",
    "ErrorCode",
    "SpaceDivisorError",
    "EmptyInputError",
    "DimensionMismatchError",
    "NonFiniteValueError",
    "CellIndexOutOfRangeError",
    "GridClosedError",
    "GridParams",
    "validate_params",
    "SpaceDivisor",
    "compute_cells_per_axis",
    "enumerate_n_dimensional_space",
    "hypercube_shell",
    "OccupancyReport",
    "compute_occupancy",
]
