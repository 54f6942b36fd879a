"""
Occupancy statistics for a built grid.
"""

from dataclasses import dataclass, asdict
import numpy as np
from ..spatial.grid_index import SpaceDivisor


@dataclass
class OccupancyReport:
    """How evenly elements are spread over the grid cells."""

    cell_count: int
    occupied_cells: int
    empty_cells: int
    max_bucket_size: int
    mean_bucket_size: float
    fill_ratio: float

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)


def compute_occupancy(grid: SpaceDivisor) -> OccupancyReport:
    """
    Compute bucket statistics for a grid.

    Skewed data shows up as a low ``fill_ratio`` together with a
    ``max_bucket_size`` far above ``mean_bucket_size``.

    Parameters
    ----------
    grid : SpaceDivisor
        Grid to analyze

    Returns
    -------
    report : OccupancyReport
        Occupancy statistics
    """
    sizes = np.array([len(bucket) for _, bucket in grid.occupied_cells()], dtype=int)
    occupied = int(sizes.size)

    return OccupancyReport(
        cell_count=grid.cell_count,
        occupied_cells=occupied,
        empty_cells=grid.cell_count - occupied,
        max_bucket_size=int(sizes.max()) if occupied else 0,
        mean_bucket_size=float(sizes.mean()) if occupied else 0.0,
        fill_ratio=occupied / grid.cell_count,
    )
