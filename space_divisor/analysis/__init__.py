"""Analysis functions for built grids."""

from .occupancy import OccupancyReport, compute_occupancy

__all__ = ["OccupancyReport", "compute_occupancy"]
