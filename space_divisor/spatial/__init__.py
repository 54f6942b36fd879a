"""Grid index and lattice enumeration."""

from .grid_index import SpaceDivisor, compute_cells_per_axis
from .shell import enumerate_n_dimensional_space, hypercube_shell

__all__ = [
    "SpaceDivisor",
    "compute_cells_per_axis",
    "enumerate_n_dimensional_space",
    "hypercube_shell",
]
