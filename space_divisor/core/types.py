"""
Value types shared by the grid index.
"""

from dataclasses import dataclass
from typing import Optional
import numpy as np


@dataclass(frozen=True, eq=False)
class Normalizer:
    """
    Affine map from the data bounding box onto the unit hypercube.

    ``normalize(v) = (v - minimum) / scale`` component-wise.
    """

    minimum: np.ndarray
    scale: np.ndarray

    @classmethod
    def from_positions(cls, positions: np.ndarray, tolerance: float) -> "Normalizer":
        """
        Compute the normalizer from an (N, D) array of positions.

        Parameters
        ----------
        positions : np.ndarray
            Positions of every element, one per row
        tolerance : float
            Axes whose extent is at most this value get ``scale = 1``

        Returns
        -------
        normalizer : Normalizer
            Per-axis minimum and scale
        """
        minimum = positions.min(axis=0)
        maximum = positions.max(axis=0)
        scale = maximum - minimum
        # zero-extent axes would divide by zero
        scale[np.abs(scale) <= tolerance] = 1
        minimum.setflags(write=False)
        scale.setflags(write=False)
        return cls(minimum=minimum, scale=scale)

    @property
    def dimensions(self) -> int:
        return int(self.minimum.shape[0])

    def normalize(self, v: np.ndarray) -> np.ndarray:
        """Map ``v`` (a vector or an (N, D) array) into normalized space."""
        return (v - self.minimum) / self.scale

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "minimum": self.minimum.tolist(),
            "scale": self.scale.tolist(),
            "dtype": self.minimum.dtype.name,
        }

    @classmethod
    def from_dict(cls, d: dict, dtype: Optional[str] = None) -> "Normalizer":
        """Create from dictionary. ``dtype`` overrides the stored dtype."""
        dtype = np.dtype(dtype or d.get("dtype", "float64"))
        minimum = np.array(d["minimum"], dtype=dtype)
        scale = np.array(d["scale"], dtype=dtype)
        minimum.setflags(write=False)
        scale.setflags(write=False)
        return cls(minimum=minimum, scale=scale)
