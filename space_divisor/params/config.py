"""
Construction parameters for the grid index.
"""

from dataclasses import dataclass, asdict
from typing import Optional
import numpy as np


@dataclass
class GridParams:
    """
    Parameters controlling how a grid is built.

    Attributes
    ----------
    dtype : str
        Floating point dtype positions are converted to
    degenerate_tolerance : float, optional
        Axes whose extent is at most this value are treated as constant.
        Defaults to the machine epsilon of ``dtype``.
    """

    dtype: str = "float64"
    degenerate_tolerance: Optional[float] = None

    def resolved_tolerance(self) -> float:
        """Tolerance actually used for degenerate axes."""
        if self.degenerate_tolerance is not None:
            return float(self.degenerate_tolerance)
        return float(np.finfo(np.dtype(self.dtype)).eps)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict) -> "GridParams":
        """Create from dictionary."""
        return cls(
            dtype=d.get("dtype", "float64"),
            degenerate_tolerance=d.get("degenerate_tolerance"),
        )
