"""
Error types raised by the grid index.
"""

from enum import Enum
from typing import Optional


class ErrorCode(Enum):
    """Standard error codes attached to every raised error."""
    EMPTY_INPUT = "EMPTY_INPUT"
    DIMENSION_MISMATCH = "DIMENSION_MISMATCH"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"
    GRID_CLOSED = "GRID_CLOSED"
    NON_FINITE_VALUE = "NON_FINITE_VALUE"


class SpaceDivisorError(Exception):
    """Base class for all grid index errors."""

    code: Optional[ErrorCode] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code.value if self.code else None,
            "message": str(self),
        }


class EmptyInputError(SpaceDivisorError, ValueError):
    """Grid was constructed from an empty collection."""
    code = ErrorCode.EMPTY_INPUT


class DimensionMismatchError(SpaceDivisorError, ValueError):
    """A vector or index has the wrong number of components."""
    code = ErrorCode.DIMENSION_MISMATCH


class NonFiniteValueError(SpaceDivisorError, ValueError):
    """A position or query vector contains NaN or infinity."""
    code = ErrorCode.NON_FINITE_VALUE


class CellIndexOutOfRangeError(SpaceDivisorError, IndexError):
    """A cell coordinate lies outside ``[0, cells_per_axis)``."""
    code = ErrorCode.INDEX_OUT_OF_RANGE


class GridClosedError(SpaceDivisorError, RuntimeError):
    """The grid storage was already released."""
    code = ErrorCode.GRID_CLOSED
