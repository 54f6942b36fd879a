"""Core data structures and errors for the grid index."""

from .types import Normalizer
from .errors import (
    ErrorCode,
    SpaceDivisorError,
    EmptyInputError,
    DimensionMismatchError,
    NonFiniteValueError,
    CellIndexOutOfRangeError,
    GridClosedError,
)

__all__ = [
    "Normalizer",
    "ErrorCode",
    "SpaceDivisorError",
    "EmptyInputError",
    "DimensionMismatchError",
    "NonFiniteValueError",
    "CellIndexOutOfRangeError",
    "GridClosedError",
]
