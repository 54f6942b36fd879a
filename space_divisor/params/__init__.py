"""Construction parameters and their validation."""

from .config import GridParams
from .validation import validate_params

__all__ = ["GridParams", "validate_params"]
