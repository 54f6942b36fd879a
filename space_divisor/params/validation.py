"""Parameter validation for GridParams."""

import numbers
from typing import List, Tuple
import numpy as np
from .config import GridParams


def validate_params(params: GridParams) -> Tuple[bool, List[str]]:
    """
    Validate GridParams.

    Parameters
    ----------
    params : GridParams
        Parameters to validate

    Returns
    -------
    is_valid : bool
        True if all parameters are valid
    warnings : list of str
        List of validation errors
    """
    warnings = []

    try:
        dtype = np.dtype(params.dtype)
    except TypeError:
        warnings.append(f"dtype = {params.dtype!r} is not a numpy dtype")
    else:
        if not np.issubdtype(dtype, np.floating):
            warnings.append(f"dtype = {params.dtype!r} is not a floating point dtype")

    tol = params.degenerate_tolerance
    if tol is not None and (
        isinstance(tol, bool)
        or not isinstance(tol, numbers.Real)
        or not (np.isfinite(tol) and tol >= 0)
    ):
        warnings.append(
            f"degenerate_tolerance = {tol!r} must be a finite, non-negative number"
        )

    return len(warnings) == 0, warnings
