"""Tests for grid parameters and validation."""

import pytest
import numpy as np
from space_divisor import GridParams, SpaceDivisor, validate_params


def test_default_params():
    params = GridParams()
    is_valid, warnings = validate_params(params)
    assert is_valid is True
    assert warnings == []
    assert params.resolved_tolerance() == np.finfo(np.float64).eps


def test_params_round_trip():
    params = GridParams(dtype="float32", degenerate_tolerance=1e-6)
    assert GridParams.from_dict(params.to_dict()) == params


def test_invalid_params():
    is_valid, warnings = validate_params(GridParams(dtype="int32", degenerate_tolerance=-1.0))
    assert is_valid is False
    assert len(warnings) == 2

    is_valid, warnings = validate_params(GridParams(dtype="not-a-dtype"))
    assert is_valid is False


def test_invalid_params_rejected_by_grid():
    with pytest.raises(ValueError, match="Invalid grid parameters"):
        SpaceDivisor([1.0], lambda v: [v], params=GridParams(dtype="int64"))


def test_float32_grid(points_2d):
    grid = SpaceDivisor(
        range(len(points_2d)), lambda i: points_2d[i], params=GridParams(dtype="float32")
    )
    assert grid.normalizer.minimum.dtype == np.float32
    assert sum(len(m) for _, m in grid.occupied_cells()) == len(points_2d)


def test_degenerate_tolerance():
    """Axes with extent below the tolerance are treated as constant."""
    points = np.array([[0.0, 0.0], [1.0, 1e-9], [0.5, 0.0], [0.25, 0.0]])
    grid = SpaceDivisor(
        range(4), lambda i: points[i], params=GridParams(degenerate_tolerance=1e-6)
    )
    assert grid.normalizer.scale[1] == 1.0
    assert grid.normalizer.scale[0] == 1.0
    assert all(grid.get_index(p)[1] == 0 for p in points)


def test_non_numeric_tolerance_is_reported():
    """A non-numeric tolerance is a validation warning, not a crash."""
    is_valid, warnings = validate_params(GridParams(degenerate_tolerance="tiny"))
    assert is_valid is False
    assert len(warnings) == 1
    assert "degenerate_tolerance" in warnings[0]

    is_valid, warnings = validate_params(GridParams(degenerate_tolerance=float("nan")))
    assert is_valid is False

    with pytest.raises(ValueError, match="degenerate_tolerance"):
        SpaceDivisor([1.0], lambda v: [v], params=GridParams(degenerate_tolerance="tiny"))
