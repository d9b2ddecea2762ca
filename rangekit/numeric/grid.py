from __future__ import annotations
import math
from typing import Any
import numpy as np

from ..errors import InvalidArgument
from ..types.numeric_types import FLOAT_DTYPE, GRID_TOLERANCE, NumericValue, Scalar
from ..utils.components import as_components, is_close_to_int, is_integer, is_vector, match_dimension


def _round_half_away(x: float) -> float:
    # no abs(x) + 0.5: that sum rounds up for values just below one half
    whole = float(math.trunc(x))
    if abs(x - whole) >= 0.5:
        return whole + math.copysign(1.0, x)
    return whole


def _snap_scalar(value: Scalar, grid_size: Scalar) -> Scalar:
    if grid_size == 0:
        raise InvalidArgument("grid size must not be zero")
    steps = _round_half_away(value / grid_size)
    if is_integer(value) and is_integer(grid_size):
        return int(steps) * grid_size
    return steps * grid_size


def snap(value: NumericValue, grid_size: NumericValue) -> NumericValue:
    """
    Round ``value`` to the nearest multiple of ``grid_size``.

    Ties round away from zero. Vectors snap per axis against a scalar grid
    size or one grid size per axis. Integer input on an integer grid stays
    integral.

    Raises:
        InvalidArgument: if a grid size is zero
    """
    if is_vector(value):
        components = as_components(value)
        grid = match_dimension(grid_size, components.shape[0], "grid_size")
        return np.array([_snap_scalar(float(c), float(g)) for c, g in zip(components, grid)], dtype=FLOAT_DTYPE)
    if is_vector(grid_size):
        raise InvalidArgument("vector grid size requires a vector value")
    return _snap_scalar(value, grid_size)


def is_on_grid(value: Scalar, grid_size: Scalar, tol: float = GRID_TOLERANCE) -> bool:
    """Check whether ``value`` is an integral multiple of ``grid_size`` within ``tol``."""
    if grid_size == 0:
        raise InvalidArgument("grid size must not be zero")
    return is_close_to_int(value / grid_size, tol)


def is_even(value: Any) -> bool:
    """True if ``value`` is divisible by two, negative integers included."""
    if not is_integer(value):
        raise InvalidArgument(f"is_even expects an integer, got {value!r}")
    return bool(value % 2 == 0)
