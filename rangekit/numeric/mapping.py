"""Linear, unclamped mapping between ranges for scalars and 2D/3D vectors."""

from __future__ import annotations
from typing import Any, Tuple
import numpy as np
from numpy import ndarray

from ..errors import DegenerateDomain, InvalidArgument
from ..types.numeric_types import NumericValue
from ..utils.components import as_components, is_vector, match_dimension


def _vector_operands(value: Any, **ranges: Any) -> Tuple[ndarray, ...]:
    """Value components followed by each range argument matched to the same axes."""
    if not is_vector(value):
        offending = [name for name, r in ranges.items() if is_vector(r)]
        raise InvalidArgument(f"scalar value cannot be mapped with vector ranges {offending}")
    components = as_components(value)
    size = components.shape[0]
    return (components,) + tuple(match_dimension(r, size, name) for name, r in ranges.items())


def _check_extent(in_low: Any, in_high: Any) -> None:
    extent = np.subtract(in_high, in_low)
    if np.any(extent == 0):
        if np.ndim(extent) == 0:
            raise DegenerateDomain("input space needs to have an extent")
        axes = np.flatnonzero(extent == 0).tolist()
        raise DegenerateDomain(f"input space needs to have an extent on every axis, axes {axes} have none")


def map_range(
        value: NumericValue,
        in_low: NumericValue,
        in_high: NumericValue,
        out_low: NumericValue,
        out_high: NumericValue,
) -> NumericValue:
    """
    Map ``value`` linearly from [in_low, in_high] onto [out_low, out_high].

    The map is not clamped, so values outside the input range extrapolate.
    Vectors are mapped per axis, each axis with its own pair of ranges;
    scalar range arguments apply to every axis.

    Raises:
        DegenerateDomain: if ``in_high - in_low`` is zero (on any axis)
    """
    if is_vector(value) or any(is_vector(r) for r in (in_low, in_high, out_low, out_high)):
        v, a, b, c, d = _vector_operands(
            value, in_low=in_low, in_high=in_high, out_low=out_low, out_high=out_high
        )
        _check_extent(a, b)
        return (v - a) / (b - a) * (d - c) + c

    _check_extent(in_low, in_high)
    return (value - in_low) / (in_high - in_low) * (out_high - out_low) + out_low


def map_from_unit(value: NumericValue, out_low: NumericValue, out_high: NumericValue) -> NumericValue:
    """Map [0, 1] onto [out_low, out_high]; used for normalized data and lerping."""
    if is_vector(value) or is_vector(out_low) or is_vector(out_high):
        v, c, d = _vector_operands(value, out_low=out_low, out_high=out_high)
        return v * (d - c) + c
    return value * (out_high - out_low) + out_low


def map_to_unit(value: NumericValue, in_low: NumericValue, in_high: NumericValue) -> NumericValue:
    """
    Normalize ``value`` from [in_low, in_high] onto [0, 1].

    Raises:
        DegenerateDomain: if the input interval has no extent (on any axis)
    """
    if is_vector(value) or is_vector(in_low) or is_vector(in_high):
        v, a, b = _vector_operands(value, in_low=in_low, in_high=in_high)
        _check_extent(a, b)
        return (v - a) / (b - a)

    _check_extent(in_low, in_high)
    return (value - in_low) / (in_high - in_low)

