"""Clamping of scalars and vectors, component-wise or by magnitude."""

from __future__ import annotations
import math
from typing import Optional
from boundednumbers import BoundType, bound_type_to_np_function
from boundednumbers.functions import clamp as bounded_clamp
import numpy as np
from numpy import ndarray

from ..assurance import assure_not_nan
from ..errors import InvalidArgument, InvalidBounds, ZeroMagnitude
from ..types.numeric_types import FLOAT_DTYPE, NumericValue, OptionalBound, Scalar, UNIT_INTERVAL, VectorBound, VectorLike
from ..utils.components import as_components, is_vector, per_axis_bounds


def validate_bounds(minimum: OptionalBound, maximum: OptionalBound) -> None:
    """
    Check that a pair of optional bounds describes a usable range.

    Raises:
        InvalidBounds: if both bounds are absent, either is NaN, or maximum < minimum
    """
    if minimum is None and maximum is None:
        raise InvalidBounds("borders are both absent; at least one bound is required")
    for name, bound in (("minimum", minimum), ("maximum", maximum)):
        if bound is not None and math.isnan(bound):
            raise InvalidBounds(f"{name} is NaN")
    if minimum is not None and maximum is not None and maximum < minimum:
        raise InvalidBounds(f"maximum {maximum!r} is lower than minimum {minimum!r}")


def _clamp_scalar(value: Scalar, minimum: OptionalBound, maximum: OptionalBound) -> Scalar:
    validate_bounds(minimum, maximum)
    value = assure_not_nan(value)
    if minimum is not None and value < minimum:
        value = minimum
    if maximum is not None and value > maximum:
        value = maximum
    return value


def clamp(value: NumericValue, minimum: VectorBound = None, maximum: VectorBound = None) -> NumericValue:
    """
    Clamp ``value`` between ``minimum`` and ``maximum``, borders included.

    Either bound may be ``None`` to leave that side open. Vectors are clamped
    per axis; a vector bound may be a scalar for every axis or one optional
    bound per axis.

    Args:
        value: Scalar or 2D/3D vector
        minimum: Lower border
        maximum: Upper border

    Returns:
        The clamped scalar (an int stays an int under int bounds), or a float array

    Raises:
        InvalidBounds: if both borders are absent or maximum < minimum (on any axis)
        InvalidNumericState: if the value (or a component) is NaN
    """
    if is_vector(value):
        components = as_components(value)
        size = components.shape[0]
        lows = per_axis_bounds(minimum, size, "minimum")
        highs = per_axis_bounds(maximum, size, "maximum")
        return np.array(
            [_clamp_scalar(c, lo, hi) for c, lo, hi in zip(components, lows, highs)],
            dtype=FLOAT_DTYPE,
        )

    if is_vector(minimum) or is_vector(maximum):
        raise InvalidArgument("vector bounds require a vector value")
    return _clamp_scalar(value, minimum, maximum)


def clamp_unit(value: NumericValue) -> NumericValue:
    """Clamp a scalar, or every component of a vector, to [0, 1]."""
    low, high = UNIT_INTERVAL
    if is_vector(value):
        fn = bound_type_to_np_function[BoundType.CLAMP]
        return np.asarray(fn(as_components(value), low, high), dtype=FLOAT_DTYPE)
    return float(bounded_clamp(value, low, high))


def clamp_magnitude(
        vector: VectorLike,
        minimum: Optional[Scalar] = None,
        maximum: Optional[Scalar] = None,
) -> ndarray:
    """
    Rescale ``vector`` so its length lies between ``minimum`` and ``maximum``.

    The direction is preserved. A vector whose length already satisfies the
    bounds is returned as is, without renormalizing.

    Raises:
        InvalidBounds: if a bound is negative, both are absent, or maximum < minimum
        ZeroMagnitude: if the vector has zero length
    """
    components = as_components(vector, "vector")
    if (minimum is not None and minimum < 0) or (maximum is not None and maximum < 0):
        raise InvalidBounds("magnitude borders need to be greater than or equal to 0")
    validate_bounds(minimum, maximum)

    current = float(np.linalg.norm(components))
    if current == 0:
        raise ZeroMagnitude("input vector must have a magnitude greater than 0")

    target = _clamp_scalar(current, minimum, maximum)
    if target == current:
        return components
    return components * (target / current)
