"""
Angle helpers for 2D directions.

Angles are in degrees. Directions are measured from "up" (0, 1) with
counter-clockwise positive, so "left" (-1, 0) is 90 and "right" (1, 0) is 270
once mapped to the reflex range [0, 360).
"""

from __future__ import annotations
import math
from boundednumbers.functions import cyclic_wrap_float
import numpy as np

from ..assurance import assure_not_nan
from ..errors import InvalidArgument, InvalidNumericState, ZeroMagnitude
from ..types.numeric_types import DEFAULT_DIVISIONS, FULL_TURN, UP, Scalar, VectorLike
from ..utils.components import as_components, is_integer


def reflex_angle(angle: Scalar) -> Scalar:
    """Map a signed angle in (-180, 180] onto [0, 360) by adding 360 to negatives."""
    return angle + FULL_TURN if angle < 0 else angle


def _as_vector2(vector: VectorLike, name: str) -> np.ndarray:
    components = as_components(vector, name)
    if components.shape[0] != 2:
        raise InvalidArgument(f"{name} must be a 2D vector, got {components.shape[0]} components")
    return components


def signed_angle(source: VectorLike, target: VectorLike) -> float:
    """Signed angle in degrees from ``source`` to ``target``, counter-clockwise positive."""
    a = _as_vector2(source, "source")
    b = _as_vector2(target, "target")
    cross = a[0] * b[1] - a[1] * b[0]
    dot = a[0] * b[0] + a[1] * b[1]
    return math.degrees(math.atan2(cross, dot))


def direction_angle(vector: VectorLike) -> float:
    """
    Direction of ``vector`` in [0, 360), counter-clockwise from up.

    Raises:
        InvalidNumericState: if a component is NaN
        ZeroMagnitude: if the vector has zero length
    """
    components = assure_not_nan(_as_vector2(vector, "vector"))
    if not np.any(components):
        raise ZeroMagnitude("a zero vector has no direction")
    return reflex_angle(signed_angle(UP, components))


def quadrant_index(
        vector: VectorLike,
        divisions: int = DEFAULT_DIVISIONS,
        angle_offset: Scalar = 0.0,
) -> int:
    """
    Index of the circle sector that contains the direction of ``vector``.

    The full turn is split into ``divisions`` equal sectors. Sector 0 starts
    at up and the indices grow counter-clockwise. ``angle_offset`` (degrees)
    is subtracted from the direction before bucketing, which rotates the
    sector boundaries counter-clockwise.

    Args:
        vector: 2D vector
        divisions: Number of sectors, at least 1
        angle_offset: Rotation of the sector boundaries in degrees

    Returns:
        Zero-based sector index in ``range(divisions)``

    Raises:
        InvalidArgument: if ``divisions`` is not a positive integer
        InvalidNumericState: if a component or ``angle_offset`` is NaN or
            the offset is infinite
        ZeroMagnitude: if the vector has zero length
    """
    if not is_integer(divisions) or divisions < 1:
        raise InvalidArgument(f"argument divisions must be an integer greater than 0, got {divisions!r}")
    if math.isinf(assure_not_nan(angle_offset)):
        raise InvalidNumericState(f"angle_offset must be finite, got {angle_offset!r}")

    division_size = FULL_TURN / divisions
    angle = float(cyclic_wrap_float(direction_angle(vector) - angle_offset, 0.0, FULL_TURN))
    # wrapping can land exactly on the upper edge through rounding
    return int(math.floor(angle / division_size)) % divisions
