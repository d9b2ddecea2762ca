"""
Name compatibility with the Unity numeric helpers this library grew out of.

Code ported from that library can keep calling ``Clamp01`` as ``clamp01``,
``MapTo01`` as ``map_to_01``, ``GetQuadrant`` as ``get_quadrant`` and so on.
Each alias emits a ``DeprecationWarning`` at the caller's line and forwards to
its replacement in :mod:`rangekit.assurance` or :mod:`rangekit.numeric`.
"""

import warnings
from typing import Optional

from .assurance import assure_in_range_01
from .numeric.angles import quadrant_index
from .numeric.clamping import clamp_unit
from .numeric.mapping import map_from_unit, map_to_unit
from .types.numeric_types import DEFAULT_DIVISIONS, NumericValue, Scalar, VectorLike


def _deprecated(old: str, new: str) -> None:
    warnings.warn(
        f"{old} is deprecated. Use rangekit.{new} instead.",
        DeprecationWarning,
        stacklevel=3
    )


def assure_between_01(value: Scalar) -> Scalar:
    """
    Deprecated: Use rangekit.assurance.assure_in_range_01 instead.
    """
    _deprecated("assure_between_01", "assurance.assure_in_range_01")
    return assure_in_range_01(value)


def map_from_01(value: NumericValue, out_a: NumericValue, out_b: NumericValue) -> NumericValue:
    """
    Deprecated: Use rangekit.numeric.map_from_unit instead.
    """
    _deprecated("map_from_01", "numeric.map_from_unit")
    return map_from_unit(value, out_a, out_b)


def map_to_01(value: NumericValue, in_a: NumericValue, in_b: NumericValue) -> NumericValue:
    """
    Deprecated: Use rangekit.numeric.map_to_unit instead.
    """
    _deprecated("map_to_01", "numeric.map_to_unit")
    return map_to_unit(value, in_a, in_b)


def clamp01(value: NumericValue) -> NumericValue:
    """
    Deprecated: Use rangekit.numeric.clamp_unit instead.
    """
    _deprecated("clamp01", "numeric.clamp_unit")
    return clamp_unit(value)


def get_quadrant(source: VectorLike, divisions: int = DEFAULT_DIVISIONS, off_set: Optional[Scalar] = None) -> int:
    """
    Deprecated: Use rangekit.numeric.quadrant_index instead.
    """
    _deprecated("get_quadrant", "numeric.quadrant_index")
    return quadrant_index(source, divisions, 0.0 if off_set is None else off_set)
