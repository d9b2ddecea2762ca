"""Stateless numeric primitives: mapping, clamping, angles and grids."""

from .mapping import map_range, map_from_unit, map_to_unit
from .clamping import clamp, clamp_unit, clamp_magnitude, validate_bounds
from .angles import reflex_angle, signed_angle, direction_angle, quadrant_index
from .grid import snap, is_on_grid, is_even

__all__ = [
    # mapping
    "map_range",
    "map_from_unit",
    "map_to_unit",
    # clamping
    "clamp",
    "clamp_unit",
    "clamp_magnitude",
    "validate_bounds",
    # angles
    "reflex_angle",
    "signed_angle",
    "direction_angle",
    "quadrant_index",
    # grid
    "snap",
    "is_on_grid",
    "is_even",
]
