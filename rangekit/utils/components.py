"""Component helpers shared by the vector-aware numeric primitives."""

from __future__ import annotations
from collections.abc import Sized
from numbers import Integral, Real
from typing import Any, List, Optional
import numpy as np
from numpy import ndarray

from ..errors import InvalidArgument
from ..types.numeric_types import FLOAT_DTYPE, VECTOR_DIMENSIONS, VectorBound


def get_dimension(element: Any) -> int:
    """Number of components in ``element``: 0 for None, 1 for a scalar."""
    if element is None:
        return 0
    if isinstance(element, ndarray):
        return 1 if element.ndim == 0 else element.shape[-1]
    if isinstance(element, Sized):
        return len(element)
    return 1


def is_vector(value: Any) -> bool:
    if isinstance(value, ndarray):
        return value.ndim > 0
    return isinstance(value, Sized) and not isinstance(value, (str, bytes))


def is_integer(value: Any) -> bool:
    """True for ints and numpy integers, False for bools."""
    return isinstance(value, (Integral, np.integer)) and not isinstance(value, (bool, np.bool_))


def is_real(value: Any) -> bool:
    return isinstance(value, (Real, np.floating, np.integer)) and not isinstance(value, (bool, np.bool_))


def is_close_to_int(value: float, tol: float = 1e-9) -> bool:
    """Check if a float is within ``tol`` of an integer."""
    return abs(value - round(value)) <= tol


def as_components(value: Any, name: str = "value") -> ndarray:
    """
    Convert a 2D or 3D vector to a float component array.

    Args:
        value: Tuple, list or 1-D ndarray of numbers
        name: Argument name used in error messages

    Returns:
        1-D float64 array with one entry per axis
    """
    arr = np.asarray(value, dtype=FLOAT_DTYPE)
    if arr.ndim != 1 or arr.shape[0] not in VECTOR_DIMENSIONS:
        raise InvalidArgument(
            f"{name} must be a vector with {' or '.join(map(str, VECTOR_DIMENSIONS))} components, "
            f"got shape {arr.shape}"
        )
    return arr


def match_dimension(value: Any, size: int, name: str) -> ndarray:
    """Broadcast a scalar to ``size`` axes, or check a vector has ``size`` axes."""
    if not is_vector(value):
        return np.full(size, value, dtype=FLOAT_DTYPE)
    arr = as_components(value, name)
    if arr.shape[0] != size:
        raise InvalidArgument(f"{name} has {arr.shape[0]} components, expected {size}")
    return arr


def per_axis_bounds(bound: VectorBound, size: int, name: str) -> List[Optional[float]]:
    """
    Expand a vector bound into one optional bound per axis.

    ``None`` leaves every axis open, a scalar applies to every axis, and a
    sequence gives one bound (or ``None``) per axis.
    """
    if bound is None:
        return [None] * size
    if not is_vector(bound):
        return [bound] * size
    entries = list(bound)
    if len(entries) != size:
        raise InvalidArgument(f"{name} has {len(entries)} components, expected {size}")
    return [None if entry is None else float(entry) for entry in entries]
