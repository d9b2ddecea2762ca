from __future__ import annotations
from typing import Optional, Sequence, Tuple, TypeAlias, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
Vector2: TypeAlias = Tuple[float, float]
Vector3: TypeAlias = Tuple[float, float, float]
VectorLike: TypeAlias = Union[Sequence[Scalar], ndarray]
NumericValue: TypeAlias = Union[Scalar, VectorLike]

OptionalBound: TypeAlias = Optional[Scalar]
# None, a scalar broadcast to every axis, or one optional bound per axis
VectorBound: TypeAlias = Union[None, Scalar, Sequence[Optional[Scalar]], ndarray]

FULL_TURN = 360.0
UP: Vector2 = (0.0, 1.0)
DEFAULT_DIVISIONS = 4
VECTOR_DIMENSIONS = (2, 3)
UNIT_INTERVAL = (0.0, 1.0)
GRID_TOLERANCE = 1e-9

FLOAT_DTYPE = np.float64
