"""
Validation guards used by the numeric primitives and transfer functions.

Both guards validate only. They never clamp. Callers that want a value
forced into range use :func:`rangekit.numeric.clamping.clamp` instead.
"""

from __future__ import annotations
import math
from typing import Optional, Union
import numpy as np
from numpy import ndarray

from .errors import InvalidNumericState, RangeViolation
from .types.numeric_types import Scalar


def assure_not_nan(
        value: Union[Scalar, ndarray],
        fallback: Optional[Scalar] = None,
) -> Union[Scalar, ndarray]:
    """
    Return ``value`` unless it is NaN.

    Args:
        value: Scalar or array to check
        fallback: Replacement for NaN entries. If omitted, NaN is an error.

    Returns:
        ``value``, with NaN replaced by ``fallback`` where one was given

    Raises:
        InvalidNumericState: if a NaN is found and no fallback was given
    """
    if isinstance(value, ndarray):
        mask = np.isnan(value)
        if not mask.any():
            return value
        if fallback is None:
            raise InvalidNumericState(f"value contains NaN at {np.argwhere(mask).tolist()}")
        return np.where(mask, fallback, value)

    if math.isnan(value):
        if fallback is None:
            raise InvalidNumericState("value is NaN")
        return fallback
    return value


def assure_in_range_01(value: Scalar) -> Scalar:
    """Return ``value`` if it lies in [0, 1], otherwise raise ``RangeViolation``."""
    # NaN fails both comparisons and is rejected here
    if not 0.0 <= value <= 1.0:
        raise RangeViolation(value)
    return value
