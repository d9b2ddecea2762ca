"""
Transfer functions for normalized data.

Each function takes a value in [0, 1] and returns a value in [0, 1], so the
output of one can always be fed to another. The input is validated with
:func:`rangekit.assurance.assure_in_range_01`; nothing is clamped on entry.

A :class:`~rangekit.bounded.UnitFloat` passed in comes back as a
``UnitFloat``; plain numbers come back as floats.

>>> from rangekit.transfer import transfer_exponential, transfer_invert, chain_transfers
>>> transfer_invert(0.25)
0.75
>>> chain_transfers(0.25, transfer_invert, (transfer_exponential, 2.0))
0.5625
"""

from __future__ import annotations
import functools
import math
from typing import Any, Callable, Tuple, Union

from .assurance import assure_in_range_01, assure_not_nan
from .bounded.unit_float import UnitFloat
from .errors import InvalidArgument
from .numeric.clamping import clamp_unit
from .numeric.mapping import map_from_unit, map_to_unit
from .utils.components import is_real

Transferable = Union[float, UnitFloat]
TransferStep = Union[Callable[..., Transferable], Tuple[Any, ...]]


def _transferable(fn: Callable[..., float]) -> Callable[..., Transferable]:
    """Validate the input range and keep ``UnitFloat`` inputs as ``UnitFloat``."""
    @functools.wraps(fn)
    def wrapper(value: Transferable, *args: Any) -> Transferable:
        if not isinstance(value, UnitFloat) and not is_real(value):
            raise TypeError(f"{fn.__name__} expects a real number, got {type(value).__name__}")
        result = clamp_unit(fn(assure_in_range_01(float(value)), *args))
        if isinstance(value, UnitFloat):
            return value.with_value(result)
        return result
    return wrapper


@_transferable
def transfer_exponential(value: float, exponent: float) -> float:
    """``value ** exponent``; exponents in (0, 1) lift the curve, above 1 sag it."""
    exponent = assure_not_nan(exponent)
    if exponent < 0:
        raise InvalidArgument(f"exponent must not be negative, got {exponent!r}")
    return value ** exponent


@_transferable
def transfer_cos(value: float) -> float:
    """Ease-in/ease-out through the cosine from pi to 2 pi, keeping 0 -> 0 and 1 -> 1."""
    return map_to_unit(math.cos(map_from_unit(value, math.pi, 2.0 * math.pi)), -1.0, 1.0)


@_transferable
def transfer_invert(value: float) -> float:
    return 1.0 - value


def chain_transfers(value: Transferable, *steps: TransferStep) -> Transferable:
    """
    Apply transfer functions one after another.

    Args:
        value: Starting value in [0, 1]
        *steps: Transfer callables, or ``(callable, *extra_args)`` tuples

    Returns:
        The value after the last step, of the same kind as ``value``
    """
    for step in steps:
        if isinstance(step, tuple):
            fn, *args = step
        else:
            fn, args = step, []
        value = fn(value, *args)
    return value
