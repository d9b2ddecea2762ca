from __future__ import annotations
from typing import Any

from ..assurance import assure_in_range_01, assure_not_nan
from ..types.numeric_types import UNIT_INTERVAL
from .base import BoundedNumber
from .bounded_float import BoundedFloat


class UnitFloat(BoundedFloat):
    """
    A float always held in the closed unit interval [0, 1].

    The constructor clamps, like every other bounded type. Use
    :meth:`from_float` when an out-of-range input is a caller error rather
    than something to saturate. Arithmetic between a ``UnitFloat`` and any
    number or bounded value yields a ``UnitFloat``.
    """
    __slots__ = ()

    def __init__(self, value: Any = 0.0) -> None:
        low, high = UNIT_INTERVAL
        super().__init__(value, low, high)

    @classmethod
    def from_float(cls, value: float) -> UnitFloat:
        """Build from a raw float that must already lie in [0, 1]."""
        return cls(assure_in_range_01(assure_not_nan(value)))

    @classmethod
    def from_bounded(cls, bounded: BoundedNumber) -> UnitFloat:
        """Build from a bounded value whose stored value must already lie in [0, 1]."""
        return cls.from_float(float(bounded.value))

    def to_bounded(self) -> BoundedFloat:
        """Lossless conversion to a plain ``BoundedFloat`` with bounds [0, 1]."""
        return BoundedFloat(self._value, self._minimum, self._maximum)

    def _init_args(self) -> tuple:
        return (self._value,)

    def _make(self, raw: Any) -> UnitFloat:
        return self.__class__(raw)

    def __repr__(self):
        return f"UnitFloat({self._value!r})"
