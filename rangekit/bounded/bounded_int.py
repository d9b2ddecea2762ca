from __future__ import annotations
import operator
from typing import Any, ClassVar, Optional

from ..utils.components import is_integer
from .base import BoundedNumber, _reflected
from .bounded_float import BoundedFloat


class BoundedInt(BoundedNumber):
    """
    An integer held between optional bounds.

    Integer results stay ``BoundedInt``. A result that is not an integer (a
    float operand, or true division) is promoted to a :class:`BoundedFloat`
    carrying the same bounds. Floor division keeps integer operands integral.
    """
    __slots__ = ()

    _type: ClassVar[type] = int

    @classmethod
    def _coerce(cls, value: Any, name: str) -> int:
        if not is_integer(value):
            raise TypeError(f"{cls.__name__} {name} must be an integer, got {value!r}")
        return int(value)

    def _float_bound(self, bound: Optional[int]) -> Optional[float]:
        return None if bound is None else float(bound)

    def _make(self, raw: Any) -> BoundedNumber:
        if is_integer(raw):
            return BoundedInt(raw, self._minimum, self._maximum)
        return BoundedFloat(raw, self._float_bound(self._minimum), self._float_bound(self._maximum))

    def to_float(self) -> BoundedFloat:
        """The same value and bounds as a ``BoundedFloat``."""
        return BoundedFloat(float(self._value), self._float_bound(self._minimum), self._float_bound(self._maximum))

    def floor_divide(self, other: Any) -> BoundedNumber:
        return self._checked(other, operator.floordiv, "//")

    def __floordiv__(self, other):
        return self._operate(other, operator.floordiv)

    def __rfloordiv__(self, other):
        return self._operate(other, _reflected(operator.floordiv))

    def __index__(self) -> int:
        return self._value
