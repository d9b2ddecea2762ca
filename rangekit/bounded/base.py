from __future__ import annotations
import operator
from typing import Any, Callable, ClassVar, Optional, Tuple

from ..numeric.clamping import clamp, validate_bounds
from ..types.numeric_types import OptionalBound, Scalar
from ..utils.components import is_real


def _reflected(op: Callable[[Any, Any], Any]) -> Callable[[Any, Any], Any]:
    return lambda a, b: op(b, a)


class BoundedNumber:
    """
    A scalar held between optional bounds.

    Instances are immutable snapshots: construction clamps the value once,
    and every "mutation" (``with_value`` or an arithmetic operator) returns a
    new instance whose raw result has been clamped again. At least one bound
    must be present; an absent bound leaves that side open.

    Equality, ordering and hashing look at the stored value only. Two
    instances with different bounds but the same value are equal, and a
    bounded value equals the raw number it holds.
    """
    __slots__ = ("_value", "_minimum", "_maximum", "_is_frozen")

    _type: ClassVar[type] = float

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any, minimum: OptionalBound = None, maximum: OptionalBound = None) -> None:
        if isinstance(value, BoundedNumber):
            value = value.value
        minimum = None if minimum is None else self._coerce(minimum, "minimum")
        maximum = None if maximum is None else self._coerce(maximum, "maximum")
        validate_bounds(minimum, maximum)

        self._minimum = minimum
        self._maximum = maximum
        self._value = clamp(self._coerce(value, "value"), minimum, maximum)

        # freeze instance; no more writes allowed
        super().__setattr__("_is_frozen", True)

    @classmethod
    def _coerce(cls, value: Any, name: str) -> Scalar:
        if not is_real(value):
            raise TypeError(f"{cls.__name__} {name} must be a real number, got {type(value).__name__}")
        return cls._type(value)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Scalar:
        return self._value

    @property
    def minimum(self) -> Optional[Scalar]:
        return self._minimum

    @property
    def maximum(self) -> Optional[Scalar]:
        return self._maximum

    @property
    def bounds(self) -> Tuple[Optional[Scalar], Optional[Scalar]]:
        return self._minimum, self._maximum

    # ------------------ REBUILDING ------------------
    def _init_args(self) -> tuple:
        return self._value, self._minimum, self._maximum

    def _make(self, raw: Scalar) -> BoundedNumber:
        """Build the instance that holds ``raw`` under this instance's bounds."""
        return self.__class__(raw, self._minimum, self._maximum)

    def with_value(self, raw: Any) -> BoundedNumber:
        """Return a copy holding ``raw``, clamped to the same bounds."""
        if isinstance(raw, BoundedNumber):
            raw = raw.value
        return self._make(raw)

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return self.__class__, self._init_args()

    # -----------------------
    # Core arithmetic engine
    # -----------------------
    def _operate(self, other: Any, op: Callable[[Any, Any], Any]):
        if isinstance(other, BoundedNumber):
            other = other.value
        elif not is_real(other):
            return NotImplemented
        return self._make(op(self._value, other))

    def _checked(self, other: Any, op: Callable[[Any, Any], Any], symbol: str) -> BoundedNumber:
        result = self._operate(other, op)
        if result is NotImplemented:
            raise TypeError(
                f"unsupported operand type(s) for {symbol}: "
                f"'{type(self).__name__}' and '{type(other).__name__}'"
            )
        return result

    def add(self, other: Any) -> BoundedNumber:
        return self._checked(other, operator.add, "+")

    def subtract(self, other: Any) -> BoundedNumber:
        return self._checked(other, operator.sub, "-")

    def multiply(self, other: Any) -> BoundedNumber:
        return self._checked(other, operator.mul, "*")

    def divide(self, other: Any) -> BoundedNumber:
        return self._checked(other, operator.truediv, "/")

    # -----------------------
    # Operator overloads
    # -----------------------
    def __add__(self, other):
        return self._operate(other, operator.add)

    def __sub__(self, other):
        return self._operate(other, operator.sub)

    def __mul__(self, other):
        return self._operate(other, operator.mul)

    def __truediv__(self, other):
        return self._operate(other, operator.truediv)

    def __radd__(self, other):
        return self._operate(other, _reflected(operator.add))

    def __rsub__(self, other):
        return self._operate(other, _reflected(operator.sub))

    def __rmul__(self, other):
        return self._operate(other, _reflected(operator.mul))

    def __rtruediv__(self, other):
        return self._operate(other, _reflected(operator.truediv))

    # -----------------------
    # Comparison (value only)
    # -----------------------
    def _compare(self, other: Any, op: Callable[[Any, Any], bool]):
        if isinstance(other, BoundedNumber):
            other = other.value
        elif not is_real(other):
            return NotImplemented
        return op(self._value, other)

    def __eq__(self, other):
        return self._compare(other, operator.eq)

    def __ne__(self, other):
        return self._compare(other, operator.ne)

    def __lt__(self, other):
        return self._compare(other, operator.lt)

    def __le__(self, other):
        return self._compare(other, operator.le)

    def __gt__(self, other):
        return self._compare(other, operator.gt)

    def __ge__(self, other):
        return self._compare(other, operator.ge)

    def __hash__(self):
        return hash(self._value)

    # -----------------------
    # Conversion & representation
    # -----------------------
    def __float__(self) -> float:
        return float(self._value)

    def __int__(self) -> int:
        return int(self._value)

    def __repr__(self):
        return f"{self.__class__.__name__}({self._value!r}, minimum={self._minimum!r}, maximum={self._maximum!r})"
