"""Self-clamping bounded value types."""

from .base import BoundedNumber
from .bounded_float import BoundedFloat
from .bounded_int import BoundedInt
from .unit_float import UnitFloat

__all__ = [
    "BoundedNumber",
    "BoundedFloat",
    "BoundedInt",
    "UnitFloat",
]
