from typing import ClassVar

from .base import BoundedNumber


class BoundedFloat(BoundedNumber):
    """
    A float held between optional bounds.

    >>> BoundedFloat(7.5, 0.0, 5.0).value
    5.0
    >>> (BoundedFloat(2.0, minimum=0.0) - 3.0).value
    0.0
    """
    __slots__ = ()

    _type: ClassVar[type] = float
