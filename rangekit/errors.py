"""Exceptions raised by rangekit.

Every error is a contract violation raised at the point where it is detected.
They all derive from :class:`NumericError`, which is a ``ValueError``.
"""


class NumericError(ValueError):
    """Base class for all rangekit errors."""


class InvalidNumericState(NumericError):
    """A NaN was encountered where no fallback was provided."""


class RangeViolation(NumericError):
    """A value lies outside the closed unit interval at a strict check."""

    def __init__(self, value, message: str | None = None) -> None:
        self.value = value
        if message is None:
            message = f"Input value needs to be between 0 and 1, got {value!r}"
        super().__init__(message)


class DegenerateDomain(NumericError):
    """The input interval of a mapping has no extent."""


class InvalidBounds(NumericError):
    """Bounds are both absent, inverted, NaN, or negative where forbidden."""


class InvalidArgument(NumericError):
    """An argument is outside its accepted domain."""


class ZeroMagnitude(NumericError):
    """A zero-length vector has no direction to preserve."""
