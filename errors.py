"""Exceptions raised while coercing a day-of-year series onto a time window."""
from __future__ import annotations


class CoercionError(ValueError):
    """Base error for statistical series coercion."""


class InvalidPeriod(CoercionError):
    """Raised when a period string is not ``P<N>D`` or ``P1Y``."""


class InvalidEndTime(CoercionError):
    """Raised when the series end time cannot be read as an instant."""


class InvalidTimeZone(CoercionError):
    """Raised when a time zone name is not a known IANA zone."""
