from __future__ import annotations


class EventNotFoundError(LookupError):
    """Raised when an event id does not exist in the store."""


class InvalidDateRangeError(ValueError):
    """Raised when an event would end before it starts."""
