"""Domain models for the event calendar."""

from __future__ import annotations

from .enums import Country, EventCategory, Industry
from .errors import EventNotFoundError, InvalidDateRangeError
from .models import CalendarEvent, UserAccount, parse_calendar_date

__all__ = [
    "CalendarEvent",
    "Country",
    "EventCategory",
    "EventNotFoundError",
    "Industry",
    "InvalidDateRangeError",
    "UserAccount",
    "parse_calendar_date",
]
