"""Application services orchestrating data access and domain logic."""

from __future__ import annotations

from .auth import AuthService
from .calendar import CalendarService
from .context import ServiceContext
from .sanitize import sanitize_description

__all__ = ["AuthService", "CalendarService", "ServiceContext", "sanitize_description"]
