"""Repositories for events, accounts and the activity log."""

from __future__ import annotations

from .accounts import AccountRepository
from .activity import ActivityRepository
from .events import EventRepository

__all__ = ["AccountRepository", "ActivityRepository", "EventRepository"]
