"""Data access layer."""

from __future__ import annotations

from .repositories import AccountRepository, ActivityRepository, EventRepository

__all__ = ["AccountRepository", "ActivityRepository", "EventRepository"]
