from __future__ import annotations

from typing import Any, Dict, Optional

from ..domain import CalendarEvent, UserAccount
from ..layout import ColumnModel, MonthLayout
from .models import EventPayload, MonthLayoutPayload, UserPayload


def serialize_event(event: CalendarEvent) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(by_alias=True)


def serialize_user(user: UserAccount) -> Dict[str, Any]:
    return UserPayload.from_domain(user).model_dump(by_alias=True)


def serialize_layout(layout: MonthLayout, columns: Optional[ColumnModel] = None) -> Dict[str, Any]:
    return MonthLayoutPayload.from_domain(layout, columns).model_dump(by_alias=True)
