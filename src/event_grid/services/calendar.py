from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from ..domain import (
    CalendarEvent,
    Country,
    EventCategory,
    EventNotFoundError,
    Industry,
    InvalidDateRangeError,
    UserAccount,
)
from ..layout import (
    ColumnModel,
    FilterSet,
    LayerMode,
    MonthLayout,
    check_year_month,
    layout_month,
    merge_event_batches,
    shift_month,
)
from .context import ServiceContext
from .sanitize import sanitize_description

logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("title", "description", "start_date", "end_date", "category", "industry", "country")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass(slots=True)
class CalendarService:
    context: ServiceContext

    def list_events(self) -> List[CalendarEvent]:
        return self.context.events.list_all()

    def events_for_month(self, year: int, month: int) -> List[CalendarEvent]:
        check_year_month(year, month)
        return self.context.events.list_for_month(year, month)

    def events_for_window(self, anchor: date) -> List[CalendarEvent]:
        """Events of the anchor month and both neighbours, merged by id."""

        check_year_month(anchor.year, anchor.month)
        batches = []
        for delta in (-1, 0, 1):
            month_start = shift_month(anchor, delta)
            batches.append(self.context.events.list_for_month(month_start.year, month_start.month))
        return merge_event_batches(*batches)

    def get_event(self, event_id: str) -> CalendarEvent:
        event = self.context.events.fetch(event_id)
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def create_event(
        self,
        *,
        title: str,
        start_date: date,
        end_date: date,
        category: EventCategory,
        industry: Industry = Industry.CROSS_INDUSTRY,
        description: Optional[str] = None,
        country: Optional[Country] = None,
        actor: UserAccount,
    ) -> CalendarEvent:
        now = _utc_now()
        event = CalendarEvent(
            id=str(uuid4()),
            title=title,
            description=sanitize_description(description),
            start_date=start_date,
            end_date=end_date,
            category=EventCategory(category),
            industry=Industry(industry),
            country=Country(country) if country else None,
            created_by=actor.id,
            created_at=now,
            updated_at=now,
        )
        saved = self.context.events.create(event)
        self.context.activity.record("event_created", user_id=actor.id, event_id=saved.id)
        logger.info("Event %s created by %s", saved.id, actor.username)
        return saved

    def update_event(self, event_id: str, changes: Mapping[str, Any], *, actor: UserAccount) -> CalendarEvent:
        existing = self.get_event(event_id)
        updates: Dict[str, Any] = {key: value for key, value in changes.items() if key in EDITABLE_FIELDS}
        if "description" in updates:
            updates["description"] = sanitize_description(updates["description"])
        if updates.get("category") is not None:
            updates["category"] = EventCategory(updates["category"])
        if updates.get("industry") is not None:
            updates["industry"] = Industry(updates["industry"])
        if "country" in updates:
            updates["country"] = Country(updates["country"]) if updates["country"] else None
        for required in ("title", "start_date", "end_date", "category", "industry"):
            if required in updates and updates[required] is None:
                updates.pop(required)

        start = updates.get("start_date", existing.start_date)
        end = updates.get("end_date", existing.end_date)
        if start > end:
            raise InvalidDateRangeError(f"End date {end} is before start date {start}.")

        updated = replace(existing, updated_at=_utc_now(), **updates)
        saved = self.context.events.update(updated)
        if saved is None:
            raise EventNotFoundError(event_id)
        self.context.activity.record(
            "event_updated",
            user_id=actor.id,
            event_id=event_id,
            metadata={"fields": sorted(updates)},
        )
        logger.info("Event %s updated by %s", event_id, actor.username)
        return saved

    def delete_event(self, event_id: str, *, actor: UserAccount) -> None:
        if not self.context.events.delete(event_id):
            raise EventNotFoundError(event_id)
        self.context.activity.record("event_deleted", user_id=actor.id, event_id=event_id)
        logger.info("Event %s deleted by %s", event_id, actor.username)

    def default_layer_mode(self) -> LayerMode:
        return LayerMode(self.context.settings.layout.layer_mode)

    def column_model(self) -> ColumnModel:
        layout = self.context.settings.layout
        return ColumnModel.weekday_weekend(layout.weekday_weight, layout.weekend_weight)

    def layout_month(
        self,
        anchor: date,
        filters: Optional[FilterSet] = None,
        layer_mode: Optional[LayerMode] = None,
    ) -> MonthLayout:
        events = self.events_for_window(anchor)
        return layout_month(anchor, events, filters, layer_mode=layer_mode or self.default_layer_mode())
