from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ...core import EventStore
from ...domain import CalendarEvent
from ...layout import month_bounds


@dataclass(slots=True)
class EventRepository:
    store: EventStore

    def _records(self) -> List[Dict[str, Any]]:
        return self.store.data["events"]

    def list_all(self) -> List[CalendarEvent]:
        events = [CalendarEvent.from_record(record) for record in self._records()]
        return sorted(events, key=lambda event: (event.start_date, event.id))

    def list_for_month(self, year: int, month: int) -> List[CalendarEvent]:
        first, last = month_bounds(year, month)
        return [event for event in self.list_all() if event.intersects(first, last)]

    def fetch(self, event_id: str) -> Optional[CalendarEvent]:
        for record in self._records():
            if record["id"] == event_id:
                return CalendarEvent.from_record(record)
        return None

    def create(self, event: CalendarEvent) -> CalendarEvent:
        def _insert(state: Dict[str, Any]) -> None:
            state["events"].append(event.to_record())

        self.store.mutate(_insert)
        return event

    def update(self, event: CalendarEvent) -> Optional[CalendarEvent]:
        def _replace(state: Dict[str, Any]) -> bool:
            items = state["events"]
            for idx, existing in enumerate(items):
                if existing["id"] == event.id:
                    items[idx] = event.to_record()
                    return True
            return False

        return event if self.store.mutate(_replace) else None

    def delete(self, event_id: str) -> bool:
        def _remove(state: Dict[str, Any]) -> bool:
            items = state["events"]
            remaining = [item for item in items if item["id"] != event_id]
            state["events"] = remaining
            return len(remaining) != len(items)

        return self.store.mutate(_remove)
