from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, List, Optional

from ..domain import CalendarEvent, Country, EventCategory, Industry


@dataclass(frozen=True)
class FilterSet:
    """Which events the calendar shows, independent of their dates.

    ``industries`` and ``countries`` restrict only when set; an event without a
    country is never hidden by a country restriction.
    """

    internal: bool = True
    external: bool = True
    foreign: bool = True
    industries: Optional[FrozenSet[Industry]] = None
    countries: Optional[FrozenSet[Country]] = None

    def allows_category(self, category: EventCategory) -> bool:
        flags = {
            EventCategory.INTERNAL: self.internal,
            EventCategory.EXTERNAL: self.external,
            EventCategory.FOREIGN: self.foreign,
        }
        return flags[category]

    def allows(self, event: CalendarEvent) -> bool:
        if not self.allows_category(event.category):
            return False
        if self.industries is not None and event.industry not in self.industries:
            return False
        if self.countries is not None and event.country is not None and event.country not in self.countries:
            return False
        return True

    @classmethod
    def from_params(
        cls,
        *,
        internal: bool = True,
        external: bool = True,
        foreign: bool = True,
        industries: Optional[Iterable[str]] = None,
        countries: Optional[Iterable[str]] = None,
    ) -> "FilterSet":
        return cls(
            internal=internal,
            external=external,
            foreign=foreign,
            industries=frozenset(Industry(value) for value in industries) if industries else None,
            countries=frozenset(Country(value) for value in countries) if countries else None,
        )


def filter_visible_events(
    events: Iterable[CalendarEvent],
    first_visible: date,
    last_visible: date,
    filters: Optional[FilterSet] = None,
) -> List[CalendarEvent]:
    active = filters or FilterSet()
    return [
        event
        for event in events
        if event.intersects(first_visible, last_visible) and active.allows(event)
    ]
