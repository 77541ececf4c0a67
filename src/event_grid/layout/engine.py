from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence

from ..domain import CalendarEvent
from .filters import FilterSet, filter_visible_events
from .grid import WEEKS_PER_VIEW, CalendarDay, generate_visible_days, visible_range
from .layers import LayerMode, PositionedSegment, TaggedSegment, assign_layers
from .segments import resolve_segments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonthLayout:
    anchor: date
    days: List[CalendarDay]
    events: List[CalendarEvent]
    segments: List[PositionedSegment] = field(default_factory=list)

    def row_depths(self) -> List[int]:
        """Number of layers used in each of the six week rows."""

        depths = [0] * WEEKS_PER_VIEW
        for segment in self.segments:
            depths[segment.row] = max(depths[segment.row], segment.layer + 1)
        return depths

    def segments_for(self, event_id: str) -> List[PositionedSegment]:
        return [segment for segment in self.segments if segment.event_id == event_id]


def order_events(events: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    """Layer assignment order: earliest start first, ties broken by id."""

    return sorted(events, key=lambda event: (event.start_date, event.id))


def merge_event_batches(*batches: Iterable[CalendarEvent]) -> List[CalendarEvent]:
    """Merge per-month fetches, keeping the first copy of every event id."""

    merged: Dict[str, CalendarEvent] = {}
    for batch in batches:
        for event in batch:
            merged.setdefault(event.id, event)
    return list(merged.values())


def tag_segments(events: Sequence[CalendarEvent], days: Sequence[CalendarDay]) -> List[TaggedSegment]:
    first, last = visible_range(days)
    tagged: list[TaggedSegment] = []
    for event in events:
        segments = resolve_segments(event, days)
        for position, segment in enumerate(segments):
            tagged.append(
                TaggedSegment(
                    event_id=event.id,
                    segment=segment,
                    is_start=position == 0 and event.start_date >= first,
                    is_end=position == len(segments) - 1 and event.end_date <= last,
                )
            )
    return tagged


def layout_month(
    anchor: date,
    events: Iterable[CalendarEvent],
    filters: Optional[FilterSet] = None,
    *,
    layer_mode: LayerMode = LayerMode.PER_ROW,
) -> MonthLayout:
    layer_mode = LayerMode(layer_mode)
    days = generate_visible_days(anchor)
    first, last = visible_range(days)
    visible = order_events(filter_visible_events(events, first, last, filters))
    segments = assign_layers(tag_segments(visible, days), layer_mode)
    logger.debug(
        "Laid out %d events into %d segments for %04d-%02d (%s)",
        len(visible),
        len(segments),
        anchor.year,
        anchor.month,
        layer_mode.value,
    )
    return MonthLayout(anchor=anchor.replace(day=1), days=days, events=visible, segments=segments)
