from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..domain import CalendarEvent
from .grid import DAYS_PER_WEEK, WEEKS_PER_VIEW, CalendarDay

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RawSegment:
    row: int
    col: int
    span: int


def _index_of(visible_days: Sequence[CalendarDay], target) -> Optional[int]:
    for index, day in enumerate(visible_days):
        if day.date == target:
            return index
    return None


def resolve_segments(event: CalendarEvent, visible_days: Sequence[CalendarDay]) -> List[RawSegment]:
    """Split the visible part of ``event`` into one segment per week row.

    Returns an empty list for events outside the window. A clipped start that
    cannot be found in ``visible_days`` is logged and skipped.
    """

    if not visible_days:
        return []
    first = visible_days[0].date
    last = visible_days[-1].date
    clipped_start = max(event.start_date, first)
    clipped_end = min(event.end_date, last)
    if clipped_start > clipped_end:
        return []

    index = _index_of(visible_days, clipped_start)
    if index is None:
        logger.warning(
            "Skipping event %s: start %s not found in visible window %s..%s",
            event.id,
            clipped_start.isoformat(),
            first.isoformat(),
            last.isoformat(),
        )
        return []

    row, col = divmod(index, DAYS_PER_WEEK)
    remaining = (clipped_end - clipped_start).days + 1
    segments: list[RawSegment] = []
    while remaining > 0 and row < WEEKS_PER_VIEW:
        span = min(remaining, DAYS_PER_WEEK - col)
        segments.append(RawSegment(row=row, col=col, span=span))
        remaining -= span
        row += 1
        col = 0
    return segments
