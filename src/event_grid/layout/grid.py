from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence, Tuple

WEEKS_PER_VIEW = 6
DAYS_PER_WEEK = 7
CELLS_PER_VIEW = WEEKS_PER_VIEW * DAYS_PER_WEEK

# The grid and the neighbouring-month fetch reach one month past either end.
MIN_YEAR = date.min.year + 1
MAX_YEAR = date.max.year - 1


@dataclass(frozen=True, slots=True)
class CalendarDay:
    day_of_month: int
    is_current_month: bool
    date: date


def generate_visible_days(anchor: date) -> list[CalendarDay]:
    """Return the 42 Monday-first cells shown for the month containing ``anchor``.

    The grid always spans six full weeks: the tail of the previous month fills
    the cells before the 1st and the start of the next month pads the rest.
    """

    first = anchor.replace(day=1)
    grid_start = first - timedelta(days=first.weekday())
    days: list[CalendarDay] = []
    for offset in range(CELLS_PER_VIEW):
        current = grid_start + timedelta(days=offset)
        days.append(
            CalendarDay(
                day_of_month=current.day,
                is_current_month=(current.year, current.month) == (first.year, first.month),
                date=current,
            )
        )
    return days


def check_year_month(year: int, month: int) -> None:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}.")
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be between 1 and 12, got {month}.")


def visible_range(days: Sequence[CalendarDay]) -> Tuple[date, date]:
    return days[0].date, days[-1].date


def month_bounds(year: int, month: int) -> Tuple[date, date]:
    first = date(year, month, 1)
    following = date(year + month // 12, month % 12 + 1, 1)
    return first, following - timedelta(days=1)


def shift_month(anchor: date, delta: int) -> date:
    """Return the first day of the month ``delta`` months away from ``anchor``."""

    index = anchor.year * 12 + (anchor.month - 1) + delta
    return date(index // 12, index % 12 + 1, 1)
