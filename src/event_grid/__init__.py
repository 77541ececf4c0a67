"""Event Grid: month-grid event calendar with an admin panel."""

from __future__ import annotations

from .domain import CalendarEvent, EventCategory
from .layout import FilterSet, LayerMode, MonthLayout, layout_month

__all__ = ["CalendarEvent", "EventCategory", "FilterSet", "LayerMode", "MonthLayout", "layout_month", "main"]


def main() -> int:
    from .cli import main as cli_main

    return cli_main()
