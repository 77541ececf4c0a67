from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

from ..layout import FilterSet, LayerMode, check_year_month, generate_visible_days
from .models import CalendarDayPayload
from .registry import register_api
from .serializers import serialize_event, serialize_layout
from .state import api_state


def _parse_month(month: str) -> date:
    try:
        anchor = date.fromisoformat(f"{month}-01")
    except ValueError as exc:
        raise ValueError(f"month must be formatted YYYY-MM, got {month!r}") from exc
    check_year_month(anchor.year, anchor.month)
    return anchor


@register_api(
    "visible_days",
    description="Return the 42 Monday-first days shown for a month.",
    category="layout",
    tags=("read", "grid"),
)
def visible_days(month: str) -> Dict[str, Any]:
    anchor = _parse_month(month)
    days = [CalendarDayPayload.from_domain(day).model_dump(by_alias=True) for day in generate_visible_days(anchor)]
    return {"month": month, "days": days}


@register_api(
    "month_layout",
    description="Lay out stored events for a month into rows, columns, spans and layers.",
    category="layout",
    tags=("read", "grid"),
)
def month_layout(
    month: str,
    internal: bool = True,
    external: bool = True,
    foreign: bool = True,
    industries: Optional[List[str]] = None,
    countries: Optional[List[str]] = None,
    layer_mode: Optional[str] = None,
) -> Dict[str, Any]:
    anchor = _parse_month(month)
    filters = FilterSet.from_params(
        internal=internal,
        external=external,
        foreign=foreign,
        industries=industries,
        countries=countries,
    )
    mode = LayerMode(layer_mode) if layer_mode else None
    layout = api_state.calendar.layout_month(anchor, filters, mode)
    return serialize_layout(layout, api_state.calendar.column_model())


@register_api(
    "list_events_for_month",
    description="Return stored events that overlap a calendar month.",
    category="events",
    tags=("read",),
)
def list_events_for_month(year: int, month: int) -> Dict[str, Any]:
    events = api_state.calendar.events_for_month(year, month)
    return {"year": year, "month": month, "events": [serialize_event(event) for event in events]}
