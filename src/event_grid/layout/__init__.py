"""Month-grid layout engine: visible days, filtering, week splitting and layering."""

from __future__ import annotations

from .engine import MonthLayout, layout_month, merge_event_batches, order_events
from .filters import FilterSet, filter_visible_events
from .grid import (
    MAX_YEAR,
    MIN_YEAR,
    CalendarDay,
    check_year_month,
    generate_visible_days,
    month_bounds,
    shift_month,
    visible_range,
)
from .layers import LayerMode, PositionedSegment, TaggedSegment, assign_layers, segments_overlap
from .projection import ColumnModel, SegmentBox, project_segment, project_segments
from .segments import RawSegment, resolve_segments

__all__ = [
    "MAX_YEAR",
    "MIN_YEAR",
    "CalendarDay",
    "ColumnModel",
    "FilterSet",
    "LayerMode",
    "MonthLayout",
    "PositionedSegment",
    "RawSegment",
    "SegmentBox",
    "TaggedSegment",
    "assign_layers",
    "check_year_month",
    "filter_visible_events",
    "generate_visible_days",
    "layout_month",
    "merge_event_batches",
    "month_bounds",
    "order_events",
    "project_segment",
    "project_segments",
    "resolve_segments",
    "segments_overlap",
    "shift_month",
    "visible_range",
]
