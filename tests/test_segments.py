import logging

import pytest

from event_grid.layout import RawSegment, resolve_segments


def test_single_day_event_on_march_first(make_event, march_2025_days):
    segments = resolve_segments(make_event("a", "2025-03-01"), march_2025_days)
    assert segments == [RawSegment(row=0, col=5, span=1)]


def test_event_inside_one_week_has_no_continuation(make_event, march_2025_days):
    segments = resolve_segments(make_event("b", "2025-03-05", "2025-03-09"), march_2025_days)
    assert segments == [RawSegment(row=1, col=2, span=5)]


def test_event_crossing_a_week_boundary_is_split(make_event, march_2025_days):
    segments = resolve_segments(make_event("c", "2025-03-07", "2025-03-12"), march_2025_days)
    assert segments == [RawSegment(row=1, col=4, span=3), RawSegment(row=2, col=0, span=3)]


def test_event_spanning_three_weeks_continues_into_every_row(make_event, march_2025_days):
    segments = resolve_segments(make_event("long", "2025-03-05", "2025-03-20"), march_2025_days)
    assert segments == [
        RawSegment(row=1, col=2, span=5),
        RawSegment(row=2, col=0, span=7),
        RawSegment(row=3, col=0, span=4),
    ]


def test_event_starting_before_the_window_is_clipped(make_event, march_2025_days):
    segments = resolve_segments(make_event("early", "2025-02-01", "2025-02-25"), march_2025_days)
    assert segments == [RawSegment(row=0, col=0, span=2)]


def test_event_ending_after_the_window_is_clipped(make_event, march_2025_days):
    segments = resolve_segments(make_event("late", "2025-04-05", "2025-04-20"), march_2025_days)
    assert segments == [RawSegment(row=5, col=5, span=2)]


def test_event_covering_the_whole_window_fills_all_rows(make_event, march_2025_days):
    segments = resolve_segments(make_event("all", "2025-01-01", "2025-06-30"), march_2025_days)
    assert segments == [RawSegment(row=row, col=0, span=7) for row in range(6)]


def test_event_outside_the_window_has_no_segments(make_event, march_2025_days):
    assert resolve_segments(make_event("gone", "2025-05-01", "2025-05-03"), march_2025_days) == []


@pytest.mark.parametrize(
    "start, end",
    [
        ("2025-03-01", "2025-03-01"),
        ("2025-03-02", "2025-03-03"),
        ("2025-03-06", "2025-03-27"),
        ("2025-02-20", "2025-03-30"),
        ("2025-03-30", "2025-04-30"),
    ],
)
def test_spans_add_up_to_the_clipped_duration(make_event, march_2025_days, start, end):
    event = make_event("x", start, end)
    first = march_2025_days[0].date
    last = march_2025_days[-1].date
    clipped = (min(event.end_date, last) - max(event.start_date, first)).days + 1

    segments = resolve_segments(event, march_2025_days)

    assert sum(segment.span for segment in segments) == clipped
    assert all(1 <= segment.span <= 7 and segment.col + segment.span <= 7 for segment in segments)
    assert all(segment.col == 0 for segment in segments[1:])


def test_start_missing_from_window_is_logged_and_skipped(make_event, march_2025_days, caplog):
    holey_days = march_2025_days[:10] + march_2025_days[11:]
    event = make_event("hole", march_2025_days[10].date.isoformat())

    with caplog.at_level(logging.WARNING, logger="event_grid.layout.segments"):
        segments = resolve_segments(event, holey_days)

    assert segments == []
    assert "Skipping event hole" in caplog.text
