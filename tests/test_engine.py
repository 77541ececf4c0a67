import itertools
from datetime import date

from event_grid.domain import EventCategory
from event_grid.layout import (
    FilterSet,
    LayerMode,
    RawSegment,
    layout_month,
    merge_event_batches,
    order_events,
    segments_overlap,
)

MARCH = date(2025, 3, 1)


def placements(layout):
    return [(s.event_id, s.row, s.col, s.span, s.layer) for s in layout.segments]


def test_single_day_week_spanning_and_split_events(make_event):
    events = [
        make_event("A", "2025-03-01"),
        make_event("B", "2025-03-05", "2025-03-09"),
        make_event("C", "2025-03-07", "2025-03-12"),
    ]

    layout = layout_month(MARCH, events)

    assert [(s.row, s.col, s.span) for s in layout.segments_for("A")] == [(0, 5, 1)]
    assert [(s.row, s.col, s.span) for s in layout.segments_for("B")] == [(1, 2, 5)]
    assert [(s.row, s.col, s.span) for s in layout.segments_for("C")] == [(1, 4, 3), (2, 0, 3)]
    # C overlaps B on Friday..Sunday of the second row.
    assert [s.layer for s in layout.segments_for("C")] == [1, 0]


def test_internal_events_are_hidden_by_filter(make_event):
    events = [
        make_event("int", "2025-03-03", category=EventCategory.INTERNAL),
        make_event("ext", "2025-03-03", category=EventCategory.EXTERNAL),
    ]

    layout = layout_month(MARCH, events, FilterSet(internal=False))

    assert [event.id for event in layout.events] == ["ext"]
    assert {segment.event_id for segment in layout.segments} == {"ext"}


def test_layout_is_deterministic_regardless_of_input_order(make_event):
    events = [
        make_event("b", "2025-03-10", "2025-03-12"),
        make_event("a", "2025-03-10", "2025-03-11"),
        make_event("c", "2025-03-04", "2025-03-18"),
        make_event("d", "2025-03-11"),
    ]

    first = layout_month(MARCH, events)
    again = layout_month(MARCH, events)
    shuffled = layout_month(MARCH, list(reversed(events)))

    assert placements(first) == placements(again) == placements(shuffled)


def test_ties_on_start_date_are_broken_by_id(make_event):
    events = [make_event("b", "2025-03-10"), make_event("a", "2025-03-10")]

    layout = layout_month(MARCH, events)

    assert [event.id for event in order_events(events)] == ["a", "b"]
    assert {s.event_id: s.layer for s in layout.segments} == {"a": 0, "b": 1}


def test_no_collisions_in_a_busy_month(make_event):
    events = [
        make_event(f"e{index:02d}", f"2025-03-{day:02d}", f"2025-03-{min(day + length, 31):02d}")
        for index, (day, length) in enumerate(itertools.product(range(1, 29, 3), (0, 2, 6, 9)))
    ]

    for mode in LayerMode:
        layout = layout_month(MARCH, events, layer_mode=mode)
        for first, second in itertools.combinations(layout.segments, 2):
            if first.row == second.row and first.layer == second.layer:
                assert not segments_overlap(
                    RawSegment(first.row, first.col, first.span),
                    RawSegment(second.row, second.col, second.span),
                )


def test_per_event_mode_keeps_one_layer_per_event(make_event):
    events = [
        make_event("a", "2025-03-08", "2025-03-09"),
        make_event("b", "2025-03-08", "2025-03-12"),
    ]

    per_row = layout_month(MARCH, events, layer_mode=LayerMode.PER_ROW)
    per_event = layout_month(MARCH, events, layer_mode=LayerMode.PER_EVENT)

    assert [s.layer for s in per_row.segments_for("b")] == [1, 0]
    assert [s.layer for s in per_event.segments_for("b")] == [1, 1]


def test_continuation_flags(make_event):
    events = [
        make_event("clipped", "2025-02-01", "2025-02-25"),
        make_event("split", "2025-03-07", "2025-03-12"),
    ]

    layout = layout_month(MARCH, events)

    clipped = layout.segments_for("clipped")
    assert [(s.is_start, s.is_end) for s in clipped] == [(False, True)]
    split = layout.segments_for("split")
    assert [(s.is_start, s.is_end) for s in split] == [(True, False), (False, True)]


def test_row_depths(make_event):
    events = [
        make_event("a", "2025-03-03", "2025-03-05"),
        make_event("b", "2025-03-04"),
        make_event("c", "2025-03-04"),
        make_event("d", "2025-03-20"),
    ]

    layout = layout_month(MARCH, events)

    assert layout.row_depths() == [0, 3, 0, 1, 0, 0]


def test_anchor_is_normalised_to_the_first_of_the_month(make_event):
    layout = layout_month(date(2025, 3, 19), [])
    assert layout.anchor == MARCH
    assert len(layout.days) == 42
    assert layout.segments == []


def test_merge_event_batches_keeps_first_copy(make_event):
    first = make_event("x", "2025-02-27", "2025-03-02", title="first")
    duplicate = make_event("x", "2025-02-27", "2025-03-02", title="second")
    other = make_event("y", "2025-03-10")

    merged = merge_event_batches([first], [duplicate, other], [])

    assert [(event.id, event.title) for event in merged] == [("x", "first"), ("y", "Event y")]
