import pytest

from event_grid.layout import ColumnModel, PositionedSegment, project_segment, project_segments


def test_default_model_compresses_weekend_columns():
    columns = ColumnModel()

    assert columns.total == pytest.approx(6.0)
    assert columns.width(0) == pytest.approx(100 / 6)
    assert columns.width(5) == pytest.approx(50 / 6)
    assert columns.offset(5) == pytest.approx(500 / 6)
    assert columns.width(0, 7) == pytest.approx(100.0)


def test_offsets_and_widths_tile_the_row():
    columns = ColumnModel.weekday_weekend(weekday=2.0, weekend=1.0)
    for col in range(7):
        assert columns.offset(col) + columns.width(col) == pytest.approx(columns.offset(col + 1) if col < 6 else 100.0)


def test_invalid_weights_are_rejected():
    with pytest.raises(ValueError):
        ColumnModel(weights=(1.0,) * 6)
    with pytest.raises(ValueError):
        ColumnModel(weights=(1.0, 1.0, 1.0, 1.0, 1.0, 0.0, 1.0))


def test_project_segment_uses_layer_for_vertical_offset():
    segment = PositionedSegment(event_id="c", row=1, col=4, span=3, layer=2)
    columns = ColumnModel.weekday_weekend(1.0, 1.0)

    box = project_segment(segment, columns, layer_height=20.0, layer_gap=4.0, top_offset=30.0)

    assert box.event_id == "c"
    assert box.row == 1
    assert box.left == pytest.approx(400 / 7)
    assert box.width == pytest.approx(300 / 7)
    assert box.top == pytest.approx(30.0 + 2 * 24.0)


def test_project_segments_keeps_order():
    segments = [
        PositionedSegment(event_id="a", row=0, col=0, span=1, layer=0),
        PositionedSegment(event_id="b", row=0, col=1, span=1, layer=0),
    ]
    boxes = project_segments(segments, ColumnModel())
    assert [box.event_id for box in boxes] == ["a", "b"]
