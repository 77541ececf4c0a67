from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .grid import DAYS_PER_WEEK
from .layers import PositionedSegment


@dataclass(frozen=True)
class ColumnModel:
    """Relative widths of the seven weekday columns, Monday first."""

    weights: Tuple[float, ...] = (1.0, 1.0, 1.0, 1.0, 1.0, 0.5, 0.5)

    def __post_init__(self) -> None:
        if len(self.weights) != DAYS_PER_WEEK:
            raise ValueError(f"Expected {DAYS_PER_WEEK} column weights, got {len(self.weights)}.")
        if any(weight <= 0 for weight in self.weights):
            raise ValueError("Column weights must be positive.")

    @classmethod
    def weekday_weekend(cls, weekday: float = 1.0, weekend: float = 0.5) -> "ColumnModel":
        return cls(weights=(weekday,) * 5 + (weekend,) * 2)

    @property
    def total(self) -> float:
        return sum(self.weights)

    def offset(self, col: int) -> float:
        """Left edge of ``col`` as a percentage of the row width."""

        return sum(self.weights[:col]) / self.total * 100

    def width(self, col: int, span: int = 1) -> float:
        return sum(self.weights[col : col + span]) / self.total * 100


@dataclass(frozen=True, slots=True)
class SegmentBox:
    event_id: str
    row: int
    left: float
    width: float
    top: float


def project_segment(
    segment: PositionedSegment,
    columns: ColumnModel,
    *,
    layer_height: float = 22.0,
    layer_gap: float = 2.0,
    top_offset: float = 28.0,
) -> SegmentBox:
    return SegmentBox(
        event_id=segment.event_id,
        row=segment.row,
        left=columns.offset(segment.col),
        width=columns.width(segment.col, segment.span),
        top=top_offset + segment.layer * (layer_height + layer_gap),
    )


def project_segments(segments: Sequence[PositionedSegment], columns: ColumnModel, **geometry: float) -> List[SegmentBox]:
    return [project_segment(segment, columns, **geometry) for segment in segments]
