from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence

from .segments import RawSegment


class LayerMode(str, Enum):
    """How layers are chosen for events that span several week rows.

    ``per_row`` places every segment independently, so a continued event can
    sit on a different layer in each week. ``per_event`` gives all segments of
    an event the lowest layer that is free in every row it touches.
    """

    PER_ROW = "per_row"
    PER_EVENT = "per_event"


@dataclass(frozen=True, slots=True)
class TaggedSegment:
    event_id: str
    segment: RawSegment
    is_start: bool = True
    is_end: bool = True


@dataclass(frozen=True, slots=True)
class PositionedSegment:
    event_id: str
    row: int
    col: int
    span: int
    layer: int
    is_start: bool = True
    is_end: bool = True

    def to_dict(self) -> dict:
        return {
            "event_id": self.event_id,
            "row": self.row,
            "col": self.col,
            "span": self.span,
            "layer": self.layer,
            "is_start": self.is_start,
            "is_end": self.is_end,
        }


def segments_overlap(a: RawSegment, b: RawSegment) -> bool:
    return a.col < b.col + b.span and b.col < a.col + a.span


# row -> layer -> segments already placed there
_Occupancy = Dict[int, Dict[int, List[RawSegment]]]


def _collides(occupied: _Occupancy, segment: RawSegment, layer: int) -> bool:
    placed = occupied.get(segment.row, {}).get(layer, ())
    return any(segments_overlap(segment, other) for other in placed)


def _lowest_free_layer(occupied: _Occupancy, segments: Sequence[RawSegment]) -> int:
    layer = 0
    while any(_collides(occupied, segment, layer) for segment in segments):
        layer += 1
    return layer


def _place(occupied: _Occupancy, segment: RawSegment, layer: int) -> None:
    occupied.setdefault(segment.row, {}).setdefault(layer, []).append(segment)


def _placement_groups(tagged: Sequence[TaggedSegment], mode: LayerMode) -> Iterable[List[int]]:
    if LayerMode(mode) is LayerMode.PER_ROW:
        return [[index] for index in range(len(tagged))]
    groups: Dict[str, List[int]] = {}
    for index, item in enumerate(tagged):
        groups.setdefault(item.event_id, []).append(index)
    return groups.values()


def assign_layers(
    tagged: Sequence[TaggedSegment],
    mode: LayerMode = LayerMode.PER_ROW,
) -> List[PositionedSegment]:
    """Greedily give each segment the lowest non-colliding layer, in input order."""

    occupied: _Occupancy = {}
    layers: List[int] = [0] * len(tagged)

    for group in _placement_groups(tagged, mode):
        layer = _lowest_free_layer(occupied, [tagged[index].segment for index in group])
        for index in group:
            _place(occupied, tagged[index].segment, layer)
            layers[index] = layer

    return [
        PositionedSegment(
            event_id=item.event_id,
            row=item.segment.row,
            col=item.segment.col,
            span=item.segment.span,
            layer=layer,
            is_start=item.is_start,
            is_end=item.is_end,
        )
        for item, layer in zip(tagged, layers)
    ]
