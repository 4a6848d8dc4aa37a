"""
API Mapper
==========

Transforms a TimelineLayout into the JSON DTOs served next to the SVG.
Coordinates are passed through untouched so a client can draw its own
rendering from the same geometry.
"""
from typing import List, Optional

from pydantic import BaseModel

from ..contracts.base import Point
from ..contracts.layout import ItemLayout, StrokePath, TimelineLayout


class PointDTO(BaseModel):
    x: float
    y: float


class StrokeDTO(BaseModel):
    points: List[PointDTO]
    length: float


class StageDTO(BaseModel):
    name: str
    delay: float
    duration: float


class TimingDTO(BaseModel):
    index: int
    delay: float
    reveal_duration: float
    closing_at: float


class ItemDTO(BaseModel):
    id: int
    label: str
    subtitle: str
    color: str
    start: str
    end: Optional[str]
    start_label: str
    end_label: str
    lane: int
    anchor: str
    start_x: float
    end_x: float
    node_y: float
    show_start_label: bool
    show_end_label: bool
    has_logo: bool
    timing: TimingDTO
    connector: StrokeDTO
    closing_connector: StrokeDTO


class TimelineDTO(BaseModel):
    width: float
    height: float
    baseline_y: float
    lane_count: int
    domain_start: str
    domain_end: str
    total_duration: float
    baseline: StrokeDTO
    stages: List[StageDTO]
    items: List[ItemDTO]


def _iso(value) -> str:
    return value.isoformat().replace("+00:00", "Z")


def _point(p: Point) -> PointDTO:
    return PointDTO(x=p.x, y=p.y)


def _stroke(path: StrokePath) -> StrokeDTO:
    return StrokeDTO(points=[_point(p) for p in path.points], length=path.length)


def _map_item(item: ItemLayout) -> ItemDTO:
    it = item.interval
    return ItemDTO(
        id=it.id,
        label=it.label,
        subtitle=it.subtitle,
        color=it.color_hint,
        start=_iso(it.start),
        end=_iso(it.end) if it.end is not None else None,
        start_label=it.start_label,
        end_label=it.end_label,
        lane=item.lane_index,
        anchor=item.anchor.value,
        start_x=item.start_x,
        end_x=item.end_x,
        node_y=item.node_y,
        show_start_label=item.labels.show_start_label,
        show_end_label=item.labels.show_end_label,
        has_logo=item.logo_data is not None,
        timing=TimingDTO(
            index=item.timing.index,
            delay=item.timing.delay,
            reveal_duration=item.timing.reveal_duration,
            closing_at=item.timing.closing_at,
        ),
        connector=_stroke(item.connector),
        closing_connector=_stroke(item.closing_connector),
    )


def map_layout_to_dto(layout: TimelineLayout) -> TimelineDTO:
    """Map a computed layout to its JSON representation (processing order kept)."""
    return TimelineDTO(
        width=layout.width,
        height=layout.height,
        baseline_y=layout.baseline_y,
        lane_count=layout.lane_count,
        domain_start=_iso(layout.scale.domain_start),
        domain_end=_iso(layout.scale.domain_end),
        total_duration=layout.animation.total_duration,
        baseline=_stroke(layout.baseline),
        stages=[
            StageDTO(name=s.name, delay=s.delay, duration=s.duration)
            for s in layout.animation.stages
        ],
        items=[_map_item(item) for item in layout.items],
    )
