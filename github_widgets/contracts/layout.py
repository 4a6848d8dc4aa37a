"""
Timeline Layout Contracts

Responsibility:
Data model flowing through the temporal layout engine.
Input: raw rows -> Interval -> LaneAssignment / TimeScale / LabelPlacement
-> AnimationPlan -> TimelineLayout (handed to any renderer).

DETERMINISTIC:
Same records + same options + same `now` = identical layout.
No layout logic is allowed in the renderer - everything is pre-calculated here.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from .base import Point


# =============================================================================
# INPUT ENTITIES
# =============================================================================

@dataclass(frozen=True)
class Interval:
    """
    One parsed input record.

    `end` is None for ongoing records. It stays None here; geometry
    substitutes `now` through `effective_end`.
    """
    id: int
    label: str
    subtitle: str
    decoration_ref: str
    color_hint: str
    start: datetime
    end: Optional[datetime]
    start_label: str         # Verbatim text, "2024" stays "2024"
    end_label: str           # Empty when ongoing

    @property
    def is_ongoing(self) -> bool:
        return self.end is None

    def effective_end(self, now: datetime) -> datetime:
        return self.end if self.end is not None else now


# =============================================================================
# DERIVED ENTITIES
# =============================================================================

@dataclass(frozen=True)
class LaneAssignment:
    """Lane of one interval. Lane 0 is the baseline."""
    interval_id: int
    lane_index: int


@dataclass(frozen=True)
class TimeScale:
    """
    Linear instant -> pixel mapping over the observed span.

    A zero-width domain maps every instant to the middle of the range.
    """
    domain_start: datetime
    domain_end: datetime
    range_start: float
    range_end: float

    @property
    def domain_seconds(self) -> float:
        return (self.domain_end - self.domain_start).total_seconds()

    def project(self, instant: datetime) -> float:
        width = self.domain_seconds
        if width <= 0:
            return (self.range_start + self.range_end) / 2
        t = (instant - self.domain_start).total_seconds() / width
        return self.range_start + t * (self.range_end - self.range_start)


class VerticalAnchor(Enum):
    """Where an item's labels sit relative to its node."""
    ABOVE = "above"
    BELOW = "below"


@dataclass(frozen=True)
class LabelPlacement:
    """Date label decisions for one interval."""
    interval_id: int
    anchor: VerticalAnchor
    start_x: float
    end_x: float
    show_start_label: bool
    show_end_label: bool


@dataclass(frozen=True)
class StageTiming:
    """One global animation stage, in seconds."""
    name: str
    delay: float
    duration: float

    @property
    def end(self) -> float:
        return self.delay + self.duration


@dataclass(frozen=True)
class ItemTiming:
    """Per-item reveal timing, in seconds."""
    interval_id: int
    index: int
    delay: float
    reveal_duration: float
    closing_at: float


@dataclass(frozen=True)
class AnimationPlan:
    """Global stages (baseline, labels, items) plus one timing per item."""
    total_duration: float
    stages: Tuple[StageTiming, ...]
    items: Tuple[ItemTiming, ...]

    def stage(self, name: str) -> StageTiming:
        for stage in self.stages:
            if stage.name == name:
                return stage
        raise KeyError(name)


@dataclass(frozen=True)
class StrokePath:
    """A polyline drawn with a stroke-dash effect; `length` is exact."""
    points: Tuple[Point, ...]
    length: float


@dataclass(frozen=True)
class LabelBlock:
    """Company/title text block beside a node."""
    text_x: float
    top_y: float
    line_height: float
    logo_x: Optional[float]
    logo_size: float


# =============================================================================
# OUTPUT CONTRACT
# =============================================================================

@dataclass(frozen=True)
class ItemLayout:
    """Everything a renderer needs for one interval."""
    interval: Interval
    lane_index: int
    start_x: float
    end_x: float
    node_y: float
    labels: LabelPlacement
    timing: ItemTiming
    connector: StrokePath
    closing_connector: StrokePath
    block: LabelBlock
    logo_data: Optional[str] = None

    @property
    def anchor(self) -> VerticalAnchor:
        return self.labels.anchor


@dataclass(frozen=True)
class TimelineLayout:
    """
    Fully calculated timeline.
    Items are in lane-processing order (start asc, effective end desc).
    """
    width: float
    height: float
    title_y: float
    baseline_y: float
    lane_count: int
    scale: TimeScale
    baseline: StrokePath
    animation: AnimationPlan
    items: Tuple[ItemLayout, ...]
    base_font_size: float
    include_start_dates: bool
    include_end_dates: bool

    @property
    def is_empty(self) -> bool:
        return not self.items
