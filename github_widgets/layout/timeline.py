"""
Timeline Layout Engine

Pure function of (records, options, now) -> TimelineLayout.

LAYER FLOW:
===========
1. Parser:     rows -> Interval (fails fast, nothing partial)
2. Scale:      global min/max -> TimeScale
3. Lanes:      processing order -> LaneAssignment
4. Labels:     lanes + scale -> LabelPlacement, LabelBlock
5. Animation:  processing order -> AnimationPlan, StrokePath lengths

Holds no state between calls. Logos must already be resolved to in-memory
data before this runs; the engine only needs to know which exist.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
import logging
import math
from typing import Iterable, Mapping, Optional, Sequence

from ..contracts.base import Margin, Point
from ..contracts.layout import Interval, ItemLayout, TimelineLayout
from ..temporal.dates import as_utc
from .animation import schedule_animation, stroke_path
from .labels import DATE_LABEL_GAP, LABEL_PROXIMITY_PX, label_block, place_labels
from .lanes import allocate_lanes, lane_count, lane_offset, processing_order
from .parser import parse_intervals
from .scale import build_time_scale

logger = logging.getLogger(__name__)

BASELINE_TICK_HALF = 6.0


@dataclass(frozen=True)
class LayoutConfig:
    """Explicit option struct. The engine reads nothing else."""
    width: float = 1200
    lane_height: float = 80
    margin: Margin = field(default_factory=Margin)
    animation_duration: float = 6.0
    base_font_size: float = 13
    include_start_dates: bool = True
    include_end_dates: bool = True
    embed_logos: bool = True
    label_proximity: float = LABEL_PROXIMITY_PX

    @property
    def line_height(self) -> float:
        return self.base_font_size + 3


def compute_timeline_layout(
    intervals: Sequence[Interval],
    now: datetime,
    config: Optional[LayoutConfig] = None,
    logos: Optional[Mapping[int, Optional[str]]] = None,
) -> TimelineLayout:
    """
    Lay out parsed intervals.

    Args:
        intervals: Parsed records, any order
        now: Instant substituted for every absent end; naive values are taken as UTC
        config: Layout options
        logos: interval id -> data URI (None or missing = no logo)
    """
    now = as_utc(now)
    config = config or LayoutConfig()
    logos = logos or {}
    margin = config.margin

    ordered = processing_order(intervals, now)
    scale = build_time_scale(ordered, now, margin.left, config.width - margin.right)
    assignments = allocate_lanes(ordered, now)
    lanes = lane_count(assignments)

    content_height = math.ceil(max(1, lanes) / 2) * config.lane_height * 2
    height = margin.top + margin.bottom + content_height
    baseline_y = margin.top + content_height / 2

    placements = place_labels(
        ordered,
        assignments,
        scale,
        now,
        proximity=config.label_proximity,
        include_start=config.include_start_dates,
        include_end=config.include_end_dates,
    )
    plan = schedule_animation([it.id for it in ordered], config.animation_duration)
    dates_on = config.include_start_dates or config.include_end_dates
    date_row = config.base_font_size + DATE_LABEL_GAP if dates_on else 0.0

    baseline = stroke_path([
        Point(scale.range_start, baseline_y),
        Point(scale.range_end, baseline_y),
    ])

    items = []
    for it, assignment, placement, timing in zip(ordered, assignments, placements, plan.items):
        node_y = baseline_y + lane_offset(assignment.lane_index, config.lane_height)
        sx, ex = placement.start_x, placement.end_x

        if assignment.lane_index == 0:
            connector = stroke_path([Point(sx, baseline_y), Point(ex, baseline_y)])
            closing = stroke_path([
                Point(ex, baseline_y - BASELINE_TICK_HALF),
                Point(ex, baseline_y + BASELINE_TICK_HALF),
            ])
        else:
            connector = stroke_path([Point(sx, baseline_y), Point(sx, node_y), Point(ex, node_y)])
            closing = stroke_path([Point(ex, node_y), Point(ex, baseline_y)])

        logo_data = logos.get(it.id) if config.embed_logos else None
        block = label_block(
            node_x=sx,
            node_y=node_y,
            anchor=placement.anchor,
            has_subtitle=bool(it.subtitle),
            has_logo=logo_data is not None,
            line_height=config.line_height,
            date_row=date_row,
        )

        items.append(ItemLayout(
            interval=it,
            lane_index=assignment.lane_index,
            start_x=sx,
            end_x=ex,
            node_y=node_y,
            labels=placement,
            timing=timing,
            connector=connector,
            closing_connector=closing,
            block=block,
            logo_data=logo_data,
        ))

    logger.debug("Timeline layout: %d items, %d lanes", len(items), lanes)

    return TimelineLayout(
        width=config.width,
        height=height,
        title_y=margin.top / 2,
        baseline_y=baseline_y,
        lane_count=lanes,
        scale=scale,
        baseline=baseline,
        animation=plan,
        items=tuple(items),
        base_font_size=config.base_font_size,
        include_start_dates=config.include_start_dates,
        include_end_dates=config.include_end_dates,
    )


def layout_records(
    rows: Iterable[Mapping[str, Optional[str]]],
    now: datetime,
    config: Optional[LayoutConfig] = None,
    logos: Optional[Mapping[int, Optional[str]]] = None,
) -> TimelineLayout:
    """Parse then lay out. Parse errors propagate unmodified."""
    return compute_timeline_layout(parse_intervals(rows), now, config, logos)
