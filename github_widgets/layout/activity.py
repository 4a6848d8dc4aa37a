"""
Activity Chart Geometry

Daily contribution counts -> polyline points, axis labels and ticks.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import Optional, Sequence

from ..contracts.base import Margin, Point
from ..contracts.activity import ActivityGeometry, AxisLabel, ContributionDay, TickMark
from ..temporal.dates import format_month_year
from .animation import path_length
from .ticks import nice_ticks


X_LABEL_COUNT = 4
MAX_MARKERS = 40


@dataclass(frozen=True)
class ActivityConfig:
    width: float = 900
    height: float = 360
    padding: Margin = field(default_factory=lambda: Margin(top=96, right=48, bottom=60, left=64))
    tick_count: int = 5


def compute_activity_geometry(
    days: Sequence[ContributionDay],
    config: Optional[ActivityConfig] = None,
) -> ActivityGeometry:
    """
    Lay out a non-empty, date-sorted day series.

    x is evenly spaced (a single day is centred); y scales by
    count / max(max_count, 1). The path length is exact, then ceiled.
    """
    config = config or ActivityConfig()
    pad = config.padding
    inner_w = config.width - pad.left - pad.right
    inner_h = config.height - pad.top - pad.bottom
    plot_bottom = pad.top + inner_h

    counts = tuple(d.count for d in days)
    max_count = max(max(counts), 1)
    n = len(days)

    def x_for_index(i: int) -> float:
        if n == 1:
            return pad.left + inner_w / 2
        return pad.left + (i / (n - 1)) * inner_w

    def y_for_count(c: int) -> float:
        return plot_bottom - (c / max_count) * inner_h

    points = tuple(Point(x_for_index(i), y_for_count(c)) for i, c in enumerate(counts))

    x_labels = []
    for i in range(X_LABEL_COUNT):
        idx = round((i / (X_LABEL_COUNT - 1)) * (n - 1))
        x_labels.append(AxisLabel(x=x_for_index(idx), text=format_month_year(days[idx].day)))

    y_ticks = tuple(TickMark(value=t, y=y_for_count(t)) for t in nice_ticks(max_count, config.tick_count))

    return ActivityGeometry(
        width=config.width,
        height=config.height,
        plot_left=pad.left,
        plot_right=config.width - pad.right,
        plot_bottom=plot_bottom,
        points=points,
        counts=counts,
        path_length=math.ceil(path_length(points)),
        x_labels=tuple(x_labels),
        y_ticks=y_ticks,
        marker_stride=math.ceil(max(1, n / MAX_MARKERS)),
    )
