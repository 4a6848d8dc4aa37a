"""
Activity Chart Contracts

Time-series data for the contributions chart, as fetched from GitHub
and as laid out for rendering.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Tuple

from .base import Point


@dataclass(frozen=True)
class GitHubUser:
    login: str
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name or self.login


@dataclass(frozen=True)
class ContributionDay:
    day: date
    count: int


@dataclass(frozen=True)
class ContributionTotals:
    commits: int = 0
    pull_requests: int = 0
    issues: int = 0
    reviews: int = 0
    total: int = 0


@dataclass(frozen=True)
class ContributionWindow:
    """Inclusive UTC window, start of first day to end of last day."""
    start: datetime
    end: datetime
    start_text: Optional[str] = None    # As requested, None for the default window
    end_text: Optional[str] = None


@dataclass(frozen=True)
class ActivitySeries:
    user: GitHubUser
    window: ContributionWindow
    days: Tuple[ContributionDay, ...]
    totals: ContributionTotals


@dataclass(frozen=True)
class AxisLabel:
    x: float
    text: str


@dataclass(frozen=True)
class TickMark:
    value: int
    y: float


@dataclass(frozen=True)
class ActivityGeometry:
    """Pre-computed chart geometry. `path_length` is integral for dash arrays."""
    width: float
    height: float
    plot_left: float
    plot_right: float
    plot_bottom: float
    points: Tuple[Point, ...]
    counts: Tuple[int, ...]
    path_length: int
    x_labels: Tuple[AxisLabel, ...]
    y_ticks: Tuple[TickMark, ...]
    marker_stride: int
