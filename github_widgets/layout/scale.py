"""
Time Scale

Builds the continuous instant -> x mapping over the full observed span.
"""

from __future__ import annotations
from datetime import datetime
from typing import Sequence

from ..contracts.layout import Interval, TimeScale


def build_time_scale(
    intervals: Sequence[Interval],
    now: datetime,
    range_start: float,
    range_end: float,
) -> TimeScale:
    """
    domain_start = min(start), domain_end = max(end-or-now).

    Starts also bound the domain end: an ongoing record that starts after
    `now` stretches the domain to its own start, so every start stays in
    range and `project` stays non-decreasing. An empty set collapses the
    domain onto `now`.
    """
    if not intervals:
        return TimeScale(now, now, range_start, range_end)

    domain_start = min(it.start for it in intervals)
    domain_end = max(
        max(it.effective_end(now) for it in intervals),
        max(it.start for it in intervals),
    )

    return TimeScale(
        domain_start=domain_start,
        domain_end=domain_end,
        range_start=range_start,
        range_end=range_end,
    )
