"""
Lane Allocator

Greedy interval-graph colouring over a fixed processing order.

ORDER (exact, part of the observable contract):
    start ascending, then effective end descending (ongoing = now, latest),
    then input id ascending.

SCAN:
    lanes are kept as a growable list of "last end" instants in creation
    order. Each interval takes the first lane whose last end <= its start,
    otherwise opens a new lane. Ranges are half-open [start, end-or-now).
"""

from __future__ import annotations
from datetime import datetime
import math
from typing import List, Sequence, Tuple

from ..contracts.layout import Interval, LaneAssignment


def processing_order(intervals: Sequence[Interval], now: datetime) -> Tuple[Interval, ...]:
    """Sort into the order shared by lanes, labels and animation."""
    return tuple(sorted(
        intervals,
        key=lambda it: (it.start, -it.effective_end(now).timestamp(), it.id),
    ))


def allocate_lanes(ordered: Sequence[Interval], now: datetime) -> Tuple[LaneAssignment, ...]:
    """
    Assign lanes to intervals that are already in `processing_order`.

    Returns one LaneAssignment per interval, same order as the input.
    """
    lane_last_end: List[datetime] = []
    assignments: List[LaneAssignment] = []

    for it in ordered:
        end = it.effective_end(now)
        assigned = -1
        for lane_index, last_end in enumerate(lane_last_end):
            if last_end <= it.start:
                assigned = lane_index
                lane_last_end[lane_index] = end
                break
        if assigned == -1:
            lane_last_end.append(end)
            assigned = len(lane_last_end) - 1
        assignments.append(LaneAssignment(interval_id=it.id, lane_index=assigned))

    return tuple(assignments)


def lane_count(assignments: Sequence[LaneAssignment]) -> int:
    if not assignments:
        return 0
    return max(a.lane_index for a in assignments) + 1


def lane_offset(lane_index: int, lane_height: float) -> float:
    """
    Signed vertical offset from the baseline (negative is up).

    lane 0 -> 0; lane k -> pair ceil(k/2) * lane_height, odd k up, even k down.
    """
    if lane_index == 0:
        return 0.0
    pair_index = math.ceil(lane_index / 2)
    offset = pair_index * lane_height
    return -offset if lane_index % 2 == 1 else offset


def is_above_baseline(lane_index: int) -> bool:
    return lane_index % 2 == 1
