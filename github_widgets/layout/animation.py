"""
Animation Scheduler

Stage boundaries, per-item reveal timings and exact stroke path lengths.

POLICY:
=======
Stages are fixed proportions of one total duration:
    baseline 15% -> labels 10% -> items 75%
Each item gets an equal slot of the items stage and reveals in the first
half of it. Its closing effect starts when the reveal completes.
"""

from __future__ import annotations
from typing import Sequence, Tuple

from ..contracts.base import Point
from ..contracts.layout import AnimationPlan, ItemTiming, StageTiming, StrokePath


STAGE_BASELINE = "baseline"
STAGE_LABELS = "labels"
STAGE_ITEMS = "items"

STAGE_PROPORTIONS: Tuple[Tuple[str, float], ...] = (
    (STAGE_BASELINE, 0.15),
    (STAGE_LABELS, 0.10),
    (STAGE_ITEMS, 0.75),
)

REVEAL_FRACTION = 0.5
MIN_PATH_LENGTH = 1.0


def schedule_animation(item_ids: Sequence[int], total_duration: float) -> AnimationPlan:
    """
    Build the plan for items in processing order.

    delay[i] = labels_end + i * slot, slot = items_duration / N,
    reveal = slot * 0.5, closing_at = delay[i] + reveal.
    """
    stages = []
    cursor = 0.0
    for name, proportion in STAGE_PROPORTIONS:
        duration = proportion * total_duration
        stages.append(StageTiming(name=name, delay=cursor, duration=duration))
        cursor += duration

    items_stage = stages[-1]
    items = []
    if item_ids:
        slot = items_stage.duration / len(item_ids)
        reveal = slot * REVEAL_FRACTION
        for index, interval_id in enumerate(item_ids):
            delay = items_stage.delay + index * slot
            items.append(ItemTiming(
                interval_id=interval_id,
                index=index,
                delay=delay,
                reveal_duration=reveal,
                closing_at=delay + reveal,
            ))

    return AnimationPlan(
        total_duration=total_duration,
        stages=tuple(stages),
        items=tuple(items),
    )


def path_length(points: Sequence[Point]) -> float:
    """Exact polyline length (sum of segment lengths), floored at 1."""
    total = 0.0
    for previous, current in zip(points, points[1:]):
        total += previous.distance_to(current)
    return max(MIN_PATH_LENGTH, total)


def stroke_path(points: Sequence[Point]) -> StrokePath:
    points = tuple(points)
    return StrokePath(points=points, length=path_length(points))
