"""Y-axis ticks for the activity chart."""

from __future__ import annotations
import math
from typing import Tuple


def nice_ticks(max_value: int, target_count: int = 5) -> Tuple[int, ...]:
    """
    0, step, 2*step, ... up to `max_value`, with step = ceil(max / (count - 1))
    (at least 1). `max_value` is appended when the steps miss it.
    """
    divisions = max(target_count - 1, 1)
    step = math.ceil(max_value / divisions) or 1
    step = max(step, 1)

    ticks = []
    value = 0
    while value <= max_value:
        ticks.append(value)
        value += step
    if not ticks or ticks[-1] != max_value:
        ticks.append(max_value)
    return tuple(ticks)
