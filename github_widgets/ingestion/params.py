"""
Widget Query Parameters

Numeric query values arrive as text; each parser returns the validated
number or raises InvalidParameter naming the field.
"""

from __future__ import annotations
import math
from typing import Optional

from ..contracts.base import InvalidParameter

DEFAULT_TOP = 3
MIN_TOP = 1
MAX_TOP = 10

MIN_ANIMATION_DURATION = 0.5
MAX_ANIMATION_DURATION = 10.0


def parse_top(text: Optional[str]) -> int:
    """Repository count, 1-10. Absent means the default of 3."""
    if text is None:
        return DEFAULT_TOP
    try:
        value = int(text.strip())
    except ValueError:
        value = None
    if value is None or not MIN_TOP <= value <= MAX_TOP:
        raise InvalidParameter(f"top must be a number between {MIN_TOP} and {MAX_TOP}", field="top")
    return value


def parse_animation_duration(text: Optional[str]) -> Optional[float]:
    """Seconds, 0.5-10. Absent means the renderer's default."""
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        value = math.nan
    if math.isnan(value) or not MIN_ANIMATION_DURATION <= value <= MAX_ANIMATION_DURATION:
        raise InvalidParameter(
            f"animationDuration must be a number between {MIN_ANIMATION_DURATION:g} and {MAX_ANIMATION_DURATION:g}",
            field="animationDuration",
        )
    return value
