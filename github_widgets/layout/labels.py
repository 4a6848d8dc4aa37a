"""
Label Placement

Decides which date labels render and where each item's text block sits.

COLLISION RULE:
===============
Single greedy pass in processing order. A label whose x lies closer than
`proximity` pixels to any already placed label is suppressed (never moved).
Start labels are placed first, then end labels, sharing one accumulator
that lives only for the duration of the call. Earlier items win.
"""

from __future__ import annotations
from datetime import datetime
from typing import Dict, List, Sequence, Tuple

from ..contracts.layout import (
    Interval, LaneAssignment, TimeScale, LabelPlacement, VerticalAnchor, LabelBlock,
)
from .lanes import is_above_baseline


LABEL_PROXIMITY_PX = 40.0

NODE_RADIUS = 9.0
LOGO_SIZE = 26.0
LOGO_GAP = 6.0
BLOCK_GAP = 12.0
BLOCK_CLEARANCE = 8.0
DATE_LABEL_GAP = 6.0


def anchor_for_lane(lane_index: int) -> VerticalAnchor:
    """Above-baseline lanes label above their node, the rest below."""
    return VerticalAnchor.ABOVE if is_above_baseline(lane_index) else VerticalAnchor.BELOW


def _try_place(
    x: float,
    placed: Tuple[float, ...],
    proximity: float,
) -> Tuple[bool, Tuple[float, ...]]:
    if any(abs(x - other) < proximity for other in placed):
        return False, placed
    return True, placed + (x,)


def place_labels(
    ordered: Sequence[Interval],
    assignments: Sequence[LaneAssignment],
    scale: TimeScale,
    now: datetime,
    proximity: float = LABEL_PROXIMITY_PX,
    include_start: bool = True,
    include_end: bool = True,
) -> Tuple[LabelPlacement, ...]:
    """
    One LabelPlacement per interval, same order as `ordered`.

    Ongoing intervals have no end label. Disabled label kinds neither
    render nor occupy space in the accumulator.
    """
    lanes: Dict[int, int] = {a.interval_id: a.lane_index for a in assignments}
    placed: Tuple[float, ...] = ()

    start_xs = [scale.project(it.start) for it in ordered]
    end_xs = [scale.project(it.effective_end(now)) for it in ordered]

    show_start: List[bool] = []
    for x in start_xs:
        shown = False
        if include_start:
            shown, placed = _try_place(x, placed, proximity)
        show_start.append(shown)

    show_end: List[bool] = []
    for it, x in zip(ordered, end_xs):
        shown = False
        if include_end and not it.is_ongoing:
            shown, placed = _try_place(x, placed, proximity)
        show_end.append(shown)

    return tuple(
        LabelPlacement(
            interval_id=it.id,
            anchor=anchor_for_lane(lanes[it.id]),
            start_x=start_xs[i],
            end_x=end_xs[i],
            show_start_label=show_start[i],
            show_end_label=show_end[i],
        )
        for i, it in enumerate(ordered)
    )


def date_label_y(node_y: float, anchor: VerticalAnchor, font_size: float) -> float:
    """Baseline y of a node's date labels: above the node for ABOVE, below otherwise."""
    if anchor is VerticalAnchor.ABOVE:
        return node_y - NODE_RADIUS - DATE_LABEL_GAP
    return node_y + NODE_RADIUS + DATE_LABEL_GAP + font_size


def label_block(
    node_x: float,
    node_y: float,
    anchor: VerticalAnchor,
    has_subtitle: bool,
    has_logo: bool,
    line_height: float,
    date_row: float = 0.0,
) -> LabelBlock:
    """
    Company/title block beside a node. Sized by line count; the logo slot
    is reserved only when a logo was resolved.

    The block sits on the same side as the node's date labels, pushed out
    by `date_row` so the two never overlap.
    """
    block_x = node_x + NODE_RADIUS + BLOCK_GAP
    clearance = NODE_RADIUS + BLOCK_CLEARANCE + date_row
    if anchor is VerticalAnchor.ABOVE:
        block_height = (2 if has_subtitle else 1) * line_height
        top_y = node_y - clearance - block_height
    else:
        top_y = node_y + clearance

    if has_logo:
        return LabelBlock(
            text_x=block_x,
            top_y=top_y,
            line_height=line_height,
            logo_x=block_x - LOGO_SIZE - LOGO_GAP,
            logo_size=LOGO_SIZE,
        )
    return LabelBlock(
        text_x=block_x - (LOGO_SIZE + LOGO_GAP),
        top_y=top_y,
        line_height=line_height,
        logo_x=None,
        logo_size=LOGO_SIZE,
    )
