"""
Temporal Layout Engine

RESPONSIBILITY: Records -> collision-free geometry + animation schedule
ALLOWED INPUTS: Raw rows or parsed Intervals, LayoutConfig, an explicit `now`
OUTPUTS: TimelineLayout, ActivityGeometry

WHAT THIS LAYER MUST NOT DO:
============================
- Read the system clock (now is injected)
- Perform I/O of any kind (logos arrive already resolved)
- Serialize SVG
- Keep state between calls

Modules:
- parser: rows -> Interval
- scale: TimeScale construction
- lanes: greedy lane allocation
- labels: date-label suppression and label blocks
- animation: stage/item timings and exact path lengths
- ticks: y-axis ticks for the activity chart
- activity: activity chart geometry
- timeline: the full timeline fold
"""

from .parser import iter_intervals, parse_intervals
from .scale import build_time_scale
from .lanes import processing_order, allocate_lanes, lane_count, lane_offset
from .labels import place_labels, label_block, anchor_for_lane, LABEL_PROXIMITY_PX
from .animation import schedule_animation, path_length, stroke_path, STAGE_PROPORTIONS
from .ticks import nice_ticks
from .activity import ActivityConfig, compute_activity_geometry
from .timeline import LayoutConfig, compute_timeline_layout, layout_records

__all__ = [
    'iter_intervals',
    'parse_intervals',
    'build_time_scale',
    'processing_order',
    'allocate_lanes',
    'lane_count',
    'lane_offset',
    'place_labels',
    'label_block',
    'anchor_for_lane',
    'LABEL_PROXIMITY_PX',
    'schedule_animation',
    'path_length',
    'stroke_path',
    'STAGE_PROPORTIONS',
    'nice_ticks',
    'ActivityConfig',
    'compute_activity_geometry',
    'LayoutConfig',
    'compute_timeline_layout',
    'layout_records',
]
