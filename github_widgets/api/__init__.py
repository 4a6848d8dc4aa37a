"""
API Layer

RESPONSIBILITY: HTTP surface for the widgets
ALLOWED INPUTS: Query parameters
OUTPUTS: SVG documents, layout JSON, error SVG cards

WHAT THIS LAYER MUST NOT DO:
============================
- Compute layout or render markup itself
- Cache error responses
"""

from .mapper import TimelineDTO, map_layout_to_dto
from .server import create_app, error_response, svg_response

__all__ = [
    "create_app",
    "error_response",
    "svg_response",
    "TimelineDTO",
    "map_layout_to_dto",
]
