"""
Render Layer

Serializes pre-computed layouts into SVG documents.

WHAT THIS LAYER MUST NOT DO:
============================
- Compute positions, lanes or timings
- Fetch anything over the network
- Decide HTTP status codes
"""

from .activity_svg import render_activity_svg
from .errors import error_svg
from .most_starred_svg import render_most_starred_svg
from .svg import esc, no_data_svg, num
from .theme import DEFAULT_THEME, THEMES, Theme, get_theme
from .timeline_svg import render_timeline_svg

__all__ = [
    "render_activity_svg",
    "render_timeline_svg",
    "render_most_starred_svg",
    "error_svg",
    "no_data_svg",
    "esc",
    "num",
    "Theme",
    "THEMES",
    "DEFAULT_THEME",
    "get_theme",
]
