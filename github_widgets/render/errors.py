"""Error card returned for every failed widget request."""

from __future__ import annotations

from .svg import FONT_STACK, MONO_STACK, esc, svg_close, svg_open

ERROR_WIDTH = 800
ERROR_HEIGHT = 200
ERROR_RED = "#ff6b6b"


def error_svg(message: str, status_code: int = 500) -> str:
    """Render an 800x200 card stating the message and the HTTP status."""
    mid = ERROR_HEIGHT / 2
    text = esc(message)
    return f"""{svg_open(ERROR_WIDTH, ERROR_HEIGHT, f"Error: {message}")}
  <defs>
    <style>
      .error-bg {{ fill: #0b1020; }}
      .error-border {{ fill: none; stroke: {ERROR_RED}; stroke-width: 2; }}
      .error-icon {{ fill: {ERROR_RED}; }}
      .error-title {{ font: 700 18px {FONT_STACK}; fill: {ERROR_RED}; }}
      .error-message {{ font: 500 14px {FONT_STACK}; fill: #cbd5e1; }}
      .error-code {{ font: 400 12px {MONO_STACK}; fill: #94a3b8; }}
    </style>
  </defs>
  <rect x="0" y="0" width="{ERROR_WIDTH}" height="{ERROR_HEIGHT}" rx="16" class="error-bg"/>
  <rect x="2" y="2" width="{ERROR_WIDTH - 4}" height="{ERROR_HEIGHT - 4}" rx="14" class="error-border"/>
  <circle cx="60" cy="{mid:g}" r="24" class="error-icon" opacity="0.2"/>
  <path d="M 60 {mid - 12:g} L 60 {mid + 4:g}" stroke="{ERROR_RED}" stroke-width="3" stroke-linecap="round"/>
  <circle cx="60" cy="{mid + 12:g}" r="2" class="error-icon"/>
  <text x="110" y="{mid - 10:g}" class="error-title">Error</text>
  <text x="110" y="{mid + 15:g}" class="error-message">{text}</text>
  <text x="110" y="{mid + 35:g}" class="error-code">Status: {status_code}</text>
{svg_close()}"""
