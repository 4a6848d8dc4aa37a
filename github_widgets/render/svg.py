"""
SVG string helpers shared by every widget renderer.

Pure string formatting: geometry and timing are decided upstream.
"""

from __future__ import annotations
import html as _html
from typing import Sequence

from ..contracts.base import Point

SVG_NS = "http://www.w3.org/2000/svg"
CREDIT_COMMENT = "<!-- Created By GitHub Widgets -->"
FONT_STACK = 'system-ui, -apple-system, "Segoe UI", Roboto, "Helvetica Neue", Arial'
MONO_STACK = '"SFMono-Regular", ui-monospace, "Roboto Mono", monospace'


def esc(text) -> str:
    """XML-escape a value. None becomes empty."""
    return _html.escape(str(text), quote=True) if text is not None else ""


def num(value: float) -> str:
    """Compact number: at most 2 decimals, no trailing zeros."""
    text = f"{value:.2f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def seconds(value: float) -> str:
    """CSS time value."""
    return f"{value:.3f}".rstrip("0").rstrip(".") + "s"


def polyline_d(points: Sequence[Point]) -> str:
    """M/L path data for a polyline."""
    return " ".join(
        f"{'M' if i == 0 else 'L'} {num(p.x)} {num(p.y)}" for i, p in enumerate(points)
    )


def svg_open(width: float, height: float, label: str = "") -> str:
    aria = f' role="img" aria-label="{esc(label)}"' if label else ""
    return (
        f'<svg xmlns="{SVG_NS}" width="{num(width)}" height="{num(height)}" '
        f'viewBox="0 0 {num(width)} {num(height)}"{aria}>'
    )


def svg_close() -> str:
    return "</svg>"


def svg_rect(x, y, w, h, fill="", extra="") -> str:
    parts = [f'<rect x="{num(x)}" y="{num(y)}" width="{num(w)}" height="{num(h)}"']
    if fill:
        parts.append(f' fill="{fill}"')
    if extra:
        parts.append(f" {extra}")
    parts.append("/>")
    return "".join(parts)


def svg_text(x, y, text, extra="") -> str:
    attrs = f" {extra}" if extra else ""
    return f'<text x="{num(x)}" y="{num(y)}"{attrs}>{esc(text)}</text>'


def svg_line(x1, y1, x2, y2, extra="") -> str:
    attrs = f" {extra}" if extra else ""
    return f'<line x1="{num(x1)}" y1="{num(y1)}" x2="{num(x2)}" y2="{num(y2)}"{attrs}/>'


def svg_path(d: str, extra="") -> str:
    attrs = f" {extra}" if extra else ""
    return f'<path d="{d}"{attrs}/>'


def no_data_svg(width: float, height: float, background: str, text_color: str) -> str:
    return "\n".join([
        svg_open(width, height, "No data"),
        svg_rect(0, 0, width, height, fill=background, extra='rx="16"'),
        svg_text(width / 2, height / 2, "No data", extra=f'text-anchor="middle" fill="{text_color}"'),
        svg_close(),
    ])
