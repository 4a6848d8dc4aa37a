"""
Experience Timeline SVG

Serializes a TimelineLayout. Every coordinate, suppression flag, delay and
dash length comes from the layout; nothing is recomputed here.
"""

from __future__ import annotations
from typing import List, Optional

from ..contracts.layout import ItemLayout, StrokePath, TimelineLayout
from ..layout.animation import STAGE_BASELINE, STAGE_LABELS
from ..layout.labels import NODE_RADIUS, date_label_y
from .svg import (
    CREDIT_COMMENT, FONT_STACK, esc, no_data_svg, num, polyline_d, seconds,
    svg_close, svg_line, svg_open, svg_path, svg_rect, svg_text,
)
from .theme import THEMES, Theme

TITLE = "Experience Timeline"
BAR_HEIGHT = 18
BAR_MIN_WIDTH = 6


def _font_sizes(base: float):
    return {
        "title": round(base * 28 / 13),
        "company": base,
        "subtitle": base - 1,
        "date": max(base - 3, 8),
    }


def _style_block(layout: TimelineLayout, theme: Theme) -> str:
    sizes = _font_sizes(layout.base_font_size)
    return f"""<style>
      .title {{ font: 700 {num(sizes['title'])}px {FONT_STACK}; fill: {theme.title}; }}
      .company {{ font: 700 {num(sizes['company'])}px {FONT_STACK}; fill: {theme.title}; }}
      .subtitle {{ font: 400 {num(sizes['subtitle'])}px {FONT_STACK}; fill: {theme.text}; }}
      .date {{ font: 400 {num(sizes['date'])}px {FONT_STACK}; fill: {theme.subtext}; opacity: 0; }}
      .item {{ opacity: 0; }}
      @keyframes draw {{ to {{ stroke-dashoffset: 0; }} }}
      @keyframes fadeIn {{ to {{ opacity: 1; }} }}
    </style>"""


def _draw_attrs(path: StrokePath, delay: float, duration: float) -> str:
    length = num(path.length)
    return (
        f'stroke-dasharray="{length} {length}" stroke-dashoffset="{length}" '
        f'style="animation: draw {seconds(duration)} ease-out {seconds(delay)} forwards"'
    )


def _fade_style(delay: float, duration: float) -> str:
    return f'style="animation: fadeIn {seconds(duration)} ease-out {seconds(delay)} forwards"'


def _clip_path(item: ItemLayout) -> Optional[str]:
    if item.logo_data is None or item.block.logo_x is None:
        return None
    half = item.block.logo_size / 2
    return (
        f'<clipPath id="logo_clip_{item.interval.id}">'
        f'<circle cx="{num(item.block.logo_x + half)}" cy="{num(item.block.top_y + half)}" r="{num(half)}"/>'
        f'</clipPath>'
    )

def _render_item(item: ItemLayout, theme: Theme) -> List[str]:
    it = item.interval
    timing = item.timing
    color = esc(it.color_hint) if it.color_hint else theme.accent_a
    out = [f'<g class="item" data-lane="{item.lane_index}" {_fade_style(timing.delay, timing.reveal_duration)}>']

    width = max(BAR_MIN_WIDTH, item.end_x - item.start_x)
    out.append(svg_rect(
        min(item.start_x, item.end_x), item.node_y - 10, width, BAR_HEIGHT,
        fill=color,
        extra=f'rx="9" fill-opacity="0.14" stroke="{color}" stroke-opacity="0.45" stroke-width="1.2"',
    ))
    out.append(svg_path(
        polyline_d(item.connector.points),
        extra=f'fill="none" stroke="{theme.accent_c}" stroke-width="1.6" '
              + _draw_attrs(item.connector, timing.delay, timing.reveal_duration),
    ))
    out.append(svg_path(
        polyline_d(item.closing_connector.points),
        extra=f'fill="none" stroke="{theme.accent_c}" stroke-width="1.6" '
              + _draw_attrs(item.closing_connector, timing.closing_at, timing.reveal_duration),
    ))
    out.append(
        f'<circle cx="{num(item.start_x)}" cy="{num(item.node_y)}" r="{num(NODE_RADIUS)}" '
        f'fill="{color}" stroke="{theme.node_stroke}" stroke-width="1.2"/>'
    )

    block = item.block
    if item.logo_data is not None and block.logo_x is not None:
        out.append(
            f'<image href="{esc(item.logo_data)}" x="{num(block.logo_x)}" y="{num(block.top_y)}" '
            f'width="{num(block.logo_size)}" height="{num(block.logo_size)}" '
            f'preserveAspectRatio="xMidYMid slice" clip-path="url(#logo_clip_{it.id})"/>'
        )

    company_y = block.top_y + block.line_height - 2
    out.append(svg_text(block.text_x, company_y, it.label, extra='class="company"'))
    if it.subtitle:
        out.append(svg_text(block.text_x, company_y + block.line_height, it.subtitle, extra='class="subtitle"'))

    out.append("</g>")
    return out


def _render_dates(layout: TimelineLayout) -> List[str]:
    labels = layout.animation.stage(STAGE_LABELS)
    fade = _fade_style(labels.delay, labels.duration)
    out = []
    for item in layout.items:
        y = date_label_y(item.node_y, item.anchor, layout.base_font_size)
        if item.labels.show_start_label:
            out.append(svg_text(item.start_x, y, item.interval.start_label,
                                extra=f'class="date" text-anchor="middle" {fade}'))
        if item.labels.show_end_label:
            out.append(svg_text(item.end_x, y, item.interval.end_label,
                                extra=f'class="date" text-anchor="middle" {fade}'))
    return out


def render_timeline_svg(layout: TimelineLayout, theme: Optional[Theme] = None) -> str:
    """Serialize the layout. An empty layout renders a 'No data' card."""
    theme = theme or THEMES["timeline"]
    if layout.is_empty:
        return no_data_svg(layout.width, layout.height, theme.bg, theme.text)

    baseline_stage = layout.animation.stage(STAGE_BASELINE)
    start, end = layout.baseline.points[0], layout.baseline.points[-1]

    clips = [c for c in (_clip_path(item) for item in layout.items) if c]

    parts = [
        svg_open(layout.width, layout.height, TITLE),
        CREDIT_COMMENT,
        "<defs>",
        _style_block(layout, theme),
        *clips,
        "</defs>",
        svg_rect(0, 0, layout.width, layout.height, fill=theme.bg),
        svg_text(layout.width / 2, layout.title_y, TITLE, extra='class="title" text-anchor="middle"'),
        svg_line(
            start.x, start.y, end.x, end.y,
            extra=f'stroke="{theme.accent_c}" stroke-width="2" stroke-opacity="0.95" '
                  + _draw_attrs(layout.baseline, baseline_stage.delay, baseline_stage.duration),
        ),
        '<g class="dates">',
        *_render_dates(layout),
        "</g>",
        '<g class="items">',
    ]
    for item in layout.items:
        parts.extend(_render_item(item, theme))
    parts.extend(["</g>", svg_close()])
    return "\n".join(parts)
