"""
Contributions Activity SVG

Serializes ActivityGeometry plus the series header (user, totals).
The line draws in with a single dash whose length is the exact path length.
"""

from __future__ import annotations
from typing import Optional

from ..contracts.activity import ActivityGeometry, ActivitySeries
from .svg import (
    CREDIT_COMMENT, FONT_STACK, MONO_STACK, esc, no_data_svg, num, svg_close, svg_open,
)
from .theme import THEMES, Theme

HEADER_Y = 42


def _line_d(geometry: ActivityGeometry) -> str:
    return " ".join(
        f"{'M' if i == 0 else 'L'} {p.x:.2f} {p.y:.2f}" for i, p in enumerate(geometry.points)
    )


def _area_d(geometry: ActivityGeometry) -> str:
    first, last = geometry.points[0], geometry.points[-1]
    return " ".join([
        f"M {first.x:.2f} {num(geometry.plot_bottom)}",
        *(f"L {p.x:.2f} {p.y:.2f}" for p in geometry.points),
        f"L {last.x:.2f} {num(geometry.plot_bottom)}",
        "Z",
    ])


def render_activity_svg(
    series: ActivitySeries,
    geometry: Optional[ActivityGeometry],
    theme: Optional[Theme] = None,
) -> str:
    """Render the chart. A series with no days (geometry None) renders 'No data'."""
    theme = theme or THEMES["radical"]
    if geometry is None or not series.days:
        width = geometry.width if geometry else 900
        height = geometry.height if geometry else 360
        return no_data_svg(width, height, theme.bg, theme.text)

    user = series.user
    totals = series.totals
    width, height = geometry.width, geometry.height
    length = geometry.path_length
    header_y = HEADER_Y
    title_full = f"Contributions – {user.display_name} (@{user.login})"

    grid = "".join(
        f'<g><line x1="{num(geometry.plot_left)}" x2="{num(geometry.plot_right)}" '
        f'y1="{tick.y:.2f}" y2="{tick.y:.2f}" class="grid-line" />'
        f'<text class="tick" x="{num(geometry.plot_left - 10)}" y="{tick.y:.2f}" dy="4" '
        f'text-anchor="end">{tick.value}</text></g>'
        for tick in geometry.y_ticks
    )
    markers = "".join(
        f'<circle cx="{p.x:.2f}" cy="{p.y:.2f}" r="2.6" class="point" '
        f'fill="{"url(#gradLine)" if c > 0 else theme.fade_shadow}" />'
        for i, (p, c) in enumerate(zip(geometry.points, geometry.counts))
        if i % geometry.marker_stride == 0
    )
    x_labels = "".join(
        f'<text class="axis-label" x="{label.x:.2f}" y="{geometry.plot_bottom + 24:.2f}" '
        f'text-anchor="middle">{esc(label.text)}</text>'
        for label in geometry.x_labels
    )

    return f"""{svg_open(width, height, title_full)}
  {CREDIT_COMMENT}
  <defs>
    <linearGradient id="gradLine" x1="0" x2="1" y1="0" y2="0">
      <stop offset="0%" stop-color="{theme.accent_b}" stop-opacity="1"/>
      <stop offset="100%" stop-color="{theme.accent_a}" stop-opacity="1"/>
    </linearGradient>
    <linearGradient id="areaFade" x1="0" x2="0" y1="0" y2="1">
      <stop offset="0%" stop-color="{theme.accent_a}" stop-opacity="0.20"/>
      <stop offset="100%" stop-color="{theme.accent_b}" stop-opacity="0.02"/>
    </linearGradient>
    <filter id="cardShadow" x="-50%" y="-50%" width="200%" height="200%">
      <feDropShadow dx="0" dy="8" stdDeviation="14" flood-color="{theme.shadow}" flood-opacity="0.45"/>
    </filter>
    <style>
      .card-bg {{ fill: {theme.card}; }}
      .title-main {{ font: 700 18px {FONT_STACK}; fill: {theme.text}; opacity: 0; animation: fadeIn 0.9s ease-out forwards; }}
      .title-login {{ font-weight: 700; fill: {theme.accent_a}; font-family: {MONO_STACK}; }}
      .subtitle {{ font: 500 13px {FONT_STACK}; fill: {theme.subtext}; opacity: 0; animation: fadeIn 0.9s ease-out forwards 0.35s; }}
      .meta {{ font: 500 13px {FONT_STACK}; fill: {theme.subtext}; opacity: 0; animation: fadeIn 0.9s ease-out forwards 0.6s; }}
      .total-num {{ font: 700 15px {FONT_STACK}; fill: {theme.text}; }}
      .axis-label {{ font: 400 11px {FONT_STACK}; fill: {theme.subtext}; }}
      .tick {{ font: 400 11px {FONT_STACK}; fill: {theme.subtext}; }}
      .grid-line {{ stroke: {theme.grid}; stroke-width: 1; }}
      .line {{ fill: none; stroke: url(#gradLine); stroke-width: 2.5; stroke-linejoin: round; stroke-linecap: round; animation: drawLine 2s cubic-bezier(.22,.9,.3,1) forwards; }}
      .area {{ fill: url(#areaFade); opacity: 0; animation: fadeArea 1.0s ease-out forwards 0.9s; }}
      .point {{ stroke: none; opacity: 0; animation: fadeIn 0.5s ease-out forwards 1.6s; }}
      @keyframes drawLine {{ from {{ stroke-dashoffset: {length}; }} to {{ stroke-dashoffset: 0; }} }}
      @keyframes fadeArea {{ to {{ opacity: 0.95; }} }}
      @keyframes fadeIn {{ to {{ opacity: 1; }} }}
    </style>
  </defs>
  <rect x="6" y="6" width="{num(width - 12)}" height="{num(height - 12)}" rx="14" ry="14" class="card-bg" filter="url(#cardShadow)"/>
  <g transform="translate({num(geometry.plot_left)}, {header_y})">
    <text class="title-main" x="0" y="0">Contributions – {esc(user.display_name)} <tspan class="title-login">(@{esc(user.login)})</tspan></text>
    <text class="subtitle" x="0" y="20">Commits: {totals.commits} · PRs: {totals.pull_requests} · Issues: {totals.issues} · Reviews: {totals.reviews}</text>
  </g>
  <g transform="translate({num(geometry.plot_right - 8)}, {header_y + 2})">
    <text class="meta" x="0" y="0" text-anchor="end">Total: <tspan class="total-num">{totals.total}</tspan></text>
  </g>
  <g>{grid}</g>
  <path d="{_area_d(geometry)}" class="area"/>
  <path d="{_line_d(geometry)}" class="line" stroke-dasharray="{length} {length}" stroke-dashoffset="{length}" />
  <g>{markers}</g>
  <g>{x_labels}</g>
  <line x1="{num(geometry.plot_left)}" x2="{num(geometry.plot_right)}" y1="{geometry.plot_bottom:.2f}" y2="{geometry.plot_bottom:.2f}" stroke="{theme.grid}" stroke-width="1" />
{svg_close()}"""
