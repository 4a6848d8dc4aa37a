"""
Most Starred Repositories SVG

One card per repository, stacked vertically, sliding in one after another.
Card delays split the animation duration evenly: card i starts at
duration * (i + 1) / (n + 2).
"""

from __future__ import annotations
from typing import List, Optional

from ..contracts.repositories import Repository, StarredRepositories
from .svg import CREDIT_COMMENT, FONT_STACK, esc, no_data_svg, num, svg_close, svg_open
from .theme import THEMES, Theme

WIDTH = 700
PADDING_TOP = 96
PADDING_SIDE = 48
PADDING_BOTTOM = 48
CARD_HEIGHT = 130
CARD_SPACING = 16

DEFAULT_TITLE = "Most Starred"
DEFAULT_ANIMATION_DURATION = 3.5

DESCRIPTION_MAX_CHARS = 170
DESCRIPTION_LINE_CHARS = 85
NO_DESCRIPTION = "No description provided"

STAR_PATH = "M8 0l2.163 6.636h6.978l-5.652 4.106 2.163 6.636L8 13.272l-5.652 4.106 2.163-6.636L0 6.636h6.978z"
FORK_PATH = (
    "M5 5.372v.878c0 .414.336.75.75.75h4.5a.75.75 0 0 0 .75-.75v-.878a2.25 2.25 0 1 1 1.5 0v.878"
    "a2.25 2.25 0 0 1-2.25 2.25h-1.5v2.128a2.251 2.251 0 1 1-1.5 0V8.5h-1.5A2.25 2.25 0 0 1 3.5 6.25"
    "v-.878a2.25 2.25 0 1 1 1.5 0ZM5 3.25a.75.75 0 1 0-1.5 0 .75.75 0 0 0 1.5 0Zm6.75.75a.75.75 0 1 0 0-1.5"
    ".75.75 0 0 0 0 1.5Zm-3 8.75a.75.75 0 1 0-1.5 0 .75.75 0 0 0 1.5 0Z"
)


# =============================================================================
# TEXT HELPERS
# =============================================================================

def format_number(value: int) -> str:
    return f"{value:,}"


def truncate_text(text: Optional[str], max_chars: int) -> str:
    if not text:
        return ""
    if len(text) <= max_chars:
        return text
    return text[:max_chars - 3] + "..."


def wrap_text(text: Optional[str], max_chars: int) -> List[str]:
    """Greedy word wrap. A single word longer than the limit keeps its own line."""
    if not text:
        return [""]
    if len(text) <= max_chars:
        return [text]

    lines: List[str] = []
    current = ""
    for word in text.split(" "):
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_chars:
            current = candidate
        else:
            if current:
                lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


# =============================================================================
# GEOMETRY
# =============================================================================

def canvas_height(count: int) -> float:
    """Canvas height for `count` cards (count >= 1)."""
    return PADDING_TOP + PADDING_BOTTOM + count * CARD_HEIGHT + (count - 1) * CARD_SPACING


def card_delay(index: int, count: int, duration: float) -> float:
    return round(duration * (index + 1) / (count + 2), 2)


def _card(repo: Repository, index: int, theme: Theme) -> str:
    x = PADDING_SIDE
    y = PADDING_TOP + index * (CARD_HEIGHT + CARD_SPACING)
    width = WIDTH - 2 * PADDING_SIDE
    lines = wrap_text(truncate_text(repo.description or NO_DESCRIPTION, DESCRIPTION_MAX_CHARS), DESCRIPTION_LINE_CHARS)
    spans = "".join(
        f'<tspan x="{x + 20}" dy="{0 if i == 0 else 18}">{esc(line)}</tspan>'
        for i, line in enumerate(lines)
    )
    return f"""  <g class="card card-{index}">
    <rect x="{x}" y="{y}" width="{width}" height="{CARD_HEIGHT}" fill="{theme.bg}" rx="12" stroke="{theme.border}" stroke-width="1" filter="url(#dropShadow)"/>
    <rect x="{x}" y="{y}" width="{width}" height="{CARD_HEIGHT}" fill="none" rx="12" stroke="url(#glowGradient)" stroke-width="2" stroke-dasharray="20 10" filter="url(#glow)" class="glow-border"/>
    <text x="{x + 20}" y="{y + 32}" fill="{theme.text}" class="repo-name">{esc(repo.full_name)}</text>
    <text x="{x + 20}" y="{y + 56}" fill="{theme.subtext}" class="repo-desc">{spans}</text>
    <g transform="translate({x + 20}, {y + 106})">
      <svg x="0" y="-8" width="16" height="16" viewBox="0 0 16 16" fill="{theme.warning}"><path d="{STAR_PATH}"/></svg>
      <text x="22" y="0" fill="{theme.text}" class="stat-text stars" dominant-baseline="middle">{format_number(repo.stars)}</text>
    </g>
    <g transform="translate({x + 120}, {y + 106})">
      <svg x="0" y="-7" width="14" height="14" viewBox="0 0 14 14" fill="{theme.subtext}"><path d="{FORK_PATH}"/></svg>
      <text x="22" y="0" fill="{theme.subtext}" class="stat-text-fork forks" dominant-baseline="middle">{format_number(repo.forks)}</text>
    </g>
  </g>"""


def render_most_starred_svg(
    starred: StarredRepositories,
    title: Optional[str] = None,
    theme: Optional[Theme] = None,
    animation_duration: Optional[float] = None,
) -> str:
    """Render the cards. A user without repositories renders 'No data'."""
    theme = theme or THEMES["radical"]
    if starred.is_empty:
        return no_data_svg(WIDTH, 200, theme.bg, theme.text)

    title = title or DEFAULT_TITLE
    duration = animation_duration or DEFAULT_ANIMATION_DURATION
    count = len(starred.repositories)
    height = canvas_height(count)

    card_rules = "".join(
        f"\n      .card-{i} {{ animation: slideInCard 0.6s ease-out forwards {card_delay(i, count, duration):.2f}s; }}"
        for i in range(count)
    )
    cards = "\n".join(_card(repo, i, theme) for i, repo in enumerate(starred.repositories))
    cycle_a = f"{theme.accent_a};{theme.accent_b};{theme.accent_c};{theme.accent_a}"
    cycle_b = f"{theme.accent_b};{theme.accent_c};{theme.accent_a};{theme.accent_b}"
    cycle_c = f"{theme.accent_c};{theme.accent_a};{theme.accent_b};{theme.accent_c}"
    label = f"{title} - @{starred.login}"

    return f"""{svg_open(WIDTH, height, label)}
  {CREDIT_COMMENT}
  <defs>
    <filter id="dropShadow" x="-50%" y="-50%" width="200%" height="200%">
      <feGaussianBlur in="SourceAlpha" stdDeviation="4"/>
      <feOffset dx="0" dy="2" result="offsetblur"/>
      <feComponentTransfer><feFuncA type="linear" slope="0.3"/></feComponentTransfer>
      <feMerge><feMergeNode/><feMergeNode in="SourceGraphic"/></feMerge>
    </filter>
    <linearGradient id="glowGradient" x1="0%" y1="0%" x2="100%" y2="100%">
      <stop offset="0%" stop-color="{theme.accent_a}"><animate attributeName="stop-color" values="{cycle_a}" dur="6s" repeatCount="indefinite"/></stop>
      <stop offset="50%" stop-color="{theme.accent_b}"><animate attributeName="stop-color" values="{cycle_b}" dur="6s" repeatCount="indefinite"/></stop>
      <stop offset="100%" stop-color="{theme.accent_c}"><animate attributeName="stop-color" values="{cycle_c}" dur="6s" repeatCount="indefinite"/></stop>
    </linearGradient>
    <filter id="glow" x="-50%" y="-50%" width="200%" height="200%">
      <feGaussianBlur stdDeviation="3" result="coloredBlur"/>
      <feMerge><feMergeNode in="coloredBlur"/><feMergeNode in="SourceGraphic"/></feMerge>
    </filter>
    <style>
      @keyframes fadeIn {{ from {{ opacity: 0; transform: translateY(-10px); }} to {{ opacity: 1; transform: translateY(0); }} }}
      @keyframes slideInCard {{ from {{ opacity: 0; transform: translateX(-20px); }} to {{ opacity: 1; transform: translateX(0); }} }}
      @keyframes glowPulse {{ 0%, 100% {{ opacity: 0.6; }} 50% {{ opacity: 1; }} }}
      @keyframes glowRotate {{ from {{ stroke-dashoffset: 0; }} to {{ stroke-dashoffset: 1000; }} }}
      .title {{ font: 700 24px {FONT_STACK}; animation: fadeIn 0.8s ease-out forwards; }}
      .subtitle {{ font: 400 16px {FONT_STACK}; opacity: 0; animation: fadeIn 0.8s ease-out forwards 0.2s; }}
      .card {{ opacity: 0; }}{card_rules}
      .glow-border {{ animation: glowPulse 3s ease-in-out infinite, glowRotate 8s linear infinite; }}
      .repo-name {{ font: 600 18px {FONT_STACK}; }}
      .repo-desc {{ font: 400 14px {FONT_STACK}; }}
      .stat-text {{ font: 500 15px {FONT_STACK}; }}
      .stat-text-fork {{ font: 500 14px {FONT_STACK}; }}
    </style>
  </defs>
  <rect x="0" y="0" width="{WIDTH}" height="{num(height)}" fill="{theme.bg}" rx="16"/>
  <text x="{WIDTH / 2:g}" y="48" text-anchor="middle" fill="{theme.title}" class="title">{esc(title)}</text>
  <text x="{WIDTH / 2:g}" y="72" text-anchor="middle" fill="{theme.subtext}" class="subtitle">@{esc(starred.login)}</text>
{cards}
{svg_close()}"""
