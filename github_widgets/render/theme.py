"""Colour tables for the widgets."""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    bg: str
    card: str
    text: str
    subtext: str
    title: str
    grid: str
    accent_a: str
    accent_b: str
    accent_c: str
    node_stroke: str
    shadow: str
    fade_shadow: str
    border: str = "#2b2436"
    warning: str = "#f8d847"


THEMES = {
    "radical": Theme(
        bg="#0b1020",
        card="#0f1724",
        text="#cbd5e1",
        subtext="#94a3b8",
        title="#fe428e",
        grid="rgba(255,255,255,0.06)",
        accent_a="#ff6b6b",
        accent_b="#7c5cff",
        accent_c="#f8d847",
        node_stroke="#111",
        shadow="#000",
        fade_shadow="#ffffff11",
    ),
    "timeline": Theme(
        bg="#141321",
        card="#141321",
        text="#a9fef7",
        subtext="#a9fef7",
        title="#fe428e",
        grid="#2b2436",
        accent_a="#fe428e",
        accent_b="#7c5cff",
        accent_c="#f8d847",
        node_stroke="#111",
        shadow="#000",
        fade_shadow="#ffffff11",
    ),
}

DEFAULT_THEME = "radical"


def get_theme(name: str) -> Theme:
    """Unknown names fall back to the default theme."""
    return THEMES.get(name, THEMES[DEFAULT_THEME])
