"""Light and dark colour themes for terminal output."""

from __future__ import annotations

from enum import Enum

from rich.theme import Theme as RichTheme


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


def next_theme(theme: Theme) -> Theme:
    """Return the theme a toggle switches to."""
    return Theme.LIGHT if theme is Theme.DARK else Theme.DARK


PALETTES: dict[Theme, dict[str, str]] = {
    Theme.LIGHT: {
        "background": "#eff1f5",
        "panel": "#e6e9ef",
        "text": "#4c4f69",
        "subtext": "#6c6f85",
        "data": "#7287fd",
    },
    Theme.DARK: {
        "background": "#1e1e2e",
        "panel": "#181825",
        "text": "#cdd6f4",
        "subtext": "#a6adc8",
        "data": "#cba6f7",
    },
}

# Glyph on the toggle: points at the theme a click would switch to.
TOGGLE_GLYPHS = {Theme.LIGHT: "🌙", Theme.DARK: "☀️"}


def rich_theme(theme: Theme) -> RichTheme:
    """Build Rich styles named after the palette slots."""
    palette = PALETTES[theme]
    return RichTheme(
        {
            "text": palette["text"],
            "subtext": palette["subtext"],
            "data": f"bold {palette['data']}",
            "background": f"on {palette['background']}",
            "panel": f"on {palette['panel']}",
        }
    )
