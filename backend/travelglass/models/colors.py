"""Conversions between scene-set display colors and their stored `#RRGGBB` form."""

from __future__ import annotations

import re
from typing import Dict, Optional

DEFAULT_COLOR_HEX = "#007AFF"

# Named system colors ("blue", "red", ...)
NAMED_COLORS: Dict[str, str] = {
    "blue": "#007AFF",
    "brown": "#A2845E",
    "cyan": "#32ADE6",
    "gray": "#8E8E93",
    "green": "#34C759",
    "indigo": "#5856D6",
    "mint": "#00C7BE",
    "orange": "#FF9500",
    "pink": "#FF2D55",
    "purple": "#AF52DE",
    "red": "#FF3B30",
    "teal": "#30B0C7",
    "yellow": "#FFCC00",
}

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def color_to_hex(color: str) -> Optional[str]:
    """Return the `#RRGGBB` form of a named or hex color, or None if unknown."""
    value = (color or "").strip()
    named = NAMED_COLORS.get(value.lower())
    if named:
        return named
    match = _HEX_PATTERN.match(value)
    if not match:
        return None
    return f"#{match.group(1).upper()}"


def hex_to_color(value: str) -> str:
    """Parse a stored hex string, falling back to the default blue."""
    return color_to_hex(value) if _HEX_PATTERN.match((value or "").strip()) else DEFAULT_COLOR_HEX
