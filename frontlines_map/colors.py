"""Hex color helpers.

Deterministic darken / lighten transforms and the perceptual-brightness rule
used to pick legible text over a player color. None of these raise on bad
input: malformed colors map to fixed fallbacks.
"""

import re
from dataclasses import dataclass
from typing import Iterable, List, Optional

from frontlines_map.types import RGB


DARKEN_FALLBACK = "#888888"
LIGHTEN_FALLBACK = "#CCCCCC"
DARK_TEXT = "#000000"
LIGHT_TEXT = "#FFFFFF"

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


def is_hex_color(value: object) -> bool:
    """Return True for a ``#RRGGBB`` string (either case)."""
    return isinstance(value, str) and _HEX_COLOR.match(value) is not None


def parse_hex(value: object) -> Optional[RGB]:
    if not is_hex_color(value):
        return None
    assert isinstance(value, str)
    return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)


def to_hex(rgb: RGB) -> str:
    """Encode channels (clamped to [0, 255]) as an upper-case ``#RRGGBB``."""
    r, g, b = (max(0, min(255, int(c))) for c in rgb)
    return f"#{r:02X}{g:02X}{b:02X}"


def darken(hex_color: object, factor: float = 0.7) -> str:
    """Scale each channel toward 0: ``floor(channel * factor)``."""
    rgb = parse_hex(hex_color)
    if rgb is None:
        return DARKEN_FALLBACK
    r, g, b = rgb
    return to_hex((int(r * factor), int(g * factor), int(b * factor)))


def lighten(hex_color: object, factor: float = 0.3) -> str:
    """Scale each channel toward 255: ``floor(c + (255 - c) * factor)``."""
    rgb = parse_hex(hex_color)
    if rgb is None:
        return LIGHTEN_FALLBACK
    r, g, b = rgb
    return to_hex(
        (
            int(r + (255 - r) * factor),
            int(g + (255 - g) * factor),
            int(b + (255 - b) * factor),
        )
    )


def brightness(rgb: RGB) -> float:
    """Perceived brightness ``0.299*R + 0.587*G + 0.114*B``."""
    r, g, b = rgb
    return 0.299 * r + 0.587 * g + 0.114 * b


def contrasting_text_color(hex_color: object) -> str:
    """Black text on bright backgrounds, white otherwise (and for bad input)."""
    rgb = parse_hex(hex_color)
    if rgb is None:
        return LIGHT_TEXT
    return DARK_TEXT if brightness(rgb) > 128 else LIGHT_TEXT


@dataclass(frozen=True)
class CellFormat:
    """Background / font color pair for a single formatted cell."""

    background: str
    font_color: str


def format_color_cell(value: object) -> Optional[CellFormat]:
    """Formatting for a cell holding a color value, or ``None`` if not a color.

    The cell is painted with its own color and given contrasting text.
    """
    if not is_hex_color(value):
        return None
    assert isinstance(value, str)
    return CellFormat(background=value, font_color=contrasting_text_color(value))


def format_color_column(values: Iterable[object]) -> List[Optional[CellFormat]]:
    return [format_color_cell(value) for value in values]
