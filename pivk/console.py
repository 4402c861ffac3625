"""Console text colours and attribute encoding."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Console colour codes."""

    BLACK = 0x0
    BLUE = 0x1
    GREEN = 0x2
    CYAN = 0x3
    RED = 0x4
    PURPLE = 0x5
    YELLOW = 0x6
    WHITE = 0x7
    GREY = 0x8
    LIGHT_BLUE = 0x9
    LIGHT_GREEN = 0xA
    LIGHT_CYAN = 0xB
    LIGHT_RED = 0xC
    LIGHT_PURPLE = 0xD
    LIGHT_YELLOW = 0xE
    LIGHT_WHITE = 0xF


def console_color(text: Color = Color.WHITE, background: Color = Color.BLACK) -> int:
    """Combine text and background colours into one attribute value."""
    return int(text) | (int(background) << 4)