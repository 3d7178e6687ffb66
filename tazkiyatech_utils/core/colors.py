"""Colors: conversions between packed RGB ints and "#RRGGBB" hex strings.

Invariants:
    - rgb_color_to_hex_string always returns 7 chars: "#" + 6 uppercase hex digits
    - Only the low 24 bits are formatted; alpha and sign bits are masked off
    - hex_string_to_rgb_color returns a value in 0x000000–0xFFFFFF

Design Decisions:
    - Masking instead of rejecting out-of-range ints: ARGB ints (0xFF000000 black)
      and negative signed 32-bit colors format the same as their RGB part
"""

import re

from tazkiyatech_utils.core.domain_types import HexColor, RgbColor
from tazkiyatech_utils.core.errors import ErrorContext, InvalidArgumentError


RGB_MASK: int = 0xFFFFFF

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{6})$")


def rgb_color_to_hex_string(rgb_color: RgbColor) -> HexColor:
    """Convert an RGB int color to its "#RRGGBB" representation.

    Args:
        rgb_color: The packed RGB (or ARGB) int color.

    Returns:
        The uppercase, zero-padded hex string of the color's RGB part.
    """
    if isinstance(rgb_color, bool) or not isinstance(rgb_color, int):
        raise InvalidArgumentError(
            f"rgb_color must be an int, got {type(rgb_color).__name__}",
            argument="rgb_color",
            context=ErrorContext(operation="rgb_color_to_hex_string"),
        )
    return HexColor(f"#{rgb_color & RGB_MASK:06X}")


def hex_string_to_rgb_color(hex_color: str) -> RgbColor:
    """Convert a "#RRGGBB" (or "RRGGBB") string to a packed RGB int.

    Args:
        hex_color: The hex color string, case-insensitive.

    Returns:
        The 24-bit RGB int.
    """
    match = _HEX_PATTERN.match(hex_color.strip()) if isinstance(hex_color, str) else None
    if match is None:
        raise InvalidArgumentError(
            f"Invalid hex color {hex_color!r}. Expected format: #RRGGBB",
            argument="hex_color",
            context=ErrorContext(operation="hex_string_to_rgb_color"),
        )
    return RgbColor(int(match.group(1), 16))
