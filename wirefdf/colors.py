"""Colour blending and small numeric helpers."""

from __future__ import annotations

MAX_BLEND = 255
MIN_BLEND = 0

MASK_RED = 0x00FF0000
MASK_GREEN = 0x0000FF00
MASK_BLUE = 0x000000FF

_HEX_DIGITS = "0123456789abcdef"


def _channels(color: int) -> tuple[int, int, int]:
    return (
        (color & MASK_RED) >> 16,
        (color & MASK_GREEN) >> 8,
        color & MASK_BLUE,
    )


def blend(c1: int, c2: int, val: int) -> int:
    """Mix two 0xRRGGBB colours: ``val`` 0 gives ``c2``, 255 gives ``c1``."""
    val &= 0xFF
    mixed = [
        int(start + (end - start) * float(val) / MAX_BLEND)
        for end, start in zip(_channels(c1), _channels(c2))
    ]
    red, green, blue = mixed
    return (red << 16) + (green << 8) + blue


def clamp(val: float, low: float, high: float) -> float:
    """Limit ``val`` to the closed range [low, high]."""
    if val < low:
        return low
    if val > high:
        return high
    return val


def cycle(val: float, low: float, high: float) -> float:
    """Wrap ``val`` around so that it falls within [low, high]."""
    while val > high:
        val = low + (val - high)
    while val < low:
        val = high - (low - val)
    return val


def parse_hex_color(text: str) -> int:
    """Read a colour written as ``0x`` followed by hex digits.

    Anything without the ``0x`` prefix yields 0, as does a prefix with no
    digits after it. Reading stops at the first character that is not a
    hex digit.
    """
    if not text.startswith("0x"):
        return 0
    value = 0
    for char in text[2:]:
        digit = _HEX_DIGITS.find(char.lower())
        if digit < 0:
            break
        value = value * 16 + digit
    return value