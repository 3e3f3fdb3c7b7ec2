"""Reading height maps: rows of heights with optional colours."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable

from .colors import parse_hex_color
from .model import DEFAULT_COLOR, Point

MAX_HEIGHT_IN_TILES = 10.0

_WHITESPACE = " \t\n\v\f\r"


class MapError(ValueError):
    """Raised when a map cannot be read or is malformed."""


def _round_half_away(value: float) -> int:
    if value < 0:
        return -_round_half_away(-value)
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def _leading_int(text: str) -> int:
    """Read an optionally signed decimal number at the start of ``text``."""
    text = text.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        value = value * 10 + ord(char) - ord("0")
    return sign * value


def parse_point(token: str) -> Point:
    """Parse ``height`` or ``height,0xRRGGBB`` into a point at the origin."""
    height_text, comma, color_text = token.partition(",")
    color = parse_hex_color(color_text) if comma else DEFAULT_COLOR
    return Point(0, 0, _leading_int(height_text), color)


def parse_row(text: str) -> list[Point]:
    """Parse one line of space-separated point tokens."""
    return [parse_point(token) for token in text.split(" ") if token]


def _place(rows: list[list[Point]], max_z: int) -> list[list[Point]]:
    """Centre the grid on the origin and scale heights to the tile range."""
    num = len(rows)
    length = len(rows[0])
    shift_x = int(length % 2 != 1)
    shift_y = int(num % 2 != 1)
    placed = []
    for i, row in enumerate(rows):
        y = (i - (num - 1) // 2) * 2 - shift_y
        placed_row = []
        for j, point in enumerate(row):
            x = (j - (length - 1) // 2) * 2 - shift_x
            z = (
                0
                if max_z == 0
                else _round_half_away(point.z / max_z * MAX_HEIGHT_IN_TILES)
            )
            placed_row.append(Point(x, y, z, point.color))
        placed.append(placed_row)
    return placed


def parse_map(lines: Iterable[str]) -> list[list[Point]]:
    """Build a centred grid of points from the lines of a map.

    Reading stops at the first line with no points. Every row must have
    as many points as the first one.
    """
    rows: list[list[Point]] = []
    max_z = 0
    for line in lines:
        row = parse_row(line)
        if not row:
            break
        if rows and len(row) != len(rows[0]):
            raise MapError(
                f"row {len(rows) + 1} has {len(row)} points, expected {len(rows[0])}"
            )
        max_z = max(max_z, max(point.z for point in row))
        rows.append(row)
    if not rows:
        raise MapError("map has no points")
    return _place(rows, max_z)


def read_map(path: str | os.PathLike[str]) -> list[list[Point]]:
    """Read and parse the map stored in the file at ``path``."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read {os.fspath(path)}: {exc}") from exc
    return parse_map(text.split("\n"))