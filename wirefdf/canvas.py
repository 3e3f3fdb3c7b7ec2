"""An in-memory image the wireframe is drawn into."""

from __future__ import annotations

from array import array
from typing import Protocol

from .colors import MAX_BLEND, blend


class _Vertex(Protocol):
    x: int
    y: int
    color: int


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class Canvas:
    """A grid of 0xRRGGBB pixels, black when cleared."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive")
        self.width = width
        self.height = height
        self._pixels = array("I", [0]) * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> bool:
        """Set one pixel; return False if it lies outside the canvas."""
        if not self._inside(x, y):
            return False
        self._pixels[y * self.width + x] = color & 0x00FFFFFF
        return True

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Make every pixel black."""
        self._pixels = array("I", [0]) * (self.width * self.height)

    def to_rgb_bytes(self) -> bytes:
        """Return the pixels row by row as packed RGB triples."""
        out = bytearray(len(self._pixels) * 3)
        for index, color in enumerate(self._pixels):
            out[index * 3 : index * 3 + 3] = color.to_bytes(3, "big")
        return bytes(out)

    def draw_line(self, start: _Vertex, end: _Vertex) -> None:
        """Draw a straight line, shading from the start colour to the end colour."""
        if start.x == end.x and start.y == end.y:
            return
        if start.x == end.x:
            slope = 1.0
        else:
            slope = (end.y - start.y) / (end.x - start.x)
        steep = abs(slope) >= 1
        self._draw_along(start, end, steep)

    def _draw_along(self, start: _Vertex, end: _Vertex, steep: bool) -> None:
        """Bresenham walk along y when ``steep``, along x otherwise."""

        def axes(vertex: _Vertex) -> tuple[int, int]:
            return (vertex.y, vertex.x) if steep else (vertex.x, vertex.y)

        major0, minor0 = axes(start)
        major1, minor1 = axes(end)
        if major0 > major1:
            start, end = end, start
            (major0, minor0), (major1, minor1) = (major1, minor1), (major0, minor0)
        span = major1 - major0
        rise = abs(minor1 - minor0)
        step = _sign(minor1 - minor0)
        error = 0
        minor = minor0
        for major in range(major0, major1 + 1):
            amount = (major - major0) * MAX_BLEND // span
            color = blend(end.color, start.color, amount)
            if steep:
                self.put_pixel(minor, major, color)
            else:
                self.put_pixel(major, minor, color)
            error += rise
            if 2 * error >= span:
                minor += step
                error -= span