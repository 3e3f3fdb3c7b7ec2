"""Points, lines and view settings of the wireframe viewer."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

BOUND_X = 1024
BOUND_Y = 1024

DEFAULT_COLOR = 0x00FFFFFF

HA_MIN = 0.0
HA_MAX = math.pi * 2
HA_DELTA = math.pi * 2 / 48

VA_MIN = 0.0
VA_MAX = math.pi / 2
VA_DELTA = math.pi / 2 / 8

SCALE_MIN = 1
SCALE_MAX = 40
SCALE_DELTA = 1

HEIGHT_MIN = -10.0
HEIGHT_MAX = 10.0
HEIGHT_DELTA = 0.2


@dataclass(frozen=True, slots=True)
class Point:
    """A map vertex, or its projection on screen."""

    x: int
    y: int
    z: int
    color: int = DEFAULT_COLOR


@dataclass(frozen=True, slots=True)
class Line:
    """A segment between two points, ordered by its depth ``z``."""

    p1: Point
    p2: Point
    z: int

    @classmethod
    def from_points(cls, p1: Point, p2: Point) -> "Line":
        """Build a line whose depth is the larger depth of its ends."""
        return cls(p1, p2, max(p1.z, p2.z))


@dataclass(slots=True)
class View:
    """Camera settings: vertical and horizontal angles, scale, height factor."""

    va: float = math.pi / 4
    ha: float = -math.pi / 8
    scale: int = 20
    h: float = 1.0

    def copy(self) -> "View":
        """Return an independent copy of these settings."""
        return dataclasses.replace(self)