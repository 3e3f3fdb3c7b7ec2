"""Projection of map points onto the screen."""

from __future__ import annotations

import math

from .model import BOUND_X, BOUND_Y, Point, View


def _round(value: float) -> int:
    """Round half away from zero."""
    if value < 0:
        return -_round(-value)
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


def project(point: Point, view: View) -> Point:
    """Rotate and tilt ``point`` by ``view`` and place it on the screen.

    The returned point's ``z`` holds its depth on screen, used to order
    the drawing of lines.
    """
    x0 = BOUND_X // 2
    y0 = BOUND_Y // 2
    height = float(view.scale) * math.cos(view.va) * view.h
    scaled_x = point.x * view.scale
    scaled_y = point.y * view.scale
    radius = scaled_x * scaled_x + scaled_y * scaled_y
    radius = 0.0 if radius <= 0 else math.sqrt(radius)
    angle = math.atan2(point.y, point.x) + view.ha
    screen_x = x0 + _round(radius * math.cos(angle))
    depth = _round(math.sin(view.va) * radius * math.sin(angle))
    screen_y = y0 + depth - _round(point.z * height)
    return Point(screen_x, screen_y, depth, point.color)