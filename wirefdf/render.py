"""Projecting a point grid and drawing it back to front."""

from __future__ import annotations

from collections.abc import Sequence

from .canvas import Canvas
from .linetree import LineBTree
from .model import BOUND_X, BOUND_Y, Line, Point, View
from .projection import project


def _on_screen(point: Point) -> bool:
    return 0 <= point.x <= BOUND_X and 0 <= point.y <= BOUND_Y


def is_line_on_screen(line: Line) -> bool:
    """Return True if at least one end of ``line`` lies within the screen."""
    return _on_screen(line.p1) or _on_screen(line.p2)


def build_line_tree(points: Sequence[Sequence[Point]], view: View) -> LineBTree:
    """Project the grid and collect its visible edges ordered by depth."""
    projected = [[project(point, view) for point in row] for row in points]
    tree = LineBTree()
    for i, row in enumerate(projected):
        for j, point in enumerate(row):
            neighbours = []
            if j + 1 < len(row):
                neighbours.append(row[j + 1])
            if i + 1 < len(projected):
                neighbours.append(projected[i + 1][j])
            for other in neighbours:
                line = Line.from_points(point, other)
                if is_line_on_screen(line):
                    tree.insert(line)
    return tree


def render(points: Sequence[Sequence[Point]], view: View, canvas: Canvas) -> int:
    """Clear ``canvas`` and draw the grid on it; return the number of lines drawn."""
    tree = build_line_tree(points, view)
    canvas.clear()
    for line in tree:
        canvas.draw_line(line.p1, line.p2)
    return len(tree)