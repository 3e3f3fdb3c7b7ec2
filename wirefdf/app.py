"""The interactive wireframe viewer and its command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .canvas import Canvas
from .controls import SCROLL_DOWN, SCROLL_UP, Key, handle_key, handle_scroll
from .mapfile import MapError, read_map
from .model import BOUND_X, BOUND_Y, Point, View
from .render import render

TITLE = "FdF"


class Viewer:
    """Holds a point grid, the current view and the image it is drawn into."""

    def __init__(self, points: Sequence[Sequence[Point]]) -> None:
        self.points = points
        self.view = View()
        self.canvas = Canvas(BOUND_X, BOUND_Y)
        self.dirty = True

    def redraw(self) -> int:
        """Draw the grid afresh; return the number of lines drawn."""
        count = render(self.points, self.view, self.canvas)
        self.dirty = True
        return count

    def on_key(self, key: int) -> bool:
        """React to a key; return False when the viewer should close."""
        if key == Key.ESC:
            return False
        if handle_key(key, self.view) or key == Key.R:
            self.redraw()
        return True

    def on_scroll(self, button: int) -> bool:
        """React to a wheel button; return True if the view changed."""
        if handle_scroll(button, self.view):
            self.redraw()
            return True
        return False


def _key_map(pygame) -> dict[int, Key]:
    return {
        pygame.K_ESCAPE: Key.ESC,
        pygame.K_r: Key.R,
        pygame.K_e: Key.E,
        pygame.K_q: Key.Q,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_w: Key.W,
        pygame.K_a: Key.A,
        pygame.K_s: Key.S,
        pygame.K_d: Key.D,
        pygame.K_1: Key.NUM_1,
        pygame.K_2: Key.NUM_2,
        pygame.K_3: Key.NUM_3,
        pygame.K_4: Key.NUM_4,
        pygame.K_5: Key.NUM_5,
    }


def _run_window(viewer: Viewer) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((BOUND_X, BOUND_Y))
        pygame.display.set_caption(TITLE)
        keys = _key_map(pygame)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in keys:
                    running = viewer.on_key(keys[event.key])
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (
                    SCROLL_UP,
                    SCROLL_DOWN,
                ):
                    viewer.on_scroll(event.button)
                if not running:
                    break
            if running and viewer.dirty:
                image = pygame.image.frombuffer(
                    viewer.canvas.to_rgb_bytes(), (BOUND_X, BOUND_Y), "RGB"
                )
                screen.fill((0, 0, 0))
                screen.blit(image, (0, 0))
                pygame.display.flip()
                viewer.dirty = False
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window showing the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: wirefdf file.fdf")
        return 0
    try:
        points = read_map(args[0])
    except MapError:
        print("error occurred while reading file")
        return 0
    viewer = Viewer(points)
    viewer.redraw()
    _run_window(viewer)
    return 0