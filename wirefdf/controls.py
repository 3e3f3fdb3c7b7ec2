"""Keyboard and mouse-wheel controls that adjust the view."""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import IntEnum

from .colors import clamp, cycle
from .model import (
    HA_DELTA,
    HA_MAX,
    HA_MIN,
    HEIGHT_DELTA,
    HEIGHT_MAX,
    HEIGHT_MIN,
    SCALE_DELTA,
    SCALE_MAX,
    SCALE_MIN,
    VA_DELTA,
    VA_MAX,
    VA_MIN,
    View,
)

SCROLL_UP = 4
SCROLL_DOWN = 5


class Key(IntEnum):
    """Key codes the viewer reacts to."""

    A = 0
    S = 1
    D = 2
    Q = 12
    W = 13
    E = 14
    R = 15
    NUM_1 = 18
    NUM_2 = 19
    NUM_3 = 20
    NUM_4 = 21
    NUM_5 = 23
    ESC = 53
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


def _turn(step: float) -> Callable[[View], None]:
    def apply(view: View) -> None:
        view.ha = cycle(view.ha + step, HA_MIN, HA_MAX)

    return apply


def _tilt(step: float) -> Callable[[View], None]:
    def apply(view: View) -> None:
        view.va = clamp(view.va + step, VA_MIN, VA_MAX)

    return apply


def _raise(step: float) -> Callable[[View], None]:
    def apply(view: View) -> None:
        view.h = clamp(view.h + step, HEIGHT_MIN, HEIGHT_MAX)

    return apply


def _preset(ha: float, va: float) -> Callable[[View], None]:
    def apply(view: View) -> None:
        view.ha = ha
        view.va = va

    return apply


def _flip(view: View) -> None:
    view.ha = cycle(view.ha + (HA_MAX - HA_MIN) / 2, HA_MIN, HA_MAX)


_ACTIONS: dict[Key, Callable[[View], None]] = {
    Key.RIGHT: _turn(HA_DELTA),
    Key.LEFT: _turn(-HA_DELTA),
    Key.UP: _tilt(VA_DELTA),
    Key.DOWN: _tilt(-VA_DELTA),
    Key.D: _turn(HA_DELTA),
    Key.A: _turn(-HA_DELTA),
    Key.W: _tilt(VA_DELTA),
    Key.S: _tilt(-VA_DELTA),
    Key.E: _raise(HEIGHT_DELTA),
    Key.Q: _raise(-HEIGHT_DELTA),
    Key.NUM_1: _preset(0.0, 0.0),
    Key.NUM_2: _preset(math.pi / 2, 0.0),
    Key.NUM_3: _preset(0.0, VA_MAX),
    Key.NUM_4: _preset(math.pi / 4, math.pi / 4),
    Key.NUM_5: _flip,
}


def handle_key(key: int, view: View) -> bool:
    """Apply ``key`` to ``view`` in place; return True if the view changed."""
    try:
        action = _ACTIONS[Key(key)]
    except (ValueError, KeyError):
        return False
    before = view.copy()
    action(view)
    return view != before


def handle_scroll(button: int, view: View) -> bool:
    """Zoom ``view`` in or out for a wheel ``button``; return True if it changed."""
    if button == SCROLL_UP:
        step = SCALE_DELTA
    elif button == SCROLL_DOWN:
        step = -SCALE_DELTA
    else:
        return False
    before = view.scale
    view.scale = int(clamp(view.scale + step, SCALE_MIN, SCALE_MAX))
    return view.scale != before