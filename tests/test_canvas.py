import pytest

from wirefdf.canvas import Canvas
from wirefdf.model import Point


def _lit(canvas):
    return {
        (x, y)
        for y in range(canvas.height)
        for x in range(canvas.width)
        if canvas.get_pixel(x, y) != 0
    }


def test_new_canvas_is_black():
    canvas = Canvas(4, 3)
    assert _lit(canvas) == set()
    assert canvas.to_rgb_bytes() == bytes(4 * 3 * 3)


@pytest.mark.parametrize("size", [(0, 5), (5, 0), (-1, 2)])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        Canvas(*size)


def test_put_and_get_pixel_drops_alpha():
    canvas = Canvas(8, 8)
    assert canvas.put_pixel(2, 5, 0xFF123456) is True
    assert canvas.get_pixel(2, 5) == 0x123456


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (8, 0), (0, 8)])
def test_put_pixel_outside_is_ignored(x, y):
    canvas = Canvas(8, 8)
    assert canvas.put_pixel(x, y, 0xFFFFFF) is False
    assert _lit(canvas) == set()


def test_get_pixel_outside_raises():
    with pytest.raises(IndexError):
        Canvas(2, 2).get_pixel(2, 0)


def test_clear():
    canvas = Canvas(3, 3)
    canvas.put_pixel(1, 1, 0x00FF00)
    canvas.clear()
    assert _lit(canvas) == set()


def test_rgb_bytes_order():
    canvas = Canvas(2, 1)
    canvas.put_pixel(1, 0, 0x0A0B0C)
    assert canvas.to_rgb_bytes() == bytes([0, 0, 0, 0x0A, 0x0B, 0x0C])


def test_horizontal_line():
    canvas = Canvas(10, 10)
    canvas.draw_line(Point(1, 2, 0), Point(6, 2, 0))
    assert _lit(canvas) == {(x, 2) for x in range(1, 7)}


def test_vertical_line():
    canvas = Canvas(10, 10)
    canvas.draw_line(Point(3, 7, 0), Point(3, 1, 0))
    assert _lit(canvas) == {(3, y) for y in range(1, 8)}


def test_diagonal_line():
    canvas = Canvas(10, 10)
    canvas.draw_line(Point(0, 0, 0), Point(5, 5, 0))
    assert _lit(canvas) == {(i, i) for i in range(6)}


def test_degenerate_line_draws_nothing():
    canvas = Canvas(5, 5)
    canvas.draw_line(Point(2, 2, 0), Point(2, 2, 9))
    assert _lit(canvas) == set()


@pytest.mark.parametrize(
    "a,b",
    [((0, 0), (9, 4)), ((2, 9), (5, 0)), ((9, 1), (0, 6)), ((1, 1), (8, 8))],
)
def test_line_is_same_in_both_directions_and_connected(a, b):
    forward = Canvas(10, 10)
    backward = Canvas(10, 10)
    forward.draw_line(Point(*a, 0), Point(*b, 0))
    backward.draw_line(Point(*b, 0), Point(*a, 0))
    pixels = _lit(forward)
    assert pixels == _lit(backward)
    assert a in pixels and b in pixels
    longest = max(abs(a[0] - b[0]), abs(a[1] - b[1]))
    assert len(pixels) == longest + 1


def test_line_shades_from_start_to_end_color():
    canvas = Canvas(10, 10)
    canvas.draw_line(Point(0, 0, 0, 0xFF0000), Point(8, 0, 0, 0x0000FF))
    assert canvas.get_pixel(0, 0) == 0xFF0000
    assert canvas.get_pixel(8, 0) == 0x0000FF
    reds = [canvas.get_pixel(x, 0) >> 16 for x in range(9)]
    assert reds == sorted(reds, reverse=True)


def test_line_partly_off_canvas_is_clipped():
    canvas = Canvas(5, 5)
    canvas.draw_line(Point(-3, 2, 0), Point(8, 2, 0))
    assert _lit(canvas) == {(x, 2) for x in range(5)}