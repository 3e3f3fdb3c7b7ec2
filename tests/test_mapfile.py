import pytest

from wirefdf.mapfile import (
    MAX_HEIGHT_IN_TILES,
    MapError,
    parse_map,
    parse_point,
    parse_row,
    read_map,
)
from wirefdf.model import DEFAULT_COLOR


def test_parse_point_plain_height_is_white():
    point = parse_point("10")
    assert (point.x, point.y, point.z) == (0, 0, 10)
    assert point.color == DEFAULT_COLOR


def test_parse_point_with_colour():
    point = parse_point("5,0xFF0000")
    assert point.z == 5
    assert point.color == 0xFF0000


def test_parse_point_negative_and_garbage():
    assert parse_point("-3").z == -3
    assert parse_point("abc").z == 0
    assert parse_point("7,red").color == 0


def test_parse_row_skips_repeated_spaces():
    row = parse_row("1  2   3")
    assert [p.z for p in row] == [1, 2, 3]


def test_parse_row_empty():
    assert parse_row("") == []
    assert parse_row("   ") == []


def test_parse_map_grid_shape_and_centring():
    grid = parse_map(["0 0 0", "0 0 0", "0 0 0"])
    assert len(grid) == 3
    assert all(len(row) == 3 for row in grid)
    xs = [p.x for p in grid[0]]
    ys = [row[0].y for row in grid]
    assert xs == [-x for x in reversed(xs)]
    assert ys == [-y for y in reversed(ys)]
    assert grid[1][1].x == 0 and grid[1][1].y == 0


def test_parse_map_even_size_is_symmetric():
    grid = parse_map(["1 2 3 4", "1 2 3 4"])
    xs = [p.x for p in grid[0]]
    assert sum(xs) == 0
    assert grid[0][0].y == -grid[1][0].y
    assert len(set(xs)) == 4


def test_parse_map_scales_max_height():
    grid = parse_map(["0 5", "0 20"])
    assert grid[1][1].z == int(MAX_HEIGHT_IN_TILES)
    assert grid[0][0].z == 0
    assert grid[0][1].z < grid[1][1].z


def test_parse_map_non_positive_heights_flatten():
    grid = parse_map(["-1 -2", "-3 0"])
    assert all(p.z == 0 for row in grid for p in row)


def test_parse_map_keeps_colours():
    grid = parse_map(["0,0x00ff00 1"])
    assert grid[0][0].color == 0x00FF00
    assert grid[0][1].color == DEFAULT_COLOR


def test_parse_map_stops_at_blank_line():
    grid = parse_map(["1 2", "3 4", "", "5"])
    assert len(grid) == 2


def test_parse_map_row_length_mismatch():
    with pytest.raises(MapError):
        parse_map(["1 2 3", "1 2"])


def test_parse_map_empty():
    with pytest.raises(MapError):
        parse_map([])
    with pytest.raises(MapError):
        parse_map(["", "1 2"])


def test_read_map_from_file(tmp_path):
    path = tmp_path / "map.fdf"
    path.write_text("0 0 0\n0 10 0\n0 0 0\n")
    grid = read_map(path)
    assert grid == parse_map(["0 0 0", "0 10 0", "0 0 0"])


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        read_map(tmp_path / "missing.fdf")