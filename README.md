# wirefdf

A small wireframe viewer for height maps. It reads a grid of heights and
draws it as a rotated, tilted wireframe in a 1024×1024 window opened with
pygame. Each segment's colour fades from the colour of one end to the
colour of the other. Segments are drawn in order of their depth on screen.

## Installing

    pip install .

To run the tests as well:

    pip install .[test]
    pytest

## Running

    wirefdf path/to/map.fdf

With any other number of arguments it prints `usage: wirefdf file.fdf`.
If the map cannot be read or is malformed it prints
`error occurred while reading file`.

## Map format

A map is a text file. Each line is one row, and each row holds integers
separated by spaces. Every integer is the height of one grid point.
Append `,0xRRGGBB` to an integer to give that point a colour:

    0 0 0 0
    0 5,0xFF0000 5 0
    0 0 0 0

- Points without a colour are white (`0xFFFFFF`). A colour without the
  `0x` prefix is read as black.
- Every row must have as many points as the first one; otherwise reading
  fails with `wirefdf.mapfile.MapError`.
- Reading stops at the first line that holds no points. A map with no
  points at all is an error.
- The grid is centred on the origin, and heights are scaled so that the
  highest point is ten tiles tall. If no height is above zero, the map is
  drawn flat.

## Controls

| Input                 | Effect                                            |
|-----------------------|---------------------------------------------------|
| Left / Right, A / D   | rotate around the vertical axis                   |
| Up / Down, W / S      | tilt the view (0 to 90 degrees)                   |
| Mouse wheel           | zoom in / out (scale 1 to 40)                     |
| Q / E                 | lower / raise the height factor (-10 to 10)       |
| 1                     | side view, no rotation                            |
| 2                     | side view, turned a quarter                       |
| 3                     | view from straight above, no rotation             |
| 4                     | 45° rotation and 45° tilt                         |
| 5                     | turn half a revolution                            |
| R                     | redraw                                            |
| Esc or closing window | quit                                              |

The window starts with a tilt of 45°, a rotation of -22.5°, a scale of 20
and a height factor of 1.

## Using it as a library

    from wirefdf.mapfile import read_map
    from wirefdf.model import View
    from wirefdf.canvas import Canvas
    from wirefdf.render import render

    points = read_map("map.fdf")
    canvas = Canvas(1024, 1024)
    count = render(points, View(), canvas)   # number of segments drawn
    print(canvas.get_pixel(512, 512))

- `wirefdf.mapfile`: `read_map(path)`, `parse_map(lines)`, `parse_row(text)`
  and `parse_point(token)` turn map text into rows of `Point`.
- `wirefdf.model`: the `Point`, `Line` and `View` dataclasses.
- `wirefdf.projection.project(point, view)` maps one grid point to screen
  coordinates; the result's `z` is its depth on screen.
- `wirefdf.render`: `build_line_tree(points, view)` collects the visible
  segments ordered by depth, and `render(points, view, canvas)` clears the
  canvas and draws them.
- `wirefdf.linetree.LineBTree` keeps lines ordered by depth; lines of equal
  depth keep their insertion order.
- `wirefdf.canvas.Canvas` is an in-memory 0xRRGGBB image with `put_pixel`,
  `get_pixel`, `clear`, `draw_line` and `to_rgb_bytes`.
- `wirefdf.controls.handle_key(key, view)` and
  `wirefdf.controls.handle_scroll(button, view)` apply the bindings above
  to a `View` in place and return whether it changed; key codes are in
  `wirefdf.controls.Key`.
- `wirefdf.colors` holds `blend`, `clamp`, `cycle` and `parse_hex_color`.
- `wirefdf.app.Viewer` ties a grid, a view and a canvas together; its
  `on_key` and `on_scroll` react to input and redraw when needed.