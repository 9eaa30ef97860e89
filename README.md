# fdfview

A wireframe viewer for `.fdf` height maps. It reads a grid of heights, with an
optional colour on each point, and draws the grid as a 3D wireframe in a
1000×1000 window opened with pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Usage

```
fdfview path/to/map.fdf
```

Exactly one argument is expected, and its name must end in `.fdf`.

## Map format

Each non-empty line of the file is one row of the grid. Values on a line are
separated by spaces. Every line must hold at least as many values as the
first line; values beyond that width are ignored.

A value is a height, written as a whole number that fits in a 32-bit signed
integer, and can be followed by a colour in the form `,0x` and hexadecimal
digits (upper or lower case), for a value below `0x80000000`:

```
0 0 0 0
0 10 10,0xff0000 0
0 0 0 0
```

If a point has no colour, the colour follows its height:

| Height        | Colour |
|---------------|--------|
| above 100     | white  |
| 21 to 100     | brown  |
| 1 to 20       | green  |
| 0 and below   | blue   |

If the arguments or the file are wrong (a missing or unreadable file, a name
not ending in `.fdf`, a line that is too short, no data, a value that
overflows or a malformed colour) the command prints `Error: ...` to standard
error and exits with status 1.

## Controls

| Key            | Action                                                      |
|----------------|-------------------------------------------------------------|
| Q / W          | rotate around the X axis                                    |
| A / S          | rotate around the Y axis                                    |
| Z / X          | rotate around the Z axis                                    |
| E / R          | move along X                                                |
| D / F          | move along Y                                                |
| C / V          | move along Z                                                |
| Up / Down      | zoom in / out by 0.5                                        |
| Space          | switch between orthographic and perspective projection      |
| Enter          | switch between flat and spherical coordinates, reset zoom   |
| Backspace      | switch between isometric and parallel views, reset the view |
| Esc            | quit                                                        |

Rotation and movement keys act for as long as they are held down. The zoom is
kept between 0.5 and 1000.

## As a library

```python
from fdfview.mapfile import load_map
from fdfview.raster import FrameBuffer
from fdfview.renderer import draw_map
from fdfview.view import View

heightmap = load_map("map.fdf")
view = View(heightmap)
framebuffer = FrameBuffer(1000, 1000)
draw_map(view, framebuffer)
colour = framebuffer.get_pixel(500, 500)
```

- `fdfview.mapfile`: `load_map`, `parse_map`, `read_lines` and the value
  parsers; they raise `MapError` (a `ValueError`) when input cannot be used.
  `HeightMap` holds the parsed points, indexed as `heightmap[i, j]`.
- `fdfview.view`: `View` holds angles, offsets, zoom, `Projection`,
  `CoordinateSystem` and `OrthographicType`, and projects map points to the
  screen with `project_point`. `step` applies held keys for one frame and
  `normalise` clamps the zoom and wraps the angles.
- `fdfview.controls`: `key_press(view, key)` and `key_release(view, key)`
  apply `Key` codes to a view; `key_press` returns `True` for Esc.
- `fdfview.raster`: `FrameBuffer` with `put_pixel`, `get_pixel`, `clear` and
  `draw_line`.
- `fdfview.renderer`: `draw_map` and `draw_edges`, which draw a view into a
  frame buffer.
- `fdfview.app`: `run(heightmap)` opens the window; `main(argv)` is the
  command.