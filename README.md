# fprast

`fprast` is a small, dependency-free software rasteriser. It draws into an
in-memory pixel buffer of packed `0xRRGGBB` values using a lower-left origin
(x grows to the right, y grows upward). It offers:

- `fprast.canvas.Canvas`: points, clipped and unclipped lines, rectangles,
  triangles, outlined and filled polygons, horizontal rows and pixel
  read-back; `clip_line` clips a segment to a raster;
- `fprast.shapes`: circles, filled circles and circular sectors;
- `fprast.color`: the `Color` class and pixel/byte/unit conversions;
- `fprast.bmpfile`: 24-bit BMP writing and reading;
- `fprast.xwdfile`: XWD image writing, reading and pasting;
- `fprast.events`: a queue of clicks and key presses with waiting helpers;
- `fprast.scanfill`: a scanline polygon filler built on sorted edge
  intercepts;
- `fprast.revolution`: surfaces of revolution written as `.xyz` meshes.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Drawing

```python
from fprast.canvas import Canvas
from fprast.shapes import fill_circle
from fprast.bmpfile import save_bmp

canvas = Canvas(200, 200)          # white, with a black pen
canvas.set_rgb_unit(0.9, 1.0, 1.0)
canvas.clear()                     # fill with the pen colour

canvas.set_rgb(255, 0, 0)
canvas.fill_polygon([20, 180, 100], [20, 20, 170])

canvas.set_rgb_unit(0.0, 0.0, 1.0)
fill_circle(canvas, 100, 80, 15)

save_bmp(canvas, "picture.bmp")
```

Colours are set from bytes (`set_rgb`, clamped to 0–255) or from unit values
(`set_rgb_unit`, clamped to 0.0–1.0). `Color` converts between packed pixels
(`from_pixel`, `to_pixel`), byte channels and unit triples (`from_unit`,
`to_unit`).

`Canvas.point` and `Canvas.horizontal_line` return `False` when nothing lands
on the canvas; `Canvas.line` clips first and returns `False` when the whole
segment is clipped away. `get_pixel` raises `IndexError` off the canvas,
while `get_pixel_safe` returns `None`. Polygons with more than 1000 vertices
are cut to their first 1000 with a warning.

`fprast.shapes.sector_points` raises `ValueError` when the sweep from
`start_radians` to `end_radians` is negative or more than a full turn.

## Image files

- `bmp_bytes(canvas)` / `save_bmp(canvas, path)` encode the canvas as a 24-bit
  BMP; `bmp_dimensions(path)` reads its width and height; `display_bmp(canvas,
  path, xoffset, yoffset)` draws a BMP onto a canvas (leaving the pen at the
  last pixel's colour) and raises `BmpError` for a malformed file.
- `xwd_bytes(canvas)` / `save_xwd(canvas, path)` write a 32-bit-per-pixel XWD
  dump; `load_xwd(path)` returns an `XwdImage`; `xwd_dimensions(path)` reads
  the size; `paste_image(canvas, image, x, y)` copies an image onto the canvas
  with its lower-left corner at `(x, y)`, dropping what falls outside.

## Events

`EventQueue(height)` holds input for a window of the given height. `click(x,
y)` and `key(code)` queue events (a one-character string stands for its
code); `post` queues a raw `Event`. `poll()` returns `(signal, (x, y))`: a key
code for a key press, `-3` for a click, other negative values for other
events, and `-3000` when the queue is empty. `wait_click()` and `wait_key()`
skip to the next click or key press and raise `EOFError` if the queue runs
out. `wait_mouse()` remembers a click that `mouse()` returns.
`current_hms()` returns the local `(hour, minute, second)`.

## Scanline filling

`scanline_intercepts(xs, ys, y_level)` finds where a row crosses the
polygon's edges and sorts the crossings with `selection_sort`.
`fill_scanlines(canvas, xs, ys, rows)` draws between alternate pairs of
crossings on each row, shading rows in a gradient, and returns the number of
spans drawn. `outline_polygon` draws the closed outline, `collect_points`
gathers clicked vertices from an event queue until a click lands in the
lower-left box, and `horizontal_intercept(a, b, c)` gives where the row
through `c` crosses segment `a`–`b`, or `None`.

## Surfaces of revolution

```python
import io
from fprast.revolution import close_profile, build_mesh

xs, ys = close_profile([100, 150, 200], [40, 90, 60])
mesh = build_mesh(xs, ys, 200)

buffer = io.StringIO()
mesh.write_xyz(buffer)
```

`close_profile` drops both ends of the profile onto the axis, `build_mesh`
sweeps each point around the axis in the given number of slices (coordinates
scaled down by 100) and joins neighbouring slices with four-sided faces.
`Mesh.write_xyz` writes the vertex count, the vertices, the face count and
the faces as text.

## Commands

```
fprast-scanfill X,Y [X,Y ...] [--size N] [--output FILE]
fprast-revolution X,Y [X,Y ...] [--size N] [--slices N] [--output FILE]
```

`fprast-scanfill` takes polygon vertices in canvas coordinates (canvas 800 ×
800 by default), outlines and scanline-fills the polygon, and saves the
picture as BMP (`demo.bmp` by default). Vertices are taken up to the first
one that falls inside the 100 × 100 box at the lower-left corner.

`fprast-revolution` takes profile points (canvas 700 × 700 by default), closes
the profile onto the axis, revolves it in `--slices` slices (200 by default)
and writes the mesh to `revolution.xyz` by default. Points are taken up to
the first one lying in the bottom 50 rows; it is an error if none are left.

## What it does not do

Nothing is shown on screen: there is no window, and the event queue is only
filled by the program that uses it. The commands therefore read their points
from the command line rather than from mouse clicks. There is no text
drawing.