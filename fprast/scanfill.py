"""Scan-line polygon filling driven by clicked vertices."""

from __future__ import annotations

import argparse

from .bmpfile import save_bmp
from .canvas import Canvas
from .events import EventQueue
from .shapes import fill_circle

_SHADE_STEP = 0.00125
_OUTLINE_COLOR = (0.965, 0.765, 0.141)
_MARKER_COLOR = (0.98, 0.502, 0.447)
_BACKGROUND = (0.537, 0.812, 0.941)
_BOX_COLOR = (0.537, 0.9, 1)


def selection_sort(values):
    """Return the values in ascending order, sorted by selection."""
    result = list(values)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def _check_lengths(xs, ys):
    xs, ys = list(xs), list(ys)
    if len(xs) != len(ys):
        raise ValueError(f"x and y lists differ in length ({len(xs)} != {len(ys)})")
    return xs, ys


def scanline_intercepts(xs, ys, y_level):
    """Return the sorted x positions where the row ``y_level`` crosses the polygon.

    An edge counts when the row lies in its half-open y range; each
    crossing is truncated to a whole pixel.
    """
    xs, ys = _check_lengths(xs, ys)
    y_level = int(y_level)
    points = list(zip(xs, ys))
    crossings = []
    for (x0, y0), (x1, y1) in zip(points[-1:] + points[:-1], points):
        if (y0 >= y_level > y1) or (y0 < y_level <= y1):
            crossings.append(int((y_level - y0) * (x1 - x0) / (y1 - y0) + x0))
    return selection_sort(crossings)


def fill_scanlines(canvas, xs, ys, rows):
    """Fill the polygon one row at a time, shading the rows in a gradient.

    Returns the number of horizontal spans drawn.
    """
    xs, ys = _check_lengths(xs, ys)
    shade = 0.0
    spans = 0
    for y_level in rows:
        y_level = int(y_level)
        crossings = scanline_intercepts(xs, ys, y_level)
        for x_left, x_right in zip(crossings[::2], crossings[1::2]):
            canvas.set_rgb_unit(shade, shade / 3, 1 - shade * 3.0 / 5)
            canvas.line(x_left, y_level, x_right, y_level)
            spans += 1
        shade += _SHADE_STEP
    return spans


def outline_polygon(canvas, xs, ys):
    """Draw the closed outline through the given vertices."""
    xs, ys = _check_lengths(xs, ys)
    if not xs:
        raise ValueError("a polygon needs at least one point")
    points = list(zip(xs, ys))
    for (x0, y0), (x1, y1) in zip(points, points[1:]):
        canvas.set_rgb_unit(*_OUTLINE_COLOR)
        canvas.line(x0, y0, x1, y1)
    canvas.line(xs[0], ys[0], xs[-1], ys[-1])


def collect_points(events, canvas, box_size=100):
    """Gather clicked vertices until a click lands in the lower-left box.

    Each vertex is marked with a small disc. Returns (xs, ys).
    """
    xs, ys = [], []
    while True:
        x, y = events.wait_click()
        if x < box_size and y < box_size:
            return xs, ys
        canvas.set_rgb_unit(*_MARKER_COLOR)
        fill_circle(canvas, x, y, 5)
        xs.append(x)
        ys.append(y)


def horizontal_intercept(a, b, c):
    """Return where the row through ``c`` crosses segment ``a``-``b``.

    The result is (x, y), or None when the row misses the segment's
    open y range.
    """
    if a[1] < b[1]:
        low, high = int(a[1]), int(b[1])
    else:
        low, high = int(b[1]), int(a[1])
    if not low < c[1] < high:
        return None
    y = c[1]
    x = (y - a[1]) * (b[0] - a[0]) / (b[1] - a[1]) + a[0]
    return (x, y)


def _point(text):
    try:
        x, y = text.split(",")
        return (float(x), float(y))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from None


def main(argv=None):
    """Fill the polygon through the given vertices and save it as a BMP file."""
    parser = argparse.ArgumentParser(
        description="Scan-line fill a polygon and save the picture as BMP."
    )
    parser.add_argument("points", nargs="+", type=_point, metavar="X,Y",
                        help="polygon vertices in canvas coordinates")
    parser.add_argument("--size", type=int, default=800,
                        help="width and height of the canvas (default 800)")
    parser.add_argument("--output", default="demo.bmp",
                        help="BMP file to write (default demo.bmp)")
    args = parser.parse_args(argv)

    box_size = 100
    canvas = Canvas(args.size, args.size)
    events = EventQueue(args.size)
    for x, y in args.points:
        events.click(x, y)
    events.click(0, 0)
    events.key("q")

    canvas.set_rgb_unit(*_BACKGROUND)
    canvas.clear()
    canvas.set_rgb_unit(*_BOX_COLOR)
    canvas.fill_rectangle(0, 0, box_size, box_size)

    xs, ys = collect_points(events, canvas, box_size)
    if xs:
        outline_polygon(canvas, xs, ys)
        fill_scanlines(canvas, xs, ys, range(args.size))

    events.wait_key()
    save_bmp(canvas, args.output)
    return 0