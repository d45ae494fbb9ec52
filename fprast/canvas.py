"""An off-screen raster canvas with the origin at the lower-left corner."""

from __future__ import annotations

import math
import warnings

from .color import Color

_MAX_POLYGON_POINTS = 1000


def clip_line(xs, ys, xe, ye, width, height):
    """Clip a segment to a width x height raster.

    Returns the clipped (xs, ys, xe, ye) or None when nothing is left.
    """
    if (
        0 <= xs < width
        and 0 <= xe < width
        and 0 <= ys < height
        and 0 <= ye < height
    ):
        return (xs, ys, xe, ye)

    xs, ys, xe, ye = float(xs), float(ys), float(xe), float(ye)

    # lower edge y = 0
    edge = 0.0
    if ys >= edge:
        if ye < edge:
            t = (edge - ys) / (ye - ys)
            xe = xs + t * (xe - xs)
            ye = edge
    elif ye >= edge:
        t = (edge - ys) / (ye - ys)
        xs = xs + t * (xe - xs)
        ys = edge
    else:
        return None

    # upper edge y = height - 1
    edge = float(height - 1)
    if ys <= edge:
        if ye > edge:
            t = (edge - ys) / (ye - ys)
            xe = xs + t * (xe - xs)
            ye = edge
    elif ye <= edge:
        t = (edge - ys) / (ye - ys)
        xs = xs + t * (xe - xs)
        ys = edge
    else:
        return None

    # left edge x = 0
    edge = 0.0
    if xs >= edge:
        if xe < edge:
            t = (edge - xs) / (xe - xs)
            ye = ys + t * (ye - ys)
            xe = edge
    elif xe >= edge:
        t = (edge - xs) / (xe - xs)
        ys = ys + t * (ye - ys)
        xs = edge
    else:
        return None

    # right edge x = width - 1
    edge = float(width - 1)
    if xs <= edge:
        if xe > edge:
            t = (edge - xs) / (xe - xs)
            ye = ys + t * (ye - ys)
            xe = edge
    elif xe <= edge:
        t = (edge - xs) / (xe - xs)
        ys = ys + t * (ye - ys)
        xs = edge
    else:
        return None

    return (xs, ys, xe, ye)


class Canvas:
    """A raster of packed 0xRRGGBB pixels drawn on with a current pen colour.

    Coordinates are mathematical: x grows to the right and y grows upward,
    with (0, 0) the lower-left pixel. A new canvas is white with a black pen.
    """

    def __init__(self, width, height):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [Color(255, 255, 255).to_pixel()] * (width * height)
        self.set_rgb(0, 0, 0)

    @property
    def color(self):
        """The current pen colour."""
        return self._color

    def set_rgb(self, r, g, b):
        """Set the pen from byte channels (clamped into 0..255)."""
        self._color = Color(r, g, b)
        self._pen = self._color.to_pixel()

    def set_rgb_unit(self, r, g, b):
        """Set the pen from channels in [0, 1] (clamped)."""
        self._color = Color.from_unit(r, g, b)
        self._pen = self._color.to_pixel()

    def clear(self):
        """Fill the whole canvas with the pen colour."""
        self._pixels = [self._pen] * (self.width * self.height)

    def dimensions(self):
        """Return (width, height)."""
        return (self.width, self.height)

    # -- raster primitives in screen coordinates (row 0 at the top) --

    def _plot(self, sx, sy):
        if 0 <= sx < self.width and 0 <= sy < self.height:
            self._pixels[sy * self.width + sx] = self._pen

    def _line_screen(self, x0, y0, x1, y1):
        dx = abs(x1 - x0)
        dy = -abs(y1 - y0)
        step_x = 1 if x0 < x1 else -1
        step_y = 1 if y0 < y1 else -1
        err = dx + dy
        while True:
            self._plot(x0, y0)
            if x0 == x1 and y0 == y1:
                return
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += step_x
            if e2 <= dx:
                err += dx
                y0 += step_y

    def _polyline_screen(self, points):
        for (x0, y0), (x1, y1) in zip(points, points[1:]):
            self._line_screen(x0, y0, x1, y1)

    def _fill_screen(self, points):
        """Even-odd fill sampling pixel centres, left edges in, right edges out."""
        if len(points) < 3:
            return
        rows = [y for _, y in points]
        top = max(min(rows), 0)
        bottom = min(max(rows), self.height - 1)
        edges = list(zip(points, points[1:] + points[:1]))
        for sy in range(top, bottom + 1):
            crossings = sorted(
                x0 + (sy - y0) * (x1 - x0) / (y1 - y0)
                for (x0, y0), (x1, y1) in edges
                if y0 != y1 and min(y0, y1) <= sy < max(y0, y1)
            )
            for xa, xb in zip(crossings[::2], crossings[1::2]):
                start = max(math.ceil(xa), 0)
                end = min(math.ceil(xb) - 1, self.width - 1)
                row = sy * self.width
                for sx in range(start, end + 1):
                    self._pixels[row + sx] = self._pen

    def _screen_points(self, xs, ys):
        xs, ys = list(xs), list(ys)
        if len(xs) != len(ys):
            raise ValueError(
                f"x and y lists differ in length ({len(xs)} != {len(ys)})"
            )
        if not xs:
            raise ValueError("a polygon needs at least one point")
        if len(xs) > _MAX_POLYGON_POINTS:
            warnings.warn(
                f"polygon has {len(xs)} points; points past the first "
                f"{_MAX_POLYGON_POINTS} are ignored",
                stacklevel=3,
            )
            xs, ys = xs[:_MAX_POLYGON_POINTS], ys[:_MAX_POLYGON_POINTS]
        return [(int(x), int(self.height - 1 - y)) for x, y in zip(xs, ys)]

    # -- drawing in mathematical coordinates --

    def pixel(self, x, y):
        """Plot a pixel; off-canvas pixels are silently dropped."""
        self._plot(int(x), self.height - 1 - int(y))

    def point(self, x, y):
        """Plot a pixel; return False when it lies off the canvas."""
        x, y = int(x), int(y)
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        self._plot(x, self.height - 1 - y)
        return True

    def unclipped_line(self, xs, ys, xe, ye):
        """Draw a line without clipping it first."""
        h = self.height - 1
        self._line_screen(int(xs), h - int(ys), int(xe), h - int(ye))

    def line(self, xs, ys, xe, ye):
        """Draw a line clipped to the canvas; return False if nothing was left."""
        clipped = clip_line(int(xs), int(ys), int(xe), int(ye), self.width, self.height)
        if clipped is None:
            return False
        cxs, cys, cxe, cye = clipped
        h = self.height - 1
        self._line_screen(int(cxs), int(h - cys), int(cxe), int(h - cye))
        return True

    def rectangle(self, xlow, ylow, width, height):
        """Outline a rectangle whose lower-left corner is (xlow, ylow)."""
        xlow, ylow, width, height = int(xlow), int(ylow), int(width), int(height)
        left, top = xlow, self.height - ylow - height
        right, bottom = left + width, top + height
        self._polyline_screen(
            [(left, top), (right, top), (right, bottom), (left, bottom), (left, top)]
        )

    def fill_rectangle(self, xlow, ylow, width, height):
        """Fill width x height pixels with the lower-left one at (xlow, ylow)."""
        xlow, ylow, width, height = int(xlow), int(ylow), int(width), int(height)
        if width <= 0 or height <= 0:
            return
        top = self.height - ylow - height
        x0, x1 = max(xlow, 0), min(xlow + width, self.width)
        y0, y1 = max(top, 0), min(top + height, self.height)
        for sy in range(y0, y1):
            row = sy * self.width
            for sx in range(x0, x1):
                self._pixels[row + sx] = self._pen

    def _triangle_points(self, x1, y1, x2, y2, x3, y3):
        h = self.height - 1
        return [(int(x1), h - int(y1)), (int(x2), h - int(y2)), (int(x3), h - int(y3))]

    def triangle(self, x1, y1, x2, y2, x3, y3):
        """Outline a triangle."""
        points = self._triangle_points(x1, y1, x2, y2, x3, y3)
        self._polyline_screen(points + points[:1])

    def fill_triangle(self, x1, y1, x2, y2, x3, y3):
        """Fill a triangle."""
        self._fill_screen(self._triangle_points(x1, y1, x2, y2, x3, y3))

    def polygon(self, xs, ys):
        """Outline the closed polygon through the given vertices."""
        points = self._screen_points(xs, ys)
        self._polyline_screen(points)
        (fx, fy), (lx, ly) = points[0], points[-1]
        self._line_screen(fx, fy, lx, ly)

    def fill_polygon(self, xs, ys):
        """Fill the polygon through the given vertices with the even-odd rule."""
        self._fill_screen(self._screen_points(xs, ys))

    def horizontal_line(self, x0, x1, y):
        """Draw a one-pixel row from x0 to x1; return False if it is off-canvas."""
        x0, x1, y = int(x0), int(x1), int(y)
        if y < 0 or y >= self.height:
            return False
        if x0 > x1:
            x0, x1 = x1, x0
        if x1 < 0 or x0 >= self.width:
            return False
        x0 = max(x0, 0)
        x1 = min(x1, self.width - 1)
        sy = self.height - 1 - y
        for x in range(x0, x1 + 1):
            self._plot(x, sy)
        return True

    def get_pixel(self, x, y):
        """Return the pixel at (x, y); raise IndexError when off-canvas."""
        x, y = int(x), int(y)
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            raise IndexError(f"pixel ({x}, {y}) is outside {self.width}x{self.height}")
        return self._pixels[(self.height - 1 - y) * self.width + x]

    def get_pixel_safe(self, x, y):
        """Return the pixel at (x, y), or None when off-canvas."""
        try:
            return self.get_pixel(x, y)
        except IndexError:
            return None