"""Circles and circular sectors drawn on a :class:`~fprast.canvas.Canvas`."""

from __future__ import annotations

import math

_MAX_SECTOR_STEPS = 500


def circle_offsets(r):
    """Yield the (x, y) offsets of one octant of a circle of radius ``r``.

    Each pair has x >= y; the other seven octants follow by symmetry.
    """
    x, y, e = int(r), 0, 0
    while x >= y:
        yield (x, y)
        e1 = e + y + y + 1
        e2 = e1 - x - x + 1
        y += 1
        if abs(e2) < abs(e1):
            x -= 1
            e = e2
        else:
            e = e1


def circle(canvas, a, b, r):
    """Outline a circle centred at (a, b); off-canvas pixels are skipped."""
    a, b = int(a), int(b)
    for x, y in circle_offsets(r):
        for dx, dy in ((x, y), (y, x)):
            canvas.point(a + dx, b + dy)
            canvas.point(a - dx, b + dy)
            canvas.point(a + dx, b - dy)
            canvas.point(a - dx, b - dy)


def fill_circle(canvas, a, b, r):
    """Fill a disc centred at (a, b) with horizontal rows."""
    a, b = int(a), int(b)
    for x, y in circle_offsets(r):
        canvas.horizontal_line(a - x, a + x, b + y)
        canvas.horizontal_line(a - x, a + x, b - y)
        canvas.horizontal_line(a - y, a + y, b + x)
        canvas.horizontal_line(a - y, a + y, b - x)


def sector_points(xcenter, ycenter, radius, start_radians, end_radians,
                  points_in_full_circle=500):
    """Return (xs, ys) outlining a pie slice, ending with the centre.

    Raises ValueError when the sweep is negative or exceeds a full turn.
    """
    delta = end_radians - start_radians
    if delta < 0 or delta > 2 * math.pi:
        raise ValueError(
            f"sector sweep must lie in [0, 2*pi], got {delta!r}"
        )
    steps = int(points_in_full_circle * delta / (2 * math.pi))
    steps = min(max(steps, 1), _MAX_SECTOR_STEPS)
    angles = [start_radians + j * delta / steps for j in range(steps + 1)]
    xs = [xcenter + radius * math.cos(theta) for theta in angles]
    ys = [ycenter + radius * math.sin(theta) for theta in angles]
    xs.append(xcenter)
    ys.append(ycenter)
    return xs, ys


def sector(canvas, xcenter, ycenter, radius, start_radians, end_radians):
    """Outline a pie slice."""
    xs, ys = sector_points(xcenter, ycenter, radius, start_radians, end_radians)
    canvas.polygon(xs, ys)


def fill_sector(canvas, xcenter, ycenter, radius, start_radians, end_radians):
    """Fill a pie slice."""
    xs, ys = sector_points(xcenter, ycenter, radius, start_radians, end_radians)
    canvas.fill_polygon(xs, ys)