"""Solids of revolution built from a clicked profile, saved as .xyz meshes."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field

from .canvas import Canvas
from .events import EventQueue
from .shapes import fill_circle

_SCALE = 100.0


def slice_profile_point(num_slices, x, y):
    """Rotate the profile point (x, y) about the x axis.

    Returns ``num_slices`` (x, y, z) vertices, scaled down by 100, starting
    at the angle pi.
    """
    num_slices = int(num_slices)
    step = 2 * math.pi / num_slices
    vertices = []
    for i in range(num_slices):
        angle = math.pi + step * i
        vertices.append(
            (x / _SCALE, y * math.sin(angle) / _SCALE, y * math.cos(angle) / _SCALE)
        )
    return vertices


def close_profile(xs, ys):
    """Drop the profile's two ends onto the axis (y = 0)."""
    xs, ys = list(xs), list(ys)
    if len(xs) != len(ys):
        raise ValueError(f"x and y lists differ in length ({len(xs)} != {len(ys)})")
    if not xs:
        raise ValueError("a profile needs at least one point")
    return [xs[0], *xs, xs[-1]], [0, *ys, 0]


@dataclass
class Mesh:
    """Vertices and quadrilateral faces of a surface of revolution."""

    vertices: list = field(default_factory=list)
    faces: list = field(default_factory=list)

    def write_xyz(self, stream):
        """Write the vertex count, vertices, face count and faces as text."""
        stream.write(f"{len(self.vertices)}\n")
        for x, y, z in self.vertices:
            stream.write(f"     {x:f}     {y:f}     {z:f}\n")
        stream.write(f"{len(self.faces)}\n")
        for face in self.faces:
            stream.write(f"{len(face)} {' '.join(str(n) for n in face)}\n")


def build_mesh(xs, ys, num_slices=200):
    """Revolve the profile and join neighbouring slices with quads."""
    if len(xs) != len(ys):
        raise ValueError(f"x and y lists differ in length ({len(xs)} != {len(ys)})")
    num_slices = int(num_slices)
    if num_slices <= 0:
        raise ValueError(f"need at least one slice, got {num_slices}")
    mesh = Mesh()
    for x, y in zip(xs, ys):
        mesh.vertices.extend(slice_profile_point(num_slices, x, y))
    for ring in range(len(xs) - 1):
        here = ring * num_slices
        above = here + num_slices
        for j in range(num_slices):
            following = (j + 1) % num_slices
            mesh.faces.append(
                (here + j, above + j, above + following, here + following)
            )
    return mesh


def collect_profile(events, canvas, bar_height=50):
    """Gather clicked profile points until a click lands in the bottom bar.

    Returns (xs, ys).
    """
    width, _ = canvas.dimensions()
    canvas.set_rgb_unit(1, 0, 0)
    canvas.fill_rectangle(0, 0, width, bar_height)
    xs, ys = [], []
    while True:
        x, y = events.wait_click()
        if y < bar_height:
            return xs, ys
        canvas.set_rgb_unit(0.3, 0.1, 0.8)
        fill_circle(canvas, x, y, 5)
        xs.append(x)
        ys.append(y)


def _point(text):
    try:
        x, y = text.split(",")
        return (float(x), float(y))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}") from None


def main(argv=None):
    """Revolve the given profile points and write the mesh to an .xyz file."""
    parser = argparse.ArgumentParser(
        description="Build a solid of revolution from profile points."
    )
    parser.add_argument("points", nargs="+", type=_point, metavar="X,Y",
                        help="profile points in canvas coordinates")
    parser.add_argument("--size", type=int, default=700,
                        help="width and height of the canvas (default 700)")
    parser.add_argument("--slices", type=int, default=200,
                        help="number of slices around the axis (default 200)")
    parser.add_argument("--output", default="revolution.xyz",
                        help="mesh file to write (default revolution.xyz)")
    args = parser.parse_args(argv)

    canvas = Canvas(args.size, args.size)
    events = EventQueue(args.size)
    for x, y in args.points:
        events.click(x, y)
    events.click(0, 0)
    events.key("q")

    canvas.set_rgb_unit(0, 0, 0)
    canvas.clear()
    xs, ys = collect_profile(events, canvas)
    if not xs:
        parser.error("every profile point fell inside the bottom bar")
    xs, ys = close_profile(xs, ys)

    canvas.set_rgb_unit(0, 0, 1)
    canvas.fill_polygon(xs, ys)

    mesh = build_mesh(xs, ys, args.slices)
    with open(args.output, "w", encoding="utf-8") as stream:
        mesh.write_xyz(stream)

    events.wait_key()
    return 0