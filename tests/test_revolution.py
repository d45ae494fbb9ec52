import io
import math

import pytest

from fprast.canvas import Canvas
from fprast.events import EventQueue
from fprast.revolution import (
    Mesh,
    build_mesh,
    close_profile,
    collect_profile,
    main,
    slice_profile_point,
)


def test_slice_count_and_axis_position():
    vertices = slice_profile_point(16, 100, 200)
    assert len(vertices) == 16
    assert all(v[0] == pytest.approx(1.0) for v in vertices)


def test_slices_lie_on_circle():
    for _, y, z in slice_profile_point(32, 250, 300):
        assert math.hypot(y, z) == pytest.approx(3.0)


def test_first_slice_starts_at_pi():
    _, y, z = slice_profile_point(4, 100, 200)[0]
    assert y == pytest.approx(0.0, abs=1e-12)
    assert z == pytest.approx(-2.0)


def test_close_profile_drops_ends_to_axis():
    assert close_profile([10, 20], [30, 40]) == ([10, 10, 20, 20], [0, 30, 40, 0])


def test_close_profile_rejects_empty():
    with pytest.raises(ValueError):
        close_profile([], [])


def test_close_profile_rejects_mismatched():
    with pytest.raises(ValueError):
        close_profile([1, 2], [1])


def test_mesh_sizes():
    xs, ys = [0, 0, 10, 10], [0, 5, 5, 0]
    mesh = build_mesh(xs, ys, 8)
    assert len(mesh.vertices) == len(xs) * 8
    assert len(mesh.faces) == (len(xs) - 1) * 8


def test_mesh_faces_index_valid_vertices():
    mesh = build_mesh([0, 0, 10, 10], [0, 5, 5, 0], 6)
    for face in mesh.faces:
        assert len(face) == 4
        assert all(0 <= n < len(mesh.vertices) for n in face)


def test_mesh_faces_join_neighbouring_rings_and_wrap():
    n = 6
    mesh = build_mesh([0, 0, 10], [0, 5, 0], n)
    assert mesh.faces[0] == (0, n, n + 1, 1)
    assert mesh.faces[n - 1] == (n - 1, 2 * n - 1, n, 0)


def test_build_mesh_rejects_no_slices():
    with pytest.raises(ValueError):
        build_mesh([1], [1], 0)


def test_write_xyz_layout():
    mesh = Mesh(vertices=[(1.0, 0.5, -2.0)], faces=[(0, 1, 2, 3)])
    out = io.StringIO()
    mesh.write_xyz(out)
    assert out.getvalue() == (
        "1\n"
        "     1.000000     0.500000     -2.000000\n"
        "1\n"
        "4 0 1 2 3\n"
    )


def test_write_xyz_counts_match_mesh():
    mesh = build_mesh([0, 0, 10, 10], [0, 5, 5, 0], 5)
    out = io.StringIO()
    mesh.write_xyz(out)
    lines = out.getvalue().splitlines()
    assert int(lines[0]) == len(mesh.vertices)
    assert int(lines[len(mesh.vertices) + 1]) == len(mesh.faces)
    assert len(lines) == len(mesh.vertices) + len(mesh.faces) + 2


def test_collect_profile_stops_at_bar():
    canvas = Canvas(700, 700)
    events = EventQueue(700)
    events.click(100, 200)
    events.click(150, 300)
    events.click(400, 10)
    xs, ys = collect_profile(events, canvas)
    assert (xs, ys) == ([100, 150], [200, 300])
    assert canvas.get_pixel(5, 5) == 0xFF0000


def test_collect_profile_runs_out_of_events():
    events = EventQueue(100)
    events.click(20, 80)
    with pytest.raises(EOFError):
        collect_profile(events, Canvas(100, 100))


def test_main_writes_mesh(tmp_path):
    output = tmp_path / "shape.xyz"
    status = main(["--size", "200", "--slices", "8", "--output", str(output),
                   "100,120", "150,160"])
    assert status == 0
    lines = output.read_text().splitlines()
    mesh = build_mesh(*close_profile([100, 150], [120, 160]), 8)
    assert int(lines[0]) == len(mesh.vertices)
    assert len(lines) == len(mesh.vertices) + len(mesh.faces) + 2