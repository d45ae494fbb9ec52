import random

import pytest

from fprast.bmpfile import bmp_dimensions
from fprast.canvas import Canvas
from fprast.color import Color
from fprast.events import EventQueue
from fprast.scanfill import (
    collect_points,
    fill_scanlines,
    horizontal_intercept,
    main,
    outline_polygon,
    scanline_intercepts,
    selection_sort,
)

WHITE = 0xFFFFFF
SQUARE_X = [10, 50, 50, 10]
SQUARE_Y = [10, 10, 50, 50]


def test_selection_sort_first_source_case():
    assert selection_sort([24, 33, 18, 12, 29]) == [12, 18, 24, 29, 33]


def test_selection_sort_second_source_case():
    data = [112, 325, 389, 97, 215, 298, 333]
    assert selection_sort(data) == [97, 112, 215, 298, 325, 333, 389]


def test_selection_sort_leaves_input_alone():
    data = [3.0, 1.0, 2.0]
    selection_sort(data)
    assert data == [3.0, 1.0, 2.0]


def test_selection_sort_agrees_with_sorted():
    rng = random.Random(7)
    for _ in range(20):
        data = [rng.uniform(-100, 100) for _ in range(rng.randint(0, 30))]
        assert selection_sort(data) == sorted(data)


def test_intercepts_of_square_middle_row():
    assert scanline_intercepts(SQUARE_X, SQUARE_Y, 30) == [10, 50]


def test_intercepts_half_open_ranges():
    assert scanline_intercepts(SQUARE_X, SQUARE_Y, 10) == []
    assert scanline_intercepts(SQUARE_X, SQUARE_Y, 50) == [10, 50]


def test_intercepts_outside_polygon_are_empty():
    assert scanline_intercepts(SQUARE_X, SQUARE_Y, 80) == []


def test_intercepts_are_truncated():
    assert scanline_intercepts([0, 3, 0], [0, 0, 2], 1) == [0, 1]


def test_intercepts_come_in_pairs_for_closed_polygon():
    xs = [5, 60, 30, 70, 10]
    ys = [5, 15, 40, 70, 60]
    for row in range(80):
        crossings = scanline_intercepts(xs, ys, row)
        assert len(crossings) % 2 == 0
        assert crossings == sorted(crossings)


def test_intercepts_reject_mismatched_lists():
    with pytest.raises(ValueError):
        scanline_intercepts([1, 2, 3], [1, 2], 1)


def test_fill_single_row_uses_first_gradient_colour():
    canvas = Canvas(64, 64)
    spans = fill_scanlines(canvas, SQUARE_X, SQUARE_Y, [15])
    assert spans == 1
    assert canvas.get_pixel(30, 15) == Color(0, 0, 255).to_pixel()
    assert canvas.get_pixel(5, 15) == WHITE
    assert canvas.get_pixel(30, 16) == WHITE


def test_fill_covers_inside_only():
    canvas = Canvas(64, 64)
    fill_scanlines(canvas, SQUARE_X, SQUARE_Y, range(64))
    assert canvas.get_pixel(30, 30) != WHITE
    assert canvas.get_pixel(60, 30) == WHITE
    assert canvas.get_pixel(30, 5) == WHITE


def test_outline_draws_in_outline_colour():
    canvas = Canvas(64, 64)
    outline_polygon(canvas, SQUARE_X, SQUARE_Y)
    expected = Color.from_unit(0.965, 0.765, 0.141).to_pixel()
    assert canvas.get_pixel(10, 10) == expected
    assert canvas.get_pixel(30, 50) == expected
    assert canvas.get_pixel(30, 30) == WHITE


def test_outline_needs_points():
    with pytest.raises(ValueError):
        outline_polygon(Canvas(8, 8), [], [])


def test_collect_points_until_box_click():
    canvas = Canvas(800, 800)
    events = EventQueue(800)
    events.click(200, 300)
    events.click(400, 500)
    events.click(50, 50)
    events.key("q")
    xs, ys = collect_points(events, canvas, 100)
    assert (xs, ys) == ([200, 400], [300, 500])
    assert canvas.get_pixel(200, 300) == Color.from_unit(0.98, 0.502, 0.447).to_pixel()
    assert events.wait_key() == ord("q")


def test_collect_points_runs_out_of_events():
    events = EventQueue(200)
    events.click(150, 150)
    with pytest.raises(EOFError):
        collect_points(events, Canvas(200, 200), 100)


def test_horizontal_intercept_inside():
    assert horizontal_intercept((0, 0), (10, 20), (3, 10)) == (5.0, 10)


def test_horizontal_intercept_order_of_ends_does_not_matter():
    assert horizontal_intercept((10, 20), (0, 0), (3, 10)) == horizontal_intercept(
        (0, 0), (10, 20), (3, 10)
    )


def test_horizontal_intercept_misses():
    assert horizontal_intercept((0, 0), (10, 20), (3, 30)) is None
    assert horizontal_intercept((0, 0), (10, 20), (3, 20)) is None


def test_main_writes_bmp(tmp_path):
    output = tmp_path / "out.bmp"
    status = main(["--size", "64", "--output", str(output),
                   "10,10", "50,10", "50,50", "10,50"])
    assert status == 0
    assert bmp_dimensions(output) == (64, 64)