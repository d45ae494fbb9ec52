import pytest

from fprast.color import Color, clamp_byte, pixel_to_rgb, rgb_to_unit


@pytest.mark.parametrize("value", [0, 17, 128, 255])
def test_clamp_byte_keeps_in_range_values(value):
    assert clamp_byte(value) == value


def test_clamp_byte_clamps_out_of_range():
    assert clamp_byte(-5) == 0
    assert clamp_byte(300) == 255


def test_clamp_byte_truncates_floats():
    assert clamp_byte(12.9) == 12


def test_red_pixel_matches_red_mask():
    assert Color(255, 0, 0).to_pixel() == 0x00FF0000


def test_pixel_to_rgb_splits_channels():
    assert pixel_to_rgb(0x123456) == (0x12, 0x34, 0x56)


@pytest.mark.parametrize("rgb", [(0, 0, 0), (255, 255, 255), (1, 2, 3), (200, 100, 50)])
def test_pixel_round_trip(rgb):
    color = Color(*rgb)
    assert Color.from_pixel(color.to_pixel()) == color
    assert pixel_to_rgb(color.to_pixel()) == rgb


def test_constructor_clamps_channels():
    assert Color(300, -4, 10) == Color(255, 0, 10)


def test_from_unit_clamps_and_saturates():
    assert Color.from_unit(1.0, 0.0, 2.0) == Color(255, 0, 255)
    assert Color.from_unit(-1.0, -0.5, 0.0) == Color(0, 0, 0)


def test_unit_round_trip_for_every_byte():
    for value in range(256):
        color = Color(value, 255 - value, value // 2)
        assert Color.from_unit(*color.to_unit()) == color


def test_rgb_to_unit_uses_interval_middle():
    low = rgb_to_unit((0, 0, 0))
    assert low == (0.5 / 256.0,) * 3


def test_to_unit_is_strictly_inside_unit_interval():
    for value in (0, 255):
        for channel in Color(value, value, value).to_unit():
            assert 0.0 < channel < 1.0