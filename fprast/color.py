"""RGB colours and their packed 24-bit pixel form."""

from __future__ import annotations

from dataclasses import dataclass

_HALF_STEP = 0.5 / 256.0


def clamp_byte(value):
    """Truncate ``value`` to an int and clamp it into 0..255."""
    value = int(value)
    if value < 0:
        return 0
    if value > 255:
        return 255
    return value


def _clamp_unit(value):
    value = float(value)
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def pixel_to_rgb(pixel):
    """Split a packed 0xRRGGBB pixel into its (r, g, b) byte channels."""
    pixel = int(pixel)
    return ((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)


def rgb_to_unit(rgb):
    """Map byte channels to the middle of their interval in [0, 1]."""
    return tuple(channel / 256.0 + _HALF_STEP for channel in rgb)


@dataclass(frozen=True)
class Color:
    """A colour with byte channels, clamped into 0..255 on creation."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self):
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, clamp_byte(getattr(self, name)))

    @classmethod
    def from_unit(cls, r, g, b):
        """Build a colour from channels in [0, 1]; values outside are clamped."""
        return cls(*(int(256 * _clamp_unit(c)) for c in (r, g, b)))

    @classmethod
    def from_pixel(cls, pixel):
        """Build a colour from a packed 0xRRGGBB pixel."""
        return cls(*pixel_to_rgb(pixel))

    def to_pixel(self):
        """Return the packed 0xRRGGBB pixel value."""
        return (self.r << 16) | (self.g << 8) | self.b

    def to_unit(self):
        """Return the channels as floats in [0, 1]."""
        return rgb_to_unit((self.r, self.g, self.b))