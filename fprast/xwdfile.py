"""Reading and writing X window dump (XWD) images of a canvas."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from pathlib import Path

_HEADER_FIELDS = 25
_NAME_PAD = 4
HEADER_SIZE = _HEADER_FIELDS * 4 + _NAME_PAD


@dataclass
class XwdImage:
    """A decoded XWD image: the header fields it keeps and its raw rows.

    Rows in ``data`` run from the top of the image downward.
    """

    width: int
    height: int
    depth: int = 24
    xoffset: int = 0
    format: int = 2
    bitmap_unit: int = 32
    bitmap_pad: int = 32
    bytes_per_line: int = 0
    bits_per_pixel: int = 32
    byte_order: int = 0
    bitmap_bit_order: int = 0
    data: bytes = b""

    def _pixel_at(self, column, row):
        """Return the 0xRRGGBB pixel at ``column`` of top-down ``row``."""
        step = self.bits_per_pixel // 8
        start = row * self.bytes_per_line + column * step
        chunk = self.data[start:start + step]
        order = "little" if self.byte_order == 0 else "big"
        return int.from_bytes(chunk, order) & 0xFFFFFF


def xwd_bytes(canvas):
    """Return the whole canvas as an XWD file with 32 bits per pixel."""
    width, height = canvas.dimensions()
    bytes_per_line = width * 4
    fields = (
        HEADER_SIZE,   # header size
        7,             # file version
        2,             # ZPixmap
        24,            # depth
        width,
        height,
        0,             # xoffset
        0,             # byte order
        32,            # bitmap unit
        0,             # bitmap bit order
        32,            # bitmap pad
        32,            # bits per pixel
        bytes_per_line,
        5,             # visual class
        0x00FF0000,    # red mask
        0x0000FF00,    # green mask
        0x000000FF,    # blue mask
        24,            # bits per rgb
        0,             # colormap entries
        0,             # colour structures
        width,         # window width
        height,        # window height
        0,             # window x
        0,             # window y
        0,             # window border width
    )
    header = struct.pack(f">{_HEADER_FIELDS}i", *fields) + bytes(_NAME_PAD)
    body = bytearray()
    for y in range(height - 1, -1, -1):
        for x in range(width):
            body += canvas.get_pixel(x, y).to_bytes(4, "little")
    return header + bytes(body)


def save_xwd(canvas, path):
    """Write the canvas to ``path`` as an XWD file."""
    Path(path).write_bytes(xwd_bytes(canvas))


def load_xwd(path):
    """Read an XWD file written with 32 bits per pixel.

    Raises ValueError when the header or the pixel data is cut short.
    """
    raw = Path(path).read_bytes()
    if len(raw) < HEADER_SIZE:
        raise ValueError(f"{path}: file is shorter than an XWD header")
    fields = struct.unpack_from(f">{_HEADER_FIELDS}i", raw, 0)
    (_, _, image_format, depth, width, height, xoffset, byte_order,
     bitmap_unit, bitmap_order, bitmap_pad, bits_per_pixel,
     bytes_per_line) = fields[:13]
    size = bytes_per_line * height
    data = raw[HEADER_SIZE:HEADER_SIZE + size]
    if size < 0 or len(data) < size:
        raise ValueError(f"{path}: pixel data ends early")
    return XwdImage(
        width=width,
        height=height,
        depth=depth,
        xoffset=xoffset,
        format=image_format,
        bitmap_unit=bitmap_unit,
        bitmap_pad=bitmap_pad,
        bytes_per_line=bytes_per_line,
        bits_per_pixel=bits_per_pixel,
        byte_order=byte_order,
        bitmap_bit_order=bitmap_order,
        data=data,
    )


def xwd_dimensions(path):
    """Return (width, height) from the header of an XWD file."""
    with open(path, "rb") as stream:
        head = stream.read(24)
    if len(head) < 24:
        raise ValueError(f"{path}: file is shorter than an XWD header")
    fields = struct.unpack(">6i", head)
    return (fields[4], fields[5])


def paste_image(canvas, image, x, y):
    """Copy ``image`` onto the canvas with its lower-left corner at (x, y).

    Parts falling outside the canvas are dropped; the pen colour is kept.
    """
    x, y = int(x), int(y)
    width, height = canvas.dimensions()
    room_above = height - y
    if image.height <= room_above:
        transfer_height = image.height
        src_row = 0
        dest_row = height - y - image.height
    else:
        transfer_height = room_above
        src_row = image.height - room_above
        dest_row = 0
    transfer_width = min(image.width, width - x)

    pen = canvas.color
    try:
        for r in range(transfer_height):
            canvas_y = height - 1 - (dest_row + r)
            for c in range(transfer_width):
                pixel = image._pixel_at(c, src_row + r)
                canvas.set_rgb((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)
                canvas.point(x + c, canvas_y)
    finally:
        canvas.set_rgb(pen.r, pen.g, pen.b)