"""Reading and writing 24-bit uncompressed BMP images of a canvas."""

from __future__ import annotations

import struct
from pathlib import Path

HEADER_SIZE = 54

_HEADER_TEMPLATE = bytes(
    [
        0x42, 0x4D,
        0x00, 0x00, 0x00, 0x00,  # file size
        0x00, 0x00,
        0x00, 0x00,
        0x36, 0x00, 0x00, 0x00,
        0x28, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,  # width
        0x00, 0x00, 0x00, 0x00,  # height
        0x01, 0x00,
        0x18, 0x00,
        0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,  # raw data size
        0x13, 0x0B, 0x00, 0x00,
        0x13, 0x0B, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,
        0x00, 0x00, 0x00, 0x00,
    ]
)

_FILE_SIZE_AT = 0x02
_WIDTH_AT = 0x12
_HEIGHT_AT = 0x16
_RAW_SIZE_AT = 0x22


class BmpError(ValueError):
    """Raised when a file is not a BMP image this module can read."""


def _row_size(width):
    return (3 * width + 3) // 4 * 4


def bmp_bytes(canvas):
    """Return the whole canvas encoded as a 24-bit BMP file."""
    width, height = canvas.dimensions()
    row_size = _row_size(width)
    raw_size = row_size * height

    header = bytearray(_HEADER_TEMPLATE)
    struct.pack_into("<I", header, _FILE_SIZE_AT, raw_size + HEADER_SIZE)
    struct.pack_into("<I", header, _WIDTH_AT, width)
    struct.pack_into("<I", header, _HEIGHT_AT, height)
    struct.pack_into("<I", header, _RAW_SIZE_AT, raw_size)

    padding = bytes(row_size - 3 * width)
    body = bytearray()
    for y in range(height):
        for x in range(width):
            pixel = canvas.get_pixel(x, y)
            body += bytes((pixel & 0xFF, (pixel >> 8) & 0xFF, (pixel >> 16) & 0xFF))
        body += padding
    return bytes(header) + bytes(body)


def save_bmp(canvas, path):
    """Write the canvas to ``path`` as a 24-bit BMP file."""
    Path(path).write_bytes(bmp_bytes(canvas))


def _read_header(stream, path):
    header = stream.read(HEADER_SIZE)
    if len(header) < HEADER_SIZE:
        raise BmpError(f"{path}: file is shorter than a BMP header")
    if header[0] != 0x42 or header[1] != 0x4D:
        raise BmpError(f"{path}: missing BM signature")
    return header


def _header_int(header, offset):
    return struct.unpack_from("<i", header, offset)[0]


def bmp_dimensions(path):
    """Return (width, height) read from the header of a BMP file."""
    with open(path, "rb") as stream:
        header = _read_header(stream, path)
    return (_header_int(header, _WIDTH_AT), _header_int(header, _HEIGHT_AT))


def display_bmp(canvas, path, xoffset, yoffset):
    """Draw a 24-bit BMP file onto the canvas with its lower-left at the offset.

    Pixels are plotted one by one with the pen, which keeps the colour of
    the last pixel drawn. Raises BmpError when the file is malformed.
    """
    with open(path, "rb") as stream:
        header = _read_header(stream, path)
        file_size = _header_int(header, _FILE_SIZE_AT)
        width = _header_int(header, _WIDTH_AT)
        height = _header_int(header, _HEIGHT_AT)
        raw_size = _header_int(header, _RAW_SIZE_AT)

        row_size = _row_size(width)
        if row_size * height != raw_size:
            raise BmpError(f"{path}: raw data size does not match the dimensions")
        if raw_size + HEADER_SIZE != file_size:
            raise BmpError(f"{path}: file size does not match the raw data size")

        padding = row_size - 3 * width
        for y in range(height):
            for x in range(width):
                triple = stream.read(3)
                if len(triple) < 3:
                    raise BmpError(f"{path}: pixel data ends early")
                blue, green, red = triple
                canvas.set_rgb(red, green, blue)
                canvas.point(x + xoffset, y + yoffset)
            if len(stream.read(padding)) < padding:
                raise BmpError(f"{path}: row padding ends early")

        if stream.read(1):
            raise BmpError(f"{path}: unexpected data after the pixels")