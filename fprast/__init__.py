"""A small software rasteriser with polygon filling, BMP/XWD image files and revolution meshes."""

__version__ = "1.0.0"

__all__ = [
    "bmpfile",
    "canvas",
    "color",
    "events",
    "revolution",
    "scanfill",
    "shapes",
    "xwdfile",
]