[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fprast"
version = "1.0.0"
description = "A small software rasteriser with scanline polygon filling, BMP/XWD image files and surface-of-revolution meshes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterizer",
    "polygon",
    "scanline",
    "bmp",
    "xwd",
    "mesh",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fprast-scanfill = "fprast.scanfill:main"
fprast-revolution = "fprast.revolution:main"

[tool.hatch.build.targets.wheel]
packages = ["fprast"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
