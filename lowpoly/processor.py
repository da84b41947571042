# lowpoly/processor.py
from __future__ import annotations

import numbers
import time
from typing import Iterator, Tuple

from .canvas import Canvas
from .constants import DEFAULT_TILE_SIZE
from .core_types import ImageSource, Point
from .errors import ConfigError
from .quadrants import quadrant_colours
from .render import render_tile
from .utils import debug_log, format_seconds_compact, print_config_line

"""
Tile grid driver.

The output is cropped to the largest multiple of the tile size in each
direction; the leftover right columns and bottom rows are never sampled.
Tiles read only the source image and write only their own square, so the
visiting order does not affect the result.
"""


def validate_tile_size(tile_size: object) -> int:
    """Return tile_size as a plain int if it is a positive integer, else raise ConfigError."""
    if isinstance(tile_size, bool) or not isinstance(tile_size, numbers.Integral):
        raise ConfigError(f"tile size must be an int, got {tile_size!r}")
    size = int(tile_size)
    if size <= 0:
        raise ConfigError(f"tile size must be positive, got {size}")
    return size


def output_size(width: int, height: int, tile_size: int) -> Tuple[int, int]:
    """Source size rounded down to whole tiles."""
    return (width // tile_size) * tile_size, (height // tile_size) * tile_size


def tile_origins(width: int, height: int, tile_size: int) -> Iterator[Point]:
    """Top-left corner of every tile in a width x height grid, column by column."""
    for x in range(0, width, tile_size):
        for y in range(0, height, tile_size):
            yield (x, y)


class TileGridProcessor:
    """Turns an ImageSource into a low-poly Canvas at a fixed tile size."""

    def __init__(self, tile_size: int = DEFAULT_TILE_SIZE, *, debug: bool = False):
        self._tile_size = validate_tile_size(tile_size)
        self.debug = debug

    @property
    def tile_size(self) -> int:
        return self._tile_size

    def process(self, image: ImageSource) -> Canvas:
        t_start = time.perf_counter()
        size = self._tile_size
        width, height = output_size(int(image.width), int(image.height), size)
        canvas = Canvas(width, height)

        if self.debug:
            print_config_line(
                "grid",
                [
                    ("Source", f"{image.width}x{image.height}"),
                    ("Output", f"{width}x{height}"),
                    ("Tile", size),
                    ("Tiles", (width // size) * (height // size)),
                    ("Cropped", f"{image.width - width}x{image.height - height}"),
                ],
                debug=True,
            )

        for x, y in tile_origins(width, height, size):
            top, left, bottom, right = quadrant_colours(image, x, y, size)
            render_tile(canvas, x, y, size, top, left, bottom, right)

        if self.debug:
            debug_log(
                f"rendered in {format_seconds_compact(time.perf_counter() - t_start)}"
            )
        return canvas


def process(
    image: ImageSource, tile_size: int = DEFAULT_TILE_SIZE, *, debug: bool = False
) -> Canvas:
    """One-shot convenience wrapper around TileGridProcessor."""
    return TileGridProcessor(tile_size, debug=debug).process(image)


__all__ = [
    "validate_tile_size",
    "output_size",
    "tile_origins",
    "TileGridProcessor",
    "process",
]
