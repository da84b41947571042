# lowpoly/quadrants.py
from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .average import average_colour
from .core_types import Bounds, ImageSource, Quadrant, QuadColours, U8Pixels

"""
Per-tile colour sampling.

Each quadrant is an axis-aligned rectangle standing in for the triangle on
that side of the tile. With quad = tile_size // 2 (relative to the tile origin,
half-open):

  top    : x [0, size)   y [0, quad)
  left   : x [0, quad)   y [0, size)
  bottom : x [0, size)   y [quad, size)
  right  : x [quad, size) y [0, size)

Odd tile sizes give bottom/right one more row/column than top/left.
"""


def quadrant_bounds(quadrant: Quadrant, tile_size: int) -> Bounds:
    """(x0, x1, y0, y1) of a quadrant, relative to the tile origin."""
    quad = tile_size // 2
    if quadrant is Quadrant.TOP:
        return (0, tile_size, 0, quad)
    if quadrant is Quadrant.LEFT:
        return (0, quad, 0, tile_size)
    if quadrant is Quadrant.BOTTOM:
        return (0, tile_size, quad, tile_size)
    if quadrant is Quadrant.RIGHT:
        return (quad, tile_size, 0, tile_size)
    raise ValueError(f"unknown quadrant: {quadrant!r}")


def quadrant_pixels(
    image: ImageSource,
    tile_x: int,
    tile_y: int,
    quadrant: Quadrant,
    tile_size: int,
) -> U8Pixels:
    """Every RGB pixel inside the quadrant rectangle as an (N,3) uint8 array."""
    x0, x1, y0, y1 = quadrant_bounds(quadrant, tile_size)
    x0, x1 = tile_x + x0, tile_x + x1
    y0, y1 = tile_y + y0, tile_y + y1

    region: Optional[Callable[[int, int, int, int], U8Pixels]] = getattr(
        image, "region", None
    )
    if callable(region):
        return np.asarray(region(x0, y0, x1, y1), dtype=np.uint8).reshape(-1, 3)

    n = max(0, x1 - x0) * max(0, y1 - y0)
    out = np.empty((n, 3), dtype=np.uint8)
    i = 0
    for y in range(y0, y1):
        for x in range(x0, x1):
            px = image.get_pixel(x, y)
            out[i, 0] = px[0]
            out[i, 1] = px[1]
            out[i, 2] = px[2]
            i += 1
    return out


def quadrant_colours(
    image: ImageSource, tile_x: int, tile_y: int, tile_size: int
) -> QuadColours:
    """Average colour of each quadrant. Empty quadrants raise DegenerateGeometryError."""
    top, left, bottom, right = (
        average_colour(quadrant_pixels(image, tile_x, tile_y, q, tile_size))
        for q in Quadrant
    )
    return QuadColours(top, left, bottom, right)


__all__ = ["quadrant_bounds", "quadrant_pixels", "quadrant_colours"]
