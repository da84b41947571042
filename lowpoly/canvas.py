# lowpoly/canvas.py
from __future__ import annotations

"""
Mutable RGBA output buffer with flat-filled triangle drawing.

Triangles are rasterised with Pillow onto an 'L' mask (filled, then stroked
with the same value, so edges are solid and never anti-aliased); masked pixels are
then written with the exact colour. A TileRegion restricts writes to one
tile's square so that far-edge corners (x + size, y + size) never spill into
the neighbouring tile.
"""

from typing import Sequence, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .constants import OPAQUE, TRANSPARENT
from .core_types import Point, RGBATuple, U8Image, coerce_to_rgb_tuple


def _rgba(colour: Sequence[int]) -> RGBATuple:
    r, g, b = coerce_to_rgb_tuple(colour)
    return (r, g, b, OPAQUE)


def _fill_triangle(
    view: U8Image,
    origin_x: int,
    origin_y: int,
    points: Sequence[Point],
    colour: Sequence[int],
) -> None:
    """Fill a canvas-space triangle into 'view', whose top-left is at origin."""
    height, width = int(view.shape[0]), int(view.shape[1])
    if width <= 0 or height <= 0:
        return
    local = [(int(px) - origin_x, int(py) - origin_y) for px, py in points]
    mask = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(mask)
    draw.polygon(local, fill=255)
    # Pillow drops an outline equal to the fill; stroke the edges explicitly.
    draw.line(local + [local[0]], fill=255, width=1)
    hit = np.asarray(mask, dtype=np.uint8) > 0
    view[hit] = _rgba(colour)


def _clip_span(lo: int, hi: int, limit: int) -> Tuple[int, int]:
    return max(0, lo), min(limit, hi)


class TileRegion:
    """Exclusive write handle over [x, x+size) x [y, y+size) of a Canvas."""

    def __init__(self, canvas: "Canvas", x: int, y: int, size: int) -> None:
        x0, x1 = _clip_span(x, x + size, canvas.width)
        y0, y1 = _clip_span(y, y + size, canvas.height)
        self.x = x
        self.y = y
        self.size = size
        self._view = canvas.pixels[y0:y1, x0:x1]
        self._origin = (x0, y0)

    def draw_filled_triangle(
        self, p1: Point, p2: Point, p3: Point, colour: Sequence[int]
    ) -> None:
        """Flat-fill a triangle given in canvas coordinates, clipped to this tile."""
        _fill_triangle(self._view, self._origin[0], self._origin[1], (p1, p2, p3), colour)


class Canvas:
    """Output bitmap, fully transparent until tiles are drawn."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must be non-negative, got {width}x{height}")
        self.pixels: U8Image = np.zeros((height, width, 4), dtype=np.uint8)
        self.pixels[...] = TRANSPARENT

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def tile(self, x: int, y: int, size: int) -> TileRegion:
        return TileRegion(self, x, y, size)

    def draw_filled_triangle(
        self, p1: Point, p2: Point, p3: Point, colour: Sequence[int]
    ) -> None:
        """Flat-fill a triangle anywhere on the canvas, clipped to its bounds."""
        xs = [p[0] for p in (p1, p2, p3)]
        ys = [p[1] for p in (p1, p2, p3)]
        x0, x1 = _clip_span(min(xs), max(xs) + 1, self.width)
        y0, y1 = _clip_span(min(ys), max(ys) + 1, self.height)
        if x1 <= x0 or y1 <= y0:
            return
        _fill_triangle(self.pixels[y0:y1, x0:x1], x0, y0, (p1, p2, p3), colour)

    def get_pixel(self, x: int, y: int) -> RGBATuple:
        r, g, b, a = (int(v) for v in self.pixels[y, x].tolist())
        return (r, g, b, a)

    def to_array(self) -> U8Image:
        return self.pixels.copy()

    def to_image(self) -> Image.Image:
        return Image.fromarray(np.ascontiguousarray(self.pixels))


__all__ = ["Canvas", "TileRegion"]
