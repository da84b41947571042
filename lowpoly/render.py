# lowpoly/render.py
from __future__ import annotations

"""
Tile rendering: pick a diagonal from quadrant hues and draw two triangles.

If top is further in hue from left than from right, the tile is split along
the anti-diagonal (top-right to bottom-left) so top joins left and bottom
joins right. Otherwise, ties included, it is split along the main diagonal
and top joins right, bottom joins left.
"""

from dataclasses import dataclass
from typing import Literal, Tuple

from .average import average_colour
from .canvas import Canvas
from .core_types import Point, QuadColours, RGBTuple
from .hue import hue_distance

Split = Literal["anti", "main"]
Triangle = Tuple[Tuple[Point, Point, Point], RGBTuple]


@dataclass(frozen=True)
class SplitPlan:
    """Chosen diagonal and the two (corners, colour) triangles to draw."""

    split: Split
    first: Triangle
    second: Triangle


def tile_corners(x: int, y: int, tile_size: int) -> Tuple[Point, Point, Point, Point]:
    """(top-left, top-right, bottom-left, bottom-right)."""
    s = tile_size
    return (x, y), (x + s, y), (x, y + s), (x + s, y + s)


def choose_split(
    x: int, y: int, tile_size: int, colours: QuadColours
) -> SplitPlan:
    top, left, bottom, right = colours
    tl, tr, bl, br = tile_corners(x, y, tile_size)

    # Blends re-average the two quadrant means so each side weighs the same.
    if hue_distance(top, left) > hue_distance(top, right):
        return SplitPlan(
            "anti",
            ((tl, tr, bl), average_colour([top, left])),
            ((tr, bl, br), average_colour([bottom, right])),
        )
    return SplitPlan(
        "main",
        ((tl, tr, br), average_colour([top, right])),
        ((tl, bl, br), average_colour([bottom, left])),
    )


def render_tile(
    canvas: Canvas,
    x: int,
    y: int,
    tile_size: int,
    top: RGBTuple,
    left: RGBTuple,
    bottom: RGBTuple,
    right: RGBTuple,
) -> None:
    """Draw one tile's two triangles into its own region of the canvas."""
    plan = choose_split(x, y, tile_size, QuadColours(top, left, bottom, right))
    region = canvas.tile(x, y, tile_size)
    for corners, colour in (plan.first, plan.second):
        region.draw_filled_triangle(*corners, colour)


__all__ = ["Split", "SplitPlan", "tile_corners", "choose_split", "render_tile"]
