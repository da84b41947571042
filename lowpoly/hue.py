# lowpoly/hue.py
from __future__ import annotations

import math
from typing import Sequence

from .core_types import coerce_to_rgb_tuple

"""
Hue angle of an RGB pixel and circular distance between two hues.

Hue follows the hexagon projection from
http://en.wikipedia.org/wiki/Hue#Computing_hue_from_RGB, rotated by -90
degrees so that red sits at 0.
"""

_SQRT3 = math.sqrt(3.0)


def colour_hue(pixel: Sequence[int]) -> float:
    """Hue in degrees, [0, 360). Achromatic pixels (r == g == b) return 0."""
    r, g, b = coerce_to_rgb_tuple(pixel)
    if r == g == b:
        return 0.0
    angle = math.degrees(math.atan2(2.0 * r - g - b, _SQRT3 * (g - b)))
    return (angle - 90.0) % 360.0


def hue_distance(pixel_a: Sequence[int], pixel_b: Sequence[int]) -> float:
    """Shortest way round the hue circle between two pixels, [0, 180]."""
    hue_a = colour_hue(pixel_a)
    hue_b = colour_hue(pixel_b)
    return min((hue_a - hue_b) % 360.0, (hue_b - hue_a) % 360.0)


__all__ = ["colour_hue", "hue_distance"]
