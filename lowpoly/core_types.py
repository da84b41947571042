# lowpoly/core_types.py
from __future__ import annotations

"""
Core type aliases, small value objects, and lightweight helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Protocol, Sequence, Tuple, Union

import numpy as np
from numpy.typing import NDArray

# Basic aliases

RGBTuple = Tuple[int, int, int]
RGBATuple = Tuple[int, int, int, int]
Point = Tuple[int, int]

U8Image = NDArray[np.uint8]  # (H, W, 3) or (H, W, 4)
U8Pixels = NDArray[np.uint8]  # (N, 3)

Bounds = Tuple[int, int, int, int]  # (x0, x1, y0, y1), half-open


class Quadrant(Enum):
    """Named rectangular sub-region of a tile. Member order is sampling order."""

    TOP = "top"
    LEFT = "left"
    BOTTOM = "bottom"
    RIGHT = "right"


class QuadColours(NamedTuple):
    top: RGBTuple
    left: RGBTuple
    bottom: RGBTuple
    right: RGBTuple


class ImageSource(Protocol):
    """Read-only pixel accessor supplied by whatever decoded the bitmap."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def get_pixel(self, x: int, y: int) -> Sequence[int]: ...


# Value objects


@dataclass(frozen=True)
class ArrayImage:
    """ImageSource over a uint8 (H,W,3/4) array. Alpha is carried but unused."""

    pixels: U8Image

    def __post_init__(self) -> None:
        assert_u8_image_rgb(self.pixels)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def get_pixel(self, x: int, y: int) -> RGBTuple:
        return coerce_to_rgb_tuple(self.pixels[y, x])

    def region(self, x0: int, y0: int, x1: int, y1: int) -> U8Pixels:
        """RGB rows of the half-open rectangle [x0,x1) x [y0,y1), row-major."""
        if x1 <= x0 or y1 <= y0:
            return np.zeros((0, 3), dtype=np.uint8)
        return self.pixels[y0:y1, x0:x1, :3].reshape(-1, 3)


# Small helpers


def coerce_to_rgb_tuple(value: Union[Sequence[int], NDArray[np.generic]]) -> RGBTuple:
    """
    Coerce a 3+ length sequence or array to an (int, int, int) RGB tuple.
    Any fourth (alpha) component is dropped.
    """
    if isinstance(value, np.ndarray):
        if value.size < 3:
            raise ValueError("array too small for RGB")
        flat = value.reshape(-1)
        return (int(flat[0]), int(flat[1]), int(flat[2]))
    if len(value) < 3:
        raise ValueError("sequence too small for RGB")
    return (int(value[0]), int(value[1]), int(value[2]))


def assert_u8_image_rgb(image: np.ndarray) -> U8Image:
    """Validate a uint8 (H,W,3 or 4) image and return it typed as U8Image."""
    if (
        not isinstance(image, np.ndarray)
        or image.dtype != np.uint8
        or image.ndim != 3
        or image.shape[-1] not in (3, 4)
    ):
        raise TypeError("expected uint8 (H,W,3/4) image")
    return image  # type: ignore[return-value]


__all__ = [
    # aliases / types
    "RGBTuple",
    "RGBATuple",
    "Point",
    "U8Image",
    "U8Pixels",
    "Bounds",
    "Quadrant",
    "QuadColours",
    "ImageSource",
    # value objects
    "ArrayImage",
    # helpers
    "coerce_to_rgb_tuple",
    "assert_u8_image_rgb",
]
