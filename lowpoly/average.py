# lowpoly/average.py
from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from .core_types import RGBTuple
from .errors import DegenerateGeometryError


def average_colour(
    pixels: Union[np.ndarray, Sequence[Sequence[int]]],
) -> RGBTuple:
    """
    Component-wise integer mean of RGB pixels.

    Accepts an (N,3/4) array or a sequence of RGB/RGBA tuples. Each channel
    sum is floor-divided by N independently; alpha is ignored.
    Raises DegenerateGeometryError for an empty input.
    """
    arr = np.asarray(pixels, dtype=np.int64)
    count = int(arr.shape[0]) if arr.ndim >= 1 else 0
    if count == 0:
        raise DegenerateGeometryError("cannot average an empty pixel set")
    if arr.ndim != 2 or arr.shape[1] < 3:
        raise ValueError(f"expected (N,3) or (N,4) pixels, got shape {arr.shape}")

    sums = arr[:, :3].sum(axis=0)
    r, g, b = (int(s) // count for s in sums.tolist())
    return (r, g, b)


__all__ = ["average_colour"]
