"""
Global defaults used across the project.

- Tiling (DEFAULT_TILE_SIZE)
- Canvas fill (TRANSPARENT, OPAQUE)
- CLI file handling (OUTPUT_SUFFIX, IMAGE_EXTENSIONS)
"""
from __future__ import annotations

from typing import FrozenSet, Tuple

# =========
# Tiling
# =========
DEFAULT_TILE_SIZE: int = 32

# =========
# Canvas
# =========
TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)
OPAQUE: int = 255

# =========
# CLI files
# =========
OUTPUT_SUFFIX: str = "_lowpoly"
IMAGE_EXTENSIONS: FrozenSet[str] = frozenset(
    {".png", ".jpg", ".jpeg", ".webp", ".bmp", ".gif"}
)

__all__ = [
    "DEFAULT_TILE_SIZE",
    "TRANSPARENT",
    "OPAQUE",
    "OUTPUT_SUFFIX",
    "IMAGE_EXTENSIONS",
]
