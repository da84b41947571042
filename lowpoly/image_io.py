# lowpoly/image_io.py
from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image, ImageOps, UnidentifiedImageError

from .canvas import Canvas
from .core_types import ArrayImage

"""
Pillow-backed decode into an ArrayImage and PNG encode of a finished Canvas.
The mosaic pipeline itself never touches files.
"""


def image_source_from_pil(im: Image.Image) -> ArrayImage:
    """Upright RGBA copy of a Pillow image as an ArrayImage."""
    im = ImageOps.exif_transpose(im)
    arr = np.array(im.convert("RGBA"), dtype=np.uint8)
    return ArrayImage(arr)


def load_image_source(path: Path) -> ArrayImage:
    with Image.open(path) as im:
        return image_source_from_pil(im)


def save_canvas_png(path: Path, canvas: Canvas) -> Path:
    """Write canvas as RGBA PNG. A non-.png suffix is replaced."""
    if path.suffix.lower() != ".png":
        path = path.with_suffix(".png")
    if canvas.width == 0 or canvas.height == 0:
        raise ValueError(f"cannot encode an empty {canvas.width}x{canvas.height} canvas")
    canvas.to_image().save(path, format="PNG")
    return path


def is_image_file(path: Path) -> bool:
    try:
        with Image.open(path) as im:
            im.seek(0)
            im.load()
        return True
    except (UnidentifiedImageError, OSError):
        return False


__all__ = [
    "image_source_from_pil",
    "load_image_source",
    "save_canvas_png",
    "is_image_file",
]
