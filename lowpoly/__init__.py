"""
lowpoly package.

Purpose:
  Turn a bitmap into a low-poly mosaic of two-triangle tiles. See
  lowpoly_mosaic.py for the CLI.

Public API:
  process            : one-shot image -> Canvas.
  TileGridProcessor  : same, with the tile size fixed at construction.
  render_tile        : draw one tile from its four quadrant colours.
  quadrant_colours   : sample a tile's top/left/bottom/right averages.
  average_colour     : integer mean of RGB pixels.
  colour_hue         : hue angle in degrees.
  hue_distance       : circular hue distance in degrees.
  Canvas, ArrayImage : output buffer and numpy-backed image source.
  image_io           : Pillow load/save helpers.

Quick start:
  from lowpoly import process
  from lowpoly.image_io import load_image_source, save_canvas_png
  save_canvas_png(Path("out.png"), process(load_image_source(Path("in.jpg"))))
"""

__version__ = "0.1.0"

from . import constants
from . import core_types
from . import errors
from . import utils
from . import image_io

from .average import average_colour
from .canvas import Canvas, TileRegion
from .core_types import ArrayImage, ImageSource, Quadrant, QuadColours
from .errors import ConfigError, DegenerateGeometryError, LowPolyError
from .hue import colour_hue, hue_distance
from .processor import TileGridProcessor, output_size, process
from .quadrants import quadrant_bounds, quadrant_colours, quadrant_pixels
from .render import SplitPlan, choose_split, render_tile

__all__ = [
    "__version__",
    "constants",
    "core_types",
    "errors",
    "utils",
    "image_io",
    "average_colour",
    "Canvas",
    "TileRegion",
    "ArrayImage",
    "ImageSource",
    "Quadrant",
    "QuadColours",
    "ConfigError",
    "DegenerateGeometryError",
    "LowPolyError",
    "colour_hue",
    "hue_distance",
    "TileGridProcessor",
    "output_size",
    "process",
    "quadrant_bounds",
    "quadrant_colours",
    "quadrant_pixels",
    "SplitPlan",
    "choose_split",
    "render_tile",
]
