# lowpoly/errors.py
"""
Exceptions raised by the mosaic pipeline.

Each one also derives from the builtin it stands in for, so callers catching
ValueError / ZeroDivisionError keep working.
"""
from __future__ import annotations


class LowPolyError(Exception):
    """Base class for mosaic errors."""


class ConfigError(LowPolyError, ValueError):
    """Invalid run configuration, e.g. a tile size that is not a positive int."""


class DegenerateGeometryError(LowPolyError, ZeroDivisionError):
    """A sampled region holds no pixels, so it has no average colour."""


__all__ = ["LowPolyError", "ConfigError", "DegenerateGeometryError"]
