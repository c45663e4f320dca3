"""Box layout engine: rows and columns with margin collapse, packing and anchors."""

from .core import (
    Anchor,
    Box,
    ConsistencyError,
    IdGenerator,
    Layout,
    LayoutError,
    LayoutReference,
    PerSide,
    PositionedBox,
    Range,
    Scalar,
    Uniform,
    ValidationError,
    box,
)
from .layout import LayoutLoader, column, row, stack

__all__ = [
    "box",
    "row",
    "column",
    "stack",
    "Box",
    "Layout",
    "PositionedBox",
    "LayoutReference",
    "Anchor",
    "Scalar",
    "Range",
    "Uniform",
    "PerSide",
    "IdGenerator",
    "LayoutError",
    "ValidationError",
    "ConsistencyError",
    "LayoutLoader",
]
