"""Core data model: boxes, anchors, margins and layout results."""

from .anchor import Anchor, AnchorValue, Range, Scalar
from .box import Box, box
from .errors import ConsistencyError, LayoutError, ValidationError
from .ids import IdGenerator
from .margin import Margin, PerSide, Uniform
from .result import Item, Layout, LayoutReference, PositionedBox

__all__ = [
    "Anchor",
    "AnchorValue",
    "Scalar",
    "Range",
    "Box",
    "box",
    "LayoutError",
    "ValidationError",
    "ConsistencyError",
    "IdGenerator",
    "Margin",
    "Uniform",
    "PerSide",
    "Item",
    "Layout",
    "LayoutReference",
    "PositionedBox",
]
