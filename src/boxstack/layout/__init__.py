"""Stacking engine: rows, columns and the generic stack fold."""

from .alignment import Alignment
from .axis import HORIZONTAL, VERTICAL, Axis
from .builders import column, row
from .loader import LayoutLoader
from .stack import stack

__all__ = [
    "Alignment",
    "Axis",
    "HORIZONTAL",
    "VERTICAL",
    "row",
    "column",
    "stack",
    "LayoutLoader",
]
