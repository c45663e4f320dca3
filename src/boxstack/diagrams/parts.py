"""Leaf boxes used by the flow diagram builders."""

from ..core.box import Box, box


def icon(id: str | None = None) -> Box:
    """48x48 icon connecting at its horizontal center."""
    return box(48, 48, id=id, anchor={"x": 24}, margin={"bottom": 4})


def line(id: str | None = None) -> Box:
    """80x10 connector line."""
    return box(80, 10, id=id, anchor={"x": 5})


def narrative(id: str | None = None) -> Box:
    """120x20 text block."""
    return box(120, 20, id=id, margin={"left": 8, "right": 8})


def header(id: str | None = None) -> Box:
    return box(40, 20, id=id, margin={"top": 8, "bottom": 8})


def footer(id: str | None = None) -> Box:
    return box(40, 20, id=id, margin={"top": 8, "bottom": 8})


def label(id: str | None = None) -> Box:
    """120x28 branch label."""
    return box(
        120,
        28,
        id=id,
        margin={"left": 8, "right": 8, "bottom": 4, "top": 4},
        anchor={"x": 14},
    )
