"""Primary-axis placement: margin spacing and Tetris-style collision packing.

With packing enabled, an incoming item only has to clear the boxes it would
actually collide with on the secondary axis, so items whose cross-axis
footprints differ can sit closer than their bounding boxes allow.
"""

from __future__ import annotations

from typing import Callable, Sequence

import numpy as np
from numpy.typing import NDArray

from ..core.box import Box
from ..core.margin import margin_side
from ..core.result import Item, Layout, PositionedBox
from .axis import HORIZONTAL, VERTICAL, Axis
from .margins import collapsed_margin


def _column(boxes: Sequence[PositionedBox], attribute: str) -> NDArray[np.float64]:
    return np.array([getattr(b, attribute) for b in boxes], dtype=np.float64)


def _edges(
    boxes: Sequence[PositionedBox], edge: Callable[[PositionedBox], float]
) -> NDArray[np.float64]:
    return np.array([edge(b) for b in boxes], dtype=np.float64)


def _margins(boxes: Sequence[PositionedBox], side: str) -> NDArray[np.float64]:
    return np.array([margin_side(b.margin, side) for b in boxes], dtype=np.float64)


def bounding_edge(boxes: Sequence[PositionedBox], axis: Axis) -> float:
    """Largest trailing primary edge over a set of boxes (0 when empty)."""
    if not boxes:
        return 0.0
    return float(np.max(_edges(boxes, axis.edge)))


def extents(boxes: Sequence[PositionedBox]) -> tuple[float, float]:
    """Bounding (w, h) of a set of boxes measured from the origin."""
    if not boxes:
        return 0.0, 0.0
    right = _edges(boxes, HORIZONTAL.edge)
    bottom = _edges(boxes, VERTICAL.edge)
    return float(np.max(right)), float(np.max(bottom))


def _required_start(
    placed: Sequence[PositionedBox],
    incoming: Sequence[PositionedBox],
    axis: Axis,
    existing_offset: float,
    new_item_offset: float,
) -> float:
    """Smallest primary start of ``incoming`` that clears every collision.

    Rows of the pairwise matrices are placed boxes, columns incoming boxes.
    Only pairs overlapping on the secondary axis (offsets applied, margins
    ignored) constrain the result.
    """
    if not placed or not incoming:
        return 0.0

    placed_start = _column(placed, axis.secondary) + existing_offset
    placed_end = _edges(placed, axis.secondary_edge) + existing_offset
    incoming_start = _column(incoming, axis.secondary) + new_item_offset
    incoming_end = _edges(incoming, axis.secondary_edge) + new_item_offset

    overlap = (placed_end[:, None] > incoming_start[None, :]) & (
        placed_start[:, None] < incoming_end[None, :]
    )
    if not overlap.any():
        return 0.0

    placed_edge = _edges(placed, axis.edge)
    gap = np.maximum(
        _margins(placed, axis.trailing)[:, None],
        _margins(incoming, axis.leading)[None, :],
    )
    required = placed_edge[:, None] + gap - _column(incoming, axis.primary)[None, :]
    return max(0.0, float(required[overlap].max()))


def layout_gap(
    first: Layout,
    second: Layout,
    axis: Axis,
    existing_offset: float = 0,
    new_item_offset: float = 0,
) -> float:
    """Primary position where ``second`` must start to clear ``first``.

    Every box of ``first`` is tested against every box of ``second``; the
    answer is the maximum requirement over colliding pairs, or 0 when no
    pair overlaps on the secondary axis.
    """
    return _required_start(first.boxes, second.boxes, axis, existing_offset, new_item_offset)


def packed_box_position(
    placed: Sequence[PositionedBox],
    item: Box,
    axis: Axis,
    new_item_offset: float,
) -> float:
    """Primary position of a box packed against already placed boxes.

    ``placed`` must already carry the existing offset.
    """
    probe = PositionedBox.from_box(item, 0, 0, None)
    return _required_start(placed, [probe], axis, 0, new_item_offset)


def stacked_position(boxes: Sequence[PositionedBox], item: Item, axis: Axis) -> float:
    """Primary position after the full bounding edge plus the collapsed margin.

    The margin is collapsed between the last placed box and the item's first
    box (the box itself for a plain box item).
    """
    if isinstance(item, Layout):
        first_margin = item.boxes[0].margin if item.boxes else None
    else:
        first_margin = item.margin
    last_margin = boxes[-1].margin if boxes else None
    return bounding_edge(boxes, axis) + collapsed_margin(last_margin, first_margin, axis)


def primary_position(
    layout: Layout,
    item: Item,
    axis: Axis,
    pack: bool,
    existing_offset: float = 0,
    new_item_offset: float = 0,
) -> float:
    """Primary-axis coordinate at which an incoming item is placed.

    Args:
        layout: The layout accumulated so far
        item: The incoming box or layout
        axis: Stacking axis
        pack: Whether collision packing is enabled
        existing_offset: Secondary shift applied to the placed boxes
        new_item_offset: Secondary shift applied to the incoming item

    Returns:
        Absolute primary coordinate of the item's origin. 0 for the first item.

    A box following a layout that already holds nested layouts is always
    placed after the bounding edge, whatever ``pack`` says.
    """
    if layout.is_empty:
        return 0.0

    if isinstance(item, Layout):
        if pack:
            return layout_gap(layout, item, axis, existing_offset, new_item_offset)
        return stacked_position(layout.boxes, item, axis)

    if layout.references or not pack:
        return stacked_position(layout.boxes, item, axis)

    shifted = [b.moved(*axis.point(0, existing_offset)) for b in layout.boxes]
    return packed_box_position(shifted, item, axis, new_item_offset)
