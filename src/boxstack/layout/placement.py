"""Placement steps of the stack fold: seeding, adding layouts, adding boxes."""

from __future__ import annotations

from ..core.anchor import Anchor
from ..core.box import Box
from ..core.result import Item, Layout, LayoutReference, PositionedBox
from .axis import Axis
from .packing import extents


def reference_to(item: Layout, x: float, y: float, parent_id: str | None) -> LayoutReference:
    """Reference to a nested layout placed at (x, y) by ``parent_id``."""
    return LayoutReference(
        id=item.id,
        x=x,
        y=y,
        w=item.w,
        h=item.h,
        anchor=item.anchor,
        parent_id=parent_id,
        meta=item.meta,
    )


def _with_boxes(
    boxes: list[PositionedBox],
    references: list[LayoutReference],
    anchor: Anchor | None,
    parent_id: str | None,
) -> Layout:
    w, h = extents(boxes)
    return Layout(
        id=parent_id,
        w=w,
        h=h,
        boxes=tuple(boxes),
        references=tuple(references),
        anchor=anchor,
    )


def place_first(
    item: Item,
    layout: Layout,
    anchor: Anchor | None,
    parent_id: str | None,
) -> Layout:
    """Seed an empty layout with its first item at the origin.

    A box becomes the single leaf. A layout's boxes are adopted as they
    are, and a reference to it is recorded together with its own nested
    references (which keep their original parents).
    """
    references = list(layout.references)
    if isinstance(item, Box):
        boxes = [PositionedBox.from_box(item, 0, 0, parent_id)]
    else:
        boxes = list(item.boxes)
        references.append(reference_to(item, 0, 0, parent_id))
        references.extend(item.references)
    return _with_boxes(boxes, references, anchor, parent_id)


def _shift_existing(
    layout: Layout, axis: Axis, existing_offset: float
) -> tuple[list[PositionedBox], list[LayoutReference]]:
    dx, dy = axis.point(0, existing_offset)
    boxes = [b.moved(dx, dy) for b in layout.boxes]
    references = [r.moved(dx, dy) for r in layout.references]
    return boxes, references


def place_layout(
    item: Layout,
    layout: Layout,
    primary: float,
    existing_offset: float,
    new_item_offset: float,
    axis: Axis,
    anchor: Anchor | None,
    parent_id: str | None,
) -> Layout:
    """Add a nested layout after the boxes placed so far.

    Placed boxes and references move by the existing offset on the secondary
    axis only. The incoming layout's boxes and nested references move by
    (``primary``, ``new_item_offset``).
    """
    boxes, references = _shift_existing(layout, axis, existing_offset)
    dx, dy = axis.point(primary, new_item_offset)
    boxes.extend(b.moved(dx, dy) for b in item.boxes)
    references.append(reference_to(item, dx, dy, parent_id))
    references.extend(r.moved(dx, dy) for r in item.references)
    return _with_boxes(boxes, references, anchor, parent_id)


def place_box(
    item: Box,
    layout: Layout,
    primary: float,
    existing_offset: float,
    new_item_offset: float,
    axis: Axis,
    anchor: Anchor | None,
    parent_id: str | None,
) -> Layout:
    """Add a leaf box at (``primary``, ``new_item_offset``)."""
    boxes, references = _shift_existing(layout, axis, existing_offset)
    x, y = axis.point(primary, new_item_offset)
    boxes.append(PositionedBox.from_box(item, x, y, parent_id))
    return _with_boxes(boxes, references, anchor, parent_id)
