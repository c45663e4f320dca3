"""Final anchor of a stack, exported for enclosing stacks."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.anchor import Anchor
from ..core.result import Item, Layout, LayoutReference, PositionedBox

logger = logging.getLogger(__name__)


FIRST = "first"
LAST = "last"


def target_id(anchor_item_id: str, items: Sequence[Item]) -> str | None:
    """Resolve the "first"/"last" sentinels to the matching input item's id."""
    if anchor_item_id == FIRST:
        return items[0].id if items else None
    if anchor_item_id == LAST:
        return items[-1].id if items else None
    return anchor_item_id


def absolute_anchor(entry: PositionedBox | LayoutReference) -> Anchor | None:
    """Anchor of a placed box or reference in its layout's coordinates.

    Each axis present becomes position plus the first point of the local
    anchor value on that axis.
    """
    if entry.anchor is None:
        return None
    values = {}
    for axis in ("x", "y"):
        value = entry.anchor.get(axis)
        if value is not None:
            values[axis] = getattr(entry, axis) + value.first
    return Anchor(**values)


def resolve_anchor(
    layout: Layout,
    items: Sequence[Item],
    anchor_item_id: str | None = None,
) -> Anchor:
    """Anchor exported by a finished stack.

    Args:
        layout: Result of the fold
        items: The stack's input items, for the "first"/"last" sentinels
        anchor_item_id: Id of the box or nested layout whose anchor to use,
            or "first"/"last"

    Returns:
        The anchor of the requested descendant if one was named and found,
        else the fold's anchor, else the bounding-box center
    """
    if anchor_item_id is not None:
        wanted = target_id(anchor_item_id, items)
        entry = layout.find(wanted) if wanted is not None else None
        if entry is not None and entry.anchor is not None:
            return absolute_anchor(entry)
        logger.warning(
            "Anchor item %r not found in layout %r; using default anchor",
            anchor_item_id,
            layout.id,
        )

    if layout.anchor is None:
        return Anchor(x=layout.w / 2, y=layout.h / 2)
    return layout.anchor
