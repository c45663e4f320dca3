"""Running anchor of an anchor-aligned stack.

Each time an item joins an anchor-aligned stack, the stack's anchor is
rebuilt from the anchor so far and the incoming item's anchor. The result
records where the stack is entered and left, so that it can in turn be
aligned point-to-point inside an enclosing stack.
"""

from __future__ import annotations

import math

from ..core.anchor import Anchor, Range, check_anchor, merged
from ..core.errors import ConsistencyError
from ..core.result import Item, Layout
from .alignment import alignment_value
from .axis import Axis


def _describe(item: Item) -> str:
    kind = "Layout" if isinstance(item, Layout) else "Box"
    return f"{kind} {item.id!r}"


def build_stack_anchor(
    item: Item,
    layout: Layout,
    axis: Axis,
    existing_offset: float,
    new_item_offset: float,
    item_position: float,
) -> Anchor | None:
    """Anchor of the stack after ``item`` has been added.

    Args:
        item: The incoming box or layout
        layout: The layout accumulated so far (before the item is placed)
        axis: Stacking axis
        existing_offset: Secondary shift applied to the placed boxes
        new_item_offset: Secondary shift applied to the incoming item
        item_position: Primary coordinate the item is placed at

    Returns:
        The stack's new anchor

    Raises:
        ConsistencyError: If an offset or a resulting anchor value is NaN
    """
    for name, offset in (("existing_offset", existing_offset), ("new_item_offset", new_item_offset)):
        if math.isnan(offset):
            raise ConsistencyError(
                f"{name} is NaN while adding {_describe(item)} to layout "
                f"{layout.id!r} ({len(layout.boxes)} boxes)"
            )

    if layout.is_empty:
        return check_anchor(item.anchor, "first item", item.id)

    secondary = axis.secondary
    item_secondary = item.anchor.get(secondary) if item.anchor is not None else None

    # Nothing accumulated yet: carry the item's cross-axis anchor along.
    if item_secondary is not None and layout.anchor is None:
        return check_anchor(
            Anchor.on(secondary, item_secondary.shifted(item_position)),
            "secondary anchor propagation",
            item.id,
        )

    if layout.anchor is not None and layout.anchor.has(secondary):
        if item_secondary is None:
            return check_anchor(layout.anchor, "existing layout anchor", layout.id)
        start = layout.anchor.get(secondary).at("incoming") + existing_offset
        end = item_secondary.at("outgoing") + new_item_offset
        return check_anchor(
            Anchor.on(secondary, merged(start, end)), "merged secondary anchor", item.id
        )

    if layout.anchor is None or item.anchor is None:
        return check_anchor(layout.anchor or item.anchor, "fallback anchor", item.id)

    primary = axis.primary
    item_primary = item.anchor.get(primary)
    if isinstance(item_primary, Range):
        return check_anchor(
            Anchor.on(
                primary,
                Range(item_primary.start + existing_offset, item_primary.end + new_item_offset),
            ),
            "preserved range anchor",
            item.id,
        )

    start = alignment_value(layout.anchor, axis, "outgoing") + existing_offset
    end = alignment_value(item.anchor, axis, "incoming") + new_item_offset
    return check_anchor(Anchor.on(primary, merged(start, end)), "merged primary anchor", item.id)
