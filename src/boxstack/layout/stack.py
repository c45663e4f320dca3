"""The generic stack: folds an ordered list of items into one layout."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Sequence

from ..config import DEFAULTS
from ..core.box import Box
from ..core.errors import ValidationError
from ..core.ids import IdGenerator, resolve_id
from ..core.result import Item, Layout
from .alignment import Alignment, alignment_offsets, get_alignment
from .anchors import build_stack_anchor
from .axis import Axis, get_axis
from .packing import primary_position
from .placement import place_box, place_first, place_layout
from .resolve import resolve_anchor

logger = logging.getLogger(__name__)


def _kind(item: Item) -> str:
    return "Layout" if isinstance(item, Layout) else "Box"


def _validate_items(items: Sequence[Item], align: Alignment) -> None:
    for index, item in enumerate(items):
        if not isinstance(item, (Box, Layout)):
            raise ValidationError(
                f"Stack items must be boxes or layouts; item at index {index} "
                f"is {type(item).__name__}"
            )
        if align is Alignment.ANCHOR and item.anchor is None:
            item_id = f" (id: {item.id})" if item.id is not None else ""
            raise ValidationError(
                "Stack with anchor alignment requires all items to have anchors. "
                f"{_kind(item)} at index {index}{item_id} is missing an anchor."
            )


def stack(
    items: Iterable[Item],
    axis: Axis | str,
    *,
    id: str | None = None,
    align: Alignment | str = DEFAULTS.stack_align,
    pack: bool = DEFAULTS.stack_pack,
    anchor_item_id: str | None = None,
    meta: Mapping[str, Any] | None = None,
    ids: IdGenerator | None = None,
) -> Layout:
    """Stack boxes and layouts along an axis.

    Items are consumed strictly in order. Each one is aligned on the
    secondary axis, positioned on the primary axis (margin collapse or
    collision packing), merged into the growing layout, and, under anchor
    alignment, folded into the running anchor.

    Args:
        items: Boxes and/or previously built layouts
        axis: "horizontal" (row) or "vertical" (column)
        id: Identifier of the result; generated when omitted
        align: start, center, end or anchor
        pack: Enable collision packing
        anchor_item_id: Id of the descendant whose anchor the result exports,
            or "first"/"last" for the first/last input item
        meta: Free-form metadata attached to the result
        ids: Identifier generator used when ``id`` is omitted

    Returns:
        A new Layout; the inputs are left untouched

    Raises:
        ValidationError: If an item is not a box or layout, or anchor
            alignment meets an item without an anchor
        ConsistencyError: If anchor computation produces NaN
    """
    items = list(items)
    axis = get_axis(axis)
    align = get_alignment(align)
    layout_id = resolve_id(id, ids)
    _validate_items(items, align)

    result = Layout(id=layout_id)
    for index, item in enumerate(items):
        existing_offset, new_item_offset = alignment_offsets(item, result, align, axis)
        primary = primary_position(result, item, axis, pack, existing_offset, new_item_offset)

        anchor = None
        if align is Alignment.ANCHOR:
            anchor = build_stack_anchor(
                item, result, axis, existing_offset, new_item_offset, primary
            )

        if result.is_empty:
            result = place_first(item, result, anchor, layout_id)
        elif isinstance(item, Layout):
            result = place_layout(
                item, result, primary, existing_offset, new_item_offset, axis, anchor, layout_id
            )
        else:
            result = place_box(
                item, result, primary, existing_offset, new_item_offset, axis, anchor, layout_id
            )

        logger.debug(
            "stack %s: placed %s %r (index %d) at %s=%s, offsets=(%s, %s)",
            layout_id,
            _kind(item),
            item.id,
            index,
            axis.primary,
            primary,
            existing_offset,
            new_item_offset,
        )

    final = Layout(
        id=layout_id,
        w=result.w,
        h=result.h,
        boxes=result.boxes,
        references=result.references,
        anchor=resolve_anchor(result, items, anchor_item_id),
        meta=meta,
    )
    logger.debug(
        "stack %s: %d items -> %d boxes, %d references, size %sx%s",
        layout_id,
        len(items),
        len(final.boxes),
        len(final.references),
        final.w,
        final.h,
    )
    return final
