"""Rows and columns: axis-specific entry points over :func:`stack`."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable

from ..config import DEFAULTS
from ..core.errors import ValidationError
from ..core.ids import IdGenerator, resolve_id
from ..core.result import Item, Layout
from .alignment import Alignment
from .axis import HORIZONTAL, VERTICAL
from .stack import stack


ROW_ALIGNMENTS: dict[str, Alignment] = {
    "top": Alignment.START,
    "center": Alignment.CENTER,
    "bottom": Alignment.END,
    "anchor": Alignment.ANCHOR,
}

COLUMN_ALIGNMENTS: dict[str, Alignment] = {
    "left": Alignment.START,
    "center": Alignment.CENTER,
    "right": Alignment.END,
    "anchor": Alignment.ANCHOR,
}


def _map_alignment(align: str, vocabulary: dict[str, Alignment], kind: str) -> Alignment:
    try:
        return vocabulary[align]
    except (KeyError, TypeError):
        raise ValidationError(
            f"Unknown {kind} alignment {align!r}; expected one of {list(vocabulary)}"
        ) from None


def row(
    items: Iterable[Item],
    *,
    id: str | None = None,
    align: str = DEFAULTS.row_align,
    pack: bool = DEFAULTS.pack,
    anchor_item_id: str | None = None,
    meta: Mapping[str, Any] | None = None,
    ids: IdGenerator | None = None,
) -> Layout:
    """Lay items out left to right.

    Args:
        items: Boxes and/or previously built layouts
        id: Identifier of the result; generated when omitted
        align: top, center, bottom or anchor (vertical alignment)
        pack: Enable collision packing (default True)
        anchor_item_id: Descendant id, or "first"/"last", whose anchor the
            row exports
        meta: Free-form metadata
        ids: Identifier generator used when ``id`` is omitted

    Returns:
        A new Layout

    Example:
        >>> r = row([box(10, 10), box(10, 20)], align="center")
        >>> [b.y for b in r.boxes]
        [5.0, 0]
    """
    return stack(
        items,
        HORIZONTAL,
        id=resolve_id(id, ids),
        align=_map_alignment(align, ROW_ALIGNMENTS, "row"),
        pack=pack,
        anchor_item_id=anchor_item_id,
        meta=meta,
    )


def column(
    items: Iterable[Item],
    *,
    id: str | None = None,
    align: str = DEFAULTS.column_align,
    pack: bool = DEFAULTS.pack,
    anchor_item_id: str | None = None,
    meta: Mapping[str, Any] | None = None,
    ids: IdGenerator | None = None,
) -> Layout:
    """Lay items out top to bottom.

    Args:
        items: Boxes and/or previously built layouts
        id: Identifier of the result; generated when omitted
        align: left, center, right or anchor (horizontal alignment)
        pack: Enable collision packing (default True)
        anchor_item_id: Descendant id, or "first"/"last", whose anchor the
            column exports
        meta: Free-form metadata
        ids: Identifier generator used when ``id`` is omitted

    Returns:
        A new Layout
    """
    return stack(
        items,
        VERTICAL,
        id=resolve_id(id, ids),
        align=_map_alignment(align, COLUMN_ALIGNMENTS, "column"),
        pack=pack,
        anchor_item_id=anchor_item_id,
        meta=meta,
    )
