"""Leaf boxes: the fixed-size building blocks of every layout."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .anchor import Anchor, is_number
from .errors import ValidationError
from .ids import IdGenerator, resolve_id
from .margin import Margin, parse_margin


@dataclass(frozen=True)
class Box:
    """A fixed-size leaf box (immutable).

    Use :func:`box` to create one; it validates the size and fills in the
    default anchor.

    Attributes:
        id: Unique identifier
        w: Width
        h: Height
        anchor: Connection point(s), defaulting to the box center
        margin: Optional uniform or per-side margin
        meta: Free-form metadata, passed through untouched
    """

    id: str
    w: float
    h: float
    anchor: Anchor
    margin: Margin | None = None
    meta: Mapping[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "w": self.w,
            "h": self.h,
            "anchor": self.anchor.to_dict(),
        }
        if self.margin is not None:
            data["margin"] = self.margin.to_data()
        if self.meta is not None:
            data["meta"] = dict(self.meta)
        return data


def _validate_size(w: Any, h: Any) -> None:
    if h is None:
        raise ValidationError("Box must have a height (h)")
    if not is_number(h):
        raise ValidationError(f"Box height (h) must be a number, got {h!r}")
    if w is None:
        raise ValidationError("Box must have a width (w)")
    if not is_number(w):
        raise ValidationError(f"Box width (w) must be a number, got {w!r}")


def box(
    w: float | None = None,
    h: float | None = None,
    *,
    id: str | None = None,
    anchor: Anchor | Mapping[str, Any] | None = None,
    margin: Margin | float | Mapping[str, float] | None = None,
    meta: Mapping[str, Any] | None = None,
    ids: IdGenerator | None = None,
) -> Box:
    """Create a validated leaf box.

    Args:
        w: Width (required, numeric)
        h: Height (required, numeric, checked first)
        id: Identifier; generated when omitted
        anchor: Anchor or ``{"x": ..., "y": ...}`` mapping. A missing axis
            defaults to half the box size on that axis; an empty mapping
            defaults both.
        margin: Number for all sides, or a mapping of top/right/bottom/left
        meta: Free-form metadata
        ids: Identifier generator used when ``id`` is omitted

    Returns:
        A new Box

    Raises:
        ValidationError: If width or height is missing or not a number, or the
            anchor/margin has an unusable shape

    Example:
        >>> box(10, 10, anchor={"x": 2}).anchor
        Anchor(x=Scalar(value=2), y=Scalar(value=5.0))
    """
    _validate_size(w, h)
    if isinstance(anchor, Mapping) and not anchor:
        anchor = None
    given = Anchor.parse(anchor)
    resolved = Anchor(
        x=given.x if given is not None and given.x is not None else w / 2,
        y=given.y if given is not None and given.y is not None else h / 2,
    )
    return Box(
        id=resolve_id(id, ids),
        w=w,
        h=h,
        anchor=resolved,
        margin=parse_margin(margin),
        meta=meta,
    )
