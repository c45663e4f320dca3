"""Cross-axis alignment offsets for stacked items."""

from __future__ import annotations

from enum import Enum

from ..core.anchor import Anchor, Direction
from ..core.errors import ValidationError
from ..core.result import Item, Layout
from .axis import Axis


class Alignment(Enum):
    """Generic alignment modes along the secondary axis."""

    START = "start"
    CENTER = "center"
    END = "end"
    ANCHOR = "anchor"


def get_alignment(align: Alignment | str) -> Alignment:
    """Resolve an alignment by value name."""
    if isinstance(align, Alignment):
        return align
    try:
        return Alignment(align)
    except ValueError:
        names = [a.value for a in Alignment]
        raise ValidationError(f"Unknown alignment {align!r}; expected one of {names}") from None


def alignment_value(anchor: Anchor | None, axis: Axis, direction: Direction) -> float:
    """Anchor coordinate used to align along the secondary axis.

    Uses the secondary-axis value (range start when incoming, range end when
    outgoing). An anchor with no secondary value falls back to the first
    point of its primary-axis value; no anchor at all yields 0.
    """
    if anchor is None:
        return 0
    value = anchor.get(axis.secondary)
    if value is not None:
        return value.at(direction)
    fallback = anchor.get(axis.primary)
    if fallback is not None:
        return fallback.first
    return 0


def _split(difference: float, item_larger: bool) -> tuple[float, float]:
    if item_larger:
        return difference, 0
    return 0, -difference


def alignment_offsets(
    item: Item, layout: Layout, align: Alignment, axis: Axis
) -> tuple[float, float]:
    """Offsets that align an incoming item with the layout built so far.

    Args:
        item: The box or layout being added
        layout: The layout accumulated so far
        align: Alignment mode
        axis: Stacking axis

    Returns:
        ``(existing_offset, new_item_offset)``: secondary-axis shifts for the
        already placed boxes and for the incoming item. At most one is non-zero.
    """
    if align is Alignment.START:
        return 0, 0

    if align is Alignment.ANCHOR:
        incoming = alignment_value(item.anchor, axis, "incoming")
        outgoing = alignment_value(layout.anchor, axis, "outgoing")
        return _split(incoming - outgoing, incoming >= outgoing)

    item_size = getattr(item, axis.secondary_dim)
    layout_size = getattr(layout, axis.secondary_dim)
    difference = item_size - layout_size
    if align is Alignment.CENTER:
        difference = difference / 2
    return _split(difference, item_size >= layout_size)
