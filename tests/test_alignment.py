"""Tests for cross-axis alignment offsets."""

import pytest

from boxstack import Anchor, Layout, PositionedBox, ValidationError, box
from boxstack.layout.alignment import Alignment, alignment_offsets, alignment_value, get_alignment
from boxstack.layout.axis import HORIZONTAL, VERTICAL


def placed(w: float, h: float, anchor: Anchor | None = None) -> Layout:
    """A layout holding a single box of the given size."""
    return Layout(
        id="placed",
        w=w,
        h=h,
        boxes=(PositionedBox(id="p", w=w, h=h, x=0, y=0),),
        anchor=anchor,
    )


def test_start_never_shifts():
    assert alignment_offsets(box(10, 50), placed(10, 20), Alignment.START, HORIZONTAL) == (0, 0)


@pytest.mark.parametrize("align,item_h,expected", [
    (Alignment.END, 10, (0, 10)),
    (Alignment.END, 30, (10, 0)),
    (Alignment.END, 20, (0, 0)),
    (Alignment.CENTER, 10, (0, 5)),
    (Alignment.CENTER, 30, (5, 0)),
])
def test_size_based_alignment_in_rows(align, item_h, expected):
    assert alignment_offsets(box(10, item_h), placed(10, 20), align, HORIZONTAL) == expected


def test_size_based_alignment_in_columns_uses_width():
    assert alignment_offsets(box(40, 5), placed(10, 50), Alignment.END, VERTICAL) == (30, 0)


def test_anchor_alignment_uses_outgoing_and_incoming_points():
    item = box(10, 10, anchor={"y": [3, 7]})
    layout = placed(10, 10, Anchor(x=5, y=[5, 8]))
    assert alignment_offsets(item, layout, Alignment.ANCHOR, HORIZONTAL) == (0, 5)


def test_anchor_alignment_shifts_existing_when_item_anchor_is_lower():
    item = box(10, 40, anchor={"y": 30})
    layout = placed(10, 10, Anchor(y=5))
    assert alignment_offsets(item, layout, Alignment.ANCHOR, HORIZONTAL) == (25, 0)


@pytest.mark.parametrize("anchor,direction,expected", [
    (Anchor(y=[3, 7]), "incoming", 3),
    (Anchor(y=[3, 7]), "outgoing", 7),
    (Anchor(x=[4, 9]), "outgoing", 4),
    (Anchor(x=6), "incoming", 6),
    (None, "incoming", 0),
])
def test_alignment_value_fallbacks(anchor, direction, expected):
    assert alignment_value(anchor, HORIZONTAL, direction) == expected


@pytest.mark.parametrize("name", ["start", "center", "end", "anchor"])
def test_get_alignment_by_name(name):
    assert get_alignment(name).value == name


def test_get_alignment_unknown():
    with pytest.raises(ValidationError, match="Unknown alignment"):
        get_alignment("middle")
