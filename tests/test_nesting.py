"""Tests for flattening nested layouts into a single result."""

import itertools

import pytest

from boxstack import Layout, LayoutReference, box, column, row
from boxstack.layout.axis import HORIZONTAL
from boxstack.layout.margins import collapsed_margin


def test_recursive_flattening():
    inner1 = column([box(5, 5)])
    inner2 = column([box(5, 5)])
    middle1 = row([inner1, inner2])
    middle2 = row([inner1, inner2])
    result = row([middle1, middle2])

    assert len(result.boxes) == 4
    assert len(result.references) == 6
    assert [r.x for r in result.references] == [0, 0, 5, 10, 10, 15]


def test_references_do_not_own_content():
    result = row([column([box(5, 5)], id="inner")])
    reference = result.references[0]
    assert isinstance(reference, LayoutReference)
    assert not hasattr(reference, "boxes")
    assert not hasattr(reference, "references")


def test_reference_carries_layout_summary():
    inner = column([box(10, 10), box(20, 10)], id="inner", meta={"type": "child"})
    result = row([box(5, 5), inner], id="outer")
    reference = result.find_reference("inner")
    assert (reference.w, reference.h) == (inner.w, inner.h)
    assert reference.anchor == inner.anchor
    assert reference.meta == {"type": "child"}
    assert reference.parent_id == "outer"


def test_meta_on_result():
    result = column([row([box(10, 10)], id="child", meta={"type": "child"})],
                    id="parent", meta={"type": "parent"})
    assert result.meta == {"type": "parent"}
    assert result.references[0].meta == {"type": "child"}


def test_parent_ids():
    inner = row([box(5, 5, id="a")], id="inner")
    outer = column([inner, box(5, 5, id="b")], id="outer")
    top = row([outer], id="top")

    assert top.find_box("a").parent_id == "inner"
    assert top.find_box("b").parent_id == "outer"
    assert top.find_reference("inner").parent_id == "outer"
    assert top.find_reference("outer").parent_id == "top"
    assert top.reference_depth("top") == 0
    assert top.reference_depth("outer") == 1
    assert top.reference_depth("inner") == 2


def test_deep_nesting_keeps_relative_positions():
    leaf = row([box(10, 10, id="a"), box(10, 10, id="b")], id="leaf")
    result = leaf
    for depth in range(4):
        result = column([box(5, 5), result], id=f"level{depth}")
    a, b = result.find_box("a"), result.find_box("b")
    assert (b.x - a.x, b.y - a.y) == (10, 0)
    assert len(result.references) == 4


def test_first_item_layout_is_adopted_in_place():
    inner = row([box(10, 10), box(10, 20)], align="bottom")
    result = column([inner])
    assert [(b.x, b.y) for b in result.boxes] == [(b.x, b.y) for b in inner.boxes]
    assert (result.w, result.h) == (inner.w, inner.h)


@pytest.mark.parametrize("sizes", [
    [(10, 10)],
    [(10, 10), (20, 5)],
    [(3, 7), (8, 2), (5, 5), (1, 9)],
])
def test_leaf_and_reference_counts(sizes):
    items = [column([box(w, h)]) for w, h in sizes] + [box(4, 4)]
    nested = row(items)
    result = column([nested, row([box(1, 1)])])
    assert len(result.boxes) == len(sizes) + 2
    assert len(result.references) == len(sizes) + 2


@pytest.mark.parametrize("specs", [
    [(10, 10, 0), (10, 20, 5), (10, 5, 3)],
    [(15, 30, 8), (5, 10, 2), (20, 20, 6), (10, 40, 1)],
    [(4, 4, 0), (4, 4, 0), (4, 4, 0)],
])
@pytest.mark.parametrize("align", ["top", "center", "bottom"])
def test_packed_boxes_never_collide(specs, align):
    result = row([box(w, h, margin=m) for w, h, m in specs], align=align)
    for earlier, later in itertools.combinations(result.boxes, 2):
        overlaps = earlier.y < later.y + later.h and later.y < earlier.y + earlier.h
        if overlaps:
            gap = later.x - (earlier.x + earlier.w)
            assert gap >= collapsed_margin(earlier.margin, later.margin, HORIZONTAL)

    last = result.boxes[-1]
    tight = [
        last.x == earlier.x + earlier.w + collapsed_margin(earlier.margin, last.margin, HORIZONTAL)
        for earlier in result.boxes[:-1]
        if earlier.y < last.y + last.h and last.y < earlier.y + earlier.h
    ]
    assert any(tight)


def test_unpacked_items_clear_the_full_bounding_edge():
    result = row(
        [column([box(30, 5), box(5, 5)]), column([box(5, 5)], align="left")],
        align="bottom",
        pack=False,
    )
    assert result.references[1].x == 30


def test_result_is_plain_data():
    result = row([column([box(5, 5, meta={"k": 1})], id="inner")], id="outer")
    data = result.to_dict()
    assert data["id"] == "outer"
    assert data["references"][0]["id"] == "inner"
    assert data["boxes"][0]["meta"] == {"k": 1}
    assert isinstance(result, Layout)


@pytest.mark.parametrize("align", ["center", "anchor"])
def test_nested_layout_is_left_untouched(align):
    inner = row(
        [column([box(5, 5, anchor={"y": 1})], id="deep"), box(5, 8, anchor={"y": 2})],
        id="inner",
        align="anchor",
    )
    before = inner.to_dict()

    result = row([box(10, 40, anchor={"y": 30}), inner], align=align)
    placed = result.find_reference("inner")
    assert placed.y != 0
    assert inner.to_dict() == before
