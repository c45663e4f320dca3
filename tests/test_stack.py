"""Tests for the generic stack fold and identifier generation."""

import pytest

from boxstack import IdGenerator, ValidationError, box, row, stack
from boxstack.layout.alignment import Alignment
from boxstack.layout.axis import VERTICAL


def test_stack_by_axis_name():
    result = stack([box(10, 10), box(20, 10)], "vertical")
    assert [(b.x, b.y) for b in result.boxes] == [(0, 0), (0, 10)]


def test_stack_defaults_to_unpacked():
    tall = row([box(10, 30), box(10, 10)])
    small = row([box(10, 10, id="small")])
    result = stack([tall, small], VERTICAL, align="end")
    assert result.find("small").y == 30
    assert stack([tall, small], VERTICAL, align="end", pack=True).find("small").y == 10


def test_stack_accepts_alignment_enum():
    result = stack([box(10, 10), box(30, 10)], VERTICAL, align=Alignment.CENTER)
    assert [b.x for b in result.boxes] == [10, 0]


def test_unknown_axis():
    with pytest.raises(ValidationError, match="Unknown axis 'diagonal'"):
        stack([box(10, 10)], "diagonal")


def test_generated_layout_id():
    result = stack([box(1, 1)], VERTICAL, ids=IdGenerator(prefix="layout-"))
    assert result.id.startswith("layout-")


def test_leaf_parent_is_stack():
    result = stack([box(1, 1, id="a")], VERTICAL, id="s")
    assert result.find_box("a").parent_id == "s"


def test_id_generator():
    ids = IdGenerator(prefix="n", length=8)
    generated = {ids.next() for _ in range(500)}
    assert len(generated) == 500
    assert all(len(value) == 9 and value.startswith("n") for value in generated)


def test_stack_accepts_any_iterable():
    result = row(box(10, 10) for _ in range(3))
    assert [b.x for b in result.boxes] == [0, 10, 20]
    assert result.w == 30
