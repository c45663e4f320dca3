"""Tests for loading layouts from YAML documents."""

import pytest

from boxstack import Anchor, LayoutLoader, Range, ValidationError
from boxstack.config import StackDefaults


ROW_DOCUMENT = """
layout:
  row:
    id: main
    align: anchor
    meta: {kind: main}
    items:
      - box: {id: a, w: 10, h: 10, anchor: {y: [5, 8]}}
      - box: {id: b, w: 10, h: 10, anchor: {y: [3, 7]}}
"""


def test_load_row():
    result = LayoutLoader().load_string(ROW_DOCUMENT)
    assert result.id == "main"
    assert result.meta == {"kind": "main"}
    b = result.find("b")
    assert (b.x, b.y) == (10, 5)
    assert result.anchor == Anchor(y=Range(5, 12))


def test_load_nested_containers():
    result = LayoutLoader().load_string("""
layout:
  column:
    id: outer
    anchor_item: inner
    items:
      - box: {w: 30, h: 10}
      - row:
          id: inner
          items:
            - box: {w: 10, h: 10, margin: 2}
            - box: {w: 10, h: 10, margin: {left: 6}}
""")
    inner = result.find_reference("inner")
    assert (inner.x, inner.y) == (0, 12)
    assert result.boxes[2].x == 16
    assert result.anchor == Anchor(x=13, y=12 + 5)


def test_load_file(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(ROW_DOCUMENT)
    assert LayoutLoader().load(path).id == "main"


def test_load_single_box():
    result = LayoutLoader().load_string("layout:\n  box: {id: solo, w: 4, h: 6}\n")
    assert result.id == "solo"
    assert result.anchor == Anchor(x=2, y=3)


def test_document_defaults_disable_packing():
    document = """
defaults:
  pack: false
layout:
  column:
    align: right
    items:
      - row:
          items:
            - box: {w: 10, h: 30}
            - box: {w: 10, h: 10}
      - row:
          items:
            - box: {id: small, w: 10, h: 10}
"""
    assert LayoutLoader().load_string(document).find("small").y == 30


def test_loader_defaults():
    loader = LayoutLoader(StackDefaults(column_align="center"))
    result = loader.load_string("""
layout:
  column:
    items:
      - box: {w: 10, h: 10}
      - box: {w: 30, h: 10}
""")
    assert [b.x for b in result.boxes] == [10, 0]


def test_diagram_items():
    result = LayoutLoader().load_string("""
layout:
  row:
    align: anchor
    items:
      - diagram: {kind: step, id: s1}
      - diagram: {kind: line, id: l1}
      - diagram: {kind: step, id: s2, narrative: true}
""")
    assert result.find_reference("s1") is not None
    assert result.find_box("s2-narrative") is not None
    assert result.find_box("l1").x == 48


@pytest.mark.parametrize("document,message", [
    ("[1, 2]", "'layout' key"),
    ("layout:\n  grid: {items: []}\n", "unknown item kind 'grid'"),
    ("layout:\n  row: {}\n", "'items' must be a list"),
    ("layout:\n  row: {items: [], gap: 3}\n", r"unknown row key\(s\) \['gap'\]"),
    ("layout:\n  box: {w: 10, h: 10, depth: 2}\n", "unknown box key"),
    ("layout:\n  box: {w: 10}\n", r"must have a height \(h\)"),
    ("layout:\n  row: {items: [{box: {w: 1, h: 1}, row: {items: []}}]}\n", "exactly one kind key"),
    ("layout:\n  diagram: {kind: spiral}\n", "unknown diagram kind 'spiral'"),
    ("layout:\n  diagram: {kind: labels, count: 1}\n", "at least 2"),
    ("layout:\n  diagram: {kind: step, color: red}\n", "invalid options for diagram 'step'"),
    ("defaults: {gap: 2}\nlayout:\n  box: {w: 1, h: 1}\n", "Unknown default setting"),
    ("layout:\n  row: {align: left, items: [{box: {w: 1, h: 1}}]}\n", "Unknown row alignment"),
])
def test_invalid_documents(document, message):
    with pytest.raises(ValidationError, match=message):
        LayoutLoader().load_string(document)


def test_error_path_points_at_item():
    with pytest.raises(ValidationError, match=r"layout\.row\.items\[1\]\.box"):
        LayoutLoader().load_string("layout:\n  row:\n    items:\n      - box: {w: 1, h: 1}\n      - box: [1]\n")
