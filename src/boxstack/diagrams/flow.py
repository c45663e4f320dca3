"""Flow diagram builders composed from rows and columns."""

from __future__ import annotations

from ..core.errors import ValidationError
from ..core.ids import resolve_id
from ..core.result import Layout
from ..layout.builders import column, row
from . import parts


def step(
    id: str | None = None,
    header: bool = False,
    narrative: bool = False,
    footer: bool = False,
) -> Layout:
    """A centered column around an icon, anchored on the icon.

    Args:
        id: Identifier of the step; child ids derive from it
        header: Add a header box above the icon
        narrative: Add a narrative box below the icon
        footer: Add a footer box at the bottom

    Returns:
        Layout of the step
    """
    id = resolve_id(id)
    icon = parts.icon(f"{id}-icon")
    items = []
    if header:
        items.append(parts.header(f"{id}-header"))
    items.append(icon)
    if narrative:
        items.append(parts.narrative(f"{id}-narrative"))
    if footer:
        items.append(parts.footer(f"{id}-footer"))
    return column(items, id=id, align="center", anchor_item_id=icon.id)


def labels(count: int = 2, id: str | None = None) -> Layout:
    """A left-aligned column of branch labels anchored on the first.

    Raises:
        ValidationError: If ``count`` is below 2
    """
    if count < 2:
        raise ValidationError(f"Label count must be at least 2, got {count}")
    id = resolve_id(id)
    boxes = [parts.label(f"{id}-label-{i}") for i in range(count)]
    return column(boxes, id=id, align="left", anchor_item_id=boxes[0].id)


def sequence(id: str | None = None) -> Layout:
    """Two steps joined by a line, aligned on their anchors."""
    return row([step(), parts.line(), step()], id=id, align="anchor")


def path(id: str | None = None) -> Layout:
    """A line leading into a sequence."""
    return row([parts.line(), sequence()], id=id, align="anchor")


def decision_body(path_count: int = 2, id: str | None = None) -> Layout:
    """A centered column of alternative paths.

    Raises:
        ValidationError: If ``path_count`` is below 2
    """
    if path_count < 2:
        raise ValidationError(f"Path count must be at least 2, got {path_count}")
    id = resolve_id(id)
    paths = [path(f"{id}-path-{i}") for i in range(path_count)]
    return column(paths, id=id, align="center")


def decision(id: str | None = None, path_count: int = 2) -> Layout:
    """An icon, its branch labels and the branch paths in one row."""
    return row(
        [parts.icon(), labels(count=path_count), decision_body(path_count=path_count)],
        id=id,
        align="anchor",
    )


def flow(id: str | None = None) -> Layout:
    """Steps, lines and a decision chained into one anchor-aligned row."""
    return row(
        [
            step("step1"),
            parts.line(),
            step("step2"),
            parts.line(),
            decision("decision1"),
            parts.line(),
            step("step3"),
        ],
        id=id,
        align="anchor",
    )
