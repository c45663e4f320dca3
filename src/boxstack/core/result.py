"""Layout results: positioned leaf boxes plus references to nested layouts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from .anchor import Anchor
from .box import Box
from .margin import Margin


@dataclass(frozen=True)
class PositionedBox:
    """A leaf box placed at an absolute position.

    Positions are absolute within the coordinate frame of the layout that
    holds this box. ``parent_id`` names the layout that placed it directly.
    """

    id: str
    w: float
    h: float
    x: float
    y: float
    anchor: Anchor | None = None
    margin: Margin | None = None
    meta: Mapping[str, Any] | None = None
    parent_id: str | None = None

    @classmethod
    def from_box(cls, item: Box, x: float, y: float, parent_id: str | None) -> PositionedBox:
        return cls(
            id=item.id,
            w=item.w,
            h=item.h,
            x=x,
            y=y,
            anchor=item.anchor,
            margin=item.margin,
            meta=item.meta,
            parent_id=parent_id,
        )

    def moved(self, dx: float, dy: float) -> PositionedBox:
        """Return a copy translated by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "parent_id": self.parent_id,
        }
        if self.anchor is not None:
            data["anchor"] = self.anchor.to_dict()
        if self.margin is not None:
            data["margin"] = self.margin.to_data()
        if self.meta is not None:
            data["meta"] = dict(self.meta)
        return data


@dataclass(frozen=True)
class LayoutReference:
    """Position, size and anchor of a nested layout, without its content.

    References never own boxes or further references, which keeps the
    result tree flat and acyclic while nested layouts stay addressable by id.
    """

    id: str | None
    x: float
    y: float
    w: float
    h: float
    anchor: Anchor | None = None
    parent_id: str | None = None
    meta: Mapping[str, Any] | None = None

    def moved(self, dx: float, dy: float) -> LayoutReference:
        """Return a copy translated by (dx, dy)."""
        return replace(self, x=self.x + dx, y=self.y + dy)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "w": self.w,
            "h": self.h,
            "parent_id": self.parent_id,
        }
        if self.anchor is not None:
            data["anchor"] = self.anchor.to_dict()
        if self.meta is not None:
            data["meta"] = dict(self.meta)
        return data


@dataclass(frozen=True)
class Layout:
    """The result of a row, column or stack call (immutable).

    Attributes:
        id: Identifier of this layout
        w: Bounding width (max right edge over all boxes)
        h: Bounding height (max bottom edge over all boxes)
        boxes: Every leaf box in the subtree, depth-first insertion order
        references: One reference per nested layout consumed, recursively
        anchor: Resolved anchor used when this layout is itself stacked
        meta: Free-form metadata, passed through untouched

    Example:
        >>> result = row([box(10, 10, id="a"), box(10, 10, id="b")])
        >>> result.find("b").x
        10.0
    """

    id: str | None
    w: float = 0
    h: float = 0
    boxes: tuple[PositionedBox, ...] = ()
    references: tuple[LayoutReference, ...] = ()
    anchor: Anchor | None = None
    meta: Mapping[str, Any] | None = None

    @property
    def is_empty(self) -> bool:
        """Check if the layout holds no boxes."""
        return len(self.boxes) == 0

    def find_box(self, id: str) -> PositionedBox | None:
        """Find a leaf box by id."""
        for placed in self.boxes:
            if placed.id == id:
                return placed
        return None

    def find_reference(self, id: str) -> LayoutReference | None:
        """Find a nested layout reference by id."""
        for reference in self.references:
            if reference.id == id:
                return reference
        return None

    def find(self, id: str) -> PositionedBox | LayoutReference | None:
        """Find a leaf box, or failing that a nested layout reference, by id."""
        found = self.find_box(id)
        if found is not None:
            return found
        return self.find_reference(id)

    def reference_depth(self, parent_id: str | None) -> int:
        """Nesting depth of an entry whose immediate parent is ``parent_id``.

        Entries placed directly by this layout have depth 0.
        """
        depth = 0
        seen: set[str] = set()
        while parent_id is not None and parent_id != self.id and parent_id not in seen:
            seen.add(parent_id)
            reference = self.find_reference(parent_id)
            if reference is None:
                break
            depth += 1
            parent_id = reference.parent_id
        return depth

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "w": self.w,
            "h": self.h,
            "anchor": self.anchor.to_dict() if self.anchor is not None else None,
            "boxes": [placed.to_dict() for placed in self.boxes],
            "references": [reference.to_dict() for reference in self.references],
        }
        if self.meta is not None:
            data["meta"] = dict(self.meta)
        return data


Item = Box | Layout
