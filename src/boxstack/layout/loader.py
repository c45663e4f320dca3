"""YAML loader for declarative layout definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from ..config import DEFAULTS, StackDefaults
from ..core.box import box
from ..core.errors import ValidationError
from ..core.result import Item
from ..diagrams import DIAGRAMS
from .builders import column, row

logger = logging.getLogger(__name__)


# Registry of container kinds: name -> (builder, defaults attribute for align)
CONTAINER_REGISTRY = {
    "row": (row, "row_align"),
    "column": (column, "column_align"),
}

BOX_KEYS = {"id", "w", "h", "anchor", "margin", "meta"}
CONTAINER_KEYS = {"id", "items", "align", "pack", "anchor_item", "meta"}


class LayoutLoader:
    """Builds layouts from YAML documents.

    YAML format:
        defaults:                  # optional overrides of boxstack.config
          pack: true

        layout:
          row:                     # or column
            id: main               # optional
            align: anchor          # row: top|center|bottom|anchor
                                   # column: left|center|right|anchor
            pack: false            # optional, falls back to defaults
            anchor_item: first     # optional id, "first" or "last"
            meta: {kind: main}     # optional passthrough
            items:
              - box: {id: a, w: 10, h: 10, margin: 4, anchor: {y: [2, 8]}}
              - box: {w: 10, h: 10, margin: {top: 2, left: 3}}
              - diagram: {kind: step, id: s1, header: true}
              - column:
                  items: [...]

    Every item is a single-key mapping naming its kind.
    """

    def __init__(self, defaults: StackDefaults | None = None) -> None:
        """Initialize the loader.

        Args:
            defaults: Settings applied where a document leaves them out.
                Defaults to boxstack.config.DEFAULTS.
        """
        self._defaults = defaults or DEFAULTS

    def load(self, path: str | Path) -> Item:
        """Load a layout definition from a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            The Layout (or Box) described by the document
        """
        path = Path(path)
        with open(path) as f:
            data = yaml.safe_load(f)

        result = self._build_document(data)
        logger.info("Loaded layout %r from %s", result.id, path)
        return result

    def load_string(self, yaml_string: str) -> Item:
        """Load a layout definition from a YAML string.

        Args:
            yaml_string: YAML content as a string

        Returns:
            The Layout (or Box) described by the document
        """
        data = yaml.safe_load(yaml_string)
        result = self._build_document(data)
        logger.info("Loaded layout %r from string", result.id)
        return result

    def _build_document(self, data: Any) -> Item:
        """Build the tree from parsed YAML data."""
        if not isinstance(data, Mapping) or "layout" not in data:
            raise ValidationError("Layout document must be a mapping with a 'layout' key")
        defaults = StackDefaults.from_mapping(data.get("defaults"), self._defaults)
        return self._build_item(data["layout"], "layout", defaults)

    def _build_item(self, node: Any, where: str, defaults: StackDefaults) -> Item:
        if not isinstance(node, Mapping) or len(node) != 1:
            raise ValidationError(
                f"{where}: item must be a mapping with exactly one kind key "
                f"(box, row, column or diagram)"
            )
        kind, spec = next(iter(node.items()))
        where = f"{where}.{kind}"
        if spec is None:
            spec = {}
        if not isinstance(spec, Mapping):
            raise ValidationError(f"{where}: expected a mapping, got {spec!r}")

        if kind == "box":
            return self._build_box(spec, where)
        if kind == "diagram":
            return self._build_diagram(spec, where)
        if kind in CONTAINER_REGISTRY:
            return self._build_container(kind, spec, where, defaults)
        raise ValidationError(f"{where}: unknown item kind {kind!r}")

    def _build_box(self, spec: Mapping[str, Any], where: str) -> Item:
        unknown = set(spec) - BOX_KEYS
        if unknown:
            raise ValidationError(f"{where}: unknown box key(s) {sorted(unknown)}")
        return box(**spec)

    def _build_diagram(self, spec: Mapping[str, Any], where: str) -> Item:
        options = dict(spec)
        kind = options.pop("kind", None)
        factory = DIAGRAMS.get(kind)
        if factory is None:
            raise ValidationError(
                f"{where}: unknown diagram kind {kind!r}; expected one of {sorted(DIAGRAMS)}"
            )
        try:
            return factory(**options)
        except TypeError as e:
            raise ValidationError(f"{where}: invalid options for diagram {kind!r}: {e}") from e

    def _build_container(
        self, kind: str, spec: Mapping[str, Any], where: str, defaults: StackDefaults
    ) -> Item:
        unknown = set(spec) - CONTAINER_KEYS
        if unknown:
            raise ValidationError(f"{where}: unknown {kind} key(s) {sorted(unknown)}")
        children = spec.get("items")
        if not isinstance(children, list):
            raise ValidationError(f"{where}: 'items' must be a list")

        items = [
            self._build_item(child, f"{where}.items[{i}]", defaults)
            for i, child in enumerate(children)
        ]
        builder, align_setting = CONTAINER_REGISTRY[kind]
        return builder(
            items,
            id=spec.get("id"),
            align=spec.get("align", getattr(defaults, align_setting)),
            pack=spec.get("pack", defaults.pack),
            anchor_item_id=spec.get("anchor_item"),
            meta=spec.get("meta"),
        )
