"""Main entry point for boxstack: build a layout and print it."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Iterator

from .core.anchor import Anchor
from .core.box import Box
from .core.result import Item, Layout
from .diagrams import DIAGRAMS
from .layout import LayoutLoader


def _format_anchor(anchor: Anchor | None) -> str:
    if anchor is None:
        return "-"
    return ", ".join(f"{axis}={value}" for axis, value in anchor.to_dict().items())


def describe(item: Item) -> Iterator[str]:
    """Yield an indented, read-only text description of a layout.

    The first line describes the layout itself. References and leaf boxes
    follow with absolute positions, indented by their nesting depth.
    """
    if isinstance(item, Box):
        yield f"box {item.id} {item.w}x{item.h} anchor({_format_anchor(item.anchor)})"
        return

    yield f"layout {item.id} {item.w}x{item.h} anchor({_format_anchor(item.anchor)})"
    for reference in item.references:
        indent = "  " * (item.reference_depth(reference.parent_id) + 1)
        yield (
            f"{indent}+ {reference.id} at ({reference.x}, {reference.y}) "
            f"{reference.w}x{reference.h} anchor({_format_anchor(reference.anchor)})"
        )
    for placed in item.boxes:
        indent = "  " * (item.reference_depth(placed.parent_id) + 1)
        yield (
            f"{indent}- {placed.id} at ({placed.x}, {placed.y}) "
            f"{placed.w}x{placed.h} anchor({_format_anchor(placed.anchor)})"
        )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="boxstack - box layout engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "path",
        nargs="?",
        help="YAML layout definition to load",
    )
    source.add_argument(
        "-d", "--diagram",
        choices=list(DIAGRAMS.keys()),
        help="Build a registered diagram instead of loading a file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the layout as JSON instead of a text tree",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run the boxstack command line."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.diagram:
        result = DIAGRAMS[args.diagram]()
    else:
        result = LayoutLoader().load(args.path)

    if args.json:
        json.dump(result.to_dict(), sys.stdout, indent=2)
        sys.stdout.write("\n")
    else:
        for text in describe(result):
            print(text)


if __name__ == "__main__":
    main()
