"""Default settings for stacks, rows and columns."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from .core.errors import ValidationError


@dataclass(frozen=True)
class StackDefaults:
    """Defaults applied when a call leaves a setting out (immutable).

    Attributes:
        row_align: Row alignment (top, center, bottom or anchor)
        column_align: Column alignment (left, center, right or anchor)
        stack_align: Generic stack alignment (start, center, end or anchor)
        pack: Whether collision packing is enabled for rows and columns
        stack_pack: Whether collision packing is enabled for bare stacks
    """

    row_align: str = "top"
    column_align: str = "left"
    stack_align: str = "start"
    pack: bool = True
    stack_pack: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None, base: StackDefaults | None = None) -> StackDefaults:
        """Override ``base`` (or the built-in defaults) with values from a mapping.

        Raises:
            ValidationError: On keys that are not settings
        """
        base = base or cls()
        if not data:
            return base
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValidationError(f"Unknown default setting(s): {sorted(unknown)}")
        return replace(base, **dict(data))


DEFAULTS = StackDefaults()
