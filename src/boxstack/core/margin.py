"""Box margins: either uniform or given per side."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Literal

from .anchor import is_number
from .errors import ValidationError


Side = Literal["top", "right", "bottom", "left"]
SIDES: tuple[Side, ...] = ("top", "right", "bottom", "left")


@dataclass(frozen=True)
class Uniform:
    """The same margin on all four sides."""

    value: float

    def side(self, name: Side) -> float:
        return self.value

    def to_data(self) -> float:
        return self.value


@dataclass(frozen=True)
class PerSide:
    """Explicit margin per side; omitted sides are 0."""

    top: float = 0
    right: float = 0
    bottom: float = 0
    left: float = 0

    def side(self, name: Side) -> float:
        return getattr(self, name)

    def to_data(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in SIDES}


Margin = Uniform | PerSide


def parse_margin(value: Any) -> Margin | None:
    """Coerce a number, a mapping of sides or an existing margin.

    Args:
        value: None, a number, a mapping with top/right/bottom/left keys,
            Uniform or PerSide

    Returns:
        The matching Margin, or None when ``value`` is None

    Raises:
        ValidationError: On unknown sides or non-numeric values
    """
    if value is None or isinstance(value, (Uniform, PerSide)):
        return value
    if is_number(value):
        return Uniform(value)
    if isinstance(value, Mapping):
        unknown = set(value) - set(SIDES)
        if unknown:
            raise ValidationError(f"Unknown margin side(s): {sorted(unknown)}")
        for name, side_value in value.items():
            if not is_number(side_value):
                raise ValidationError(
                    f"Margin side '{name}' must be a number, got {side_value!r}"
                )
        return PerSide(**value)
    raise ValidationError(f"Margin must be a number or a mapping of sides, got {value!r}")


def margin_side(margin: Margin | None, side: Side) -> float:
    """Margin on one side, 0 when there is no margin."""
    if margin is None:
        return 0
    return margin.side(side)
