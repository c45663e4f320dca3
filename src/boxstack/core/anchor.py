"""Anchor values: connection points used for point-to-point alignment.

An anchor carries an optional value per axis. Each value is either a
:class:`Scalar` (one connection point) or a :class:`Range` (separate points
where an item is entered and where it is left along the stacking direction).
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from numbers import Real
from typing import Any, Literal

from .errors import ConsistencyError, ValidationError


AxisName = Literal["x", "y"]
Direction = Literal["incoming", "outgoing"]


def is_number(value: Any) -> bool:
    """Check for a real number, rejecting bools."""
    return isinstance(value, Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class Scalar:
    """A single connection point on one axis."""

    value: float

    @property
    def first(self) -> float:
        return self.value

    def at(self, direction: Direction) -> float:
        return self.value

    def shifted(self, offset: float) -> Scalar:
        return Scalar(self.value + offset)

    def values(self) -> tuple[float, ...]:
        return (self.value,)

    def to_data(self) -> float:
        return self.value


@dataclass(frozen=True)
class Range:
    """Two connection points on one axis.

    ``start`` is where the item connects to its predecessor, ``end`` where it
    connects to its successor.
    """

    start: float
    end: float

    @property
    def first(self) -> float:
        return self.start

    def at(self, direction: Direction) -> float:
        """Return ``start`` for incoming connections and ``end`` for outgoing ones."""
        return self.start if direction == "incoming" else self.end

    def shifted(self, offset: float) -> Range:
        return Range(self.start + offset, self.end + offset)

    def values(self) -> tuple[float, ...]:
        return (self.start, self.end)

    def to_data(self) -> list[float]:
        return [self.start, self.end]


AnchorValue = Scalar | Range


def anchor_value(value: Any) -> AnchorValue | None:
    """Coerce a number, a ``[start, end]`` pair or an existing value.

    Args:
        value: None, a number, a two-element sequence, Scalar or Range

    Returns:
        The matching AnchorValue, or None when ``value`` is None

    Raises:
        ValidationError: If the value has any other shape
    """
    if value is None or isinstance(value, (Scalar, Range)):
        return value
    if is_number(value):
        return Scalar(value)
    if isinstance(value, Sequence) and not isinstance(value, str):
        if len(value) == 2 and all(is_number(v) for v in value):
            return Range(value[0], value[1])
    raise ValidationError(
        f"Anchor value must be a number or a [start, end] pair, got {value!r}"
    )


def merged(start: float, end: float) -> AnchorValue:
    """Join two connection points, collapsing to a Scalar when they coincide."""
    if start == end:
        return Scalar(start)
    return Range(start, end)


@dataclass(frozen=True)
class Anchor:
    """Connection point(s) of a box or layout, per axis.

    Attributes:
        x: Horizontal anchor value, or None when absent
        y: Vertical anchor value, or None when absent

    Example:
        >>> Anchor(x=24, y=[5, 8])
        Anchor(x=Scalar(value=24), y=Range(start=5, end=8))
    """

    x: AnchorValue | None = None
    y: AnchorValue | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", anchor_value(self.x))
        object.__setattr__(self, "y", anchor_value(self.y))
        if self.x is None and self.y is None:
            raise ValidationError("Anchor must define at least one axis (x or y)")

    @classmethod
    def on(cls, axis: AxisName, value: Any) -> Anchor:
        """Create an anchor with a value on a single axis."""
        return cls(**{axis: value})

    @classmethod
    def parse(cls, value: Any) -> Anchor | None:
        """Coerce None, an Anchor or a mapping with ``x``/``y`` keys."""
        if value is None or isinstance(value, Anchor):
            return value
        if isinstance(value, Mapping):
            unknown = set(value) - {"x", "y"}
            if unknown:
                raise ValidationError(
                    f"Unknown anchor axis {sorted(unknown)}; expected 'x' and/or 'y'"
                )
            return cls(x=value.get("x"), y=value.get("y"))
        raise ValidationError(f"Anchor must be a mapping with x/y keys, got {value!r}")

    def get(self, axis: AxisName) -> AnchorValue | None:
        return getattr(self, axis)

    def has(self, axis: AxisName) -> bool:
        return getattr(self, axis) is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            axis: value.to_data()
            for axis, value in (("x", self.x), ("y", self.y))
            if value is not None
        }


def check_anchor(
    anchor: Anchor | None, context: str, item_id: str | None = None
) -> Anchor | None:
    """Fail on NaN values inside an anchor.

    Args:
        anchor: The anchor to inspect (None passes through)
        context: Short description of where the anchor was computed
        item_id: Id of the item involved, for the error message

    Returns:
        The same anchor

    Raises:
        ConsistencyError: If any axis carries a NaN value
    """
    if anchor is None:
        return anchor
    for axis in ("x", "y"):
        value = anchor.get(axis)
        if value is None:
            continue
        if any(math.isnan(v) for v in value.values()):
            suffix = f", item id: {item_id}" if item_id else ""
            raise ConsistencyError(
                f"Invalid anchor value at {context}: axis {axis}, "
                f"value {value.to_data()}, anchor {anchor.to_dict()}{suffix}"
            )
    return anchor
