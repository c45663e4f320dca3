"""Axis configuration shared by rows and columns.

The stacking algorithm is written once against :class:`Axis`: the primary
axis is the stacking direction, the secondary axis is the one items are
aligned on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from ..core.anchor import AxisName
from ..core.errors import ValidationError
from ..core.margin import Side


AxisKind = Literal["horizontal", "vertical"]


@dataclass(frozen=True)
class Axis:
    """Maps primary/secondary roles onto x/y, w/h and margin sides.

    Attributes:
        name: "horizontal" (rows) or "vertical" (columns)
        primary: Position attribute along the stacking direction
        primary_dim: Size attribute along the stacking direction
        secondary: Position attribute along the alignment direction
        secondary_dim: Size attribute along the alignment direction
        leading: Margin side facing the previous item
        trailing: Margin side facing the next item
    """

    name: AxisKind
    primary: AxisName
    primary_dim: Literal["w", "h"]
    secondary: AxisName
    secondary_dim: Literal["w", "h"]
    leading: Side
    trailing: Side

    def edge(self, item: Any) -> float:
        """Trailing edge of a positioned item along the primary axis."""
        return getattr(item, self.primary) + getattr(item, self.primary_dim)

    def secondary_edge(self, item: Any) -> float:
        """Trailing edge of a positioned item along the secondary axis."""
        return getattr(item, self.secondary) + getattr(item, self.secondary_dim)

    def point(self, primary: float, secondary: float) -> tuple[float, float]:
        """Convert (primary, secondary) coordinates into (x, y)."""
        if self.primary == "x":
            return primary, secondary
        return secondary, primary


HORIZONTAL = Axis(
    name="horizontal",
    primary="x",
    primary_dim="w",
    secondary="y",
    secondary_dim="h",
    leading="left",
    trailing="right",
)

VERTICAL = Axis(
    name="vertical",
    primary="y",
    primary_dim="h",
    secondary="x",
    secondary_dim="w",
    leading="top",
    trailing="bottom",
)

AXES: dict[str, Axis] = {
    "horizontal": HORIZONTAL,
    "vertical": VERTICAL,
}


def get_axis(axis: Axis | str) -> Axis:
    """Resolve an axis by name ("horizontal" or "vertical")."""
    if isinstance(axis, Axis):
        return axis
    try:
        return AXES[axis]
    except KeyError:
        raise ValidationError(
            f"Unknown axis {axis!r}; expected one of {sorted(AXES)}"
        ) from None
