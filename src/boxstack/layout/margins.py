"""CSS-style margin collapse between adjacent items."""

from ..core.margin import Margin, margin_side
from .axis import Axis


def collapsed_margin(earlier: Margin | None, later: Margin | None, axis: Axis) -> float:
    """Gap between two adjacent items along the primary axis.

    Margins overlap: the larger of the earlier item's trailing margin and the
    later item's leading margin wins. They are never summed.

    Args:
        earlier: Margin of the item placed first (left/top)
        later: Margin of the item placed after it (right/bottom)
        axis: Stacking axis

    Returns:
        The collapsed gap
    """
    return max(margin_side(earlier, axis.trailing), margin_side(later, axis.leading))
