"""Error types raised while constructing boxes and layouts."""


class LayoutError(ValueError):
    """Base class for every error raised by a construction call."""


class ValidationError(LayoutError):
    """Raised when caller-supplied input is unusable.

    Examples are a box without a numeric width or height, an anchor-aligned
    stack containing an item without an anchor, or an unknown alignment name.
    """


class ConsistencyError(LayoutError):
    """Raised when an internal invariant was already violated upstream.

    Typically a NaN reaching anchor computation. Construction stops
    immediately instead of exporting corrupted geometry.
    """
