"""Exceptions raised by maze generation, the grid model and the resource cache.

Every error derives from `MazeError` so callers that only want to keep the
previous valid maze can catch a single type. The concrete classes also derive
from the closest builtin (`ValueError`, `IndexError`) so generic handlers keep
working.
"""


class MazeError(Exception):
    """Base class for all mazestack errors."""

    pass


class InvalidDimensionError(MazeError, ValueError):
    """Raised when a generator is asked for a grid smaller than 3x3."""

    pass


class InvalidLayerError(MazeError, ValueError):
    """Raised when a layer is ragged, undersized, or holds unknown cells.

    Also raised when a layer does not match the footprint of the stack it is
    being added to.
    """

    pass


class OutOfBoundsError(MazeError, IndexError):
    """Raised when a cell or layer index falls outside the grid."""

    pass


class InvalidGeometryError(MazeError, ValueError):
    """Raised when degenerate dimensions reach the resource cache."""

    pass


class ResourceReleasedError(MazeError, RuntimeError):
    """Raised when a handle is used after its cache was disposed."""

    pass
