"""
Exceptions raised by the tile merge engine.
"""


class TileMergeError(Exception):
    """Base class for all engine errors."""


class InvalidDirection(TileMergeError, ValueError):
    """Raised when a move direction is outside of left, up, right and down."""


class ConfigurationError(TileMergeError, ValueError):
    """Raised when an engine, a generator or a grid is built from invalid parameters."""
