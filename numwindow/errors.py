from __future__ import annotations


class NumericWindowError(Exception):
    """Base class for errors raised by numeric buffers."""


class InvalidCapacityError(NumericWindowError, ValueError):
    """Raised when a buffer is constructed with a negative capacity."""


class EmptyBufferError(NumericWindowError, ValueError):
    """Raised when averaging a buffer that holds no elements."""


class PositionOutOfRangeError(NumericWindowError, IndexError):
    """Raised when a positional lookup falls outside the retained elements."""
