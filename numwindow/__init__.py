"""Bounded numeric buffer with exact decimal averaging.

Retains the most recent N finite numbers in insertion order and reports
their mean at a configurable decimal precision.
"""

from .core.buffers import DEFAULT_CAPACITY, BoundedNumericBuffer, NumericWindow
from .core.precision import DECIMAL32, DECIMAL64, DECIMAL128, Precision
from .errors import (
    EmptyBufferError,
    InvalidCapacityError,
    NumericWindowError,
    PositionOutOfRangeError,
)

__all__ = [
    "BoundedNumericBuffer",
    "NumericWindow",
    "DEFAULT_CAPACITY",
    "Precision",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "NumericWindowError",
    "InvalidCapacityError",
    "EmptyBufferError",
    "PositionOutOfRangeError",
]
