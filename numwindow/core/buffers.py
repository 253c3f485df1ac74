from __future__ import annotations

import decimal
import logging
import operator
from collections import deque
from decimal import Decimal
from typing import TYPE_CHECKING, Deque, Generic, Iterator, List, Optional, Protocol, TypeVar, runtime_checkable

from ..errors import EmptyBufferError, InvalidCapacityError, PositionOutOfRangeError
from .numeric import is_finite, to_decimal
from .precision import PrecisionLike, resolve_context

if TYPE_CHECKING:
    from ..config import BufferConfig


logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 5


@runtime_checkable
class NumericWindow(Protocol[T]):
    """Contract shared by bounded numeric containers."""

    def add(self, value: Optional[T]) -> None: ...

    def average(self, precision: PrecisionLike = None) -> Decimal: ...

    def nth_element(self, n: int) -> T: ...

    def all_elements(self) -> List[T]: ...


def _exact_sum(values: List[Decimal]) -> Decimal:
    # Additions are exact once precision and exponent range are unbounded.
    # The coefficient grows with the exponent span of the inputs, so summing
    # 1E+100000 and 1 holds 100001 digits; spans near MAX_EMAX exhaust memory.
    ctx = decimal.Context(
        prec=decimal.MAX_PREC,
        Emax=decimal.MAX_EMAX,
        Emin=decimal.MIN_EMIN,
        traps=[decimal.InvalidOperation],
    )
    total = Decimal(0)
    for v in values:
        total = ctx.add(total, v)
    return total


class BoundedNumericBuffer(Generic[T]):
    """Keeps the most recent ``capacity`` finite numbers in insertion order.

    Once full, each new value evicts the oldest one. ``None`` and
    non-finite values (infinities, NaN) are dropped without error.
    Averages are computed in decimal arithmetic, never by float
    accumulation. Instances are not safe for concurrent mutation.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        capacity = operator.index(capacity)
        if capacity < 0:
            raise InvalidCapacityError(f"Capacity must be non-negative, got {capacity}")
        self._capacity: int = capacity
        self._buffer: Deque[T] = deque(maxlen=capacity)

    @classmethod
    def from_config(cls, cfg: "BufferConfig") -> "BoundedNumericBuffer[T]":
        return cls(capacity=cfg.capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def add(self, value: Optional[T]) -> None:
        if value is None:
            logger.debug("Dropping None value")
            return
        if not is_finite(value):
            logger.debug("Dropping non-finite value", extra={"value": repr(value)})
            return
        # deque(maxlen=...) drops the head on overflow; with maxlen 0 it stays empty
        self._buffer.append(value)

    def average(self, precision: PrecisionLike = None) -> Decimal:
        """Arithmetic mean of the retained elements.

        ``precision`` is a :class:`Precision`, a ``decimal.Context`` or
        ``None`` for 34 significant digits with ROUND_HALF_EVEN.
        """
        if not self._buffer:
            raise EmptyBufferError("Cannot average an empty buffer; add numbers first")
        total = _exact_sum([to_decimal(v) for v in self._buffer])
        ctx = resolve_context(precision)
        return ctx.divide(total, Decimal(len(self._buffer)))

    def average_with_precision(self, precision: PrecisionLike) -> Decimal:
        return self.average(precision)

    def nth_element(self, n: int) -> T:
        """Return the element at 1-based position ``n``, oldest first."""
        size = len(self._buffer)
        if n < 1 or n > size:
            raise PositionOutOfRangeError(f"Position {n} out of range [1, {size}]")
        return self._buffer[n - 1]

    def all_elements(self) -> List[T]:
        return list(self._buffer)

    def size(self) -> int:
        return len(self._buffer)

    def is_full(self) -> bool:
        return len(self._buffer) == self._capacity

    def __len__(self) -> int:
        return len(self._buffer)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._buffer))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, elements={list(self._buffer)!r})"
