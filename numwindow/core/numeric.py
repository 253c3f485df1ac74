from __future__ import annotations

import decimal
import math
import numbers
from decimal import Decimal
from functools import singledispatch


@singledispatch
def to_decimal(value: object) -> Decimal:
    """Return the exact decimal form of ``value``.

    Register additional numeric types with ``to_decimal.register``.
    """
    if isinstance(value, numbers.Number):
        try:
            return Decimal(str(value))
        except decimal.InvalidOperation as exc:
            raise TypeError(f"No exact decimal form for {value!r}") from exc
    raise TypeError(f"Cannot convert {type(value).__name__} to Decimal")


@to_decimal.register
def _(value: int) -> Decimal:
    return Decimal(int(value))


@to_decimal.register
def _(value: float) -> Decimal:
    # repr gives the shortest string that round-trips, so 0.1 -> Decimal("0.1")
    return Decimal(repr(float(value)))


@to_decimal.register
def _(value: Decimal) -> Decimal:
    return value


@singledispatch
def is_finite(value: object) -> bool:
    """Whether ``value`` is a finite number (not infinite, not NaN)."""
    if isinstance(value, numbers.Real):
        return math.isfinite(value)
    return True


@is_finite.register
def _(value: int) -> bool:
    return True


@is_finite.register
def _(value: float) -> bool:
    return math.isfinite(value)


@is_finite.register
def _(value: Decimal) -> bool:
    return value.is_finite()
