from __future__ import annotations

import math
from decimal import Decimal
from fractions import Fraction

import pytest

from numwindow.core.numeric import is_finite, to_decimal


def test_to_decimal_float_uses_shortest_repr() -> None:
    assert to_decimal(0.1) == Decimal("0.1")
    assert to_decimal(1e300) == Decimal("1e300")


def test_to_decimal_int_and_decimal() -> None:
    assert to_decimal(12345678901234567890123) == Decimal("12345678901234567890123")
    d = Decimal("1.50")
    assert to_decimal(d) is d
    assert to_decimal(True) == Decimal(1)


def test_to_decimal_fallback_for_other_numbers() -> None:
    assert to_decimal(Fraction(3, 1)) == Decimal(3)
    with pytest.raises(TypeError):
        to_decimal(Fraction(1, 3))


def test_to_decimal_rejects_non_numbers() -> None:
    with pytest.raises(TypeError):
        to_decimal("1.0")


def test_is_finite() -> None:
    assert is_finite(1)
    assert is_finite(1.5)
    assert is_finite(Decimal("2.5"))
    assert is_finite(Fraction(1, 3))
    assert not is_finite(math.inf)
    assert not is_finite(-math.inf)
    assert not is_finite(math.nan)
    assert not is_finite(Decimal("NaN"))
    assert not is_finite(Decimal("-Infinity"))


def test_register_custom_numeric_type() -> None:
    class Cents:
        def __init__(self, amount: int) -> None:
            self.amount = amount

    @to_decimal.register(Cents)
    def _(value: Cents) -> Decimal:
        return Decimal(value.amount).scaleb(-2)

    assert to_decimal(Cents(150)) == Decimal("1.50")
    assert is_finite(Cents(1))
