from __future__ import annotations

import decimal
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


ROUNDING_MODES = frozenset(
    {
        decimal.ROUND_CEILING,
        decimal.ROUND_DOWN,
        decimal.ROUND_FLOOR,
        decimal.ROUND_HALF_DOWN,
        decimal.ROUND_HALF_EVEN,
        decimal.ROUND_HALF_UP,
        decimal.ROUND_UP,
        decimal.ROUND_05UP,
    }
)


class Precision(BaseModel):
    """Significant-digit count and rounding mode used for decimal division.
    """

    model_config = ConfigDict(frozen=True)

    digits: int = Field(34, gt=0, description="Significant digits kept in the result")
    rounding: str = Field(decimal.ROUND_HALF_EVEN, description="A decimal module rounding mode")

    @field_validator("rounding", mode="before")
    @classmethod
    def _normalize_rounding(cls, v):  # type: ignore[no-untyped-def]
        if isinstance(v, str):
            v = v.strip().upper()
            if not v.startswith("ROUND_"):
                v = f"ROUND_{v}"
        if v not in ROUNDING_MODES:
            raise ValueError(f"Unknown rounding mode: {v!r}")
        return v

    def context(self) -> decimal.Context:
        # Only digits and rounding are limited; the exponent range is not.
        return decimal.Context(
            prec=self.digits,
            rounding=self.rounding,
            Emax=decimal.MAX_EMAX,
            Emin=decimal.MIN_EMIN,
        )


# IEEE 754 decimal interchange formats
DECIMAL32 = Precision(digits=7)
DECIMAL64 = Precision(digits=16)
DECIMAL128 = Precision(digits=34)

DEFAULT_PRECISION = DECIMAL128

PrecisionLike = Union[Precision, decimal.Context, None]


def resolve_context(precision: Optional[PrecisionLike] = None) -> decimal.Context:
    if precision is None:
        return DEFAULT_PRECISION.context()
    if isinstance(precision, decimal.Context):
        return precision
    return precision.context()
