from __future__ import annotations

import decimal
from decimal import Decimal
from typing import Union

# Monetary arithmetic runs under this context, never the thread's global one.
AMOUNT_CONTEXT = decimal.Context(prec=34, rounding=decimal.ROUND_HALF_EVEN)

ZERO = Decimal(0)
HUNDRED = Decimal(100)

AmountLike = Union[Decimal, int, str, float]


def to_amount(value: AmountLike) -> Decimal:
    """
    Convert user/storage input into an exact Decimal.

    Floats go through their shortest repr, so 0.1 becomes Decimal("0.1")
    rather than the binary expansion of 0.1.
    """
    if isinstance(value, bool):
        raise TypeError("Booleans are not amounts")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, (int, str)):
        try:
            amount = Decimal(str(value).strip())
        except decimal.InvalidOperation as exc:
            raise ValueError(f"Not a decimal amount: {value!r}") from exc
    else:
        raise TypeError(f"Unsupported amount type: {type(value).__name__}")

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return amount


def plain_string(amount: Decimal) -> str:
    """Positional notation with trailing zeros stripped: Decimal("10.0") -> "10"."""
    if amount.is_zero():
        return "0"
    return format(amount.normalize(AMOUNT_CONTEXT), "f")


def format_amount(amount: Decimal, places: int = 2) -> str:
    quantum = Decimal(1).scaleb(-places)
    return str(amount.quantize(quantum, rounding=decimal.ROUND_HALF_UP, context=AMOUNT_CONTEXT))
