from __future__ import annotations

import decimal
from decimal import Decimal

from planner_core.domain.amount import AMOUNT_CONTEXT, HUNDRED, AmountLike, to_amount

ONE = Decimal(1)
MONTHS_PER_YEAR = Decimal(12)


def monthly_rate(annual_rate: AmountLike) -> Decimal:
    """
    Effective monthly rate equivalent to an annual percentage rate.

    m = (1 + annual_rate/100) ** (1/12) - 1, so twelve monthly compounding
    steps reproduce the annual rate. `annual_rate` is a percentage (4 == 4%).
    """
    rate = to_amount(annual_rate)
    with decimal.localcontext(AMOUNT_CONTEXT):
        growth = ONE + rate / HUNDRED
        return growth ** (ONE / MONTHS_PER_YEAR) - ONE
