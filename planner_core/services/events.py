from __future__ import annotations

import decimal
from decimal import Decimal
from typing import Iterable, List

from planner_core.domain.amount import AMOUNT_CONTEXT, ZERO
from planner_core.domain.models import CashFlowEvent, ClassifiedEvents, Frequency


def classify_events(events: Iterable[CashFlowEvent]) -> ClassifiedEvents:
    """
    Partition events by frequency, keeping input order inside each bucket.
    """
    buckets = {frequency: [] for frequency in Frequency}
    for event in events:
        buckets[Frequency(event.frequency)].append(event)
    return ClassifiedEvents(
        unique=buckets[Frequency.UNIQUE],
        monthly=buckets[Frequency.MONTHLY],
        annual=buckets[Frequency.ANNUAL],
    )


def net_amount(events: List[CashFlowEvent]) -> Decimal:
    with decimal.localcontext(AMOUNT_CONTEXT):
        return sum((event.signed_amount for event in events), ZERO)


def apply_events(balance: Decimal, events: List[CashFlowEvent]) -> Decimal:
    with decimal.localcontext(AMOUNT_CONTEXT):
        return balance + net_amount(events)
