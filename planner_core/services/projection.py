from __future__ import annotations

import datetime as dt
import decimal
import logging
from typing import List, Optional, Sequence

from planner_core.domain.amount import AMOUNT_CONTEXT, AmountLike, to_amount
from planner_core.domain.errors import ProjectionError
from planner_core.domain.models import (
    DEFAULT_ANNUAL_RATE,
    PROJECTION_END_YEAR,
    CashFlowEvent,
    ProjectionPoint,
)
from planner_core.io.repository import PlanningRepository
from planner_core.services.events import apply_events, classify_events
from planner_core.services.rates import ONE, monthly_rate

logger = logging.getLogger(__name__)

JANUARY = 1
DECEMBER = 12


def _today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


def _next_month(month: dt.date) -> dt.date:
    if month.month == DECEMBER:
        return dt.date(month.year + 1, JANUARY, 1)
    return dt.date(month.year, month.month + 1, 1)


def simulate_wealth_curve(
    initial_value: AmountLike,
    events: Sequence[CashFlowEvent],
    annual_rate: AmountLike = DEFAULT_ANNUAL_RATE,
    as_of: Optional[dt.date] = None,
    end_year: int = PROJECTION_END_YEAR,
) -> List[ProjectionPoint]:
    """
    Month-by-month wealth projection from `as_of` through December of `end_year`.

    Unique events hit the starting balance once. Each month then applies the
    annual events (January only), the monthly events, and finally one month of
    compounding. The balance at the end of every December is recorded.
    Mid-month starts are not prorated.
    """
    start = as_of or _today()
    buckets = classify_events(events)
    month = dt.date(start.year, start.month, 1)
    points: List[ProjectionPoint] = []

    logger.debug(
        "Projecting from %s to %s: %d unique, %d monthly, %d annual events",
        month.isoformat(),
        end_year,
        len(buckets.unique),
        len(buckets.monthly),
        len(buckets.annual),
    )

    with decimal.localcontext(AMOUNT_CONTEXT):
        growth = ONE + monthly_rate(annual_rate)
        balance = apply_events(to_amount(initial_value), buckets.unique)

        while month.year <= end_year:
            if month.month == JANUARY:
                balance = apply_events(balance, buckets.annual)
            balance = apply_events(balance, buckets.monthly)
            balance = balance * growth

            if month.month == DECEMBER:
                points.append(ProjectionPoint(year=month.year, projected_value=balance))

            month = _next_month(month)

    return points


def generate_projection_for_client(
    repository: PlanningRepository,
    client_id: str,
    annual_rate: AmountLike = DEFAULT_ANNUAL_RATE,
    as_of: Optional[dt.date] = None,
    end_year: int = PROJECTION_END_YEAR,
) -> List[ProjectionPoint]:
    wallet = repository.get_wallet(client_id)
    if wallet is None:
        logger.warning("Projection requested for client %s without a wallet", client_id)
        raise ProjectionError(f"Client {client_id} has no wallet to start the projection from.")

    events = repository.list_events(client_id)
    points = simulate_wealth_curve(wallet.total_value, events, annual_rate, as_of=as_of, end_year=end_year)
    logger.info(
        "Projected client %s over %d years at %s%% per year",
        client_id,
        len(points),
        annual_rate,
    )
    return points

