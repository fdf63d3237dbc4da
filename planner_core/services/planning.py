from __future__ import annotations

import decimal
from decimal import Decimal

from planner_core.domain.amount import AMOUNT_CONTEXT, HUNDRED, ZERO
from planner_core.domain.models import PlanningStats
from planner_core.io.repository import PlanningRepository

TWO_PLACES = Decimal("0.01")


def planning_stats(repository: PlanningRepository) -> PlanningStats:
    """Share of clients that have both a wallet and at least one goal."""
    client_ids = repository.list_client_ids()
    if not client_ids:
        return PlanningStats(total_clients=0, clients_with_plan=0, percentage_with_plan=ZERO)

    with_plan = sum(
        1
        for client_id in client_ids
        if repository.get_wallet(client_id) is not None and repository.list_goals(client_id)
    )
    with decimal.localcontext(AMOUNT_CONTEXT):
        percentage = (Decimal(with_plan) / Decimal(len(client_ids)) * HUNDRED).quantize(
            TWO_PLACES, rounding=decimal.ROUND_HALF_UP
        )
    return PlanningStats(
        total_clients=len(client_ids),
        clients_with_plan=with_plan,
        percentage_with_plan=percentage,
    )
