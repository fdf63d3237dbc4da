from __future__ import annotations

import decimal
import logging
from decimal import Decimal
from typing import Sequence

from planner_core.domain.amount import AMOUNT_CONTEXT, HUNDRED, ZERO, AmountLike, to_amount
from planner_core.domain.errors import AlignmentError
from planner_core.domain.models import AlignmentCategory, AlignmentResult, Goal
from planner_core.io.repository import PlanningRepository

logger = logging.getLogger(__name__)

GREEN_ABOVE = Decimal(90)
YELLOW_LIGHT_FROM = Decimal(70)
YELLOW_DARK_FROM = Decimal(50)


def alignment_category(percentage: Decimal) -> AlignmentCategory:
    # Exactly 90 is yellow-light: green is strictly above.
    if percentage > GREEN_ABOVE:
        return AlignmentCategory.GREEN
    if percentage >= YELLOW_LIGHT_FROM:
        return AlignmentCategory.YELLOW_LIGHT
    if percentage >= YELLOW_DARK_FROM:
        return AlignmentCategory.YELLOW_DARK
    return AlignmentCategory.RED


def compute_alignment(current_value: AmountLike, goals: Sequence[Goal]) -> AlignmentResult:
    """
    Score current wealth against the sum of every goal target.

    Goals whose targets sum to zero count as fully satisfied (100%, green).
    """
    if not goals:
        raise AlignmentError("Client has no goals registered to compute the alignment.")

    current = to_amount(current_value)
    with decimal.localcontext(AMOUNT_CONTEXT):
        planned_total = sum((goal.target_amount for goal in goals), ZERO)
        if planned_total.is_zero():
            return AlignmentResult(percentage=HUNDRED, category=AlignmentCategory.GREEN)
        percentage = current / planned_total * HUNDRED

    return AlignmentResult(percentage=percentage, category=alignment_category(percentage))


def calculate_alignment_for_client(repository: PlanningRepository, client_id: str) -> AlignmentResult:
    wallet = repository.get_wallet(client_id)
    if wallet is None:
        logger.warning("Alignment requested for client %s without a wallet", client_id)
        raise AlignmentError(f"Client {client_id} has no wallet to compute the alignment.")

    goals = repository.list_goals(client_id)
    if not goals:
        logger.warning("Alignment requested for client %s without goals", client_id)
        raise AlignmentError(f"Client {client_id} has no goals registered to compute the alignment.")

    result = compute_alignment(wallet.total_value, goals)
    logger.info("Client %s alignment %s%% (%s)", client_id, result.percentage, result.category.value)
    return result
