from __future__ import annotations

from typing import List, Optional

from planner_core.domain.models import CashFlowEvent, EventCategory, Frequency, Goal, WalletSnapshot

from . import models


class OrmRepository:
    """Planning lookups backed by the Django ORM."""

    def get_wallet(self, client_id: str) -> Optional[WalletSnapshot]:
        wallet = models.Wallet.objects.filter(client_id=client_id).first()
        if wallet is None:
            return None
        return WalletSnapshot(total_value=wallet.total_value)

    def list_events(self, client_id: str) -> List[CashFlowEvent]:
        return [
            CashFlowEvent(
                amount=event.value,
                category=EventCategory(event.category),
                frequency=Frequency(event.frequency),
                description=event.description,
            )
            for event in models.Event.objects.filter(client_id=client_id)
        ]

    def list_goals(self, client_id: str) -> List[Goal]:
        return [
            Goal(target_amount=goal.target_value, description=goal.description, target_date=goal.target_date)
            for goal in models.Goal.objects.filter(client_id=client_id)
        ]

    def list_client_ids(self) -> List[str]:
        return [str(pk) for pk in models.Client.objects.values_list("id", flat=True)]
