from __future__ import annotations

import dataclasses
from typing import Dict, List, Optional, Protocol

from planner_core.domain.models import CashFlowEvent, Goal, WalletSnapshot


class PlanningRepository(Protocol):
    """Read-only lookups the planning services need, keyed by client id."""

    def get_wallet(self, client_id: str) -> Optional[WalletSnapshot]:
        ...

    def list_events(self, client_id: str) -> List[CashFlowEvent]:
        ...

    def list_goals(self, client_id: str) -> List[Goal]:
        ...

    def list_client_ids(self) -> List[str]:
        ...


@dataclasses.dataclass
class InMemoryRepository:
    clients: List[str] = dataclasses.field(default_factory=list)
    wallets: Dict[str, WalletSnapshot] = dataclasses.field(default_factory=dict)
    events: Dict[str, List[CashFlowEvent]] = dataclasses.field(default_factory=dict)
    goals: Dict[str, List[Goal]] = dataclasses.field(default_factory=dict)

    def get_wallet(self, client_id: str) -> Optional[WalletSnapshot]:
        return self.wallets.get(client_id)

    def list_events(self, client_id: str) -> List[CashFlowEvent]:
        return list(self.events.get(client_id, []))

    def list_goals(self, client_id: str) -> List[Goal]:
        return list(self.goals.get(client_id, []))

    def list_client_ids(self) -> List[str]:
        return list(self.clients)
