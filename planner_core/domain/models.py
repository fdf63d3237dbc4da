from __future__ import annotations

import dataclasses
import datetime as dt
import enum
from decimal import Decimal
from typing import List, Optional

PROJECTION_END_YEAR = 2060
DEFAULT_ANNUAL_RATE = Decimal(4)


class EventCategory(str, enum.Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class Frequency(str, enum.Enum):
    UNIQUE = "UNIQUE"
    MONTHLY = "MONTHLY"
    ANNUAL = "ANNUAL"


class AlignmentCategory(str, enum.Enum):
    GREEN = "green"
    YELLOW_LIGHT = "yellow-light"
    YELLOW_DARK = "yellow-dark"
    RED = "red"


@dataclasses.dataclass(frozen=True)
class CashFlowEvent:
    amount: Decimal
    category: EventCategory
    frequency: Frequency
    description: str = ""

    @property
    def signed_amount(self) -> Decimal:
        if self.category == EventCategory.INCOME:
            return self.amount
        return self.amount.copy_negate()


@dataclasses.dataclass(frozen=True)
class Goal:
    target_amount: Decimal
    description: str = ""
    target_date: Optional[dt.date] = None


@dataclasses.dataclass(frozen=True)
class WalletSnapshot:
    total_value: Decimal


@dataclasses.dataclass(frozen=True)
class ProjectionPoint:
    year: int
    projected_value: Decimal


@dataclasses.dataclass(frozen=True)
class AlignmentResult:
    percentage: Decimal
    category: AlignmentCategory


@dataclasses.dataclass(frozen=True)
class ClassifiedEvents:
    unique: List[CashFlowEvent]
    monthly: List[CashFlowEvent]
    annual: List[CashFlowEvent]


@dataclasses.dataclass(frozen=True)
class ProjectionConfig:
    annual_rate: Decimal = DEFAULT_ANNUAL_RATE
    end_year: int = PROJECTION_END_YEAR


@dataclasses.dataclass(frozen=True)
class PlanningStats:
    total_clients: int
    clients_with_plan: int
    percentage_with_plan: Decimal


@dataclasses.dataclass
class ClientReport:
    client_id: str
    projection: List[ProjectionPoint]
    alignment: Optional[AlignmentResult] = None
    alignment_error: Optional[str] = None

    @property
    def final_value(self) -> Optional[Decimal]:
        if not self.projection:
            return None
        return self.projection[-1].projected_value
