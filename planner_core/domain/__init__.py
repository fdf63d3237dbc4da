from planner_core.domain.amount import AMOUNT_CONTEXT, format_amount, plain_string, to_amount  # noqa: F401
from planner_core.domain.errors import AlignmentError, PlanningError, ProjectionError  # noqa: F401
from planner_core.domain.models import (  # noqa: F401
    AlignmentCategory,
    AlignmentResult,
    CashFlowEvent,
    ClassifiedEvents,
    ClientReport,
    EventCategory,
    Frequency,
    Goal,
    PlanningStats,
    ProjectionConfig,
    ProjectionPoint,
    WalletSnapshot,
)

__all__ = [
    "AMOUNT_CONTEXT",
    "AlignmentCategory",
    "AlignmentError",
    "AlignmentResult",
    "CashFlowEvent",
    "ClassifiedEvents",
    "ClientReport",
    "EventCategory",
    "Frequency",
    "Goal",
    "PlanningError",
    "PlanningStats",
    "ProjectionConfig",
    "ProjectionError",
    "ProjectionPoint",
    "WalletSnapshot",
    "format_amount",
    "plain_string",
    "to_amount",
]
