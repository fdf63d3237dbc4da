import datetime as dt
from decimal import Decimal

import pytest

from planner_core.domain.errors import ProjectionError
from planner_core.domain.models import AlignmentCategory, Goal, WalletSnapshot
from planner_core.io import serialize
from planner_core.io.repository import InMemoryRepository
from planner_core.services.pipeline import build_client_report
from planner_core.services.planning import planning_stats


def _repository():
    return InMemoryRepository(
        clients=["a", "b", "c"],
        wallets={"a": WalletSnapshot(Decimal(900)), "b": WalletSnapshot(Decimal(50))},
        goals={"a": [Goal(Decimal(1000))], "c": [Goal(Decimal(10))]},
    )


def test_planning_stats_counts_clients_with_wallet_and_goals():
    stats = planning_stats(_repository())
    assert stats.total_clients == 3
    assert stats.clients_with_plan == 1
    assert stats.percentage_with_plan == Decimal("33.33")
    assert serialize.stats_to_json(stats) == {
        "totalClients": 3,
        "clientsWithPlan": 1,
        "percentageWithPlan": "33.33",
    }


def test_planning_stats_without_clients():
    stats = planning_stats(InMemoryRepository())
    assert (stats.total_clients, stats.clients_with_plan) == (0, 0)
    assert stats.percentage_with_plan == 0


def test_planning_stats_rounds_half_up():
    repository = InMemoryRepository(
        clients=["a", "b", "c"],
        wallets={k: WalletSnapshot(Decimal(1)) for k in "ab"},
        goals={k: [Goal(Decimal(1))] for k in "ab"},
    )
    assert planning_stats(repository).percentage_with_plan == Decimal("66.67")


def test_report_combines_projection_and_alignment():
    report = build_client_report(_repository(), "a", 0, as_of=dt.date(2030, 1, 1))
    assert [p.year for p in report.projection] == list(range(2030, 2061))
    assert report.final_value == Decimal(900)
    assert report.alignment.category is AlignmentCategory.YELLOW_LIGHT
    assert report.alignment_error is None

    payload = serialize.report_to_json(report)
    assert payload["clientId"] == "a"
    assert payload["alignment"] == {"alignmentPercentage": "90", "category": "yellow-light"}
    assert payload["projection"][0] == {"year": 2030, "projectedValue": "900"}


def test_report_keeps_projection_when_goals_are_missing():
    report = build_client_report(_repository(), "b", 0, as_of=dt.date(2030, 1, 1))
    assert report.alignment is None
    assert "goals" in report.alignment_error
    assert serialize.report_to_json(report)["alignment"] is None


def test_report_requires_wallet():
    with pytest.raises(ProjectionError):
        build_client_report(_repository(), "c", 0)
