from __future__ import annotations

from typing import Dict, Iterable, List

from planner_core.domain.amount import plain_string
from planner_core.domain.models import AlignmentResult, ClientReport, PlanningStats, ProjectionPoint


def projection_to_json(points: Iterable[ProjectionPoint]) -> List[Dict]:
    return [{"year": p.year, "projectedValue": plain_string(p.projected_value)} for p in points]


def alignment_to_json(result: AlignmentResult) -> Dict[str, str]:
    return {
        "alignmentPercentage": plain_string(result.percentage),
        "category": result.category.value,
    }


def stats_to_json(stats: PlanningStats) -> Dict:
    return {
        "totalClients": stats.total_clients,
        "clientsWithPlan": stats.clients_with_plan,
        "percentageWithPlan": plain_string(stats.percentage_with_plan),
    }


def report_to_json(report: ClientReport) -> Dict:
    return {
        "clientId": report.client_id,
        "projection": projection_to_json(report.projection),
        "alignment": alignment_to_json(report.alignment) if report.alignment else None,
        "alignmentError": report.alignment_error,
    }
