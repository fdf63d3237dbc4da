from __future__ import annotations

import datetime as dt
from typing import Optional

from planner_core.domain.amount import AmountLike
from planner_core.domain.errors import AlignmentError
from planner_core.domain.models import DEFAULT_ANNUAL_RATE, PROJECTION_END_YEAR, ClientReport
from planner_core.io.repository import PlanningRepository
from planner_core.services import alignment, projection


def build_client_report(
    repository: PlanningRepository,
    client_id: str,
    annual_rate: AmountLike = DEFAULT_ANNUAL_RATE,
    as_of: Optional[dt.date] = None,
    end_year: int = PROJECTION_END_YEAR,
) -> ClientReport:
    """
    Projection plus alignment for one client.

    A missing wallet aborts the whole report; missing goals only leave the
    alignment empty with the reason attached.
    """
    points = projection.generate_projection_for_client(
        repository, client_id, annual_rate, as_of=as_of, end_year=end_year
    )
    report = ClientReport(client_id=client_id, projection=points)
    try:
        report.alignment = alignment.calculate_alignment_for_client(repository, client_id)
    except AlignmentError as exc:
        report.alignment_error = str(exc)
    return report
