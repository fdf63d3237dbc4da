from planner_core.services.alignment import calculate_alignment_for_client, compute_alignment  # noqa: F401
from planner_core.services.events import classify_events  # noqa: F401
from planner_core.services.pipeline import build_client_report  # noqa: F401
from planner_core.services.planning import planning_stats  # noqa: F401
from planner_core.services.projection import generate_projection_for_client, simulate_wealth_curve  # noqa: F401
from planner_core.services.rates import monthly_rate  # noqa: F401

__all__ = [
    "build_client_report",
    "calculate_alignment_for_client",
    "classify_events",
    "compute_alignment",
    "generate_projection_for_client",
    "monthly_rate",
    "planning_stats",
    "simulate_wealth_curve",
]
