from planner_core.io.book import load_book  # noqa: F401
from planner_core.io.config import load_projection_config  # noqa: F401
from planner_core.io.repository import InMemoryRepository, PlanningRepository  # noqa: F401

__all__ = ["load_book", "load_projection_config", "InMemoryRepository", "PlanningRepository"]
