from __future__ import annotations


class PlanningError(Exception):
    """Client-correctable precondition failure in a planning computation."""


class ProjectionError(PlanningError):
    pass


class AlignmentError(PlanningError):
    pass
