from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from planner_core.domain.amount import to_amount
from planner_core.domain.models import DEFAULT_ANNUAL_RATE, PROJECTION_END_YEAR, ProjectionConfig


def load_projection_config(path: str | Path) -> ProjectionConfig:
    data = _read_json(path)
    annual_rate = to_amount(data.get("annual_rate", DEFAULT_ANNUAL_RATE))
    if annual_rate < 0:
        raise ValueError(f"annual_rate cannot be negative, got {annual_rate}")
    return ProjectionConfig(
        annual_rate=annual_rate,
        end_year=int(data.get("end_year", PROJECTION_END_YEAR)),
    )


def _read_json(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        # Keep decimals out of float on the way in.
        return json.load(f, parse_float=str)
