from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List

import pandas as pd

from planner_core.domain.amount import to_amount
from planner_core.domain.models import CashFlowEvent, EventCategory, Frequency, Goal, WalletSnapshot
from planner_core.io.repository import InMemoryRepository

logger = logging.getLogger(__name__)

CLIENTS_FILE = "clients.csv"
WALLETS_FILE = "wallets.csv"
EVENTS_FILE = "events.csv"
GOALS_FILE = "goals.csv"

REQUIRED_COLUMNS = {
    CLIENTS_FILE: {"id"},
    WALLETS_FILE: {"client_id", "total_value"},
    EVENTS_FILE: {"client_id", "category", "amount", "frequency"},
    GOALS_FILE: {"client_id", "target_amount"},
}


def load_book(directory: str | Path) -> InMemoryRepository:
    """
    Load a client book directory (clients/wallets/events/goals CSVs).

    Amount columns are read as text and parsed into Decimal, never through float.
    A missing file contributes no rows.
    """
    root = Path(directory)
    if not root.is_dir():
        raise FileNotFoundError(root)

    wallets = _load_wallets(root / WALLETS_FILE)
    events = _load_events(root / EVENTS_FILE)
    goals = _load_goals(root / GOALS_FILE)
    clients = _load_client_ids(root / CLIENTS_FILE)
    if clients is None:
        clients = list(dict.fromkeys([*wallets, *events, *goals]))

    logger.info(
        "Loaded client book %s: %d clients, %d wallets, %d event lists, %d goal lists",
        root,
        len(clients),
        len(wallets),
        len(events),
        len(goals),
    )
    return InMemoryRepository(clients=clients, wallets=wallets, events=events, goals=goals)


def _read_csv(path: Path) -> pd.DataFrame | None:
    if not path.exists():
        logger.debug("No %s in client book, skipping", path.name)
        return None
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [c.strip() for c in df.columns]
    missing = REQUIRED_COLUMNS[path.name] - set(df.columns)
    if missing:
        raise ValueError(f"Missing columns in {path.name}: {sorted(missing)}")
    return df


def _non_negative(raw: str, path: Path, column: str):
    amount = to_amount(raw)
    if amount < 0:
        raise ValueError(f"Negative {column} in {path.name}: {raw}")
    return amount


def _load_client_ids(path: Path) -> List[str] | None:
    df = _read_csv(path)
    if df is None:
        return None
    return [str(value).strip() for value in df["id"]]


def _load_wallets(path: Path) -> Dict[str, WalletSnapshot]:
    df = _read_csv(path)
    wallets: Dict[str, WalletSnapshot] = {}
    if df is None:
        return wallets
    for _, row in df.iterrows():
        client_id = row["client_id"].strip()
        if client_id in wallets:
            raise ValueError(f"Client {client_id} has more than one wallet in {path.name}")
        wallets[client_id] = WalletSnapshot(total_value=to_amount(row["total_value"]))
    return wallets


def _load_events(path: Path) -> Dict[str, List[CashFlowEvent]]:
    df = _read_csv(path)
    events: Dict[str, List[CashFlowEvent]] = {}
    if df is None:
        return events
    for _, row in df.iterrows():
        try:
            category = EventCategory(row["category"].strip().upper())
            frequency = Frequency(row["frequency"].strip().upper())
        except ValueError as exc:
            raise ValueError(f"Invalid event row in {path.name}: {exc}") from exc
        event = CashFlowEvent(
            amount=_non_negative(row["amount"], path, "amount"),
            category=category,
            frequency=frequency,
            description=str(row.get("description", "")),
        )
        events.setdefault(row["client_id"].strip(), []).append(event)
    return events


def _load_goals(path: Path) -> Dict[str, List[Goal]]:
    df = _read_csv(path)
    goals: Dict[str, List[Goal]] = {}
    if df is None:
        return goals
    for _, row in df.iterrows():
        raw_date = str(row.get("target_date", "")).strip()
        goal = Goal(
            target_amount=_non_negative(row["target_amount"], path, "target_amount"),
            description=str(row.get("description", "")),
            target_date=pd.to_datetime(raw_date).date() if raw_date else None,
        )
        goals.setdefault(row["client_id"].strip(), []).append(goal)
    return goals
