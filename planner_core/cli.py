from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from planner_core.domain.amount import format_amount, plain_string, to_amount
from planner_core.domain.errors import PlanningError
from planner_core.domain.models import ProjectionConfig, ProjectionPoint
from planner_core.io import config as config_io
from planner_core.io import serialize
from planner_core.io.book import load_book
from planner_core.services import alignment, pipeline, planning, projection

app = typer.Typer(help="Wealth projection and goal alignment for advisory clients.")
console = Console()

CATEGORY_STYLES = {
    "green": "green",
    "yellow-light": "yellow",
    "yellow-dark": "dark_orange",
    "red": "red",
}


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _save_json(path: Path, payload):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)


def _emit(payload, out: Optional[Path], label: str):
    if out:
        _save_json(out, payload)
        typer.echo(f"{label} written to {out}")
    else:
        typer.echo(json.dumps(payload, indent=2))


def _fail(exc: PlanningError) -> NoReturn:
    console.print(f"[red]{exc}[/red]")
    raise typer.Exit(code=1)


def _parse_as_of(raw: Optional[str]) -> Optional[dt.date]:
    if raw is None:
        return None
    try:
        return dt.date.fromisoformat(raw)
    except ValueError as exc:
        raise typer.BadParameter(f"Expected YYYY-MM-DD, got {raw!r}") from exc


def _resolve_config(config: Optional[Path], annual_rate: Optional[str]) -> ProjectionConfig:
    base = config_io.load_projection_config(config) if config else ProjectionConfig()
    if annual_rate is None:
        return base
    try:
        rate = to_amount(annual_rate)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if rate < 0:
        raise typer.BadParameter("Annual rate cannot be negative")
    return ProjectionConfig(annual_rate=rate, end_year=base.end_year)


def _projection_table(points: List[ProjectionPoint]) -> Table:
    table = Table(title="Wealth projection")
    table.add_column("Year", justify="right")
    table.add_column("Projected value", justify="right")
    for point in points:
        style = "red" if point.projected_value < 0 else None
        table.add_row(str(point.year), format_amount(point.projected_value), style=style)
    return table


@app.command()
def project(
    book: Path = typer.Option(..., help="Client book directory (wallets/events/goals CSVs)"),
    client: str = typer.Option(..., help="Client identifier"),
    annual_rate: Optional[str] = typer.Option(None, help="Annual rate in percent (default 4)"),
    config: Optional[Path] = typer.Option(None, help="Projection config JSON"),
    as_of: Optional[str] = typer.Option(None, help="Simulation start date YYYY-MM-DD (default today)"),
    out: Optional[Path] = typer.Option(None, help="Output path for projection JSON"),
):
    """Project a client's wealth year by year through the horizon."""
    repository = load_book(book)
    cfg = _resolve_config(config, annual_rate)
    try:
        points = projection.generate_projection_for_client(
            repository,
            client,
            cfg.annual_rate,
            as_of=_parse_as_of(as_of),
            end_year=cfg.end_year,
        )
    except PlanningError as exc:
        _fail(exc)
    _emit(serialize.projection_to_json(points), out, "Projection")


@app.command()
def align(
    book: Path = typer.Option(..., help="Client book directory (wallets/events/goals CSVs)"),
    client: str = typer.Option(..., help="Client identifier"),
    out: Optional[Path] = typer.Option(None, help="Output path for alignment JSON"),
):
    """Score a client's current wealth against their goals."""
    repository = load_book(book)
    try:
        result = alignment.calculate_alignment_for_client(repository, client)
    except PlanningError as exc:
        _fail(exc)
    _emit(serialize.alignment_to_json(result), out, "Alignment")


@app.command()
def stats(
    book: Path = typer.Option(..., help="Client book directory (wallets/events/goals CSVs)"),
    out: Optional[Path] = typer.Option(None, help="Output path for stats JSON"),
):
    """Share of clients with both a wallet and goals."""
    repository = load_book(book)
    _emit(serialize.stats_to_json(planning.planning_stats(repository)), out, "Planning stats")


@app.command()
def report(
    book: Path = typer.Option(..., help="Client book directory (wallets/events/goals CSVs)"),
    client: str = typer.Option(..., help="Client identifier"),
    annual_rate: Optional[str] = typer.Option(None, help="Annual rate in percent (default 4)"),
    config: Optional[Path] = typer.Option(None, help="Projection config JSON"),
    as_of: Optional[str] = typer.Option(None, help="Simulation start date YYYY-MM-DD (default today)"),
):
    """Human-readable projection and alignment summary."""
    repository = load_book(book)
    cfg = _resolve_config(config, annual_rate)
    try:
        result = pipeline.build_client_report(
            repository,
            client,
            cfg.annual_rate,
            as_of=_parse_as_of(as_of),
            end_year=cfg.end_year,
        )
    except PlanningError as exc:
        _fail(exc)

    console.print(f"[bold cyan]== Client {result.client_id} ==[/bold cyan]")
    console.print(f"Annual rate: [bold]{plain_string(cfg.annual_rate)}%[/bold] | Horizon: {cfg.end_year}")
    console.print(_projection_table(result.projection))
    if result.final_value is not None:
        console.print(f"Final wealth: [bold]{format_amount(result.final_value)}[/bold]")

    if result.alignment is not None:
        category = result.alignment.category.value
        console.print(
            f"Alignment: [bold]{format_amount(result.alignment.percentage)}%[/bold] "
            f"[{CATEGORY_STYLES[category]}]{category}[/]"
        )
    else:
        console.print(f"[yellow]Alignment unavailable: {result.alignment_error}[/yellow]")


if __name__ == "__main__":
    app()
