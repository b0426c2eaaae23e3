"""Command line entry point for building dashboard data from the mission CSV."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

import typer

from spaceviz.config import get_settings
from spaceviz.ingest.csv_loader import load_space_data
from spaceviz.ingest.models import MissionRecord
from spaceviz.processing.race import build_race_series
from spaceviz.processing.report import build_dashboard_payload
from spaceviz.processing.timeline import summarize_range

app = typer.Typer(help="Build chart data for the space exploration dashboard")

DEFAULT_OUTPUT = Path("data/processed/dashboard.json")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, get_settings().log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")


def _load_records(source: Optional[str]) -> List[MissionRecord]:
    settings = get_settings()
    batch = load_space_data(source or settings.data_source, timeout=settings.request_timeout)
    if batch.issues:
        typer.secho("Ingestion issues detected:", fg=typer.colors.YELLOW, err=True)
        for issue in batch.issues:
            typer.secho(f"- {issue}", fg=typer.colors.YELLOW, err=True)
    if not batch.records:
        typer.secho("No mission records loaded.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return batch.records


@app.command()
def build(
    source: Optional[str] = typer.Option(None, help="CSV path or URL; defaults to SPACEVIZ_DATA_SOURCE"),
    output_path: Path = typer.Option(DEFAULT_OUTPUT, "--output", help="Where to write the dashboard JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Aggregate the dataset and write every chart's data to one JSON file."""
    configure_logging(verbose)
    records = _load_records(source)
    payload = build_dashboard_payload(records, get_settings())

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)

    typer.secho(
        f"Dashboard data for {len(records)} missions written to {output_path}",
        fg=typer.colors.GREEN,
    )


@app.command()
def timeline(
    start_year: int = typer.Argument(..., help="First year of the range (inclusive)"),
    end_year: int = typer.Argument(..., help="Last year of the range (inclusive)"),
    source: Optional[str] = typer.Option(None, help="CSV path or URL"),
    top_n: Optional[int] = typer.Option(None, min=0, help="Number of leading organizations to list"),
) -> None:
    """Print launch totals and success rate for a year range."""
    configure_logging(False)
    settings = get_settings()
    records = _load_records(source)
    summary = summarize_range(
        records, start_year, end_year, top_n=settings.timeline_top_n if top_n is None else top_n
    )
    typer.echo(
        json.dumps(
            {
                "start_year": summary.start_year,
                "end_year": summary.end_year,
                "total": summary.total,
                "success": summary.success,
                "success_rate": summary.success_rate,
                "top_organizations": [
                    {"organization": name, "count": count} for name, count in summary.top_organizations
                ],
            },
            indent=2,
            ensure_ascii=False,
        )
    )


@app.command()
def race(
    source: Optional[str] = typer.Option(None, help="CSV path or URL"),
    roster: Optional[List[str]] = typer.Option(None, "--roster", help="Organization to track; repeat for several"),
) -> None:
    """Print yearly launch counts for the tracked organizations."""
    configure_logging(False)
    records = _load_records(source)
    series = build_race_series(records, roster or get_settings().race_roster)
    typer.echo(json.dumps([point.as_row() for point in series], indent=2, ensure_ascii=False))


if __name__ == "__main__":  # pragma: no cover
    app()
