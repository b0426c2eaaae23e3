"""Assemble every derived view into a single JSON-ready dashboard payload."""
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List, Sequence

from spaceviz.config import Settings
from spaceviz.ingest.models import MissionRecord
from spaceviz.processing.aggregate import AggregateRow, aggregate, success_band, success_rate, top
from spaceviz.processing.race import build_race_series
from spaceviz.processing.timeline import filter_yearly_by_range, overview, summarize_range


def _with_rate(row: AggregateRow) -> Dict[str, Any]:
    rate = success_rate(row)
    return {**asdict(row), "success_rate": round(rate, 1), "success_band": success_band(rate)}


def build_dashboard_payload(records: Sequence[MissionRecord], settings: Settings) -> Dict[str, Any]:
    """Build the data behind every chart from one record sequence."""
    result = aggregate(records)
    race = build_race_series(records, settings.race_roster)
    summary = summarize_range(
        records, settings.timeline_start, settings.timeline_end, top_n=settings.timeline_top_n
    )
    timeline_yearly = filter_yearly_by_range(result.yearly, settings.timeline_start, settings.timeline_end)

    top_organizations: List[Dict[str, Any]] = [
        {"organization": name, "count": count} for name, count in summary.top_organizations
    ]

    return {
        "overview": asdict(overview(records)),
        "yearly": [asdict(row) for row in result.yearly],
        "by_organization": [_with_rate(row) for row in result.by_organization],
        "by_location": [_with_rate(row) for row in top(result.by_location, settings.location_top_n)],
        "roster": list(dict.fromkeys(settings.race_roster)),
        "race": [point.as_row() for point in race],
        "timeline": {
            "start_year": summary.start_year,
            "end_year": summary.end_year,
            "total": summary.total,
            "success": summary.success,
            "success_rate": summary.success_rate,
            "top_organizations": top_organizations,
            "yearly": [asdict(row) for row in timeline_yearly],
        },
    }
