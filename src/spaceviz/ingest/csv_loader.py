"""CSV ingestion utilities for the processed launch dataset."""
from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

import pandas as pd

from .models import MissionBatch, MissionRecord, parse_year
from .remote import DatasetClient, DatasetFetchError, is_remote


COLUMN_ALIASES: Dict[str, List[str]] = {
    "year": ["Year", "launch_year"],
    "organization": ["Company Name", "organisation", "organization", "company"],
    "location": ["Location", "launch_site", "site"],
    "status": ["Status Mission Simplified", "Status Mission", "status"],
    "launch_date": ["Datum", "launch_date", "date"],
    "detail": ["Detail", "mission"],
}

REQUIRED_FIELDS = ("organization", "location", "status")


class MissionDataError(ValueError):
    """Raised when a dataset cannot be turned into mission records."""


def _match_column(columns: List[str], candidates: List[str]) -> Optional[str]:
    lower = {c.strip().lower(): c for c in columns}
    for alias in candidates:
        if alias.lower() in lower:
            return lower[alias.lower()]
    return None


def _parse_date(value: str):
    if not value:
        return None
    ts = pd.to_datetime(value, errors="coerce", utc=True)
    if pd.isna(ts):
        return None
    return ts.to_pydatetime()


def _read_frame(source: Union[str, Path], timeout: Optional[int]) -> pd.DataFrame:
    # Every cell stays a raw string; the year fallback must not depend on dtype inference.
    read_kwargs = dict(dtype=str, keep_default_na=False, skip_blank_lines=True)
    try:
        if isinstance(source, str) and is_remote(source):
            text = DatasetClient(timeout=timeout).fetch_text(source)
            return pd.read_csv(io.StringIO(text), **read_kwargs)
        return pd.read_csv(source, **read_kwargs)
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise MissionDataError(f"Could not parse {source}: {exc}") from exc


def load_missions_csv(
    source: Union[str, Path],
    source_name: str = "space_processed",
    timeout: Optional[int] = None,
) -> MissionBatch:
    """Load mission rows from a CSV path or URL into normalized records."""
    df = _read_frame(source, timeout)
    column_cache: Dict[str, Optional[str]] = {
        field: _match_column(df.columns.tolist(), aliases)
        for field, aliases in COLUMN_ALIASES.items()
    }

    missing = [field for field in REQUIRED_FIELDS if column_cache[field] is None]
    if missing:
        raise MissionDataError(
            f"{source} is missing required columns {missing}. Found columns: {df.columns.tolist()}"
        )

    issues: List[str] = []
    if column_cache["year"] is None:
        issues.append("No year column found; every record grouped under year 0")

    records: List[MissionRecord] = []
    fallback_rows: List[int] = []

    for idx, row in df.iterrows():
        data: Dict[str, str] = {}
        for field_name, column_name in column_cache.items():
            if column_name is None:
                continue
            data[field_name] = (row.get(column_name) or "").strip()

        raw_year = data.get("year", "")
        year = parse_year(raw_year)
        if year == 0 and column_cache["year"] is not None:
            fallback_rows.append(int(idx))

        records.append(
            MissionRecord(
                year=year,
                organization=data["organization"],
                location=data["location"],
                status=data["status"],
                launch_date=_parse_date(data.get("launch_date", "")),
                detail=data.get("detail") or None,
            )
        )

    if fallback_rows:
        preview = ", ".join(str(i) for i in fallback_rows[:10])
        suffix = "..." if len(fallback_rows) > 10 else ""
        issues.append(f"{len(fallback_rows)} rows with unparseable year grouped under 0 (rows {preview}{suffix})")

    for issue in issues:
        logging.warning("%s: %s", source_name, issue)
    logging.info("Loaded %d mission records from %s", len(records), source)

    return MissionBatch(
        source_name=source_name,
        records=records,
        raw_path=str(source),
        issues=issues,
    )


def load_space_data(
    source: Union[str, Path],
    source_name: str = "space_processed",
    timeout: Optional[int] = None,
) -> MissionBatch:
    """Load the dashboard dataset, returning an empty batch when it cannot be read."""
    try:
        return load_missions_csv(source, source_name=source_name, timeout=timeout)
    except (MissionDataError, DatasetFetchError, OSError) as exc:
        logging.error("Error loading space data from %s: %s", source, exc)
        return MissionBatch(
            source_name=source_name,
            records=[],
            raw_path=str(source),
            issues=[f"Failed to load {source}: {exc}"],
        )
