"""Year-range filtering for the interactive timeline view."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple

from spaceviz.ingest.models import MissionRecord
from spaceviz.processing.aggregate import YearlyAggregate, top


@dataclass(frozen=True)
class RangeSummary:
    """Headline figures for one selected year range."""

    start_year: int
    end_year: int
    total: int
    success: int
    success_rate: float
    top_organizations: Tuple[Tuple[str, int], ...] = ()


@dataclass(frozen=True)
class Overview:
    total_missions: int
    successful_missions: int
    organizations: int
    locations: int


def _in_range(year: int, start_year: int, end_year: int) -> bool:
    return start_year <= year <= end_year


def filter_by_year_range(
    records: Iterable[MissionRecord], start_year: int, end_year: int
) -> Tuple[MissionRecord, ...]:
    """Records whose year lies in ``[start_year, end_year]``, in input order.

    A reversed range is not swapped; it simply matches nothing.
    """
    return tuple(r for r in records if _in_range(r.year, start_year, end_year))


def filter_yearly_by_range(
    yearly: Iterable[YearlyAggregate], start_year: int, end_year: int
) -> Tuple[YearlyAggregate, ...]:
    """Same bounds as :func:`filter_by_year_range`, applied to precomputed yearly rows."""
    return tuple(row for row in yearly if _in_range(row.year, start_year, end_year))


def summarize_range(
    records: Sequence[MissionRecord], start_year: int, end_year: int, top_n: int = 7
) -> RangeSummary:
    """Totals, success rate and leading organizations for a year range.

    ``records`` should be the full dataset: each new range is derived from
    scratch, never from a previously filtered subset.
    """
    selected = filter_by_year_range(records, start_year, end_year)
    total = len(selected)
    success = sum(1 for r in selected if r.is_success)
    rate = round(success / total * 100, 1) if total > 0 else 0.0

    # Counter keeps first-seen order and sorted() is stable on ties.
    counts = Counter(r.organization for r in selected)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)

    return RangeSummary(
        start_year=start_year,
        end_year=end_year,
        total=total,
        success=success,
        success_rate=rate,
        top_organizations=top(ranked, top_n),
    )


def overview(records: Sequence[MissionRecord]) -> Overview:
    return Overview(
        total_missions=len(records),
        successful_missions=sum(1 for r in records if r.is_success),
        organizations=len({r.organization for r in records}),
        locations=len({r.location for r in records}),
    )
