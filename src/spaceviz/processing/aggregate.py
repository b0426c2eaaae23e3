"""Grouped launch counts for the overview, company and launch-site charts."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar, Union

from spaceviz.ingest.models import MissionRecord

T = TypeVar("T")

# (total, success, failure)
_Counts = Tuple[int, int, int]
_EMPTY: _Counts = (0, 0, 0)


@dataclass(frozen=True)
class YearlyAggregate:
    year: int
    total: int = 0
    success: int = 0
    failure: int = 0


@dataclass(frozen=True)
class OrganizationAggregate:
    organization: str
    total: int = 0
    success: int = 0
    failure: int = 0


@dataclass(frozen=True)
class LocationAggregate:
    location: str
    total: int = 0
    success: int = 0
    failure: int = 0


@dataclass(frozen=True)
class AggregateResult:
    """The three grouped views derived from one record sequence."""

    yearly: Tuple[YearlyAggregate, ...] = ()
    by_organization: Tuple[OrganizationAggregate, ...] = ()
    by_location: Tuple[LocationAggregate, ...] = ()


AggregateRow = Union[YearlyAggregate, OrganizationAggregate, LocationAggregate]


def _bump(counts: _Counts, record: MissionRecord) -> _Counts:
    total, success, failure = counts
    return (total + 1, success + int(record.is_success), failure + int(record.is_failure))


def _tally(
    records: Iterable[MissionRecord], key: Callable[[MissionRecord], Hashable]
) -> Mapping[Hashable, _Counts]:
    """Fold records into an immutable key -> counts mapping, keys in first-seen order."""
    groups: Dict[Hashable, _Counts] = {}
    for record in records:
        group = key(record)
        groups[group] = _bump(groups.get(group, _EMPTY), record)
    return MappingProxyType(groups)


def aggregate(records: Sequence[MissionRecord]) -> AggregateResult:
    """Group records by year, organization and location.

    ``total`` counts every record in a group; ``success`` and ``failure`` only
    count exact status matches, so other outcomes show up in ``total`` alone.
    Yearly rows ascend by year. Organization and location rows descend by
    total, ties keeping first-seen order.
    """
    records = list(records)
    by_year = _tally(records, lambda r: r.year)
    by_org = _tally(records, lambda r: r.organization)
    by_loc = _tally(records, lambda r: r.location)

    yearly = tuple(
        YearlyAggregate(year, *counts) for year, counts in sorted(by_year.items(), key=lambda item: item[0])
    )
    organizations = tuple(
        OrganizationAggregate(name, *counts) for name, counts in _by_total_desc(by_org)
    )
    locations = tuple(LocationAggregate(name, *counts) for name, counts in _by_total_desc(by_loc))

    logging.debug(
        "Aggregated %d records into %d years, %d organizations, %d locations",
        len(records),
        len(yearly),
        len(organizations),
        len(locations),
    )
    return AggregateResult(yearly=yearly, by_organization=organizations, by_location=locations)


def _by_total_desc(groups: Mapping[Hashable, _Counts]) -> List[Tuple[Hashable, _Counts]]:
    # sorted() is stable, so equal totals keep insertion (first-seen) order
    return sorted(groups.items(), key=lambda item: item[1][0], reverse=True)


def success_rate(row: AggregateRow) -> float:
    """Success percentage of an aggregate row; 0.0 for an empty group."""
    if row.total <= 0:
        return 0.0
    return row.success / row.total * 100


def success_band(rate: float) -> str:
    if rate >= 90:
        return "excellent"
    if rate >= 80:
        return "good"
    if rate >= 70:
        return "fair"
    return "poor"


def top(rows: Sequence[T], n: Optional[int]) -> Tuple[T, ...]:
    """First ``n`` rows of an already sorted view; ``None`` keeps them all."""
    if n is None:
        return tuple(rows)
    if n < 0:
        raise ValueError(f"row count must be non-negative, got {n}")
    return tuple(rows[:n])
