"""Per-year launch counts for a fixed roster of space programs."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Sequence, Tuple, Union

from spaceviz.ingest.models import MissionRecord

DEFAULT_ROSTER: Tuple[str, ...] = ("RVSN USSR", "NASA", "SpaceX", "CASC", "Roscosmos")


@dataclass(frozen=True)
class RaceSeriesPoint:
    year: int
    counts: Mapping[str, int]

    def as_row(self) -> Dict[str, Union[int, str]]:
        """Flatten to ``{"year": ..., <name>: <count>, ...}`` for charting."""
        return {"year": self.year, **self.counts}


def build_race_series(
    records: Iterable[MissionRecord], roster: Sequence[str] = DEFAULT_ROSTER
) -> Tuple[RaceSeriesPoint, ...]:
    """Count launches per roster member for every year present in ``records``.

    A year appears as soon as any record has it, even if no roster member
    launched that year. Organizations outside the roster are ignored.
    """
    names = tuple(dict.fromkeys(roster))
    members = frozenset(names)
    years: Dict[int, Dict[str, int]] = {}

    for record in records:
        counts = years.setdefault(record.year, dict.fromkeys(names, 0))
        if record.organization in members:
            counts[record.organization] += 1

    return tuple(
        RaceSeriesPoint(year=year, counts=MappingProxyType(counts))
        for year, counts in sorted(years.items())
    )
