"""Data models for the mission record source."""
from __future__ import annotations

import math
import re
from datetime import datetime
from typing import Any, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

STATUS_SUCCESS = "Success"
STATUS_FAILURE = "Failure"

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def parse_year(value: Any) -> int:
    """Parse a launch year, falling back to 0 for anything unusable.

    Strings are read up to the first non-digit, so ``"1957.0"`` and
    ``"1957 (est.)"`` both give 1957.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return 0 if math.isnan(value) or math.isinf(value) else int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return 0
    try:
        return int(match.group(1))
    except ValueError:
        # digit run longer than the interpreter's int conversion limit
        return 0


class MissionRecord(BaseModel):
    """A single launch from the mission dataset."""

    model_config = ConfigDict(frozen=True)

    year: int = 0
    organization: str = ""
    location: str = ""
    status: str = ""
    launch_date: Optional[datetime] = None
    detail: Optional[str] = None

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, value: Any) -> int:
        return parse_year(value)

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.status == STATUS_FAILURE


class MissionBatch(BaseModel):
    """Container for load results along with provenance metadata."""

    source_name: str
    records: List[MissionRecord] = Field(default_factory=list)
    raw_path: str
    issues: List[str] = Field(default_factory=list)

    def iter_records(self) -> Iterable[MissionRecord]:
        return iter(self.records)
