from __future__ import annotations

import random
from pathlib import Path
from typing import List

import pytest

from spaceviz.config import get_settings
from spaceviz.ingest.models import MissionRecord

SAMPLE_CSV = """Unnamed: 0,Company Name,Location,Datum,Detail,Status Rocket,Status Mission,Year,Status Mission Simplified
0,RVSN USSR,"Site 1/5, Baikonur Cosmodrome, Kazakhstan","Fri Oct 04, 1957 19:28 UTC",Sputnik 8K71PS | Sputnik-1,StatusRetired,Success,1957,Success
1,RVSN USSR,"Site 1/5, Baikonur Cosmodrome, Kazakhstan","Sun Nov 03, 1957 02:30 UTC",Sputnik 8K71PS | Sputnik-2,StatusRetired,Success,1957,Success
2,US Navy,"LC-18A, Cape Canaveral AFS, Florida, USA","Fri Dec 06, 1957 16:44 UTC",Vanguard | Vanguard TV3,StatusRetired,Failure,1957,Failure
3,AMBA,"LC-26A, Cape Canaveral AFS, Florida, USA","Sat Feb 01, 1958 03:48 UTC",Juno I | Explorer 1,StatusRetired,Success,1958,Success
4,NASA,"LC-5, Cape Canaveral AFS, Florida, USA","Thu Oct 11, 1958 08:42 UTC",Thor-Able | Pioneer 1,StatusRetired,Partial Failure,1958,Partial Failure
5,SpaceX,"SLC-40, Cape Canaveral AFS, Florida, USA","Fri Aug 07, 2020 05:12 UTC",Falcon 9 Block 5 | Starlink V1 L9,StatusActive,Success,2020,Success
"""

ORGANIZATIONS = ["RVSN USSR", "NASA", "SpaceX", "CASC", "Roscosmos", "US Air Force", "Arianespace", "nasa"]
LOCATIONS = [
    "Site 1/5, Baikonur Cosmodrome, Kazakhstan",
    "LC-39A, Kennedy Space Center, Florida, USA",
    "LC-9401, Jiuquan Satellite Launch Center, China",
    "ELA-3, Guiana Space Centre, French Guiana, France",
]
STATUSES = ["Success", "Failure", "Partial Failure", "Prelaunch Failure", ""]


def make_record(year=1957, organization="NASA", location="LC-39A, Kennedy Space Center, Florida, USA", status="Success"):
    return MissionRecord(year=year, organization=organization, location=location, status=status)


def random_records(seed: int, size: int) -> List[MissionRecord]:
    rng = random.Random(seed)
    return [
        make_record(
            year=rng.choice([0, *range(1957, 1966)]),
            organization=rng.choice(ORGANIZATIONS),
            location=rng.choice(LOCATIONS),
            status=rng.choice(STATUSES),
        )
        for _ in range(size)
    ]


# Deterministic collections used by the property checks, including the empty one.
DATASETS = [random_records(seed, size) for seed, size in [(0, 0), (1, 1), (2, 7), (3, 40), (4, 250), (5, 1000)]]


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep tests away from a developer .env file and the settings cache."""
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_csv(tmp_path) -> Path:
    path = tmp_path / "Space_Processed.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path
