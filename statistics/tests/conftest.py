"""
Pytest fixtures for statistics tests.
"""
from __future__ import annotations

import pytest
from datetime import datetime, timezone
from typing import List

from dive_stats.dive import Dive, DiveMode
from dive_stats.statistics.config import StatsConfig
from dive_stats.statistics.registry import StatsRegistry


def utc_timestamp(year: int, month: int = 1, day: int = 1, hour: int = 12) -> int:
    """Seconds since the epoch for a UTC date."""
    return int(datetime(year, month, day, hour, tzinfo=timezone.utc).timestamp())


@pytest.fixture
def make_dive():
    """Create a Dive for testing."""
    def _create_dive(year: int = 2021, month: int = 1, day: int = 1,
                     maxdepth_mm: int = 10000, buddy: str = "", divemaster: str = "",
                     divemode: int = DiveMode.OC, number: int = 0) -> Dive:
        return Dive(
            when=utc_timestamp(year, month, day),
            maxdepth_mm=maxdepth_mm,
            buddy=buddy,
            divemaster=divemaster,
            divemode=divemode,
            number=number,
        )

    return _create_dive


@pytest.fixture
def sample_dives(make_dive) -> List[Dive]:
    """A small dive log spanning two years, several depths, modes and buddies."""
    return [
        make_dive(2020, 3, 14, maxdepth_mm=4200, buddy="Alice", number=1),
        make_dive(2020, 7, 2, maxdepth_mm=18500, buddy="Alice, Bob", number=2),
        make_dive(2020, 7, 3, maxdepth_mm=25000, buddy="Bob", divemaster="Carol", number=3),
        make_dive(2021, 1, 20, maxdepth_mm=31000, divemode=DiveMode.CCR, number=4),
        make_dive(2021, 11, 5, maxdepth_mm=9999, buddy=" , Dave ,", divemode=DiveMode.FREEDIVE, number=5),
        make_dive(2021, 12, 31, maxdepth_mm=55000, divemaster="Carol", divemode=7, number=6),
    ]


@pytest.fixture
def metric_config() -> StatsConfig:
    return StatsConfig()


@pytest.fixture
def imperial_config() -> StatsConfig:
    return StatsConfig(length_unit="feet")


@pytest.fixture
def registry(metric_config) -> StatsRegistry:
    return StatsRegistry.from_config(metric_config)
