"""
Dive date by year, quarter or month.

Calendar weeks are left out: their definition differs between regions.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from dive_stats.dive import Dive
from dive_stats.translations import tr
from dive_stats.statistics.base import StatsType, register_stats_type
from dive_stats.statistics.binners import Binner, SingleValueBinner
from dive_stats.statistics.bins import DateMonthBin, DateQuarterBin, DateYearBin


def utc_year(dive: Dive) -> int:
    return dive.utc_datetime.year


def year_quarter(dive: Dive) -> Tuple[int, int]:
    when = dive.utc_datetime
    return when.year, (when.month - 1) // 3 + 1


def year_month(dive: Dive) -> Tuple[int, int]:
    when = dive.utc_datetime
    return when.year, when.month


DATE_YEAR_BINNER = SingleValueBinner(DateYearBin, utc_year, "Yearly")
DATE_QUARTER_BINNER = SingleValueBinner(DateQuarterBin, year_quarter, "Quarterly")
DATE_MONTH_BINNER = SingleValueBinner(DateMonthBin, year_month, "Monthly")


@register_stats_type
@dataclass(repr=False)
class DateType(StatsType):
    """Date of the dive, binned yearly, quarterly or monthly."""
    type_id: str = "date"

    @property
    def name(self) -> str:
        return tr("Date")

    def binners(self) -> List[Binner]:
        return [DATE_YEAR_BINNER, DATE_QUARTER_BINNER, DATE_MONTH_BINNER]
