"""
Statistics module for dive log analysis.

This module groups dives into ordered bins for a chosen statistic, either
keeping the dives of each bin or just counting them.

Main components:
    - StatsType: Base class for statistics categories, offering binners
    - Binner: Strategy grouping dives into bins
    - StatsRegistry: The categories available to the application
    - DiveStatistics: Convenience wrapper binning one dive log
    - Built-in categories: date, depth, dive mode and buddies
"""

from dive_stats.statistics.base import StatsKind, StatsType, register_stats_type, get_stats_type_registry
from dive_stats.statistics.binners import Binner, MultiValueBinner, SingleValueBinner
from dive_stats.statistics.bins import (
    BinVariantError,
    DateMonthBin,
    DateQuarterBin,
    DateYearBin,
    DepthBin,
    DiveModeBin,
    StatsBin,
    StringBin,
)
from dive_stats.statistics.config import StatsConfig
from dive_stats.statistics.model import BinWithCount, BinWithMembers
from dive_stats.statistics.registry import StatsRegistry, default_registry, list_categories
from dive_stats.statistics.statistics import DiveStatistics

# Import categories to ensure they're registered
from dive_stats.statistics import categories

__all__ = [
    'StatsKind',
    'StatsType',
    'register_stats_type',
    'get_stats_type_registry',
    'Binner',
    'SingleValueBinner',
    'MultiValueBinner',
    'StatsBin',
    'BinVariantError',
    'StringBin',
    'DateYearBin',
    'DateQuarterBin',
    'DateMonthBin',
    'DepthBin',
    'DiveModeBin',
    'StatsConfig',
    'BinWithMembers',
    'BinWithCount',
    'StatsRegistry',
    'default_registry',
    'list_categories',
    'DiveStatistics',
    'categories',
]
