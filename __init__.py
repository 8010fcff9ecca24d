"""dive_stats package: Groups dive log records into ordered bins for statistics."""

from dive_stats.dive import Dive, DiveMode
from dive_stats.translations import install_translations, tr
from dive_stats.units import LengthUnit
from dive_stats.statistics import DiveStatistics, StatsConfig, StatsRegistry, list_categories

__all__ = [
    "Dive",
    "DiveMode",
    "DiveStatistics",
    "LengthUnit",
    "StatsConfig",
    "StatsRegistry",
    "install_translations",
    "list_categories",
    "tr",
]
