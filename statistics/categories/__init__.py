"""
Built-in statistics categories.

Import categories here to automatically register them. Registration order is
the order in which categories are listed.
"""

from dive_stats.statistics.categories.date import DateType
from dive_stats.statistics.categories.depth import DepthType
from dive_stats.statistics.categories.dive_mode import DiveModeType
from dive_stats.statistics.categories.buddy import BuddyType

__all__ = [
    'DateType',
    'DepthType',
    'DiveModeType',
    'BuddyType',
]
