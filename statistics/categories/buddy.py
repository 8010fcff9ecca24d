"""
Dive buddies, including dive guides.

A dive lists any number of people, so a dive may land in several bins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from dive_stats.dive import Dive
from dive_stats.translations import tr
from dive_stats.statistics.base import StatsType, register_stats_type
from dive_stats.statistics.binners import Binner, MultiValueBinner
from dive_stats.statistics.bins import StringBin


def split_names(text: str) -> List[str]:
    """Split a comma separated list of names, dropping blank entries."""
    if not text:
        return []
    return [name.strip() for name in text.split(',') if name.strip()]


def dive_people(dive: Dive) -> List[str]:
    """
    Buddies followed by dive guides of a dive.

    Names are not deduplicated: a name given twice is binned twice.
    """
    return split_names(dive.buddy) + split_names(dive.divemaster)


BUDDY_BINNER = MultiValueBinner(StringBin, dive_people)


@register_stats_type
@dataclass(repr=False)
class BuddyType(StatsType):
    type_id: str = "buddy"

    @property
    def name(self) -> str:
        return tr("Buddies")

    def binners(self) -> List[Binner]:
        return [BUDDY_BINNER]
