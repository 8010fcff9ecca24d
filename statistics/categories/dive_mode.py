"""
Dive mode (open circuit, rebreathers, freediving).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from dive_stats.dive import NUM_DIVEMODE, Dive, DiveMode
from dive_stats.translations import tr
from dive_stats.statistics.base import StatsType, register_stats_type
from dive_stats.statistics.binners import Binner, SingleValueBinner
from dive_stats.statistics.bins import DiveModeBin


def dive_mode(dive: Dive) -> DiveMode:
    """Dive mode of a dive; unknown modes count as open circuit."""
    mode = int(dive.divemode)
    return DiveMode(mode) if 0 <= mode < NUM_DIVEMODE else DiveMode.OC


DIVE_MODE_BINNER = SingleValueBinner(DiveModeBin, dive_mode)


@register_stats_type
@dataclass(repr=False)
class DiveModeType(StatsType):
    type_id: str = "dive_mode"

    @property
    def name(self) -> str:
        return tr("Dive mode")

    def binners(self) -> List[Binner]:
        return [DIVE_MODE_BINNER]
