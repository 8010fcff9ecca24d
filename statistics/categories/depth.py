"""
Maximum dive depth, binned in fixed size steps of meters or feet.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from typing import Dict, List

from dive_stats.dive import Dive
from dive_stats.translations import tr
from dive_stats.units import LengthUnit, mm_to_feet
from dive_stats.statistics.base import StatsKind, StatsType, register_stats_type
from dive_stats.statistics.binners import Binner, SingleValueBinner
from dive_stats.statistics.bins import DepthBin


def _div_toward_zero(a: int, b: int) -> int:
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def meter_bin_value(dive: Dive, bin_size: int) -> int:
    """Range index of the dive in meters; shallow negative depths land in range 0."""
    return _div_toward_zero(_div_toward_zero(dive.maxdepth_mm, 1000), bin_size)


def feet_bin_value(dive: Dive, bin_size: int) -> int:
    # Rounded to whole feet before binning
    return _div_toward_zero(int(round(mm_to_feet(dive.maxdepth_mm))), bin_size)


_BIN_VALUE = {
    LengthUnit.METERS: meter_bin_value,
    LengthUnit.FEET: feet_bin_value,
}


def depth_binner(bin_size: int, unit: LengthUnit) -> SingleValueBinner:
    """Binner for depth ranges of bin_size in the given unit."""
    return SingleValueBinner(
        partial(DepthBin, bin_size=bin_size, unit=unit),
        partial(_BIN_VALUE[unit], bin_size=bin_size),
        "in {size} {unit} steps",
        size=bin_size,
        unit=unit.symbol,
    )


@register_stats_type
@dataclass(repr=False)
class DepthType(StatsType):
    """
    Maximum depth of the dive.

    Both metric and imperial binners are built once from the configured step
    sizes; which set is offered follows the configured length unit at the
    time binners() is called.
    """
    type_id: str = "depth"
    _binners: Dict[LengthUnit, List[Binner]] = field(init=False, default_factory=dict)

    kind = StatsKind.NUMERIC

    def __post_init__(self):
        super().__post_init__()
        self._binners = {
            LengthUnit.METERS: [depth_binner(size, LengthUnit.METERS) for size in self.config.metric_depth_steps],
            LengthUnit.FEET: [depth_binner(size, LengthUnit.FEET) for size in self.config.imperial_depth_steps],
        }

    @property
    def name(self) -> str:
        return tr("Depth")

    def binners(self) -> List[Binner]:
        return list(self._binners[self.config.length_unit])
