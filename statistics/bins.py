"""
Bin types produced by the statistics binners.

A bin is an immutable key value that knows how to describe itself. Every
statistic granularity has its own bin variant; bins are only ordered against
bins of the same variant.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Tuple, TypeVar

from dive_stats.dive import DiveMode
from dive_stats.translations import tr
from dive_stats.units import LengthUnit

K = TypeVar('K')

_MONTH_ABBR = {
    1: "Jan", 2: "Feb", 3: "Mar", 4: "Apr", 5: "May", 6: "Jun",
    7: "Jul", 8: "Aug", 9: "Sep", 10: "Oct", 11: "Nov", 12: "Dec",
}


class BinVariantError(TypeError):
    """Raised when bins of different variants are compared."""


@dataclass(frozen=True, eq=False)
class StatsBin(ABC, Generic[K]):
    """
    Base class for all bins.

    Subclasses implement format(). Subclasses whose meaning depends on
    parameters other than the class (e.g. the step of a depth bin) extend
    variant() so that such bins refuse to compare with each other.
    """
    value: K

    @abstractmethod
    def format(self) -> str:
        """Human readable, translated label of this bin."""

    def variant(self) -> Hashable:
        return type(self)

    def _check_variant(self, other: StatsBin) -> None:
        if not isinstance(other, StatsBin) or other.variant() != self.variant():
            raise BinVariantError(
                f"Cannot compare {self.__class__.__name__} with {other.__class__.__name__}"
            )

    def compare(self, other: StatsBin) -> int:
        """
        Compare with a bin of the same variant.

        Returns:
            -1, 0 or 1 if this bin sorts before, equal to or after other.

        Raises:
            BinVariantError: If other is a different variant.
        """
        self._check_variant(other)
        if self.value < other.value:
            return -1
        if other.value < self.value:
            return 1
        return 0

    def equals(self, other: StatsBin) -> bool:
        self._check_variant(other)
        return self.value == other.value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, StatsBin):
            return NotImplemented
        return self.equals(other)

    def __lt__(self, other: StatsBin) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: StatsBin) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: StatsBin) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: StatsBin) -> bool:
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash((self.variant(), self.value))

    def __str__(self) -> str:
        return self.format()


@dataclass(frozen=True, eq=False)
class StringBin(StatsBin[str]):
    """A bin whose label is simply its value."""

    def format(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class DateYearBin(StatsBin[int]):

    def format(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=False)
class DateQuarterBin(StatsBin[Tuple[int, int]]):
    """Value is (year, quarter) with quarter in 1..4."""

    def format(self) -> str:
        year, quarter = self.value
        return tr("{year} Q{quarter}", year=year, quarter=quarter)


@dataclass(frozen=True, eq=False)
class DateMonthBin(StatsBin[Tuple[int, int]]):
    """Value is (year, month) with month in 1..12."""

    def format(self) -> str:
        year, month = self.value
        return tr("{month} {year}", month=tr(_MONTH_ABBR[month]), year=year)


@dataclass(frozen=True, eq=False)
class DepthBin(StatsBin[int]):
    """
    A depth range [value * bin_size, (value + 1) * bin_size) in the given unit.

    Bins with a different step or unit are different variants.
    """
    bin_size: int = 1
    unit: LengthUnit = LengthUnit.METERS

    def variant(self) -> Hashable:
        return (type(self), self.bin_size, self.unit)

    def format(self) -> str:
        return tr(
            "{low}–{high} {unit}",
            low=self.value * self.bin_size,
            high=(self.value + 1) * self.bin_size,
            unit=self.unit.symbol,
        )


@dataclass(frozen=True, eq=False)
class DiveModeBin(StatsBin[DiveMode]):

    def format(self) -> str:
        return tr(DiveMode(self.value).label)
