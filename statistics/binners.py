"""
Binners: strategies that partition a dive list into bins.

Two generic families cover every statistic:
    - SingleValueBinner: each dive yields exactly one key.
    - MultiValueBinner: each dive yields zero or more keys.

Both feed keys through the same ordered grouping primitive, then wrap each key
in its bin type.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Callable, Generic, Iterable, List, Optional, Sequence, TypeVar

from dive_stats.dive import Dive
from dive_stats.translations import tr
from dive_stats.statistics.bins import StatsBin
from dive_stats.statistics.grouping import OrderedBins, count_bins, member_bins
from dive_stats.statistics.model import BinWithCount, BinWithMembers

logger = logging.getLogger(__name__)

K = TypeVar('K')

DEFAULT_BINNER_NAME = "N/D"


class Binner(ABC):
    """
    Base class for binners.

    Binners are stateless and may be shared freely. The name is only shown
    when a category offers more than one binner.
    """

    @property
    def name(self) -> str:
        return DEFAULT_BINNER_NAME

    @abstractmethod
    def group_with_members(self, dives: Iterable[Dive]) -> List[BinWithMembers]:
        """
        Group dives into bins, keeping the dives of each bin.

        Args:
            dives: Dives to group. Not modified or retained.

        Returns:
            Bins in ascending order, one per distinct key.
        """

    @abstractmethod
    def group_with_counts(self, dives: Iterable[Dive]) -> List[BinWithCount]:
        """
        Group dives into bins, keeping only the number of dives per bin.

        Returns:
            Bins in ascending order, one per distinct key.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class KeyBinner(Binner, Generic[K]):
    """
    Common part of the generic binners.

    Subclasses provide keys(), yielding the keys of one dive.

    Args:
        bin_factory: Turns a key into its bin.
        name: Untranslated display name, translated on access.
    """

    def __init__(self, bin_factory: Callable[[K], StatsBin], name: Optional[str] = None, **name_args) -> None:
        self.bin_factory = bin_factory
        self._name = name
        self._name_args = name_args

    @property
    def name(self) -> str:
        if self._name is None:
            return super().name
        return tr(self._name, **self._name_args)

    @abstractmethod
    def keys(self, dive: Dive) -> Sequence[K]:
        """Keys under which this dive is binned."""

    def _accumulate(self, dives: Iterable[Dive], bins: OrderedBins, contribution: Callable[[Dive], object]) -> OrderedBins:
        total = 0
        for dive in dives:
            total += 1
            for key in self.keys(dive):
                bins.add(key, contribution(dive))
        logger.debug(f"{self!r}: binned {total} dives into {len(bins)} bins")
        return bins

    def group_with_members(self, dives: Iterable[Dive]) -> List[BinWithMembers]:
        bins = self._accumulate(dives, member_bins(), lambda dive: dive)
        return [BinWithMembers(bin=self.bin_factory(key), dives=members) for key, members in bins.items()]

    def group_with_counts(self, dives: Iterable[Dive]) -> List[BinWithCount]:
        bins = self._accumulate(dives, count_bins(), lambda dive: 1)
        return [BinWithCount(bin=self.bin_factory(key), count=count) for key, count in bins.items()]


class SingleValueBinner(KeyBinner[K]):
    """
    Binner for statistics where every dive has exactly one key.

    Args:
        bin_factory: Turns a key into its bin.
        to_bin_value: Extracts the key of a dive.
        name: Untranslated display name.
    """

    def __init__(self, bin_factory: Callable[[K], StatsBin], to_bin_value: Callable[[Dive], K],
                 name: Optional[str] = None, **name_args) -> None:
        super().__init__(bin_factory, name, **name_args)
        self.to_bin_value = to_bin_value

    def keys(self, dive: Dive) -> Sequence[K]:
        return (self.to_bin_value(dive),)


class MultiValueBinner(KeyBinner[K]):
    """
    Binner for statistics where a dive may have any number of keys.

    A dive is added once per extracted key; repeated keys of one dive are
    counted repeatedly.
    """

    def __init__(self, bin_factory: Callable[[K], StatsBin], to_bin_values: Callable[[Dive], Sequence[K]],
                 name: Optional[str] = None, **name_args) -> None:
        super().__init__(bin_factory, name, **name_args)
        self.to_bin_values = to_bin_values

    def keys(self, dive: Dive) -> Sequence[K]:
        return self.to_bin_values(dive)
