from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from dive_stats.dive import Dive
from .base import StatsType
from .binners import Binner
from .config import StatsConfig
from .model import BinWithCount, BinWithMembers
from .registry import StatsRegistry

logger = logging.getLogger(__name__)

CategoryRef = Union[int, str, StatsType]


class DiveStatistics:
    """
    High-level interface for binning a dive log.

    This is a convenience wrapper around a StatsRegistry that keeps the dive
    list and resolves categories and binners for the caller.

    Example:
        stats = DiveStatistics(dives=dives, config_file=Path("stats.yaml"))
        for b in stats.group_with_counts("depth", binner_index=1):
            print(b.bin.format(), b.count)
    """

    def __init__(
        self,
        dives: Optional[Iterable[Dive]] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
        registry: Optional[StatsRegistry] = None,
    ) -> None:
        """
        Initialize statistics.

        Args:
            dives: Dives to analyze; kept as a list snapshot
            config_dict: Dictionary to configure statistics (layout of the 'statistics' YAML section)
            config_file: Path to YAML config file
            registry: Prebuilt registry; config arguments are ignored when given
        """
        self.dives: List[Dive] = list(dives) if dives is not None else []
        if not self.dives:
            logger.warning("No dives provided to DiveStatistics")

        if registry is not None:
            self.registry = registry
            self.config = None
        else:
            if config_dict:
                self.config = StatsConfig.from_dict(config_dict)
            elif config_file:
                self.config = StatsConfig(config_file=config_file)
            else:
                self.config = StatsConfig()
            self.registry = StatsRegistry.from_config(self.config)

    def categories(self) -> List[StatsType]:
        return list(self.registry.list_categories())

    def category(self, ref: CategoryRef) -> StatsType:
        """
        Resolve a category by position, identifier or instance.

        Raises:
            KeyError: If no category matches.
        """
        if isinstance(ref, StatsType):
            return ref
        if isinstance(ref, bool):
            raise KeyError(ref)
        if isinstance(ref, int):
            if ref < 0:
                raise KeyError(ref)
            try:
                return self.registry[ref]
            except IndexError:
                raise KeyError(ref) from None
        return self.registry.get(ref)

    def binner(self, category: CategoryRef, binner_index: int = 0) -> Binner:
        stats_type = self.category(category)
        binner = stats_type.get_binner(binner_index)
        if binner is None:
            raise KeyError(f"Statistics type {stats_type.type_id} offers no binners")
        return binner

    def group_with_members(self, category: CategoryRef, binner_index: int = 0) -> List[BinWithMembers]:
        """
        Bin the dives of this log, keeping the dives of each bin.

        Args:
            category: Category index, type_id or instance
            binner_index: Index into the category's binners; out of range uses the first

        Returns:
            Bins in ascending order
        """
        binner = self.binner(category, binner_index)
        logger.info(f"Binning {len(self.dives)} dives with {binner!r}")
        return binner.group_with_members(self.dives)

    def group_with_counts(self, category: CategoryRef, binner_index: int = 0) -> List[BinWithCount]:
        """Bin the dives of this log, keeping only the count per bin."""
        binner = self.binner(category, binner_index)
        logger.info(f"Counting {len(self.dives)} dives with {binner!r}")
        return binner.group_with_counts(self.dives)

    def to_dict(self) -> Dict[str, Dict[str, List[Dict[str, Any]]]]:
        """
        Export counts for every category and binner as plain data.

        Returns:
            Dictionary of type_id -> binner name -> list of {'label', 'count'}
        """
        result: Dict[str, Dict[str, List[Dict[str, Any]]]] = {}
        for stats_type in self.registry:
            per_binner = {}
            for binner in stats_type.binners():
                per_binner[binner.name] = [b.to_dict() for b in binner.group_with_counts(self.dives)]
            result[stats_type.type_id] = per_binner
        return result
