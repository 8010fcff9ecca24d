"""
The set of statistics categories available to the application.
"""
from __future__ import annotations

from functools import lru_cache
import logging
from typing import Iterator, Optional, Sequence, Tuple

from dive_stats.statistics.base import StatsType, get_stats_type_registry
from dive_stats.statistics.config import DEFAULT_CONFIG_PATH, StatsConfig

logger = logging.getLogger(__name__)


class StatsRegistry:
    """
    Ordered, immutable collection of categories.

    Build one at startup with from_config() and hand it to whatever needs to
    enumerate statistics.
    """

    def __init__(self, stats_types: Sequence[StatsType]) -> None:
        self._types: Tuple[StatsType, ...] = tuple(stats_types)

    @classmethod
    def from_config(cls, config: Optional[StatsConfig] = None) -> StatsRegistry:
        """
        Instantiate every registered category that the config enables.

        Categories appear in registration order.
        """
        # Registering happens on import of the built-in categories
        from dive_stats.statistics import categories  # noqa: F401

        config = config or StatsConfig()
        stats_types = []
        for type_id, stats_type_cls in get_stats_type_registry().items():
            if not config.is_enabled(type_id):
                logger.debug(f"Skipping disabled statistics type: {type_id}")
                continue
            stats_types.append(stats_type_cls(config=config))
        logger.debug(f"Statistics registry: {[t.type_id for t in stats_types]}")
        return cls(stats_types)

    def list_categories(self) -> Tuple[StatsType, ...]:
        return self._types

    def get(self, type_id: str) -> StatsType:
        """
        Get a category by its identifier.

        Raises:
            KeyError: If no category has this identifier.
        """
        for stats_type in self._types:
            if stats_type.type_id == type_id:
                return stats_type
        raise KeyError(type_id)

    def __getitem__(self, idx: int) -> StatsType:
        return self._types[idx]

    def __iter__(self) -> Iterator[StatsType]:
        return iter(self._types)

    def __len__(self) -> int:
        return len(self._types)


@lru_cache(maxsize=None)
def default_registry() -> StatsRegistry:
    """The registry built from the packaged default configuration, created on first use."""
    return StatsRegistry.from_config(StatsConfig(config_file=DEFAULT_CONFIG_PATH))


def list_categories(registry: Optional[StatsRegistry] = None) -> Tuple[StatsType, ...]:
    if registry is None:
        registry = default_registry()
    return registry.list_categories()
