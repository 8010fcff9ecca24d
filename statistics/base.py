"""
Base classes for statistics categories.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import ClassVar, Dict, List, Optional, Type

from dive_stats.statistics.binners import Binner
from dive_stats.statistics.config import StatsConfig

logger = logging.getLogger(__name__)

# Category Registry, in registration order
_STATS_TYPE_REGISTRY: Dict[str, Type['StatsType']] = {}


class StatsKind(Enum):
    """
    How the values of a category relate to each other.

    DISCRETE values can only be listed (dive mode, buddy). CONTINUOUS values
    have a linear distance and can be plotted on a linear axis. NUMERIC values
    are continuous values that also support averaging (depth).
    """
    DISCRETE = "discrete"
    CONTINUOUS = "continuous"
    NUMERIC = "numeric"


def register_stats_type(cls: Type['StatsType']) -> Type['StatsType']:
    """
    Decorator to register a category class in the global registry.

    Usage:
        @register_stats_type
        @dataclass
        class MyType(StatsType):
            type_id: str = "my_type"
            ...
    """
    type_id = getattr(cls, 'type_id', None)
    if type_id:
        _STATS_TYPE_REGISTRY[type_id] = cls
        logger.debug(f"Registered statistics type: {type_id}")
    else:
        logger.warning(f"Statistics type {cls.__name__} missing 'type_id' attribute, not registered")
    return cls


def get_stats_type_registry() -> Dict[str, Type['StatsType']]:
    """Get the global category registry."""
    return _STATS_TYPE_REGISTRY.copy()


@dataclass
class StatsType(ABC):
    """
    Base class for statistics categories.

    A category names a statistic and offers one or more binners for it,
    e.g. dive date by year, quarter or month.

    Attributes:
        type_id: Unique identifier for this category
        config: Configuration consulted when binners are requested
    """
    type_id: str = ""
    config: StatsConfig = field(default_factory=StatsConfig)

    kind: ClassVar[StatsKind] = StatsKind.DISCRETE

    def __post_init__(self):
        """Validate category configuration."""
        if not self.type_id:
            raise ValueError(f"{self.__class__.__name__} must define type_id")

    @property
    @abstractmethod
    def name(self) -> str:
        """Translated display name."""

    @abstractmethod
    def binners(self) -> List[Binner]:
        """
        Binners offered for this category, in display order.

        The list may depend on the current configuration.
        """

    def binner_names(self) -> List[str]:
        return [binner.name for binner in self.binners()]

    def get_binner(self, idx: int) -> Optional[Binner]:
        """
        Get a binner by index.

        Out of range indices return the first binner.

        Returns:
            The binner, or None if the category offers no binners at all.
        """
        binners = self.binners()
        if not binners:
            return None
        if 0 <= idx < len(binners):
            return binners[idx]
        logger.debug(f"Binner index {idx} out of range for {self.type_id}, using first binner")
        return binners[0]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(type_id={self.type_id!r})"
