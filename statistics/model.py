"""
Data models for statistics results.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from dive_stats.dive import Dive
from dive_stats.statistics.bins import StatsBin


@dataclass
class BinWithMembers:
    """
    A bin together with the dives that fell into it.

    The dives are references to the caller's records, not copies.
    """
    bin: StatsBin
    dives: List[Dive] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.dives)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {'label': self.bin.format(), 'count': self.count}


@dataclass
class BinWithCount:
    """A bin together with the number of dives that fell into it."""
    bin: StatsBin
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dictionary."""
        return {'label': self.bin.format(), 'count': self.count}
