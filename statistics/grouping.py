"""
Order preserving insert-or-merge accumulation of keyed bins.

Bins are kept in a list sorted by key rather than a dict: the number of
distinct keys a statistic produces is small, and the result comes out already
ordered without a separate sort pass.
"""
from __future__ import annotations

from bisect import bisect_left
import operator
from typing import Callable, Generic, List, Tuple, TypeVar

K = TypeVar('K')
P = TypeVar('P')
C = TypeVar('C')


class OrderedBins(Generic[K, P, C]):
    """
    A sequence of (key, payload) pairs, ascending by key with unique keys.

    Attributes:
        start: Builds the payload of a new bin from its first contribution.
        merge: Folds a further contribution into an existing payload and
            returns the new payload.
    """

    def __init__(self, start: Callable[[C], P], merge: Callable[[P, C], P]) -> None:
        self.start = start
        self.merge = merge
        self._keys: List[K] = []
        self._payloads: List[P] = []

    def add(self, key: K, contribution: C) -> None:
        """Merge contribution into the bin for key, creating the bin if needed."""
        idx = bisect_left(self._keys, key)
        if idx < len(self._keys) and self._keys[idx] == key:
            self._payloads[idx] = self.merge(self._payloads[idx], contribution)
        else:
            self._keys.insert(idx, key)
            self._payloads.insert(idx, self.start(contribution))

    def items(self) -> List[Tuple[K, P]]:
        return list(zip(self._keys, self._payloads))

    def __len__(self) -> int:
        return len(self._keys)


def _append(members: list, item) -> list:
    members.append(item)
    return members


def member_bins() -> OrderedBins:
    """Bins whose payload is the list of items added under each key."""
    return OrderedBins(start=lambda item: [item], merge=_append)


def count_bins() -> OrderedBins:
    """Bins whose payload is the sum of the counts added under each key."""
    return OrderedBins(start=lambda n: n, merge=operator.add)
