"""
Tests for statistics.grouping module.
"""
from __future__ import annotations

from dive_stats.statistics.grouping import OrderedBins, count_bins, member_bins


class TestOrderedBins:
    """Tests for the ordered insert-or-merge primitive."""

    def test_keys_stay_sorted_and_unique(self):
        bins = count_bins()
        for key in [5, 1, 3, 1, 9, 3, 3, 0]:
            bins.add(key, 1)

        assert bins.items() == [(0, 1), (1, 2), (3, 3), (5, 1), (9, 1)]
        assert len(bins) == 5

    def test_member_bins_append_in_input_order(self):
        bins = member_bins()
        bins.add("b", "first")
        bins.add("a", "second")
        bins.add("b", "third")

        assert bins.items() == [("a", ["second"]), ("b", ["first", "third"])]

    def test_count_bins_add_contributions(self):
        bins = count_bins()
        bins.add((2021, 1), 2)
        bins.add((2021, 1), 3)

        assert bins.items() == [((2021, 1), 5)]

    def test_empty(self):
        assert member_bins().items() == []
        assert len(count_bins()) == 0

    def test_custom_payload(self):
        """Test that start and merge define the payload."""
        bins = OrderedBins(start=lambda x: {x}, merge=lambda s, x: s | {x})
        bins.add(1, "a")
        bins.add(1, "a")
        bins.add(1, "b")

        assert bins.items() == [(1, {"a", "b"})]
