"""
Tests for statistics.binners module.
"""
from __future__ import annotations

from dive_stats.statistics.binners import DEFAULT_BINNER_NAME, MultiValueBinner, SingleValueBinner
from dive_stats.statistics.bins import DateYearBin, StringBin
from dive_stats.statistics.model import BinWithCount, BinWithMembers


def by_number(dive):
    return dive.number % 3


def letters(dive):
    return list(dive.buddy)


class TestSingleValueBinner:
    """Tests for the single-valued binner."""

    def test_group_with_members(self, make_dive):
        dives = [make_dive(number=n) for n in range(1, 8)]
        binner = SingleValueBinner(DateYearBin, by_number)

        result = binner.group_with_members(dives)

        assert [b.bin.value for b in result] == [0, 1, 2]
        assert all(isinstance(b, BinWithMembers) for b in result)
        assert [d.number for d in result[1].dives] == [1, 4, 7]
        assert result[0].count == 2

    def test_members_are_references(self, make_dive):
        dive = make_dive(number=3)
        result = SingleValueBinner(DateYearBin, by_number).group_with_members([dive])

        assert result[0].dives[0] is dive

    def test_group_with_counts(self, make_dive):
        dives = [make_dive(number=n) for n in range(1, 8)]
        result = SingleValueBinner(DateYearBin, by_number).group_with_counts(dives)

        assert all(isinstance(b, BinWithCount) for b in result)
        assert [(b.bin.value, b.count) for b in result] == [(0, 2), (1, 3), (2, 2)]

    def test_accepts_generator(self, make_dive):
        dives = (make_dive(number=n) for n in range(3))
        result = SingleValueBinner(DateYearBin, by_number).group_with_counts(dives)

        assert sum(b.count for b in result) == 3

    def test_empty(self):
        binner = SingleValueBinner(DateYearBin, by_number)

        assert binner.group_with_members([]) == []
        assert binner.group_with_counts([]) == []


class TestMultiValueBinner:
    """Tests for the multi-valued binner."""

    def test_dive_in_several_bins(self, make_dive):
        dive = make_dive(buddy="ba")
        result = MultiValueBinner(StringBin, letters).group_with_members([dive])

        assert [b.bin.value for b in result] == ["a", "b"]
        assert result[0].dives == [dive]
        assert result[1].dives == [dive]

    def test_dive_without_keys(self, make_dive):
        result = MultiValueBinner(StringBin, letters).group_with_counts([make_dive(buddy="")])

        assert result == []

    def test_repeated_key_counts_repeatedly(self, make_dive):
        dive = make_dive(buddy="aa")
        binner = MultiValueBinner(StringBin, letters)

        members = binner.group_with_members([dive])
        counts = binner.group_with_counts([dive])

        assert members[0].dives == [dive, dive]
        assert counts[0].count == 2


class TestBinnerName:
    """Tests for binner display names."""

    def test_default_name(self):
        assert SingleValueBinner(DateYearBin, by_number).name == DEFAULT_BINNER_NAME

    def test_name_with_arguments(self):
        binner = SingleValueBinner(DateYearBin, by_number, "in {size} {unit} steps", size=10, unit="m")

        assert binner.name == "in 10 m steps"
        assert "in 10 m steps" in repr(binner)
