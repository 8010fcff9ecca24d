"""
Example: Binning a dive log with the DiveStatistics convenience wrapper.

This example shows how to list the available statistics, pick a binner
and print counts or bin members.
"""

from datetime import datetime, timezone

from dive_stats import Dive, DiveMode, DiveStatistics


def utc(year, month, day):
    return int(datetime(year, month, day, tzinfo=timezone.utc).timestamp())


def sample_dives():
    return [
        Dive(when=utc(2022, 4, 2), maxdepth_mm=12300, buddy='Alice', number=1),
        Dive(when=utc(2022, 4, 3), maxdepth_mm=21800, buddy='Alice, Bob', number=2),
        Dive(when=utc(2022, 9, 17), maxdepth_mm=38100, divemaster='Carol', divemode=DiveMode.CCR, number=3),
        Dive(when=utc(2023, 1, 8), maxdepth_mm=6400, buddy='Bob', divemode=DiveMode.FREEDIVE, number=4),
    ]


def example_basic_usage():
    """List categories and print counts for each binner."""
    stats = DiveStatistics(dives=sample_dives())

    for stats_type in stats.categories():
        binners = stats_type.binners()
        print(f"=== {stats_type.name} ===")
        for idx, binner in enumerate(binners):
            # Binner names are only meaningful when there is a choice
            if len(binners) > 1:
                print(f"-- {binner.name}")
            for b in stats.group_with_counts(stats_type, idx):
                print(f"  {b.bin.format():>15}: {b.count}")


def example_members():
    """Show which dives were done with which buddy."""
    stats = DiveStatistics(dives=sample_dives())

    print("\n=== Dives per buddy ===")
    for b in stats.group_with_members('buddy'):
        numbers = ', '.join(f"#{dive.number}" for dive in b.dives)
        print(f"{b.bin.format()}: {numbers}")


def example_imperial():
    """Depth bins follow the configured length unit."""
    stats = DiveStatistics(dives=sample_dives(), config_dict={'units': {'length': 'feet'}})

    print("\n=== Depth in 30 ft steps ===")
    for b in stats.group_with_counts('depth', binner_index=1):
        print(f"{b.bin.format()}: {b.count}")


if __name__ == '__main__':
    example_basic_usage()
    example_members()
    example_imperial()
