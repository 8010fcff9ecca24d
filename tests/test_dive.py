import pytest
from datetime import datetime, timezone, timedelta

from dive_stats import Dive, DiveMode
from dive_stats.dive import DIVE_MODE_LABELS, NUM_DIVEMODE


def test_utc_datetime():
    """Test that the dive start is interpreted as UTC."""
    dive = Dive(when=1609459200)  # 2021-01-01 00:00:00 UTC
    assert dive.utc_datetime == datetime(2021, 1, 1, tzinfo=timezone.utc)


def test_defaults():
    dive = Dive(when=0)
    assert dive.maxdepth_mm == 0
    assert dive.buddy == ""
    assert dive.divemaster == ""
    assert dive.divemode == DiveMode.OC


def test_identity_equality():
    """Test that dives with equal data are still distinct dives."""
    a = Dive(when=100, maxdepth_mm=5000)
    b = Dive(when=100, maxdepth_mm=5000)
    assert a != b
    assert a == a
    assert len({a, b}) == 2


def test_immutable():
    dive = Dive(when=0)
    with pytest.raises(AttributeError):
        dive.buddy = "Alice"


@pytest.mark.parametrize(
    "data,expected_when",
    [
        ({'when': 1609459200}, 1609459200),
        ({'when': datetime(2021, 1, 1)}, 1609459200),
        ({'when': datetime(2021, 1, 1, 1, tzinfo=timezone(timedelta(hours=1)))}, 1609459200),
    ],
)
def test_from_dict_when(data, expected_when):
    assert Dive.from_dict(data).when == expected_when


def test_from_dict_fields():
    dive = Dive.from_dict({
        'when': 0,
        'maxdepth_mm': '18500',
        'buddy': 'Alice, Bob',
        'divemaster': None,
        'divemode': 1,
        'number': 42,
    })
    assert dive.maxdepth_mm == 18500
    assert dive.buddy == 'Alice, Bob'
    assert dive.divemaster == ''
    assert dive.divemode == DiveMode.CCR
    assert dive.number == 42
    assert '#42' in repr(dive)


def test_dive_mode_labels():
    assert NUM_DIVEMODE == 4
    assert set(DIVE_MODE_LABELS) == set(DiveMode)
    assert DiveMode.FREEDIVE.label == "Freedive"


@pytest.mark.parametrize("when", [10 ** 12, -10 ** 12, 2 ** 63 - 1])
def test_from_dict_when_out_of_range(when):
    """Test that times beyond datetime's years are rejected up front."""
    with pytest.raises(ValueError):
        Dive.from_dict({'when': when})


def test_from_dict_when_far_future():
    dive = Dive.from_dict({'when': 253402300799})  # 9999-12-31 23:59:59 UTC
    assert dive.utc_datetime.year == 9999
