"""
dive.py - Minimal dive record consumed by the statistics engine.

The engine only reads a handful of fields from each dive, so this record keeps
to those: when the dive happened, how deep it went, who was there and which
breathing mode was used.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Dict


class DiveMode(IntEnum):
    """Breathing apparatus used on a dive."""
    OC = 0
    CCR = 1
    PSCR = 2
    FREEDIVE = 3

    @property
    def label(self) -> str:
        return DIVE_MODE_LABELS[self]


NUM_DIVEMODE = len(DiveMode)

DIVE_MODE_LABELS = {
    DiveMode.OC: "Open circuit",
    DiveMode.CCR: "CCR",
    DiveMode.PSCR: "pSCR",
    DiveMode.FREEDIVE: "Freedive",
}


@dataclass(frozen=True, eq=False)
class Dive:
    """
    A single logged dive.

    Dives compare by identity: two dives with identical data are still two
    dives, which is what bin membership relies on.

    Attributes:
        when: Start of the dive in seconds since the epoch (UTC).
        maxdepth_mm: Maximum depth in millimetres.
        buddy: Comma separated buddy names as entered by the user.
        divemaster: Comma separated dive guide names.
        divemode: Dive mode index; may be out of range for corrupt logs.
        number: Dive number in the log, informational only.
    """
    when: int
    maxdepth_mm: int = 0
    buddy: str = ""
    divemaster: str = ""
    divemode: int = DiveMode.OC
    number: int = 0

    @property
    def utc_datetime(self) -> datetime:
        """
        Start of the dive as an aware UTC datetime.

        Only timestamps within datetime's range (years 1 to 9999) convert;
        from_dict() rejects others.
        """
        return datetime.fromtimestamp(self.when, tz=timezone.utc)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Dive:
        """
        Create a dive from a plain dictionary.

        'when' may be given as epoch seconds or as an aware/naive datetime;
        naive datetimes are taken to be UTC.

        Raises:
            ValueError: If 'when' lies outside the years 1 to 9999.
        """
        when = data.get('when', 0)
        if isinstance(when, datetime):
            if when.tzinfo is None:
                when = when.replace(tzinfo=timezone.utc)
            when = int(when.timestamp())
        when = int(when)
        try:
            datetime.fromtimestamp(when, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Dive time {when} is out of range: {e}") from e
        return cls(
            when=when,
            maxdepth_mm=int(data.get('maxdepth_mm', 0) or 0),
            buddy=data.get('buddy') or "",
            divemaster=data.get('divemaster') or "",
            divemode=int(data.get('divemode', DiveMode.OC)),
            number=int(data.get('number', 0) or 0),
        )

    def __repr__(self) -> str:
        return f"Dive(#{self.number}, when={self.when}, maxdepth_mm={self.maxdepth_mm})"
