"""
units.py - Length units used when presenting dive depths.

Depths are stored in millimetres; presentation converts to the unit system the
user prefers.
"""
from __future__ import annotations

from enum import Enum

MM_PER_FOOT = 304.8


class LengthUnit(str, Enum):
    """Preferred unit system for lengths."""
    METERS = "meters"
    FEET = "feet"

    @property
    def symbol(self) -> str:
        return "m" if self is LengthUnit.METERS else "ft"

    @classmethod
    def parse(cls, value) -> LengthUnit:
        """
        Parse a length unit from a config value.

        Accepts the enum itself, its value ('meters', 'feet') or the short
        symbols 'm' and 'ft', case-insensitively.

        Raises:
            ValueError: If the value names no known unit.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for unit in cls:
            if text in (unit.value, unit.symbol):
                return unit
        raise ValueError(f"Unknown length unit: {value!r}")


def mm_to_feet(mm: int) -> float:
    return mm / MM_PER_FOOT


def feet_to_mm(feet: float) -> int:
    return int(round(feet * MM_PER_FOOT))
