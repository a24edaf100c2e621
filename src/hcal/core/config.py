# src/hcal/core/config.py
from __future__ import annotations

from typing import FrozenSet, Literal

# Julian Day of 1 Muharram 1 AH (16 July 622, Julian calendar)
ISLAMIC_EPOCH: float = 1948439.5

# Julian Day of 1 January 1 (proleptic Gregorian)
GREGORIAN_EPOCH: float = 1721425.5

# year % 30 in this set => 355-day year (Dhu al-Hijjah has 30 days)
LEAP_YEAR_RESIDUES: FrozenSet[int] = frozenset({2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29})

HIJRI_CYCLE_YEARS: int = 30

# Weekday offsets are anchored at Sunday: 0=Sunday .. 6=Saturday
SUNDAY: int = 0
SATURDAY: int = 6

WeekStart = Literal["sunday", "saturday"]

WEEK_START_OFFSET: dict[str, int] = {
    "sunday": SUNDAY,
    "saturday": SATURDAY,
}
