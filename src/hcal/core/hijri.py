# src/hcal/core/hijri.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple, Union

from .config import HIJRI_CYCLE_YEARS, ISLAMIC_EPOCH, LEAP_YEAR_RESIDUES
from .gregorian import (
    GregorianDate,
    GregorianLike,
    as_gregorian,
    gregorian_to_julian,
    jd_weekday,
    julian_to_gregorian,
)


# ============================================================
# Public types
# ============================================================

@dataclass(frozen=True)
class HijriDate:
    """
    Tabular (civil) Hijri date.

    Construction does not validate; use core.validation.validate() on
    untrusted input before converting.
    """
    year: int
    month: int
    day: int

    @classmethod
    def today(cls, today: Optional[date] = None) -> "HijriDate":
        """Hijri date of the given (default: local) Gregorian date."""
        return from_gregorian(today or date.today())

    def to_julian(self) -> float:
        return to_julian(self)

    def to_gregorian(self) -> GregorianDate:
        return to_gregorian(self)

    def weekday(self) -> int:
        """0=Sunday .. 6=Saturday"""
        return jd_weekday(to_julian(self))

    def add_days(self, n: int = 1) -> "HijriDate":
        return add_day(self, n)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


HijriLike = Union[HijriDate, Tuple[int, int, int]]


def as_hijri(h: HijriLike) -> HijriDate:
    if isinstance(h, HijriDate):
        return h
    y, m, d = h
    return HijriDate(year=int(y), month=int(m), day=int(d))


# ============================================================
# Year / month lengths
# ============================================================

def is_leap_year(year: int) -> bool:
    return (year % HIJRI_CYCLE_YEARS) in LEAP_YEAR_RESIDUES


def days_in_month(year: int, month: int) -> int:
    if month % 2 == 1 or (month == 12 and is_leap_year(year)):
        return 30
    return 29


def days_in_year(year: int) -> int:
    return 355 if is_leap_year(year) else 354


def days_so_far(year: int, month: int) -> int:
    """
    Total length of months 1..month of `year`.

    days_so_far(year, month - 1) is the number of days before the 1st of
    `month`; days_so_far(year, 0) == 0.
    """
    return sum(days_in_month(year, m) for m in range(1, month + 1))


# ============================================================
# Hijri <-> Julian Day
# ============================================================

def _hijri_to_jd(year: int, month: int, day: int) -> float:
    return (
        day
        + math.ceil(29.5 * (month - 1))
        + (year - 1) * 354
        + math.floor((3 + 11 * year) / 30)
        + ISLAMIC_EPOCH
        - 1
    )


def to_julian(h: HijriLike) -> float:
    """
    Hijri date -> Julian Day. No range checks.
    """
    h = as_hijri(h)
    return _hijri_to_jd(h.year, h.month, h.day)


def from_julian(jd: float) -> HijriDate:
    """
    Julian Day -> Hijri date.

    The month estimate can overshoot to 13 on the last days of a year, so it
    is clamped to 12.
    """
    jd = math.floor(jd) + 0.5
    year = math.floor((30 * (jd - ISLAMIC_EPOCH) + 10646) / 10631)
    month = min(12, math.ceil((jd - (29 + _hijri_to_jd(year, 1, 1))) / 29.5) + 1)
    day = int(jd - _hijri_to_jd(year, month, 1)) + 1
    return HijriDate(year=int(year), month=int(month), day=day)


# ============================================================
# Hijri <-> Gregorian (via Julian Day)
# ============================================================

def from_gregorian(g: GregorianLike) -> HijriDate:
    g = as_gregorian(g)
    return from_julian(gregorian_to_julian(g.year, g.month, g.day))


def to_gregorian(h: HijriLike) -> GregorianDate:
    return julian_to_gregorian(to_julian(h))


# ============================================================
# Weekday / layout queries
# ============================================================

def day_of_week(year: int, month: int) -> int:
    """
    Weekday of the 1st of (year, month): 0=Sunday .. 6=Saturday.

    Starts from the weekday of 1 Muharram (through its Gregorian date) and
    advances by the length of the preceding months.
    """
    g = to_gregorian(HijriDate(year, 1, 1))
    first = jd_weekday(gregorian_to_julian(g.year, g.month, g.day))
    return (first + days_so_far(year, month - 1)) % 7


def weekday_of(h: HijriLike) -> int:
    """Weekday of any Hijri date: 0=Sunday .. 6=Saturday."""
    return jd_weekday(to_julian(h))


def add_day(h: HijriLike, n: int = 1) -> HijriDate:
    """
    Step forward `n` days one at a time and return the resulting date.
    """
    if n < 0:
        raise ValueError(f"n must be >= 0 (got {n})")

    h = as_hijri(h)
    year, month, day = h.year, h.month, h.day
    for _ in range(n):
        day += 1
        if day > days_in_month(year, month):
            day = 1
            month += 1
            if month > 12:
                month = 1
                year += 1
    return HijriDate(year=year, month=month, day=day)
