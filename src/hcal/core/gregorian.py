# src/hcal/core/gregorian.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Tuple, Union

from .config import GREGORIAN_EPOCH


@dataclass(frozen=True)
class GregorianDate:
    """
    Proleptic Gregorian (year, month, day).
    """
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(year=d.year, month=d.month, day=d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


GregorianLike = Union[GregorianDate, date, Tuple[int, int, int]]


def as_gregorian(g: GregorianLike) -> GregorianDate:
    if isinstance(g, GregorianDate):
        return g
    if isinstance(g, date):
        return GregorianDate.from_date(g)
    y, m, d = g
    return GregorianDate(year=int(y), month=int(m), day=int(d))


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and not (year % 100 == 0 and year % 400 != 0)


def gregorian_to_julian(year: int, month: int, day: int) -> float:
    """
    Proleptic Gregorian date -> Julian Day (x.5 at midnight).
    """
    if month <= 2:
        adj = 0
    elif is_gregorian_leap(year):
        adj = -1
    else:
        adj = -2

    return (
        (GREGORIAN_EPOCH - 1)
        + 365 * (year - 1)
        + math.floor((year - 1) / 4)
        - math.floor((year - 1) / 100)
        + math.floor((year - 1) / 400)
        + math.floor((367 * month - 362) / 12)
        + adj
        + day
    )


def julian_to_gregorian(jd: float) -> GregorianDate:
    """
    Julian Day -> proleptic Gregorian date.

    Splits the day count into 400/100/4/1-year buckets; the last bucket of a
    century (cent == 4) or of a quad (yindex == 4) is Dec 31 of the previous
    year and must not be bumped.
    """
    wjd = math.floor(jd - 0.5) + 0.5
    depoch = wjd - GREGORIAN_EPOCH

    quadricent = math.floor(depoch / 146097)
    dqc = depoch % 146097
    cent = math.floor(dqc / 36524)
    dcent = dqc % 36524
    quad = math.floor(dcent / 1461)
    dquad = dcent % 1461
    yindex = math.floor(dquad / 365)

    year = quadricent * 400 + cent * 100 + quad * 4 + yindex
    if not (cent == 4 or yindex == 4):
        year += 1

    yearday = wjd - gregorian_to_julian(year, 1, 1)
    if wjd < gregorian_to_julian(year, 3, 1):
        leapadj = 0
    elif is_gregorian_leap(year):
        leapadj = 1
    else:
        leapadj = 2

    month = math.floor(((yearday + leapadj) * 12 + 373) / 367)
    day = int(wjd - gregorian_to_julian(year, month, 1)) + 1
    return GregorianDate(year=int(year), month=int(month), day=day)


def jd_weekday(jd: float) -> int:
    """Weekday of a Julian Day: 0=Sunday .. 6=Saturday."""
    return int(math.floor(jd + 1.5) % 7)
