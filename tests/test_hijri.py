from __future__ import annotations

import dataclasses
from datetime import date

import pytest

from hcal.core.config import ISLAMIC_EPOCH, LEAP_YEAR_RESIDUES
from hcal.core.gregorian import GregorianDate, julian_to_gregorian
from hcal.core.hijri import (
    HijriDate,
    add_day,
    day_of_week,
    days_in_month,
    days_in_year,
    days_so_far,
    from_gregorian,
    from_julian,
    is_leap_year,
    to_gregorian,
    to_julian,
    weekday_of,
)


# ------------------------------------------------------------
# leap years / lengths
# ------------------------------------------------------------

def test_leap_year_table():
    # 1431 % 30 == 21 (leap), 1432 % 30 == 22 (common)
    assert is_leap_year(1431) is True
    assert is_leap_year(1432) is False
    assert is_leap_year(1436) is True
    assert is_leap_year(1437) is False


def test_eleven_leap_years_per_cycle():
    assert sum(1 for y in range(1, 31) if is_leap_year(y)) == 11
    assert sorted(y % 30 for y in range(1, 31) if is_leap_year(y)) == sorted(LEAP_YEAR_RESIDUES)
    assert sum(days_in_year(y) for y in range(1, 31)) == 30 * 354 + 11


@pytest.mark.parametrize("year", [1431, 1432, 1436, 1437])
def test_days_in_month_parity(year: int):
    for m in range(1, 12, 2):
        assert days_in_month(year, m) == 30
    for m in range(2, 11, 2):
        assert days_in_month(year, m) == 29
    assert days_in_month(year, 12) == (30 if is_leap_year(year) else 29)


def test_days_in_year():
    assert days_in_year(1431) == 355
    assert days_in_year(1432) == 354


def test_days_so_far():
    assert days_so_far(1436, 0) == 0
    assert days_so_far(1436, 1) == 30
    assert days_so_far(1436, 7) == 207
    assert days_so_far(1431, 12) == 355
    assert days_so_far(1432, 12) == 354


# ------------------------------------------------------------
# Julian Day conversions
# ------------------------------------------------------------

def test_epoch():
    assert to_julian(HijriDate(1, 1, 1)) == ISLAMIC_EPOCH
    assert from_julian(ISLAMIC_EPOCH) == HijriDate(1, 1, 1)
    # 16 July 622 (Julian) == 19 July 622 (proleptic Gregorian)
    assert julian_to_gregorian(ISLAMIC_EPOCH) == GregorianDate(622, 7, 19)


def test_roundtrip_years_1_to_2000():
    for y in range(1, 2001):
        for m in range(1, 13):
            for d in range(1, days_in_month(y, m) + 1):
                h = HijriDate(y, m, d)
                assert from_julian(to_julian(h)) == h, h


def test_consecutive_julian_days_are_consecutive_dates():
    jd = to_julian(HijriDate(1430, 1, 1))
    prev = from_julian(jd)
    for i in range(1, 3 * 355):
        cur = from_julian(jd + i)
        assert cur == add_day(prev, 1)
        prev = cur


def test_month_clamp_on_last_day_of_leap_year():
    h = HijriDate(1431, 12, 30)
    assert from_julian(to_julian(h)) == h
    assert from_julian(to_julian(h) + 1) == HijriDate(1432, 1, 1)


def test_from_julian_truncates_to_day():
    assert from_julian(2457102.5) == HijriDate(1436, 5, 30)
    assert from_julian(2457102.9) == HijriDate(1436, 5, 30)


# ------------------------------------------------------------
# Gregorian conversions (golden fixtures)
# ------------------------------------------------------------

def test_from_gregorian_fixtures():
    assert from_gregorian(GregorianDate(2011, 3, 22)) == HijriDate(1432, 4, 16)
    assert from_gregorian(date(2015, 1, 14)) == HijriDate(1436, 3, 23)
    assert from_gregorian((2015, 3, 21)) == HijriDate(1436, 5, 30)


def test_to_gregorian_fixtures():
    assert to_gregorian(HijriDate(1436, 8, 1)) == GregorianDate(2015, 5, 20)
    assert to_gregorian((1432, 4, 16)) == GregorianDate(2011, 3, 22)


def test_gregorian_roundtrip_through_hijri():
    for y in range(1, 2001, 7):
        for m in (1, 6, 12):
            h = HijriDate(y, m, days_in_month(y, m))
            assert from_gregorian(to_gregorian(h)) == h


# ------------------------------------------------------------
# weekday / layout
# ------------------------------------------------------------

def test_day_of_week_shaaban_1436_is_wednesday():
    assert day_of_week(1436, 8) == 3
    assert to_gregorian(HijriDate(1436, 8, 1)).to_date().isoweekday() == 3


@pytest.mark.parametrize("year", [1, 622, 1431, 1432, 1436, 1500])
def test_day_of_week_matches_first_of_month(year: int):
    for m in range(1, 13):
        first = HijriDate(year, m, 1)
        assert day_of_week(year, m) == weekday_of(first) == first.weekday()


def test_day_of_week_matches_stdlib():
    for m in range(1, 13):
        g = to_gregorian(HijriDate(1445, m, 1)).to_date()
        assert day_of_week(1445, m) == g.isoweekday() % 7


# ------------------------------------------------------------
# add_day
# ------------------------------------------------------------

def test_add_day_rolls_over_29_day_month():
    assert add_day(HijriDate(1432, 2, 29), 1) == HijriDate(1432, 3, 1)


def test_add_day_does_not_roll_at_29_in_30_day_month():
    assert add_day(HijriDate(1432, 1, 29), 1) == HijriDate(1432, 1, 30)
    assert add_day(HijriDate(1432, 1, 30), 1) == HijriDate(1432, 2, 1)


def test_add_day_year_boundary():
    assert add_day(HijriDate(1432, 12, 29), 1) == HijriDate(1433, 1, 1)
    assert add_day(HijriDate(1431, 12, 29), 1) == HijriDate(1431, 12, 30)
    assert add_day(HijriDate(1431, 12, 30), 1) == HijriDate(1432, 1, 1)


def test_add_day_many():
    h = HijriDate(1431, 1, 1)
    assert add_day(h, 0) == h
    assert add_day(h, days_in_year(1431)) == HijriDate(1432, 1, 1)
    for n in (1, 29, 30, 59, 354, 355, 1000):
        assert add_day(h, n) == from_julian(to_julian(h) + n)
    assert h.add_days(30) == HijriDate(1431, 2, 1)


def test_add_day_rejects_negative():
    with pytest.raises(ValueError):
        add_day(HijriDate(1432, 1, 1), -1)


def test_hijri_date_is_immutable():
    h = HijriDate(1432, 1, 1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        h.day = 2  # type: ignore[misc]
    add_day(h, 5)
    assert h == HijriDate(1432, 1, 1)


def test_hijri_date_helpers():
    h = HijriDate.today(date(2015, 1, 14))
    assert h == HijriDate(1436, 3, 23)
    assert str(h) == "1436-03-23"
    assert h.as_tuple() == (1436, 3, 23)
    assert h.to_gregorian() == GregorianDate(2015, 1, 14)
    assert h.to_julian() == 2457036.5
