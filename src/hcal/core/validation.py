# src/hcal/core/validation.py
from __future__ import annotations

from typing import Any

from .errors import InvalidDay, InvalidMonth, InvalidYear

MAX_MONTH = 12
# Upper bound across all months; not the per-month length.
MAX_DAY = 30


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)


def validate_year(year: Any) -> int:
    """
    Ensure `year` is a positive integer.

    Raises
    ------
    InvalidYear
        If year is not an int or is <= 0.
    """
    if not _is_int(year) or year <= 0:
        raise InvalidYear(year)
    return year


def validate_month(month: Any) -> int:
    """
    Ensure `month` is an integer in [1, 12].
    """
    if not _is_int(month) or not (1 <= month <= MAX_MONTH):
        raise InvalidMonth(month)
    return month


def validate_day(day: Any) -> int:
    """
    Ensure `day` is an integer in [1, 30].

    NOTE: day 30 is accepted for 29-day months too. Callers that need the
    per-month bound compare against days_in_month() themselves.
    """
    if not _is_int(day) or not (1 <= day <= MAX_DAY):
        raise InvalidDay(day)
    return day


def validate(year: Any, month: Any, day: Any) -> tuple[int, int, int]:
    """
    Validate (year, month, day) in that order; the first failure is raised.
    """
    return validate_year(year), validate_month(month), validate_day(day)
