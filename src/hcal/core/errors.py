# src/hcal/core/errors.py
from __future__ import annotations

from typing import Any


class HijriDateError(ValueError):
    """
    Base class for rejected Hijri date components.

    `field` names the component ("year", "month", "day") and `value` keeps
    whatever the caller passed in, unmodified.
    """
    field: str = "date"

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or f"Invalid {self.field} [{value!r}]")


class InvalidYear(HijriDateError):
    field = "year"


class InvalidMonth(HijriDateError):
    field = "month"


class InvalidDay(HijriDateError):
    field = "day"
