# src/hcal/features/calendar.py
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from hcal.core.gregorian import GregorianDate
from hcal.core.hijri import HijriDate, from_gregorian, from_julian
from hcal.core.validation import validate_month, validate_year
from hcal.features.config import RenderConfig, render_config_from_env
from hcal.features.month_grid import MonthGrid, month_grid
from hcal.features.render import render_month

log = logging.getLogger("hcal.features.calendar")


class HijriCalendar:
    """
    Month calendar of the Hijri year.

        print(HijriCalendar())                          # this month
        print(HijriCalendar(1436, 1))                   # Muharram 1436
        print(HijriCalendar().from_gregorian(2015, 1, 14))
        print(HijriCalendar().from_julian(2457102.5))

    A given year/month is validated up front. If either is missing, both
    fall back to the current Hijri year and month.
    """

    def __init__(
        self,
        year: Optional[int] = None,
        month: Optional[int] = None,
        *,
        config: Optional[RenderConfig] = None,
        today: Optional[Callable[[], date]] = None,
    ) -> None:
        if year is not None:
            validate_year(year)
        if month is not None:
            validate_month(month)

        self.config = config if config is not None else render_config_from_env()
        self._today = today or date.today

        if year is None or month is None:
            t = self.today()
            year, month = t.year, t.month

        self.year: int = year
        self.month: int = month
        log.debug("HijriCalendar year=%d month=%d config=%s", self.year, self.month, self.config)

    def today(self) -> HijriDate:
        return HijriDate.today(self._today())

    def grid(self) -> MonthGrid:
        ws = self.config.compact_week_start if self.config.compact else self.config.box_week_start
        return month_grid(self.year, self.month, week_start=ws)

    def current(self) -> str:
        """Calendar of the current Hijri month."""
        t = self.today()
        return self._calendar(t.year, t.month)

    def from_gregorian(self, year: int, month: int, day: int) -> str:
        """Calendar of the Hijri month the Gregorian date falls in."""
        h = from_gregorian(GregorianDate(year, month, day))
        log.debug("from_gregorian %04d-%02d-%02d -> %s", year, month, day, h)
        return self._calendar(h.year, h.month)

    def from_julian(self, jd: float) -> str:
        """Calendar of the Hijri month the Julian Day falls in."""
        h = from_julian(jd)
        log.debug("from_julian %s -> %s", jd, h)
        return self._calendar(h.year, h.month)

    def as_string(self) -> str:
        return self._calendar(self.year, self.month)

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"HijriCalendar(year={self.year}, month={self.month})"

    def _calendar(self, year: int, month: int) -> str:
        return render_month(year, month, config=self.config)
