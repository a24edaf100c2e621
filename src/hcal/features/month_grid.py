# src/hcal/features/month_grid.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from hcal.core.hijri import day_of_week, days_in_month
from hcal.core.validation import validate_month, validate_year
from hcal.features.config import (
    HIJRI_DAYS,
    WEEKDAY_ABBR_EN,
    WEEKDAY_NAMES_EN,
    column_of,
    hijri_month_name,
    normalize_week_start,
    rotate_weekdays,
)

Week = Tuple[Optional[int], ...]


@dataclass(frozen=True)
class MonthGrid:
    """
    One Hijri month laid out in 7 columns.

    - first_weekday: weekday of day 1, 0=Sunday .. 6=Saturday
    - offset: blank cells before day 1 under this week_start
    - weeks: rows of 7 cells; None is a blank cell
    - weekday_names / weekday_names_en / weekday_abbr: headers already
      rotated to week_start
    """
    year: int
    month: int
    month_name: str
    week_start: str
    first_weekday: int
    offset: int
    days: int
    weekday_names: Tuple[str, ...]
    weekday_names_en: Tuple[str, ...]
    weekday_abbr: Tuple[str, ...]
    weeks: Tuple[Week, ...]

    @property
    def label(self) -> str:
        return f"{self.month_name} {self.year} AH"


def _layout_weeks(offset: int, days: int) -> Tuple[Week, ...]:
    cells: List[Optional[int]] = [None] * offset
    cells.extend(range(1, days + 1))
    tail = (-len(cells)) % 7
    cells.extend([None] * tail)
    return tuple(tuple(cells[i:i + 7]) for i in range(0, len(cells), 7))


def month_grid(year: int, month: int, *, week_start: str = "sunday") -> MonthGrid:
    """
    Build the grid for (year, month).

    Raises InvalidYear / InvalidMonth for out-of-range input.
    """
    validate_year(year)
    validate_month(month)
    ws = normalize_week_start(week_start)

    first = day_of_week(year, month)
    offset = column_of(first, ws)
    days = days_in_month(year, month)

    return MonthGrid(
        year=year,
        month=month,
        month_name=hijri_month_name(month),
        week_start=ws,
        first_weekday=first,
        offset=offset,
        days=days,
        weekday_names=rotate_weekdays(HIJRI_DAYS, ws),
        weekday_names_en=rotate_weekdays(WEEKDAY_NAMES_EN, ws),
        weekday_abbr=rotate_weekdays(WEEKDAY_ABBR_EN, ws),
        weeks=_layout_weeks(offset, days),
    )
