from __future__ import annotations

import logging
import math
import time
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from hcal.core.errors import HijriDateError
from hcal.core.gregorian import GregorianDate, gregorian_to_julian, jd_weekday, julian_to_gregorian
from hcal.core.hijri import (
    HijriDate,
    days_in_month,
    days_in_year,
    from_julian,
    is_leap_year,
    to_julian,
)
from hcal.core.validation import validate
from hcal.features.config import (
    RenderConfig,
    hijri_month_name,
    normalize_week_start,
    render_config_from_env,
    weekday_name,
)
from hcal.features.month_grid import month_grid
from hcal.features.render import render_box, render_compact

router = APIRouter(prefix="/api/v1", tags=["public"])

log = logging.getLogger("hcal.api.public")

# Julian Days accepted by the julian endpoint (roughly +-270,000 years)
JDN_LIMIT = 1e8


# ============================================================
# Response Models
# ============================================================
class HijriDay(BaseModel):
    year: int
    month: int
    day: int
    month_name: str
    leap_year: bool = Field(default=False, description="355-day year")
    days_in_month: int
    days_in_year: int
    label: str = Field(description="YYYY-MM-DD (AH)")


class GregorianDay(BaseModel):
    year: int
    month: int
    day: int
    label: str = Field(description="YYYY-MM-DD")


class Weekday(BaseModel):
    index: int = Field(description="0=Sunday .. 6=Saturday")
    name: str
    name_en: str


class DayResponse(BaseModel):
    jdn: float
    hijri: HijriDay
    gregorian: GregorianDay
    weekday: Weekday


class MonthResponse(BaseModel):
    year: int
    month: int
    month_name: str
    week_start: str
    first_weekday: int
    days: int
    weekday_names: List[str]
    weeks: List[List[Optional[int]]]
    text: Optional[str] = None


# =========================================================
# Public JSON API (function-style, HTTP-ready)
# =========================================================
def _parse_date_any(x: str | date) -> date:
    if isinstance(x, date):
        return x
    return _parse_iso_date(str(x))


def _hijri_dict(h: HijriDate) -> dict:
    return {
        "year": h.year,
        "month": h.month,
        "day": h.day,
        "month_name": hijri_month_name(h.month),
        "leap_year": is_leap_year(h.year),
        "days_in_month": days_in_month(h.year, h.month),
        "days_in_year": days_in_year(h.year),
        "label": str(h),
    }


def _gregorian_dict(g: GregorianDate) -> dict:
    return {"year": g.year, "month": g.month, "day": g.day, "label": str(g)}


def _weekday_dict(jd: float) -> dict:
    i = jd_weekday(jd)
    return {"index": i, "name": weekday_name(i), "name_en": weekday_name(i, lang="en")}


def _day_payload(jd: float) -> dict:
    jd = float(jd)
    return {
        "jdn": jd,
        "hijri": _hijri_dict(from_julian(jd)),
        "gregorian": _gregorian_dict(julian_to_gregorian(jd)),
        "weekday": _weekday_dict(jd),
    }


def get_hijri_day(date_: str | date) -> dict:
    """
    Gregorian date (ISO string or date) -> Hijri date with JDN and weekday.
    """
    d = _parse_date_any(date_)
    jd = gregorian_to_julian(d.year, d.month, d.day)
    return _day_payload(jd)


def get_gregorian_day(year: int, month: int, day: int) -> dict:
    """
    Hijri (year, month, day) -> Gregorian. Raises InvalidYear / InvalidMonth /
    InvalidDay for out-of-range input.
    """
    validate(year, month, day)
    return _day_payload(to_julian(HijriDate(year, month, day)))


def get_julian_day(jdn: float) -> dict:
    """
    Julian Day -> Hijri and Gregorian dates. NaN, infinities and values
    beyond +-JDN_LIMIT raise HTTPException(422).
    """
    jdn = float(jdn)
    if not math.isfinite(jdn) or abs(jdn) > JDN_LIMIT:
        raise HTTPException(status_code=422, detail=f"Julian Day out of range: {jdn!r}")
    return _day_payload(jdn)


def get_hijri_month(
    year: int,
    month: int,
    *,
    week_start: Optional[str] = None,
    fmt: str = "json",
    config: Optional[RenderConfig] = None,
) -> dict:
    """
    Month grid for (year, month).

    fmt:
      - "json": grid only
      - "box": grid + boxed text (no ANSI colour)
      - "compact": grid + cal-style text
    week_start defaults to the layout's own week start from config.
    """
    if fmt not in ("json", "box", "compact"):
        raise ValueError(f"fmt must be 'json', 'box' or 'compact' (got {fmt!r})")

    cfg = config or render_config_from_env()
    if week_start is None:
        ws = cfg.compact_week_start if fmt == "compact" else cfg.box_week_start
    else:
        ws = normalize_week_start(week_start)

    grid = month_grid(year, month, week_start=ws)

    text: Optional[str] = None
    if fmt == "box":
        text = render_box(grid, color=False)
    elif fmt == "compact":
        text = render_compact(grid)

    return {
        "year": grid.year,
        "month": grid.month,
        "month_name": grid.month_name,
        "week_start": grid.week_start,
        "first_weekday": grid.first_weekday,
        "days": grid.days,
        "weekday_names": list(grid.weekday_names),
        "weeks": [list(w) for w in grid.weeks],
        "text": text,
    }


# ============================================================
# Helpers: parsing & errors
# ============================================================
def _parse_iso_date(s: str) -> date:
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"Invalid date format: {s} (expected YYYY-MM-DD)") from e


def _unprocessable(e: ValueError) -> HTTPException:
    return HTTPException(status_code=422, detail=str(e))


# ============================================================
# Endpoints
# ============================================================
@router.get("/hijri/day", response_model=DayResponse)
def get_day(
    date_str: str = Query(..., alias="date", description="Gregorian YYYY-MM-DD"),
    timing: bool = Query(False, description="log conversion timing"),
) -> Dict[str, Any]:
    t0 = time.perf_counter()
    res = get_hijri_day(date_str)
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /hijri/day date=%s total=%.6fs", date_str, t1 - t0)
    return res


@router.get("/hijri/today", response_model=DayResponse)
def get_today() -> Dict[str, Any]:
    return get_hijri_day(date.today())


@router.get("/hijri/to-gregorian", response_model=DayResponse)
def get_to_gregorian(
    year: int = Query(..., description="Hijri year (AH)"),
    month: int = Query(..., description="1..12"),
    day: int = Query(..., description="1..30"),
) -> Dict[str, Any]:
    try:
        return get_gregorian_day(year, month, day)
    except HijriDateError as e:
        raise _unprocessable(e) from e


@router.get("/hijri/julian", response_model=DayResponse)
def get_from_julian(
    jdn: float = Query(..., description="Julian Day, e.g. 2457102.5"),
) -> Dict[str, Any]:
    return get_julian_day(jdn)


@router.get("/hijri/month", response_model=MonthResponse)
def get_month(
    year: int = Query(..., description="Hijri year (AH)"),
    month: int = Query(..., description="1..12"),
    week_start: Optional[str] = Query(None, description="sunday | saturday"),
    fmt: str = Query("json", alias="format", description="json | box | compact"),
    timing: bool = Query(False, description="log render timing"),
) -> Dict[str, Any]:
    t0 = time.perf_counter()
    try:
        res = get_hijri_month(year, month, week_start=week_start, fmt=fmt)
    except ValueError as e:
        raise _unprocessable(e) from e
    t1 = time.perf_counter()

    if timing:
        log.warning("timing /hijri/month year=%s month=%s format=%s total=%.6fs", year, month, fmt, t1 - t0)
    return res
