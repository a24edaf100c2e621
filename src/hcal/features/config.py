# src/hcal/features/config.py
from __future__ import annotations

"""
Feature-level configuration / constants.

- Hijri month names: 1..12 => transliterated name
- Weekday names: Sunday-first tables (Arabic transliteration / English / 2-letter)
- RenderConfig: which week start and colour mode the renderers use

Weekday indexes everywhere follow the core anchor: 0=Sunday .. 6=Saturday.
"""

import os
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from hcal.core.config import WEEK_START_OFFSET, WeekStart

# ============================================================
# Month names (index 0 unused so HIJRI_MONTHS[month] works)
# ============================================================

HIJRI_MONTHS: Tuple[str, ...] = (
    "",
    "Muharram",
    "Safar",
    "Rabi' al-awwal",
    "Rabi' al-thani",
    "Jumada al-awwal",
    "Jumada al-thani",
    "Rajab",
    "Sha'aban",
    "Ramadan",
    "Shawwal",
    "Dhu al-Qi'dah",
    "Dhu al-Hijjah",
)

# ============================================================
# Weekday names, Sunday first
# ============================================================

HIJRI_DAYS: Tuple[str, ...] = (
    "al-Ahad",
    "al-Ithnayn",
    "ath-Thulatha",
    "al-Arbia",
    "al-Khamis",
    "al-Jumuah",
    "as-Sabt",
)

WEEKDAY_NAMES_EN: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

WEEKDAY_ABBR_EN: Tuple[str, ...] = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")

HIJRI_DAY_TO_EN: Dict[str, str] = dict(zip(HIJRI_DAYS, WEEKDAY_NAMES_EN))


def hijri_month_name(month: int) -> str:
    m = int(month)
    if not (1 <= m <= 12):
        raise ValueError(f"invalid hijri month: {month}")
    return HIJRI_MONTHS[m]


def weekday_name(index: int, *, lang: str = "ar") -> str:
    """
    Name for a Sunday-anchored weekday index.
    lang: "ar" (transliterated Arabic) or "en".
    """
    i = int(index) % 7
    if lang == "ar":
        return HIJRI_DAYS[i]
    if lang == "en":
        return WEEKDAY_NAMES_EN[i]
    raise ValueError(f"lang must be 'ar' or 'en' (got {lang!r})")


def normalize_week_start(week_start: str) -> WeekStart:
    ws = str(week_start).strip().lower()
    if ws not in WEEK_START_OFFSET:
        raise ValueError(f"week_start must be 'sunday' or 'saturday' (got {week_start!r})")
    return ws  # type: ignore[return-value]


def rotate_weekdays(names: Tuple[str, ...], week_start: str) -> Tuple[str, ...]:
    """
    Reorder a Sunday-first table so it begins at `week_start`.
    """
    k = WEEK_START_OFFSET[normalize_week_start(week_start)]
    return names[k:] + names[:k]


def column_of(weekday: int, week_start: str) -> int:
    """
    Grid column (0..6) of a Sunday-anchored weekday under `week_start`.
    """
    k = WEEK_START_OFFSET[normalize_week_start(week_start)]
    return (int(weekday) - k) % 7


# ============================================================
# Render configuration
# ============================================================

HCAL_WEEK_START_ENV = "HCAL_WEEK_START"
HCAL_COLOR_ENV = "HCAL_COLOR"


@dataclass(frozen=True)
class RenderConfig:
    """
    Presentation settings shared by the renderers.

    The box layout is Sunday-first; the compact layout keeps the legacy
    Saturday-first week.
    """
    box_week_start: WeekStart = "sunday"
    compact_week_start: WeekStart = "saturday"
    color: bool = True
    compact: bool = False


def _env_truthy(name: str) -> Optional[bool]:
    v = os.environ.get(name, "").strip().lower()
    if not v:
        return None
    return v in ("1", "true", "yes", "y", "on")


def render_config_from_env(base: Optional[RenderConfig] = None) -> RenderConfig:
    """
    Apply HCAL_WEEK_START / HCAL_COLOR overrides on top of `base`.
    HCAL_WEEK_START sets the week start of both layouts.
    """
    cfg = base or RenderConfig()

    ws = os.environ.get(HCAL_WEEK_START_ENV, "").strip()
    if ws:
        ws_n = normalize_week_start(ws)
        cfg = replace(cfg, box_week_start=ws_n, compact_week_start=ws_n)

    color = _env_truthy(HCAL_COLOR_ENV)
    if color is not None:
        cfg = replace(cfg, color=color)

    return cfg
