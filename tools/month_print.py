from __future__ import annotations

"""
Print a Hijri month calendar.

    python -m tools.month_print                       # current month
    python -m tools.month_print --year 1436 --month 8
    python -m tools.month_print --date 2015-01-14 --compact
    python -m tools.month_print --jdn 2457102.5 --no-color
    python -m tools.month_print --date 2015-01-14 --json
"""

import argparse
from dataclasses import replace
from typing import Optional, Sequence

from hcal.core.errors import HijriDateError
from hcal.features.calendar import HijriCalendar
from hcal.features.config import render_config_from_env

from tools.common import add_target_args, dump_json, fail, resolve_hijri_target


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Hijri month calendar")
    add_target_args(parser)
    parser.add_argument("--week-start", choices=["sunday", "saturday"])
    parser.add_argument("--compact", action="store_true")
    parser.add_argument("--no-color", action="store_true")
    parser.add_argument("--json", action="store_true", help="dump the month grid")
    args = parser.parse_args(argv)

    cfg = render_config_from_env()
    if args.compact:
        cfg = replace(cfg, compact=True)
    if args.no_color:
        cfg = replace(cfg, color=False)
    if args.week_start:
        cfg = replace(cfg, box_week_start=args.week_start, compact_week_start=args.week_start)

    try:
        year, month = resolve_hijri_target(args)
        cal = HijriCalendar(year, month, config=cfg)
    except HijriDateError as e:
        fail(str(e))
        return

    if args.json:
        g = cal.grid()
        dump_json(
            {
                "year": g.year,
                "month": g.month,
                "month_name": g.month_name,
                "week_start": g.week_start,
                "first_weekday": g.first_weekday,
                "days": g.days,
                "weeks": [list(w) for w in g.weeks],
            }
        )
        return

    print(str(cal), end="")


if __name__ == "__main__":
    main()
