from __future__ import annotations

"""
Gregorian -> Hijri check script.

Uses:
- hcal.core.gregorian.gregorian_to_julian
- hcal.core.hijri.from_julian / to_gregorian (round trip column)
- hcal.features.config.hijri_month_name
"""

import argparse

from hcal.core.gregorian import gregorian_to_julian, jd_weekday
from hcal.core.hijri import from_julian, to_gregorian
from hcal.features.config import hijri_month_name, weekday_name

from tools.common import add_common_args, dump_json, iter_dates, resolve_date_range


def main() -> None:
    parser = argparse.ArgumentParser(description="Gregorian -> Hijri (tabular) check")
    add_common_args(parser)
    args = parser.parse_args()

    start, end = resolve_date_range(args)
    if start is None or end is None:
        parser.error("--date or --start/--end required")

    rows = []
    for cur in iter_dates(start, end):
        jd = gregorian_to_julian(cur.year, cur.month, cur.day)
        h = from_julian(jd)
        back = to_gregorian(h)
        roundtrip_ok = back.to_date() == cur

        if args.json:
            rows.append(
                {
                    "date": cur.isoformat(),
                    "jdn": jd,
                    "hijri": {
                        "year": h.year,
                        "month": h.month,
                        "day": h.day,
                        "month_name": hijri_month_name(h.month),
                    },
                    "weekday": weekday_name(jd_weekday(jd), lang="en"),
                    "roundtrip_ok": roundtrip_ok,
                }
            )
        else:
            sep = "\n" if h.day == 1 and cur != start else ""
            line = f"{sep}{cur.isoformat()}  H={h}  {hijri_month_name(h.month)}"
            if args.verbose:
                line += f"  jdn={jd}  {weekday_name(jd_weekday(jd), lang='en')}  roundtrip={'ok' if roundtrip_ok else 'NG'}"
            print(line)

    if args.json:
        dump_json({"rows": rows})


if __name__ == "__main__":
    main()
