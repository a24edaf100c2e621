from __future__ import annotations

import argparse
import json
import math
import sys
from datetime import date, timedelta
from typing import Iterator, Optional, Tuple

from hcal.core.gregorian import gregorian_to_julian
from hcal.core.hijri import from_julian


def parse_date(s: str) -> date:
    """argparse ``type=`` for Gregorian YYYY-MM-DD."""
    try:
        return date.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {s!r} (expected YYYY-MM-DD)") from e


def parse_jdn(s: str) -> float:
    """argparse ``type=`` for a finite Julian Day."""
    try:
        jd = float(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid Julian Day {s!r}") from e
    if not math.isfinite(jd):
        raise argparse.ArgumentTypeError(f"Julian Day must be finite, got {s!r}")
    return jd


def add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--date", type=parse_date, help="YYYY-MM-DD (Gregorian)")
    parser.add_argument("--start", type=parse_date, help="YYYY-MM-DD (Gregorian)")
    parser.add_argument("--end", type=parse_date, help="YYYY-MM-DD (Gregorian)")
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--verbose", action="store_true")


def add_target_args(parser: argparse.ArgumentParser) -> None:
    """--year/--month, or a --date/--jdn that falls inside the wanted month."""
    parser.add_argument("--year", type=int, help="Hijri year (AH)")
    parser.add_argument("--month", type=int, help="Hijri month 1..12")
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--date", type=parse_date, help="Gregorian YYYY-MM-DD; selects the Hijri month it falls in")
    group.add_argument("--jdn", type=parse_jdn, help="Julian Day; selects the Hijri month it falls in")


def iter_dates(start: date, end: date) -> Iterator[date]:
    for n in range((end - start).days + 1):
        yield start + timedelta(days=n)


def resolve_date_range(args: argparse.Namespace) -> Tuple[Optional[date], Optional[date]]:
    if args.start and args.end:
        return args.start, args.end
    if args.date:
        return args.date, args.date
    return None, None


def resolve_hijri_target(args: argparse.Namespace) -> Tuple[Optional[int], Optional[int]]:
    """
    Hijri (year, month) selected on the command line.

    --date wins over --jdn, which wins over --year/--month. (None, None) means
    the caller should fall back to the current month.
    """
    if args.date is not None:
        h = from_julian(gregorian_to_julian(args.date.year, args.date.month, args.date.day))
        return h.year, h.month
    if args.jdn is not None:
        h = from_julian(args.jdn)
        return h.year, h.month
    return args.year, args.month


def dump_json(obj: object) -> None:
    json.dump(obj, sys.stdout, ensure_ascii=False, indent=2)
    sys.stdout.write("\n")


def fail(msg: str) -> None:
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(2)
