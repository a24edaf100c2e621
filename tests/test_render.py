from __future__ import annotations

import re
from pathlib import Path

from hcal.features.config import RenderConfig
from hcal.features.month_grid import month_grid
from hcal.features.render import box_markup, render_box, render_compact, render_month, strip_markup

DATA = Path(__file__).resolve().parent / "data"
ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _expected_box() -> str:
    return (DATA / "shaaban_1436_box.txt").read_text(encoding="utf-8")


def test_box_plain_matches_reference_layout():
    out = render_box(month_grid(1436, 8), color=False)
    assert out == _expected_box()


def test_box_lines_are_106_wide():
    for year, month in [(1436, 1), (1436, 5), (1445, 9), (1431, 12)]:
        out = render_box(month_grid(year, month), color=False)
        assert all(len(line) == 106 for line in out.splitlines())


def test_box_color_is_ansi_over_same_text():
    out = render_box(month_grid(1436, 8), color=True)
    assert "\x1b[" in out
    assert ANSI_RE.sub("", out) == _expected_box()


def test_box_markup_styles():
    markup = box_markup(month_grid(1436, 8))
    assert "[bold blue]|[/bold blue]" in markup
    assert "[bold yellow]Sha'aban        [1436 AH][/bold yellow]" in markup
    assert strip_markup(markup) == _expected_box()


def test_box_saturday_first_header():
    out = render_box(month_grid(1436, 8, week_start="saturday"), color=False)
    lines = out.splitlines()
    assert lines[3].startswith("|      as-Sabt |      al-Ahad |")
    # four blanks merged before day 1
    assert lines[5].startswith("|" + " " * 59 + "|            1 |")


def test_compact_saturday_first():
    out = render_compact(month_grid(1436, 8, week_start="saturday"))
    lines = out.splitlines()
    assert lines[0].strip() == "Sha'aban 1436"
    assert lines[1] == "Sa Su Mo Tu We Th Fr"
    assert lines[2] == " " * 13 + "1  2  3"
    assert lines[-1] == "25 26 27 28 29"
    assert out.endswith("\n")


def test_render_month_uses_layout_week_start():
    compact = render_month(1436, 8, config=RenderConfig(compact=True))
    assert compact.splitlines()[1].startswith("Sa ")

    box = render_month(1436, 8, config=RenderConfig(color=False))
    assert box == _expected_box()
