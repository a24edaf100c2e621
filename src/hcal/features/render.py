# src/hcal/features/render.py
from __future__ import annotations

"""
Text renderers for a MonthGrid.

- render_box: 106-column boxed table, transliterated Arabic weekday header,
  colour markup rendered to ANSI with rich (plain text when color=False)
- render_compact: cal(1)-style 20-column month
"""

from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.text import Text

from hcal.features.config import RenderConfig
from hcal.features.month_grid import MonthGrid, Week, month_grid

CELL_WIDTH = 14
BOX_INNER_WIDTH = 7 * (CELL_WIDTH + 1) - 1  # 104

BORDER_STYLE = "bold blue"
TITLE_STYLE = "bold yellow"
DAY_STYLE = "bold cyan"


def _styled(style: str, s: str) -> str:
    return f"[{style}]{escape(s)}[/{style}]"


def _border(s: str) -> str:
    return _styled(BORDER_STYLE, s)


def _box_week_row(week: Week) -> str:
    """
    One grid row. Consecutive blank cells merge into a single span so the
    separators between them disappear.
    """
    out: List[str] = []
    i = 0
    while i < len(week):
        cell = week[i]
        if cell is None:
            k = 0
            while i < len(week) and week[i] is None:
                k += 1
                i += 1
            out.append(_border("|") + " " * ((CELL_WIDTH + 1) * k - 1))
            continue
        out.append(_border("|") + _styled(DAY_STYLE, f"{cell:{CELL_WIDTH - 1}d} "))
        i += 1
    out.append(_border("|"))
    return "".join(out)


def box_markup(grid: MonthGrid) -> str:
    """
    The boxed month as rich console markup.
    """
    rule = _border("+" + "-" * BOX_INNER_WIDTH + "+")
    sep = _border("+" + ("-" * CELL_WIDTH + "+") * 7)

    title = f"{grid.month_name:<15s} [{grid.year:4d} AH]"
    left = (BOX_INNER_WIDTH - len(title)) // 2
    right = BOX_INNER_WIDTH - len(title) - left
    title_row = _border("|") + " " * left + _styled(TITLE_STYLE, title) + " " * right + _border("|")

    header = _border("|") + _border("|").join(
        escape(f"{name:>{CELL_WIDTH - 1}s} ") for name in grid.weekday_names
    ) + _border("|")

    lines = [rule, title_row, sep, header, sep]
    for week in grid.weeks:
        lines.append(_box_week_row(week))
        lines.append(sep)
    return "\n".join(lines) + "\n"


def colorize(markup: str) -> str:
    """
    Render rich markup to an ANSI string (standard 8/16 colours).
    """
    console = Console(
        force_terminal=True,
        color_system="standard",
        width=max(BOX_INNER_WIDTH + 2, 80),
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )
    with console.capture() as capture:
        console.print(markup, end="")
    return capture.get()


def strip_markup(markup: str) -> str:
    return Text.from_markup(markup).plain


def render_box(grid: MonthGrid, *, color: bool = True) -> str:
    markup = box_markup(grid)
    return colorize(markup) if color else strip_markup(markup)


def render_compact(grid: MonthGrid) -> str:
    """
    Compact month, e.g.

          Sha'aban 1436
    Sa Su Mo Tu We Th Fr
                 1  2  3
    ...
    """
    width = 7 * 3 - 1
    lines = [f"{grid.month_name} {grid.year}".center(width).rstrip()]
    lines.append(" ".join(grid.weekday_abbr))
    for week in grid.weeks:
        cells = ["  " if c is None else f"{c:2d}" for c in week]
        lines.append(" ".join(cells).rstrip())
    return "\n".join(lines) + "\n"


def render_month(year: int, month: int, *, config: Optional[RenderConfig] = None) -> str:
    """
    Render (year, month) with the layout chosen by `config`; each layout uses
    its own week start.
    """
    cfg = config or RenderConfig()
    if cfg.compact:
        return render_compact(month_grid(year, month, week_start=cfg.compact_week_start))
    return render_box(month_grid(year, month, week_start=cfg.box_week_start), color=cfg.color)
