from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

import calpick
from calpick.core.time import parse_ymd
from calpick.core.types import DayCell, MonthView, SelectionState
from calpick.options import CalendarOptions

# Cell markers, one per DayCell.style
_MARKS = {
    "selected": ("[", "]"),
    "today": ("(", ")"),
    "in_range": ("~", "~"),
    "disabled": (" ", "x"),
    "normal": (" ", " "),
}
_W = 4


def cell(c: DayCell, w: int = _W) -> str:
    if c.is_blank:
        return " " * w
    left, right = _MARKS[c.style]
    return f"{left}{c.date.day:2d}{right}"[:w].ljust(w)

def format_month(view: MonthView) -> str:
    header = " ".join(lbl[:_W - 1].rjust(_W - 1).ljust(_W) for lbl in view.weekday_labels)
    lines: List[str] = [view.title, header, "-" * len(header)]
    row: List[str] = []
    for c in view.cells:
        row.append(cell(c))
        if len(row) == 7:
            lines.append(" ".join(row).rstrip())
            row = []
    if row:
        lines.append(" ".join(row).rstrip())
    return "\n".join(lines)

def print_month(view: MonthView) -> None:
    print(format_month(view))
    print()

def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a month grid with selection / today / disabled markers.")
    p.add_argument("month", nargs="?", help="YYYY-MM (default: current month)")
    p.add_argument("--week-start", type=int, choices=[0, 1], default=0)
    p.add_argument("--today", help="YYYY-MM-DD override for 'today'")
    args = p.parse_args(argv)

    today = parse_ymd(args.today) if args.today else date.today()
    shown = parse_ymd(args.month + "-01") if args.month else today
    opts = CalendarOptions(week_starts_on=args.week_start)
    state: Optional[SelectionState] = None
    print_month(calpick.month_view(shown, state, opts, today=today))
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
