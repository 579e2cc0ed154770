"""
calpick.engine.grid
-------------------
Month grid generation. The grid is the leading blanks that align day 1 under
its weekday column, followed by one cell per day; no trailing padding.
"""

from __future__ import annotations
from datetime import date
from typing import List, Sequence, Tuple

from ..core.time import DateLike, add_months, days_in_month, weekday_sun0
from ..core.types import BLANK, GridCell


def leading_blanks(year: int, month: int, week_starts_on: int = 0) -> int:
    first_weekday = weekday_sun0(date(year, month, 1))
    return (first_weekday - week_starts_on + 7) % 7

def generate(year: int, month: int, week_starts_on: int = 0) -> Tuple[GridCell, ...]:
    """Cells for `month` (1-based): exactly leading_blanks + days_in_month of them."""
    pad = leading_blanks(year, month, week_starts_on)
    days = [GridCell(date(year, month, d)) for d in range(1, days_in_month(year, month) + 1)]
    return (BLANK,) * pad + tuple(days)

def pad_weeks(cells: Sequence[GridCell]) -> List[List[GridCell]]:
    """Split into rows of 7, filling the last row with blanks."""
    weeks: List[List[GridCell]] = []
    wk: List[GridCell] = []
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(BLANK)
        weeks.append(wk)
    return weeks

def step_month(displayed: DateLike, offset: int) -> date:
    """Next/previous displayed month; the caller owns the displayed value."""
    return add_months(displayed, offset)

def next_month(displayed: DateLike) -> date:
    return step_month(displayed, 1)

def prev_month(displayed: DateLike) -> date:
    return step_month(displayed, -1)
