"""
calpick.engine.view
-------------------
Render contract: everything a presentation layer needs to paint one month,
with no markup or styling decisions beyond naming the palette slot per cell.
"""

from __future__ import annotations
from datetime import date
from typing import Optional, Tuple

from ..core.catalog import ThemeCatalog
from ..core.time import DateLike, to_day, today as _today
from ..core.types import DayCell, Locale, MonthView, SelectionState
from ..options import CalendarOptions
from .classify import is_disabled, is_today
from .grid import generate
from .selection import is_in_range, is_selected
from .theme import resolve


def weekday_labels(locale: Locale, week_starts_on: int = 0) -> Tuple[str, ...]:
    """Locale labels are Sunday-first; rotate them to the display week start."""
    wd = locale.week_days
    return tuple(wd[week_starts_on:]) + tuple(wd[:week_starts_on])

def month_title(locale: Locale, year: int, month: int) -> str:
    return f"{locale.month_names[month - 1]} {year}"

def month_view(
    options: CalendarOptions,
    displayed: DateLike,
    state: Optional[SelectionState],
    catalog: ThemeCatalog,
    *,
    today: Optional[date] = None,
) -> MonthView:
    shown = to_day(displayed)
    y, m = shown.year, shown.month
    now = today if today is not None else _today()
    rules = options.rules

    cells = []
    for gc in generate(y, m, options.week_starts_on):
        if gc.is_blank:
            cells.append(DayCell(is_blank=True))
            continue
        d = gc.date
        cells.append(DayCell(
            is_blank=False,
            date=d,
            is_disabled=is_disabled(d, rules),
            is_selected=is_selected(d, state),
            is_today=options.highlight_today and is_today(d, now),
            is_in_range=is_in_range(d, state),
        ))

    return MonthView(
        year=y,
        month=m,
        title=month_title(options.locale, y, m),
        weekday_labels=weekday_labels(options.locale, options.week_starts_on),
        cells=tuple(cells),
        palette=resolve(catalog, options.theme, m - 1),
        size=options.size,
        can_navigate=not options.disable_month_nav,
    )
