from __future__ import annotations

from datetime import date
from typing import List, Optional

from .core.catalog import ThemeCatalog
from .core.time import DateLike
from .core.types import MonthView, SelectionResult, SelectionState, ThemePalette
from .engine import selection as _selection
from .engine import theme as _theme
from .engine import view as _view
from .options import DEFAULT_OPTIONS, CalendarOptions

_catalog: Optional[ThemeCatalog] = None

def set_catalog(cat: ThemeCatalog) -> None:
    global _catalog
    _catalog = cat

def _cat() -> ThemeCatalog:
    if _catalog is None:
        raise RuntimeError("Theme catalog not initialized")
    return _catalog

def get_catalog() -> ThemeCatalog:
    return _cat()

def list_themes() -> List[str]:
    return _cat().list()

def theme_for_month(name: str, month_index: int) -> ThemePalette:
    return _theme.resolve(_cat(), name, month_index)

def select(
    state: Optional[SelectionState],
    clicked: DateLike,
    options: CalendarOptions = DEFAULT_OPTIONS,
) -> SelectionResult:
    """Apply one click under `options` (mode + disable rules)."""
    return _selection.select(state, clicked, options.mode, options.rules)

def month_view(
    displayed: DateLike,
    state: Optional[SelectionState] = None,
    options: CalendarOptions = DEFAULT_OPTIONS,
    *,
    today: Optional[date] = None,
) -> MonthView:
    return _view.month_view(options, displayed, state, _cat(), today=today)
