"""calpick public API.

Headless calendar / date-picker engine: month grids, day classification,
single/range selection and theme resolution. Rendering is left to the host.
"""

from loguru import logger

# Library logging stays quiet unless the host opts in with logger.enable("calpick").
logger.disable("calpick")

# Initialize theme catalog on import
from . import api_init as _api_init  # noqa: F401,E402

from .api import (  # noqa: E402
    get_catalog,
    list_themes,
    theme_for_month,
    select,
    month_view,
)
from .core.types import (  # noqa: E402
    ThemePalette,
    DisableRules,
    Locale,
    SingleSelection,
    RangeSelection,
    SelectionPhase,
    SelectionResult,
    DateChanged,
    RangeChanged,
    GridCell,
    DayCell,
    MonthView,
)
from .core.catalog import ThemeCatalog  # noqa: E402
from .core.errors import CalpickError, SelectionStateError, ThemeCatalogError  # noqa: E402
from .engine.classify import same_day, is_before, is_after, is_today, is_disabled  # noqa: E402
from .engine.grid import generate, leading_blanks, step_month, next_month, prev_month  # noqa: E402
from .engine.selection import initial_state, is_selected, is_in_range, dispatch  # noqa: E402
from .engine.theme import resolve, season_name  # noqa: E402
from .options import CalendarOptions, options_from_mapping, load_options  # noqa: E402

__all__ = [
    "get_catalog",
    "list_themes",
    "theme_for_month",
    "select",
    "month_view",
    "ThemePalette",
    "DisableRules",
    "Locale",
    "SingleSelection",
    "RangeSelection",
    "SelectionPhase",
    "SelectionResult",
    "DateChanged",
    "RangeChanged",
    "GridCell",
    "DayCell",
    "MonthView",
    "ThemeCatalog",
    "CalpickError",
    "SelectionStateError",
    "ThemeCatalogError",
    "same_day",
    "is_before",
    "is_after",
    "is_today",
    "is_disabled",
    "generate",
    "leading_blanks",
    "step_month",
    "next_month",
    "prev_month",
    "initial_state",
    "is_selected",
    "is_in_range",
    "dispatch",
    "resolve",
    "season_name",
    "CalendarOptions",
    "options_from_mapping",
    "load_options",
]
