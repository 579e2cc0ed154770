from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Literal, Optional, Sequence, Tuple, Union

from .errors import SelectionStateError
from .time import to_day

SelectionMode = Literal["single", "range"]
CellSize = Literal["sm", "md", "lg"]
DatePredicate = Callable[[date], bool]

DEFAULT_WEEK_DAYS: Tuple[str, ...] = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DEFAULT_MONTH_NAMES: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

@dataclass(frozen=True)
class ThemePalette:
    """Named style slots handed to the renderer as-is."""
    selected_bg: str
    selected_text: str
    today_bg: str
    today_text: str
    normal_text: str
    normal_hover_bg: str
    disabled_bg: str
    disabled_text: str
    border_radius: str
    container_bg: Optional[str] = None
    container_border: Optional[str] = None
    range_bg: str = "bg-blue-50"
    range_text: str = "text-blue-600"

@dataclass(frozen=True)
class DisableRules:
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    disable_past_dates: bool = False
    disable_future_dates: bool = False
    disable_weekends: bool = False
    is_date_disabled: Optional[DatePredicate] = None

@dataclass(frozen=True)
class Locale:
    week_days: Tuple[str, ...] = DEFAULT_WEEK_DAYS    # Sunday first
    month_names: Tuple[str, ...] = DEFAULT_MONTH_NAMES

    @classmethod
    def of(
        cls,
        week_days: Optional[Sequence[str]] = None,
        month_names: Optional[Sequence[str]] = None,
    ) -> "Locale":
        """Build a locale, keeping the English defaults for absent or mis-sized label lists."""
        wd = tuple(week_days) if week_days is not None and len(week_days) == 7 else DEFAULT_WEEK_DAYS
        mn = tuple(month_names) if month_names is not None and len(month_names) == 12 else DEFAULT_MONTH_NAMES
        return cls(week_days=wd, month_names=mn)

DEFAULT_LOCALE = Locale()

# ============================================================
# Selection state
# ============================================================

class SelectionPhase(Enum):
    IDLE = "idle"
    SINGLE_SELECTED = "single_selected"
    RANGE_EMPTY = "range_empty"
    RANGE_START = "range_start"
    RANGE_COMPLETE = "range_complete"

@dataclass(frozen=True)
class SingleSelection:
    selected: Optional[date] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "selected", to_day(self.selected))

    @property
    def phase(self) -> SelectionPhase:
        return SelectionPhase.IDLE if self.selected is None else SelectionPhase.SINGLE_SELECTED

@dataclass(frozen=True)
class RangeSelection:
    start: Optional[date] = None
    end: Optional[date] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", to_day(self.start))
        object.__setattr__(self, "end", to_day(self.end))
        if self.end is not None:
            if self.start is None:
                raise SelectionStateError("A range end requires a range start.")
            if self.end < self.start:
                raise SelectionStateError(f"Range start {self.start} is after end {self.end}.")

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def phase(self) -> SelectionPhase:
        if self.start is None:
            return SelectionPhase.RANGE_EMPTY
        if self.end is None:
            return SelectionPhase.RANGE_START
        return SelectionPhase.RANGE_COMPLETE

SelectionState = Union[SingleSelection, RangeSelection]

@dataclass(frozen=True)
class DateChanged:
    date: date

@dataclass(frozen=True)
class RangeChanged:
    start: date
    end: Optional[date]

SelectionEvent = Union[DateChanged, RangeChanged]

@dataclass(frozen=True)
class SelectionResult:
    state: SelectionState
    events: Tuple[SelectionEvent, ...] = ()

    @property
    def accepted(self) -> bool:
        return bool(self.events)

# ============================================================
# Grid / render contract
# ============================================================

@dataclass(frozen=True)
class GridCell:
    """A Day cell when `date` is set, a leading Blank otherwise."""
    date: Optional[date] = None

    @property
    def is_blank(self) -> bool:
        return self.date is None

BLANK = GridCell()

CellStyle = Literal["blank", "disabled", "selected", "today", "in_range", "normal"]

@dataclass(frozen=True)
class DayCell:
    is_blank: bool
    date: Optional[date] = None
    is_disabled: bool = False
    is_selected: bool = False
    is_today: bool = False
    is_in_range: bool = False

    @property
    def style(self) -> CellStyle:
        if self.is_blank:
            return "blank"
        if self.is_disabled:
            return "disabled"
        if self.is_selected:
            return "selected"
        if self.is_today:
            return "today"
        if self.is_in_range:
            return "in_range"
        return "normal"

@dataclass(frozen=True)
class MonthView:
    year: int
    month: int
    title: str
    weekday_labels: Tuple[str, ...]
    cells: Tuple[DayCell, ...]
    palette: ThemePalette
    size: CellSize = "md"
    can_navigate: bool = True
