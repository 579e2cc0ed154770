"""
calpick.options
---------------
Widget configuration, resolved once into an immutable CalendarOptions.

Every field is optional:

  mode                  "single"   ("single" | "range")
  min_date / max_date   None
  disable_past_dates    False      (only effective together with min_date)
  disable_future_dates  False      (only effective together with max_date)
  disable_weekends      False
  disable_month_nav     False
  is_date_disabled      None       (callable date -> bool)
  highlight_today       True
  week_starts_on        0          (0=Sunday, 1=Monday)
  locale                English, Sunday-first labels
  theme                 "light"
  size                  "md"       ("sm" | "md" | "lg"; rendering hint only)

Cross-field consistency (e.g. min_date <= max_date) is the embedding
application's job and is not checked here.
"""

from __future__ import annotations
import json
from dataclasses import dataclass, fields, replace
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from loguru import logger

from .core.time import parse_ymd
from .core.types import (
    DEFAULT_LOCALE,
    CellSize,
    DatePredicate,
    DisableRules,
    Locale,
    SelectionMode,
)

_MODES = ("single", "range")
_SIZES = ("sm", "md", "lg")
_WEEK_STARTS = (0, 1)
_FLAGS = (
    "disable_past_dates",
    "disable_future_dates",
    "disable_weekends",
    "disable_month_nav",
    "highlight_today",
)


@dataclass(frozen=True)
class CalendarOptions:
    mode: SelectionMode = "single"
    min_date: Optional[date] = None
    max_date: Optional[date] = None
    disable_past_dates: bool = False
    disable_future_dates: bool = False
    disable_weekends: bool = False
    disable_month_nav: bool = False
    is_date_disabled: Optional[DatePredicate] = None
    highlight_today: bool = True
    week_starts_on: int = 0
    locale: Locale = DEFAULT_LOCALE
    theme: str = "light"
    size: CellSize = "md"

    @property
    def rules(self) -> DisableRules:
        return DisableRules(
            min_date=self.min_date,
            max_date=self.max_date,
            disable_past_dates=self.disable_past_dates,
            disable_future_dates=self.disable_future_dates,
            disable_weekends=self.disable_weekends,
            is_date_disabled=self.is_date_disabled,
        )

    def tweak(self, **kwargs) -> "CalendarOptions":
        return replace(self, **kwargs)

DEFAULT_OPTIONS = CalendarOptions()


def _warn(key: str, value: Any, default: Any) -> Any:
    logger.warning("Invalid option value, using default", option=key, value=value, default=default)
    return default

def _as_date(key: str, v: Any) -> Optional[date]:
    if v is None or isinstance(v, date):
        return v
    if isinstance(v, str):
        try:
            return parse_ymd(v)
        except ValueError:
            pass
    return _warn(key, v, None)

def _choice(key: str, value: Any, allowed: tuple, default: Any) -> Any:
    if not isinstance(value, bool) and value in allowed:
        return value
    return _warn(key, value, default)

def _labels(key: str, value: Any) -> Optional[Tuple[str, ...]]:
    if value is None:
        return None
    if isinstance(value, (list, tuple)) and all(isinstance(s, str) for s in value):
        return tuple(value)
    return _warn(key, value, None)

def _locale(value: Any) -> Locale:
    if isinstance(value, Locale):
        return value
    if value is None:
        return DEFAULT_LOCALE
    if not isinstance(value, Mapping):
        return _warn("locale", value, DEFAULT_LOCALE)
    return Locale.of(
        _labels("locale.week_days", value.get("week_days")),
        _labels("locale.month_names", value.get("month_names")),
    )

def options_from_mapping(data: Mapping[str, Any]) -> CalendarOptions:
    """
    Build options from a plain mapping (e.g. parsed JSON). Unknown keys are
    ignored; values of the wrong type or outside their allowed set degrade to
    the defaults with a warning.
    """
    if not isinstance(data, Mapping):
        return _warn("options", data, DEFAULT_OPTIONS)
    known = {f.name for f in fields(CalendarOptions)}
    kw: dict = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown option", option=key)
            continue
        kw[key] = value

    if "mode" in kw:
        kw["mode"] = _choice("mode", kw["mode"], _MODES, DEFAULT_OPTIONS.mode)
    if "size" in kw:
        kw["size"] = _choice("size", kw["size"], _SIZES, DEFAULT_OPTIONS.size)
    if "week_starts_on" in kw:
        kw["week_starts_on"] = _choice("week_starts_on", kw["week_starts_on"], _WEEK_STARTS, DEFAULT_OPTIONS.week_starts_on)
    for key in ("min_date", "max_date"):
        if key in kw:
            kw[key] = _as_date(key, kw[key])
    for key in _FLAGS:
        if key in kw and not isinstance(kw[key], bool):
            kw[key] = _warn(key, kw[key], getattr(DEFAULT_OPTIONS, key))
    if "is_date_disabled" in kw and kw["is_date_disabled"] is not None and not callable(kw["is_date_disabled"]):
        kw["is_date_disabled"] = _warn("is_date_disabled", kw["is_date_disabled"], None)
    if "locale" in kw:
        kw["locale"] = _locale(kw["locale"])
    if "theme" in kw and not isinstance(kw["theme"], str):
        kw["theme"] = _warn("theme", kw["theme"], DEFAULT_OPTIONS.theme)

    return CalendarOptions(**kw)


def load_options(path: Union[str, Path]) -> CalendarOptions:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    logger.debug("Loaded calendar options", path=str(path))
    return options_from_mapping(data)
