"""
calpick.engine.classify
-----------------------
Day-granularity predicates. Every operand is normalized to its calendar day
first, so a time-of-day carried by a datetime never changes the answer.
"""

from __future__ import annotations
from datetime import date
from typing import Optional

from ..core.time import DateLike, to_day, today as _today, weekday_sun0
from ..core.types import DisableRules

_WEEKEND = (0, 6)  # Sunday, Saturday


def same_day(a: Optional[DateLike], b: Optional[DateLike]) -> bool:
    if a is None or b is None:
        return False
    return to_day(a) == to_day(b)

def is_before(a: DateLike, b: DateLike) -> bool:
    return to_day(a) < to_day(b)

def is_after(a: DateLike, b: DateLike) -> bool:
    return to_day(a) > to_day(b)

def is_today(d: DateLike, today: Optional[date] = None) -> bool:
    return same_day(d, today if today is not None else _today())

def is_weekend(d: DateLike) -> bool:
    return weekday_sun0(d) in _WEEKEND

def is_disabled(d: DateLike, rules: DisableRules) -> bool:
    """
    A day is disabled when any rule matches. Rules are checked in a fixed
    order (lower bound, upper bound, weekend, custom predicate) and the first
    hit wins, so the custom predicate is not called for days already excluded.
    A past/future flag without its bound never fires.
    """
    d = to_day(d)
    if rules.disable_past_dates and rules.min_date is not None and is_before(d, rules.min_date):
        return True
    if rules.disable_future_dates and rules.max_date is not None and is_after(d, rules.max_date):
        return True
    if rules.disable_weekends and is_weekend(d):
        return True
    if rules.is_date_disabled is not None and rules.is_date_disabled(d):
        return True
    return False
