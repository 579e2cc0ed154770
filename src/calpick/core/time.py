from __future__ import annotations
import calendar as pycal
from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime]


def to_day(x: Optional[DateLike]) -> Optional[date]:
    """Strip any time-of-day: datetimes collapse to their calendar day."""
    if x is None:
        return None
    return x.date() if isinstance(x, datetime) else x

def today() -> date:
    return date.today()

def days_in_month(year: int, month: int) -> int:
    """Number of days in a Gregorian month (month is 1-based)."""
    return pycal.monthrange(year, month)[1]

def weekday_sun0(d: DateLike) -> int:
    """Weekday with 0=Sunday..6=Saturday (Python's weekday() is 0=Monday)."""
    return (to_day(d).weekday() + 1) % 7

def add_months(d: DateLike, offset: int) -> date:
    """
    Shift by whole calendar months. The day-of-month is kept when the target
    month is long enough, otherwise it is clamped to the target's last day.
    """
    d = to_day(d)
    idx = d.year * 12 + (d.month - 1) + offset
    y, m0 = divmod(idx, 12)
    m = m0 + 1
    return date(y, m, min(d.day, days_in_month(y, m)))

def parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)
