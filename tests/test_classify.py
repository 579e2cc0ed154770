# tests/test_classify.py

import random
from datetime import date, datetime, timedelta

import pytest

from calpick.core.types import DisableRules
from calpick.engine.classify import (
    is_after,
    is_before,
    is_disabled,
    is_today,
    is_weekend,
    same_day,
)


def _random_days(n, seed=42):
    random.seed(seed)
    base = date(2000, 1, 1)
    return [base + timedelta(days=random.randint(0, 20000)) for _ in range(n)]


def test_same_day_reflexive_and_symmetric():
    days = _random_days(200)
    for a, b in zip(days, reversed(days)):
        assert same_day(a, a)
        assert same_day(a, b) == same_day(b, a)

def test_same_day_absent_operand():
    assert not same_day(None, date(2026, 7, 1))
    assert not same_day(date(2026, 7, 1), None)
    assert not same_day(None, None)

def test_same_day_ignores_time_of_day():
    assert same_day(datetime(2026, 7, 1, 23, 59), date(2026, 7, 1))
    assert same_day(datetime(2026, 7, 1, 0, 1), datetime(2026, 7, 1, 18, 0))
    assert not same_day(datetime(2026, 7, 1, 23, 59), datetime(2026, 7, 2, 0, 0))

def test_before_after_exclusive_on_distinct_days():
    days = _random_days(300, seed=7)
    for a, b in zip(days, days[1:]):
        if a == b:
            continue
        assert is_before(a, b) != is_after(a, b)

def test_before_after_false_on_same_day():
    morning = datetime(2026, 3, 5, 8, 0)
    evening = datetime(2026, 3, 5, 20, 0)
    assert not is_before(morning, evening)
    assert not is_after(evening, morning)

def test_is_today_with_explicit_now():
    assert is_today(date(2026, 10, 19), today=date(2026, 10, 19))
    assert not is_today(date(2026, 10, 18), today=date(2026, 10, 19))

def test_is_today_defaults_to_system_clock():
    assert is_today(date.today())

def test_weekend_uses_sunday_zero_convention():
    assert is_weekend(date(2026, 7, 4))   # Saturday
    assert is_weekend(date(2026, 7, 5))   # Sunday
    assert not is_weekend(date(2026, 7, 6))  # Monday


# --- disable rules ---

def test_no_rules_never_disables():
    assert not is_disabled(date(2026, 7, 4), DisableRules())

def test_past_dates_need_both_flag_and_bound():
    d = date(2026, 1, 1)
    assert not is_disabled(d, DisableRules(disable_past_dates=True))
    assert not is_disabled(d, DisableRules(min_date=date(2026, 6, 1)))
    assert is_disabled(d, DisableRules(min_date=date(2026, 6, 1), disable_past_dates=True))

def test_min_date_itself_is_selectable():
    rules = DisableRules(min_date=date(2026, 6, 1), disable_past_dates=True)
    assert not is_disabled(date(2026, 6, 1), rules)
    assert not is_disabled(datetime(2026, 6, 1, 0, 0), rules)

def test_future_dates_need_both_flag_and_bound():
    d = date(2027, 1, 1)
    assert not is_disabled(d, DisableRules(disable_future_dates=True))
    assert not is_disabled(d, DisableRules(max_date=date(2026, 12, 31)))
    rules = DisableRules(max_date=date(2026, 12, 31), disable_future_dates=True)
    assert is_disabled(d, rules)
    assert not is_disabled(date(2026, 12, 31), rules)

def test_weekend_rule():
    rules = DisableRules(disable_weekends=True)
    assert is_disabled(date(2026, 7, 4), rules)
    assert is_disabled(date(2026, 7, 5), rules)
    assert not is_disabled(date(2026, 7, 3), rules)

def test_custom_predicate():
    rules = DisableRules(is_date_disabled=lambda d: d.day == 13)
    assert is_disabled(date(2026, 3, 13), rules)
    assert not is_disabled(date(2026, 3, 14), rules)

def test_custom_predicate_receives_calendar_day():
    seen = []
    rules = DisableRules(is_date_disabled=lambda d: seen.append(d) or False)
    is_disabled(datetime(2026, 3, 14, 15, 30), rules)
    assert seen == [date(2026, 3, 14)]
    assert type(seen[0]) is date

def test_rules_short_circuit_before_custom_predicate():
    calls = []

    def predicate(d):
        calls.append(d)
        return False

    rules = DisableRules(disable_weekends=True, is_date_disabled=predicate)
    assert is_disabled(date(2026, 7, 4), rules)
    assert calls == []
    assert not is_disabled(date(2026, 7, 6), rules)
    assert calls == [date(2026, 7, 6)]

@pytest.mark.parametrize("d, expected", [
    (date(2026, 5, 31), True),    # before min
    (date(2026, 6, 1), False),
    (date(2026, 6, 6), True),     # Saturday
    (date(2026, 6, 8), False),
    (date(2026, 7, 1), True),     # after max
])
def test_combined_rules(d, expected):
    rules = DisableRules(
        min_date=date(2026, 6, 1),
        max_date=date(2026, 6, 30),
        disable_past_dates=True,
        disable_future_dates=True,
        disable_weekends=True,
    )
    assert is_disabled(d, rules) is expected
