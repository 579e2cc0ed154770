# tests/test_selection.py

from datetime import date, datetime

import pytest

from calpick.core.errors import SelectionStateError
from calpick.core.types import (
    DateChanged,
    DisableRules,
    RangeChanged,
    RangeSelection,
    SelectionPhase,
    SingleSelection,
)
from calpick.engine.selection import (
    dispatch,
    initial_state,
    is_in_range,
    is_selected,
    select,
)

D1 = date(2026, 7, 10)
D2 = date(2026, 7, 20)
D3 = date(2026, 8, 2)


@pytest.fixture
def weekends_off():
    return DisableRules(disable_weekends=True)


# --- state values ---

def test_initial_states():
    assert initial_state("single").phase is SelectionPhase.IDLE
    assert initial_state("range").phase is SelectionPhase.RANGE_EMPTY

def test_range_invariant_enforced_on_construction():
    with pytest.raises(SelectionStateError):
        RangeSelection(None, D1)
    with pytest.raises(SelectionStateError):
        RangeSelection(D2, D1)
    assert RangeSelection(D1, D1).phase is SelectionPhase.RANGE_COMPLETE

def test_states_normalize_datetimes():
    s = RangeSelection(datetime(2026, 7, 10, 18, 0), datetime(2026, 7, 10, 9, 0))
    assert s.start == s.end == D1
    assert SingleSelection(datetime(2026, 7, 10, 5)).selected == D1


# --- single mode ---

def test_single_click_selects_and_notifies():
    res = select(SingleSelection(), D1, "single")
    assert res.state == SingleSelection(D1)
    assert res.state.phase is SelectionPhase.SINGLE_SELECTED
    assert res.events == (DateChanged(D1),)

def test_single_click_replaces_previous():
    res = select(SingleSelection(D1), D2, "single")
    assert res.state.selected == D2
    assert len(res.events) == 1

def test_single_accepts_missing_state():
    assert select(None, D1).state == SingleSelection(D1)


# --- range mode ---

def test_first_range_click_starts_range():
    res = select(RangeSelection(), D1, "range")
    assert res.state == RangeSelection(D1, None)
    assert res.state.phase is SelectionPhase.RANGE_START
    assert res.events == (RangeChanged(D1, None),)

def test_second_click_after_anchor_completes():
    res = select(RangeSelection(D1), D2, "range")
    assert res.state == RangeSelection(D1, D2)
    assert res.events == (RangeChanged(D1, D2),)

def test_second_click_before_anchor_swaps():
    res = select(RangeSelection(D2), D1, "range")
    assert res.state == RangeSelection(D1, D2)
    assert res.events == (RangeChanged(D1, D2),)

def test_second_click_on_anchor_gives_one_day_range():
    res = select(RangeSelection(D1), datetime(2026, 7, 10, 16, 0), "range")
    assert res.state == RangeSelection(D1, D1)

def test_third_click_resets_instead_of_extending():
    complete = RangeSelection(D1, D2)
    for click in (D3, date(2026, 7, 1), date(2026, 7, 15)):
        res = select(complete, click, "range")
        assert res.state == RangeSelection(click, None)
        assert res.events == (RangeChanged(click, None),)

def test_full_range_sequence():
    state = initial_state("range")
    phases = []
    for click in (D2, D1, D3, D1):
        state = select(state, click, "range").state
        phases.append(state.phase)
    assert phases == [
        SelectionPhase.RANGE_START,
        SelectionPhase.RANGE_COMPLETE,
        SelectionPhase.RANGE_START,
        SelectionPhase.RANGE_COMPLETE,
    ]
    assert state == RangeSelection(D1, D3)

def test_mode_switch_starts_fresh():
    res = select(SingleSelection(D1), D2, "range")
    assert res.state == RangeSelection(D2, None)
    res = select(RangeSelection(D1, D2), D3, "single")
    assert res.state == SingleSelection(D3)

def test_unknown_mode_raises():
    with pytest.raises(ValueError):
        select(None, D1, "multi")


# --- disabled clicks ---

def test_disabled_click_is_noop(weekends_off):
    saturday = date(2026, 7, 4)
    for state, mode in (
        (SingleSelection(D1), "single"),
        (RangeSelection(), "range"),
        (RangeSelection(D1), "range"),
        (RangeSelection(D1, D2), "range"),
    ):
        res = select(state, saturday, mode, weekends_off)
        assert res.state is state
        assert res.events == ()
        assert not res.accepted

def test_disabled_click_does_not_fire_callbacks(weekends_off):
    fired = []
    res = select(RangeSelection(D1), date(2026, 7, 5), "range", weekends_off)
    n = dispatch(res.events, on_range_change=lambda s, e: fired.append((s, e)))
    assert n == 0
    assert fired == []


# --- highlighting ---

def test_is_selected_single():
    s = SingleSelection(D1)
    assert is_selected(D1, s)
    assert is_selected(datetime(2026, 7, 10, 12), s)
    assert not is_selected(D2, s)
    assert not is_selected(D1, None)

def test_is_selected_range_ends():
    s = RangeSelection(D1, D2)
    assert is_selected(D1, s)
    assert is_selected(D2, s)
    assert not is_selected(date(2026, 7, 15), s)

def test_in_range_is_strictly_between():
    s = RangeSelection(D1, D2)
    assert is_in_range(date(2026, 7, 11), s)
    assert is_in_range(date(2026, 7, 19), s)
    assert not is_in_range(D1, s)
    assert not is_in_range(D2, s)
    assert not is_in_range(D3, s)

def test_in_range_requires_completed_range():
    assert not is_in_range(date(2026, 7, 15), RangeSelection(D1))
    assert not is_in_range(date(2026, 7, 15), SingleSelection(D1))


# --- dispatch ---

def test_dispatch_routes_each_event_once():
    dates, ranges = [], []
    events = (
        select(None, D1, "single").events
        + select(RangeSelection(D2), D1, "range").events
    )
    n = dispatch(
        events,
        on_date_change=dates.append,
        on_range_change=lambda s, e: ranges.append((s, e)),
    )
    assert n == 2
    assert dates == [D1]
    assert ranges == [(D1, D2)]

def test_dispatch_without_handler_skips():
    assert dispatch(select(None, D1).events) == 0
