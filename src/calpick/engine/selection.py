"""
calpick.engine.selection
------------------------
Single/range selection state machine.

`select` never mutates: it returns a SelectionResult holding the next state and
the events the host should turn into notifications. A click on a disabled day
returns the current state unchanged with no events.

Range policy:
  - no start, or a completed range  -> start a fresh range at the clicked day
  - start without end               -> complete it, swapping if the click is
                                       before the anchor
"""

from __future__ import annotations
from typing import Callable, Iterable, Optional

from loguru import logger

from ..core.time import DateLike, to_day
from ..core.types import (
    DateChanged,
    DisableRules,
    RangeChanged,
    RangeSelection,
    SelectionEvent,
    SelectionMode,
    SelectionResult,
    SelectionState,
    SingleSelection,
)
from .classify import is_after, is_before, is_disabled, same_day

_NO_RULES = DisableRules()


def initial_state(mode: SelectionMode = "single") -> SelectionState:
    return RangeSelection() if mode == "range" else SingleSelection()

def select(
    state: Optional[SelectionState],
    clicked: DateLike,
    mode: SelectionMode = "single",
    rules: DisableRules = _NO_RULES,
) -> SelectionResult:
    day = to_day(clicked)
    if state is None:
        state = initial_state(mode)

    if is_disabled(day, rules):
        logger.debug("Ignoring click on disabled date", date=day)
        return SelectionResult(state)

    if mode == "single":
        return SelectionResult(SingleSelection(day), (DateChanged(day),))

    if mode != "range":
        raise ValueError(f"Unknown selection mode '{mode}'")

    # A single-mode state carries no range, so switching modes starts fresh.
    current = state if isinstance(state, RangeSelection) else RangeSelection()

    if current.start is None or current.is_complete:
        logger.debug("Range started", start=day)
        return SelectionResult(RangeSelection(day, None), (RangeChanged(day, None),))

    start, end = current.start, day
    if is_before(end, start):
        start, end = end, start
    logger.debug("Range completed", start=start, end=end)
    return SelectionResult(RangeSelection(start, end), (RangeChanged(start, end),))

# ============================================================
# Highlighting (derived per cell, never stored)
# ============================================================

def is_selected(d: DateLike, state: Optional[SelectionState]) -> bool:
    if isinstance(state, SingleSelection):
        return same_day(d, state.selected)
    if isinstance(state, RangeSelection):
        return same_day(d, state.start) or same_day(d, state.end)
    return False

def is_in_range(d: DateLike, state: Optional[SelectionState]) -> bool:
    """Strictly between the ends of a completed range."""
    if not isinstance(state, RangeSelection) or not state.is_complete:
        return False
    return is_after(d, state.start) and is_before(d, state.end)

# ============================================================
# Host notification
# ============================================================

def dispatch(
    events: Iterable[SelectionEvent],
    *,
    on_date_change: Optional[Callable] = None,
    on_range_change: Optional[Callable] = None,
) -> int:
    """Forward events to host callbacks; returns how many callbacks fired."""
    fired = 0
    for ev in events:
        if isinstance(ev, DateChanged) and on_date_change is not None:
            on_date_change(ev.date)
            fired += 1
        elif isinstance(ev, RangeChanged) and on_range_change is not None:
            on_range_change(ev.start, ev.end)
            fired += 1
    return fired
