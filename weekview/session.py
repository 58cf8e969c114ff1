"""
Coordination layer between parser, week engine and the UI.

State is never global: callers pass a TimeState / AppState in and get a new
one back. The only asynchronous step is the one-shot clock read at startup.

Transitions:

    RawInput --save-->     Parsed        (re-parses the text, emits it to the sink)
    Parsed   --reenter-->  RawInput("")
    RawInput --edit-->     RawInput(text)

Any action that does not apply to the current variant returns it unchanged.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple

from weekview.model import AppState, Course, Parsed, RawInput, TimeState
from weekview.parse import parse
from weekview.weeks import add_weeks, iso_week_number


logger = logging.getLogger(__name__)

SaveSink = Callable[[str], None]


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------


def initial_time_state() -> TimeState:
    """
    Epoch-zero in UTC, used until the real clock has been read.
    """
    return TimeState(instant=0, zone=0)


# (instant in ms, local UTC offset in minutes or None if the platform has none)
ClockReading = Tuple[int, Optional[int]]


def _read_clock_now() -> ClockReading:
    instant = time.time_ns() // 1_000_000
    offset = datetime.now().astimezone().utcoffset()
    zone = int(offset.total_seconds() // 60) if offset is not None else None
    return instant, zone


async def read_clock() -> ClockReading:
    """
    One-shot read of the current instant and the local UTC offset.
    No retry, no timeout.
    """
    return await asyncio.to_thread(_read_clock_now)


def correct_time(state: TimeState, instant: int, zone: Optional[int] = None) -> TimeState:
    """
    Apply a clock reading. Without an offset the current zone is kept.
    """
    return TimeState(instant=instant, zone=state.zone if zone is None else zone)


def startup_time(zone: Optional[int] = None) -> TimeState:
    """
    Run the startup clock read. If the platform cannot supply a time, keep
    the initial default instead of failing.

    zone overrides the local offset (e.g. from --utc-offset).
    """
    state = initial_time_state()
    try:
        instant, local_zone = asyncio.run(read_clock())
        state = correct_time(state, instant, local_zone)
    except (OSError, OverflowError, ValueError) as e:
        logger.warning("Clock unavailable, staying at epoch-zero: %s", e)

    if zone is not None:
        state = replace(state, zone=zone)
    return state


def shift_weeks(state: TimeState, n: int) -> TimeState:
    return replace(state, instant=add_weeks(state.instant, n))


def next_week(state: TimeState) -> TimeState:
    return shift_weeks(state, 1)


def previous_week(state: TimeState) -> TimeState:
    return shift_weeks(state, -1)


def current_week(state: TimeState) -> int:
    return iso_week_number(state.instant, state.zone)


# ---------------------------------------------------------------------------
# App state
# ---------------------------------------------------------------------------


def bootstrap(saved_text: Optional[str]) -> AppState:
    """
    Initial state: previously saved text is shown parsed right away,
    otherwise the user starts with an empty input.
    """
    if saved_text is None:
        return RawInput("")
    return Parsed(tuple(parse(saved_text)))


def edit(app: AppState, text: str) -> AppState:
    if isinstance(app, RawInput):
        return RawInput(text)
    return app


def save(app: AppState, sink: SaveSink) -> AppState:
    """
    RawInput -> Parsed. The raw text goes to the sink exactly once.
    """
    if not isinstance(app, RawInput):
        return app

    courses = tuple(parse(app.text))
    sink(app.text)
    logger.info("Saved schedule with %d courses", len(courses))
    return Parsed(courses)


def reenter(app: AppState) -> AppState:
    if isinstance(app, Parsed):
        return RawInput("")
    return app


# ---------------------------------------------------------------------------
# Filtering / render requests
# ---------------------------------------------------------------------------


def visible_courses(courses: Iterable[Course], week: int) -> List[Course]:
    """
    Courses that recur in the given week, input order preserved.
    A course without weeks is never visible.
    """
    return [c for c in courses if c.occurs_in(week)]


def render_request(time_state: TimeState, app: AppState) -> Tuple[int, List[Course]]:
    """
    What the renderer needs: the week number and the courses to draw.
    """
    week = current_week(time_state)
    if isinstance(app, Parsed):
        return week, visible_courses(app.courses, week)
    return week, []
