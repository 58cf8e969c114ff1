"""
Central data model definitions used across the project.

This module defines the canonical structure of Course records and of the
two pieces of state the application carries around:
- TimeState: "now" as the UI perceives it (instant + fixed zone offset)
- AppState: either raw text that is being edited, or a parsed course list

All types are frozen so that every transition produces a new value.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple, Union


@dataclass(frozen=True)
class Course:
    """
    Represents one scheduled class occurrence pattern (one row of pasted text).

    weekday uses Monday=2 ... Sunday=8, so 0 and 1 mean "invalid / unset".
    period is a closed interval (begin, end) of 1-indexed class periods.
    """

    id: str
    name: str
    weekday: int
    period: Tuple[int, int]
    room: str
    weeks: FrozenSet[int] = field(default_factory=frozenset)

    def occurs_in(self, week: int) -> bool:
        return week in self.weeks


@dataclass(frozen=True)
class TimeState:
    """
    Milliseconds since the Unix epoch plus a fixed UTC offset in minutes.
    """

    instant: int = 0
    zone: int = 0


@dataclass(frozen=True)
class RawInput:
    text: str = ""


@dataclass(frozen=True)
class Parsed:
    courses: Tuple[Course, ...] = ()


# Closed union: code matches on the two variants with isinstance().
AppState = Union[RawInput, Parsed]
