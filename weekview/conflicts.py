"""
Conflict detection.

Two courses clash if they are drawn into the same timetable cell:
same weekday, overlapping period interval and at least one shared week.

Periods are closed intervals, so (1, 2) and (2, 3) DO clash on period 2.
"""

from __future__ import annotations

from typing import Iterable, Optional

from weekview.model import Course
from weekview.render import is_displayable


def _overlaps(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] <= b[1] and b[0] <= a[1]


def find_conflicts(courses: Iterable[Course], week: Optional[int] = None) -> list[tuple[Course, Course]]:
    """
    Find clashing course pairs (A, B), each pair appears once (i<j).

    With week=None any shared week counts, otherwise only the given one.
    Courses that cannot be displayed never clash.
    """
    candidates = [c for c in courses if is_displayable(c)]
    if week is not None:
        candidates = [c for c in candidates if c.occurs_in(week)]

    conflicts: list[tuple[Course, Course]] = []

    # O(n^2) is fine for a personal timetable
    for i in range(len(candidates)):
        a = candidates[i]
        for j in range(i + 1, len(candidates)):
            b = candidates[j]
            if a.weekday != b.weekday:
                continue
            if not (a.weeks & b.weeks):
                continue
            if _overlaps(a.period, b.period):
                conflicts.append((a, b))

    return conflicts
