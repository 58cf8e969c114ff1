"""
Unit tests for conflict detection.

Definition used here:
- Two courses clash if they share a weekday, a week and at least one period.
- Periods are closed intervals: (1, 2) and (2, 3) DO clash.
"""

import unittest

from weekview.conflicts import find_conflicts
from weekview.model import Course


def course(cid: str, weekday: int = 2, period: tuple = (1, 2), weeks: tuple = (1,)) -> Course:
    return Course(id=cid, name=cid, weekday=weekday, period=period, room="", weeks=frozenset(weeks))


class TestConflicts(unittest.TestCase):
    def test_overlap_same_day(self) -> None:
        a = course("A", period=(1, 3))
        b = course("B", period=(2, 4))
        self.assertEqual(find_conflicts([a, b]), [(a, b)])

    def test_shared_boundary_period_clashes(self) -> None:
        confs = find_conflicts([course("A", period=(1, 2)), course("B", period=(2, 3))])
        self.assertEqual(len(confs), 1)

    def test_adjacent_periods_do_not_clash(self) -> None:
        confs = find_conflicts([course("A", period=(1, 2)), course("B", period=(3, 4))])
        self.assertEqual(confs, [])

    def test_different_day_no_conflict(self) -> None:
        confs = find_conflicts([course("A", weekday=2), course("B", weekday=3)])
        self.assertEqual(confs, [])

    def test_disjoint_weeks_no_conflict(self) -> None:
        confs = find_conflicts([course("A", weeks=(1, 3)), course("B", weeks=(2, 4))])
        self.assertEqual(confs, [])

    def test_week_filter(self) -> None:
        a = course("A", weeks=(1, 2))
        b = course("B", weeks=(2, 3))
        self.assertEqual(len(find_conflicts([a, b])), 1)
        self.assertEqual(len(find_conflicts([a, b], week=2)), 1)
        self.assertEqual(find_conflicts([a, b], week=1), [])

    def test_non_displayable_courses_never_clash(self) -> None:
        confs = find_conflicts([course("A", weekday=0), course("B", weekday=0)])
        self.assertEqual(confs, [])
        confs = find_conflicts([course("A", period=(0, 0)), course("B", period=(0, 0))])
        self.assertEqual(confs, [])


if __name__ == "__main__":
    unittest.main()
