"""
Unit tests for parsing pasted schedule text.

Contract:
- Exactly 11 tab-separated fields per line, other lines are skipped
- weekday/period fall back to 0, bad week tokens are dropped
- Input order is preserved, nothing is deduplicated
"""

import json
import tempfile
import unittest
from pathlib import Path

from tests.helpers import MATH_ROW
from weekview.parse import course_to_dict, main, parse, parse_line


def row(weekday: str = "2", period: str = "1-2", weeks: str = "1|2|", cid: str = "X1", name: str = "Name") -> str:
    return "\t".join([cid, name, "a", "b", "c", weekday, period, "d", "Room", "e", weeks])


class TestParseLine(unittest.TestCase):
    def test_reference_row(self) -> None:
        course = parse_line(MATH_ROW)

        self.assertIsNotNone(course)
        assert course is not None

        self.assertEqual(course.id, "C1")
        self.assertEqual(course.name, "Math")
        self.assertEqual(course.weekday, 3)
        self.assertEqual(course.period, (1, 2))
        self.assertEqual(course.room, "R1")
        self.assertEqual(course.weeks, frozenset({10, 11}))

    def test_wrong_field_count_returns_none(self) -> None:
        self.assertIsNone(parse_line("\t".join(["x"] * 10)))
        self.assertIsNone(parse_line("\t".join(["x"] * 12)))
        self.assertIsNone(parse_line(""))

    def test_bad_weekday_defaults_to_zero(self) -> None:
        course = parse_line(row(weekday="Mon"))
        assert course is not None
        self.assertEqual(course.weekday, 0)

    def test_weekday_is_not_range_checked(self) -> None:
        course = parse_line(row(weekday="42"))
        assert course is not None
        self.assertEqual(course.weekday, 42)

    def test_period_shapes(self) -> None:
        cases = {
            "2-4": (2, 4),
            "bad": (0, 0),
            "a-3": (0, 3),
            "5-": (5, 0),
            "1-2-3": (0, 0),
            "": (0, 0),
        }
        for text, expected in cases.items():
            with self.subTest(period=text):
                course = parse_line(row(period=text))
                assert course is not None
                self.assertEqual(course.period, expected)

    def test_trailing_empty_week_token_is_dropped(self) -> None:
        course = parse_line(row(weeks="45|46|47|48|"))
        assert course is not None
        self.assertEqual(course.weeks, frozenset({45, 46, 47, 48}))
        self.assertNotIn(0, course.weeks)

    def test_unparseable_week_tokens_are_dropped(self) -> None:
        course = parse_line(row(weeks="x|3|y"))
        assert course is not None
        self.assertEqual(course.weeks, frozenset({3}))

        course = parse_line(row(weeks="none"))
        assert course is not None
        self.assertEqual(course.weeks, frozenset())

    def test_only_plain_ascii_integers_count(self) -> None:
        # underscores and non-ASCII digits are not numbers in pasted rows
        course = parse_line(row(weekday="٣", period="1_0-2", weeks="1_0|١٢| 7 |+8|-1"))
        assert course is not None
        self.assertEqual(course.weekday, 0)
        self.assertEqual(course.period, (0, 2))
        self.assertEqual(course.weeks, frozenset({7, 8, -1}))


class TestParse(unittest.TestCase):
    def test_bad_lines_do_not_affect_neighbours(self) -> None:
        raw = "\n".join([
            row(cid="A"),
            "\t".join(["x"] * 10),
            row(cid="B"),
            "\t".join(["x"] * 12),
            "just some header",
            row(cid="C"),
        ])
        self.assertEqual([c.id for c in parse(raw)], ["A", "B", "C"])

    def test_order_and_duplicates_are_kept(self) -> None:
        raw = "\n".join([row(cid="Z"), row(cid="A"), row(cid="Z")])
        self.assertEqual([c.id for c in parse(raw)], ["Z", "A", "Z"])

    def test_crlf_input(self) -> None:
        courses = parse(MATH_ROW + "\r\n" + MATH_ROW + "\r\n")
        self.assertEqual(len(courses), 2)
        self.assertEqual(courses[0].weeks, frozenset({10, 11}))

    def test_empty_text(self) -> None:
        self.assertEqual(parse(""), [])


class TestParseCLI(unittest.TestCase):
    def test_main_writes_json(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            src = Path(d) / "schedule.txt"
            out = Path(d) / "out" / "courses.json"
            src.write_text(MATH_ROW + "\n", encoding="utf-8")

            main([str(src), "--out", str(out)])

            data = json.loads(out.read_text(encoding="utf-8"))
            self.assertEqual(len(data), 1)
            self.assertEqual(data[0], course_to_dict(parse(MATH_ROW)[0]))
            self.assertEqual(data[0]["weeks"], [10, 11])
            self.assertEqual(data[0]["period"], [1, 2])


if __name__ == "__main__":
    unittest.main()
