"""
Parsing (pasted tab-separated text -> Course records).

- Splits the raw text into lines and every line into tab-separated fields
- Accepts ONLY lines with exactly 11 fields, everything else is skipped
- Bad numbers never raise: weekday/period fall back to 0, bad week tokens vanish

Row layout (zero-indexed):

    0 id | 1 name | 2-4 unused | 5 weekday | 6 period | 7 unused | 8 room | 9 unused | 10 weeks

Important rules (DO NOT CHANGE):
- No range checks here (a weekday of 42 is still a record, it is just never shown)
- Input order is kept, no sorting, no dedupe by id
"""

from __future__ import annotations

import argparse
import json
import logging
import re
from pathlib import Path
from typing import List, Optional, Tuple

from weekview.config import FIELD_COUNT
from weekview.model import Course


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------


# ASCII digits with an optional sign; int() alone would also take "1_0" or "١٢"
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_int(text: str) -> Optional[int]:
    text = text.strip()
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def _parse_weekday(text: str) -> int:
    value = _to_int(text)
    return 0 if value is None else value


def _parse_period(text: str) -> Tuple[int, int]:
    """
    "2-4" -> (2, 4). Exactly two parts are required, otherwise (0, 0).
    A part that is not a number becomes 0 on its own.
    """
    parts = text.split("-")
    if len(parts) != 2:
        return (0, 0)

    begin = _to_int(parts[0])
    end = _to_int(parts[1])
    return (begin or 0, end or 0)


def _parse_weeks(text: str) -> frozenset[int]:
    # "45|46|47|" -> {45, 46, 47}; the empty trailing token is dropped, not 0
    weeks = set()
    for token in text.split("|"):
        value = _to_int(token)
        if value is not None:
            weeks.add(value)
    return frozenset(weeks)


# ---------------------------------------------------------------------------
# Line parsing (CORE LOGIC)
# ---------------------------------------------------------------------------


def parse_line(line: str) -> Optional[Course]:
    """
    Parses exactly one line into exactly one Course, or None if the line
    does not have the expected number of fields.
    """
    fields = line.split("\t")
    if len(fields) != FIELD_COUNT:
        return None

    return Course(
        id=fields[0],
        name=fields[1],
        weekday=_parse_weekday(fields[5]),
        period=_parse_period(fields[6]),
        room=fields[8],
        weeks=_parse_weeks(fields[10]),
    )


def parse(raw: str) -> List[Course]:
    """
    Parses the whole pasted text. Lines that are not records are skipped
    silently; they never affect their neighbours.
    """
    courses: List[Course] = []

    for lineno, line in enumerate(raw.split("\n"), start=1):
        course = parse_line(line)
        if course is None:
            if line.strip():
                logger.debug("Skipping line %d: expected %d tab-separated fields", lineno, FIELD_COUNT)
            continue
        courses.append(course)

    return courses


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_file(path: str | Path) -> List[Course]:
    """
    Reads a text file and parses it.
    """
    return parse(Path(path).read_text(encoding="utf-8"))


def course_to_dict(course: Course) -> dict:
    """
    JSON-friendly representation of a Course (weeks sorted for stable output).
    """
    return {
        "id": course.id,
        "name": course.name,
        "weekday": course.weekday,
        "period": list(course.period),
        "room": course.room,
        "weeks": sorted(course.weeks),
    }


# ---------------------------------------------------------------------------
# CLI connection
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    # Argument parser for CLI usage
    p = argparse.ArgumentParser(
        prog="weekview.parse",
        description="Parse pasted schedule text into JSON"
    )

    p.add_argument("source", type=Path, help="Text file with tab-separated rows")

    # Optional output file; prints to stdout when omitted
    p.add_argument("--out", type=Path, default=None)

    return p


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    courses = parse_file(args.source)
    payload = json.dumps([course_to_dict(c) for c in courses], ensure_ascii=False, indent=2)

    if args.out is None:
        print(payload)
        return

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(payload, encoding="utf-8")
    print(f"Parsed {len(courses)} courses. JSON written to {args.out.resolve()}")


# Entry point for CLI execution
if __name__ == "__main__":
    main()
