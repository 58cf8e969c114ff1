"""
CLI (Command Line Interface).

Quick terminal commands:

    weekview load <file.txt>        parse + save pasted schedule text ("-" = stdin)
    weekview show [--weeks N]       timetable of this week (or N weeks away)
    weekview conflicts [--all]      clashing courses in this week (or any week)
    weekview interactive            page through the weeks

Global options go before the command:

    weekview --store my.json --utc-offset +08:00 show

Note:
- The interactive loop lives in weekview/interactive.py
- Handlers return exit codes, main() turns them into SystemExit
"""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console

from weekview.config import configure_logging
from weekview.conflicts import find_conflicts
from weekview.model import AppState, Course, Parsed, RawInput
from weekview.render import render_week, weekday_column
from weekview.session import bootstrap, current_week, edit, render_request, save, shift_weeks, startup_time
from weekview.storage import load_saved_text, save_raw_text


console = Console()

# No real-world offset is more than 14 hours away from UTC
MAX_OFFSET_MINUTES = 14 * 60

_OFFSET_RE = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2}))?$")


def utc_offset(text: str) -> int:
    """
    argparse type: "+08:00", "-0530", "+2" -> offset in minutes.
    """
    m = _OFFSET_RE.match(text.strip())
    if not m:
        raise argparse.ArgumentTypeError(f"invalid UTC offset: {text!r} (expected e.g. +08:00)")

    sign, hours, minutes = m.group(1), int(m.group(2)), int(m.group(3) or 0)
    total = hours * 60 + minutes
    if minutes > 59 or total > MAX_OFFSET_MINUTES:
        raise argparse.ArgumentTypeError(f"UTC offset out of range: {text!r}")

    return -total if sign == "-" else total


def _load_app(store: Optional[Path]) -> Optional[AppState]:
    """
    Saved text -> parsed state, or None if nothing has been saved yet.
    """
    saved = load_saved_text(store)
    if saved is None:
        return None
    return bootstrap(saved)


def _course_line(course: Course) -> str:
    begin, end = course.period
    return f"{course.id} | {course.name} | {weekday_column(course.weekday)} {begin}-{end} | {course.room}"


def _cmd_load(args: argparse.Namespace) -> int:
    """
    Read pasted text from a file (or stdin), parse it and save it.
    """
    try:
        text = sys.stdin.read() if args.source == "-" else Path(args.source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"Cannot read {args.source}: {e}")
        return 1

    try:
        app = save(edit(RawInput(""), text), sink=lambda raw: save_raw_text(raw, args.store))
    except OSError as e:
        console.print(f"Cannot write store: {e}")
        return 1

    assert isinstance(app, Parsed)
    console.print(f"Saved: {len(app.courses)} courses")
    if not app.courses:
        console.print("Warning: no line had the expected 11 tab-separated fields.")
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    """
    Render the timetable of the current week, shifted by --weeks.
    """
    app = _load_app(args.store)
    if app is None:
        console.print("No saved schedule. Run 'weekview load <file>' first.")
        return 1

    time_state = shift_weeks(startup_time(args.utc_offset), args.weeks)
    week, visible = render_request(time_state, app)
    render_week(time_state, week, visible, console=console)
    return 0


def _cmd_conflicts(args: argparse.Namespace) -> int:
    """
    Print clashing course pairs for the displayed week, or across all weeks.
    """
    app = _load_app(args.store)
    if not isinstance(app, Parsed):
        console.print("No saved schedule. Run 'weekview load <file>' first.")
        return 1

    if args.all:
        week = None
    else:
        week = current_week(shift_weeks(startup_time(args.utc_offset), args.weeks))

    confs = find_conflicts(app.courses, week=week)
    if not confs:
        console.print("No conflicts found.")
        return 0

    scope = "any week" if week is None else f"week {week}"
    console.print(f"Conflicts found ({scope}): {len(confs)}")
    for a, b in confs:
        console.print(f"- {_course_line(a)}  <->  {_course_line(b)}", markup=False)

    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="weekview", description="Weekly class timetable")
    parser.add_argument("--store", type=Path, default=None, help="Path of saved_schedule.json")
    parser.add_argument(
        "--utc-offset", type=utc_offset, default=None, help="Fixed zone offset, e.g. +08:00 (default: local)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    p_load = sub.add_parser("load", help="Parse and save schedule text")
    p_load.add_argument("source", type=str, help="Text file with tab-separated rows, '-' for stdin")

    p_show = sub.add_parser("show", help="Show the timetable of a week")
    p_show.add_argument("--weeks", type=int, default=0, help="Weeks from now (negative = past)")

    p_conf = sub.add_parser("conflicts", help="Show clashing courses")
    p_conf.add_argument("--weeks", type=int, default=0, help="Weeks from now (negative = past)")
    p_conf.add_argument("--all", action="store_true", help="Check every week, not just one")

    sub.add_parser("interactive", help="Interactive week paging")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    if args.command == "load":
        raise SystemExit(_cmd_load(args))
    if args.command == "show":
        raise SystemExit(_cmd_show(args))
    if args.command == "conflicts":
        raise SystemExit(_cmd_conflicts(args))

    if args.command == "interactive":
        from weekview.interactive import run_interactive

        run_interactive(
            time_state=startup_time(args.utc_offset),
            app=bootstrap(load_saved_text(args.store)),
            sink=lambda raw: save_raw_text(raw, args.store),
            console=console,
        )
        raise SystemExit(0)

    raise SystemExit(2)
