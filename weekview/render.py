"""
Terminal timetable (rich).

Grid layout:
- columns: weekdays Mon..Sun (Course.weekday 2..8), header shows the date
- rows:    class periods 1..11

Everything that maps small integers to display positions is a plain lookup
table with an explicit "invalid" entry, so odd values coming out of the
parser are simply not drawn.
"""

from __future__ import annotations

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from weekview.config import PERIOD_COUNT
from weekview.model import Course, TimeState
from weekview.weeks import week_dates


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

INVALID_COLUMN = ""
INVALID_ROW = -1
INVALID_MONTH = "???"

WEEKDAY_COLUMNS: dict[int, str] = {
    2: "Mon",
    3: "Tue",
    4: "Wed",
    5: "Thu",
    6: "Fri",
    7: "Sat",
    8: "Sun",
}

# period -> zero-based grid row
PERIOD_ROWS: dict[int, int] = {p: p - 1 for p in range(1, PERIOD_COUNT + 1)}

MONTH_NAMES: dict[int, str] = {
    1: "Jan",
    2: "Feb",
    3: "Mar",
    4: "Apr",
    5: "May",
    6: "Jun",
    7: "Jul",
    8: "Aug",
    9: "Sep",
    10: "Oct",
    11: "Nov",
    12: "Dec",
}


def weekday_column(weekday: int) -> str:
    return WEEKDAY_COLUMNS.get(weekday, INVALID_COLUMN)


def period_row(period: int) -> int:
    return PERIOD_ROWS.get(period, INVALID_ROW)


def month_name(month: int) -> str:
    return MONTH_NAMES.get(month, INVALID_MONTH)


def is_displayable(course: Course) -> bool:
    """
    True if the course can be placed on the grid at all.
    """
    begin, end = course.period
    if weekday_column(course.weekday) == INVALID_COLUMN:
        return False
    if period_row(begin) == INVALID_ROW or period_row(end) == INVALID_ROW:
        return False
    return begin <= end


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------


def _cell_label(course: Course) -> str:
    name = escape(course.name)
    room = escape(course.room.strip())
    return f"[bold]{name}[/]\n[dim]{room}[/]" if room else f"[bold]{name}[/]"


def build_grid(courses: Iterable[Course]) -> list[list[list[Course]]]:
    """
    grid[row][column] -> courses drawn into that cell.
    A course spans every period from begin to end.
    """
    columns = sorted(WEEKDAY_COLUMNS)
    grid: list[list[list[Course]]] = [[[] for _ in columns] for _ in range(PERIOD_COUNT)]

    for course in courses:
        if not is_displayable(course):
            continue
        col = columns.index(course.weekday)
        begin, end = course.period
        for p in range(begin, end + 1):
            grid[period_row(p)][col].append(course)

    return grid


def build_week_table(time_state: TimeState, week: int, courses: Iterable[Course]) -> Table:
    """
    Timetable for one week. Column headers carry the weekday-aligned dates
    of the week that contains time_state.instant.
    """
    dates = week_dates(time_state.instant, time_state.zone)

    table = Table(title=f"Week {week}", box=box.SIMPLE_HEAVY, show_lines=True)
    table.add_column("#", justify="right", style="cyan")
    for weekday, (day, month) in zip(sorted(WEEKDAY_COLUMNS), dates):
        table.add_column(f"{weekday_column(weekday)}\n{day} {month_name(month)}", overflow="fold")

    for row_index, row in enumerate(build_grid(courses)):
        cells = ["\n".join(_cell_label(c) for c in cell) for cell in row]
        table.add_row(str(row_index + 1), *cells)

    return table


def render_week(
    time_state: TimeState,
    week: int,
    courses: list[Course],
    console: Optional[Console] = None,
) -> None:
    """
    Print the timetable and a short note about courses that cannot be drawn.
    """
    console = console or Console()
    console.print(build_week_table(time_state, week, courses))

    hidden = [c for c in courses if not is_displayable(c)]
    if hidden:
        names = escape(", ".join(c.name or c.id for c in hidden))
        console.print(f"[yellow]{len(hidden)} course(s) this week have no valid day/period:[/] {names}")
