"""
Interactive mode (menu loop).

Shows the timetable of the current week and lets the user page through the
academic calendar:

    [n] next week   [p] previous week   [t] back to this week
    [c] conflicts   [e] re-enter the schedule text   [0] exit

Without a saved schedule the loop starts by asking for pasted rows.
"""

from __future__ import annotations

from rich.console import Console

from weekview.conflicts import find_conflicts
from weekview.model import AppState, Parsed, RawInput, TimeState
from weekview.render import render_week, weekday_column
from weekview.session import SaveSink, edit, next_week, previous_week, reenter, render_request, save


def _read_pasted_text(console: Console) -> list[str]:
    """
    Read lines until the first empty one. Tabs in pasted rows survive input().
    """
    lines: list[str] = []
    while True:
        line = console.input("")
        if not line.strip():
            return lines
        lines.append(line)


def _flow_enter_text(app: RawInput, sink: SaveSink, console: Console) -> AppState | None:
    """
    Ask for schedule rows, then save. Returns None if the user gives up.
    """
    console.print("\nPaste your schedule rows (tab-separated), finish with an empty line.")
    console.print("[dim]Empty input = exit[/]")

    lines = _read_pasted_text(console)
    if not lines:
        return None

    app = edit(app, "\n".join(lines))
    try:
        parsed = save(app, sink)
    except OSError as e:
        console.print(f"[red]Could not save:[/] {e}")
        return app

    assert isinstance(parsed, Parsed)
    console.print(f"Saved: {len(parsed.courses)} courses")
    return parsed


def _flow_conflicts(app: Parsed, week: int, console: Console) -> None:
    confs = find_conflicts(app.courses, week=week)
    if not confs:
        console.print("No conflicts this week.")
        return

    console.print(f"Conflicts in week {week}: {len(confs)}")
    for a, b in confs:
        console.print(
            f"- {weekday_column(a.weekday)} {a.period[0]}-{a.period[1]} {a.name}"
            f"  <->  {b.period[0]}-{b.period[1]} {b.name}",
            markup=False,
        )


def run_interactive(time_state: TimeState, app: AppState, sink: SaveSink, console: Console) -> None:
    """
    Interactive week paging. time_state and app are replaced as whole values;
    the starting time is kept so [t] can jump back to it.
    """
    home = time_state

    while True:
        if isinstance(app, RawInput):
            entered = _flow_enter_text(app, sink, console)
            if entered is None:
                console.print("Bye.")
                return
            app = entered
            continue

        week, visible = render_request(time_state, app)
        render_week(time_state, week, visible, console=console)

        choice = console.input(
            "\n[n] Next week  [p] Previous week  [t] This week\n"
            "[c] Conflicts  [e] Re-enter schedule  [0] Exit\n"
            "Select: ",
            markup=False,
        ).strip().lower()

        if choice == "0":
            console.print("Bye.")
            return

        if choice == "n":
            time_state = next_week(time_state)
        elif choice == "p":
            time_state = previous_week(time_state)
        elif choice == "t":
            time_state = home
        elif choice == "c":
            _flow_conflicts(app, week, console)
        elif choice == "e":
            app = reenter(app)
        else:
            console.print("Invalid choice.")
