"""
Terminal rendering of courses and sections with rich.

Only reads the model (full_name, derived meeting views, seat counts);
never changes it.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from oscarsched.model import Course, Section

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday"]


def _seats_label(section: Section) -> str:
    if section.seats_limit_count is None:
        return "-"
    label = f"{section.seats_taken_count}/{section.seats_limit_count}"
    if section.is_full():
        label = f"[red]{label}[/]"
    if section.waitlist_limit_count is not None:
        label += f" (wl {section.waitlist_taken_count}/{section.waitlist_limit_count})"
    return label


def _days_label(section: Section) -> str:
    days = section.meeting_days()
    return " ".join(d[:3].title() for d in WEEKDAYS if d in days)


def course_table(course: Course) -> Table:
    """One row per section: CRN, section, instructors, days, types, seats."""
    table = Table(title=escape(course.full_name() or "Course"), box=box.SIMPLE)
    table.add_column("CRN", justify="right")
    table.add_column("Section")
    table.add_column("Instructors")
    table.add_column("Days")
    table.add_column("Types")
    table.add_column("Seats", justify="right")

    for section in course.sections:
        table.add_row(
            f"[bold cyan]{section.crn}[/]",
            escape(section.identifier),
            escape(", ".join(section.instructors)),
            _days_label(section),
            escape(", ".join(sorted(section.meeting_types()))),
            _seats_label(section),
        )
    return table


def section_timetable(section: Section) -> Table:
    """Mon..Fri grid; each column lists that day's time windows in meeting order."""
    buckets: Dict[str, List[str]] = {day: [] for day in WEEKDAYS}
    for window in section.meeting_times():
        buckets[window.day].append(escape(f"{window.start_time}-{window.end_time}"))

    table = Table(title=f"Section {escape(section.identifier)} ({section.crn})", box=box.SIMPLE)
    for day in WEEKDAYS:
        table.add_column(day[:3].title())

    max_len = max(len(b) for b in buckets.values())
    for r in range(max_len):
        table.add_row(*[buckets[day][r] if r < len(buckets[day]) else "" for day in WEEKDAYS])
    return table


def print_course(course: Course, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(f"[bold]{escape(course.full_name() or '(unnamed course)')}[/]")
    formats = course.grading_formats()
    if formats:
        console.print(f"Grading: {escape(', '.join(formats))}")
    console.print(course_table(course))
