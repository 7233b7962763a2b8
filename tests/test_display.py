"""
Tests for rich rendering.

Output is captured with a recording Console, so nothing is printed.
"""

import io
import unittest

from rich.console import Console

from oscarsched.display import course_table, print_course, section_timetable
from oscarsched.model import Course, Meeting, Section


def make_course() -> Course:
    lecture = Meeting("Monica Sweat", "mwf", "8:05am", "8:55am", "lecture", "Clough Undergraduate Commons 102")
    recitation = Meeting("Tommy Rogers", "w", "5:05pm", "6:25pm", "recitation", "Instructional Center 204")
    section = Section(30062, "A1", ["Monica Sweat", "Tommy Rogers"], [lecture, recitation])
    section.set_counts(50, 50, 10, 4)
    return Course("CS", 1332, "Data Structures and Algorithms", "fall", 2016, 3, [section], grade_basis="lp")


def render(renderable) -> str:
    console = Console(record=True, width=140, file=io.StringIO())
    console.print(renderable)
    return console.export_text()


class TestDisplay(unittest.TestCase):
    def test_course_table(self) -> None:
        course = make_course()
        table = course_table(course)
        self.assertEqual(table.row_count, 1)
        text = render(table)
        self.assertIn("30062", text)
        self.assertIn("Mon Wed Fri", text)
        self.assertIn("lecture, recitation", text)
        self.assertIn("50/50", text)

    def test_section_timetable(self) -> None:
        section = make_course().sections[0]
        table = section_timetable(section)
        # wednesday has two windows
        self.assertEqual(table.row_count, 2)
        text = render(table)
        self.assertIn("5:05pm-6:25pm", text)

    def test_print_course(self) -> None:
        console = Console(record=True, width=140, file=io.StringIO())
        print_course(make_course(), console=console)
        text = console.export_text()
        self.assertIn("CS 1332 - Data Structures and Algorithms", text)
        self.assertIn("letter grade, pass/fail", text)

    def test_scraped_text_is_not_read_as_markup(self) -> None:
        meeting = Meeting("Staff", "tr", "9:30am", "10:45am", "[lab]", "Howey L1")
        section = Section(30070, "[bold]L1", ["Ann [red]Lee"], [meeting])
        course = Course("CS", 2110, "Computer [Org]", "fall", 2016, 4, [section])
        text = render(course_table(course))
        self.assertIn("[bold]L1", text)
        self.assertIn("Ann [red]Lee", text)
        self.assertIn("[lab]", text)
        self.assertIn("Computer [Org]", text)
        self.assertIn("[bold]L1", render(section_timetable(section)))


if __name__ == "__main__":
    unittest.main()
