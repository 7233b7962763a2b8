"""
Unit tests for Meeting.

Meeting contract:
- all six fields are required
- days must only contain m/t/w/r/f
- day_names() and time_windows() follow day letter order
"""

import unittest

from oscarsched.errors import InvalidScheduleError, MissingFieldError
from oscarsched.model import Meeting, TimeWindow


def make_meeting(**overrides) -> Meeting:
    fields = {
        "instructor": "Monica Sweat",
        "days": "mwf",
        "start_time": "8:05am",
        "end_time": "8:55am",
        "type": "lecture",
        "location": "Clough Undergraduate Commons 102",
    }
    fields.update(overrides)
    return Meeting(**fields)


class TestMeetingInit(unittest.TestCase):
    def test_valid_meeting(self) -> None:
        m = make_meeting()
        self.assertEqual(m.instructor, "Monica Sweat")
        self.assertEqual(m.days, "mwf")
        self.assertEqual(m.type, "lecture")

    def test_positional_order(self) -> None:
        m = Meeting("Monica Sweat", "tr", "9:30am", "10:45am", "lecture", "Howey L1")
        self.assertEqual(m.start_time, "9:30am")
        self.assertEqual(m.location, "Howey L1")

    def test_missing_field_raises(self) -> None:
        for name in ("instructor", "days", "start_time", "end_time", "type", "location"):
            with self.assertRaises(MissingFieldError) as ctx:
                make_meeting(**{name: None})
            self.assertEqual(str(ctx.exception), "All fields must be present.")

    def test_invalid_day_raises(self) -> None:
        with self.assertRaises(InvalidScheduleError) as ctx:
            make_meeting(days="z")
        self.assertEqual(str(ctx.exception), "Invalid days present in string: z.")

    def test_empty_days_raise(self) -> None:
        with self.assertRaises(InvalidScheduleError):
            make_meeting(days="")

    def test_days_are_stored_compact_and_lowercase(self) -> None:
        self.assertEqual(make_meeting(days="MWF").days, "mwf")
        self.assertEqual(make_meeting(days=["t", "R"]).days, "tr")

    def test_days_from_one_shot_iterable(self) -> None:
        m = make_meeting(days=iter("mwf"))
        self.assertEqual(m.days, "mwf")
        self.assertEqual(m.day_names(), ["monday", "wednesday", "friday"])
        self.assertEqual(len(m.time_windows()), 3)

    def test_days_from_generator(self) -> None:
        m = make_meeting(days=(letter for letter in "TR"))
        self.assertEqual(m.day_names(), ["tuesday", "thursday"])

    def test_invalid_letter_in_generator_raises(self) -> None:
        with self.assertRaises(InvalidScheduleError):
            make_meeting(days=(letter for letter in "mz"))

    def test_non_iterable_days_raise(self) -> None:
        with self.assertRaises(InvalidScheduleError):
            make_meeting(days=135)

    def test_meeting_is_immutable(self) -> None:
        m = make_meeting()
        with self.assertRaises(AttributeError):
            m.location = "elsewhere"  # type: ignore[misc]

    def test_equal_meetings_compare_equal(self) -> None:
        a = make_meeting()
        b = make_meeting()
        a.day_names()
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))


class TestMeetingViews(unittest.TestCase):
    def test_day_names(self) -> None:
        self.assertEqual(make_meeting().day_names(), ["monday", "wednesday", "friday"])

    def test_day_names_is_cached(self) -> None:
        m = make_meeting()
        first = m.day_names()
        first.append("saturday")
        self.assertEqual(m.day_names(), ["monday", "wednesday", "friday"])

    def test_time_windows(self) -> None:
        windows = make_meeting().time_windows()
        self.assertEqual(
            windows,
            [
                TimeWindow("monday", "8:05am", "8:55am"),
                TimeWindow("wednesday", "8:05am", "8:55am"),
                TimeWindow("friday", "8:05am", "8:55am"),
            ],
        )
        self.assertEqual(len({(w.start_time, w.end_time) for w in windows}), 1)

    def test_time_window_to_dict(self) -> None:
        window = make_meeting(days="w").time_windows()[0]
        self.assertEqual(window.to_dict(), {"day": "wednesday", "start_time": "8:05am", "end_time": "8:55am"})


if __name__ == "__main__":
    unittest.main()
