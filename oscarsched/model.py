"""
Central data model for OSCAR scheduling data.

    Course  1 --- * Section  1 --- * Meeting

- Meeting is an immutable record of one recurring session (lecture, lab, ...)
- Section owns its meetings and derives cross-cutting views from them
  (locations, days, time windows, types); it also carries seat counts that
  an availability refresh may update over time
- Course owns its sections plus catalog metadata

Nothing holds a reference to its owner. Aggregation always flows upward
through explicit method calls.

Important rule (DO NOT CHANGE):
- A section's meetings are fixed at construction. The derived views are
  computed once and cached forever, so replacing or mutating the meetings
  afterwards would leave those caches stale.
"""

from __future__ import annotations

import logging
from dataclasses import FrozenInstanceError, dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Set, Tuple

from oscarsched.codes import DAYS, GRADING_BASES, normalize
from oscarsched.errors import (
    InvalidCountError,
    InvalidMeetingError,
    InvalidScheduleError,
    MissingFieldError,
    NotIterableError,
    ScheduleDataError,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _to_int(value: Any, name: str) -> Optional[int]:
    """
    Coerce scraped numbers to int, keeping None as None.

    OSCAR prints credit hours as "3.000", so numeric strings with a
    fractional part are accepted too. Anything else non-numeric raises
    ScheduleDataError naming the field.
    """
    if value is None:
        return None
    try:
        if isinstance(value, str):
            value = value.strip()
            if "." in value:
                return int(float(value))
        return int(value)
    except (TypeError, ValueError):
        raise ScheduleDataError(f"{name} must be a number, got {value!r}.")


def _lower(value: Optional[str]) -> Optional[str]:
    return value.lower() if isinstance(value, str) else value


# ---------------------------------------------------------------------------
# Meeting
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TimeWindow:
    """One weekday slot of a meeting, e.g. monday 8:05am-8:55am."""

    day: str
    start_time: str
    end_time: str

    def to_dict(self) -> Dict[str, str]:
        return {"day": self.day, "start_time": self.start_time, "end_time": self.end_time}


@dataclass(frozen=True)
class Meeting:
    """
    Represents one scheduled session of a section.

    Times are display strings as OSCAR prints them ("8:05am"); they are
    never parsed or compared.
    """

    instructor: str
    days: str
    start_time: str
    end_time: str
    type: str
    location: str

    _day_names: Optional[Tuple[str, ...]] = field(default=None, init=False, repr=False, compare=False)
    _time_windows: Optional[Tuple[TimeWindow, ...]] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        fields = (self.instructor, self.days, self.start_time, self.end_time, self.type, self.location)
        if any(f is None for f in fields):
            raise MissingFieldError("All fields must be present.")

        # read days exactly once: a generator would be empty on a second pass
        try:
            letters = list(normalize(self.days))
        except NotIterableError:
            raise InvalidScheduleError(f"Invalid days present in string: {self.days}.")

        if not DAYS.is_valid_letters(letters):
            raise InvalidScheduleError(f"Invalid days present in string: {self.days}.")

        # store the compact lowercase form ("MWF" and ["m", "w", "f"] both become "mwf")
        object.__setattr__(self, "days", "".join(letters).lower())

    def day_names(self) -> List[str]:
        """
        Names of the days this meeting occurs on, in letter order.

            Meeting(..., days="mwf", ...).day_names() -> ["monday", "wednesday", "friday"]
        """
        if self._day_names is None:
            object.__setattr__(self, "_day_names", tuple(DAYS.letters_to_names(self.days)))
        return list(self._day_names)

    def time_windows(self) -> List[TimeWindow]:
        """One TimeWindow per day letter, all sharing this meeting's start/end."""
        if self._time_windows is None:
            windows = tuple(TimeWindow(day, self.start_time, self.end_time) for day in self.day_names())
            object.__setattr__(self, "_time_windows", windows)
        return list(self._time_windows)


# ---------------------------------------------------------------------------
# Section
# ---------------------------------------------------------------------------


@dataclass
class Section:
    """
    Represents one section of a course (e.g. "A1", CRN 30062).

    The four meeting views are computed lazily on first read and then
    served from the cache. Seat counts are unrelated to meetings, so
    updating them never touches the caches.

    `meetings` cannot be reassigned after construction; trying to raises
    FrozenInstanceError.
    """

    crn: int
    identifier: str
    instructors: List[str]
    meetings: Tuple[Meeting, ...]

    seats_limit_count: Optional[int] = field(default=None, init=False)
    seats_taken_count: Optional[int] = field(default=None, init=False)
    waitlist_limit_count: Optional[int] = field(default=None, init=False)
    waitlist_taken_count: Optional[int] = field(default=None, init=False)

    _locations: Optional[Tuple[str, ...]] = field(default=None, init=False, repr=False, compare=False)
    _days: Optional[frozenset] = field(default=None, init=False, repr=False, compare=False)
    _times: Optional[Tuple[TimeWindow, ...]] = field(default=None, init=False, repr=False, compare=False)
    _types: Optional[frozenset] = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if any(f is None for f in (self.crn, self.identifier, self.instructors, self.meetings)):
            raise MissingFieldError("All fields must be present.")

        meetings = tuple(normalize(self.meetings))
        if not all(isinstance(m, Meeting) for m in meetings):
            raise InvalidMeetingError("Meetings argument must contain meeting objects.")

        self.crn = _to_int(self.crn, "crn")
        if isinstance(self.instructors, str):
            self.instructors = [self.instructors]
        else:
            self.instructors = list(normalize(self.instructors))
        # the dataclass __init__ already set meetings once, so bypass the guard
        object.__setattr__(self, "meetings", meetings)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "meetings" and "meetings" in self.__dict__:
            raise FrozenInstanceError("cannot assign to field 'meetings'")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name == "meetings":
            raise FrozenInstanceError("cannot delete field 'meetings'")
        super().__delattr__(name)

    # -- derived views ------------------------------------------------------

    def meeting_locations(self) -> List[str]:
        """Where each meeting takes place, in meeting order (duplicates kept)."""
        if self._locations is None:
            self._locations = tuple(m.location for m in self.meetings)
            logger.debug("section %s: cached %d locations", self.crn, len(self._locations))
        return list(self._locations)

    def meeting_days(self) -> Set[str]:
        """All day names the section meets on; a day shared by two meetings counts once."""
        if self._days is None:
            days: Set[str] = set()
            for m in self.meetings:
                days.update(m.day_names())
            self._days = frozenset(days)
            logger.debug("section %s: cached meeting days %s", self.crn, sorted(self._days))
        return set(self._days)

    def meeting_times(self) -> List[TimeWindow]:
        """
        Every time window of every meeting, in meeting order.

        Not de-duplicated: a section meeting twice on wednesday at different
        times yields two wednesday entries.
        """
        if self._times is None:
            times: List[TimeWindow] = []
            for m in self.meetings:
                times.extend(m.time_windows())
            self._times = tuple(times)
            logger.debug("section %s: cached %d time windows", self.crn, len(self._times))
        return list(self._times)

    def meeting_types(self) -> Set[str]:
        if self._types is None:
            self._types = frozenset(m.type for m in self.meetings)
            logger.debug("section %s: cached meeting types %s", self.crn, sorted(self._types))
        return set(self._types)

    # -- seat counts --------------------------------------------------------

    def set_counts(
        self,
        seats_limit: int,
        seats_taken: int,
        waitlist_limit: Optional[int] = None,
        waitlist_taken: Optional[int] = None,
    ) -> None:
        """
        Update seat and waitlist counts.

        Seat counts are required. Waitlist counts are optional; leaving one
        out keeps the previously stored value, so a refresh that only knows
        seats does not wipe known waitlist numbers.

        Taken may exceed limit (OSCAR shows overfilled sections); negative
        values are rejected.
        """
        required = {"seats_limit": seats_limit, "seats_taken": seats_taken}
        optional = {"waitlist_limit": waitlist_limit, "waitlist_taken": waitlist_taken}

        for name, value in required.items():
            _check_count(name, value)
        for name, value in optional.items():
            if value is not None:
                _check_count(name, value)

        self.seats_limit_count = seats_limit
        self.seats_taken_count = seats_taken
        if waitlist_limit is not None:
            self.waitlist_limit_count = waitlist_limit
        if waitlist_taken is not None:
            self.waitlist_taken_count = waitlist_taken

        logger.debug(
            "section %s: seats %s/%s, waitlist %s/%s",
            self.crn,
            self.seats_taken_count,
            self.seats_limit_count,
            self.waitlist_taken_count,
            self.waitlist_limit_count,
        )

    def seats_remaining(self) -> Optional[int]:
        if self.seats_limit_count is None or self.seats_taken_count is None:
            return None
        return self.seats_limit_count - self.seats_taken_count

    def waitlist_remaining(self) -> Optional[int]:
        if self.waitlist_limit_count is None or self.waitlist_taken_count is None:
            return None
        return self.waitlist_limit_count - self.waitlist_taken_count

    def is_full(self) -> bool:
        remaining = self.seats_remaining()
        return remaining is not None and remaining <= 0


def _check_count(name: str, value: Any) -> None:
    # bool is an int subclass but never a count
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidCountError(f"{name} must be an integer, got {value!r}.")
    if value < 0:
        raise InvalidCountError(f"{name} must not be negative, got {value}.")


# ---------------------------------------------------------------------------
# Course
# ---------------------------------------------------------------------------


@dataclass
class Course:
    """
    Represents one course as listed in the OSCAR catalog, e.g. CS 1332.

    school and semester are stored lowercase; number, year and hours are
    coerced to int. Missing values stay None, nothing is validated here.
    Requisites and restrictions are stored exactly as the scraper hands
    them over.
    """

    school: Optional[str]
    number: Optional[int]
    name: Optional[str]
    semester: Optional[str]
    year: Optional[int]
    hours: Optional[int]
    sections: List[Section] = field(default_factory=list)
    grade_basis: Optional[Sequence[str]] = None
    restrictions: Any = None
    prerequisites: Any = None
    corequisites: Any = None

    def __post_init__(self) -> None:
        self.school = _lower(self.school)
        self.semester = _lower(self.semester)
        self.number = _to_int(self.number, "number")
        self.year = _to_int(self.year, "year")
        self.hours = _to_int(self.hours, "hours")
        self.sections = list(self.sections) if self.sections is not None else []

        if isinstance(self.grade_basis, str):
            self.grade_basis = self.grade_basis.lower()
        elif self.grade_basis is not None:
            self.grade_basis = [_lower(letter) for letter in normalize(self.grade_basis)]

    def full_name(self) -> Optional[str]:
        """
        Display name of the course.

            "CS 1332 - Data Structures and Algorithms"
            "CS 1332"                    (no name)
            "Data Structures and Algorithms"   (no school, no number)
            None                         (nothing known)
        """
        parts = []
        if self.school:
            parts.append(self.school.upper())
        if self.number is not None:
            parts.append(str(self.number))
        head = " ".join(parts)

        if self.name:
            return f"{head} - {self.name}" if head else self.name
        return head or None

    def grading_formats(self) -> List[str]:
        """Readable grading bases, e.g. "lp" -> ["letter grade", "pass/fail"]."""
        if self.grade_basis is None:
            return []
        return GRADING_BASES.letters_to_names(self.grade_basis)

    def find_section(self, crn: Optional[int] = None, identifier: Optional[str] = None) -> Optional[Section]:
        """
        First section matching every criterion given, or None.

        With both crn and identifier, a section must match both.
        With neither, nothing matches.
        """
        if crn is None and identifier is None:
            return None

        wanted_crn = _to_int(crn, "crn")
        for section in self.sections:
            if wanted_crn is not None and section.crn != wanted_crn:
                continue
            if identifier is not None and section.identifier != identifier:
                continue
            return section
        return None
