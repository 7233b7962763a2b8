"""
oscarsched – course, section and meeting model for OSCAR scheduling data.
"""

from oscarsched.codes import DAYS, GRADING_BASES, LetterCodec, normalize
from oscarsched.errors import (
    InvalidCodeError,
    InvalidCountError,
    InvalidMeetingError,
    InvalidScheduleError,
    MissingFieldError,
    NotIterableError,
    ScheduleDataError,
)
from oscarsched.model import Course, Meeting, Section, TimeWindow

__all__ = [
    "Course",
    "DAYS",
    "GRADING_BASES",
    "InvalidCodeError",
    "InvalidCountError",
    "InvalidMeetingError",
    "InvalidScheduleError",
    "LetterCodec",
    "Meeting",
    "MissingFieldError",
    "NotIterableError",
    "ScheduleDataError",
    "Section",
    "TimeWindow",
    "normalize",
]
