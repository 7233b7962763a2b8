"""
Error types raised by the scheduling data model.

Every error is raised at the point of the offending call and never retried.
Callers (scrapers, refresh jobs) decide whether to skip, log or abort.
"""

from __future__ import annotations


class ScheduleDataError(ValueError):
    """Base class for all invalid-data errors in this package."""


class MissingFieldError(ScheduleDataError):
    """A required constructor field is None."""


class InvalidMeetingError(ScheduleDataError):
    """A section's meetings contain something that is not a Meeting."""


class InvalidScheduleError(ScheduleDataError):
    """A meeting's days contain a letter outside m/t/w/r/f."""


class InvalidCodeError(ScheduleDataError):
    """A codec was asked to decode an unknown letter."""


class NotIterableError(ScheduleDataError, TypeError):
    """A value is neither text nor an iterable collection."""


class InvalidCountError(ScheduleDataError):
    """A seat or waitlist count is not a non-negative integer."""
