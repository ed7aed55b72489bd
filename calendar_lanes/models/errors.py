# File: calendar_lanes/models/errors.py
"""
Exceptions raised when calendar input cannot be laid out.
"""

from typing import Any, Optional


class CalendarDataError(ValueError):
    """Base class for malformed calendar input."""


class MalformedTimeError(CalendarDataError):
    """An event time that does not parse into an hour/minute pair."""
    
    def __init__(self, time_value: Any, title: Optional[str] = None):
        self.time_value = time_value
        self.title = title
        where = f" for event '{title}'" if title is not None else ""
        super().__init__(f"Malformed time {time_value!r}{where}; expected HH:MM (00:00-23:59)")


class InvalidDurationError(CalendarDataError):
    """A duration that is negative or not a whole number of minutes."""
    
    def __init__(self, duration: Any, title: Optional[str] = None):
        self.duration = duration
        self.title = title
        where = f" for event '{title}'" if title is not None else ""
        super().__init__(f"Invalid duration {duration!r}{where}; expected a non-negative number of minutes")


class EventRecordError(CalendarDataError):
    """A raw event record that lacks a required field."""


class EventSourceError(Exception):
    """The event source could not be read or decoded."""
