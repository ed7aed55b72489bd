from .errors import (
    CalendarDataError,
    MalformedTimeError,
    InvalidDurationError,
    EventRecordError,
    EventSourceError,
)
from .common import parse_time_to_minutes, format_date_key, parse_date_key, as_date
from .event import Event, LaidOutEvent, event_from_dict
from .layout import DayLayout
from .grid import DateCell, MonthMatrix
from .issues import ValidationIssue

__all__ = [
    "CalendarDataError",
    "MalformedTimeError",
    "InvalidDurationError",
    "EventRecordError",
    "EventSourceError",
    "parse_time_to_minutes",
    "format_date_key",
    "parse_date_key",
    "as_date",
    "Event",
    "LaidOutEvent",
    "event_from_dict",
    "DayLayout",
    "DateCell",
    "MonthMatrix",
    "ValidationIssue",
]
