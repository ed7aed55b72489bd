# File: calendar_lanes/models/common.py

import re
from datetime import date, datetime
from typing import Any, Optional, Union

from .errors import MalformedTimeError

DATE_KEY_FORMAT = "%Y-%m-%d"

# ASCII digits only; \d would also accept other scripts' digits
_TIME_PATTERN = re.compile(r"([0-9]{1,2}):([0-9]{2})")


def parse_time_to_minutes(time_str: Any, title: Optional[str] = None) -> int:
    """Convert an 'HH:MM' clock time to minutes since midnight.
    
    Raises MalformedTimeError instead of guessing, so a bad value can never
    end up sorted as 00:00. Surrounding whitespace is not accepted.
    """
    if not isinstance(time_str, str):
        raise MalformedTimeError(time_str, title)
    match = _TIME_PATTERN.fullmatch(time_str)
    if not match:
        raise MalformedTimeError(time_str, title)
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise MalformedTimeError(time_str, title)
    return hour * 60 + minute


def as_date(value: Union[date, datetime]) -> date:
    """Drop the time part of a datetime; plain dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date_key(value: Union[date, datetime]) -> str:
    """Return the 'YYYY-MM-DD' key used to group events."""
    return as_date(value).strftime(DATE_KEY_FORMAT)


def parse_date_key(date_str: str) -> date:
    """Parse a 'YYYY-MM-DD' key into a date.
    
    Only the zero-padded form grid cells use is accepted: strptime alone
    would also take '2026-10-5'.
    """
    parsed = datetime.strptime(date_str, DATE_KEY_FORMAT).date()
    if format_date_key(parsed) != date_str:
        raise ValueError(f"Date {date_str!r} is not in YYYY-MM-DD form")
    return parsed
