# File: calendar_lanes/models/event.py

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .common import parse_date_key
from .errors import EventRecordError


@dataclass(frozen=True)
class Event:
    """A single-day calendar event as delivered by the event source."""
    date: str   # "YYYY-MM-DD"
    time: str   # "HH:MM"
    title: str
    duration: Optional[int] = 0  # minutes; None is treated as 0
    
    @property
    def duration_minutes(self) -> int:
        """Duration with absence treated as zero minutes."""
        return 0 if self.duration is None else self.duration
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert back to the raw record shape."""
        return {
            'date': self.date,
            'time': self.time,
            'title': self.title,
            'duration': self.duration_minutes,
        }


@dataclass(frozen=True)
class LaidOutEvent:
    """An event with its derived interval and assigned display lane."""
    date: str
    time: str
    title: str
    duration: int
    start_minute: int
    end_minute: int
    lane: int
    
    def overlaps_with(self, other: 'LaidOutEvent') -> bool:
        """Check overlap using half-open [start, end) intervals."""
        return self.start_minute < other.end_minute and other.start_minute < self.end_minute
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            'date': self.date,
            'time': self.time,
            'title': self.title,
            'duration': self.duration,
            'startMinute': self.start_minute,
            'endMinute': self.end_minute,
            'lane': self.lane,
        }


def event_from_dict(data: Mapping[str, Any]) -> Event:
    """Create Event from a raw record.
    
    Time and duration values are kept as given apart from numeric coercion of
    duration ("30" -> 30); the layout engine is the one that rejects them.
    """
    raw_date = data.get('date')
    if not raw_date:
        raise EventRecordError(
            f"Event record {data.get('title', 'Untitled')!r} is missing a date"
        )
    try:
        parse_date_key(raw_date)
    except (TypeError, ValueError):
        raise EventRecordError(
            f"Event record {data.get('title', 'Untitled')!r} has date {raw_date!r}, expected YYYY-MM-DD"
        )
    
    raw_duration = data.get('duration')
    if raw_duration is None or raw_duration == "":
        duration = 0
    elif isinstance(raw_duration, bool):
        raise EventRecordError(f"Duration must be a number of minutes, got {raw_duration!r}")
    else:
        try:
            as_float = float(raw_duration)
        except (TypeError, ValueError):
            raise EventRecordError(f"Duration must be a number of minutes, got {raw_duration!r}")
        if not as_float.is_integer():
            raise EventRecordError(f"Duration must be whole minutes, got {raw_duration!r}")
        duration = int(as_float)
    
    return Event(
        date=raw_date,
        time=data.get('time'),
        title=str(data.get('title', '')),
        duration=duration,
    )
