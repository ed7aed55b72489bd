# File: calendar_lanes/processors/event_layout.py
"""
Lane layout for the events of a single date.

Events are stable-sorted by start time and placed greedily into the first
lane whose last event has already ended. This is the classic interval
partitioning algorithm and opens the minimum number of lanes. Intervals are
half-open: an event ending at 10:00 does not overlap one starting at 10:00.
"""

from typing import Any, Iterable, List, Mapping, Tuple, Union

from calendar_lanes.models import (
    DayLayout,
    Event,
    InvalidDurationError,
    LaidOutEvent,
    event_from_dict,
    parse_time_to_minutes,
)

EventInput = Union[Event, Mapping[str, Any]]


def _as_event(item: EventInput) -> Event:
    if isinstance(item, Event):
        return item
    return event_from_dict(item)


def event_interval(event: EventInput) -> Tuple[int, int]:
    """
    Compute the [start, end) interval of an event in minutes since midnight.
    
    Raises:
        MalformedTimeError: time is not a valid HH:MM value
        InvalidDurationError: duration is negative or not an integer
    """
    event = _as_event(event)
    start = parse_time_to_minutes(event.time, event.title)
    
    duration = event.duration_minutes
    if isinstance(duration, bool) or not isinstance(duration, int) or duration < 0:
        raise InvalidDurationError(duration, event.title)
    
    return start, start + duration


def layout_day_events(events: Iterable[EventInput]) -> DayLayout:
    """
    Order a day's events and assign each a non-overlapping lane.
    
    Every event is validated before anything is sorted or placed, so a
    malformed event fails the whole call without a partial layout.
    
    Args:
        events: Events (or raw event records) of one date, in input order
    
    Returns:
        DayLayout with the events sorted by start time (ties keep input
        order), the number of lanes opened and whether any overlap was seen
    """
    measured: List[Tuple[Event, int, int]] = []
    for item in events:
        event = _as_event(item)
        start, end = event_interval(event)
        measured.append((event, start, end))
    
    # list.sort is stable, equal start times keep input order
    measured.sort(key=lambda entry: entry[1])
    
    lane_ends: List[int] = []
    has_conflict = False
    placed: List[LaidOutEvent] = []
    
    for event, start, end in measured:
        lane = None
        for index, last_end in enumerate(lane_ends):
            if last_end <= start:
                lane = index
                break
            has_conflict = True
        
        if lane is None:
            lane = len(lane_ends)
            lane_ends.append(end)
        else:
            lane_ends[lane] = end
        
        placed.append(LaidOutEvent(
            date=event.date,
            time=event.time,
            title=event.title,
            duration=end - start,
            start_minute=start,
            end_minute=end,
            lane=lane,
        ))
    
    return DayLayout(
        ordered_events=tuple(placed),
        lane_count=len(lane_ends),
        has_conflict=has_conflict,
    )
