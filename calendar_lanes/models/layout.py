# File: calendar_lanes/models/layout.py

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from .event import LaidOutEvent


@dataclass(frozen=True)
class DayLayout:
    """Lane assignment for the events of one date."""
    ordered_events: Tuple[LaidOutEvent, ...] = ()
    lane_count: int = 0
    has_conflict: bool = False
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'orderedEvents': [e.to_dict() for e in self.ordered_events],
            'laneCount': self.lane_count,
            'hasConflict': self.has_conflict,
        }
