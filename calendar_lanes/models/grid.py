# File: calendar_lanes/models/grid.py

from dataclasses import dataclass
from datetime import date
from typing import List

from .common import format_date_key

MonthMatrix = List[List[date]]


@dataclass(frozen=True)
class DateCell:
    """A calendar date tagged with whether it belongs to the displayed month."""
    date: date
    in_current_month: bool
    
    @property
    def key(self) -> str:
        """Date key used to look up the day's events."""
        return format_date_key(self.date)
