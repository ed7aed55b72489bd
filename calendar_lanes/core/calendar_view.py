# File: calendar_lanes/core/calendar_view.py
"""
Calendar view coordinator.
Combines the month grid with the lane layout of every visible date.

The reference month, the grouped events and the load error are plain
inputs; navigation returns a new view instead of mutating this one.
"""

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

import pytz

from calendar_lanes.core.config_manager import Config
from calendar_lanes.models import (
    CalendarDataError,
    DayLayout,
    Event,
    EventSourceError,
    ValidationIssue,
    format_date_key,
    as_date,
)
from calendar_lanes.processors.event_layout import event_interval, layout_day_events
from calendar_lanes.processors.month_grid import build_month_cells, shift_month
from calendar_lanes.services.event_source import EventSource, group_events_by_date
from calendar_lanes.utils.logger import setup_logger

logger = setup_logger(__name__)


def today_in(timezone: str = Config.DISPLAY_TIMEZONE) -> datetime.date:
    """Current date in the given timezone."""
    return datetime.datetime.now(pytz.timezone(timezone)).date()


@dataclass(frozen=True)
class DayCell:
    """One rendered date of the month grid."""
    date: datetime.date
    in_current_month: bool
    is_today: bool
    layout: DayLayout = field(default_factory=DayLayout)

    @property
    def key(self) -> str:
        return format_date_key(self.date)

    @property
    def has_conflict(self) -> bool:
        return self.layout.has_conflict

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'date': self.key,
            'inCurrentMonth': self.in_current_month,
            'isToday': self.is_today,
            **self.layout.to_dict(),
        }


@dataclass
class MonthView:
    """A fully laid out month, ready to render."""
    reference_date: datetime.date
    weeks: List[List[DayCell]]
    issues: List[ValidationIssue] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def title(self) -> str:
        """Month heading, e.g. 'October 2026'."""
        return self.reference_date.strftime(Config.MONTH_TITLE_FORMAT)

    def cells(self) -> List[DayCell]:
        return [cell for week in self.weeks for cell in week]

    def get_cell(self, day: datetime.date) -> Optional[DayCell]:
        """Find the cell for a date, or None if it is not on the grid."""
        for cell in self.cells():
            if cell.date == day:
                return cell
        return None

    def conflict_days(self) -> List[DayCell]:
        """Get all cells whose events overlap."""
        return [cell for cell in self.cells() if cell.has_conflict]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'title': self.title,
            'weeks': [[cell.to_dict() for cell in week] for week in self.weeks],
            'issues': [issue.to_dict() for issue in self.issues],
            'error': self.error,
        }


class CalendarView:
    """Holds the displayed month and lays out its dates on demand."""

    def __init__(
        self,
        events_by_date: Mapping[str, Sequence[Event]],
        reference_date: Optional[datetime.date] = None,
        today: Optional[datetime.date] = None,
        issues: Optional[Sequence[ValidationIssue]] = None,
        error: Optional[str] = None,
    ):
        """
        Initialize the view.

        Args:
            events_by_date: Events grouped by 'YYYY-MM-DD' key
            reference_date: Any date in the month to show (default: today)
            today: Date highlighted as today (default: now in Config.DISPLAY_TIMEZONE)
            issues: Problems already found while loading events
            error: Load error message shown instead of events
        """
        self.today = as_date(today) if today is not None else today_in()
        self.reference_date = as_date(reference_date) if reference_date is not None else self.today
        self.events_by_date = events_by_date
        self.load_issues = list(issues or [])
        self.error = error

    def _shifted(self, months: int) -> 'CalendarView':
        return CalendarView(
            self.events_by_date,
            reference_date=shift_month(self.reference_date, months),
            today=self.today,
            issues=self.load_issues,
            error=self.error,
        )

    def next_month(self) -> 'CalendarView':
        """View of the following month."""
        return self._shifted(1)

    def previous_month(self) -> 'CalendarView':
        """View of the preceding month."""
        return self._shifted(-1)

    def layout_day(self, date_key: str, issues: List[ValidationIssue]) -> DayLayout:
        """
        Lay out one date, skipping events that cannot be placed.

        Each skipped event is appended to `issues`; the remaining events of
        the day are still laid out.
        """
        events = self.events_by_date.get(date_key, [])
        if not events:
            return DayLayout()

        try:
            return layout_day_events(events)
        except CalendarDataError:
            pass

        valid: List[Event] = []
        for event in events:
            try:
                event_interval(event)
            except CalendarDataError as e:
                issue = ValidationIssue(message=str(e), date_key=date_key, title=event.title)
                issues.append(issue)
                logger.warning(f"Skipping event: {issue}")
                continue
            valid.append(event)

        return layout_day_events(valid)

    def build(self) -> MonthView:
        """Build the month grid with every visible date laid out."""
        issues: List[ValidationIssue] = list(self.load_issues)
        weeks: List[List[DayCell]] = []

        for week in build_month_cells(self.reference_date):
            row = []
            for cell in week:
                row.append(DayCell(
                    date=cell.date,
                    in_current_month=cell.in_current_month,
                    is_today=cell.date == self.today,
                    layout=self.layout_day(cell.key, issues),
                ))
            weeks.append(row)

        view = MonthView(
            reference_date=self.reference_date,
            weeks=weeks,
            issues=issues,
            error=self.error,
        )
        logger.debug(
            f"Built {view.title}: {len(weeks)} weeks, "
            f"{len(view.conflict_days())} days with overlaps, {len(issues)} issues"
        )
        return view


class CalendarViewFactory:
    """Factory for creating calendar views from an event source."""

    @staticmethod
    def from_source(
        source: EventSource,
        reference_date: Optional[datetime.date] = None,
        today: Optional[datetime.date] = None,
    ) -> CalendarView:
        """
        Load events and create a view.

        A source failure does not raise; the view carries the load error
        and an empty event map so the grid can still be shown.
        """
        try:
            events, issues = source.load_events()
        except EventSourceError as e:
            logger.error(f"{Config.LOAD_ERROR_MESSAGE}: {e}")
            return CalendarView({}, reference_date=reference_date, today=today,
                                error=Config.LOAD_ERROR_MESSAGE)

        return CalendarView(
            group_events_by_date(events),
            reference_date=reference_date,
            today=today,
            issues=issues,
        )
