# File: calendar_lanes/utils/formatting.py
"""
Plain-text rendering of a laid out month for terminal output.
"""

from typing import List

from calendar_lanes.core.config_manager import Config
from calendar_lanes.core.calendar_view import DayCell, MonthView

CELL_WIDTH = 6
TODAY_MARK = "*"
CONFLICT_MARK = "!"


def format_minutes(minutes: int) -> str:
    """Format minutes since midnight as HH:MM."""
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def format_cell(cell: DayCell) -> str:
    """
    Render one date cell, right-aligned to CELL_WIDTH.
    
    Out-of-month days are wrapped in parentheses, today gets '*' and a day
    with overlapping events gets '!'.
    """
    text = str(cell.date.day)
    if not cell.in_current_month:
        text = f"({text})"
    if cell.is_today:
        text += TODAY_MARK
    if cell.has_conflict:
        text += CONFLICT_MARK
    return text.rjust(CELL_WIDTH)


def format_month(month_view: MonthView) -> str:
    """Render the month grid with a title and weekday header."""
    lines: List[str] = []
    width = CELL_WIDTH * len(Config.WEEKDAY_LABELS)
    
    lines.append(month_view.title.center(width).rstrip())
    if month_view.error:
        lines.append(f"[{month_view.error}]")
    lines.append("".join(label.rjust(CELL_WIDTH) for label in Config.WEEKDAY_LABELS))
    
    for week in month_view.weeks:
        lines.append("".join(format_cell(cell) for cell in week))
    
    if month_view.issues:
        lines.append("")
        lines.append(f"{len(month_view.issues)} event(s) skipped:")
        for issue in month_view.issues:
            lines.append(f"  - {issue}")
    
    return "\n".join(lines)


def format_day(cell: DayCell) -> str:
    """List a day's events with their lanes, in display order."""
    layout = cell.layout
    header = f"{cell.key}: {len(layout.ordered_events)} event(s) in {layout.lane_count} lane(s)"
    if layout.has_conflict:
        header += " - overlapping events"
    
    lines = [header]
    for event in layout.ordered_events:
        lines.append(
            f"  [lane {event.lane}] {event.time}-{format_minutes(event.end_minute)} "
            f"{event.title} ({event.duration}m)"
        )
    return "\n".join(lines)
