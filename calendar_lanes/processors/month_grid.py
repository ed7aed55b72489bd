# File: calendar_lanes/processors/month_grid.py
"""
Month grid construction.
Builds the whole-week matrix of dates shown for a month, Sunday first.
"""

import calendar
from datetime import date, datetime, timedelta
from typing import List, Union

from calendar_lanes.models import DateCell, MonthMatrix, as_date

SUNDAY = calendar.SUNDAY  # 6, matches date.weekday()
DAYS_PER_WEEK = 7

_SUNDAY_FIRST = calendar.Calendar(firstweekday=SUNDAY)

DateLike = Union[date, datetime]


def start_of_month(reference_date: DateLike) -> date:
    """First day of the reference date's month."""
    return as_date(reference_date).replace(day=1)


def end_of_month(reference_date: DateLike) -> date:
    """Last day of the reference date's month."""
    day = as_date(reference_date)
    return day.replace(day=calendar.monthrange(day.year, day.month)[1])


def start_of_week(day: DateLike) -> date:
    """The Sunday on or before the given date."""
    day = as_date(day)
    return day - timedelta(days=(day.weekday() - SUNDAY) % DAYS_PER_WEEK)


def end_of_week(day: DateLike) -> date:
    """The Saturday on or after the given date."""
    return start_of_week(day) + timedelta(days=DAYS_PER_WEEK - 1)


def shift_month(reference_date: DateLike, months: int) -> date:
    """
    Move a date by whole months.
    
    The day is clamped to the length of the target month, so
    31 January + 1 month is 28 (or 29) February.
    """
    day = as_date(reference_date)
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def build_month_matrix(reference_date: DateLike) -> MonthMatrix:
    """
    Build the weeks of dates displayed for the reference date's month.
    
    Args:
        reference_date: Any date; only its year and month are used
    
    Returns:
        4, 5 or 6 rows of exactly 7 consecutive dates, the first row starting
        on the Sunday on or before the 1st and the last row ending on the
        Saturday on or after the last day of the month
    """
    day = as_date(reference_date)
    return _SUNDAY_FIRST.monthdatescalendar(day.year, day.month)


def build_month_cells(reference_date: DateLike) -> List[List[DateCell]]:
    """Same grid as build_month_matrix with each date tagged in/out of month."""
    month_start = start_of_month(reference_date)
    return [
        [
            DateCell(
                date=day,
                in_current_month=(day.year, day.month) == (month_start.year, month_start.month),
            )
            for day in week
        ]
        for week in build_month_matrix(reference_date)
    ]
