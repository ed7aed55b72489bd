"""Month calendar grid and same-day event lane layout."""

from calendar_lanes.processors.month_grid import build_month_matrix, build_month_cells
from calendar_lanes.processors.event_layout import layout_day_events

__version__ = "0.1.0"

__all__ = ["build_month_matrix", "build_month_cells", "layout_day_events"]
