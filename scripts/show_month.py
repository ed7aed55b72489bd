"""
Month calendar entry point.
Prints the month grid with overlap markers and, optionally, one day's lanes.
"""

import argparse
import json
import sys
from datetime import datetime
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from calendar_lanes.core.config_manager import Config
from calendar_lanes.core.calendar_view import CalendarViewFactory
from calendar_lanes.services.event_source import EventSource
from calendar_lanes.utils.formatting import format_day, format_month
from calendar_lanes.utils.logger import setup_logger

logger = setup_logger(__name__)


def _parse_month(value: str):
    try:
        return datetime.strptime(value, "%Y-%m").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM, got {value!r}")


def _parse_day(value: str):
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Show a month calendar with overlapping events laid out in lanes"
    )
    parser.add_argument("month", nargs="?", type=_parse_month, help="Month to show (YYYY-MM, default: current)")
    parser.add_argument("--source", default=None, help="Events JSON file or URL (default: EVENTS_SOURCE)")
    parser.add_argument("--day", type=_parse_day, help="Also list the lanes of this date (YYYY-MM-DD)")
    parser.add_argument("--previous", type=int, default=0, help="Step back this many months")
    parser.add_argument("--next", type=int, default=0, help="Step forward this many months")
    parser.add_argument("--json", action="store_true", help="Print the laid out month as JSON")
    return parser


def main(argv=None) -> int:
    """
    Main execution function.

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    args = build_parser().parse_args(argv)

    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1

    source = EventSource(args.source) if args.source else EventSource()
    view = CalendarViewFactory.from_source(source, reference_date=args.month)

    for _ in range(args.previous):
        view = view.previous_month()
    for _ in range(args.next):
        view = view.next_month()

    month_view = view.build()

    if args.json:
        print(json.dumps(month_view.to_dict(), indent=2, default=str))
    else:
        print(format_month(month_view))

    if args.day:
        cell = month_view.get_cell(args.day)
        if cell is None:
            logger.error(f"{args.day} is not shown in {month_view.title}")
            return 1
        print()
        print(format_day(cell))

    return 1 if month_view.error else 0


if __name__ == "__main__":
    sys.exit(main())
