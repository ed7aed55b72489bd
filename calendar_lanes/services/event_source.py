# File: calendar_lanes/services/event_source.py
"""
Event source.
Loads the flat event list from a JSON file or an HTTP endpoint and
groups it by date key.
"""

import json
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple, Union

import requests

from calendar_lanes.core.config_manager import Config
from calendar_lanes.models import (
    CalendarDataError,
    Event,
    EventSourceError,
    ValidationIssue,
    event_from_dict,
)
from calendar_lanes.utils.logger import setup_logger

logger = setup_logger(__name__)


def group_events_by_date(events: Iterable[Event]) -> Dict[str, List[Event]]:
    """Group events by their date key, keeping input order within each date."""
    grouped: Dict[str, List[Event]] = defaultdict(list)
    for event in events:
        grouped[event.date].append(event)
    return dict(grouped)


class EventSource:
    """Reads raw event records from a local file or a URL."""
    
    def __init__(self, location: Union[str, Path, None] = None, timeout: float = Config.HTTP_TIMEOUT):
        """
        Initialize the event source.
        
        Args:
            location: Path to a JSON file or an http(s):// URL
                (default: Config.EVENTS_SOURCE)
            timeout: HTTP timeout in seconds
        """
        self.location = str(location if location is not None else Config.EVENTS_SOURCE)
        self.timeout = timeout
    
    @property
    def is_remote(self) -> bool:
        return self.location.startswith(("http://", "https://"))
    
    def fetch_raw(self) -> List[Dict[str, Any]]:
        """
        Fetch and decode the raw event list.
        
        Returns:
            List of raw event records
        
        Raises:
            EventSourceError: Source unreachable, unreadable or not a JSON list
        """
        if self.is_remote:
            data = self._fetch_remote()
        else:
            data = self._read_file()
        
        if not isinstance(data, list):
            raise EventSourceError(
                f"Expected a JSON list of events from {self.location}, got {type(data).__name__}"
            )
        
        logger.debug(f"Fetched {len(data)} raw event records from {self.location}")
        return data
    
    def _fetch_remote(self) -> Any:
        logger.info(f"Fetching events from {self.location}")
        try:
            response = requests.get(self.location, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as e:
            raise EventSourceError(f"Timed out fetching events from {self.location}") from e
        except requests.exceptions.RequestException as e:
            raise EventSourceError(f"Could not fetch events from {self.location}: {e}") from e
        except ValueError as e:
            raise EventSourceError(f"Invalid JSON from {self.location}: {e}") from e
    
    def _read_file(self) -> Any:
        path = Path(self.location)
        logger.info(f"Reading events from {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except FileNotFoundError as e:
            raise EventSourceError(f"Events file not found: {path}") from e
        except json.JSONDecodeError as e:
            raise EventSourceError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise EventSourceError(f"Could not read {path}: {e}") from e
    
    def load_events(self) -> Tuple[List[Event], List[ValidationIssue]]:
        """
        Fetch the source and convert records into Event objects.
        
        Records that cannot be converted are skipped and reported.
        
        Returns:
            Tuple of (events, issues)
        """
        events: List[Event] = []
        issues: List[ValidationIssue] = []
        
        for index, record in enumerate(self.fetch_raw()):
            if not isinstance(record, dict):
                issue = ValidationIssue(
                    message=f"Expected an object, got {type(record).__name__}",
                    entry_index=index,
                )
                issues.append(issue)
                logger.warning(f"Skipping event record: {issue}")
                continue
            try:
                events.append(event_from_dict(record))
            except CalendarDataError as e:
                issue = ValidationIssue(
                    message=str(e),
                    date_key=record.get('date'),
                    title=record.get('title'),
                    entry_index=index,
                )
                issues.append(issue)
                logger.warning(f"Skipping event record: {issue}")
        
        logger.info(
            f"Loaded {len(events)} events ({len(issues)} skipped) from {self.location}"
        )
        return events, issues
