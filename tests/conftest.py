# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data for all tests.
"""

import json
import os
import sys
import tempfile
from datetime import date
from pathlib import Path

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Keep test log files out of the project tree
os.environ.setdefault("LOGS_DIR", os.path.join(tempfile.gettempdir(), "calendar_lanes_test_logs"))
os.environ.setdefault("LOG_LEVEL", "WARNING")

from calendar_lanes.models import Event


# ==================== Date Fixtures ====================

@pytest.fixture
def april_2026():
    """A 30-day month starting on a Wednesday."""
    return date(2026, 4, 15)


@pytest.fixture
def fixed_today():
    """Date treated as today in view tests."""
    return date(2026, 10, 19)


# ==================== Event Fixtures ====================

@pytest.fixture
def overlapping_events():
    """Three events where the second overlaps the first."""
    return [
        Event(date="2026-10-12", time="09:00", title="Planning", duration=60),
        Event(date="2026-10-12", time="09:30", title="Vendor call", duration=30),
        Event(date="2026-10-12", time="10:30", title="1:1", duration=15),
    ]


@pytest.fixture
def back_to_back_events():
    """Two events where the second starts exactly when the first ends."""
    return [
        Event(date="2026-10-05", time="09:00", title="Standup", duration=30),
        Event(date="2026-10-05", time="09:30", title="Review", duration=30),
    ]


@pytest.fixture
def raw_event_records():
    """Raw records as delivered by the event source."""
    return [
        {'date': '2026-10-05', 'time': '09:00', 'title': 'Team standup', 'duration': 15},
        {'date': '2026-10-12', 'time': '09:00', 'title': 'Planning', 'duration': 60},
        {'date': '2026-10-12', 'time': '09:30', 'title': 'Vendor call', 'duration': 30},
        {'date': '2026-10-23', 'time': '18:00', 'title': 'Concert'},
    ]


@pytest.fixture
def events_file(tmp_path, raw_event_records):
    """Write the raw records to a temporary events.json."""
    path = tmp_path / "events.json"
    path.write_text(json.dumps(raw_event_records), encoding="utf-8")
    return path
