# File: calendar_lanes/core/config_manager.py
"""
Centralized configuration management for Calendar Lanes.
Loads settings from environment variables and the .env file.
"""

import os
from pathlib import Path
from typing import List

import pytz
from dotenv import load_dotenv

from calendar_lanes.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


class Config:
    """Application configuration singleton."""

    # Sample data shipped inside the package
    DATA_DIR = Path(__file__).parent.parent / "data"  # calendar_lanes/data/

    # Files
    DEFAULT_EVENTS_FILE = DATA_DIR / "events.json"

    # Event source: a local JSON file or an http(s) URL
    EVENTS_SOURCE = os.getenv("EVENTS_SOURCE", str(DEFAULT_EVENTS_FILE))
    HTTP_TIMEOUT = _float_env("HTTP_TIMEOUT", 10.0)

    # Only used to decide which cell is "today"; event times are never converted
    DISPLAY_TIMEZONE = os.getenv("TIMEZONE", "Europe/Amsterdam")

    # Grid settings
    WEEKDAY_LABELS: List[str] = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']
    MONTH_TITLE_FORMAT = "%B %Y"
    LOAD_ERROR_MESSAGE = "Failed to load events"

    @classmethod
    def validate(cls) -> bool:
        """Validate that the configured values are usable."""
        errors = []

        if cls.DISPLAY_TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"Unknown timezone: {cls.DISPLAY_TIMEZONE}")

        if cls.HTTP_TIMEOUT <= 0:
            errors.append(f"HTTP_TIMEOUT must be positive, got {cls.HTTP_TIMEOUT}")

        if not cls.EVENTS_SOURCE:
            errors.append("EVENTS_SOURCE is empty")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
