# File: calendar_lanes/models/issues.py

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ValidationIssue:
    """An event that was skipped, and why."""
    message: str
    date_key: Optional[str] = None
    title: Optional[str] = None
    entry_index: Optional[int] = None
    
    def __str__(self) -> str:
        """String representation of the issue."""
        parts = []
        if self.entry_index is not None:
            parts.append(f"Entry {self.entry_index}")
        if self.date_key:
            parts.append(self.date_key)
        if self.title:
            parts.append(f"'{self.title}'")
        if parts:
            return f"{' '.join(parts)}: {self.message}"
        return self.message
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            'message': self.message,
            'date': self.date_key,
            'title': self.title,
            'entryIndex': self.entry_index,
        }
