"""
Entry formatters.

Formatters turn an Entry into a display string. The core never formats
entries itself; writers such as SimpleWriter do.
"""

import json
import os
from typing import Optional, Protocol

from .constants import TIMESTAMP_FORMAT
from .entry import Entry


class Formatter(Protocol):
    def format(self, entry: Entry) -> str:
        """Render ``entry`` as a single line."""


class DefaultFormatter:
    """Human-readable single line format.

    ``2024-01-20 12:00:00 INFO app.db models.py:42 message``. Timestamps
    are shown in UTC and only the base name of the source file is kept.
    """

    def format(self, entry: Entry) -> str:
        return "{} {} {} {}:{} {}".format(
            entry.timestamp.strftime(TIMESTAMP_FORMAT),
            entry.level,
            entry.module,
            os.path.basename(entry.filename),
            entry.line,
            entry.message,
        )


class StructuredFormatter:
    """JSON formatter for structured log output."""

    def __init__(self, service_name: Optional[str] = None):
        self.service_name = service_name

    def format(self, entry: Entry) -> str:
        """Format entry as JSON."""
        log_entry = {
            "timestamp": entry.timestamp.isoformat(),
            "level": str(entry.level),
            "module": entry.module,
            "filename": entry.filename,
            "line": entry.line,
            "message": entry.message,
        }

        if self.service_name:
            log_entry["service"] = self.service_name

        return json.dumps(log_entry, default=str)
