"""Log entries handed to writers."""

from dataclasses import dataclass
from datetime import datetime

from .levels import Level


@dataclass(frozen=True)
class Entry:
    """A single accepted log message.

    Entries are only built after the logger and the writer registry have
    both agreed the level will be written.
    """

    level: Level
    module: str
    filename: str
    line: int
    timestamp: datetime
    message: str
