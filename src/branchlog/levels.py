"""
Severity levels.

Levels are totally ordered. UNSPECIFIED sorts below every real level and is
only meaningful as a configuration state: a module at UNSPECIFIED inherits
from its parent.
"""

from enum import IntEnum

from .exceptions.config import InvalidLevelError


class Level(IntEnum):
    """Severity of a log entry."""

    UNSPECIFIED = 0
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    CRITICAL = 6

    def __str__(self) -> str:
        return self.name

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)

    @property
    def short(self) -> str:
        """Four character form used by compact output."""
        return _SHORT_NAMES[self]


_SHORT_NAMES = {
    Level.UNSPECIFIED: "    ",
    Level.TRACE: "TRCE",
    Level.DEBUG: "DEBG",
    Level.INFO: "INFO",
    Level.WARNING: "WARN",
    Level.ERROR: "ERRR",
    Level.CRITICAL: "CRIT",
}

_ALIASES = {"WARN": Level.WARNING}


def parse_level(text: str) -> Level:
    """Parse a level name, ignoring case and surrounding whitespace.

    Raises:
        InvalidLevelError: if the name is not a known level.
    """
    name = text.strip().upper()
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return Level[name]
    except KeyError:
        raise InvalidLevelError(text) from None
