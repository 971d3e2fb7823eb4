"""
Logger handles.

A Logger is a lightweight handle on one module of a ModuleTree plus the
WriterRegistry its entries go to. Handles for the same name share the
module's level, so configuring one is visible through all of them.
"""

import logging
import sys
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Tuple

from .constants import MODULE_SEPARATOR
from .entry import Entry
from .levels import Level
from .modules import ModuleTree, display_name
from .writers.registry import WriterRegistry

logger = logging.getLogger(__name__)


class Logger:
    """Handle used by application code to emit log messages."""

    __slots__ = ("_tree", "_key", "_writers")

    def __init__(self, tree: ModuleTree, key: str, writers: WriterRegistry):
        self._tree = tree
        self._key = key
        self._writers = writers

    @property
    def name(self) -> str:
        """Normalized module name, ``<root>`` for the root logger."""
        return display_name(self._key)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Logger):
            return NotImplemented
        return self._tree is other._tree and self._key == other._key

    def __hash__(self) -> int:
        return hash((id(self._tree), self._key))

    def __repr__(self) -> str:
        return f"Logger({self.name!r})"

    def parent(self) -> "Logger":
        """Logger of the enclosing module. The root is its own parent."""
        key = self._tree.parent(self._key)
        if key is None:
            return self
        return Logger(self._tree, key, self._writers)

    def child(self, name: str) -> "Logger":
        """Logger for ``name`` nested under this module."""
        full_name = f"{self._key}{MODULE_SEPARATOR}{name}" if self._key else name
        return Logger(self._tree, self._tree.get(full_name), self._writers)

    def log_level(self) -> Level:
        """Level configured on this module, possibly UNSPECIFIED."""
        return self._tree.level(self._key)

    def effective_log_level(self) -> Level:
        """Level inherited from the nearest configured ancestor."""
        return self._tree.effective_level(self._key)

    def set_log_level(self, level: Level) -> None:
        """Configure this module. UNSPECIFIED makes it inherit again."""
        self._tree.set_level(self._key, level)

    def is_level_enabled(self, level: Level) -> bool:
        """Whether a message at ``level`` would be written.

        This is the only check done before a message is formatted.
        """
        if level == Level.UNSPECIFIED:
            return False
        effective = self._tree.effective_level(self._key)
        if effective == Level.UNSPECIFIED or level < effective:
            return False
        return self._writers.will_write(level)

    def is_trace_enabled(self) -> bool:
        return self.is_level_enabled(Level.TRACE)

    def is_debug_enabled(self) -> bool:
        return self.is_level_enabled(Level.DEBUG)

    def is_info_enabled(self) -> bool:
        return self.is_level_enabled(Level.INFO)

    def is_warning_enabled(self) -> bool:
        return self.is_level_enabled(Level.WARNING)

    def is_error_enabled(self) -> bool:
        return self.is_level_enabled(Level.ERROR)

    def is_critical_enabled(self) -> bool:
        return self.is_level_enabled(Level.CRITICAL)

    def _log(self, level: Level, msg: str, args: tuple, stacklevel: int) -> None:
        if not self.is_level_enabled(level):
            return
        # Frame 0 is _log, 1 the public method, 2 its caller.
        filename, line = _caller(stacklevel + 1)
        message = _format_message(msg, args)
        entry = Entry(
            level=Level(level),
            module=self.name,
            filename=filename,
            line=line,
            timestamp=datetime.now(timezone.utc),
            message=message,
        )
        self._writers.write(entry)

    def log(self, level: Level, msg: str, *args, stacklevel: int = 1) -> None:
        """Log ``msg % args`` at ``level``.

        ``stacklevel`` selects the frame reported as the call site, as with
        the standard library: 1 is the direct caller.
        """
        self._log(level, msg, args, stacklevel)

    def trace(self, msg: str, *args, stacklevel: int = 1) -> None:
        self._log(Level.TRACE, msg, args, stacklevel)

    def debug(self, msg: str, *args, stacklevel: int = 1) -> None:
        self._log(Level.DEBUG, msg, args, stacklevel)

    def info(self, msg: str, *args, stacklevel: int = 1) -> None:
        self._log(Level.INFO, msg, args, stacklevel)

    def warning(self, msg: str, *args, stacklevel: int = 1) -> None:
        self._log(Level.WARNING, msg, args, stacklevel)

    def error(self, msg: str, *args, stacklevel: int = 1) -> None:
        self._log(Level.ERROR, msg, args, stacklevel)

    def critical(self, msg: str, *args, stacklevel: int = 1) -> None:
        self._log(Level.CRITICAL, msg, args, stacklevel)


def _format_message(msg: str, args: tuple) -> str:
    if not args:
        return str(msg)
    # A lone mapping feeds %(name)s placeholders, as with LogRecord.
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        args = args[0]
    try:
        return str(msg) % args
    except (TypeError, ValueError, KeyError):
        logger.error("Could not format log message %r with %r", msg, args, exc_info=True)
        return f"{msg} {args!r}"


def _caller(depth: int) -> Tuple[str, int]:
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return "unknown", 0
    return frame.f_code.co_filename, frame.f_lineno
