"""
Writer registry and fan-out.

Writers are registered under unique names together with the minimum level
they accept. Delivery happens in registration order on a snapshot of the
table, so slow writers never hold up registry changes.
"""

import logging
import threading
from typing import Dict, List, Mapping, NamedTuple, Optional, Protocol

from ..entry import Entry
from ..exceptions.writers import (
    DuplicateWriterError,
    NilWriterError,
    WriterNotFoundError,
)
from ..levels import Level

logger = logging.getLogger(__name__)


class Writer(Protocol):
    """Destination for log entries."""

    def write(self, entry: Entry) -> None:
        """Receive an entry the registry has already gated."""


class RegisteredWriter(NamedTuple):
    writer: Writer
    level: Level


class WriterRegistry:
    """Thread-safe, ordered table of named writers."""

    def __init__(self, writers: Optional[Mapping[str, RegisteredWriter]] = None):
        self._lock = threading.Lock()
        self._writers: Dict[str, RegisteredWriter] = {}
        self._min_level: Optional[Level] = None
        if writers:
            self.reset(writers)

    def _update_min_level(self) -> None:
        # Caller holds the lock.
        levels = [registered.level for registered in self._writers.values()]
        self._min_level = min(levels) if levels else None

    def add(self, name: str, writer: Writer, level: Level = Level.TRACE) -> None:
        """Register ``writer`` under ``name``.

        Raises:
            NilWriterError: if ``writer`` is None.
            DuplicateWriterError: if ``name`` is already registered.
        """
        if writer is None:
            raise NilWriterError()
        with self._lock:
            if name in self._writers:
                raise DuplicateWriterError(name)
            self._writers[name] = RegisteredWriter(writer, Level(level))
            self._update_min_level()

    def replace(self, name: str, writer: Writer) -> Writer:
        """Swap the writer registered as ``name``, keeping its level.

        Returns the writer that was replaced.
        """
        if writer is None:
            raise NilWriterError()
        with self._lock:
            registered = self._writers.get(name)
            if registered is None:
                raise WriterNotFoundError(name)
            self._writers[name] = registered._replace(writer=writer)
        return registered.writer

    def install(
        self, name: str, writer: Writer, level: Level = Level.TRACE
    ) -> Optional[RegisteredWriter]:
        """Register ``writer`` as ``name`` at ``level``, overwriting any entry.

        An existing entry keeps its position in the delivery order. Returns
        the entry that was overwritten, if any.
        """
        if writer is None:
            raise NilWriterError()
        with self._lock:
            previous = self._writers.get(name)
            self._writers[name] = RegisteredWriter(writer, Level(level))
            self._update_min_level()
        return previous

    def remove(self, name: str) -> RegisteredWriter:
        """Unregister ``name`` and return its writer and level."""
        with self._lock:
            registered = self._writers.pop(name, None)
            if registered is None:
                raise WriterNotFoundError(name)
            self._update_min_level()
        return registered

    def reset(self, writers: Mapping[str, RegisteredWriter]) -> None:
        """Replace the whole table with ``writers``."""
        installed = {
            name: RegisteredWriter(writer, Level(level))
            for name, (writer, level) in writers.items()
        }
        with self._lock:
            self._writers = installed
            self._update_min_level()

    def will_write(self, level: Level) -> bool:
        """Whether any registered writer accepts ``level``."""
        if level == Level.UNSPECIFIED:
            return False
        min_level = self._min_level
        return min_level is not None and level >= min_level

    def write(self, entry: Entry) -> None:
        """Deliver ``entry`` to every writer whose level admits it.

        An exception raised by one writer is reported on this module's
        logger and delivery carries on with the next writer.
        """
        with self._lock:
            snapshot = list(self._writers.items())
        for name, registered in snapshot:
            if entry.level < registered.level:
                continue
            try:
                registered.writer.write(entry)
            except Exception:
                logger.error("Writer %r failed to write entry", name, exc_info=True)

    def get(self, name: str) -> Optional[RegisteredWriter]:
        with self._lock:
            return self._writers.get(name)

    def names(self) -> List[str]:
        with self._lock:
            return list(self._writers)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._writers

    def __len__(self) -> int:
        with self._lock:
            return len(self._writers)
