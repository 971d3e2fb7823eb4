"""In-memory writer for tests and embedding applications."""

import threading
from typing import List

from ..entry import Entry


class RecordingWriter:
    """Keeps every entry it receives."""

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: List[Entry] = []

    def write(self, entry: Entry) -> None:
        with self._lock:
            self._entries.append(entry)

    def log(self) -> List[Entry]:
        """Return a copy of the entries written so far."""
        with self._lock:
            return list(self._entries)

    def messages(self) -> List[str]:
        with self._lock:
            return [entry.message for entry in self._entries]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
