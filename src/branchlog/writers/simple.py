"""Stream writer."""

import threading
from typing import Optional, TextIO

from ..entry import Entry
from ..formatters import DefaultFormatter, Formatter


class SimpleWriter:
    """Writes one formatted line per entry to a text stream."""

    def __init__(self, stream: TextIO, formatter: Optional[Formatter] = None):
        self.stream = stream
        self.formatter = formatter or DefaultFormatter()
        self._lock = threading.Lock()

    def write(self, entry: Entry) -> None:
        line = self.formatter.format(entry)
        with self._lock:
            self.stream.write(line + "\n")
            self.stream.flush()
