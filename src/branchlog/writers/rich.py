"""
Colourised terminal writer.

Uses Rich to highlight the level of each entry. Layout matches
DefaultFormatter so output stays greppable with colours stripped.
"""

import os
from typing import Optional

from rich.console import Console
from rich.text import Text

from ..constants import TIMESTAMP_FORMAT
from ..entry import Entry
from ..levels import Level

LEVEL_STYLES = {
    Level.TRACE: "dim",
    Level.DEBUG: "green",
    Level.INFO: "bright_blue",
    Level.WARNING: "yellow",
    Level.ERROR: "bright_red",
    Level.CRITICAL: "bold white on red",
}


class RichWriter:
    """Writes entries to a Rich console, one styled line each."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)

    def render(self, entry: Entry) -> Text:
        text = Text()
        text.append(entry.timestamp.strftime(TIMESTAMP_FORMAT), style="dim")
        text.append(" ")
        text.append(str(entry.level), style=LEVEL_STYLES.get(entry.level, ""))
        text.append(f" {entry.module} ", style="cyan")
        text.append(f"{os.path.basename(entry.filename)}:{entry.line}", style="dim")
        text.append(" ")
        text.append(entry.message)
        return text

    def write(self, entry: Entry) -> None:
        self.console.print(self.render(entry), soft_wrap=True, highlight=False)
