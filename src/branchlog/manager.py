"""
Centralized logger and writer management.

A LoggingManager owns one ModuleTree and one WriterRegistry and hands out
Logger handles bound to both. The package-level functions delegate to a
default, process-wide instance; tests and applications that need isolation
create their own.
"""

import sys
from typing import Dict, Optional, Tuple

from .config.parser import parse_config_string
from .constants import DEFAULT_WRITER_NAME
from .exceptions.writers import NoDefaultWriterError, WriterNotFoundError
from .formatters import DefaultFormatter
from .levels import Level
from .logger import Logger
from .modules import ModuleTree
from .writers.registry import RegisteredWriter, Writer, WriterRegistry
from .writers.simple import SimpleWriter


def default_writers() -> Dict[str, RegisteredWriter]:
    """The initial writer table: stderr with the default format at TRACE."""
    return {
        DEFAULT_WRITER_NAME: RegisteredWriter(
            SimpleWriter(sys.stderr, DefaultFormatter()), Level.TRACE
        )
    }


class LoggingManager:
    """Pairs a module tree with a writer registry."""

    def __init__(
        self,
        root_level: Level = Level.WARNING,
        writers: Optional[Dict[str, RegisteredWriter]] = None,
    ):
        self.modules = ModuleTree(root_level)
        self._initial_writers = None if writers is None else dict(writers)
        self.writers = WriterRegistry(self._initial_table())

    def _initial_table(self) -> Dict[str, RegisteredWriter]:
        if self._initial_writers is None:
            return default_writers()
        return dict(self._initial_writers)

    def get_logger(self, name: str) -> Logger:
        """Get the logger for ``name``, creating it and its parents."""
        return Logger(self.modules, self.modules.get(name), self.writers)

    def logger_info(self) -> str:
        """Configured levels in the format accepted by configure_loggers."""
        return self.modules.config()

    def configure_loggers(self, specification: str) -> None:
        """Apply a logger specification string.

        The whole string is parsed before any level changes, so an invalid
        specification leaves the configuration untouched.
        """
        levels = parse_config_string(specification)
        for name, level in levels.items():
            self.modules.set_level(self.modules.get(name), level)

    def reset_loggers(self) -> None:
        """Set all modules to UNSPECIFIED and the root to its default."""
        self.modules.reset_levels()

    def reset_writers(self) -> None:
        """Put back the writers the manager was created with.

        A manager created without a table gets a fresh stderr writer.
        """
        self.writers.reset(self._initial_table())

    def register_writer(
        self, name: str, writer: Writer, min_level: Level = Level.TRACE
    ) -> None:
        """Add a writer that receives entries at ``min_level`` and above."""
        self.writers.add(name, writer, min_level)

    def remove_writer(self, name: str) -> Tuple[Writer, Level]:
        """Remove the writer called ``name`` and return it with its level."""
        registered = self.writers.remove(name)
        return registered.writer, registered.level

    def replace_default_writer(self, writer: Writer) -> Writer:
        """Swap the "default" writer, keeping its level.

        Returns the previous default writer.
        """
        try:
            return self.writers.replace(DEFAULT_WRITER_NAME, writer)
        except WriterNotFoundError:
            raise NoDefaultWriterError(DEFAULT_WRITER_NAME) from None

    def will_write(self, level: Level) -> bool:
        """Whether any writer would accept an entry at ``level``."""
        return self.writers.will_write(level)


# Global logging manager instance
logging_manager = LoggingManager()
