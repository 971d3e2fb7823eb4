"""
branchlog: hierarchical module logging

Named loggers form a tree by their dotted names. Each module may set its
own level or inherit one from its nearest configured ancestor, and every
accepted entry is fanned out to a set of named writers, each with its own
minimum level.

Package layout:
- levels: Level enum and parse_level
- modules: ModuleTree with level inheritance
- logger: Logger handles
- writers: WriterRegistry and writer implementations
- formatters: DefaultFormatter and StructuredFormatter
- manager: LoggingManager and the global instance
- config: logger specification strings and environment settings
- context: logged decorator and LoggingContext
"""

__version__ = "0.1.0"

from .config import BranchlogSettings, apply_settings, parse_config_string
from .context import LoggingContext, logged
from .entry import Entry
from .exceptions import (
    BranchlogError,
    ConfigurationError,
    DuplicateWriterError,
    InvalidLevelError,
    InvalidSpecificationError,
    NilWriterError,
    NoDefaultWriterError,
    WriterError,
    WriterNotFoundError,
)
from .formatters import DefaultFormatter, StructuredFormatter
from .levels import Level, parse_level
from .logger import Logger
from .manager import LoggingManager, default_writers, logging_manager
from .writers import RecordingWriter, RichWriter, SimpleWriter, WriterRegistry

UNSPECIFIED = Level.UNSPECIFIED
TRACE = Level.TRACE
DEBUG = Level.DEBUG
INFO = Level.INFO
WARNING = Level.WARNING
ERROR = Level.ERROR
CRITICAL = Level.CRITICAL

# Make logging manager methods available directly
get_logger = logging_manager.get_logger
logger_info = logging_manager.logger_info
configure_loggers = logging_manager.configure_loggers
reset_loggers = logging_manager.reset_loggers
reset_writers = logging_manager.reset_writers
register_writer = logging_manager.register_writer
remove_writer = logging_manager.remove_writer
replace_default_writer = logging_manager.replace_default_writer
will_write = logging_manager.will_write

__all__ = [
    # Levels
    "Level",
    "parse_level",
    "UNSPECIFIED",
    "TRACE",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
    # Core interfaces
    "Entry",
    "Logger",
    "LoggingManager",
    "logging_manager",
    "default_writers",
    "get_logger",
    "logger_info",
    "configure_loggers",
    "reset_loggers",
    "reset_writers",
    "register_writer",
    "remove_writer",
    "replace_default_writer",
    "will_write",
    # Writers and formatters
    "WriterRegistry",
    "SimpleWriter",
    "RichWriter",
    "RecordingWriter",
    "DefaultFormatter",
    "StructuredFormatter",
    # Configuration
    "parse_config_string",
    "BranchlogSettings",
    "apply_settings",
    # Context management
    "LoggingContext",
    "logged",
    # Exceptions
    "BranchlogError",
    "WriterError",
    "DuplicateWriterError",
    "NilWriterError",
    "WriterNotFoundError",
    "NoDefaultWriterError",
    "ConfigurationError",
    "InvalidLevelError",
    "InvalidSpecificationError",
]
