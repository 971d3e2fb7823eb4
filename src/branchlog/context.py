"""
Logging context management and decorators.

Provides a decorator and a context manager that log entry and exit
messages around a block of code.
"""

from functools import wraps
from typing import Optional, Union

from .levels import Level, parse_level
from .logger import Logger


def _resolve_level(level: Union[str, Level]) -> Level:
    return parse_level(level) if isinstance(level, str) else Level(level)


def logged(level: Union[str, Level] = "debug", logger: Optional[Logger] = None):
    """Decorator to log calls to the wrapped function.

    Failures are logged at ERROR and re-raised.
    """
    log_level = _resolve_level(level)

    def decorator(func):
        func_logger = logger
        if func_logger is None:
            from .manager import logging_manager

            func_logger = logging_manager.get_logger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            func_logger.log(log_level, "Calling %s", func.__name__, stacklevel=2)
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                func_logger.error("Failed %s: %s", func.__name__, e, stacklevel=2)
                raise
            func_logger.log(log_level, "Completed %s", func.__name__, stacklevel=2)
            return result
        return wrapper
    return decorator


class LoggingContext:
    """Context manager for logging with entry/exit messages."""

    def __init__(self, entry_msg=None, success_msg=None, failure_msg=None,
                 logger: Optional[Logger] = None, entry_level=Level.DEBUG,
                 success_level=Level.INFO, failure_level=Level.ERROR):
        self.entry_msg = entry_msg
        self.success_msg = success_msg
        self.failure_msg = failure_msg

        if logger is None:
            from .manager import logging_manager

            logger = logging_manager.get_logger(__name__)
        self.logger = logger

        self.entry_level = _resolve_level(entry_level)
        self.success_level = _resolve_level(success_level)
        self.failure_level = _resolve_level(failure_level)

    def __enter__(self):
        if self.entry_msg:
            self.logger.log(self.entry_level, self.entry_msg, stacklevel=2)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            if self.success_msg:
                self.logger.log(self.success_level, self.success_msg, stacklevel=2)
        elif self.failure_msg:
            self.logger.log(
                self.failure_level, "%s: %s", self.failure_msg, exc_value, stacklevel=2
            )
