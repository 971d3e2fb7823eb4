"""
Pytest configuration and shared fixtures for branchlog tests.
"""

import pytest

import branchlog
from branchlog import Level, LoggingManager, RecordingWriter


@pytest.fixture(autouse=True)
def reset_global_logging():
    """Keep the process-wide manager in its initial state around each test."""
    branchlog.reset_loggers()
    branchlog.reset_writers()
    yield
    branchlog.reset_loggers()
    branchlog.reset_writers()


@pytest.fixture
def recorder():
    """A writer that keeps entries in memory."""
    return RecordingWriter()


@pytest.fixture
def manager(recorder):
    """Isolated manager whose only writer is the recorder, at TRACE."""
    manager = LoggingManager(writers={})
    manager.register_writer("default", recorder, Level.TRACE)
    return manager


@pytest.fixture
def trace_logger(manager):
    """Logger for "test.writer" that lets every level through."""
    logger = manager.get_logger("test.writer")
    logger.set_log_level(Level.TRACE)
    return logger
