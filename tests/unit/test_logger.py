"""
Unit tests for Logger handles.

Tests level accessors, the emission gate and entry construction.
"""

import os
from datetime import datetime, timezone
from unittest.mock import Mock, patch

import pytest

from branchlog import Level, LoggingManager, RecordingWriter


@pytest.mark.unit
class TestLoggerLevels:
    """Test level accessors on Logger."""

    def test_name_is_normalized(self, manager):
        assert manager.get_logger("TESTING.MODULE").name == "testing.module"
        assert manager.get_logger("Testing").name == "testing"

    def test_root_logger(self, manager):
        root = manager.get_logger("")

        assert root.name == "<root>"
        assert root.log_level() == Level.WARNING
        assert root.effective_log_level() == Level.WARNING
        assert manager.get_logger("<root>") == root

    def test_new_logger_inherits_root(self, manager):
        logger = manager.get_logger("testing")

        assert logger.log_level() == Level.UNSPECIFIED
        assert logger.effective_log_level() == Level.WARNING

    def test_handles_share_level(self, manager):
        logger1 = manager.get_logger("testing.module")
        logger2 = manager.get_logger("testing.module")

        logger1.set_log_level(Level.INFO)

        assert logger1 == logger2
        assert hash(logger1) == hash(logger2)
        assert logger2.log_level() == Level.INFO
        assert logger2.is_info_enabled() is True

    def test_set_unspecified_inherits_again(self, manager):
        logger = manager.get_logger("a.b")
        logger.set_log_level(Level.DEBUG)
        logger.set_log_level(Level.UNSPECIFIED)

        assert logger.effective_log_level() == Level.WARNING

    def test_handles_from_different_managers_differ(self, manager):
        other = LoggingManager(writers={})
        assert manager.get_logger("a") != other.get_logger("a")

    def test_parent_and_child(self, manager):
        logger = manager.get_logger("a.b")

        assert logger.parent() == manager.get_logger("a")
        assert logger.parent().parent() == manager.get_logger("")
        assert manager.get_logger("").parent() == manager.get_logger("")
        assert logger.child("C").name == "a.b.c"
        assert manager.get_logger("").child("x").name == "x"

    def test_repr(self, manager):
        assert repr(manager.get_logger("a.b")) == "Logger('a.b')"


@pytest.mark.unit
class TestLoggerGate:
    """Test is_level_enabled and the per-level predicates."""

    def test_levels_below_effective_are_disabled(self, manager):
        logger = manager.get_logger("gate")
        logger.set_log_level(Level.WARNING)

        assert logger.is_debug_enabled() is False
        assert logger.is_info_enabled() is False
        assert logger.is_warning_enabled() is True
        assert logger.is_error_enabled() is True
        assert logger.is_critical_enabled() is True

    def test_trace_logger_enables_everything(self, trace_logger):
        assert trace_logger.is_trace_enabled() is True
        assert trace_logger.is_debug_enabled() is True

    def test_unspecified_is_never_enabled(self, trace_logger):
        assert trace_logger.is_level_enabled(Level.UNSPECIFIED) is False

    def test_gate_consults_writers(self, manager, trace_logger):
        manager.remove_writer("default")
        assert trace_logger.is_critical_enabled() is False

        manager.register_writer("errors", RecordingWriter(), Level.ERROR)
        assert trace_logger.is_warning_enabled() is False
        assert trace_logger.is_error_enabled() is True

    def test_root_unspecified_blocks_everything(self, manager, recorder):
        logger = manager.get_logger("quiet")
        manager.get_logger("").set_log_level(Level.UNSPECIFIED)

        assert logger.effective_log_level() == Level.UNSPECIFIED
        for level in Level:
            assert logger.is_level_enabled(level) is False

        logger.critical("dropped")
        assert recorder.log() == []

    def test_disabled_call_does_not_format(self, manager):
        logger = manager.get_logger("lazy")
        arg = Mock()
        arg.__str__ = Mock(return_value="formatted")

        logger.debug("value %s", arg)

        arg.__str__.assert_not_called()


@pytest.mark.unit
class TestLoggerEmit:
    """Test entry construction on emit."""

    def test_entry_fields(self, trace_logger, recorder):
        before = datetime.now(timezone.utc)
        line = _line() + 1
        trace_logger.info("hello %s, %d", "world", 42)
        after = datetime.now(timezone.utc)

        [entry] = recorder.log()
        assert entry.level == Level.INFO
        assert entry.module == "test.writer"
        assert entry.message == "hello world, 42"
        assert entry.filename == __file__
        assert entry.line == line
        assert before <= entry.timestamp <= after

    def test_message_without_args_is_not_formatted(self, trace_logger, recorder):
        trace_logger.warning("100% done")
        assert recorder.messages() == ["100% done"]

    @pytest.mark.parametrize("method,level", [
        ("trace", Level.TRACE),
        ("debug", Level.DEBUG),
        ("info", Level.INFO),
        ("warning", Level.WARNING),
        ("error", Level.ERROR),
        ("critical", Level.CRITICAL),
    ])
    def test_level_methods(self, trace_logger, recorder, method, level):
        getattr(trace_logger, method)("message")

        [entry] = recorder.log()
        assert entry.level == level
        assert os.path.basename(entry.filename) == "test_logger.py"

    def test_log_with_explicit_level(self, trace_logger, recorder):
        trace_logger.log(Level.ERROR, "explicit %s", "level")
        assert recorder.messages() == ["explicit level"]

    def test_stacklevel_reports_outer_caller(self, trace_logger, recorder):
        def helper():
            trace_logger.info("from helper", stacklevel=2)

        line = _line() + 1
        helper()

        assert recorder.log()[0].line == line

    def test_root_entries_use_display_name(self, manager, recorder):
        manager.get_logger("").error("root message")
        assert recorder.log()[0].module == "<root>"

    def test_emit_filtered_by_logger_level(self, manager, recorder):
        logger = manager.get_logger("filtered")
        logger.info("dropped")
        logger.warning("kept")
        assert recorder.messages() == ["kept"]

    def test_emit_survives_failing_writer(self, manager, trace_logger, recorder):
        broken = Mock()
        broken.write.side_effect = RuntimeError("disk full")
        manager.remove_writer("default")
        manager.register_writer("broken", broken)
        manager.register_writer("recorder", recorder)

        with patch("branchlog.writers.registry.logger") as internal_logger:
            trace_logger.error("still delivered")

        assert recorder.messages() == ["still delivered"]
        internal_logger.error.assert_called_once()

    def test_mapping_argument_fills_named_placeholders(self, trace_logger, recorder):
        trace_logger.info("%(count)d items in %(queue)s", {"count": 3, "queue": "jobs"})
        assert recorder.messages() == ["3 items in jobs"]

    def test_bad_format_arguments_do_not_raise(self, trace_logger, recorder):
        with patch("branchlog.logger.logger") as internal_logger:
            trace_logger.info("%d items", "x")
            trace_logger.info("%s and %s", "one")

        assert recorder.messages() == [
            "%d items ('x',)",
            "%s and %s ('one',)",
        ]
        assert internal_logger.error.call_count == 2


def _line():
    """Line number of the caller."""
    import sys

    return sys._getframe(1).f_lineno
