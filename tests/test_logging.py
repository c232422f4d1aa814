"""Tests for logging configuration and the events fallible emits."""

from __future__ import annotations

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from fallible import Err, Nothing, Ok, as_result, safe
from fallible._logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore structlog and the root logger after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestEvents:
    """Tests for debug events on failure paths."""

    def test_nothing_unwrap_logs(self):
        """unwrap on Nothing emits an unwrap_failed event."""
        with capture_logs() as logs, pytest.raises(RuntimeError):
            Nothing.unwrap()
        assert logs == [{"event": "unwrap_failed", "variant": "Nothing", "log_level": "debug"}]

    def test_err_unwrap_logs_error_type(self):
        """unwrap on Err records the error type."""
        with capture_logs() as logs, pytest.raises(ValueError):
            Err(ValueError("x")).unwrap()
        assert logs[0]["error_type"] == "ValueError"

    def test_as_result_logs_capture(self):
        """as_result records captured exceptions."""
        with capture_logs() as logs:
            as_result(int, "x")
        assert logs[0]["event"] == "as_result_captured"
        assert logs[0]["error_type"] == "ValueError"

    def test_safe_logs_capture(self):
        """@safe records the wrapped function."""

        @safe
        def fail() -> None:
            raise KeyError("k")

        with capture_logs() as logs:
            fail()
        assert logs[0]["event"] == "safe_captured"
        assert logs[0]["function"].endswith("fail")

    def test_combinators_do_not_log(self):
        """Ordinary combinators emit nothing."""
        with capture_logs() as logs:
            Nothing.map(str).unwrap_or(0)
            Ok(1).map(str).unwrap()
        assert logs == []


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys):
        """Configured JSON output reaches stderr."""
        configure_logging("DEBUG", json_output=True)
        get_logger("fallible.test").info("hello", answer=42)
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"answer": 42' in err

    def test_level_filters(self, capsys):
        """Events below the configured level are dropped."""
        configure_logging("WARNING", json_output=True)
        get_logger("fallible.test").debug("quiet")
        assert "quiet" not in capsys.readouterr().err

    def test_sets_root_level(self):
        """The root logger level follows the configured level."""
        configure_logging("error")
        assert logging.getLogger().level == logging.ERROR
