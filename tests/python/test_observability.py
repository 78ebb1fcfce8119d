# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Tests for tensorlib Observability Module

Validates:
- Verbosity enum
- LogEntry serialization
- TensorLibLogger singleton
- Validation failures reported through the logger
"""

import io
import json

import pytest

from tensorlib import Tensor
from tensorlib.errors import InvalidShapeError, IndexOutOfRangeError
from tensorlib.observability import (
    DEFAULT_VERBOSITY,
    Verbosity,
    LogEntry,
    TensorLibLogger,
    get_logger,
    set_verbosity,
)


class TestVerbosity:
    """Tests for Verbosity enum."""

    def test_verbosity_values(self):
        assert Verbosity.SILENT == 0
        assert Verbosity.ERROR == 1
        assert Verbosity.WARNING == 2
        assert Verbosity.INFO == 3
        assert Verbosity.DEBUG == 4

    def test_verbosity_comparison(self):
        assert Verbosity.DEBUG > Verbosity.INFO > Verbosity.WARNING


class TestLogEntry:
    """Tests for LogEntry dataclass."""

    def test_log_entry_to_json(self):
        entry = LogEntry(
            level="DEBUG",
            message="Debug message",
            timestamp="2024-12-22T00:00:00",
            component="tensor",
            shape=(2, 3),
        )
        data = json.loads(entry.to_json())
        assert data["level"] == "DEBUG"
        assert data["shape"] == [2, 3]
        assert "operation" not in data
        assert "extra" not in data

    def test_log_entry_to_text(self):
        entry = LogEntry(
            level="INFO",
            message="Processing",
            timestamp="2024-12-22T00:00:00",
            component="layout",
            operation="at",
        )
        text = entry.to_text()
        assert "[INFO]" in text
        assert "[layout]" in text
        assert "op=at" in text


class TestTensorLibLogger:
    """Tests for TensorLibLogger class."""

    def setup_method(self):
        TensorLibLogger.reset()

    def test_singleton_pattern(self):
        assert TensorLibLogger.get() is TensorLibLogger.get()
        assert get_logger() is TensorLibLogger.get()

    def test_default_verbosity(self, monkeypatch):
        monkeypatch.delenv("TENSORLIB_VERBOSITY", raising=False)
        assert TensorLibLogger.get().get_verbosity() == DEFAULT_VERBOSITY

    def test_env_verbosity(self, monkeypatch):
        monkeypatch.setenv("TENSORLIB_VERBOSITY", "4")
        assert TensorLibLogger.get().get_verbosity() == Verbosity.DEBUG

    def test_bad_env_verbosity_ignored(self, monkeypatch):
        monkeypatch.setenv("TENSORLIB_VERBOSITY", "loud")
        assert TensorLibLogger.get().get_verbosity() == DEFAULT_VERBOSITY

    def test_set_verbosity_clamps(self):
        logger = TensorLibLogger.get()
        logger.set_verbosity(99)
        assert logger.get_verbosity() == Verbosity.DEBUG
        logger.set_verbosity(-3)
        assert logger.get_verbosity() == Verbosity.SILENT

    def test_module_set_verbosity(self):
        set_verbosity(Verbosity.ERROR)
        assert get_logger().get_verbosity() == Verbosity.ERROR

    def test_suppressed_below_verbosity(self):
        logger = TensorLibLogger.get()
        output = io.StringIO()
        logger.set_output(output)
        logger.set_verbosity(Verbosity.WARNING)
        logger.info("hidden")
        assert output.getvalue() == ""
        logger.warning("shown", component="test")
        assert "[WARNING] [test] shown" in output.getvalue()

    def test_json_format_and_extra(self):
        logger = TensorLibLogger.get()
        output = io.StringIO()
        logger.set_output(output)
        logger.set_json_format(True)
        logger.error("JSON test", component="test", received=5)
        data = json.loads(output.getvalue().strip())
        assert data["level"] == "ERROR"
        assert data["extra"] == {"received": 5}

    def test_handler_receives_entries(self):
        logger = TensorLibLogger.get()
        logger.set_output(io.StringIO())
        entries = []
        logger.add_handler(entries.append)
        logger.error("boom")
        assert len(entries) == 1
        assert entries[0].message == "boom"


class TestTensorLogging:
    """Validation failures are reported at DEBUG level."""

    def _capture(self):
        logger = get_logger()
        logger.set_output(io.StringIO())
        logger.set_verbosity(Verbosity.DEBUG)
        entries = []
        logger.add_handler(entries.append)
        return entries

    def test_invalid_shape_logged(self):
        entries = self._capture()
        with pytest.raises(InvalidShapeError):
            Tensor([])
        assert entries[-1].component == "tensor"
        assert entries[-1].operation == "init"

    def test_shape_mismatch_logged(self):
        entries = self._capture()
        with pytest.raises(ValueError):
            Tensor([2, 3], [1])
        assert entries[-1].shape == (2, 3)
        assert entries[-1].extra["received"] == 1

    def test_out_of_range_logged(self):
        entries = self._capture()
        with pytest.raises(IndexOutOfRangeError):
            Tensor([2]).at([3])
        assert entries[-1].operation == "at"

    def test_silent_by_default(self):
        output = io.StringIO()
        get_logger().set_output(output)
        with pytest.raises(InvalidShapeError):
            Tensor([])
        assert output.getvalue() == ""
