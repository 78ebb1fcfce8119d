# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Structured Logger for tensorlib

Emits validation failures and construction traces as structured entries,
either as single-line text or JSON.

Example:
    from tensorlib.observability import get_logger, Verbosity

    logger = get_logger()
    logger.set_verbosity(Verbosity.DEBUG)
    logger.debug("Tensor constructed", component="tensor", shape=(2, 3))
"""

import json
import os
import sys
from dataclasses import dataclass, asdict, field
from datetime import datetime
from enum import IntEnum
from typing import Callable, Optional, TextIO


class Verbosity(IntEnum):
    """
    Logging verbosity levels.

    Uses IntEnum for numeric comparison (e.g., if verbosity >= INFO).
    """

    SILENT = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4


DEFAULT_VERBOSITY = Verbosity.WARNING


@dataclass
class LogEntry:
    """
    Structured log entry.

    Attributes:
        level: Log level (ERROR, WARNING, INFO, DEBUG)
        message: Log message
        timestamp: ISO format timestamp
        component: Source component (layout, tensor, config)
        operation: Optional operation name (at, element_wise_apply, ...)
        shape: Optional shape of the tensor involved
        extra: Additional context fields
    """

    level: str
    message: str
    timestamp: str
    component: str = "tensorlib"
    operation: Optional[str] = None
    shape: Optional[tuple] = None
    extra: dict = field(default_factory=dict)

    def to_json(self) -> str:
        """Convert to JSON string."""
        data = {k: v for k, v in asdict(self).items() if v is not None}
        if not data.get("extra"):
            data.pop("extra", None)
        return json.dumps(data, default=str)

    def to_text(self) -> str:
        """Convert to human-readable text format."""
        parts = [
            f"[{self.level}]",
            f"[{self.component}]",
            self.message,
        ]
        if self.operation is not None:
            parts.append(f"op={self.operation}")
        if self.shape is not None:
            parts.append(f"shape={self.shape}")
        return " ".join(parts)


def verbosity_from_env() -> Verbosity:
    """Read TENSORLIB_VERBOSITY, falling back to the default when unset or invalid."""
    value = os.environ.get("TENSORLIB_VERBOSITY")
    if value is None:
        return DEFAULT_VERBOSITY
    try:
        return Verbosity(int(value))
    except ValueError:
        return DEFAULT_VERBOSITY


class TensorLibLogger:
    """
    Structured logger for tensorlib.

    Singleton; use get_logger() rather than constructing it directly.
    """

    _instance: Optional["TensorLibLogger"] = None

    def __init__(self):
        self._verbosity = verbosity_from_env()
        self._output: TextIO = sys.stderr
        self._json_format = False
        self._handlers: list[Callable[[LogEntry], None]] = []

    @classmethod
    def get(cls) -> "TensorLibLogger":
        """Get the singleton logger instance."""
        if cls._instance is None:
            cls._instance = TensorLibLogger()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (for testing)."""
        cls._instance = None

    def set_verbosity(self, level: int) -> None:
        """
        Set verbosity level.

        Args:
            level: Verbosity level (0-4 or Verbosity enum); clamped
        """
        if isinstance(level, Verbosity):
            self._verbosity = level
        else:
            self._verbosity = Verbosity(max(0, min(4, int(level))))

    def get_verbosity(self) -> Verbosity:
        return self._verbosity

    def set_json_format(self, enabled: bool) -> None:
        self._json_format = enabled

    def set_output(self, output: TextIO) -> None:
        self._output = output

    def add_handler(self, handler: Callable[[LogEntry], None]) -> None:
        """Add a callable that receives every emitted LogEntry."""
        self._handlers.append(handler)

    def _emit(self, entry: LogEntry) -> None:
        if self._json_format:
            line = entry.to_json()
        else:
            line = entry.to_text()

        self._output.write(line + "\n")
        self._output.flush()

        for handler in self._handlers:
            handler(entry)

    def _log(self, level: Verbosity, message: str, context: dict) -> None:
        if self._verbosity < level:
            return
        shape = context.pop("shape", None)
        self._emit(
            LogEntry(
                level=level.name,
                message=message,
                timestamp=datetime.now().isoformat(),
                component=context.pop("component", "tensorlib"),
                operation=context.pop("operation", None),
                shape=tuple(shape) if shape is not None else None,
                extra=context,
            )
        )

    def debug(self, message: str, **context) -> None:
        self._log(Verbosity.DEBUG, message, context)

    def info(self, message: str, **context) -> None:
        self._log(Verbosity.INFO, message, context)

    def warning(self, message: str, **context) -> None:
        self._log(Verbosity.WARNING, message, context)

    def error(self, message: str, **context) -> None:
        self._log(Verbosity.ERROR, message, context)


def get_logger() -> TensorLibLogger:
    """Get the global tensorlib logger."""
    return TensorLibLogger.get()


def set_verbosity(level: int) -> None:
    """
    Set global verbosity level.

    Args:
        level: Verbosity level (0=SILENT, 1=ERROR, 2=WARNING, 3=INFO, 4=DEBUG)
    """
    TensorLibLogger.get().set_verbosity(level)
