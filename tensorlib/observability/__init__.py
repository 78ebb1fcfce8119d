# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlib Observability Module

Provides the structured logger used to report validation failures and
construction traces.
"""

from .logger import (
    DEFAULT_VERBOSITY,
    Verbosity,
    verbosity_from_env,
    LogEntry,
    TensorLibLogger,
    get_logger,
    set_verbosity,
)

__all__ = [
    "DEFAULT_VERBOSITY",
    "Verbosity",
    "verbosity_from_env",
    "LogEntry",
    "TensorLibLogger",
    "get_logger",
    "set_verbosity",
]
