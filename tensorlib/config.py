# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Library configuration.

A single process-wide TensorConfig controls the value used to fill
uninitialized tensors, the stream used for diagnostic output and the
logger verbosity.

Example:
    from tensorlib.config import config_context

    with config_context(default_fill=0.0):
        t = Tensor([2, 2])
"""

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Any, Iterator, Optional, TextIO

from .errors import ConfigurationError
from .observability import DEFAULT_VERBOSITY, get_logger, verbosity_from_env


@dataclass(frozen=True)
class TensorConfig:
    """
    Configuration for tensor construction and diagnostics.

    Attributes:
        default_fill: Value stored in every slot of an uninitialized tensor
        echo_stream: Stream for echoed elements and dumps (None = stdout)
        verbose: Logger verbosity level (0-4)
    """

    default_fill: Any = 0
    echo_stream: Optional[TextIO] = None
    verbose: int = int(DEFAULT_VERBOSITY)

    def __post_init__(self):
        if isinstance(self.verbose, bool) or not isinstance(self.verbose, int):
            raise ConfigurationError(
                "verbose must be an integer", "verbose", self.verbose
            )
        if not 0 <= self.verbose <= 4:
            raise ConfigurationError(
                "verbose must be between 0 and 4", "verbose", self.verbose
            )
        if self.echo_stream is not None and not hasattr(self.echo_stream, "write"):
            raise ConfigurationError(
                "echo_stream must be a writable text stream",
                "echo_stream",
                self.echo_stream,
            )

    def get_stream(self) -> TextIO:
        """Get the diagnostic stream, resolving stdout at call time."""
        return self.echo_stream if self.echo_stream is not None else sys.stdout

    @classmethod
    def from_env(cls) -> "TensorConfig":
        """
        Build a configuration from environment variables.

        Reads TENSORLIB_VERBOSITY; unset keeps the default.

        Raises:
            ConfigurationError: If the variable is not an integer in 0-4
        """
        value = os.environ.get("TENSORLIB_VERBOSITY")
        if value is None:
            return cls()
        try:
            verbose = int(value)
        except ValueError:
            raise ConfigurationError(
                "TENSORLIB_VERBOSITY must be an integer",
                "TENSORLIB_VERBOSITY",
                value,
            )
        return cls(verbose=verbose)


def _default_config() -> TensorConfig:
    """Default configuration, with verbosity seeded from TENSORLIB_VERBOSITY."""
    return TensorConfig(verbose=int(verbosity_from_env()))


_config = _default_config()


def get_config() -> TensorConfig:
    """Get the active configuration."""
    return _config


def set_config(config: TensorConfig) -> None:
    """Replace the active configuration and apply its verbosity."""
    global _config
    if not isinstance(config, TensorConfig):
        raise ConfigurationError("expected a TensorConfig", config_value=config)
    _config = config
    get_logger().set_verbosity(config.verbose)


def reset_config() -> None:
    """Restore the default configuration, including the environment verbosity."""
    set_config(_default_config())


@contextmanager
def config_context(**overrides) -> Iterator[TensorConfig]:
    """
    Temporarily override configuration fields.

    The logger verbosity is only changed when ``verbose`` is overridden,
    and is restored to its previous level on exit.
    """
    global _config
    previous = get_config()
    try:
        new_config = replace(previous, **overrides)
    except TypeError as e:
        raise ConfigurationError(str(e))

    logger = get_logger()
    previous_verbosity = logger.get_verbosity()
    _config = new_config
    if "verbose" in overrides:
        logger.set_verbosity(new_config.verbose)
    try:
        yield new_config
    finally:
        _config = previous
        logger.set_verbosity(previous_verbosity)
