# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlib: Dense Row-Major Tensors

A small N-dimensional array container: shape and stride computation,
coordinate lookup and elementwise transforms producing new tensors.

Example:
    import tensorlib

    t = tensorlib.Tensor([2, 3], [0, 1, 2, 3, 4, 5])
    t.at([1, 2])                           # 5
    t.element_wise_apply(lambda x: x + 1)  # new Tensor, same shape
"""

__version__ = "0.1.0"

# Core must be imported before errors: errors depends on core.types
from .core import (
    StatusCode,
    Status,
    Tensor,
    Complex,
    compute_total,
    compute_strides,
    flat_index,
    unravel_index,
    check_shape,
    check_position,
)

# Errors
from .errors import (
    TensorLibError,
    InvalidShapeError,
    ShapeMismatchError,
    RankMismatchError,
    IndexOutOfRangeError,
    ConfigurationError,
)

# Configuration
from .config import TensorConfig, get_config, set_config, reset_config, config_context

# Observability
from .observability import set_verbosity, Verbosity

__all__ = [
    "__version__",
    # Core
    "StatusCode",
    "Status",
    "Tensor",
    "Complex",
    "compute_total",
    "compute_strides",
    "flat_index",
    "unravel_index",
    "check_shape",
    "check_position",
    # Errors
    "TensorLibError",
    "InvalidShapeError",
    "ShapeMismatchError",
    "RankMismatchError",
    "IndexOutOfRangeError",
    "ConfigurationError",
    # Configuration
    "TensorConfig",
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
    # Observability
    "set_verbosity",
    "Verbosity",
]
