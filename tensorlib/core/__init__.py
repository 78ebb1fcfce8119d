# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""tensorlib Core Module"""

from .types import (
    StatusCode,
    Status,
    ShapeLike,
    Position,
)
from .layout import (
    normalize_shape,
    compute_total,
    compute_strides,
    flat_index,
    unravel_index,
    check_shape,
    check_position,
)
from .tensor import Tensor
from .complex import Complex
from .formatting import format_nested, print_dimensions, print_tensor

__all__ = [
    "StatusCode",
    "Status",
    "ShapeLike",
    "Position",
    "normalize_shape",
    "compute_total",
    "compute_strides",
    "flat_index",
    "unravel_index",
    "check_shape",
    "check_position",
    "Tensor",
    "Complex",
    "format_nested",
    "print_dimensions",
    "print_tensor",
]
