# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""Human-readable dumps of a tensor's shape and elements."""

from typing import Optional, TextIO

from ..config import get_config


def format_nested(tensor) -> str:
    """
    Render the buffer as nested lists following the shape.

    >>> format_nested(Tensor([2, 3], [0, 1, 2, 3, 4, 5]))
    '[[0, 1, 2], [3, 4, 5]]'
    """
    shape = tensor.get_shape()
    strides = tensor.get_strides()
    elements = tensor.get_elements()

    def render(axis: int, offset: int) -> str:
        if axis == len(shape) - 1:
            items = elements[offset:offset + shape[axis]]
            return "[" + ", ".join(str(x) for x in items) + "]"
        parts = [render(axis + 1, offset + i * strides[axis]) for i in range(shape[axis])]
        return "[" + ", ".join(parts) + "]"

    return render(0, 0)


def print_dimensions(tensor, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else get_config().get_stream()
    out.write(f"Tensor dimensions: {tensor.get_shape()}\n")


def print_tensor(tensor, stream: Optional[TextIO] = None) -> None:
    out = stream if stream is not None else get_config().get_stream()
    print_dimensions(tensor, out)
    out.write(format_nested(tensor) + "\n")
