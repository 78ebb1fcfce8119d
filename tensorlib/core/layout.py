# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Layout Calculator - row-major sizes, strides and flat offsets.

All functions are pure. A shape is a non-empty sequence of positive
integers; the last dimension varies fastest in the flat buffer.

Example:
    >>> compute_total([2, 3])
    6
    >>> compute_strides([2, 3])
    (3, 1)
    >>> flat_index([1, 2], (2, 3), (3, 1))
    5
"""

import operator
from typing import Optional

from ..errors import (
    InvalidShapeError,
    RankMismatchError,
    IndexOutOfRangeError,
    TensorLibError,
)
from .types import Position, ShapeLike, Status


def normalize_shape(shape: ShapeLike) -> tuple[int, ...]:
    """
    Validate a shape and return it as a tuple of ints.

    Raises:
        InvalidShapeError: If the shape is empty or a dimension is not a
            positive integer.
    """
    try:
        dims = tuple(shape)
    except TypeError:
        raise InvalidShapeError("shape must be a sequence of integers", shape=None)

    if not dims:
        raise InvalidShapeError("shape must not be empty", shape=dims)

    result = []
    for axis, dim in enumerate(dims):
        try:
            size = operator.index(dim)
        except TypeError:
            raise InvalidShapeError(
                f"dimension {axis} is not an integer: {dim!r}",
                shape=dims,
                dimension=axis,
            )
        if size <= 0:
            raise InvalidShapeError(
                f"dimension {axis} must be positive, got {size}",
                shape=dims,
                dimension=axis,
            )
        result.append(size)
    return tuple(result)


def compute_total(shape: ShapeLike) -> int:
    """
    Get the total number of elements described by a shape.

    Args:
        shape: Non-empty sequence of positive dimension sizes

    Returns:
        Product of all dimension sizes

    Raises:
        InvalidShapeError: If the shape is empty or has a non-positive size
    """
    dims = normalize_shape(shape)
    total = dims[0]
    for dim in dims[1:]:
        total *= dim
    return total


def compute_strides(shape: ShapeLike, total: Optional[int] = None) -> tuple[int, ...]:
    """
    Compute row-major strides for a shape.

    Walks the dimensions outer to inner starting from the total element
    count; each dimension's stride is the running total divided by its
    size, and that stride becomes the running total for the next one.

    Args:
        shape: Non-empty sequence of positive dimension sizes
        total: Precomputed element count; None or 0 means compute it here

    Returns:
        Tuple of strides, one per dimension, the last one equal to 1

    Raises:
        InvalidShapeError: If the shape is invalid or ``total`` does not
            equal the product of the shape
    """
    dims = normalize_shape(shape)
    expected = compute_total(dims)
    if total is None or total == 0:
        total = expected
    else:
        try:
            total = operator.index(total)
        except TypeError:
            raise InvalidShapeError(
                f"precomputed total is not an integer: {total!r}", shape=dims
            )
    if total != expected:
        raise InvalidShapeError(
            f"precomputed total {total} does not match shape product {expected}",
            shape=dims,
        )

    strides = []
    running = total
    for dim in dims:
        running //= dim
        strides.append(running)
    return tuple(strides)


def flat_index(position: Position, shape: ShapeLike, strides: ShapeLike) -> int:
    """
    Map a coordinate to its offset in the flat buffer.

    Raises:
        RankMismatchError: If ``len(position) != len(shape)``
        IndexOutOfRangeError: If any component is negative, not below
            its dimension size, or not an integer
    """
    coords = tuple(position)
    if len(coords) != len(shape):
        raise RankMismatchError(len(shape), coords)

    offset = 0
    for axis, (index, size, stride) in enumerate(zip(coords, shape, strides)):
        try:
            index = operator.index(index)
        except TypeError:
            raise IndexOutOfRangeError(axis, index, size, position=coords)
        if index < 0 or index >= size:
            raise IndexOutOfRangeError(axis, index, size, position=coords)
        offset += index * stride
    return offset


def unravel_index(flat: int, shape: ShapeLike, strides: ShapeLike) -> tuple[int, ...]:
    """
    Map a flat buffer offset back to its coordinate.

    Raises:
        IndexOutOfRangeError: If ``flat`` is outside ``[0, product(shape))``
    """
    total = compute_total(shape)
    try:
        flat = operator.index(flat)
    except TypeError:
        raise IndexOutOfRangeError(None, flat, total)
    if flat < 0 or flat >= total:
        raise IndexOutOfRangeError(None, flat, total)

    coords = []
    for stride in strides:
        coords.append(flat // stride)
        flat %= stride
    return tuple(coords)


def check_shape(shape: ShapeLike) -> Status:
    """Validate a shape without raising."""
    try:
        normalize_shape(shape)
    except TensorLibError as e:
        return e.to_status()
    return Status.Ok()


def check_position(position: Position, shape: ShapeLike) -> Status:
    """Validate a coordinate against a shape without raising."""
    try:
        strides = compute_strides(shape)
        flat_index(position, shape, strides)
    except TensorLibError as e:
        return e.to_status()
    return Status.Ok()
