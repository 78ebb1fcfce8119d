# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
Dense row-major Tensor.

A Tensor owns a shape, the stride table derived from it and a flat
buffer of product(shape) elements. Shape and strides are computed once at
construction; coordinate lookups reuse the cached strides. Transform
operations return new Tensors and never modify the source, so concurrent
readers and transforms of one Tensor are safe as long as the function
passed to a transform is itself thread-safe.
"""

import copy
import logging
from typing import Callable, Generic, Iterator, Optional, Sequence, TypeVar, TextIO

import numpy as np

from ..config import get_config
from ..errors import TensorLibError, format_shape_mismatch
from ..observability import get_logger
from .layout import compute_strides, compute_total, flat_index, normalize_shape, unravel_index
from .types import Position, ShapeLike, Status

logger = logging.getLogger("tensorlib.core.tensor")

T = TypeVar("T")

_MISSING = object()


class Tensor(Generic[T]):
    """
    A dense tensor stored in row-major (C) order.

    Example:
        >>> t = Tensor([2, 3], [0, 1, 2, 3, 4, 5])
        >>> t.get_strides()
        (3, 1)
        >>> t.at([1, 2])
        5
        >>> t.element_wise_apply(lambda x: x * 10).at([1, 2])
        50
    """

    __slots__ = ("_shape", "_strides", "_elements", "_total")

    def __init__(
        self,
        shape: ShapeLike,
        elements: Optional[Sequence[T]] = None,
        *,
        fill_value=_MISSING,
    ):
        """
        Create a new Tensor.

        Args:
            shape: Non-empty sequence of positive dimension sizes
            elements: Flat row-major buffer of product(shape) values; None
                or empty allocates a default-filled buffer
            fill_value: Value for a default-filled buffer; falls back to the
                configured ``default_fill``. Each slot gets its own shallow
                copy, so a mutable fill value is not shared between slots

        Raises:
            InvalidShapeError: If the shape is empty or has a non-positive size
            ShapeMismatchError: If ``len(elements) != product(shape)``
        """
        try:
            self._shape = normalize_shape(shape)
            self._total = compute_total(self._shape)
            self._strides = compute_strides(self._shape, self._total)
        except TensorLibError as e:
            get_logger().debug(e.message, component="tensor", operation="init")
            raise

        if elements is None or len(elements) == 0:
            if fill_value is _MISSING:
                fill_value = get_config().default_fill
            self._elements = tuple(copy.copy(fill_value) for _ in range(self._total))
        elif len(elements) != self._total:
            get_logger().debug(
                "Element count does not match shape",
                component="tensor",
                operation="init",
                shape=self._shape,
                received=len(elements),
            )
            raise format_shape_mismatch(self._shape, self._total, len(elements))
        else:
            self._elements = tuple(elements)

        logger.debug("Created tensor shape=%s strides=%s", self._shape, self._strides)

    @classmethod
    def create_uninitialized(cls, shape: ShapeLike, fill_value=_MISSING) -> "Tensor[T]":
        """Create a default-filled tensor."""
        return cls(shape, None, fill_value=fill_value)

    @classmethod
    def create_with_data(cls, shape: ShapeLike, data: Sequence[T]) -> "Tensor[T]":
        """
        Create a tensor from a flat row-major buffer.

        Unlike the constructor, an empty ``data`` is not treated as "no
        data" and fails with ShapeMismatchError.
        """
        if len(data) == 0:
            raise format_shape_mismatch(
                tuple(shape), compute_total(shape), 0
            )
        return cls(shape, data)

    @classmethod
    def try_create(
        cls, shape: ShapeLike, elements: Optional[Sequence[T]] = None
    ) -> tuple[Optional["Tensor[T]"], Status]:
        """
        Create a tensor, reporting failure as a Status instead of raising.

        Returns:
            (tensor, Status.Ok()) on success, (None, error status) otherwise
        """
        try:
            return cls(shape, elements), Status.Ok()
        except TensorLibError as e:
            return None, e.to_status()

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Tensor":
        """Create a tensor from a NumPy array, copying its data in C order."""
        array = np.asarray(array)
        data = np.ascontiguousarray(array).ravel(order="C").tolist()
        return cls(array.shape, data)

    @classmethod
    def _from_validated(
        cls, shape: tuple, strides: tuple, total: int, elements: tuple
    ) -> "Tensor[T]":
        """Build a tensor whose layout is already known (internal use)."""
        instance = object.__new__(cls)
        instance._shape = shape
        instance._strides = strides
        instance._total = total
        instance._elements = elements
        return instance

    def __repr__(self) -> str:
        return f"Tensor(shape={self._shape}, strides={self._strides})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tensor):
            return NotImplemented
        return self._shape == other._shape and self._elements == other._elements

    __hash__ = None

    def __len__(self) -> int:
        return self._total

    def __iter__(self) -> Iterator[T]:
        """Iterate over elements in row-major order."""
        return iter(self._elements)

    def __getitem__(self, position) -> T:
        if isinstance(position, slice) or (
            isinstance(position, tuple) and any(isinstance(p, slice) for p in position)
        ):
            raise TypeError("Tensor does not support slicing")
        if not isinstance(position, tuple):
            position = (position,)
        return self.at(position)

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def strides(self) -> tuple[int, ...]:
        return self._strides

    @property
    def rank(self) -> int:
        """Get the number of dimensions."""
        return len(self._shape)

    @property
    def size(self) -> int:
        """Alias for get_total_elements (NumPy-style)."""
        return self._total

    def get_shape(self) -> tuple[int, ...]:
        return self._shape

    def get_strides(self) -> tuple[int, ...]:
        return self._strides

    def get_elements(self) -> tuple[T, ...]:
        return self._elements

    def get_total_elements(self) -> int:
        return self._total

    def flat_index(self, position: Position) -> int:
        """Get the buffer offset of a coordinate."""
        return flat_index(position, self._shape, self._strides)

    def coordinate_of(self, offset: int) -> tuple[int, ...]:
        """Get the coordinate stored at a buffer offset."""
        return unravel_index(offset, self._shape, self._strides)

    def at(
        self,
        position: Position,
        echo: bool = False,
        stream: Optional[TextIO] = None,
    ) -> T:
        """
        Get the element at a coordinate.

        Args:
            position: One index per dimension
            echo: Also write the element to ``stream``
            stream: Output for ``echo``; defaults to the configured stream

        Raises:
            RankMismatchError: If ``len(position) != rank``
            IndexOutOfRangeError: If a component is outside its dimension
        """
        try:
            offset = flat_index(position, self._shape, self._strides)
        except TensorLibError as e:
            get_logger().debug(
                e.message, component="tensor", operation="at", shape=self._shape
            )
            raise

        value = self._elements[offset]
        if echo:
            out = stream if stream is not None else get_config().get_stream()
            out.write(f"Element at given position: {value}\n")
        return value

    def try_at(self, position: Position) -> tuple[Optional[T], Status]:
        """Get an element, reporting failure as a Status instead of raising."""
        try:
            return self.at(position), Status.Ok()
        except TensorLibError as e:
            return None, e.to_status()

    def element_wise_apply(self, operation: Callable[[T], T]) -> "Tensor[T]":
        """
        Apply ``operation`` to every element in row-major order.

        Returns a new tensor of the same shape. Exceptions raised by
        ``operation`` propagate unchanged.
        """
        new_elements = tuple(operation(element) for element in self._elements)
        logger.debug("element_wise_apply over %d elements", self._total)
        return Tensor._from_validated(
            self._shape, self._strides, self._total, new_elements
        )

    def rows(self) -> list[list[T]]:
        """Split the buffer into rows along the last dimension."""
        row_len = self._shape[-1]
        row_step = self._strides[-2] if self.rank > 1 else self._total
        return [
            list(self._elements[start:start + row_len])
            for start in range(0, self._total, row_step)
        ]

    def columns(self) -> list[list[T]]:
        """
        Split the buffer into columns along the second-to-last dimension.

        Columns are ordered by leading block, then by last-axis index. A
        rank-1 tensor is one row, so every column holds one element.
        """
        n_cols = self._shape[-1]
        n_rows = self._shape[-2] if self.rank > 1 else 1
        row_step = self._strides[-2] if self.rank > 1 else n_cols
        block_step = n_rows * n_cols

        cols = []
        for base in range(0, self._total, block_step):
            for j in range(n_cols):
                cols.append(
                    [self._elements[base + k * row_step + j] for k in range(n_rows)]
                )
        return cols

    def row_wise_apply(
        self, operation: Callable[[list[T]], Sequence[T]]
    ) -> "Tensor[T]":
        """
        Apply ``operation`` to each row and reassemble the results.

        ``operation`` receives a list of ``shape[-1]`` elements and must
        return a sequence of the same length.

        Raises:
            ShapeMismatchError: If a returned row has the wrong length
        """
        row_len = self._shape[-1]
        new_elements = []
        for row in self.rows():
            result = list(operation(row))
            if len(result) != row_len:
                raise format_shape_mismatch((row_len,), row_len, len(result))
            new_elements.extend(result)

        logger.debug("row_wise_apply over %d rows", self._total // row_len)
        return Tensor._from_validated(
            self._shape, self._strides, self._total, tuple(new_elements)
        )

    def column_wise_apply(
        self, operation: Callable[[list[T]], Sequence[T]]
    ) -> "Tensor[T]":
        """
        Apply ``operation`` to each column and reassemble the results.

        ``operation`` receives the ``shape[-2]`` elements of one column
        (one element for rank-1 tensors) and must return a sequence of the
        same length.

        Raises:
            ShapeMismatchError: If a returned column has the wrong length
        """
        n_cols = self._shape[-1]
        n_rows = self._shape[-2] if self.rank > 1 else 1
        row_step = self._strides[-2] if self.rank > 1 else n_cols
        block_step = n_rows * n_cols

        new_elements = list(self._elements)
        for c, column in enumerate(self.columns()):
            result = list(operation(column))
            if len(result) != n_rows:
                raise format_shape_mismatch((n_rows,), n_rows, len(result))
            base = (c // n_cols) * block_step
            j = c % n_cols
            for k, value in enumerate(result):
                new_elements[base + k * row_step + j] = value

        logger.debug("column_wise_apply over %d columns", self._total // n_rows)
        return Tensor._from_validated(
            self._shape, self._strides, self._total, tuple(new_elements)
        )

    def to_numpy(self, dtype=None) -> np.ndarray:
        """Convert the tensor data to a NumPy array in C order."""
        return np.asarray(self._elements, dtype=dtype).reshape(self._shape)

    def print_dimensions(self, stream: Optional[TextIO] = None) -> None:
        """Write the shape to ``stream`` (default: configured stream)."""
        from .formatting import print_dimensions

        print_dimensions(self, stream)

    def print_tensor(self, stream: Optional[TextIO] = None) -> None:
        """Write the shape and the nested elements to ``stream``."""
        from .formatting import print_tensor

        print_tensor(self, stream)
