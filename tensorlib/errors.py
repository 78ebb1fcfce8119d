# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlib Error Hierarchy

Every error raised by the layout calculator or the tensor container
derives from TensorLibError and carries:
- A human-readable message
- Suggestions for fixing the call
- Context information (shape, position, ...) for debugging
- A StatusCode naming the error kind

Error Categories:
- TensorLibError: Base class for all tensorlib errors
- InvalidShapeError: Empty shape or non-positive dimension
- ShapeMismatchError: Element buffer length differs from the shape product
- RankMismatchError: Coordinate length differs from the tensor rank
- IndexOutOfRangeError: Coordinate component outside its dimension
- ConfigurationError: Invalid library configuration
"""

from typing import Optional

from .core.types import Status, StatusCode


class TensorLibError(Exception):
    """
    Base class for all tensorlib errors.

    Attributes:
        message: Human-readable error message
        suggestions: List of suggestions to fix the error
        context: Optional context dictionary for debugging
        code: Error kind, usable without inspecting the class
    """

    code: StatusCode = StatusCode.Ok

    def __init__(
        self,
        message: str,
        suggestions: Optional[list[str]] = None,
        context: Optional[dict] = None,
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.context = context or {}

        full_message = self._format_message()
        super().__init__(full_message)

    def _format_message(self) -> str:
        """Format the error message with suggestions and context."""
        lines = [self.message]

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for i, suggestion in enumerate(self.suggestions, 1):
                lines.append(f"  {i}. {suggestion}")

        if self.context:
            lines.append("")
            lines.append("Context:")
            for key, value in self.context.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)

    def to_status(self) -> Status:
        """Convert the error into a Status value."""
        return Status.Error(self.code, self.message)


class InvalidShapeError(TensorLibError, ValueError):
    """
    Shape descriptor cannot produce a layout.

    Raised when:
    - The shape is empty (rank 0)
    - A dimension is zero, negative or not an integer
    - A precomputed total does not match the shape product
    """

    code = StatusCode.InvalidShape

    def __init__(
        self,
        message: str,
        shape: Optional[tuple] = None,
        dimension: Optional[int] = None,
    ):
        self.shape = shape
        self.dimension = dimension

        context = {}
        if shape is not None:
            context["shape"] = str(shape)
        if dimension is not None:
            context["dimension"] = dimension

        suggestions = [
            "Pass at least one dimension",
            "Use positive integer sizes for every dimension",
        ]

        super().__init__(
            message=f"Invalid shape: {message}",
            suggestions=suggestions,
            context=context,
        )


class ShapeMismatchError(TensorLibError, ValueError):
    """
    Element buffer does not fit the shape.

    Raised when the number of supplied elements differs from the product
    of the shape, or a row/column function returns a sequence of the
    wrong length.
    """

    code = StatusCode.ShapeMismatch

    def __init__(
        self,
        message: str,
        expected: Optional[int] = None,
        received: Optional[int] = None,
        shape: Optional[tuple] = None,
    ):
        self.expected = expected
        self.received = received

        context = {}
        if shape is not None:
            context["shape"] = str(shape)
        if expected is not None:
            context["expected"] = expected
        if received is not None:
            context["received"] = received

        suggestions = [
            "Supply exactly product(shape) elements in row-major order",
            "Omit the elements to get a default-filled tensor",
        ]

        super().__init__(
            message=f"Shape mismatch: {message}",
            suggestions=suggestions,
            context=context,
        )


class RankMismatchError(TensorLibError, ValueError):
    """Coordinate has a different number of components than the tensor rank."""

    code = StatusCode.RankMismatch

    def __init__(self, rank: int, position: tuple):
        self.rank = rank
        self.position = position

        super().__init__(
            message=(
                f"Rank mismatch: position has {len(position)} components, "
                f"tensor has rank {rank}"
            ),
            suggestions=["Give one coordinate per dimension"],
            context={"rank": rank, "position": str(position)},
        )


class IndexOutOfRangeError(TensorLibError, IndexError):
    """Coordinate component is negative, not below its dimension size, or not an integer."""

    code = StatusCode.IndexOutOfRange

    def __init__(
        self,
        axis: Optional[int],
        index: int,
        size: int,
        position: Optional[tuple] = None,
    ):
        self.axis = axis
        self.index = index
        self.size = size

        context = {"index": index, "size": size}
        if axis is not None:
            context["axis"] = axis
        if position is not None:
            context["position"] = str(position)

        where = f"along axis {axis}" if axis is not None else "in flat buffer"
        if isinstance(index, int):
            message = f"Index {index} out of range {where} (size {size})"
        else:
            message = f"Index {index!r} {where} is not an integer"
        super().__init__(
            message=message,
            suggestions=[f"Use an index in [0, {size})"],
            context=context,
        )


class ConfigurationError(TensorLibError):
    """
    Configuration error.

    Raised when a TensorConfig field holds an unusable value.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[str] = None,
    ):
        context = {}
        if config_key:
            context["config_key"] = config_key
        if config_value is not None:
            context["config_value"] = str(config_value)

        super().__init__(
            message=f"Configuration error: {message}",
            suggestions=["Check configuration parameters"],
            context=context,
        )


def format_shape_mismatch(
    shape: tuple,
    expected: int,
    received: int,
) -> ShapeMismatchError:
    """Create a ShapeMismatchError for a buffer that does not fit a shape."""
    msg = (
        f"shape {tuple(shape)} holds {expected} elements, "
        f"got {received}"
    )
    return ShapeMismatchError(
        message=msg,
        expected=expected,
        received=received,
        shape=tuple(shape),
    )
