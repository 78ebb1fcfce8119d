# Copyright 2025 Wahyu Ardiansyah
# Licensed under the Apache License, Version 2.0

"""
tensorlib Core Types

Result kinds shared by the layout calculator, the tensor container and
the error hierarchy.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Sequence


class StatusCode(Enum):
    """Result status codes for layout and indexing operations."""

    Ok = auto()
    InvalidShape = auto()
    ShapeMismatch = auto()
    RankMismatch = auto()
    IndexOutOfRange = auto()


@dataclass(frozen=True)
class Status:
    """Status class for operation results."""

    code: StatusCode = StatusCode.Ok
    message: str = ""

    def ok(self) -> bool:
        return self.code == StatusCode.Ok

    @classmethod
    def Ok(cls) -> "Status":
        return cls()

    @classmethod
    def Error(cls, code: StatusCode, message: str) -> "Status":
        return cls(code=code, message=message)

    def __bool__(self) -> bool:
        return self.ok()


# Shape and coordinate aliases
ShapeLike = Sequence[int]
Position = Sequence[int]
