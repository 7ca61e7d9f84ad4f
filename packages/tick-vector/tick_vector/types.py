"""Shared type aliases, the vector protocol, and error types."""
from __future__ import annotations

import operator
from typing import Protocol, TypeVar, runtime_checkable

Scalar = float

V = TypeVar("V", bound="Vector")


@runtime_checkable
class Vector(Protocol):
    def dot(self: V, other: V) -> Scalar: ...
    def magnitude(self) -> Scalar: ...
    def normalize(self: V) -> V: ...


class DimensionMismatchError(ValueError):
    """Raised when two vectors (or a vector and a sequence) differ in length."""

    def __init__(self, expected: int, actual: int, message: str | None = None) -> None:
        self.expected = expected
        self.actual = actual
        if message is None:
            message = f"expected {expected} components, got {actual}"
        super().__init__(message)


class IndexOutOfRangeError(IndexError):
    """Raised on get/set with an index outside the vector."""

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(f"index {index} out of range for vector of length {length}")


def check_index(index: int, length: int) -> int:
    """Validate a component index: an integer with 0 <= index < length.

    Negative indices do not wrap and slices are rejected (TypeError).
    """
    index = operator.index(index)
    if not 0 <= index < length:
        raise IndexOutOfRangeError(index, length)
    return index
