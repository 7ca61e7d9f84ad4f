"""DynamicVector - vector of arbitrary length backed by a list of floats.

The length is chosen at construction and never changes. Every operation is
O(n) in the length; prefer a fixed type (or make_vector) when the dimension
is known up front.
"""
from __future__ import annotations

import math
import operator
from typing import Iterable, Iterator

from tick_vector.config import DEFAULT_TOLERANCE, ToleranceConfig
from tick_vector.scalar import compare, divide, is_scalar
from tick_vector.types import DimensionMismatchError, Scalar, check_index


class DynamicVector:
    __slots__ = ("_data",)

    def __init__(self, length: int) -> None:
        length = operator.index(length)
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}")
        self._data: list[Scalar] = [0.0] * length

    @classmethod
    def from_iterable(cls, values: Iterable[Scalar]) -> DynamicVector:
        data = [_coerce(v) for v in values]
        vec = cls(0)
        vec._data = data
        return vec

    def _check_length(self, other: DynamicVector) -> None:
        if len(other._data) != len(self._data):
            raise DimensionMismatchError(len(self._data), len(other._data))

    def get(self, index: int) -> Scalar:
        return self._data[check_index(index, len(self._data))]

    def set(self, index: int, value: Scalar) -> None:
        self._data[check_index(index, len(self._data))] = _coerce(value)

    def copy(self) -> DynamicVector:
        return DynamicVector.from_iterable(self._data)

    def to_list(self) -> list[Scalar]:
        return list(self._data)

    def to_tuple(self) -> tuple[Scalar, ...]:
        return tuple(self._data)

    # -- sequence protocol --------------------------------------------------

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._data)

    def __getitem__(self, index: int) -> Scalar:
        return self.get(index)

    def __setitem__(self, index: int, value: Scalar) -> None:
        self.set(index, value)

    def __repr__(self) -> str:
        return f"DynamicVector({self._data!r})"

    # -- equality and ordering ----------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        return compare(self._data, other._data) == 0

    def __lt__(self, other: DynamicVector) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        result = compare(self._data, other._data)
        return result is not None and result < 0

    def __le__(self, other: DynamicVector) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        result = compare(self._data, other._data)
        return result is not None and result <= 0

    def __gt__(self, other: DynamicVector) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        result = compare(self._data, other._data)
        return result is not None and result > 0

    def __ge__(self, other: DynamicVector) -> bool:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        result = compare(self._data, other._data)
        return result is not None and result >= 0

    __hash__ = None  # type: ignore[assignment]

    # -- vector contract ----------------------------------------------------

    def dot(self, other: DynamicVector) -> Scalar:
        """Dot product. Both vectors must have the same length."""
        self._check_length(other)
        return sum(a * b for a, b in zip(self._data, other._data))

    def magnitude_sq(self) -> Scalar:
        return sum(a * a for a in self._data)

    def magnitude(self) -> Scalar:
        return math.hypot(*self._data)

    def normalize(self) -> DynamicVector:
        """Unit vector in the same direction; all NaN for a zero vector."""
        mag = self.magnitude()
        return DynamicVector.from_iterable(divide(a, mag) for a in self._data)

    def isclose(
        self, other: DynamicVector, config: ToleranceConfig = DEFAULT_TOLERANCE
    ) -> bool:
        self._check_length(other)
        return all(
            math.isclose(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
            for a, b in zip(self._data, other._data)
        )

    # -- elementwise arithmetic ---------------------------------------------

    def __add__(self, other: DynamicVector) -> DynamicVector:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        self._check_length(other)
        return DynamicVector.from_iterable(
            a + b for a, b in zip(self._data, other._data)
        )

    def __sub__(self, other: DynamicVector) -> DynamicVector:
        if not isinstance(other, DynamicVector):
            return NotImplemented
        self._check_length(other)
        return DynamicVector.from_iterable(
            a - b for a, b in zip(self._data, other._data)
        )

    def __mul__(self, scalar: Scalar) -> DynamicVector:
        if not is_scalar(scalar):
            return NotImplemented
        return DynamicVector.from_iterable(a * scalar for a in self._data)

    def __rmul__(self, scalar: Scalar) -> DynamicVector:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: Scalar) -> DynamicVector:
        if not is_scalar(scalar):
            return NotImplemented
        return DynamicVector.from_iterable(divide(a, scalar) for a in self._data)

    def __neg__(self) -> DynamicVector:
        return DynamicVector.from_iterable(-a for a in self._data)


def _coerce(value: object) -> Scalar:
    if not is_scalar(value):
        raise TypeError(f"component must be a real number, got {type(value).__name__}")
    return float(value)  # type: ignore[arg-type]
