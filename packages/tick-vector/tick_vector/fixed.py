"""FixedVector - shared behavior for vectors with named float components.

Concrete types are frozen dataclasses (``eq=False``) that subclass
FixedVector and declare their components as fields, in order. Everything else
(contract, operators, conversions, IEEE-754 comparison) is derived from that
field list.
"""
from __future__ import annotations

import math
from dataclasses import fields
from typing import Iterable, Iterator, TypeVar

from tick_vector.config import DEFAULT_TOLERANCE, ToleranceConfig
from tick_vector.scalar import compare, divide, is_scalar
from tick_vector.types import DimensionMismatchError, Scalar, check_index

F = TypeVar("F", bound="FixedVector")


class FixedVector:
    __slots__ = ()

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not is_scalar(value):
                raise TypeError(
                    f"{type(self).__name__}.{f.name} must be a real number, "
                    f"got {type(value).__name__}"
                )
            object.__setattr__(self, f.name, float(value))

    @classmethod
    def components(cls) -> tuple[str, ...]:
        """Component names in declared order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def dimensions(cls) -> int:
        return len(fields(cls))

    # -- sequence protocol --------------------------------------------------

    def __iter__(self) -> Iterator[Scalar]:
        for f in fields(self):
            yield getattr(self, f.name)

    def __len__(self) -> int:
        return self.dimensions()

    def __getitem__(self, index: int) -> Scalar:
        """Positional access, same policy as DynamicVector.get: no wrapping, no slices."""
        return self.to_tuple()[check_index(index, self.dimensions())]

    # -- conversions --------------------------------------------------------

    def to_tuple(self) -> tuple[Scalar, ...]:
        return tuple(self)

    def to_array(self) -> list[Scalar]:
        return list(self)

    @classmethod
    def from_tuple(cls: type[F], values: Iterable[Scalar]) -> F:
        values = tuple(values)
        if len(values) != cls.dimensions():
            raise DimensionMismatchError(cls.dimensions(), len(values))
        return cls(*values)

    @classmethod
    def from_array(cls: type[F], values: Iterable[Scalar]) -> F:
        return cls.from_tuple(values)

    # -- equality and ordering ----------------------------------------------
    # Componentwise IEEE-754: a NaN component is never equal or ordered.

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return compare(self.to_tuple(), other.to_tuple()) == 0  # type: ignore[attr-defined]

    def __lt__(self: F, other: F) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        result = compare(self.to_tuple(), other.to_tuple())
        return result is not None and result < 0

    def __le__(self: F, other: F) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        result = compare(self.to_tuple(), other.to_tuple())
        return result is not None and result <= 0

    def __gt__(self: F, other: F) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        result = compare(self.to_tuple(), other.to_tuple())
        return result is not None and result > 0

    def __ge__(self: F, other: F) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        result = compare(self.to_tuple(), other.to_tuple())
        return result is not None and result >= 0

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.to_tuple()))

    # -- vector contract ----------------------------------------------------

    def _require_same_type(self, other: object, op: str) -> None:
        if type(other) is not type(self):
            raise TypeError(
                f"cannot {op} {type(self).__name__} and {type(other).__name__}"
            )

    def dot(self: F, other: F) -> Scalar:
        self._require_same_type(other, "dot")
        return sum(a * b for a, b in zip(self, other))

    def magnitude_sq(self) -> Scalar:
        return sum(a * a for a in self)

    def magnitude(self) -> Scalar:
        # hypot scales internally: no underflow to 0 or overflow to inf.
        return math.hypot(*self)

    def normalize(self: F) -> F:
        """Return the unit vector in the same direction.

        A zero vector has no direction: every component of the result is NaN.
        """
        mag = self.magnitude()
        return type(self)(*(divide(a, mag) for a in self))

    def isclose(self: F, other: F, config: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
        self._require_same_type(other, "compare")
        return all(
            math.isclose(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
            for a, b in zip(self, other)
        )

    # -- elementwise arithmetic ---------------------------------------------

    def __add__(self: F, other: F) -> F:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self, other)))

    def __sub__(self: F, other: F) -> F:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self, other)))

    def __mul__(self: F, scalar: Scalar) -> F:
        if not is_scalar(scalar):
            return NotImplemented
        return type(self)(*(a * scalar for a in self))

    def __rmul__(self: F, scalar: Scalar) -> F:
        return self.__mul__(scalar)

    def __truediv__(self: F, scalar: Scalar) -> F:
        if not is_scalar(scalar):
            return NotImplemented
        return type(self)(*(divide(a, scalar) for a in self))

    def __neg__(self: F) -> F:
        return type(self)(*(-a for a in self))
