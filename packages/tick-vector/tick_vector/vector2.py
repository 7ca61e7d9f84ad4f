"""Vector2 - 2D vector with x and y components."""
from __future__ import annotations

from dataclasses import dataclass

from tick_vector.fixed import FixedVector
from tick_vector.types import Scalar


@dataclass(frozen=True, slots=True, eq=False)
class Vector2(FixedVector):
    x: float = 0.0
    y: float = 0.0

    def dot(self, other: Vector2) -> Scalar:
        self._require_same_type(other, "dot")
        return self.x * other.x + self.y * other.y

    def magnitude_sq(self) -> Scalar:
        return self.x * self.x + self.y * self.y

    def cross(self, other: Vector2) -> Scalar:
        """2D cross product: the determinant | self.x  self.y ; other.x  other.y |.

        Positive when ``other`` lies counter-clockwise from ``self``, negative
        when clockwise, zero when the two are parallel.
        """
        self._require_same_type(other, "cross")
        return self.x * other.y - self.y * other.x
