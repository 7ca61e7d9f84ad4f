"""Vector3 - 3D vector with x, y and z components."""
from __future__ import annotations

from dataclasses import dataclass

from tick_vector.fixed import FixedVector
from tick_vector.types import Scalar


@dataclass(frozen=True, slots=True, eq=False)
class Vector3(FixedVector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def dot(self, other: Vector3) -> Scalar:
        self._require_same_type(other, "dot")
        return self.x * other.x + self.y * other.y + self.z * other.z

    def magnitude_sq(self) -> Scalar:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def cross(self, other: Vector3) -> Vector3:
        """Right-handed cross product, perpendicular to both operands.

        Anticommutative, and the zero vector when the operands are parallel.
        """
        self._require_same_type(other, "cross")
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )
