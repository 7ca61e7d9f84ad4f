"""Vector4 - 4D vector with x, y, z and w components. No cross product."""
from __future__ import annotations

from dataclasses import dataclass

from tick_vector.fixed import FixedVector
from tick_vector.types import Scalar


@dataclass(frozen=True, slots=True, eq=False)
class Vector4(FixedVector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def dot(self, other: Vector4) -> Scalar:
        self._require_same_type(other, "dot")
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def magnitude_sq(self) -> Scalar:
        return self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w
