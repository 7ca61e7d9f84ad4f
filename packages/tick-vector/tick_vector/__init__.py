"""tick-vector - Euclidean vector types (2D, 3D, 4D and N-dimensional)."""
from __future__ import annotations

from tick_vector import ops
from tick_vector.config import DEFAULT_TOLERANCE, ToleranceConfig
from tick_vector.dynamic import DynamicVector
from tick_vector.factory import make_vector
from tick_vector.fixed import FixedVector
from tick_vector.scalar import divide
from tick_vector.types import DimensionMismatchError, IndexOutOfRangeError, Scalar, Vector
from tick_vector.vector2 import Vector2
from tick_vector.vector3 import Vector3
from tick_vector.vector4 import Vector4

__all__ = [
    "DEFAULT_TOLERANCE",
    "DimensionMismatchError",
    "DynamicVector",
    "FixedVector",
    "IndexOutOfRangeError",
    "Scalar",
    "ToleranceConfig",
    "Vector",
    "Vector2",
    "Vector3",
    "Vector4",
    "divide",
    "make_vector",
    "ops",
]
