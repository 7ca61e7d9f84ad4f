"""Functional vector API. Each helper delegates to the vector's own methods,
so it works for Vector2/3/4, DynamicVector, and make_vector() types alike."""
from __future__ import annotations

from typing import TypeVar

from tick_vector.config import DEFAULT_TOLERANCE, ToleranceConfig
from tick_vector.types import Scalar, Vector

V = TypeVar("V", bound=Vector)


def add(a: V, b: V) -> V:
    return a + b  # type: ignore[operator]


def sub(a: V, b: V) -> V:
    return a - b  # type: ignore[operator]


def mul(v: V, s: Scalar) -> V:
    return v * s  # type: ignore[operator]


def div(v: V, s: Scalar) -> V:
    return v / s  # type: ignore[operator]


def dot(a: V, b: V) -> Scalar:
    return a.dot(b)


def magnitude_sq(v: V) -> Scalar:
    return v.magnitude_sq()  # type: ignore[attr-defined]


def magnitude(v: V) -> Scalar:
    return v.magnitude()


def normalize(v: V) -> V:
    return v.normalize()


def cross(a: V, b: V) -> Scalar | V:
    """2D cross returns a scalar, 3D cross returns a Vector3."""
    method = getattr(a, "cross", None)
    if method is None:
        raise TypeError(f"cross product is not defined for {type(a).__name__}")
    return method(b)


def distance_sq(a: V, b: V) -> Scalar:
    return magnitude_sq(sub(a, b))


def distance(a: V, b: V) -> Scalar:
    return magnitude(sub(a, b))


def clamp_magnitude(v: V, max_mag: Scalar) -> V:
    if magnitude(v) <= max_mag:
        return v
    return mul(normalize(v), max_mag)


def isclose(a: V, b: V, config: ToleranceConfig = DEFAULT_TOLERANCE) -> bool:
    return a.isclose(b, config)  # type: ignore[attr-defined]
