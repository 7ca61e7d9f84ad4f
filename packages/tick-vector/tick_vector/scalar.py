"""IEEE-754 scalar helpers.

Python raises ZeroDivisionError for ``x / 0.0`` and its list/tuple
comparisons treat a NaN object as equal to itself. Vector math here follows
floating-point semantics instead: division by zero yields inf or nan, and
NaN components never compare equal or ordered.
"""
from __future__ import annotations

import math
from numbers import Real
from typing import Sequence

from tick_vector.types import Scalar


def is_scalar(value: object) -> bool:
    return isinstance(value, Real)


def divide(numerator: Scalar, denominator: Scalar) -> Scalar:
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        # Sign of the zero matters: 1 / -0.0 is -inf.
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


def compare(a: Sequence[Scalar], b: Sequence[Scalar]) -> int | None:
    """Lexicographic comparison of two component sequences.

    Returns -1, 0 or 1, or None when a NaN makes the pair unordered. The first
    component is most significant; a shorter prefix sorts first.
    """
    for x, y in zip(a, b):
        if x < y:
            return -1
        if x > y:
            return 1
        if x != y:
            return None
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1
