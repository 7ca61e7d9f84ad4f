"""Tolerance configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceConfig:
    """Immutable settings for approximate vector comparison.

    Attributes:
        rel_tol: Relative tolerance per component (see math.isclose).
        abs_tol: Absolute tolerance per component, useful near zero.
    """

    rel_tol: float = 1e-9
    abs_tol: float = 0.0

    def __post_init__(self) -> None:
        if self.rel_tol < 0.0:
            raise ValueError(f"rel_tol must be >= 0, got {self.rel_tol}")
        if self.abs_tol < 0.0:
            raise ValueError(f"abs_tol must be >= 0, got {self.abs_tol}")


DEFAULT_TOLERANCE = ToleranceConfig()
