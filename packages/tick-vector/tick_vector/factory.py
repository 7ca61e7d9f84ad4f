"""make_vector - declare new fixed-dimension vector types at runtime."""
from __future__ import annotations

import keyword
from dataclasses import make_dataclass
from typing import Iterable

from tick_vector.fixed import FixedVector


def make_vector(name: str, components: Iterable[str]) -> type[FixedVector]:
    """Build a frozen FixedVector dataclass with the given component names.

    The result behaves exactly like Vector2/3/4 minus the cross product:
    dot, magnitude, normalize, elementwise operators, ordering and
    array/tuple conversions, all in the order ``components`` lists them.

    >>> RGB = make_vector("RGB", ["r", "g", "b"])
    >>> RGB(1.0, 0.5, 0.0) * 2
    RGB(r=2.0, g=1.0, b=0.0)
    """
    if not name.isidentifier():
        raise ValueError(f"vector type name must be an identifier, got {name!r}")
    names = list(components)
    if not names:
        raise ValueError("a vector type needs at least one component")
    seen: set[str] = set()
    for comp in names:
        if not comp.isidentifier() or keyword.iskeyword(comp):
            raise ValueError(f"invalid component name {comp!r}")
        if comp.startswith("_") or hasattr(FixedVector, comp):
            raise ValueError(f"component name {comp!r} is reserved")
        if comp in seen:
            raise ValueError(f"duplicate component name {comp!r}")
        seen.add(comp)

    return make_dataclass(
        name,
        [(comp, float, 0.0) for comp in names],
        bases=(FixedVector,),
        frozen=True,
        slots=True,
        eq=False,
    )
