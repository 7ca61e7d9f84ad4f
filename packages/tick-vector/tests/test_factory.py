"""Tests for make_vector."""
from __future__ import annotations

import math

import pytest

from tick_vector import DimensionMismatchError, FixedVector, make_vector, ops

Vector5 = make_vector("Vector5", "abcde")
RGB = make_vector("RGB", ["r", "g", "b"])


class TestMakeVectorType:
    def test_is_fixed_vector(self) -> None:
        assert issubclass(Vector5, FixedVector)
        assert Vector5.__name__ == "Vector5"

    def test_components(self) -> None:
        assert Vector5.components() == ("a", "b", "c", "d", "e")
        assert Vector5.dimensions() == 5

    def test_default_is_zero(self) -> None:
        assert Vector5().to_tuple() == (0.0,) * 5

    def test_named_access(self) -> None:
        color = RGB(1.0, 0.5, 0.0)
        assert color.r == 1.0
        assert color.g == 0.5
        assert color.b == 0.0

    def test_repr(self) -> None:
        assert repr(RGB(1.0, 0.5, 0.0) * 2) == "RGB(r=2.0, g=1.0, b=0.0)"

    def test_no_instance_dict(self) -> None:
        with pytest.raises(AttributeError):
            RGB().__dict__


class TestMakeVectorContract:
    def test_dot(self) -> None:
        a = Vector5(1.0, 2.0, 3.0, 4.0, 5.0)
        assert a.dot(a) == 55.0

    def test_magnitude(self) -> None:
        assert RGB(2.0, 3.0, 6.0).magnitude() == 7.0

    def test_normalize(self) -> None:
        assert ops.magnitude(Vector5(1.0, 1.0, 1.0, 1.0, 1.0).normalize()) == pytest.approx(1.0)

    def test_normalize_zero_is_nan(self) -> None:
        assert all(math.isnan(c) for c in RGB().normalize())

    def test_arithmetic(self) -> None:
        assert RGB(1.0, 2.0, 3.0) + RGB(1.0, 1.0, 1.0) == RGB(2.0, 3.0, 4.0)
        assert RGB(1.0, 2.0, 3.0) - RGB(1.0, 1.0, 1.0) == RGB(0.0, 1.0, 2.0)
        assert RGB(2.0, 4.0, 6.0) / 2.0 == RGB(1.0, 2.0, 3.0)

    def test_distinct_types_do_not_mix(self) -> None:
        with pytest.raises(TypeError):
            RGB(1.0, 2.0, 3.0).dot(Vector5())  # type: ignore[arg-type]

    def test_conversions(self) -> None:
        color = RGB.from_array([0.1, 0.2, 0.3])
        assert color.to_array() == [0.1, 0.2, 0.3]
        assert RGB.from_tuple(color.to_tuple()) == color
        with pytest.raises(DimensionMismatchError):
            RGB.from_array([0.1, 0.2])

    def test_nan_equality_follows_ieee(self) -> None:
        assert RGB(math.nan, 0.0, 0.0) != RGB(math.nan, 0.0, 0.0)
        assert RGB(1.0, 0.0, 0.0) == RGB(1.0, 0.0, 0.0)

    def test_hashable(self) -> None:
        assert len({RGB(1, 2, 3), RGB(1.0, 2.0, 3.0)}) == 1

    def test_ordering(self) -> None:
        assert RGB(0.0, 1.0, 0.0) < RGB(0.0, 1.0, 0.5)


class TestMakeVectorValidation:
    def test_empty_components_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one component"):
            make_vector("Empty", [])

    def test_bad_type_name_raises(self) -> None:
        with pytest.raises(ValueError, match="must be an identifier"):
            make_vector("not a name", ["x"])

    def test_bad_component_name_raises(self) -> None:
        with pytest.raises(ValueError, match="invalid component name"):
            make_vector("V", ["1x"])

    def test_keyword_component_raises(self) -> None:
        with pytest.raises(ValueError, match="invalid component name"):
            make_vector("V", ["class"])

    def test_duplicate_component_raises(self) -> None:
        with pytest.raises(ValueError, match="duplicate component name"):
            make_vector("V", ["x", "x"])

    def test_reserved_component_raises(self) -> None:
        with pytest.raises(ValueError, match="reserved"):
            make_vector("V", ["dot", "y"])

    def test_private_component_raises(self) -> None:
        with pytest.raises(ValueError, match="reserved"):
            make_vector("V", ["_x"])
