"""
Tests for explicit conversions between ScalarVector, numbers and vectors.
"""

import dataclasses
import math

import pytest

from vector1 import ScalarVector, Vector2, Vector3, Vector4
from vector1.conversions import (
    from_double,
    from_float,
    from_int,
    from_vector2,
    from_vector3,
    from_vector4,
    to_double,
    to_float,
    to_int,
    to_vector2,
    to_vector3,
    to_vector4,
)
from vector1.precision import to_single


class TestNumberConversions:
    """Test conversions to and from numbers."""

    def test_float_round_trip(self):
        """Should return the wrapped float."""
        assert to_float(from_float(5.0)) == 5.0

    def test_from_float_narrows(self):
        assert from_float(0.1).x == to_single(0.1)

    def test_from_double_narrows(self):
        """Double precision input is truncated to single precision."""
        assert from_double(0.1).x == to_single(0.1)
        assert from_double(1e300).x == math.inf

    def test_to_double(self):
        assert to_double(ScalarVector(0.1)) == to_single(0.1)

    def test_from_int(self):
        assert from_int(7).x == 7.0
        assert from_int(-7).x == -7.0

    def test_from_int_rounds_large_values(self):
        """Integers beyond 2**24 round to the nearest single."""
        assert from_int(16777217).x == 16777216.0

    def test_from_int_overflow_becomes_infinity(self):
        """Integers too large for a float become signed infinity."""
        assert from_int(10 ** 400).x == math.inf
        assert from_int(-(10 ** 400)).x == -math.inf
        assert from_double(10 ** 400).x == math.inf

    def test_to_int_truncates_toward_zero(self):
        assert to_int(from_float(7.9)) == 7
        assert to_int(from_float(-7.9)) == -7

    def test_to_int_of_non_finite_raises(self):
        with pytest.raises(OverflowError):
            to_int(ScalarVector(math.inf))
        with pytest.raises(ValueError):
            to_int(ScalarVector(math.nan))

    def test_rejects_wrong_types(self):
        with pytest.raises(TypeError):
            from_float("5")
        with pytest.raises(TypeError):
            from_double(None)
        with pytest.raises(TypeError):
            from_int(2.5)
        with pytest.raises(TypeError):
            from_int(True)
        with pytest.raises(TypeError):
            to_float(5.0)
        with pytest.raises(TypeError):
            to_int(5)


class TestVectorConversions:
    """Test widening and narrowing conversions."""

    def test_narrow_vector3(self):
        """Extra components are discarded."""
        assert from_vector3(Vector3(7, 9, 9)).x == 7.0

    def test_widen_to_vector3(self):
        """New components are zero."""
        assert to_vector3(from_int(7)) == Vector3(7, 0, 0)

    def test_vector2(self):
        assert to_vector2(ScalarVector(-1.5)) == Vector2(-1.5, 0.0)
        assert from_vector2(Vector2(2.5, 8)).x == 2.5

    def test_vector4(self):
        assert to_vector4(ScalarVector(3)) == Vector4(3.0, 0.0, 0.0, 0.0)
        assert from_vector4(Vector4(1, 2, 3, 4)).x == 1.0

    def test_narrowing_is_single_precision(self):
        assert from_vector3(Vector3(0.1, 0, 0)).x == to_single(0.1)

    def test_wrong_vector_type_raises(self):
        with pytest.raises(TypeError):
            from_vector2(Vector3(1, 2, 3))
        with pytest.raises(TypeError):
            from_vector4(Vector2(1, 2))
        with pytest.raises(TypeError):
            to_vector3(Vector3(1, 2, 3))

    def test_vectors_are_immutable(self):
        v = to_vector3(ScalarVector(1))
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.x = 5.0

    def test_vector_defaults(self):
        assert Vector2() == Vector2(0.0, 0.0)
        assert Vector4().w == 0.0
