"""
Explicit conversions between ScalarVector, numbers and wider vectors.

ScalarVector never mixes with other types inside an operator. Moving a
value across the boundary is always spelled out with one of these
functions:

    numbers:  from_float / to_float, from_double / to_double,
              from_int / to_int
    vectors:  from_vector2 / to_vector2, from_vector3 / to_vector3,
              from_vector4 / to_vector4

Widening fills the new components with 0. Narrowing keeps x and discards
the rest.
"""

from __future__ import annotations

import numbers

from .scalar_vector import ScalarVector
from .vectors import Vector2, Vector3, Vector4


def _require(value, expected, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, expected):
        raise TypeError(f"Unsupported {name} type: {type(value)}")


# =============================================================================
# Numbers
# =============================================================================


def from_float(num: float) -> ScalarVector:
    """Wrap a real number, narrowing it to single precision."""
    _require(num, numbers.Real, "float")
    return ScalarVector(num)


def to_float(vector: ScalarVector) -> float:
    """The component as a Python float."""
    _require(vector, ScalarVector, "vector")
    return float(vector)


def from_double(num: float) -> ScalarVector:
    """
    Wrap a double-precision number.

    Python floats are already double precision, so this is the narrowing
    path of from_float: 0.1 becomes 0.10000000149011612.
    """
    _require(num, numbers.Real, "double")
    return ScalarVector(num)


def to_double(vector: ScalarVector) -> float:
    """The component widened to double precision (exact)."""
    _require(vector, ScalarVector, "vector")
    return float(vector)


def from_int(num: int) -> ScalarVector:
    """Wrap an integer. Integers above 2**24 round to the nearest single."""
    _require(num, numbers.Integral, "int")
    return ScalarVector(int(num))


def to_int(vector: ScalarVector) -> int:
    """
    The component truncated toward zero.

    Raises:
        ValueError: component is NaN
        OverflowError: component is infinite
    """
    _require(vector, ScalarVector, "vector")
    return int(vector)


# =============================================================================
# Vectors
# =============================================================================


def to_vector2(vector: ScalarVector) -> Vector2:
    _require(vector, ScalarVector, "vector")
    return Vector2(vector.x, 0.0)


def from_vector2(vector: Vector2) -> ScalarVector:
    _require(vector, Vector2, "Vector2")
    return ScalarVector(vector.x)


def to_vector3(vector: ScalarVector) -> Vector3:
    _require(vector, ScalarVector, "vector")
    return Vector3(vector.x, 0.0, 0.0)


def from_vector3(vector: Vector3) -> ScalarVector:
    _require(vector, Vector3, "Vector3")
    return ScalarVector(vector.x)


def to_vector4(vector: ScalarVector) -> Vector4:
    _require(vector, ScalarVector, "vector")
    return Vector4(vector.x, 0.0, 0.0, 0.0)


def from_vector4(vector: Vector4) -> ScalarVector:
    _require(vector, Vector4, "Vector4")
    return ScalarVector(vector.x)
