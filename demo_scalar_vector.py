#!/usr/bin/env python3
"""
Demo: Walk through the ScalarVector API.

Shows derived properties, static operations, operators, conversions and
the YAML helpers.
"""

from vector1 import DivisionByZeroError, ScalarVector, Vector3
from vector1.conversions import from_vector3, to_int, to_vector3
from vector1.serialization import scalar_vector_to_yaml


def main():
    v = ScalarVector(-2.5)

    print("=" * 70)
    print(f"SCALAR VECTOR DEMO: {v}")
    print("=" * 70)
    print()

    print("📏 DERIVED PROPERTIES")
    print(f"  magnitude:             {v.magnitude}")
    print(f"  sqr_magnitude:         {v.sqr_magnitude}")
    print(f"  normalized:            {v.normalized}")
    print()

    print("🧭 STATIC OPERATIONS")
    print(f"  angle(1, -1):          {ScalarVector.angle(ScalarVector(1), ScalarVector(-1))}")
    print(f"  clamp_magnitude(5, 2): {ScalarVector.clamp_magnitude(ScalarVector(5), 2)}")
    print(f"  max(3, -4):            {ScalarVector.max(ScalarVector(3), ScalarVector(-4))}")
    print(f"  min(3, -4):            {ScalarVector.min(ScalarVector(3), ScalarVector(-4))}")
    print()

    print("➗ OPERATORS")
    a, b = ScalarVector(4), ScalarVector(2)
    print(f"  {a} + {b} = {a + b}")
    print(f"  {a} - {b} = {a - b}")
    print(f"  {a} * {b} = {a * b}")
    print(f"  {a} / {b} = {a / b}")
    print(f"  -{a} = {-a}")
    try:
        a / ScalarVector.zero
    except DivisionByZeroError as e:
        print(f"  {a} / (0) -> {type(e).__name__}: {e}")
    print()

    print("🔁 CONVERSIONS")
    print(f"  from_vector3(Vector3(7, 9, 9)): {from_vector3(Vector3(7, 9, 9))}")
    print(f"  to_vector3(ScalarVector(7)):    {to_vector3(ScalarVector(7))}")
    print(f"  to_int(ScalarVector(-2.5)):     {to_int(v)}")
    print()

    print("📄 YAML")
    print(scalar_vector_to_yaml(v))


if __name__ == "__main__":
    main()
