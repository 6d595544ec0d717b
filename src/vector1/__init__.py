"""
vector1: a one-dimensional vector value type.

ScalarVector wraps a single single-precision component and exposes the
API shape of engine 2D/3D/4D vectors: magnitude, normalization, clamping,
min/max, arithmetic operators and explicit conversions.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Rendering or editor UI
    - Persistence
    - Any host engine

Conversions to numbers and wider vectors live in vector1.conversions.
Plain-data helpers live in vector1.serialization.
"""

from .scalar_vector import DivisionByZeroError, ScalarVector
from .vectors import Vector2, Vector3, Vector4

__version__ = "0.1.0"

__all__ = [
    "DivisionByZeroError",
    "ScalarVector",
    "Vector2",
    "Vector3",
    "Vector4",
]
