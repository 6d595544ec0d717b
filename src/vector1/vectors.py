"""
Wider vector value types.

Vector2, Vector3 and Vector4 mirror the multi-component vectors of a game
engine. They carry no math of their own: they are the endpoints of the
widening and narrowing conversions in vector1.conversions.

These objects are immutable (frozen=True).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Two-component vector (x, y)."""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Vector3:
    """Three-component vector (x, y, z)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Vector4:
    """Four-component vector (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0
