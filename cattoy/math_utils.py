"""2D vector math for entity positions and velocities.

Kept free of pygame so the simulation core can run headless.
"""

from __future__ import annotations

import math


class Vector2:
    """Mutable 2D vector. Physics updates it in place once per frame."""

    __slots__ = ("x", "y")

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length == 0:
            return Vector2(0, 0)
        return Vector2(self.x / length, self.y / length)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def heading(self) -> float:
        """Travel direction in radians, used to orient fish."""
        return math.atan2(self.y, self.x)

    def update(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)

    def copy(self) -> "Vector2":
        return Vector2(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not Vector2:
            return False
        return abs(self.x - other.x) < 1e-9 and abs(self.y - other.y) < 1e-9

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Vector2({self.x}, {self.y})"

    def add_inplace(self, other: "Vector2") -> "Vector2":
        """Integrate ``other`` into this vector (``pos += vel``)."""
        self.x += other.x
        self.y += other.y
        return self

    def mul_inplace(self, scalar: float) -> "Vector2":
        self.x *= scalar
        self.y *= scalar
        return self

    def limit_inplace(self, max_length: float) -> "Vector2":
        """Speed clamp: shrink to ``max_length`` keeping direction.

        Vectors already within the limit are left alone.
        """
        length_sq = self.x * self.x + self.y * self.y
        if length_sq > max_length * max_length and length_sq > 0:
            scale = max_length / math.sqrt(length_sq)
            self.x *= scale
            self.y *= scale
        return self


def rotate_point(x: float, y: float, angle: float) -> tuple:
    """Rotate ``(x, y)`` about the origin by ``angle`` radians.

    Fish outlines are built around the origin, rotated to the heading and then
    translated onto the entity position.
    """
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return (x * cos_a - y * sin_a, x * sin_a + y * cos_a)


__all__ = ["Vector2", "rotate_point"]
