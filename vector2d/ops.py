"""Flat function API over Vector2D.

Every function returns a new vector and leaves its arguments untouched,
except ``negate`` which flips its argument in place. Division by zero
propagates inf/nan instead of raising.
"""

from __future__ import annotations

from . import config
from .math import transforms
from .math.vec2 import Vector2D


def new(x: float | None = None, y: float | None = None) -> Vector2D:
    """Construct a vector; missing (None or False) components default to zero."""
    return Vector2D(
        config.DEFAULT_X if x is None or x is False else x,
        config.DEFAULT_Y if y is None or y is False else y,
    )


def add(a: Vector2D, b: Vector2D) -> Vector2D:
    return a + b


def subtract(a: Vector2D, b: Vector2D) -> Vector2D:
    return a - b


def multiply(v: Vector2D, scalar: float) -> Vector2D:
    return v * scalar


def divide(v: Vector2D, scalar: float) -> Vector2D:
    return v / scalar


def magnitude(v: Vector2D) -> float:
    return v.magnitude()


def normalize(v: Vector2D) -> Vector2D:
    """Unit vector in the direction of v; a zero vector comes back unchanged."""
    return v.normalize()


def from_angle(angle_deg: float) -> Vector2D:
    return transforms.from_angle(angle_deg)


def distance(a: Vector2D, b: Vector2D) -> float:
    return a.distance_to(b)


def dot(a: Vector2D, b: Vector2D) -> float:
    return a.dot(b)


def negate(v: Vector2D) -> Vector2D:
    """Flip the signs of v in place and return v."""
    return v.negate()


def rotate(v: Vector2D, angle_deg: float) -> Vector2D:
    return transforms.rotate_vector(v, angle_deg)
