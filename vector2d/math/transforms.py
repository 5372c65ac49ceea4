"""Angle-based transforms. Angles are in degrees, counter-clockwise positive."""

from __future__ import annotations

from .vec2 import Vector2D


def from_angle(angle_deg: float) -> Vector2D:
    """Unit vector pointing at angle_deg; 0 degrees is (1, 0)."""
    return Vector2D.from_angle(angle_deg)


def rotate_vector(vec: Vector2D, angle_deg: float) -> Vector2D:
    """Rotate a vector about the origin by angle_deg (degrees)."""
    return vec.rotate(angle_deg)


def rotate_point(point: Vector2D, origin: Vector2D, angle_deg: float) -> Vector2D:
    """Rotate a point around an origin by angle_deg (degrees)."""
    return origin + (point - origin).rotate(angle_deg)
