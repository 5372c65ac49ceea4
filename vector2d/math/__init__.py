"""Vector math primitives."""

from .transforms import from_angle, rotate_point, rotate_vector
from .vec2 import Vector2D, ieee_div

__all__ = [
    "Vector2D",
    "from_angle",
    "ieee_div",
    "rotate_point",
    "rotate_vector",
]
