"""2D vector math utilities."""

from .math import Vector2D, rotate_point
from .ops import (
    add,
    distance,
    divide,
    dot,
    from_angle,
    magnitude,
    multiply,
    negate,
    new,
    normalize,
    rotate,
    subtract,
)

__all__ = [
    "Vector2D",
    "add",
    "distance",
    "divide",
    "dot",
    "from_angle",
    "magnitude",
    "multiply",
    "negate",
    "new",
    "normalize",
    "rotate",
    "rotate_point",
    "subtract",
]
