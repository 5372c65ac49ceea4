"""2D vector value type."""

from __future__ import annotations

from dataclasses import dataclass
from math import copysign, cos, hypot, inf, isclose, isnan, nan, radians, sin

from .. import config


def ieee_div(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising ZeroDivisionError."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or isnan(numerator):
        return nan
    return copysign(inf, numerator) * copysign(1.0, denominator)


@dataclass
class Vector2D:
    """Pair of real components.

    Treated as a value by every operation except ``negate``, which flips
    the components in place.
    """

    x: float = config.DEFAULT_X
    y: float = config.DEFAULT_Y

    @classmethod
    def from_angle(cls, angle_deg: float) -> "Vector2D":
        """Unit vector pointing at angle_deg; 0 degrees is (1, 0)."""
        angle_rad = radians(angle_deg)
        return cls(cos(angle_rad), sin(angle_rad))

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> "Vector2D":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> "Vector2D":
        return Vector2D(ieee_div(self.x, scalar), ieee_div(self.y, scalar))

    def __neg__(self) -> "Vector2D":
        return self.negated()

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2D") -> float:
        """2D cross product returning a scalar (z-component)."""
        return self.x * other.y - self.y * other.x

    def magnitude(self) -> float:
        # hypot prefers inf over nan; nan must win here.
        if isnan(self.x) or isnan(self.y):
            return nan
        return hypot(self.x, self.y)

    def normalize(self) -> "Vector2D":
        """Return a unit vector; the zero vector is returned as-is."""
        mag = self.magnitude()
        if mag == 0:
            return self
        return self / mag

    def distance_to(self, other: "Vector2D") -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        if isnan(dx) or isnan(dy):
            return nan
        return hypot(dx, dy)

    def negate(self) -> "Vector2D":
        """Flip both components in place and return self."""
        self.x = -self.x
        self.y = -self.y
        return self

    def negated(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def rotate(self, angle_deg: float) -> "Vector2D":
        """Rotate about the origin by angle_deg, counter-clockwise positive."""
        angle_rad = radians(angle_deg)
        cos_a = cos(angle_rad)
        sin_a = sin(angle_rad)
        return Vector2D(
            self.x * cos_a - self.y * sin_a,
            self.x * sin_a + self.y * cos_a,
        )

    def is_close(self, other: "Vector2D", abs_tol: float = config.DEFAULT_ABS_TOL) -> bool:
        return isclose(self.x, other.x, abs_tol=abs_tol) and isclose(self.y, other.y, abs_tol=abs_tol)

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)
