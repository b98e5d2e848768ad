"""Two- and three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass

from aigames.core.rng import range_float

_EQUALITY_TOLERANCE = 1.0e-6


@dataclass(eq=False)
class Vector2:
    """A 2D vector whose y axis points down, as on screen."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def up(cls) -> Vector2:
        return cls(0.0, -1.0)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0.0, 1.0)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1.0, 0.0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1.0, 0.0)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0.0, 0.0)

    @classmethod
    def identity(cls) -> Vector2:
        return cls(1.0, 1.0)

    @classmethod
    def random(cls, start: float, end: float) -> Vector2:
        """A vector whose components are each drawn from ``[start, end]``."""
        return cls(range_float(start, end), range_float(start, end))

    @classmethod
    def from_radian(cls, radian: float) -> Vector2:
        return cls(math.cos(radian), math.sin(radian))

    @classmethod
    def from_degree(cls, degree: float) -> Vector2:
        return cls.from_radian(math.radians(degree))

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        return (a - b).magnitude()

    @staticmethod
    def squared_distance(a: Vector2, b: Vector2) -> float:
        return (a.x - b.x) ** 2 + (a.y - b.y) ** 2

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __pos__(self) -> Vector2:
        return Vector2(self.x, self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)

    def __eq__(self, other: object) -> bool:
        """Vectors are equal when their squared distance is below 1e-6."""
        if not isinstance(other, Vector2):
            return NotImplemented
        return (self - other).sqr_magnitude() < _EQUALITY_TOLERANCE

    __hash__ = None  # type: ignore[assignment]

    def __getitem__(self, index: int) -> float:
        if index == 0:
            return self.x
        if index == 1:
            return self.y
        raise IndexError("Out of Vector2 range")

    def rotate(self, degrees: float) -> Vector2:
        """Return this vector rotated by ``degrees``."""
        radians = math.radians(degrees)
        sin, cos = math.sin(radians), math.cos(radians)
        return Vector2(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def rotate_towards(self, up: Vector2) -> Vector2:
        """Rotate by the angle that ``up`` makes with the up direction."""
        return self.rotate(up.angle_degree())

    def angle_radian(self) -> float:
        """Angle from the up direction, clockwise on screen."""
        return math.atan2(self.x, -self.y)

    def angle_degree(self) -> float:
        return math.degrees(self.angle_radian())

    def sqr_magnitude(self) -> float:
        return self.x * self.x + self.y * self.y

    def magnitude(self) -> float:
        return math.sqrt(self.sqr_magnitude())

    def normalized(self) -> Vector2:
        """Unit vector in the same direction; a zero vector is returned as is."""
        length = self.magnitude()
        if length > 0.0:
            return self / length
        return Vector2(self.x, self.y)


@dataclass
class Vector3:
    """A plain 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0