"""Integer grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Point2D:
    """An integer point on a grid; y grows downwards."""

    x: int = 0
    y: int = 0

    UP: ClassVar[Point2D]
    DOWN: ClassVar[Point2D]
    LEFT: ClassVar[Point2D]
    RIGHT: ClassVar[Point2D]

    def __lt__(self, other: Point2D) -> bool:
        """Order by coordinate sum, then by x."""
        if not isinstance(other, Point2D):
            return NotImplemented
        return (self.x + self.y, self.x) < (other.x + other.y, other.x)

    def __gt__(self, other: Point2D) -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return (self.x + self.y, self.x) > (other.x + other.y, other.x)

    def __add__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point2D) -> Point2D:
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def to_string(self) -> str:
        return f"{{{self.x}, {self.y}}}"


Point2D.UP = Point2D(0, -1)
Point2D.DOWN = Point2D(0, 1)
Point2D.LEFT = Point2D(-1, 0)
Point2D.RIGHT = Point2D(1, 0)