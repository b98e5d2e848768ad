"""Outlined polygons drawn through a line renderer."""

from __future__ import annotations

from typing import Iterable, Protocol

from aigames.core.color import Color32
from aigames.core.transform import Transform
from aigames.core.vectors import Vector2

ALPHA_OPAQUE = 255


class Renderer(Protocol):
    """What a polygon needs from a drawing surface."""

    def set_draw_color(self, r: int, g: int, b: int, a: int) -> None: ...

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None: ...


class Polygon:
    """A closed outline given by its points in local space."""

    def __init__(self, points: Iterable[Vector2] | None = None) -> None:
        self.points: list[Vector2] = list(points) if points is not None else []

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.points!r})"

    def drawable_points(self, transform: Transform) -> list[Vector2]:
        """The points scaled, rotated and moved by ``transform``."""
        angle = transform.rotation.angle_degree()
        return [
            Vector2(transform.scale.x * p.x, transform.scale.y * p.y).rotate(angle)
            + transform.position
            for p in self.points
        ]

    def draw(self, renderer: Renderer, transform: Transform, color: Color32) -> None:
        """Draw the closed outline in an opaque ``color``."""
        renderer.set_draw_color(color.r, color.g, color.b, ALPHA_OPAQUE)
        points = self.drawable_points(transform)
        for start, end in zip(points, points[1:] + points[:1]):
            renderer.draw_line(int(start.x), int(start.y), int(end.x), int(end.y))

    def draw_at(
        self,
        renderer: Renderer,
        position: Vector2,
        scale: Vector2,
        rotation: Vector2,
        color: Color32,
    ) -> None:
        self.draw(renderer, Transform(position, scale, rotation), color)

    @staticmethod
    def draw_line(renderer: Renderer, v1: Vector2, v2: Vector2, color: Color32) -> None:
        """Draw one opaque line between two points."""
        renderer.set_draw_color(color.r, color.g, color.b, ALPHA_OPAQUE)
        renderer.draw_line(int(v1.x), int(v1.y), int(v2.x), int(v2.y))


class Circle(Polygon):
    """A unit circle approximated by ``sample`` evenly spaced points."""

    def __init__(self, sample: int) -> None:
        super().__init__(
            Vector2.up().rotate(360.0 * i / sample) for i in range(sample)
        )


class Square(Polygon):
    """A unit-radius square standing on a corner-free base."""

    def __init__(self) -> None:
        super().__init__(Vector2.up().rotate(angle) for angle in (45, 135, 225, 315))


class Hexagon(Polygon):
    """A unit-radius hexagon with a vertex pointing up."""

    def __init__(self) -> None:
        super().__init__(
            Vector2.up().rotate(angle) for angle in (0, 60, 120, 180, 240, 300)
        )