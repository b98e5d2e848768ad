"""A moving object with velocity and accumulated steering forces."""

from __future__ import annotations

from typing import Any

from aigames.core.color import Color, Color32
from aigames.core.engine import Engine
from aigames.core.gameobject import GameObject
from aigames.core.polygon import Polygon
from aigames.core.vectors import Vector2

_SHIP_OUTLINE = (Vector2(0, -2), Vector2(1, 1), Vector2(0, 0), Vector2(-1, 1))
_ACCELERATION_LINE_SCALE = 2.0


class Particle(GameObject):
    """A ship-shaped object that integrates forces into motion each frame."""

    def __init__(
        self,
        engine: Engine,
        size: float = 4.0,
        color: Color32 | None = None,
    ) -> None:
        super().__init__(engine)
        self.size = size
        self.color = color if color is not None else Color32.random_color(31, 255)
        self.velocity = Vector2.zero()
        self.acceleration = Vector2.zero()
        self.previous_acceleration = Vector2.zero()
        self.has_constant_speed = False
        self.speed = 120.0
        self.max_acceleration = 10.0
        self.draw_acceleration = False
        self.polygon = Polygon(_SHIP_OUTLINE)
        self.transform.scale = Vector2(2.0, 2.0)

    @property
    def position(self) -> Vector2:
        return self.transform.position

    @position.setter
    def position(self, value: Vector2) -> None:
        self.transform.position = value

    def apply_force(self, force: Vector2) -> None:
        """Add ``force`` to this frame's acceleration."""
        self.acceleration = self.acceleration + force

    def set_velocity(self, velocity: Vector2) -> None:
        """Set the velocity and turn the particle to face it."""
        self.velocity = velocity
        self.transform.rotation = velocity.normalized()

    def update(self, delta_time: float) -> None:
        """Cap and apply the acceleration, limit the speed, then move."""
        if self.acceleration.magnitude() > self.max_acceleration:
            self.acceleration = self.acceleration.normalized() * self.max_acceleration

        self.set_velocity(self.velocity + self.acceleration)
        self.previous_acceleration = self.acceleration
        self.acceleration = Vector2.zero()

        if self.has_constant_speed or self.velocity.magnitude() > self.speed:
            self.set_velocity(self.velocity.normalized() * self.speed)

        self.transform.position = self.transform.position + self.velocity * delta_time

    def on_draw(self, renderer: Any) -> None:
        """Draw the ship outline, and the last acceleration if asked to."""
        self.polygon.draw(renderer, self.transform, self.color)
        if self.draw_acceleration:
            position = self.position
            Polygon.draw_line(
                renderer,
                position,
                position + self.previous_acceleration * _ACCELERATION_LINE_SCALE,
                Color.PURPLE,
            )