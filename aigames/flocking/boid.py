"""A particle that steers by a set of flocking rules."""

from __future__ import annotations

from typing import Any, Iterable

from aigames.core.color import Color
from aigames.core.engine import Engine
from aigames.core.polygon import Circle
from aigames.core.vectors import Vector2
from aigames.flocking.particle import Particle
from aigames.flocking.rules import FlockingRule

_RADIUS_CIRCLE_SAMPLES = 12


class Boid(Particle):
    """A particle that reacts to the boids within its detection radius.

    ``world`` is anything with a ``boids`` list and an ``engine``.
    """

    def __init__(self, engine: Engine, world: Any) -> None:
        super().__init__(engine)
        self.world = world
        self.detection_radius = 100.0
        self.rules: list[FlockingRule] = []
        self.circle = Circle(_RADIUS_CIRCLE_SAMPLES)
        self.draw_debug_radius = True
        self.draw_debug_rules = True
        self.circle_color = Color.PURPLE

    def set_flocking_rules(self, rules: Iterable[FlockingRule]) -> None:
        """Replace this boid's rules with independent copies of ``rules``."""
        self.rules = [rule.clone() for rule in rules]

    def compute_neighborhood(self) -> list[Boid]:
        """Every other boid of the world within the detection radius."""
        radius_squared = self.detection_radius * self.detection_radius
        position = self.position
        return [
            other
            for other in self.world.boids
            if other is not self
            and Vector2.squared_distance(position, other.position) <= radius_squared
        ]

    def update(self, delta_time: float) -> None:
        """Move, then accumulate the forces of every rule for the next frame."""
        super().update(delta_time)
        neighborhood = self.compute_neighborhood()
        for rule in self.rules:
            self.apply_force(rule.compute_weighted_force(neighborhood, self))

    def on_draw(self, renderer: Any) -> None:
        """Draw the detection radius and rule forces when asked to, then the ship."""
        if self.draw_debug_radius:
            self.circle.draw_at(
                renderer,
                self.transform.position,
                Vector2(self.detection_radius, self.detection_radius),
                Vector2.zero(),
                self.circle_color,
            )
        if self.draw_debug_rules:
            for rule in self.rules:
                if rule.is_enabled:
                    rule.draw(self, renderer)
        super().on_draw(renderer)