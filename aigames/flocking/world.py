"""The flock: creates boids, hands them their rules and keeps them on screen."""

from __future__ import annotations

from aigames.core.color import Color
from aigames.core.engine import Engine
from aigames.core.gameobject import GameObject
from aigames.core.rng import range_float
from aigames.core.vectors import Vector2
from aigames.flocking.boid import Boid
from aigames.flocking.particle import Particle
from aigames.flocking.rules import (
    AlignmentRule,
    BoundedAreaRule,
    CohesionRule,
    FlockingRule,
    MouseInfluenceRule,
    SeparationRule,
    WindRule,
)

_UNCAPPED_ACCELERATION = 10000.0
_ARROW_FORCE = 20.0


class FlockingWorld(GameObject):
    """Owns the boids and the shared rule settings they copy."""

    def __init__(self, engine: Engine) -> None:
        super().__init__(engine)
        self.nb_boids = 300
        self.has_constant_speed = False
        self.desired_speed = 120.0
        self.has_max_acceleration = False
        self.max_acceleration = 10.0
        self.detection_radius = 35.0
        self.show_radius = False
        self.show_rules = False
        self.show_acceleration = False
        self.boids_rules: list[FlockingRule] = []
        self.default_weights: list[float] = []
        self.boids: list[Boid] = []

    def initialize_rules(self) -> None:
        """Create the starting rules and remember their weights as defaults."""
        self.boids_rules = [
            SeparationRule(self, 25.0, 4.75),
            CohesionRule(self, 4.25),
            AlignmentRule(self, 2.9),
            MouseInfluenceRule(self, 2.0),
            BoundedAreaRule(self, 20, 8.0, False),
            WindRule(self, 1.0, 6.0, False),
        ]
        self.default_weights = [rule.weight for rule in self.boids_rules]

    def apply_flocking_rules_to_all_boids(self) -> None:
        for boid in self.boids:
            boid.set_flocking_rules(self.boids_rules)

    def set_number_of_boids(self, number: int) -> None:
        """Add or remove boids (from the end) until there are ``number``."""
        number = max(number, 0)
        self.nb_boids = number
        while len(self.boids) < number:
            self.boids.append(self.create_boid())
        while len(self.boids) > number:
            self.engine.destroy(self.boids.pop())

    def randomize_boid_position_and_velocity(self, boid: Boid) -> None:
        """Place ``boid`` anywhere in the window, heading a random way."""
        size = self.engine.window_size
        boid.position = Vector2(range_float(0.0, size.x), range_float(0.0, size.y))
        heading = Vector2.up().rotate(range_float(0.0, 360.0))
        boid.set_velocity(heading * self.desired_speed)

    def warp_particle_if_out_of_bounds(self, particle: Particle) -> None:
        """Wrap a particle that left the window back in from the opposite side."""
        position = particle.transform.position
        size = self.engine.window_size
        x, y = position.x, position.y

        if x < 0:
            x += size.x
        elif x > size.x:
            x -= size.x

        if y < 0:
            y += size.y
        elif y > size.y:
            y -= size.y

        wrapped = Vector2(x, y)
        if wrapped != position:
            particle.transform.position = wrapped

    def create_boid(self) -> Boid:
        """A new boid set up with the world's current settings."""
        boid = Boid(self.engine, self)
        self.randomize_boid_position_and_velocity(boid)
        boid.set_flocking_rules(self.boids_rules)
        boid.detection_radius = self.detection_radius
        boid.speed = self.desired_speed
        boid.has_constant_speed = self.has_constant_speed
        boid.draw_acceleration = self.show_acceleration
        boid.draw_debug_radius = self.show_radius
        boid.draw_debug_rules = self.show_rules
        return boid

    def restore_default_weights(self) -> None:
        """Reset every rule's weight to its starting value and share the rules."""
        for rule, weight in zip(self.boids_rules, self.default_weights):
            rule.weight = weight
        self.apply_flocking_rules_to_all_boids()

    def set_detection_radius(self, radius: float) -> None:
        self.detection_radius = radius
        for boid in self.boids:
            boid.detection_radius = radius

    def set_speed(self, speed: float) -> None:
        self.desired_speed = speed
        for boid in self.boids:
            boid.speed = speed

    def set_max_acceleration(self, enabled: bool, value: float | None = None) -> None:
        """Cap the boids' acceleration at ``value``, or lift the cap."""
        self.has_max_acceleration = enabled
        if value is not None:
            self.max_acceleration = value
        limit = self.max_acceleration if enabled else _UNCAPPED_ACCELERATION
        for boid in self.boids:
            boid.max_acceleration = limit

    def update(self, delta_time: float) -> None:
        """Steer the first boid with the arrow keys and keep all boids on screen."""
        arrow = self.engine.input_arrow()
        if arrow != Vector2.zero() and self.boids:
            first = self.boids[0]
            first.apply_force(arrow * _ARROW_FORCE)
            first.draw_debug_radius = True
            first.circle_color = Color.RED

        for boid in self.boids:
            self.warp_particle_if_out_of_bounds(boid)

    def start(self) -> None:
        self.initialize_rules()
        self.set_number_of_boids(self.nb_boids)
        self.apply_flocking_rules_to_all_boids()