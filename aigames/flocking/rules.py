"""Steering rules that together make boids flock."""

from __future__ import annotations

import copy
import math
from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence

from aigames.core.color import Color, Color32
from aigames.core.polygon import Polygon
from aigames.core.transform import Transform
from aigames.core.vectors import Vector2

_DEBUG_LINE_SCALE = 1.5


class Steerable(Protocol):
    """What a rule reads from a boid."""

    transform: Transform
    velocity: Vector2


def _window_size(world: Any) -> Vector2:
    return world.engine.window_size


class FlockingRule(ABC):
    """A weighted steering force applied to a boid every frame.

    The last computed force is kept in ``force`` so it can be drawn.
    """

    name = ""
    explanation = ""
    base_weight_multiplier = 1.0

    def __init__(
        self,
        world: Any,
        debug_color: Color32,
        weight: float,
        is_enabled: bool = True,
    ) -> None:
        self.world = world
        self.debug_color = debug_color
        self.weight = weight
        self.is_enabled = is_enabled
        self.force = Vector2.zero()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(weight={self.weight!r}, "
            f"is_enabled={self.is_enabled!r})"
        )

    @abstractmethod
    def compute_force(self, neighborhood: Sequence[Steerable], boid: Steerable) -> Vector2:
        """The unweighted force this rule applies to ``boid``."""

    def compute_weighted_force(
        self, neighborhood: Sequence[Steerable], boid: Steerable
    ) -> Vector2:
        """Compute, weight and remember the force; a disabled rule gives zero."""
        if self.is_enabled:
            self.force = (
                self.compute_force(neighborhood, boid)
                * self.base_weight_multiplier
                * self.weight
            )
        else:
            self.force = Vector2.zero()
        return self.force

    def clone(self) -> FlockingRule:
        """An independent copy sharing the same world."""
        return copy.copy(self)

    def draw(self, boid: Steerable, renderer: Any) -> None:
        """Draw the last force as a line starting at the boid."""
        position = boid.transform.position
        Polygon.draw_line(
            renderer,
            position,
            position + self.force * _DEBUG_LINE_SCALE,
            self.debug_color,
        )


class AlignmentRule(FlockingRule):
    """Steer toward the average heading of nearby boids."""

    name = "Alignment Rule"
    explanation = "Steer to move in the same direction that nearby boids."
    base_weight_multiplier = 1.0

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, Color.YELLOW, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Steerable], boid: Steerable) -> Vector2:
        if not neighborhood:
            return Vector2.zero()
        total = sum((other.velocity for other in neighborhood), Vector2.zero())
        return (total / len(neighborhood)).normalized()


class CohesionRule(FlockingRule):
    """Steer toward the centre of mass of nearby boids."""

    name = "Cohesion Rule"
    explanation = "Steer to move toward center of mass of nearby boids."
    base_weight_multiplier = 1.0

    def __init__(self, world: Any, weight: float = 1.0, is_enabled: bool = True) -> None:
        super().__init__(world, Color.CYAN, weight, is_enabled)

    def compute_force(self, neighborhood: Sequence[Steerable], boid: Steerable) -> Vector2:
        if not neighborhood:
            return Vector2.zero()
        total = sum(
            (other.transform.position for other in neighborhood), Vector2.zero()
        )
        center = total / len(neighborhood)
        return (center - boid.transform.position).normalized()


class SeparationRule(FlockingRule):
    """Steer away from boids closer than the desired separation."""

    name = "Separation Rule"
    explanation = "Steer to avoid collision with nearby boids."
    base_weight_multiplier = 1.0

    def __init__(
        self,
        world: Any,
        desired_separation: float = 20.0,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, Color.RED, weight, is_enabled)
        self.desired_minimal_distance = desired_separation

    def compute_force(self, neighborhood: Sequence[Steerable], boid: Steerable) -> Vector2:
        position = boid.transform.position
        force = Vector2.zero()
        for other in neighborhood:
            offset = position - other.transform.position
            distance = offset.magnitude()
            if 0.0 < distance < self.desired_minimal_distance:
                force = force + offset.normalized() / distance
        return force.normalized()


class MouseInfluenceRule(FlockingRule):
    """Steer toward, or away from, the mouse while it is pressed.

    ``mouse_position`` holds the pointer while the button is down and is
    ``None`` otherwise.
    """

    name = "Mouse Click Influence"
    explanation = "Steer toward or away the mouse when clicked."
    base_weight_multiplier = 0.1

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        is_repulsive: bool = False,
        is_enabled: bool = True,
        strength: float = 100.0,
    ) -> None:
        super().__init__(world, Color.MAGENTA, weight, is_enabled)
        self.is_repulsive = is_repulsive
        self.strength = strength
        self.mouse_position: Vector2 | None = None

    def compute_force(self, neighborhood: Sequence[Steerable], boid: Steerable) -> Vector2:
        if self.mouse_position is None:
            return Vector2.zero()
        displacement = self.mouse_position - boid.transform.position
        distance = displacement.magnitude()
        if distance == 0.0:
            return Vector2.zero()
        force = displacement.normalized() * (self.strength / distance)
        return -force if self.is_repulsive else force


class BoundedAreaRule(FlockingRule):
    """Push boids back from the window borders."""

    name = "Bounded Windows"
    explanation = "Steer to avoid the window's borders."
    base_weight_multiplier = 1.0

    def __init__(
        self,
        world: Any,
        distance_from_border: int,
        weight: float = 1.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, Color.RED.light(), weight, is_enabled)
        self.desired_distance = distance_from_border

    def compute_force(self, neighborhood: Sequence[Steerable], boid: Steerable) -> Vector2:
        """A push away from each border within the desired distance, growing
        linearly to 1 at the border itself."""
        distance = float(self.desired_distance)
        if distance <= 0.0:
            return Vector2.zero()
        size = _window_size(self.world)
        position = boid.transform.position

        def push(coordinate: float, extent: float) -> float:
            if coordinate < distance:
                return (distance - coordinate) / distance
            if coordinate > extent - distance:
                return -(coordinate - (extent - distance)) / distance
            return 0.0

        return Vector2(push(position.x, size.x), push(position.y, size.y))

    def draw(self, boid: Steerable, renderer: Any) -> None:
        """Draw the force line and the bounding rectangle."""
        super().draw(boid, renderer)
        size = _window_size(self.world)
        d = float(self.desired_distance)
        corners = [
            Vector2(d, d),
            Vector2(size.x - d, d),
            Vector2(size.x - d, size.y - d),
            Vector2(d, size.y - d),
        ]
        for start, end in zip(corners, corners[1:] + corners[:1]):
            Polygon.draw_line(renderer, start, end, Color.GRAY)


class WindRule(FlockingRule):
    """A constant push in the wind's direction, given in radians."""

    name = "Wind Force"
    explanation = "Apply a constant force to all boids."
    base_weight_multiplier = 0.5

    def __init__(
        self,
        world: Any,
        weight: float = 1.0,
        angle: float = 0.0,
        is_enabled: bool = True,
    ) -> None:
        super().__init__(world, Color.WHITE, weight, is_enabled)
        self.wind_angle = angle

    def compute_force(self, neighborhood: Sequence[Steerable], boid: Steerable) -> Vector2:
        return Vector2(math.cos(self.wind_angle), math.sin(self.wind_angle))