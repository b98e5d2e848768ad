"""Position, scale and orientation of an object."""

from __future__ import annotations

from dataclasses import dataclass, field

from aigames.core.vectors import Vector2


@dataclass
class Transform:
    """Where an object is, how large it is, and which way its top points."""

    position: Vector2 = field(default_factory=Vector2.zero)
    scale: Vector2 = field(default_factory=Vector2.identity)
    rotation: Vector2 = field(default_factory=Vector2.zero)