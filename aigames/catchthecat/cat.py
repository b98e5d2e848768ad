"""The cat, which runs for the border."""

from __future__ import annotations

from aigames.catchthecat.agent import Agent, CatWorld
from aigames.catchthecat.hexgrid import (
    east,
    north_east,
    north_west,
    south_east,
    south_west,
    west,
)
from aigames.core.point2d import Point2D
from aigames.core.rng import range_int

_DIRECTIONS = (north_east, north_west, east, west, south_west, south_east)


class Cat(Agent):
    """Follows the shortest path out, or wanders when there is none."""

    def move(self, world: CatWorld) -> Point2D:
        """The next cell on the shortest escape path.

        Without an escape a random free neighbour is chosen; a trapped
        cat returns its own position.
        """
        paths = self.find_cat_shortest_path(world)
        if paths:
            return paths[0][0]

        position = world.cat_position()
        remaining = list(_DIRECTIONS)
        while remaining:
            direction = remaining.pop(range_int(0, len(remaining) - 1))
            candidate = direction(position)
            if world.cat_can_move_to_position(candidate):
                return candidate
        return position