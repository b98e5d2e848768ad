"""The catcher, which walls off the cat's escape routes."""

from __future__ import annotations

from aigames.catchthecat.agent import Agent, CatWorld, Path
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

_CornerRule = tuple[Point2D, tuple[Point2D, ...], tuple[Point2D, ...]]


def _corner_rules(half: int) -> tuple[_CornerRule, ...]:
    """Corner cell, cat cells next to it, and the border cells it guards."""
    h1, h2 = half - 1, half - 2
    if half % 2 == 0:
        return (
            (
                Point2D(h1, -h1),
                (Point2D(h2, -h1), Point2D(-h1, -h2)),
                (Point2D(half, -half), Point2D(h1, -half), Point2D(half, -h1), Point2D(half, -h2)),
            ),
            (
                Point2D(h1, h1),
                (Point2D(h2, h1), Point2D(h1, h2)),
                (Point2D(half, half), Point2D(h1, half), Point2D(half, h1), Point2D(half, h2)),
            ),
        )
    return (
        (
            Point2D(-h1, -h1),
            (Point2D(-h2, -h1), Point2D(-h1, -h2)),
            (Point2D(-half, -half), Point2D(-h1, -half), Point2D(-half, -h1), Point2D(-half, -h2)),
        ),
        (
            Point2D(-h1, h1),
            (Point2D(-h2, h1), Point2D(h1, h2)),
            (Point2D(-half, half), Point2D(-h1, half), Point2D(-half, h1), Point2D(-half, h2)),
        ),
    )


def _random_free_neighbor(world: CatWorld, position: Point2D) -> Point2D:
    remaining = list(_DIRECTIONS)
    while remaining:
        direction = remaining.pop(range_int(0, len(remaining) - 1))
        candidate = direction(position)
        if world.cat_can_move_to_position(candidate):
            return candidate
    return position


class Catcher(Agent):
    """Blocks the cell that best cuts off the cat's shortest escapes."""

    def move(self, world: CatWorld) -> Point2D:
        """The cell to block this turn."""
        half = world.side_size() // 2
        cat = world.cat_position()
        optimal = self.find_cat_shortest_path(world)

        if optimal:
            exit_cell = optimal[0][-1]
            if world.cat_wins_on_space(exit_cell) and world.cat_can_move_to_position(exit_cell):
                return exit_cell

        if half >= 2:
            for corner, cat_spots, walls in _corner_rules(half):
                if (
                    not world.get_content(corner)
                    and cat in cat_spots
                    and sum(world.get_content(wall) for wall in walls) < 3
                ):
                    return corner

        if len(optimal) == 2 and len(optimal[0]) != len(optimal[1]):
            return optimal[1][-1]

        if len(optimal) >= 2:
            return self.find_highest_priority(optimal, world)[1][-1]

        if optimal:
            return optimal[0][-1]

        return _random_free_neighbor(world, cat)

    def find_highest_priority(self, optimal: list[Path], world: CatWorld) -> tuple[int, Path]:
        """Among the shortest paths, the one whose exit has most free cells around it.

        Returns the score and the path; ``(-1, [])`` when nothing qualifies.
        On a tie the path later in ``optimal`` wins.
        """
        half = world.side_size() // 2
        priority: tuple[int, Path] = (-1, [])

        for path in reversed(optimal):
            if len(path) != len(optimal[0]):
                continue
            score = self._free_cells_around_exit(path[-1], half, world)
            if score > priority[0]:
                priority = (score, path)

        return priority

    @staticmethod
    def _free_cells_around_exit(back: Point2D, half: int, world: CatWorld) -> int:
        x_max = abs(back.x) == half
        y_max = abs(back.y) == half
        free = 0

        if x_max and not y_max:
            free += not world.get_content(Point2D(back.x, back.y - 1))
            free += not world.get_content(Point2D(back.x, back.y + 1))
            if back.x > 0 and not world.get_content(Point2D(back.x - 1, back.y)):
                free += 1
            elif back.x < 0 and not world.get_content(Point2D(back.x + 1, back.y)):
                free += 1
        elif y_max and not x_max:
            free += not world.get_content(west(back))
            free += not world.get_content(east(back))
            if back.y > 0:
                free += not world.get_content(north_east(back))
                free += not world.get_content(north_west(back))
            elif back.y < 0:
                free += not world.get_content(south_east(back))
                free += not world.get_content(south_west(back))

        return free