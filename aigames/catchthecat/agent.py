"""Shared path search for the players of the cat game."""

from __future__ import annotations

import heapq
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol

from aigames.catchthecat.hexgrid import (
    east,
    north_east,
    north_west,
    south_east,
    south_west,
    west,
)
from aigames.core.point2d import Point2D

Path = list[Point2D]

_SEARCH_DIRECTIONS = (north_east, north_west, west, south_west, south_east, east)


class CatWorld(Protocol):
    """What the agents need to know about the board."""

    def cat_position(self) -> Point2D: ...

    def side_size(self) -> int: ...

    def is_valid_position(self, point: Point2D) -> bool: ...

    def get_content(self, point: Point2D) -> bool: ...

    def cat_wins_on_space(self, point: Point2D) -> bool: ...

    def cat_can_move_to_position(self, point: Point2D) -> bool: ...


@dataclass
class Node:
    """A search frontier entry, ordered by weight alone."""

    weight: int = 0
    point: Point2D = field(default_factory=Point2D)

    def __lt__(self, other: Node) -> bool:
        return self.weight < other.weight

    def __le__(self, other: Node) -> bool:
        return self.weight <= other.weight

    def __gt__(self, other: Node) -> bool:
        return self.weight > other.weight

    def __ge__(self, other: Node) -> bool:
        return self.weight >= other.weight


class Agent(ABC):
    """A player that picks a cell each turn."""

    @abstractmethod
    def move(self, world: CatWorld) -> Point2D:
        """The cell this player chooses on its turn."""

    def find_cat_shortest_path(self, world: CatWorld) -> list[Path]:
        """Paths from the cat to the border, shortest first.

        Every path starts with the cat's next cell and ends on a border
        cell. All paths of the shortest length are returned, followed by
        the first path found that is longer, if any. An empty list means
        the cat cannot escape.
        """
        solutions: list[Path] = []
        cat = world.cat_position()

        frontier = [Node(0, cat)]
        weights: dict[Point2D, int] = {cat: 0}
        parents: dict[Point2D, Point2D] = {}
        found = False

        while frontier and not found:
            current = heapq.heappop(frontier)
            for direction in _SEARCH_DIRECTIONS:
                if found:
                    break
                nxt = direction(current.point)
                if not world.is_valid_position(nxt) or world.get_content(nxt):
                    continue

                known = weights.get(nxt, 0)
                unexplored = known == 0 and nxt != cat
                if world.cat_wins_on_space(nxt) and unexplored:
                    weights[nxt] = current.weight + 1
                    parents[nxt] = current.point
                    path = [nxt]
                    step = current.point
                    while step != cat:
                        path.append(step)
                        step = parents[step]
                    path.reverse()
                    if solutions and len(path) > len(solutions[0]):
                        found = True
                    solutions.append(path)
                elif unexplored or known > current.weight + 1:
                    weights[nxt] = current.weight + 1
                    parents[nxt] = current.point
                    heapq.heappush(frontier, Node(weights[nxt], nxt))

        return solutions