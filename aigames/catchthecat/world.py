"""The board of the cat game and the turns played on it."""

from __future__ import annotations

import math
import sys
import time
from typing import Any, Sequence

from aigames.catchthecat.cat import Cat
from aigames.catchthecat.catcher import Catcher
from aigames.catchthecat.hexgrid import is_neighbor, neighbors
from aigames.core.color import Color
from aigames.core.engine import Engine
from aigames.core.gameobject import GameObject
from aigames.core.point2d import Point2D
from aigames.core.polygon import Hexagon
from aigames.core.rng import range_int
from aigames.core.transform import Transform
from aigames.core.vectors import Vector2

_WALL_FRACTION = 0.05


class World(GameObject):
    """A square hexagonal board centred on (0, 0) with a cat and its catcher.

    The cat moves on its turns and wins by reaching the border; the catcher
    blocks one cell on its turns and wins when the cat cannot move.
    """

    def __init__(self, engine: Engine, size: int = 11) -> None:
        if size % 2 == 0:
            raise ValueError(f"side size must be odd, got {size}")
        super().__init__(engine)
        self._configure(size, True, Point2D(0, 0), [False] * (size * size))
        self.clear_world()

    @classmethod
    def from_state(
        cls,
        engine: Engine,
        side_size: int,
        cat_turn: bool,
        cat_position: Point2D,
        state: Sequence[bool],
    ) -> World:
        """A board with the given cells blocked, listed row by row from the top left."""
        if len(state) != side_size * side_size:
            raise ValueError(
                f"state holds {len(state)} cells, expected {side_size * side_size}"
            )
        world = cls.__new__(cls)
        GameObject.__init__(world, engine)
        world._configure(side_size, cat_turn, cat_position, list(state))
        return world

    def _configure(
        self, side_size: int, cat_turn: bool, cat_position: Point2D, state: list[bool]
    ) -> None:
        self._side_size = side_size
        self._cat_position = cat_position
        self._state = [bool(cell) for cell in state]
        self.cat_turn = cat_turn
        self.time_between_ai_ticks = 1.0
        self.time_for_next_tick = 1.0
        self.is_simulating = False
        self.move_duration = 0
        self.cat_won = False
        self.catcher_won = False
        self._cat = Cat()
        self._catcher = Catcher()

    def clear_world(self) -> None:
        """Scatter a few random walls and put the cat back in the centre."""
        cells = self._side_size * self._side_size
        self._state = [False] * cells
        for _ in range(math.ceil(cells * _WALL_FRACTION)):
            self._state[range_int(0, cells - 1)] = True
        self._cat_position = Point2D(0, 0)
        self._state[cells // 2] = False
        self.is_simulating = False
        self.cat_turn = True
        self.time_for_next_tick = self.time_between_ai_ticks
        self.cat_won = False
        self.catcher_won = False

    def cat_position(self) -> Point2D:
        return self._cat_position

    def side_size(self) -> int:
        return self._side_size

    def _index(self, point: Point2D) -> int:
        half = self._side_size // 2
        return (point.y + half) * self._side_size + point.x + half

    def get_content(self, point: Point2D) -> bool:
        """Whether the cell at ``point`` is blocked."""
        index = self._index(point)
        if not 0 <= index < len(self._state):
            raise IndexError(f"{point} lies outside the board")
        return self._state[index]

    def is_valid_position(self, point: Point2D) -> bool:
        half = self._side_size // 2
        return -half <= point.x <= half and -half <= point.y <= half

    def cat_can_move_to_position(self, point: Point2D) -> bool:
        return is_neighbor(self._cat_position, point) and not self.get_content(point)

    def catcher_can_move_to_position(self, point: Point2D) -> bool:
        half = self._side_size // 2
        return point != self._cat_position and abs(point.x) <= half and abs(point.y) <= half

    def cat_wins_on_space(self, point: Point2D) -> bool:
        half = self._side_size // 2
        return abs(point.x) == half or abs(point.y) == half

    def _cat_win_verification(self) -> bool:
        return self.cat_wins_on_space(self._cat_position)

    def _catcher_win_verification(self) -> bool:
        return all(self.get_content(cell) for cell in neighbors(self._cat_position))

    def step(self) -> None:
        """Play one turn; after a win, start a fresh board instead."""
        if self.cat_won or self.catcher_won:
            self.clear_world()
            return

        started = time.perf_counter_ns()
        if self.cat_turn:
            move = self._cat.move(self)
            if self.cat_can_move_to_position(move):
                self._cat_position = move
                self.cat_won = self._cat_win_verification()
            else:
                self.is_simulating = False
                self.catcher_won = True
        else:
            move = self._catcher.move(self)
            if self.catcher_can_move_to_position(move):
                self._state[self._index(move)] = True
                self.catcher_won = self._catcher_win_verification()
            else:
                self.is_simulating = False
                self.cat_won = True
        self.move_duration = (time.perf_counter_ns() - started) // 1000
        self.cat_turn = not self.cat_turn

    def update(self, delta_time: float) -> None:
        """Advance the turn timer while simulating and play a turn when it runs out."""
        if not self.is_simulating:
            return
        self.time_for_next_tick -= delta_time
        if self.time_for_next_tick < 0:
            self.step()
            self.time_for_next_tick = self.time_between_ai_ticks

    def on_draw(self, renderer: Any) -> None:
        """Draw every cell as a hexagon: the cat red, walls blue, free cells gray."""
        if renderer is None:
            return
        side = self._side_size
        window = self.engine.window_size
        factor = (min(window.x, window.y) / side) / 2
        scale = Vector2(factor, factor)
        hexagon = Hexagon()

        even_offset = scale.x if side % 4 >= 2 else 0.0
        odd_offset = scale.x if side % 4 <= 1 else 0.0
        row_start = window.x / 2 - side * scale.x
        x = row_start + even_offset
        y = window.y / 2 - (side - 1) * scale.y

        cat_index = self._index(self._cat_position)
        for i, blocked in enumerate(self._state):
            if i == cat_index:
                color = Color.RED
            elif blocked:
                color = Color.BLUE
            else:
                color = Color.GRAY
            hexagon.draw(renderer, Transform(Vector2(x, y), scale, Vector2.zero()), color)

            drawn = i + 1
            if drawn % (2 * side) == 0:
                x = row_start + even_offset
                y += 2 * scale.y
            elif drawn % side == 0:
                x = row_start + odd_offset
                y += 2 * scale.y
            else:
                x += 2 * scale.x

    def __str__(self) -> str:
        """The board as text: ``C`` for the cat, ``#`` for walls, ``.`` for free cells."""
        side = self._side_size
        cat_index = self._index(self._cat_position)
        parts: list[str] = []
        for i, blocked in enumerate(self._state):
            parts.append("C" if i == cat_index else ("#" if blocked else "."))
            drawn = i + 1
            if (drawn + side) % (2 * side) == 0:
                parts.append("\n ")
            elif drawn % side == 0:
                parts.append("\n")
            else:
                parts.append(" ")
        return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Play one game on a 21-cell board and print the final board."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        return 0

    engine = Engine("Catch The Cat")
    world = World(engine, 21)
    if engine.start():
        while not (world.cat_won or world.catcher_won):
            world.step()
        print(world)
        print("Cat wins" if world.cat_won else "Catcher wins")
    engine.exit()
    return 0