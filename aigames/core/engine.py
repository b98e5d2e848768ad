"""A frame loop that drives game objects, independent of any window system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterable, TypeVar

from aigames.core.gameobject import GameObject
from aigames.core.vectors import Vector2

T = TypeVar("T")


class Key(Enum):
    """Keys the engine tracks; anything else is ``OTHER``."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key going down (``pressed``) or coming back up."""

    key: Key
    pressed: bool


_ARROW_DIRECTIONS = (
    (Key.UP, Vector2.up),
    (Key.DOWN, Vector2.down),
    (Key.LEFT, Vector2.left),
    (Key.RIGHT, Vector2.right),
)


class Engine:
    """Owns the game objects and runs their hooks once per frame."""

    def __init__(
        self,
        title: str = "",
        renderer: Any = None,
        window_size: Vector2 | None = None,
    ) -> None:
        self.title = title
        self.renderer = renderer
        self.window_size = window_size if window_size is not None else Vector2(1280.0, 720.0)
        self.gui_context: Any = None
        self.game_objects: list[GameObject] = []
        self.done = False
        self._held: set[Key] = set()
        self._arrow = Vector2.zero()
        self._to_destroy: list[GameObject] = []

    def start(self) -> bool:
        """Start every game object; returns True once the engine is ready."""
        for game_object in list(self.game_objects):
            game_object.start()
        return True

    def run(self, delta_time: float = 1.0 / 60.0) -> None:
        """Tick with a fixed time step until something calls :meth:`exit`."""
        while not self.done:
            self.tick(delta_time)
        self.exit()

    def tick(
        self,
        delta_time: float,
        events: Iterable[KeyEvent] = (),
        renderer: Any = None,
    ) -> None:
        """Run one frame: input, update, interface, drawing, then removals."""
        if renderer is None:
            renderer = self.renderer

        self.process_input(events)

        for game_object in list(self.game_objects):
            game_object.update(delta_time)

        for game_object in list(self.game_objects):
            game_object.on_gui(self.gui_context)

        for game_object in list(self.game_objects):
            game_object.on_draw(renderer)

        pending, self._to_destroy = self._to_destroy, []
        for game_object in pending:
            if game_object in self.game_objects:
                self.game_objects.remove(game_object)

    def exit(self) -> None:
        """Ask the main loop to stop."""
        self.done = True

    def process_input(self, events: Iterable[KeyEvent]) -> None:
        """Track held arrow keys and recompute the arrow direction."""
        for event in events:
            if event.key is Key.OTHER:
                continue
            if event.pressed:
                self._held.add(event.key)
            else:
                self._held.discard(event.key)

        arrow = Vector2.zero()
        for key, direction in _ARROW_DIRECTIONS:
            if key in self._held:
                arrow = arrow + direction()
        self._arrow = arrow

    def input_arrow(self) -> Vector2:
        """The summed direction of the arrow keys currently held."""
        return Vector2(self._arrow.x, self._arrow.y)

    def find_objects_of_type(self, kind: type[T]) -> list[T]:
        """All game objects that are instances of ``kind``."""
        return [go for go in self.game_objects if isinstance(go, kind)]

    def destroy(self, game_object: GameObject) -> None:
        """Remove ``game_object`` at the end of the current frame."""
        self._to_destroy.append(game_object)