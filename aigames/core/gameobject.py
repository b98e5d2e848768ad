"""Base class for everything an engine updates and draws."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aigames.core.transform import Transform

if TYPE_CHECKING:
    from aigames.core.engine import Engine


class GameObject:
    """An object owned by an engine, with hooks called every frame.

    Creating a game object registers it with its engine straight away.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.transform = Transform()
        self.gui_context: Any = None
        engine.game_objects.append(self)

    def start(self) -> None:
        """Called once when the engine starts."""

    def on_gui(self, context: Any) -> None:
        """Called every frame to build the user interface; keeps the context."""
        self.gui_context = context

    def on_draw(self, renderer: Any) -> None:
        """Called every frame to draw the object."""

    def update(self, delta_time: float) -> None:
        """Called every frame with the seconds elapsed since the last one."""