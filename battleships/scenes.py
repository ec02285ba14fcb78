"""Scenes built from callbacks, and the scene currently shown."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

InitCallback = Callable[[], None]
RenderCallback = Callable[[], None]
EventCallback = Callable[[Any], None]


@dataclass(eq=False)
class Scene:
    """A scene that forwards its lifecycle hooks to optional callbacks."""

    init_callback: Optional[InitCallback] = None
    render_callback: Optional[RenderCallback] = None
    event_callback: Optional[EventCallback] = None

    def on_init(self) -> None:
        if self.init_callback is not None:
            self.init_callback()

    def on_render(self) -> None:
        if self.render_callback is not None:
            self.render_callback()

    def on_event(self, event: Any) -> None:
        if self.event_callback is not None:
            self.event_callback(event)


class SceneBuilder:
    """Collects callbacks and builds :class:`Scene` objects from them."""

    def __init__(self) -> None:
        self._init: Optional[InitCallback] = None
        self._render: Optional[RenderCallback] = None
        self._event: Optional[EventCallback] = None

    def with_init(self, callback: InitCallback) -> SceneBuilder:
        self._init = callback
        return self

    def with_render(self, callback: RenderCallback) -> SceneBuilder:
        self._render = callback
        return self

    def with_event(self, callback: EventCallback) -> SceneBuilder:
        self._event = callback
        return self

    def build(self) -> Scene:
        """Return a new scene holding the callbacks set so far."""
        return Scene(
            init_callback=self._init,
            render_callback=self._render,
            event_callback=self._event,
        )


_current_scene: Optional[Scene] = None


def set_current_scene(scene: Optional[Scene]) -> None:
    """Make ``scene`` current and initialise it."""
    global _current_scene
    _current_scene = scene
    if scene is not None:
        scene.on_init()


def get_current_scene() -> Optional[Scene]:
    """Return the current scene, or None if there is none."""
    return _current_scene