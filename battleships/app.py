"""Entry point: opens the window and runs the scene loop."""

from __future__ import annotations

import enum
import logging
from typing import Any, Optional, Sequence

import pygame

from .game import Game
from .main_scene import GAME_TITLE, create_main_scene
from .scenes import get_current_scene, set_current_scene

log = logging.getLogger(__name__)

WINDOW_SIZE = (800, 600)


class AppResult(enum.Enum):
    CONTINUE = "continue"
    SUCCESS = "success"
    FAILURE = "failure"


def handle_event(event: Any) -> AppResult:
    """Stop on quit; otherwise pass the event to the current scene."""
    if event.type == pygame.QUIT:
        return AppResult.SUCCESS
    scene = get_current_scene()
    if scene is not None:
        scene.on_event(event)
    return AppResult.CONTINUE


def _iterate() -> AppResult:
    scene = get_current_scene()
    if scene is not None:
        scene.on_render()
    return AppResult.CONTINUE


def _run() -> AppResult:
    while True:
        for event in pygame.event.get():
            result = handle_event(event)
            if result is not AppResult.CONTINUE:
                return result
        result = _iterate()
        if result is not AppResult.CONTINUE:
            return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game; return 0 on a normal quit and 1 on failure."""
    logging.basicConfig(level=logging.INFO)
    try:
        try:
            pygame.display.init()
        except pygame.error as exc:
            log.error("Couldn't initialize display: %s", exc)
            return 1
        try:
            window = pygame.display.set_mode(WINDOW_SIZE)
        except pygame.error as exc:
            log.error("Couldn't create window: %s", exc)
            return 1
        pygame.display.set_caption(GAME_TITLE)

        Game.init(window)
        set_current_scene(create_main_scene())
        result = _run()
        return 0 if result is AppResult.SUCCESS else 1
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())