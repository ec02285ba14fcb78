"""The title scene: the game name centred on a black screen and a ship."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import pygame

from .game import Game
from .scenes import Scene, SceneBuilder
from .texture import Texture, TextureLoadError

log = logging.getLogger(__name__)

GAME_TITLE = "Battleships"
TEXT_SCALE = 4.0
CHARACTER_SIZE = 8
SHIP_ASSET = "assets/ship.png"
SHIP_RECT = pygame.Rect(0, 0, 16, 16)

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_FONT_SIZE = 16


@dataclass
class _MainSceneData:
    texture: Optional[Texture] = None
    title: Optional[pygame.Surface] = None


def title_position(width: float, height: float) -> tuple[float, float]:
    """Top-left corner of the title, in scaled coordinates, centring it."""
    x = ((width / TEXT_SCALE) - CHARACTER_SIZE * len(GAME_TITLE)) / 2
    y = ((height / TEXT_SCALE) - CHARACTER_SIZE) / 2
    return x, y


def _render_title() -> pygame.Surface:
    if not pygame.font.get_init():
        pygame.font.init()
    text = pygame.font.Font(None, _FONT_SIZE).render(GAME_TITLE, False, _WHITE)
    return pygame.transform.scale(
        text, (CHARACTER_SIZE * len(GAME_TITLE), CHARACTER_SIZE)
    )


def _window() -> pygame.Surface:
    game = Game.instance()
    if game is None:
        raise RuntimeError("the game has not been initialised")
    return game.window


def _on_init(data: _MainSceneData) -> None:
    log.info("Initializing main scene")
    try:
        data.texture = Texture.load(SHIP_ASSET)
    except TextureLoadError:
        log.error("Failed to load texture")
        data.texture = None
    data.title = _render_title()


def _on_render(data: _MainSceneData) -> None:
    screen = _window()
    width, height = screen.get_size()
    canvas = pygame.Surface(
        (max(1, int(width / TEXT_SCALE)), max(1, int(height / TEXT_SCALE)))
    )
    canvas.fill(_BLACK)

    if data.title is None:
        data.title = _render_title()
    x, y = title_position(width, height)
    canvas.blit(data.title, (int(x), int(y)))

    if data.texture is not None:
        ship = pygame.transform.scale(data.texture.surface, SHIP_RECT.size)
        canvas.blit(ship, SHIP_RECT.topleft)

    screen.blit(pygame.transform.scale(canvas, (width, height)), (0, 0))
    if pygame.display.get_init() and pygame.display.get_surface() is screen:
        pygame.display.flip()


def create_main_scene() -> Scene:
    """Build the title scene with its own state."""
    data = _MainSceneData()
    return (
        SceneBuilder()
        .with_init(lambda: _on_init(data))
        .with_render(lambda: _on_render(data))
        .build()
    )