import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from battleships.game import Game


@pytest.fixture(autouse=True)
def fresh_game():
    Game._reset()
    yield
    Game._reset()


def test_instance_is_none_before_init():
    assert Game.instance() is None


def test_init_creates_instance_with_window():
    window = pygame.Surface((32, 24))
    Game.init(window)
    game = Game.instance()
    assert game is not None
    assert game.window is window


def test_second_init_keeps_first_window():
    first = pygame.Surface((10, 10))
    second = pygame.Surface((20, 20))
    Game.init(first)
    Game.init(second)
    assert Game.instance().window is first


def test_instance_is_stable_between_calls():
    window = pygame.Surface((5, 5))
    Game.init(window)
    first = Game.instance()
    second = Game.instance()
    assert first is second
    assert second.window is window
    assert second.window.get_size() == (5, 5)