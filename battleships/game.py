"""Process-wide game state shared by the scenes."""

from __future__ import annotations

import threading

import pygame


class Game:
    """Holds the window surface everything is drawn to.

    There is at most one instance; it is created by :meth:`init` and any
    later call to :meth:`init` leaves the first one in place.
    """

    _instance: Game | None = None
    _lock = threading.Lock()

    def __init__(self, window: pygame.Surface) -> None:
        self._window = window

    @property
    def window(self) -> pygame.Surface:
        """The surface the game renders to."""
        return self._window

    @classmethod
    def instance(cls) -> Game | None:
        """Return the game, or None if :meth:`init` has not been called."""
        return cls._instance

    @classmethod
    def init(cls, window: pygame.Surface) -> None:
        """Create the game once; later calls have no effect."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = cls(window)

    @classmethod
    def _reset(cls) -> None:
        with cls._lock:
            cls._instance = None