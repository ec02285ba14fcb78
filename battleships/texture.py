"""Images loaded from disk for drawing."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import pygame

log = logging.getLogger(__name__)


class TextureLoadError(OSError):
    """Raised when an image file cannot be loaded."""


@dataclass(eq=False)
class Texture:
    """A loaded image together with its placement."""

    surface: pygame.Surface
    pos_x: float = 0.0
    pos_y: float = 0.0
    scale_x: float = 1.0
    scale_y: float = 1.0

    @classmethod
    def load(cls, path: str | os.PathLike[str]) -> Texture:
        """Load the image at ``path``; raise :class:`TextureLoadError` on failure."""
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            log.warning("Couldn't load texture: %s", exc)
            raise TextureLoadError(f"Couldn't load texture {os.fspath(path)!r}: {exc}") from exc
        return cls(surface)

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()