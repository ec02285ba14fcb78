"""Title screen of a Battleships game, built on a scene-based pygame loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]