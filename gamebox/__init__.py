"""Small 2D games on pygame, with a Flappy Bird clone and a game menu."""

__version__ = "0.1.0"
__all__ = ["flappy_bird", "game", "main", "printing", "sprite"]