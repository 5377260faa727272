"""Textured quads positioned in normalised screen coordinates."""

from __future__ import annotations

import math
import os
from typing import NamedTuple, Optional, Sequence, Tuple

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

from .printing import DEBUGGING, debug_print, success_print, warning_print

_SIZE_FACTOR = 0.005
_SUPPORTED_BYTES_PER_PIXEL = frozenset({1, 3, 4})

Point = Tuple[float, float]


class ImageLoadError(OSError):
    """Raised when an image file cannot be turned into a sprite."""


class Quad(NamedTuple):
    """The four corners of a sprite."""

    top_left: Point
    bottom_left: Point
    bottom_right: Point
    top_right: Point


_DEFAULT_QUAD = Quad((-1.0, 1.0), (-1.0, -1.0), (1.0, -1.0), (1.0, 1.0))


class Sprite:
    """An image drawn on a quad that can be moved, rotated and scaled."""

    def __init__(
        self,
        path: Optional[str] = "",
        width: int = 0,
        height: int = 0,
        surface: Optional[pygame.Surface] = None,
    ) -> None:
        if path is None:
            if DEBUGGING:
                warning_print("Path to the image null!")
            path = " "
        self.path = path
        self.width = width
        self.height = height
        self.surface = surface

        self._size = 1.0
        self._angle = 0.0
        self._position: Point = (0.0, 0.0)
        self._quad = _DEFAULT_QUAD

        if surface is None and DEBUGGING:
            warning_print("Empty sprite created.")

    @property
    def position(self) -> Point:
        """Centre of the sprite in normalised coordinates."""
        return self._position

    @property
    def rotation(self) -> float:
        """Rotation in radians."""
        return self._angle

    @rotation.setter
    def rotation(self, theta: float) -> None:
        self._angle = float(theta)
        self._update_transform()

    @property
    def scale(self) -> float:
        """Scale factor of the sprite."""
        return self._size

    @scale.setter
    def scale(self, size: float) -> None:
        self._size = float(size)
        self._update_transform()

    def _require_size(self) -> None:
        if self.width == 0 or self.height == 0:
            raise ValueError("sprite has no width or height")

    def _update_transform(self) -> None:
        half = self._size * _SIZE_FACTOR
        cosine = math.cos(self._angle)
        sine = math.sin(self._angle)
        x, y = self._position
        w = half * self.width
        h = half * self.height
        offsets = ((-w, h), (-w, -h), (w, -h), (w, h))
        self._quad = Quad(
            *(
                (x + dx * cosine - dy * sine, y + dx * sine + dy * cosine)
                for dx, dy in offsets
            )
        )

    def rotate(self, theta: float) -> None:
        """Rotate the sprite by ``theta`` radians."""
        self._angle += theta
        self._update_transform()

    def translate(self, move: Sequence[float]) -> None:
        """Move the sprite by a vector given in pixels."""
        self._require_size()
        dx, dy = move
        x, y = self._position
        self._position = (x + dx / self.width, y + dy / self.height)
        self._update_transform()

    def set_position(self, position: Sequence[float]) -> None:
        """Place the sprite at a point given in pixels."""
        self._require_size()
        px, py = position
        self._position = (px / self.width, py / self.height)
        self._update_transform()

    def copy(self) -> "Sprite":
        """Return an independent sprite with the same image and transform.

        Like a freshly loaded sprite, the copy keeps its default corners
        until it is next transformed.
        """
        surface = None if self.surface is None else self.surface.copy()
        twin = Sprite(self.path, self.width, self.height, surface)
        twin._position = self._position
        twin._angle = self._angle
        twin._size = self._size
        if DEBUGGING:
            success_print("Image created by copy correctly!")
        return twin

    def vertices(self) -> Quad:
        """Return the four corners of the sprite."""
        return self._quad


def load_image(path: Optional[str]) -> Sprite:
    """Load an image file into a new sprite."""
    if path is None:
        if DEBUGGING:
            warning_print("Path to the image null!")
        path = " "
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as exc:
        raise ImageLoadError(f"Texture loading failed: {path}") from exc

    width, height = surface.get_size()
    if DEBUGGING:
        debug_print(f"Image loaded: \n- width: {width}\n- height: {height}")

    if surface.get_bytesize() not in _SUPPORTED_BYTES_PER_PIXEL:
        raise ImageLoadError("Unsupported image format -> Only RGB or RGBA allowed.")

    sprite = Sprite(path, width, height, surface)
    if DEBUGGING:
        success_print("Image created correctly!")
    return sprite