"""Window, main loop and sprite bookkeeping shared by every game."""

from __future__ import annotations

import math
import time
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple

import pygame

from .printing import DEBUGGING, debug_print, success_print
from .sprite import Sprite, load_image


def _to_pixels(point: Tuple[float, float], width: int, height: int) -> Tuple[float, float]:
    x, y = point
    return (x + 1.0) * width / 2.0, (1.0 - y) * height / 2.0


class Game(ABC):
    """Base class for a game drawn in one window and driven by a frame loop."""

    background_color = (0, 0, 0)

    def __init__(self, width: int = 0, height: int = 0, title: str = "") -> None:
        self.screen_width = width
        self.screen_height = height
        self.screen_name = title
        self.window: Optional[pygame.Surface] = None
        self.images: List[Sprite] = []

    def create_image(self, path: str) -> Sprite:
        """Load an image, keep it for drawing and return its sprite."""
        if DEBUGGING:
            debug_print("Creating image")
        sprite = load_image(path)
        self.images.append(sprite)
        return sprite

    def create_window(self) -> None:
        """Open the game window and let the game build its scene."""
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError("Graphics library cannot load correctly.") from exc
        try:
            self.window = pygame.display.set_mode((self.screen_width, self.screen_height))
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError("Cannot create a window.") from exc
        pygame.display.set_caption(self.screen_name)
        if DEBUGGING:
            success_print("Window created.")
        self.on_screen_created()

    def start_loop(self) -> None:
        """Run frames until the window is closed, then close the game."""
        if self.window is None:
            raise RuntimeError("Window not specified.")
        last_time = time.perf_counter()
        if DEBUGGING:
            debug_print("Starting game.")
        running = True
        while running:
            now = time.perf_counter()
            delta = now - last_time
            last_time = now

            self.detect_input(pygame.key.get_pressed())
            self.update_graphics()
            self.update(delta)

            pygame.display.flip()
            running = not any(event.type == pygame.QUIT for event in pygame.event.get())
        self.close_game()

    def _draw(self, sprite: Sprite) -> None:
        if sprite.surface is None or self.window is None:
            return
        width, height = self.screen_width, self.screen_height
        quad = sprite.vertices()
        corners = [_to_pixels(point, width, height) for point in quad]
        top_left, bottom_left, _, top_right = corners

        pixel_width = math.dist(top_left, top_right)
        pixel_height = math.dist(top_left, bottom_left)
        if round(pixel_width) < 1 or round(pixel_height) < 1:
            return

        edge_x = quad.top_right[0] - quad.top_left[0]
        edge_y = quad.top_right[1] - quad.top_left[1]
        angle = math.atan2(edge_y, edge_x)
        # The texture is mapped upside down onto its quad.
        degrees = round(math.degrees(angle) + 180.0, 6) % 360.0

        scaled = pygame.transform.scale(
            sprite.surface, (round(pixel_width), round(pixel_height))
        )
        rotated = pygame.transform.rotate(scaled, degrees) if degrees else scaled
        centre_x = sum(x for x, _ in corners) / 4.0
        centre_y = sum(y for _, y in corners) / 4.0
        self.window.blit(rotated, rotated.get_rect(center=(round(centre_x), round(centre_y))))

    def update_graphics(self) -> None:
        """Clear the window and draw every image in creation order."""
        if self.window is None:
            raise RuntimeError("Window not specified.")
        self.window.fill(self.background_color)
        for sprite in self.images:
            self._draw(sprite)

    def close_game(self) -> None:
        """Drop the images, notify the game and close the window."""
        self.images.clear()
        self.on_game_close()
        pygame.display.quit()
        self.window = None
        if DEBUGGING:
            debug_print("Game closed correctly!")

    def detect_input(self, pressed: Any) -> None:
        """Report the space key to the game when it is held down.

        ``pressed`` is indexed by key code, as the state returned by
        ``pygame.key.get_pressed``.
        """
        if pressed[pygame.K_SPACE]:
            self.on_input_detected(pygame.K_SPACE)

    @abstractmethod
    def on_screen_created(self) -> None:
        """Build the scene once the window exists."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance the game by ``dt`` seconds."""

    @abstractmethod
    def on_input_detected(self, key: int) -> None:
        """Handle a pressed key."""

    @abstractmethod
    def on_game_close(self) -> None:
        """Release what the game holds when it closes."""