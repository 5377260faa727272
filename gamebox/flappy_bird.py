"""A Flappy Bird game: jump between scrolling pipes without touching them."""

from __future__ import annotations

import math
import random
from pathlib import Path
from typing import List, Optional, Tuple

import pygame

from .game import Game
from .printing import DEBUGGING, debug_print
from .sprite import Sprite

ASSETS_DIR = Path(__file__).resolve().parent / "images"

PipePair = Tuple[Sprite, Sprite]


class FlappyBird(Game):
    """The bird falls, jumps on space and dies when it touches a pipe."""

    PIPE_HORIZONTAL_SPEED = 30.0
    GRAVITY = -10.0
    JUMP_POWER = 300.0
    LIMIT_ANGLE = math.pi * 0.25

    GAP_VERTICAL_SIZE = 145
    DISTANCE_BETWEEN_PIPES = 50
    STARTING_PIPES_X_POSITION = 75
    START_POSITION_WHEN_MOVED_BACK = int(-1.5 + DISTANCE_BETWEEN_PIPES * 4)
    PIPES_SCALE = 0.75
    PIPE_COUNT = 5
    RECYCLE_X = -1.5
    START_DELAY = 1.0

    BIRD_SCALE = 0.04
    BIRD_START = (-200.0, 0.0)
    BACKGROUND_SCALE = 0.7

    BACKGROUND_IMAGE = "background-day.png"
    PIPE_IMAGE = "pipe-green.png"
    BIRD_IMAGE = "Bird.png"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__(432, 768, "Flappy bird")
        self.rng = rng if rng is not None else random.Random()
        self.assets_dir = ASSETS_DIR
        self.has_game_started = False
        self.has_game_finished = False
        self.time_playing = 0.0
        self.vertical_velocity = self.GRAVITY
        self.bird: Optional[Sprite] = None
        self.pipes: List[PipePair] = []

    def _asset(self, name: str) -> str:
        return str(Path(self.assets_dir) / name)

    def on_screen_created(self) -> None:
        """Create the background, the pipes and the bird."""
        background = self.create_image(self._asset(self.BACKGROUND_IMAGE))
        background.rotate(math.pi)
        background.scale = self.BACKGROUND_SCALE

        for index in range(self.PIPE_COUNT):
            x_position = float(
                self.STARTING_PIPES_X_POSITION + index * self.DISTANCE_BETWEEN_PIPES
            )
            top = self.create_image(self._asset(self.PIPE_IMAGE))
            top.scale = self.PIPES_SCALE

            bottom = self.create_image(self._asset(self.PIPE_IMAGE))
            bottom.rotate(math.pi)
            bottom.scale = self.PIPES_SCALE

            self.set_pipes_position(top, bottom, x_position)
            self.pipes.append((top, bottom))

        bird = self.create_image(self._asset(self.BIRD_IMAGE))
        bird.scale = self.BIRD_SCALE
        bird.set_position(self.BIRD_START)
        bird.rotate(math.pi)
        self.bird = bird

    def update(self, dt: float) -> None:
        """Advance physics, scroll the pipes and check for collisions."""
        if not self.has_game_started or self.has_game_finished:
            return

        self.update_physics(dt)
        self.time_playing += dt

        if self.time_playing <= self.START_DELAY:
            return

        translation = (dt * -self.PIPE_HORIZONTAL_SPEED, 0.0)
        for top, bottom in self.pipes:
            top.translate(translation)
            bottom.translate(translation)

            if top.position[0] <= self.RECYCLE_X:
                self.set_pipes_position(top, bottom, self.START_POSITION_WHEN_MOVED_BACK)
                if DEBUGGING:
                    debug_print("Pipe moved")

            if self.does_bird_overlap_a_pipe(top) or self.does_bird_overlap_a_pipe(bottom):
                self.die()

    def update_physics(self, dt: float) -> None:
        """Apply gravity to the bird and tilt it with its speed."""
        if self.bird is None:
            raise RuntimeError("the bird has not been created")
        self.vertical_velocity += self.GRAVITY

        last_y = self.bird.position[1]
        self.bird.translate((0.0, dt * (last_y + self.vertical_velocity)))

        tilt = self.vertical_velocity / 1e2
        tilt = max(-self.LIMIT_ANGLE, min(self.LIMIT_ANGLE, tilt))
        self.bird.rotation = tilt + math.pi

    def does_bird_overlap_a_pipe(self, pipe: Sprite) -> bool:
        """Tell whether the bounding boxes of the bird and a pipe overlap."""
        if self.bird is None:
            raise RuntimeError("the bird has not been created")
        bird_xs, bird_ys = zip(*self.bird.vertices())
        pipe_xs, pipe_ys = zip(*pipe.vertices())

        overlap_x = min(bird_xs) < max(pipe_xs) and max(bird_xs) > min(pipe_xs)
        overlap_y = min(bird_ys) < max(pipe_ys) and max(bird_ys) > min(pipe_ys)
        return overlap_x and overlap_y

    def die(self) -> None:
        """Stop the game."""
        if DEBUGGING:
            debug_print("Player has died!")
        self.has_game_finished = True

    def set_pipes_position(self, top: Sprite, bottom: Sprite, start_x: float) -> None:
        """Place a pair of pipes at ``start_x`` around a random gap height."""
        gap_y = self.rng.randrange(100) - 50
        bottom.set_position((start_x, float(gap_y - self.GAP_VERTICAL_SIZE - top.height)))
        top.set_position((start_x, float(gap_y + self.GAP_VERTICAL_SIZE + bottom.height)))

    def on_input_detected(self, key: int) -> None:
        """Start the game on the first space press and jump on later ones."""
        if self.has_game_finished or key != pygame.K_SPACE:
            return
        if not self.has_game_started:
            self.has_game_started = True
            return
        if self.vertical_velocity <= 0.01:
            self.vertical_velocity = self.JUMP_POWER

    def on_game_close(self) -> None:
        """Forget the pipes."""
        self.pipes.clear()