"""Command that asks which game to play and runs it."""

from __future__ import annotations

import sys
from typing import Callable, Dict, Optional, Sequence

from .flappy_bird import FlappyBird
from .game import Game
from .printing import DEBUGGING, FAILED, SUCCESS, debug_print, error_print, print_line

GAMES: Dict[int, Callable[[], Game]] = {1: FlappyBird}

_PROMPT = "Which game do you want to play? \n - Flappy Bird (1)."


def _parse_choice(answer: str) -> int:
    try:
        return int(answer.strip())
    except ValueError:
        return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Ask for a game on standard input, play it and return an exit status."""
    if DEBUGGING:
        debug_print("Starting game choice.")

    choice = 0
    while choice == 0:
        print_line(_PROMPT)
        try:
            answer = input(">> ")
        except EOFError:
            if DEBUGGING:
                error_print("No game chosen.")
            return FAILED
        choice = _parse_choice(answer)

    factory = GAMES.get(choice)
    if factory is None:
        if DEBUGGING:
            error_print("Game not found!")
        return FAILED

    game = factory()
    game.create_window()
    game.start_loop()
    return SUCCESS


if __name__ == "__main__":
    sys.exit(main())