"""Coloured console messages and program-wide settings."""

from __future__ import annotations

DEBUGGING = True

FAILED = -1
SUCCESS = 0

BLACK = "\x1b[30m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
BLUE = "\x1b[34m"
MAGENTA = "\x1b[35m"
CYAN = "\x1b[36m"
WHITE = "\x1b[37m"
ORANGE = "\x1b[38;2;255;128;0m"
ROSE = "\x1b[38;2;255;151;203m"
LIGHT_BLUE = "\x1b[38;2;53;149;240m"
LIGHT_GREEN = "\x1b[38;2;17;245;120m"
GRAY = "\x1b[38;2;176;174;174m"
RESET_COLOR = "\x1b[0m"

BG_BLACK = "\x1b[40m"
BG_RED = "\x1b[41m"
BG_GREEN = "\x1b[42m"
BG_YELLOW = "\x1b[43m"
BG_BLUE = "\x1b[44m"
BG_MAGENTA = "\x1b[45m"
BG_CYAN = "\x1b[46m"
BG_WHITE = "\x1b[47m"
BG_ORANGE = "\x1b[48;2;255;128;0m"
BG_LIGHT_BLUE = "\x1b[48;2;53;149;240m"
BG_LIGHT_GREEN = "\x1b[48;2;17;245;120m"
BG_GRAY = "\x1b[48;2;176;174;174m"
BG_ROSE = "\x1b[48;2;255;151;203m"


def print_line(message: object) -> None:
    """Write a message followed by a newline and flush standard output."""
    print(message, flush=True)


def _tagged(color: str, tag: str, message: object) -> str:
    return f"{color}[{tag}]: {message}{RESET_COLOR}"


def debug_print(message: object) -> None:
    """Print a cyan debug message."""
    print_line(_tagged(CYAN, "DEBUG", message))


def warning_print(message: object) -> None:
    """Print a yellow warning message."""
    print_line(_tagged(YELLOW, "WARN", message))


def error_print(message: object) -> None:
    """Print a red error message."""
    print_line(_tagged(RED, "ERROR", message))


def success_print(message: object) -> None:
    """Print a green success message."""
    print_line(_tagged(GREEN, "SUCCESS", message))