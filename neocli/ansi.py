"""ANSI terminal color utilities.

Honours the NO_COLOR / FORCE_COLOR environment variables and only colors
output going to a terminal.
"""

import os
import sys
from typing import TextIO

__all__ = [
    "BLUE",
    "BOLD",
    "DIM",
    "GREEN",
    "RED",
    "RESET",
    "YELLOW",
    "LogStyles",
    "StatusMarks",
    "colorize",
    "make_style",
    "should_colorize",
]

_ESC = "\x1b["

RESET = f"{_ESC}0m"

BOLD = "1"
DIM = "2"

RED = "31"
GREEN = "32"
YELLOW = "33"
BLUE = "34"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Args:
        stream: The output stream to check. Defaults to sys.stderr.

    Returns:
        True if colors should be used, False otherwise.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, *codes: str) -> str:
    """Wrap text in ANSI color codes."""
    if not codes:
        return text
    return f"{_ESC}{';'.join(codes)}m{text}{RESET}"


def make_style(*codes: str) -> tuple[str, str]:
    """Create a (prefix, suffix) pair for use in log formatters."""
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


class LogStyles:
    """Pre-built styles for log levels."""

    DEBUG = (DIM,)
    WARNING = (YELLOW,)
    ERROR = (RED,)
    CRITICAL = (RED, BOLD)


class StatusMarks:
    """Leading marks for user facing status lines: (symbol, color)."""

    INFO = ("ℹ", BLUE)
    SUCCESS = ("✓", GREEN)
    ERROR = ("✖", RED)
