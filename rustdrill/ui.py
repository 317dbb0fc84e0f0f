"""Coloured status lines for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_EMOJI = "⚠️ "
_WARN_PLAIN = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_PLAIN = "✓"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _console() -> Console:
    # Built per call so that colour detection follows the current stdout.
    return Console(highlight=False, soft_wrap=True)


def _emit(prefix: str, message: str, style: str) -> None:
    _console().print(Text(prefix, style=style), Text(str(message), style=style))


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit(_WARN_PLAIN if no_emoji() else _WARN_EMOJI, message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit(_SUCCESS_PLAIN if no_emoji() else _SUCCESS_EMOJI, message, "green")