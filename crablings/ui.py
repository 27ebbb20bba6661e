"""Coloured status lines for the terminal."""

import os

from rich.console import Console
from rich.text import Text

console = Console(highlight=False, soft_wrap=True, emoji=False, markup=False)


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _emit(prefix: str, message: str, style: str) -> None:
    console.print(Text.assemble((prefix, style), " ", (message, style)))


def warn(message: str) -> None:
    """Print a warning line in red."""
    _emit("!" if no_emoji() else "⚠️ ", message, "red")


def success(message: str) -> None:
    """Print a success line in green."""
    _emit("✓" if no_emoji() else "✅", message, "green")