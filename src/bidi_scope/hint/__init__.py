"""Hint composition, line state cache, and hint commands."""

from .cache import HintCache, LineKey
from .commands import CommandRef, CommandRegistry, UnknownCommandError
from .compose import TAB_WIDTH, HintChunk, HintLine, cell_width, compose_hint, display_columns

__all__ = [
    "CommandRef",
    "CommandRegistry",
    "HintCache",
    "HintChunk",
    "HintLine",
    "LineKey",
    "TAB_WIDTH",
    "UnknownCommandError",
    "cell_width",
    "compose_hint",
    "display_columns",
]
