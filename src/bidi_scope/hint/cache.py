"""Line state cache used to skip recomposing an unchanged hint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from bidi_scope.text.codec import Text

from .compose import HintLine


@dataclass(frozen=True, slots=True)
class LineKey:
    """Everything a hint depends on besides configuration."""

    buffer: str
    line: int
    content: Text
    cursor_col: int


class HintCache:
    """Remembers the last shown hint and the request that produced it."""

    def __init__(self) -> None:
        self.key: Optional[LineKey] = None
        self.hint: Optional[HintLine] = None

    def matches(self, key: LineKey) -> bool:
        return self.key is not None and self.key == key

    def store(self, key: LineKey, hint: HintLine) -> None:
        self.key = key
        self.hint = hint

    def reset(self) -> Optional[LineKey]:
        """Forget the cached hint and return the key it was shown for."""

        previous = self.key
        self.key = None
        self.hint = None
        return previous


__all__ = ["HintCache", "LineKey"]
