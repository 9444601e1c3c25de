"""Logical-to-visual byte mapping used to place the cursor highlight."""

from __future__ import annotations

from typing import Dict, Optional

from bidi_scope.config import DEFAULT_CONFIG, HintConfig

from .codec import Text, as_bytes
from .layout import visual_layout

PositionMap = Dict[int, int]


def build_position_map(text: Text, config: Optional[HintConfig] = None) -> PositionMap:
    """Map every logical byte offset of ``text`` to its visual byte offset.

    Both sides are 1-indexed. Inside a word the codepoint at position ``j``
    of ``L`` lands on slot ``L - j + 1``, so the highlight walks the reversed
    direction while the cursor moves forward. Gaps and a split word's joiner
    stay put. Every byte of a codepoint keeps its intra-codepoint index.
    """

    byte_map: PositionMap = {}
    visual_byte = 1
    for segment in visual_layout(text, config or DEFAULT_CONFIG):
        slots = []
        for unit in segment.units:
            slots.append(visual_byte)
            visual_byte += unit.width

        last = len(segment.units) - 1
        for index, unit in enumerate(segment.units):
            base = slots[last - index] if segment.mirrored else slots[index]
            for offset in range(unit.width):
                byte_map[unit.start + offset] = base + offset
    return byte_map


def map_cursor(
    text: Text, logical_offset: int, config: Optional[HintConfig] = None
) -> Optional[int]:
    """Return the visual offset for ``logical_offset`` or ``None`` if out of range."""

    if logical_offset < 1 or logical_offset > len(as_bytes(text)):
        return None
    return build_position_map(text, config).get(logical_offset)


__all__ = ["PositionMap", "build_position_map", "map_cursor"]
