"""Word/gap token structure shared by the visual transform and position map."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Iterable, List, Sequence, Tuple

from bidi_scope.config import HintConfig

from .codec import CodeUnit, Text, as_text, decode

JOINER = "\u200c"  # ZERO WIDTH NON-JOINER
PLACEHOLDER = "\u25cc"  # DOTTED CIRCLE
JOINER_BYTES = JOINER.encode("utf-8")
PLACEHOLDER_BYTES = PLACEHOLDER.encode("utf-8")

_WHITESPACE = frozenset(b" \t\n\v\f\r")


@dataclass(frozen=True, slots=True)
class Segment:
    """Units placed together in visual order.

    Word segments are ``mirrored`` for cursor mapping; gaps and a split word's
    joiner keep their own position.
    """

    units: Tuple[CodeUnit, ...]
    mirrored: bool

    @property
    def data(self) -> bytes:
        return b"".join(unit.data for unit in self.units)


def _is_space(unit: CodeUnit) -> bool:
    return unit.width == 1 and unit.data[0] in _WHITESPACE


def _is_joiner(unit: CodeUnit) -> bool:
    return unit.data == JOINER_BYTES


def _word_segments(word: Sequence[CodeUnit], swap: bool) -> List[Segment]:
    if swap:
        joiners = [index for index, unit in enumerate(word) if _is_joiner(unit)]
        if len(joiners) == 1:
            at = joiners[0]
            before, after = tuple(word[:at]), tuple(word[at + 1 :])
            segments = []
            if after:
                segments.append(Segment(after, mirrored=True))
            segments.append(Segment((word[at],), mirrored=False))
            if before:
                segments.append(Segment(before, mirrored=True))
            return segments
    return [Segment(tuple(word), mirrored=True)]


def visual_layout(text: Text, config: HintConfig) -> List[Segment]:
    """Lay ``text`` out as ``word_n, gap_n-1, word_n-1, ..., gap_1, word_1``.

    Whitespace before the first word and after the last one stays in place.
    """

    tokens = [
        (is_gap, list(group)) for is_gap, group in groupby(decode(text), _is_space)
    ]
    if not tokens:
        return []

    prefix = tokens.pop(0)[1] if tokens[0][0] else []
    suffix = tokens.pop()[1] if tokens and tokens[-1][0] else []
    words = [units for is_gap, units in tokens if not is_gap]
    gaps = [units for is_gap, units in tokens if is_gap]

    segments: List[Segment] = []
    if prefix:
        segments.append(Segment(tuple(prefix), mirrored=False))
    for index in range(len(words) - 1, -1, -1):
        segments.extend(_word_segments(words[index], config.joiner_swap))
        if index:
            segments.append(Segment(tuple(gaps[index - 1]), mirrored=False))
    if suffix:
        segments.append(Segment(tuple(suffix), mirrored=False))
    return segments


def join_units(units: Iterable[CodeUnit], config: HintConfig) -> str:
    """Concatenate ``units``, rewriting joiners when the config asks for it."""

    if config.joiner_rewrite:
        data = b"".join(
            PLACEHOLDER_BYTES if _is_joiner(unit) else unit.data for unit in units
        )
    else:
        data = b"".join(unit.data for unit in units)
    return as_text(data)


__all__ = [
    "JOINER",
    "PLACEHOLDER",
    "Segment",
    "join_units",
    "visual_layout",
]
