"""Visual (reading) order rendering of RTL runs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from bidi_scope.config import DEFAULT_CONFIG, HintConfig

from .codec import Text, as_bytes, as_text, decode
from .layout import join_units, visual_layout
from .positions import map_cursor

ByteSpan = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class VisualRendering:
    """Visual text of one run plus the highlighted codepoint, if any.

    ``logical`` is the run text after joiner rewriting, which is what the
    visual text is compared against. ``highlight`` is an inclusive 1-indexed
    byte span into the UTF-8 encoding of ``text``.
    """

    text: str
    logical: str
    highlight: Optional[ByteSpan] = None

    @property
    def changed(self) -> bool:
        return self.text != self.logical

    def split(self) -> Tuple[str, str, str]:
        """Return ``(before, highlighted, after)``; the middle is empty without a highlight."""

        if self.highlight is None:
            return self.text, "", ""
        data = as_bytes(self.text)
        start, stop = self.highlight
        return (
            as_text(data[: start - 1]),
            as_text(data[start - 1 : stop]),
            as_text(data[stop:]),
        )


def to_visual(text: Text, config: Optional[HintConfig] = None) -> str:
    """Reverse word order of ``text``, keeping letters inside each word as is.

    Gaps are reversed independently and keep their exact content. With
    ``joiner_swap`` a word holding exactly one ZWNJ has its halves swapped
    first; ``joiner_rewrite`` then turns every ZWNJ into a dotted circle.
    """

    cfg = config or DEFAULT_CONFIG
    units = [unit for segment in visual_layout(text, cfg) for unit in segment.units]
    return join_units(units, cfg)


def _unit_span(text: str, offset: int) -> Optional[ByteSpan]:
    units = decode(text)
    for unit in units:
        if unit.stop >= offset:
            return unit.start, unit.stop
    if units:
        return units[-1].start, units[-1].stop
    return None


def render_run(
    text: Text,
    config: Optional[HintConfig] = None,
    cursor_offset: Optional[int] = None,
) -> VisualRendering:
    """Render ``text`` visually and locate the codepoint under ``cursor_offset``.

    ``cursor_offset`` is 1-indexed relative to the start of ``text``.
    """

    cfg = config or DEFAULT_CONFIG
    visual = to_visual(text, cfg)
    highlight = None
    if cursor_offset is not None:
        target = map_cursor(text, cursor_offset, cfg)
        if target is not None:
            highlight = _unit_span(visual, target)
    return VisualRendering(
        text=visual,
        logical=join_units(decode(text), cfg),
        highlight=highlight,
    )


__all__ = ["ByteSpan", "VisualRendering", "render_run", "to_visual"]
