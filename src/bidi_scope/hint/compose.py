"""Compose the virtual hint line shown beneath a line containing RTL runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional, Tuple

from rich.cells import cell_len

from bidi_scope.config import DEFAULT_CONFIG, HintConfig
from bidi_scope.runtime.telemetry import record_event, span
from bidi_scope.text import Run, find_runs, render_run
from bidi_scope.text.codec import Text, as_bytes, as_text

HighlightGroup = Literal["Normal", "Comment", "Cursor"]
ColumnOf = Callable[[int], int]

TAB_WIDTH = 8


@dataclass(frozen=True, slots=True)
class HintChunk:
    """Text fragment paired with the highlight group a renderer should use."""

    text: str
    group: HighlightGroup = "Comment"


@dataclass(slots=True)
class HintLine:
    """Renderer-ready hint: padded chunks for every run on the line."""

    chunks: List[HintChunk] = field(default_factory=list)
    runs: Tuple[Run, ...] = ()

    @property
    def plain(self) -> str:
        return "".join(chunk.text for chunk in self.chunks)

    @property
    def cursor_text(self) -> Optional[str]:
        for chunk in self.chunks:
            if chunk.group == "Cursor":
                return chunk.text
        return None


def cell_width(text: str, start_col: int = 0, tab_width: int = TAB_WIDTH) -> int:
    """Cells ``text`` occupies when drawn from 0-indexed column ``start_col``.

    Tabs advance to the next multiple of ``tab_width``.
    """

    col = start_col
    for index, piece in enumerate(text.split("\t")):
        if index and tab_width > 0:
            col += tab_width - col % tab_width
        col += cell_len(piece)
    return col - start_col


def display_columns(line: Text, tab_width: int = TAB_WIDTH) -> ColumnOf:
    """Return a byte-offset to 1-indexed screen column function for ``line``."""

    data = as_bytes(line)

    def column_of(byte_offset: int) -> int:
        return cell_width(as_text(data[: byte_offset - 1]), 0, tab_width) + 1

    return column_of


def compose_hint(
    line: Text,
    cursor_col: int,
    config: Optional[HintConfig] = None,
    *,
    column_of: Optional[ColumnOf] = None,
    tab_width: int = TAB_WIDTH,
) -> Optional[HintLine]:
    """Build the hint for ``line`` with the cursor at byte ``cursor_col`` (1-indexed).

    Returns ``None`` when the line has no RTL run, or when
    ``hide_if_unchanged`` is set and no run reads differently in visual order.
    """

    cfg = config or DEFAULT_CONFIG
    runs = find_runs(line)
    if not runs:
        return None

    column_of = column_of or display_columns(line, tab_width)
    hint = HintLine(runs=tuple(runs))
    current_col = 0
    any_different = False

    with span(
        "hint::compose",
        component="hint",
        metadata={"runs": len(runs), "cursor_col": cursor_col},
    ):
        for run in runs:
            screen_col = column_of(run.start_byte)
            if screen_col > current_col + 1:
                hint.chunks.append(HintChunk(" " * (screen_col - current_col - 1), "Normal"))
                current_col = screen_col - 1

            offset = run.relative(cursor_col) if run.contains(cursor_col) else None
            rendering = render_run(run.text, cfg, offset)
            any_different = any_different or rendering.changed

            before, cursor, after = rendering.split()
            if before:
                hint.chunks.append(HintChunk(before))
            if cursor:
                hint.chunks.append(HintChunk(cursor, "Cursor"))
            if after:
                hint.chunks.append(HintChunk(after))

            current_col += cell_width(rendering.text, current_col, tab_width)

    if cfg.hide_if_unchanged and not any_different:
        record_event("hint.suppressed", level="debug", data={"runs": len(runs)})
        return None
    return hint


__all__ = [
    "ColumnOf",
    "HighlightGroup",
    "HintChunk",
    "HintLine",
    "TAB_WIDTH",
    "cell_width",
    "compose_hint",
    "display_columns",
]
