from __future__ import annotations

from bidi_scope.config import HintConfig
from bidi_scope.hint import HintChunk, cell_width, compose_hint, display_columns

LINE = "Hello سلام دنیا World"


def test_returns_none_without_runs() -> None:
    assert compose_hint("plain text", 1) is None
    assert compose_hint("", 1) is None


def test_pads_to_run_column_and_renders_visual_order() -> None:
    hint = compose_hint(LINE, 1)

    assert hint is not None
    assert hint.chunks == [
        HintChunk("      ", "Normal"),
        HintChunk("دنیا سلام", "Comment"),
    ]
    assert hint.cursor_text is None
    assert len(hint.runs) == 1


def test_cursor_inside_run_is_highlighted_mirrored() -> None:
    hint = compose_hint(LINE, 7)

    assert hint is not None
    assert hint.chunks[1:] == [
        HintChunk("دنیا سلا", "Comment"),
        HintChunk("م", "Cursor"),
    ]
    assert hint.plain == "      دنیا سلام"


def test_cursor_on_gap_highlights_the_gap() -> None:
    hint = compose_hint(LINE, 15)

    assert hint is not None
    assert hint.chunks[1:] == [
        HintChunk("دنیا"),
        HintChunk(" ", "Cursor"),
        HintChunk("سلام"),
    ]


def test_single_word_is_suppressed_when_unchanged_hidden() -> None:
    line = "Hebrew word: שלום"

    assert compose_hint(line, 1, HintConfig(hide_if_unchanged=True)) is None
    shown = compose_hint(line, 1)
    assert shown is not None
    assert shown.plain == " " * 13 + "שלום"


def test_changed_run_is_not_suppressed() -> None:
    hint = compose_hint(LINE, 1, HintConfig(hide_if_unchanged=True))

    assert hint is not None


def test_second_run_is_padded_after_the_first() -> None:
    hint = compose_hint("שלום world שלום", 1)

    assert hint is not None
    assert hint.plain == "שלום" + " " * 7 + "שלום"
    assert hint.chunks == [
        HintChunk("שלו"),
        HintChunk("ם", "Cursor"),
        HintChunk(" " * 7, "Normal"),
        HintChunk("שלום"),
    ]


def test_custom_column_function() -> None:
    hint = compose_hint("שלום", 99, column_of=lambda _byte: 5)

    assert hint is not None
    assert hint.chunks[0] == HintChunk("    ", "Normal")


def test_display_columns_counts_cells() -> None:
    column_of = display_columns("ab שלום")

    assert column_of(1) == 1
    assert column_of(4) == 4
    assert column_of(6) == 5


def test_leading_tab_expands_to_the_next_stop() -> None:
    assert display_columns("\tשלום")(2) == 9
    assert display_columns("\tשלום", tab_width=4)(2) == 5

    hint = compose_hint("\tשלום", 1)

    assert hint is not None
    assert hint.chunks == [HintChunk(" " * 8, "Normal"), HintChunk("שלום")]


def test_tab_inside_a_run_counts_toward_the_next_column() -> None:
    line = "א\tב x ג"

    assert display_columns(line)(9) == 13
    hint = compose_hint(line, 99)

    assert hint is not None
    assert hint.chunks == [
        HintChunk("ב\tא"),
        HintChunk("   ", "Normal"),
        HintChunk("ג"),
    ]


def test_cell_width_advances_tabs_from_the_start_column() -> None:
    assert cell_width("a\tb") == 9
    assert cell_width("\t", 3) == 5
    assert cell_width("ab\t", tab_width=4) == 4
    assert cell_width("שלום") == 4
