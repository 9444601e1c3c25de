from __future__ import annotations

import pytest

from bidi_scope.adapters.textual.app import (
    BidiScopeApp,
    _parse_args,
    build_config,
    hint_markup,
)
from bidi_scope.hint import compose_hint


def test_cli_switches_layer_over_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BIDI_SCOPE_JOINER_REWRITE", raising=False)
    args = _parse_args(["notes.txt", "--joiner-swap", "--hide-unchanged"])

    config = build_config(args)

    assert str(args.path) == "notes.txt"
    assert config.joiner_swap is True
    assert config.hide_if_unchanged is True
    assert config.joiner_rewrite is False


def test_environment_feeds_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BIDI_SCOPE_JOINER_REWRITE", "1")

    config = build_config(_parse_args([]))

    assert config.joiner_rewrite is True


def test_hint_markup_keeps_text_and_styles_cursor() -> None:
    hint = compose_hint("Hello سلام دنیا World", 7)
    assert hint is not None

    text = hint_markup(hint)

    assert text.plain == hint.plain
    assert any(str(span.style) == "reverse bold" for span in text.spans)


def test_hint_markup_uses_host_tab_size() -> None:
    hint = compose_hint("\tשלום", 1)
    assert hint is not None

    assert hint_markup(hint, tab_size=4).tab_size == 4


def test_leading_lines_stop_at_the_prescan_limit() -> None:
    class FakeDocument:
        line_count = 500

        def __init__(self) -> None:
            self.requested: list[int] = []

        def get_line(self, row: int) -> str:
            self.requested.append(row)
            return "plain"

    class FakeEditor:
        document = FakeDocument()

    app = BidiScopeApp()
    app._editor = FakeEditor()  # type: ignore[assignment]

    lines = list(app._leading_lines(limit=3))

    assert lines == ["plain", "plain", "plain"]
    assert FakeEditor.document.requested == [0, 1, 2]
