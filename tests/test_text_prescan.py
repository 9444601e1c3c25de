from __future__ import annotations

from bidi_scope.text import PRESCAN_LINE_LIMIT, has_rtl, line_has_rtl


def test_detects_rtl_on_any_scanned_line() -> None:
    assert has_rtl(["plain", "more plain", "one שלום"])


def test_ignores_lines_past_the_limit() -> None:
    lines = ["plain"] * PRESCAN_LINE_LIMIT + ["שלום"]

    assert not has_rtl(lines)
    assert has_rtl(lines, limit=PRESCAN_LINE_LIMIT + 1)


def test_consumes_lazily_from_an_iterator() -> None:
    def lines():
        yield "سلام"
        raise AssertionError("prescan read past the first match")

    assert has_rtl(lines())


def test_weak_and_malformed_bytes_are_not_rtl() -> None:
    assert not line_has_rtl("123 ،؟ ٣")
    assert not line_has_rtl(b"\xd7\x80\xff")
    assert line_has_rtl(b"\xd7\xa9")


def test_empty_document() -> None:
    assert not has_rtl([])


def test_lone_surrogates_do_not_break_the_scan() -> None:
    assert has_rtl(["\ud800", "x \udfff שלום"]) is True
    assert has_rtl(["\ud800"]) is False
