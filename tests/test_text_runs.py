from __future__ import annotations

import pytest

from bidi_scope.text import BidiClass, Run, class_of, decode, find_runs


def test_single_run_between_latin_words() -> None:
    runs = find_runs("Hello سلام دنیا World")

    assert runs == [Run(start_byte=7, end_byte=23, text="سلام دنیا")]


def test_embedded_digits_are_absorbed() -> None:
    text = "مرحبا 123 بك"

    runs = find_runs(text)

    assert runs == [Run(start_byte=1, end_byte=len(text.encode("utf-8")), text=text)]


def test_trailing_arabic_comma_is_trimmed() -> None:
    runs = find_runs("غير مفهوم،")

    assert [run.text for run in runs] == ["غير مفهوم"]
    assert runs[0].end_byte == 17


def test_trailing_digits_and_spaces_are_trimmed() -> None:
    runs = find_runs("שלום 42 ")

    assert runs == [Run(start_byte=1, end_byte=8, text="שלום")]


def test_leading_weak_characters_never_start_a_run() -> None:
    runs = find_runs("123 שלום")

    assert runs == [Run(start_byte=5, end_byte=12, text="שלום")]


def test_trailing_rlm_stays_in_run() -> None:
    runs = find_runs("שלום\u200f")

    assert runs[0].end_byte == 11


def test_latin_word_splits_runs() -> None:
    runs = find_runs("שלום world שלום")

    assert [(run.start_byte, run.end_byte) for run in runs] == [(1, 8), (16, 23)]


def test_malformed_byte_breaks_a_run() -> None:
    runs = find_runs(b"\xd7\xa9\x80\xd7\x9c")

    assert [(run.start_byte, run.end_byte, run.text) for run in runs] == [
        (1, 2, "ש"),
        (4, 5, "ל"),
    ]


@pytest.mark.parametrize("line", ["", "plain ascii", "123, 456!", b"\xff\xfe"])
def test_lines_without_rtl_have_no_runs(line: str | bytes) -> None:
    assert find_runs(line) == []


@pytest.mark.parametrize(
    "line",
    [
        "Hello سلام دنیا World",
        "a שלום, עולם! b ספר 3 c",
        "(مرحبا) [123] «بك» ok",
        "\u2067שלום\u2069 x \u200fמה?",
    ],
)
def test_runs_are_ordered_contained_and_bounded_by_rtl(line: str) -> None:
    data = line.encode("utf-8")
    runs = find_runs(line)

    assert runs
    previous_end = 0
    for run in runs:
        assert 1 <= run.start_byte <= run.end_byte <= len(data)
        assert run.start_byte > previous_end
        previous_end = run.end_byte
        assert data[run.start_byte - 1 : run.end_byte].decode("utf-8") == run.text
        units = decode(run.text)
        assert class_of(units[0].codepoint) is BidiClass.RTL
        assert class_of(units[-1].codepoint) is BidiClass.RTL


def test_run_offset_helpers() -> None:
    run = Run(start_byte=7, end_byte=23, text="سلام دنیا")

    assert run.byte_length == 17
    assert run.contains(7) and run.contains(23)
    assert not run.contains(24)
    assert run.relative(7) == 1


def test_lone_surrogate_ends_a_run() -> None:
    assert find_runs("שלום \ud800") == [Run(start_byte=1, end_byte=8, text="שלום")]
