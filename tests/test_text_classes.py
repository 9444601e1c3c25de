from __future__ import annotations

import pytest

from bidi_scope.text import BidiClass, class_of, is_rtl, is_weak


@pytest.mark.parametrize(
    "codepoint",
    [
        0x05E9,  # shin
        0x0633,  # seen
        0x06CC,  # farsi yeh
        0x0710,  # syriac alaph
        0x0780,  # thaana
        0x07CA,  # n'ko
        0x200F,  # RLM
        0xFB1D,
        0xFEFE,
        0x10D00,
        0x1E900,
        0x1EE00,
    ],
)
def test_rtl_codepoints(codepoint: int) -> None:
    assert class_of(codepoint) is BidiClass.RTL


@pytest.mark.parametrize(
    "codepoint",
    [
        0x0009,
        0x0020,
        ord("!"),
        ord("5"),
        ord("@"),
        ord("["),
        ord("~"),
        0x00A0,
        0x05BE,  # maqaf
        0x05F3,  # geresh
        0x060C,  # Arabic comma
        0x061F,  # Arabic question mark
        0x0640,  # tatweel
        0x0663,  # Arabic-Indic three
        0x06F5,  # Extended Arabic-Indic five
        0x200B,
        0x200C,  # ZWNJ
        0x200E,  # LRM
        0x2014,
        0x202B,
        0x2067,
        0x20AC,  # euro sign
        0xFEFF,
    ],
)
def test_weak_codepoints(codepoint: int) -> None:
    assert class_of(codepoint) is BidiClass.WEAK


@pytest.mark.parametrize("codepoint", [ord("a"), ord("Z"), 0x00E9, 0x0416, 0x4E2D, 0x25CC, 0x10FFFF])
def test_other_codepoints(codepoint: int) -> None:
    assert class_of(codepoint) is BidiClass.OTHER


def test_malformed_unit_is_other() -> None:
    assert class_of(None) is BidiClass.OTHER
    assert not is_rtl(None)
    assert not is_weak(None)


def test_classification_is_total_and_buckets_are_exclusive() -> None:
    for codepoint in range(0, 0x110000, 37):
        bucket = class_of(codepoint)
        assert bucket in (BidiClass.RTL, BidiClass.WEAK, BidiClass.OTHER)
        assert class_of(codepoint) is bucket
        assert not (is_rtl(codepoint) and is_weak(codepoint))
