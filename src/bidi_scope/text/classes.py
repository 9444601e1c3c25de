"""Static three-bucket bidi classification (RTL / WEAK / OTHER).

Tables follow the block layout of Unicode's DerivedBidiClass.txt but only
distinguish the buckets the run finder needs. ``class_of`` consults the RLM
codepoint first, then the weak table, then the RTL blocks, so punctuation and
digits that live inside RTL blocks (Arabic comma, Arabic-Indic digits, the
BOM) are weak.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Tuple

Range = Tuple[int, int]

RIGHT_TO_LEFT_MARK = 0x200F

RTL_RANGES: Tuple[Range, ...] = (
    (0x0590, 0x05FF),  # Hebrew
    (0x0600, 0x06FF),  # Arabic
    (0x0700, 0x074F),  # Syriac
    (0x0750, 0x077F),  # Arabic Supplement
    (0x0780, 0x07BF),  # Thaana
    (0x07C0, 0x07FF),  # N'Ko
    (0x0800, 0x083F),  # Samaritan
    (0x0840, 0x085F),  # Mandaic
    (0x0860, 0x086F),  # Syriac Supplement
    (0x0870, 0x089F),  # Arabic Extended-B
    (0x08A0, 0x08FF),  # Arabic Extended-A
    (0xFB1D, 0xFB4F),  # Hebrew presentation forms
    (0xFB50, 0xFDFF),  # Arabic Presentation Forms-A
    (0xFE70, 0xFEFF),  # Arabic Presentation Forms-B
    (0x10800, 0x10CFF),  # Cypriot through Old Hungarian
    (0x10D00, 0x10D3F),  # Hanifi Rohingya
    (0x10E60, 0x10EBF),  # Rumi, Yezidi
    (0x10EC0, 0x10EFF),  # Arabic Extended-C
    (0x10F00, 0x10FFF),  # Old Sogdian through Elymaic
    (0x1E800, 0x1E8DF),  # Mende Kikakui
    (0x1E900, 0x1E95F),  # Adlam
    (0x1EC70, 0x1ECBF),  # Indic Siyaq Numbers
    (0x1ED00, 0x1ED4F),  # Ottoman Siyaq Numbers
    (0x1EE00, 0x1EEFF),  # Arabic Mathematical Alphabetic Symbols
)

WEAK_RANGES: Tuple[Range, ...] = (
    (0x0009, 0x0009),  # tab
    (0x0020, 0x0040),  # space, !"#$%&'()*+,-./, 0-9, :;<=>?@
    (0x005B, 0x0060),  # [\]^_`
    (0x007B, 0x007E),  # {|}~
    (0x00A0, 0x00BF),  # NBSP, inverted punctuation, currency
    (0x05BE, 0x05BE),  # maqaf
    (0x05C0, 0x05C0),  # paseq
    (0x05C3, 0x05C3),  # sof pasuq
    (0x05C6, 0x05C6),  # nun hafukha
    (0x05F3, 0x05F4),  # geresh, gershayim
    (0x060C, 0x060C),  # Arabic comma
    (0x061B, 0x061B),  # Arabic semicolon
    (0x061F, 0x061F),  # Arabic question mark
    (0x0640, 0x0640),  # tatweel
    (0x0660, 0x0669),  # Arabic-Indic digits
    (0x06F0, 0x06F9),  # Extended Arabic-Indic digits
    (0x2000, 0x200E),  # spaces, zero-width chars, LRM
    (0x2010, 0x2027),  # dashes, quotes, bullets
    (0x202A, 0x202E),  # LRE, RLE, PDF, LRO, RLO
    (0x202F, 0x202F),  # narrow no-break space
    (0x2039, 0x203A),  # single angle quotes
    (0x2060, 0x2060),  # word joiner
    (0x2066, 0x2069),  # isolates
    (0x20A0, 0x20CF),  # currency symbols
    (0xFEFF, 0xFEFF),  # BOM / ZWNBSP
)

# Ranges word motions treat as keyword characters (Hebrew, Arabic).
KEYWORD_RANGES: Tuple[Range, ...] = ((0x0590, 0x05FF), (0x0600, 0x06FF))


class BidiClass(str, Enum):
    """Direction buckets the run finder distinguishes."""

    RTL = "rtl"
    WEAK = "weak"
    OTHER = "other"


def _in_ranges(codepoint: int, ranges: Tuple[Range, ...]) -> bool:
    for low, high in ranges:
        if codepoint < low:
            return False
        if codepoint <= high:
            return True
    return False


def class_of(codepoint: Optional[int]) -> BidiClass:
    """Classify ``codepoint``; ``None`` (a malformed unit) is OTHER."""

    if codepoint is None:
        return BidiClass.OTHER
    if codepoint == RIGHT_TO_LEFT_MARK:
        return BidiClass.RTL
    if _in_ranges(codepoint, WEAK_RANGES):
        return BidiClass.WEAK
    if _in_ranges(codepoint, RTL_RANGES):
        return BidiClass.RTL
    return BidiClass.OTHER


def is_rtl(codepoint: Optional[int]) -> bool:
    return class_of(codepoint) is BidiClass.RTL


def is_weak(codepoint: Optional[int]) -> bool:
    return class_of(codepoint) is BidiClass.WEAK


__all__ = [
    "BidiClass",
    "KEYWORD_RANGES",
    "RIGHT_TO_LEFT_MARK",
    "RTL_RANGES",
    "WEAK_RANGES",
    "class_of",
    "is_rtl",
    "is_weak",
]
