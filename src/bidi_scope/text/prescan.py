"""Bounded check for RTL content across the first lines of a document."""

from __future__ import annotations

from itertools import islice
from typing import Iterable

from .classes import is_rtl
from .codec import Text, iter_units

PRESCAN_LINE_LIMIT = 100


def line_has_rtl(line: Text) -> bool:
    return any(is_rtl(unit.codepoint) for unit in iter_units(line))


def has_rtl(lines: Iterable[Text], limit: int = PRESCAN_LINE_LIMIT) -> bool:
    """Return True if any of the first ``limit`` lines holds an RTL codepoint."""

    return any(line_has_rtl(line) for line in islice(lines, max(limit, 0)))


__all__ = ["PRESCAN_LINE_LIMIT", "has_rtl", "line_has_rtl"]
