"""Pure text pipeline: decoding, classification, runs, visual order, positions."""

from .classes import (
    KEYWORD_RANGES,
    BidiClass,
    class_of,
    is_rtl,
    is_weak,
)
from .codec import CodeUnit, codepoint_of, decode, iter_units
from .layout import JOINER, PLACEHOLDER
from .positions import PositionMap, build_position_map, map_cursor
from .prescan import PRESCAN_LINE_LIMIT, has_rtl, line_has_rtl
from .runs import Run, find_runs
from .visual import VisualRendering, render_run, to_visual

__all__ = [
    "BidiClass",
    "CodeUnit",
    "JOINER",
    "KEYWORD_RANGES",
    "PLACEHOLDER",
    "PRESCAN_LINE_LIMIT",
    "PositionMap",
    "Run",
    "VisualRendering",
    "build_position_map",
    "class_of",
    "codepoint_of",
    "decode",
    "find_runs",
    "has_rtl",
    "is_rtl",
    "is_weak",
    "iter_units",
    "line_has_rtl",
    "map_cursor",
    "render_run",
    "to_visual",
]
