"""RTL run segmentation with weak-character absorption and trimming."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .classes import BidiClass, class_of
from .codec import Text, as_bytes, as_text, decode


@dataclass(frozen=True, slots=True)
class Run:
    """RTL run covering bytes ``[start_byte, end_byte]`` (1-indexed) of a line."""

    start_byte: int
    end_byte: int
    text: str

    @property
    def byte_length(self) -> int:
        return self.end_byte - self.start_byte + 1

    def contains(self, offset: int) -> bool:
        return self.start_byte <= offset <= self.end_byte

    def relative(self, offset: int) -> int:
        """Translate a line offset into a 1-indexed offset within the run."""

        return offset - self.start_byte + 1


def find_runs(line: Text) -> List[Run]:
    """Return every RTL run of ``line`` in left-to-right order.

    A run starts on an RTL codepoint and absorbs following RTL or weak
    codepoints up to the first OTHER one. Trailing weak codepoints are then
    trimmed so a run always ends on an RTL codepoint. Scanning resumes right
    after the trimmed end, so the trimmed characters can never start a run.
    """

    data = as_bytes(line)
    units = decode(data)
    classes = [class_of(unit.codepoint) for unit in units]
    runs: List[Run] = []

    index = 0
    count = len(units)
    while index < count:
        if classes[index] is not BidiClass.RTL:
            index += 1
            continue

        start = index
        end = index
        while end + 1 < count and classes[end + 1] is not BidiClass.OTHER:
            end += 1
        while end > start and classes[end] is BidiClass.WEAK:
            end -= 1

        start_byte = units[start].start
        end_byte = units[end].stop
        runs.append(
            Run(
                start_byte=start_byte,
                end_byte=end_byte,
                text=as_text(data[start_byte - 1 : end_byte]),
            )
        )
        index = end + 1

    return runs


__all__ = ["Run", "find_runs"]
