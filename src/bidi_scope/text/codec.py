"""Fault-tolerant UTF-8 decoding with 1-indexed byte spans."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Union

Text = Union[str, bytes]


@dataclass(frozen=True, slots=True)
class CodeUnit:
    """One decoded unit and the inclusive byte span ``[start, stop]`` it covers.

    ``start`` and ``stop`` are 1-indexed offsets into the source buffer. A
    malformed byte is emitted as its own single-byte unit.
    """

    data: bytes
    start: int
    stop: int

    @property
    def width(self) -> int:
        return len(self.data)

    @property
    def codepoint(self) -> Optional[int]:
        return codepoint_of(self)


def as_bytes(text: Text) -> bytes:
    if isinstance(text, bytes):
        return text
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        # Lone surrogates outside the escape range encode as 3-byte units.
        return text.encode("utf-8", "surrogatepass")


def as_text(data: bytes) -> str:
    return data.decode("utf-8", "surrogateescape")


def _sequence_length(lead: int) -> int:
    if lead >= 0xF8:
        return 1
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC2:  # 0xC0-0xC1 only start overlong encodings
        return 2
    return 1


def iter_units(text: Text) -> Iterator[CodeUnit]:
    """Yield code units left to right without materializing the sequence."""

    data = as_bytes(text)
    size = len(data)
    index = 0
    while index < size:
        length = min(_sequence_length(data[index]), size - index)
        yield CodeUnit(
            data=data[index : index + length],
            start=index + 1,
            stop=index + length,
        )
        index += length


def decode(text: Text) -> List[CodeUnit]:
    """Split ``text`` into code units; every input byte lands in exactly one."""

    return list(iter_units(text))


def codepoint_of(unit: Union[CodeUnit, bytes]) -> Optional[int]:
    """Return the scalar value encoded by ``unit`` or ``None`` if malformed."""

    data = unit.data if isinstance(unit, CodeUnit) else unit
    if not data:
        return None
    lead = data[0]
    if lead < 0x80:
        return lead if len(data) == 1 else None
    if lead < 0xC2 or lead >= 0xF8:
        return None
    if len(data) != _sequence_length(lead):
        return None

    tail = data[1:]
    if any(byte & 0xC0 != 0x80 for byte in tail):
        return None

    if lead < 0xE0:
        value = lead & 0x1F
    elif lead < 0xF0:
        value = lead & 0x0F
    else:
        value = lead & 0x07
    for byte in tail:
        value = (value << 6) | (byte & 0x3F)
    return value


__all__ = [
    "CodeUnit",
    "Text",
    "as_bytes",
    "as_text",
    "codepoint_of",
    "decode",
    "iter_units",
]
