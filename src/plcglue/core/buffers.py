"""Legacy OpenPLC runtime buffers addressed by ``glueVars()``.

Each (direction, size) pair maps to one fixed-capacity pointer array.
Memory long words above the ordinary range are routed to the special
function buffer instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from plcglue.core.groups import BOOL_GROUP_SIZE
from plcglue.core.location import Direction, Location, SizeClass

BUFFER_SIZE = 1024

SPECIAL_FUNCTION_BASE = 1024

SPECIAL_FUNCTIONS = "special_functions"


@dataclass(frozen=True)
class LegacyBuffer:
    name: str
    cast: str | None = None
    bit_indexed: bool = False


LEGACY_BUFFERS: dict[tuple[Direction, SizeClass], LegacyBuffer] = {
    (Direction.IN, SizeClass.BIT): LegacyBuffer("bool_input", bit_indexed=True),
    (Direction.IN, SizeClass.BYTE): LegacyBuffer("byte_input"),
    (Direction.IN, SizeClass.WORD): LegacyBuffer("int_input"),
    (Direction.OUT, SizeClass.BIT): LegacyBuffer("bool_output", bit_indexed=True),
    (Direction.OUT, SizeClass.BYTE): LegacyBuffer("byte_output"),
    (Direction.OUT, SizeClass.WORD): LegacyBuffer("int_output"),
    (Direction.MEM, SizeClass.WORD): LegacyBuffer("int_memory"),
    (Direction.MEM, SizeClass.DOUBLEWORD): LegacyBuffer("dint_memory", cast="IEC_DINT"),
    (Direction.MEM, SizeClass.LONGWORD): LegacyBuffer("lint_memory", cast="IEC_LINT"),
}


@dataclass(frozen=True)
class BufferSlot:
    """A resolved position in one of the legacy buffers."""

    buffer: LegacyBuffer
    index: int
    bit: int | None = None

    def subscript(self) -> str:
        text = f"{self.buffer.name}[{self.index}]"
        if self.bit is not None:
            text += f"[{self.bit}]"
        return text


def is_special_function(location: Location) -> bool:
    return (
        location.direction is Direction.MEM
        and location.size is SizeClass.LONGWORD
        and location.major >= SPECIAL_FUNCTION_BASE
    )


def legacy_capacity(location: Location) -> int | None:
    """Highest major index + 1 the legacy buffers accept, or None if unbuffered."""
    if (location.direction, location.size) not in LEGACY_BUFFERS:
        return None
    if location.direction is Direction.MEM and location.size is SizeClass.LONGWORD:
        return SPECIAL_FUNCTION_BASE + BUFFER_SIZE
    return BUFFER_SIZE


def resolve_legacy_slot(location: Location) -> BufferSlot | None:
    """Return where ``glueVars()`` stores ``location``, or None if it has no buffer.

    Bits past the end of a bool buffer row have no slot either.
    """
    buffer = LEGACY_BUFFERS.get((location.direction, location.size))
    if buffer is None:
        return None
    if is_special_function(location):
        special = LegacyBuffer(SPECIAL_FUNCTIONS, cast=buffer.cast)
        return BufferSlot(special, location.major - SPECIAL_FUNCTION_BASE)
    if buffer.bit_indexed:
        if not 0 <= location.minor < BOOL_GROUP_SIZE:
            return None
        return BufferSlot(buffer, location.major, location.minor)
    return BufferSlot(buffer, location.major)
