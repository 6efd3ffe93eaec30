"""Located-variable addressing for the OpenPLC memory model.

A located variable name encodes where it lives: a direction letter
(``I``/``Q``/``M``), a size letter (``X``/``B``/``W``/``D``/``L``), a major
index and, for bits, a minor index. MATIEC spells these as C symbols
(``__IX0_1``); the same address written directly in IEC form is ``%IX0.1``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class InvalidLocationError(ValueError):
    """Raised when a name does not follow the located-variable convention."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"Invalid located variable {name!r}: {reason}")
        self.name = name
        self.reason = reason


class Direction(Enum):
    """Where a located variable lives (``IecLocationDirection``)."""

    IN = "I"
    OUT = "Q"
    MEM = "M"

    @property
    def flag(self) -> str:
        return self.value


class SizeClass(Enum):
    """Bit width of a located variable (``IecLocationSize``)."""

    BIT = "X"
    BYTE = "B"
    WORD = "W"
    DOUBLEWORD = "D"
    LONGWORD = "L"

    @property
    def flag(self) -> str:
        return self.value


class ValueType(Enum):
    """Value types the runtime knows how to write (``IecGlueValueType``)."""

    BOOL = "BOOL"
    BYTE = "BYTE"
    SINT = "SINT"
    USINT = "USINT"
    INT = "INT"
    UINT = "UINT"
    WORD = "WORD"
    DINT = "DINT"
    UDINT = "UDINT"
    DWORD = "DWORD"
    REAL = "REAL"
    LREAL = "LREAL"
    LWORD = "LWORD"
    LINT = "LINT"
    ULINT = "ULINT"
    UNASSIGNED = "UNASSIGNED"

    @classmethod
    def lookup(cls, type_name: str) -> ValueType | None:
        try:
            return cls(type_name.upper())
        except ValueError:
            return None


DIRECTION_BY_FLAG: dict[str, Direction] = {d.flag: d for d in Direction}
SIZE_BY_FLAG: dict[str, SizeClass] = {s.flag: s for s in SizeClass}

_DIGITS_RE = re.compile(r"\d*")

# (prefix, minor separators) for each accepted spelling.
_SPELLINGS = (("__", "_"), ("%", "._"))


@dataclass(frozen=True)
class Location:
    direction: Direction
    size: SizeClass
    major: int
    minor: int = 0

    def format(self) -> str:
        """Return the IEC direct address, e.g. ``%IX0.1`` or ``%QW3``."""
        text = f"%{self.direction.flag}{self.size.flag}{self.major}"
        if self.size is SizeClass.BIT:
            text += f".{self.minor}"
        return text


def _atoi(text: str) -> int:
    # Leading digits only; nothing numeric reads as 0.
    digits = _DIGITS_RE.match(text)
    if digits is None or not digits.group(0):
        return 0
    return int(digits.group(0))


def decode_location(name: str) -> Location:
    """Decode a located variable name into its direction, size and indices.

    The major index is everything after the direction/size letters up to the
    minor separator (or the end of the name). IEC addresses accept both
    ``.`` and ``_`` as the separator. The minor index is only kept for bits;
    it is 0 for every other size.

    Raises:
        InvalidLocationError: If the prefix or either flag letter is unknown.
    """
    for prefix, separators in _SPELLINGS:
        if name.startswith(prefix):
            break
    else:
        raise InvalidLocationError(name, "expected a '__' or '%' prefix")

    flags_at = len(prefix)
    if len(name) < flags_at + 2:
        raise InvalidLocationError(name, "missing direction or size letter")

    direction = DIRECTION_BY_FLAG.get(name[flags_at])
    if direction is None:
        raise InvalidLocationError(name, f"unknown direction letter {name[flags_at]!r}")
    size = SIZE_BY_FLAG.get(name[flags_at + 1])
    if size is None:
        raise InvalidLocationError(name, f"unknown size letter {name[flags_at + 1]!r}")

    indices = name[flags_at + 2 :]
    cut = min((i for i in map(indices.find, separators) if i >= 0), default=len(indices))
    major = _atoi(indices[:cut])
    minor = _atoi(indices[cut + 1 :]) if size is SizeClass.BIT else 0
    return Location(direction=direction, size=size, major=major, minor=minor)


def c_identifier(name: str) -> str:
    """Return the C symbol MATIEC declares for ``name``.

    MATIEC names are already identifiers; IEC direct addresses are mangled
    the way MATIEC spells them (``%IX0.1`` -> ``__IX0_1``).
    """
    if name.startswith("%"):
        return "__" + name[1:].replace(".", "_")
    return name
