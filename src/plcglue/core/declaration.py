"""Located variable declarations read from ``LOCATED_VARIABLES.h``.

MATIEC writes one macro invocation per located variable::

    __LOCATED_VAR(BOOL,__IX0_0,I,X,0,0)

Only the first two arguments (type and name) are used; the address is
decoded from the name.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

from pyrsistent import PRecord, field

from plcglue.core.checksum import RunningChecksum
from plcglue.core.location import (
    Direction,
    InvalidLocationError,
    Location,
    SizeClass,
    c_identifier,
    decode_location,
)

_DECLARATION_RE = re.compile(
    r"^\s*(?:[A-Za-z_][A-Za-z0-9_]*\s*)?\((?P<args>[^()]*)\)\s*;?\s*$"
)
_IDENT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
_NONE_TYPE = type(None)


class DeclarationSyntaxError(ValueError):
    """Raised when a line is not a located variable declaration."""

    def __init__(self, message: str, line_number: int | None, text: str) -> None:
        where = f"line {line_number}" if line_number is not None else "input"
        super().__init__(f"{message} ({where}: {text.strip()!r})")
        self.message = message
        self.line_number = line_number
        self.text = text


class Declaration(PRecord):
    """One located variable.

    Attributes:
        name: Variable name as declared (``__IX0_1`` or ``%IX0.1``), or the
            group identifier (``IG0``) once it represents a bool group.
        type: Declared value type name (``BOOL``, ``INT``, ...).
        direction: Decoded direction.
        size: Decoded size class.
        major: Major index.
        minor: Minor index (bit position); 0 for non-bit variables.
        line_number: 1-based input line, when known.
        is_group: Whether this entry stands for a whole bool group.
    """

    name = field(type=str, mandatory=True)
    type = field(type=str, mandatory=True)
    direction = field(type=Direction, mandatory=True)
    size = field(type=SizeClass, mandatory=True)
    major = field(type=int, mandatory=True)
    minor = field(type=int, initial=0)
    line_number = field(type=(int, _NONE_TYPE), initial=None)
    is_group = field(type=bool, initial=False)

    @property
    def symbol(self) -> str:
        """C symbol referenced from the generated source."""
        if self.is_group:
            return f"__{self.name}"
        return c_identifier(self.name)

    @property
    def location(self) -> Location:
        return Location(direction=self.direction, size=self.size, major=self.major, minor=self.minor)

    @property
    def is_bit(self) -> bool:
        return self.size is SizeClass.BIT

    def describe(self) -> str:
        if self.line_number is None:
            return self.name
        return f"line {self.line_number} ({self.name})"


def parse_declaration(text: str, *, line_number: int | None = None) -> Declaration:
    """Parse ``MACRO(type, name, ...)`` into a :class:`Declaration`.

    Arguments past the second are ignored.

    Raises:
        DeclarationSyntaxError: If the line does not have that shape, a field
            is empty, or the name is not a located variable.
    """
    match = _DECLARATION_RE.match(text)
    if match is None:
        raise DeclarationSyntaxError(
            "Expected a declaration of the form MACRO(type, name, ...)", line_number, text
        )

    args = [arg.strip() for arg in match.group("args").split(",")]
    if len(args) < 2:
        raise DeclarationSyntaxError("Declaration needs a type and a name", line_number, text)
    var_type, name = args[0], args[1]
    if not var_type or not name:
        raise DeclarationSyntaxError("Declaration type and name must not be empty", line_number, text)
    if not _IDENT_RE.match(var_type):
        raise DeclarationSyntaxError(f"Invalid type name {var_type!r}", line_number, text)

    try:
        location = decode_location(name)
    except InvalidLocationError as exc:
        raise DeclarationSyntaxError(exc.reason, line_number, text) from exc

    return Declaration(
        name=name,
        type=var_type,
        direction=location.direction,
        size=location.size,
        major=location.major,
        minor=location.minor,
        line_number=line_number,
    )


def iter_declarations(lines: Iterable[str], checksum: RunningChecksum) -> Iterator[Declaration]:
    """Yield declarations in input order, feeding every line to ``checksum``.

    Line terminators are not part of the checksum. Blank lines are skipped.
    """
    for line_number, raw in enumerate(lines, 1):
        line = raw[:-1] if raw.endswith("\n") else raw
        checksum.append(line.encode("utf-8"))
        if not line.strip():
            continue
        yield parse_declaration(line, line_number=line_number)
