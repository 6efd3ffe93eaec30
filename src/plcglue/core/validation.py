"""Addressing checks for located variables before glue generation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from plcglue.core.buffers import legacy_capacity
from plcglue.core.declaration import Declaration
from plcglue.core.groups import BOOL_GROUP_SIZE
from plcglue.core.location import Direction, ValueType

ValidationMode = Literal["warn", "strict"]
FindingSeverity = Literal["error", "warning", "hint"]

GLUE_MINOR_OUT_OF_RANGE = "GLUE_MINOR_OUT_OF_RANGE"
GLUE_SLOT_COLLISION = "GLUE_SLOT_COLLISION"
GLUE_INDEX_OUT_OF_RANGE = "GLUE_INDEX_OUT_OF_RANGE"
GLUE_UNKNOWN_VALUE_TYPE = "GLUE_UNKNOWN_VALUE_TYPE"
GLUE_NO_LEGACY_BUFFER = "GLUE_NO_LEGACY_BUFFER"

_ALWAYS_ERROR_CODES = frozenset({GLUE_INDEX_OUT_OF_RANGE})
_ADVISORY_CODES = frozenset({GLUE_NO_LEGACY_BUFFER})

# GlueVariable.msi is uint16_t, GlueVariable.lsi is uint8_t.
MAX_MAJOR_INDEX = 0xFFFF
MAX_MINOR_INDEX = 0xFF


@dataclass(frozen=True)
class GlueFinding:
    code: str
    severity: FindingSeverity
    message: str
    location: str


@dataclass(frozen=True)
class GlueValidationReport:
    errors: tuple[GlueFinding, ...] = ()
    warnings: tuple[GlueFinding, ...] = ()
    hints: tuple[GlueFinding, ...] = ()

    def summary(self) -> str:
        parts: list[str] = []
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")
        if self.hints:
            parts.append(f"{len(self.hints)} hint(s)")
        if not parts:
            return "No findings."
        return ", ".join(parts) + "."

    def findings(self) -> list[GlueFinding]:
        return [*self.errors, *self.warnings, *self.hints]


class GlueValidationError(ValueError):
    """Raised when located variables cannot be glued."""

    def __init__(self, report: GlueValidationReport) -> None:
        lines = [f"{len(report.errors)} error(s)."]
        for err in report.errors:
            lines.append(f"{err.code} @ {err.location}: {err.message}")
        super().__init__("\n".join(lines))
        self.report = report


def _route_severity(code: str, mode: ValidationMode) -> FindingSeverity:
    if code in _ALWAYS_ERROR_CODES:
        return "error"
    if code in _ADVISORY_CODES:
        return "hint"
    if mode == "strict":
        return "error"
    return "warning"


def validate_declarations(
    declarations: Iterable[Declaration],
    *,
    mode: ValidationMode = "warn",
) -> GlueValidationReport:
    """Check addressing of parsed declarations.

    ``mode="warn"`` keeps slot collisions, out-of-range bit positions and
    unknown value types as warnings; ``mode="strict"`` turns them into errors.
    Indices past a buffer's capacity are always errors.
    """
    if mode not in ("warn", "strict"):
        raise ValueError("mode must be 'warn' or 'strict'")

    errors: list[GlueFinding] = []
    warnings: list[GlueFinding] = []
    hints: list[GlueFinding] = []

    def add(code: str, message: str, decl: Declaration) -> None:
        finding = GlueFinding(
            code=code,
            severity=_route_severity(code, mode),
            message=message,
            location=decl.describe(),
        )
        if finding.severity == "error":
            errors.append(finding)
        elif finding.severity == "warning":
            warnings.append(finding)
        else:
            hints.append(finding)

    claimed: dict[tuple[Direction, int, int], Declaration] = {}

    for decl in declarations:
        location = decl.location
        address = location.format()

        if ValueType.lookup(decl.type) is None:
            add(
                GLUE_UNKNOWN_VALUE_TYPE,
                f"Type {decl.type!r} has no glue value type; {address} is emitted as UNASSIGNED.",
                decl,
            )

        capacity = legacy_capacity(location)
        if decl.major > MAX_MAJOR_INDEX:
            add(
                GLUE_INDEX_OUT_OF_RANGE,
                f"Major index {decl.major} of {address} does not fit in 16 bits.",
                decl,
            )
        elif capacity is not None and decl.major >= capacity:
            add(
                GLUE_INDEX_OUT_OF_RANGE,
                f"Major index {decl.major} of {address} exceeds buffer capacity {capacity}.",
                decl,
            )

        if capacity is None:
            add(
                GLUE_NO_LEGACY_BUFFER,
                f"{address} has no glueVars() buffer; it is only reachable through the glue table.",
                decl,
            )

        if not 0 <= decl.minor <= MAX_MINOR_INDEX:
            add(
                GLUE_INDEX_OUT_OF_RANGE,
                f"Minor index {decl.minor} of {address} does not fit in 8 bits.",
                decl,
            )

        if not decl.is_bit:
            continue

        if decl.minor >= BOOL_GROUP_SIZE:
            add(
                GLUE_MINOR_OUT_OF_RANGE,
                f"Invalid addressing on located variable {decl.name}: "
                f"bit {decl.minor} is outside 0-{BOOL_GROUP_SIZE - 1}; it is not glued.",
                decl,
            )
            continue

        triple = (decl.direction, decl.major, decl.minor)
        previous = claimed.get(triple)
        if previous is not None:
            add(
                GLUE_SLOT_COLLISION,
                f"{address} is already located by {previous.describe()}; the later declaration wins.",
                decl,
            )
        claimed[triple] = decl

    return GlueValidationReport(
        errors=tuple(errors),
        warnings=tuple(warnings),
        hints=tuple(hints),
    )
