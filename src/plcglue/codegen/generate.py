"""Glue source generation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from plcglue.codegen.context import GlueContext
from plcglue.codegen.render import _render_code
from plcglue.core.declaration import Declaration
from plcglue.core.groups import BoolGroup
from plcglue.core.validation import (
    GlueValidationError,
    GlueValidationReport,
    ValidationMode,
)


@dataclass(frozen=True)
class GlueResult:
    source: str
    digest: bytes
    report: GlueValidationReport
    declarations: tuple[Declaration, ...]
    glued: tuple[Declaration, ...]
    groups: tuple[BoolGroup, ...]

    @property
    def glue_size(self) -> int:
        return len(self.glued)


def generate_glue(lines: Iterable[str], *, mode: ValidationMode = "warn") -> GlueResult:
    """Generate ``glueVars.cpp`` source from ``LOCATED_VARIABLES.h`` lines.

    Raises:
        DeclarationSyntaxError: If a line is not a located variable declaration.
        GlueValidationError: If addressing checks report errors.
    """
    if mode not in ("warn", "strict"):
        raise ValueError("mode must be 'warn' or 'strict'")
    if isinstance(lines, (str, bytes)):
        raise TypeError("lines must be an iterable of lines, not a single string")

    ctx = GlueContext(mode=mode)
    digest = ctx.collect_declarations(lines)
    report = ctx.validate()
    if report.errors:
        raise GlueValidationError(report)
    grouping = ctx.group_bools()

    source = _render_code(ctx)
    return GlueResult(
        source=source,
        digest=digest,
        report=report,
        declarations=tuple(ctx.declarations),
        glued=grouping.declarations,
        groups=tuple(grouping.groups_in_emit_order()),
    )
