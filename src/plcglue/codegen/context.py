"""Glue source generation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from plcglue.core.checksum import RunningChecksum
from plcglue.core.declaration import Declaration, iter_declarations
from plcglue.core.groups import GroupingResult, group_bool_declarations
from plcglue.core.validation import (
    GlueValidationReport,
    ValidationMode,
    validate_declarations,
)


@dataclass
class GlueContext:
    """State owned by a single glue generation run."""

    mode: ValidationMode = "warn"

    checksum: RunningChecksum = field(default_factory=RunningChecksum)
    declarations: list[Declaration] = field(default_factory=list)
    report: GlueValidationReport = field(default_factory=GlueValidationReport)
    grouping: GroupingResult | None = None
    digest: bytes | None = None

    def collect_declarations(self, lines: Iterable[str]) -> bytes:
        self.declarations = list(iter_declarations(lines, self.checksum))
        self.digest = self.checksum.finish()
        return self.digest

    def validate(self) -> GlueValidationReport:
        self.report = validate_declarations(self.declarations, mode=self.mode)
        return self.report

    def group_bools(self) -> GroupingResult:
        self.grouping = group_bool_declarations(self.declarations)
        return self.grouping

    @property
    def glued(self) -> tuple[Declaration, ...]:
        """Declarations that appear in the glue table."""
        if self.grouping is None:
            raise RuntimeError("Bool groups have not been collected")
        return self.grouping.declarations
