"""Glue source generation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from plcglue.codegen._constants import (
    _DIGEST_SYMBOL,
    _FOOTER,
    _GLUE_SIZE_SYMBOL,
    _GLUE_TABLE_SYMBOL,
    _HEADER,
    _NULL_POINTER,
)
from plcglue.codegen.context import GlueContext
from plcglue.core.buffers import BUFFER_SIZE, resolve_legacy_slot
from plcglue.core.checksum import digest_hex_chars
from plcglue.core.declaration import Declaration
from plcglue.core.groups import BOOL_GROUP_SIZE, BoolGroup, GroupingResult
from plcglue.core.location import Direction, SizeClass, ValueType, c_identifier


@dataclass(frozen=True)
class GlueRow:
    """One ``GlueVariable`` entry of the unified glue table."""

    direction: Direction
    size: SizeClass
    major: int
    minor: int
    value_type: ValueType
    target: str

    def render(self) -> str:
        return (
            f"    {{ IECLDT_{self.direction.name}, IECLST_{self.size.name},"
            f" {self.major}, {self.minor}, IECVT_{self.value_type.name},  {self.target} }},"
        )


def glue_row_for(decl: Declaration) -> GlueRow:
    value_type = ValueType.lookup(decl.type) or ValueType.UNASSIGNED
    return GlueRow(
        direction=decl.direction,
        size=decl.size,
        major=decl.major,
        minor=decl.minor,
        value_type=value_type,
        target=decl.symbol,
    )


def _render_header_lines() -> list[str]:
    value_types = "\n".join(f"    IECVT_{vt.name}," for vt in ValueType)
    text = (
        _HEADER.replace("{value_types}", value_types)
        .replace("{group_size}", str(BOOL_GROUP_SIZE))
        .replace("{buffer_size}", str(BUFFER_SIZE))
    )
    return text.rstrip("\n").split("\n")


def render_glue_statement(decl: Declaration) -> str | None:
    """Return the ``glueVars()`` assignment for ``decl``, if it has a buffer."""
    slot = resolve_legacy_slot(decl.location)
    if slot is None:
        return None
    cast = f"({slot.buffer.cast} *)" if slot.buffer.cast else ""
    return f"\t{slot.subscript()} = {cast}{decl.symbol};"


def _render_glue_vars_function(declarations: Iterable[Declaration]) -> list[str]:
    lines = ["void glueVars()", "{"]
    for decl in declarations:
        statement = render_glue_statement(decl)
        if statement is not None:
            lines.append(statement)
    lines.append("}")
    return lines


def render_bool_group(group: BoolGroup) -> list[str]:
    values = "".join(
        f"{c_identifier(name) if name is not None else _NULL_POINTER}, " for name in group.slots
    )
    return [
        f"GlueBoolGroup ___{group.name} {{ .index={group.major}, .values={{ {values}}} }};",
        f"GlueBoolGroup* __{group.name}(&___{group.name});",
    ]


def _render_bool_groups(grouping: GroupingResult) -> list[str]:
    lines: list[str] = []
    for group in grouping.groups_in_emit_order():
        lines.extend(render_bool_group(group))
    return lines


def _render_glue_table(declarations: tuple[Declaration, ...]) -> list[str]:
    lines = [
        "/// The size of the array of glue variables.",
        f"extern std::size_t const {_GLUE_SIZE_SYMBOL}({len(declarations)});",
        "/// The packed glue variables.",
        f"extern const GlueVariable {_GLUE_TABLE_SYMBOL}[] = {{",
    ]
    lines.extend(glue_row_for(decl).render() for decl in declarations)
    lines.append("};")
    return lines


def render_checksum(digest: bytes) -> list[str]:
    chars = "".join(f"'{char}', " for char in digest_hex_chars(digest))
    return [
        "/// MD5 checksum of the located variables.",
        "/// WARNING: this must not be used to trust file contents.",
        f"extern const char {_DIGEST_SYMBOL}[] = {{{chars}}};",
    ]


def _render_code(ctx: GlueContext) -> str:
    if ctx.grouping is None or ctx.digest is None:
        raise RuntimeError("Glue context is incomplete; collect declarations and groups first")

    lines: list[str] = []

    # 1) fixed declarations and buffers
    lines.extend(_render_header_lines())

    # 2) legacy per-variable assignments, before grouping
    lines.extend(_render_glue_vars_function(ctx.declarations))
    lines.append("")

    # 3) bool groups and the unified table
    lines.extend(_render_bool_groups(ctx.grouping))
    lines.extend(_render_glue_table(ctx.glued))
    lines.append("")

    # 4) checksum
    lines.extend(render_checksum(ctx.digest))
    lines.extend(["", ""])

    lines.extend(_FOOTER.split("\n"))
    return "\n".join(lines) + "\n"
