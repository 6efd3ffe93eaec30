"""Pytest configuration and test helpers."""

from plcglue.codegen import GlueResult, generate_glue
from plcglue.core.location import decode_location


def located_line(var_type: str, name: str) -> str:
    """Return a ``LOCATED_VARIABLES.h`` line the way MATIEC writes it.

    Args:
        var_type: Declared value type, e.g. ``BOOL``.
        name: MATIEC symbol, e.g. ``__IX0_1``.

    Returns:
        The macro invocation, newline terminated.
    """
    loc = decode_location(name)
    return (
        f"__LOCATED_VAR({var_type},{name},{loc.direction.flag},{loc.size.flag},"
        f"{loc.major},{loc.minor})\n"
    )


def located_lines(*decls: tuple[str, str]) -> list[str]:
    return [located_line(var_type, name) for var_type, name in decls]


def generate(*decls: tuple[str, str], mode: str = "warn") -> GlueResult:
    """Run the full generator over ``(type, name)`` pairs."""
    return generate_glue(located_lines(*decls), mode=mode)  # type: ignore[arg-type]


def section(source: str, start: str, end: str) -> list[str]:
    """Return the lines of ``source`` strictly between ``start`` and ``end``."""
    lines = source.split("\n")
    begin = lines.index(start) + 1
    return lines[begin : lines.index(end, begin)]


def glue_vars_body(source: str) -> list[str]:
    # skip the opening brace
    return section(source, "void glueVars()", "}")[1:]


def glue_table_rows(source: str) -> list[str]:
    return section(source, "extern const GlueVariable oplc_glue_vars[] = {", "};")
