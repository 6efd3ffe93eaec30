"""Glue source generation for the OpenPLC runtime."""

from __future__ import annotations

from plcglue.codegen._constants import DEFAULT_INPUT_PATH, DEFAULT_OUTPUT_PATH
from plcglue.codegen.context import GlueContext
from plcglue.codegen.generate import GlueResult, generate_glue
from plcglue.codegen.render import (
    GlueRow,
    glue_row_for,
    render_bool_group,
    render_checksum,
    render_glue_statement,
)

__all__ = [
    "DEFAULT_INPUT_PATH",
    "DEFAULT_OUTPUT_PATH",
    "GlueContext",
    "GlueResult",
    "GlueRow",
    "generate_glue",
    "glue_row_for",
    "render_bool_group",
    "render_checksum",
    "render_glue_statement",
]
