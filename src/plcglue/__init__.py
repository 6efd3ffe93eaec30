"""plcglue - bind MATIEC located variables to the OpenPLC runtime.

Reads the ``LOCATED_VARIABLES.h`` list written by the MATIEC compiler and
generates ``glueVars.cpp``::

    from plcglue import generate_glue

    with open("LOCATED_VARIABLES.h") as f:
        result = generate_glue(f)

    result.source      # glueVars.cpp text
    result.report      # addressing warnings
    result.glue_size   # rows in oplc_glue_vars[]
"""

from plcglue.codegen import GlueResult, generate_glue
from plcglue.core import (
    BoolGroup,
    Declaration,
    DeclarationSyntaxError,
    Direction,
    GlueValidationError,
    GlueValidationReport,
    InvalidLocationError,
    Location,
    SizeClass,
    ValueType,
    decode_location,
    group_bool_declarations,
    parse_declaration,
)

__all__ = [
    "BoolGroup",
    "Declaration",
    "DeclarationSyntaxError",
    "Direction",
    "GlueResult",
    "GlueValidationError",
    "GlueValidationReport",
    "InvalidLocationError",
    "Location",
    "SizeClass",
    "ValueType",
    "decode_location",
    "generate_glue",
    "group_bool_declarations",
    "parse_declaration",
]
