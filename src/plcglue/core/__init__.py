"""Located variable model: addressing, parsing, grouping and checks."""

from plcglue.core.buffers import (
    BUFFER_SIZE,
    LEGACY_BUFFERS,
    SPECIAL_FUNCTION_BASE,
    BufferSlot,
    LegacyBuffer,
    resolve_legacy_slot,
)
from plcglue.core.checksum import RunningChecksum, digest_hex_chars
from plcglue.core.declaration import (
    Declaration,
    DeclarationSyntaxError,
    iter_declarations,
    parse_declaration,
)
from plcglue.core.groups import (
    BOOL_GROUP_SIZE,
    BoolGroup,
    GroupingResult,
    group_bool_declarations,
)
from plcglue.core.location import (
    Direction,
    InvalidLocationError,
    Location,
    SizeClass,
    ValueType,
    c_identifier,
    decode_location,
)
from plcglue.core.validation import (
    GlueFinding,
    GlueValidationError,
    GlueValidationReport,
    ValidationMode,
    validate_declarations,
)

__all__ = [
    "BOOL_GROUP_SIZE",
    "BUFFER_SIZE",
    "BoolGroup",
    "BufferSlot",
    "Declaration",
    "DeclarationSyntaxError",
    "Direction",
    "GlueFinding",
    "GlueValidationError",
    "GlueValidationReport",
    "GroupingResult",
    "InvalidLocationError",
    "LEGACY_BUFFERS",
    "LegacyBuffer",
    "Location",
    "RunningChecksum",
    "SPECIAL_FUNCTION_BASE",
    "SizeClass",
    "ValidationMode",
    "ValueType",
    "c_identifier",
    "decode_location",
    "digest_hex_chars",
    "group_bool_declarations",
    "iter_declarations",
    "parse_declaration",
    "resolve_legacy_slot",
    "validate_declarations",
]
