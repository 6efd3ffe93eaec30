"""Tests for the individual glue source sections."""

from __future__ import annotations

import hashlib

from plcglue.codegen.render import (
    GlueRow,
    glue_row_for,
    render_bool_group,
    render_checksum,
    render_glue_statement,
)
from plcglue.core.declaration import parse_declaration
from plcglue.core.groups import BoolGroup
from plcglue.core.location import Direction, SizeClass, ValueType


def _decl(var_type: str, name: str):
    return parse_declaration(f"__LOCATED_VAR({var_type},{name})")


class TestGlueStatement:
    def test_bit_input(self):
        assert render_glue_statement(_decl("BOOL", "__IX0_1")) == "\tbool_input[0][1] = __IX0_1;"

    def test_bit_past_the_row_has_no_statement(self):
        assert render_glue_statement(_decl("BOOL", "%IX1023.9")) is None

    def test_byte_output(self):
        assert render_glue_statement(_decl("BYTE", "__QB3")) == "\tbyte_output[3] = __QB3;"

    def test_word_memory(self):
        assert render_glue_statement(_decl("UINT", "__MW10")) == "\tint_memory[10] = __MW10;"

    def test_double_word_memory_is_cast(self):
        assert (
            render_glue_statement(_decl("DINT", "__MD2"))
            == "\tdint_memory[2] = (IEC_DINT *)__MD2;"
        )

    def test_long_word_memory(self):
        assert (
            render_glue_statement(_decl("LINT", "__ML1023"))
            == "\tlint_memory[1023] = (IEC_LINT *)__ML1023;"
        )

    def test_special_function_offset(self):
        assert (
            render_glue_statement(_decl("LINT", "%ML1025"))
            == "\tspecial_functions[1] = (IEC_LINT *)__ML1025;"
        )

    def test_iec_address_uses_matiec_symbol(self):
        assert render_glue_statement(_decl("BOOL", "%QX2.7")) == "\tbool_output[2][7] = __QX2_7;"

    def test_no_buffer(self):
        assert render_glue_statement(_decl("REAL", "__ID0")) is None


class TestGlueRow:
    def test_row_from_declaration(self):
        row = glue_row_for(_decl("BYTE", "%QB3"))
        assert row == GlueRow(Direction.OUT, SizeClass.BYTE, 3, 0, ValueType.BYTE, "__QB3")
        assert row.render() == "    { IECLDT_OUT, IECLST_BYTE, 3, 0, IECVT_BYTE,  __QB3 },"

    def test_group_row_references_group_symbol(self):
        decl = _decl("BOOL", "__IX0_1").set(name="IG0", minor=0, is_group=True)
        assert glue_row_for(decl).render() == (
            "    { IECLDT_IN, IECLST_BIT, 0, 0, IECVT_BOOL,  __IG0 },"
        )

    def test_unknown_type_is_unassigned(self):
        assert glue_row_for(_decl("TIME", "__MD1")).value_type is ValueType.UNASSIGNED


class TestBoolGroupConstant:
    def test_empty_slots_are_null(self):
        group = (
            BoolGroup(direction=Direction.IN, major=0)
            .with_slot(0, "__IX0_0")
            .with_slot(1, "%IX0.1")
        )
        assert render_bool_group(group) == [
            "GlueBoolGroup ___IG0 { .index=0, .values={ __IX0_0, __IX0_1, nullptr, nullptr, "
            "nullptr, nullptr, nullptr, nullptr, } };",
            "GlueBoolGroup* __IG0(&___IG0);",
        ]


class TestChecksumLiteral:
    def test_sixteen_bytes_as_hex_pairs(self):
        digest = hashlib.md5(b"").digest()
        lines = render_checksum(digest)
        assert lines[0] == "/// MD5 checksum of the located variables."
        literal = lines[2]
        assert literal.startswith("extern const char OPLCGLUE_MD5_DIGEST[] = {'D', '4', '1', 'D', ")
        assert literal.endswith("'7', 'E', };")
        assert literal.count("'") == 64
