"""Tests for located variable address decoding."""

from __future__ import annotations

import pytest

from plcglue.core.location import (
    DIRECTION_BY_FLAG,
    SIZE_BY_FLAG,
    Direction,
    InvalidLocationError,
    Location,
    SizeClass,
    ValueType,
    c_identifier,
    decode_location,
)


class TestFlagTables:
    def test_direction_flags(self):
        assert DIRECTION_BY_FLAG == {"I": Direction.IN, "Q": Direction.OUT, "M": Direction.MEM}

    def test_size_flags(self):
        assert SIZE_BY_FLAG == {
            "X": SizeClass.BIT,
            "B": SizeClass.BYTE,
            "W": SizeClass.WORD,
            "D": SizeClass.DOUBLEWORD,
            "L": SizeClass.LONGWORD,
        }

    def test_value_type_lookup_is_case_insensitive(self):
        assert ValueType.lookup("BOOL") is ValueType.BOOL
        assert ValueType.lookup("lreal") is ValueType.LREAL

    def test_unknown_value_type(self):
        assert ValueType.lookup("TIME") is None

    def test_unassigned_is_last(self):
        assert list(ValueType)[-1] is ValueType.UNASSIGNED


class TestDecodeMatiecSymbols:
    def test_bit_with_minor(self):
        assert decode_location("__IX0_1") == Location(Direction.IN, SizeClass.BIT, 0, 1)

    def test_byte_output(self):
        loc = decode_location("__QB3")
        assert (loc.direction, loc.size, loc.major, loc.minor) == (
            Direction.OUT,
            SizeClass.BYTE,
            3,
            0,
        )

    def test_multi_digit_indices(self):
        loc = decode_location("__MX120_7")
        assert loc.major == 120
        assert loc.minor == 7

    def test_special_function_long_word(self):
        assert decode_location("__ML1025") == Location(Direction.MEM, SizeClass.LONGWORD, 1025)

    def test_malformed_numeral_reads_as_zero(self):
        assert decode_location("__IWabc").major == 0

    def test_numeral_uses_leading_digits(self):
        loc = decode_location("__IX12x_3y")
        assert (loc.major, loc.minor) == (12, 3)

    def test_missing_major_reads_as_zero(self):
        assert decode_location("__QW").major == 0


class TestDecodeIecAddresses:
    def test_bit_address(self):
        assert decode_location("%IX0.1") == Location(Direction.IN, SizeClass.BIT, 0, 1)

    def test_word_address(self):
        assert decode_location("%MD42") == Location(Direction.MEM, SizeClass.DOUBLEWORD, 42)

    def test_format_round_trip(self):
        for text in ("%IX0.1", "%QB3", "%MW7", "%ML1025"):
            assert decode_location(text).format() == text

    def test_underscore_separates_minor(self):
        assert decode_location("%IX0_1") == Location(Direction.IN, SizeClass.BIT, 0, 1)
        assert decode_location("%QX4_7") == decode_location("%QX4.7")

    def test_first_separator_wins(self):
        loc = decode_location("%IX3_2.5")
        assert (loc.major, loc.minor) == (3, 2)


class TestMinorOnlyForBits:
    @pytest.mark.parametrize("name", ["%QW1.300", "__QW1_300", "%MD2.4", "__IB0_7"])
    def test_non_bit_minor_is_zero(self, name):
        loc = decode_location(name)
        assert loc.minor == 0
        assert loc.size is not SizeClass.BIT

    def test_non_bit_major_still_decodes(self):
        assert decode_location("%QW1.300") == Location(Direction.OUT, SizeClass.WORD, 1)


class TestDecodeErrors:
    @pytest.mark.parametrize("name", ["IX0_0", "_IX0", "#IX0.0", ""])
    def test_unknown_prefix(self, name):
        with pytest.raises(InvalidLocationError, match="prefix"):
            decode_location(name)

    def test_unknown_direction(self):
        with pytest.raises(InvalidLocationError, match="direction"):
            decode_location("__ZX0_0")

    def test_unknown_size(self):
        with pytest.raises(InvalidLocationError, match="size"):
            decode_location("%IZ0")

    def test_too_short(self):
        with pytest.raises(InvalidLocationError, match="missing"):
            decode_location("__I")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode_location("bogus")


class TestCIdentifier:
    def test_matiec_symbol_unchanged(self):
        assert c_identifier("__IX0_1") == "__IX0_1"

    def test_iec_address_mangled(self):
        assert c_identifier("%IX0.1") == "__IX0_1"
        assert c_identifier("%QB3") == "__QB3"
