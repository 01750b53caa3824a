"""
Unit tests for schematic_core/types.py.

Token invariants, character classes and error payloads.
"""

import pytest

from schematic_core.scanner import scan_row
from schematic_core.types import (
    MAX_PART_NUMBER,
    EnginePart,
    NumericOverflow,
    PartNumber,
    SchematicError,
    is_digit,
    is_symbol,
)


class TestCharacterClasses:

    @pytest.mark.parametrize("character", list("0123456789"))
    def test_ascii_digits(self, character):
        assert is_digit(character)
        assert not is_symbol(character)

    def test_separator(self):
        assert not is_digit(".")
        assert not is_symbol(".")

    @pytest.mark.parametrize("character", ["*", "#", "$", "+", "a", " ", "٣"])
    def test_symbols(self, character):
        assert is_symbol(character)


class TestPartNumber:

    def test_width_and_columns(self):
        number = PartNumber(row=1, column_start=3, column_end=6, value=467)

        assert number.width == 3
        assert list(number.columns) == [3, 4, 5]

    @pytest.mark.parametrize("start, end", [(2, 2), (5, 3)])
    def test_empty_span_rejected(self, start, end):
        with pytest.raises(ValueError):
            PartNumber(row=0, column_start=start, column_end=end, value=1)

    def test_frozen(self):
        number = PartNumber(row=0, column_start=0, column_end=1, value=1)
        with pytest.raises(AttributeError):
            number.value = 2

    def test_value_takes_part_in_equality(self):
        """Same span, different digits: different tokens."""
        twelve = PartNumber(row=0, column_start=0, column_end=2, value=12)
        ninety_nine = PartNumber(row=0, column_start=0, column_end=2, value=99)

        assert twelve != ninety_nine, "Part numbers with different values must differ"
        assert len({twelve, ninety_nine}) == 2
        assert twelve == PartNumber(row=0, column_start=0, column_end=2, value=12)

    def test_row_major_order(self):
        numbers = [
            PartNumber(row=1, column_start=0, column_end=1, value=1),
            PartNumber(row=0, column_start=4, column_end=5, value=2),
            PartNumber(row=0, column_start=0, column_end=2, value=3),
        ]
        assert [n.value for n in sorted(numbers)] == [3, 2, 1]


class TestEnginePart:

    def test_frozen_and_hashable(self):
        part = EnginePart(row=2, column=7, value="*")

        assert part in {part}
        with pytest.raises(AttributeError):
            part.column = 0

    def test_value_takes_part_in_equality(self):
        """Same cell, different symbol: different tokens."""
        hash_part = EnginePart(row=0, column=0, value="#")
        gear_part = EnginePart(row=0, column=0, value="*")

        assert hash_part != gear_part, "Parts with different symbols must differ"
        assert len({hash_part, gear_part}) == 2
        assert scan_row("#", row=0)[0] != [gear_part]
        assert scan_row("#", row=0)[0] == [hash_part]


class TestNumericOverflow:

    def test_payload_and_message(self):
        error = NumericOverflow("123", row=4, column_start=9, max_value=99)

        assert isinstance(error, SchematicError)
        assert isinstance(error, ValueError)
        assert (error.digits, error.row, error.column_start, error.max_value) == \
            ("123", 4, 9, 99)
        assert "123" in str(error)
        assert "row 4" in str(error)

    def test_max_part_number_is_uint64(self):
        assert MAX_PART_NUMBER == 2**64 - 1
        assert isinstance(MAX_PART_NUMBER, int)
