"""
Core type definitions for the engine schematic scanner.

Provides:
- Grid: the schematic as a list of row strings
- EnginePart, PartNumber: immutable tokens produced by the scanner
- ScanResult: both token collections from a single scan
- SchematicError, NumericOverflow: errors surfaced to callers
"""

from dataclasses import dataclass
from typing import Iterator

import numpy as np

# Grid representation
Grid = list[str]  # Grid[row][column] = character

GEAR_SYMBOL = "*"
SEPARATOR = "."

# Part numbers share the range of an unsigned 64-bit integer
MAX_PART_NUMBER = int(np.iinfo(np.uint64).max)

# Largest max_value a scan accepts: int() and str() refuse longer digit strings
MAX_VALUE_DIGITS = 4300


def is_digit(character: str) -> bool:
    """ASCII digits only; other Unicode digits are symbols."""
    return "0" <= character <= "9"


def is_symbol(character: str) -> bool:
    """A symbol is any character that is neither a digit nor the separator."""
    return not is_digit(character) and character != SEPARATOR


@dataclass(frozen=True, order=True)
class EnginePart:
    """Single-cell symbol at (column, row)."""
    row: int
    column: int
    value: str


@dataclass(frozen=True, order=True)
class PartNumber:
    """
    Maximal run of digits within one row.

    Columns form the half-open span [column_start, column_end).
    """
    row: int
    column_start: int
    column_end: int
    value: int

    def __post_init__(self):
        if self.column_end <= self.column_start:
            raise ValueError(
                f"Part number span must be non-empty, got "
                f"[{self.column_start}, {self.column_end})"
            )

    @property
    def width(self) -> int:
        return self.column_end - self.column_start

    @property
    def columns(self) -> Iterator[int]:
        """Columns covered by the number, left to right."""
        return iter(range(self.column_start, self.column_end))


@dataclass
class ScanResult:
    """
    Tokens collected from one pass over the schematic.

    Both lists are in scan order (row-major, then column).
    """
    parts: list[EnginePart]
    part_numbers: list[PartNumber]


class SchematicError(ValueError):
    """Base class for errors raised while processing a schematic."""


class NumericOverflow(SchematicError):
    """A digit run does not fit the representable part number range."""

    def __init__(self, digits: str, row: int, column_start: int, max_value: int):
        self.digits = digits
        self.row = row
        self.column_start = column_start
        self.max_value = max_value
        super().__init__(
            f"Part number {digits} at row {row}, column {column_start} "
            f"exceeds maximum value {max_value}"
        )
