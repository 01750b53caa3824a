"""
Schematic scanner: grid → EnginePart and PartNumber tokens.

Walks the schematic row by row, column by column, with a two-state machine:
- Idle: no digit run in progress
- InRun: accumulating the digits of one part number

Transitions:
- Idle  --digit-->                InRun   (open run at current column)
- InRun --digit-->                InRun   (append digit)
- InRun --non-digit / row end-->  Idle    (emit PartNumber)
- Idle  --symbol-->               Idle    (emit EnginePart)

A run is always closed before the character that ended it is classified,
so a symbol directly after a number terminates the number first.
Runs never cross row boundaries.

The scan is pure: no I/O, no logging, no shared state.
"""

from dataclasses import dataclass, field
from typing import Optional, Union

from .types import (
    MAX_PART_NUMBER,
    MAX_VALUE_DIGITS,
    EnginePart,
    Grid,
    NumericOverflow,
    PartNumber,
    ScanResult,
    is_digit,
    is_symbol,
)


@dataclass
class _ParseState:
    """Open digit run. At most one exists at a time."""
    column_start: int
    digits: list[str] = field(default_factory=list)


def split_rows(schematic: str) -> Grid:
    """
    Split raw schematic text into rows on "\\n".

    Every other character, "\\r" included, stays in its row.
    """
    return schematic.split("\n")


def _check_max_value(max_value: int) -> None:
    """Reject limits that can't be compared digit-wise with a run."""
    if max_value < 0 or max_value >= 10 ** MAX_VALUE_DIGITS:
        raise ValueError(
            f"max_value must be between 0 and 10**{MAX_VALUE_DIGITS} - 1"
        )


def _close_run(
    state: _ParseState, column_end: int, row: int, max_value: int
) -> PartNumber:
    """Convert an open run into a PartNumber ending before column_end."""
    digits = "".join(state.digits)
    significant = digits.lstrip("0") or "0"

    # Length check first: int() refuses very long digit strings
    if len(significant) > len(str(max_value)) or int(significant) > max_value:
        raise NumericOverflow(digits, row, state.column_start, max_value)

    return PartNumber(
        row=row,
        column_start=state.column_start,
        column_end=column_end,
        value=int(significant),
    )


def scan_row(
    line: str, row: int, max_value: int = MAX_PART_NUMBER
) -> tuple[list[EnginePart], list[PartNumber]]:
    """
    Scan a single row.

    Args:
        line: Row characters
        row: Row index recorded on every emitted token
        max_value: Largest accepted part number

    Returns:
        (parts, part_numbers) for this row, each in column order

    Raises:
        NumericOverflow: If a digit run exceeds max_value
        ValueError: If max_value is negative or has more than
            MAX_VALUE_DIGITS digits
    """
    _check_max_value(max_value)

    parts: list[EnginePart] = []
    part_numbers: list[PartNumber] = []
    state: Optional[_ParseState] = None

    for column, character in enumerate(line):
        if is_digit(character):
            if state is None:
                state = _ParseState(column_start=column)
            state.digits.append(character)
            continue

        if state is not None:
            part_numbers.append(_close_run(state, column, row, max_value))
            state = None

        if is_symbol(character):
            parts.append(EnginePart(row=row, column=column, value=character))

    # Row ended mid-run
    if state is not None:
        part_numbers.append(_close_run(state, len(line), row, max_value))

    return parts, part_numbers


def scan_schematic(
    schematic: Union[str, Grid], max_value: int = MAX_PART_NUMBER
) -> ScanResult:
    """
    Extract every engine part and part number from a schematic.

    Args:
        schematic: Raw text (rows separated by newlines) or a list of rows.
            Rows may differ in length.
        max_value: Largest accepted part number (default: uint64 max)

    Returns:
        ScanResult with both token lists in row-major scan order

    Raises:
        NumericOverflow: On the first digit run exceeding max_value; the
            scan stops there
        ValueError: If max_value is negative or has more than
            MAX_VALUE_DIGITS digits
    """
    _check_max_value(max_value)
    grid = split_rows(schematic) if isinstance(schematic, str) else schematic

    parts: list[EnginePart] = []
    part_numbers: list[PartNumber] = []

    for row, line in enumerate(grid):
        row_parts, row_numbers = scan_row(line, row, max_value)
        parts.extend(row_parts)
        part_numbers.extend(row_numbers)

    return ScanResult(parts=parts, part_numbers=part_numbers)
