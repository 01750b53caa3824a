"""
Adjacency between part numbers and engine parts, and the aggregates built on it.

Adjacency is 8-directional and span-aware:
- |number.row - part.row| <= 1
- some column x in [column_start, column_end) with |x - part.column| <= 1

Aggregates:
- sum_gear_ratios: for each gear symbol with EXACTLY two adjacent numbers,
  add their product (0, 1 or 3+ neighbours contribute nothing)
- sum_part_numbers: sum of numbers touching at least one symbol

Part numbers are indexed by row so each part only inspects rows r-1..r+1.
Each number counts at most once per part, however many of its cells touch it.
"""

from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable, Tuple

from .types import GEAR_SYMBOL, EnginePart, PartNumber, is_symbol


@dataclass(frozen=True)
class Gear:
    """
    Gear symbol with exactly two adjacent part numbers.

    - part: The gear symbol
    - part_numbers: The two neighbours, in scan order
    - ratio: Product of the two values
    """
    part: EnginePart
    part_numbers: Tuple[PartNumber, PartNumber]
    ratio: int


RowIndex = dict[int, list[PartNumber]]


# =============================================================================
# Adjacency Predicate
# =============================================================================

def is_adjacent(part_number: PartNumber, part: EnginePart) -> bool:
    """
    True if the part touches any cell of the number, diagonals included.

    Args:
        part_number: Horizontal span of digits
        part: Single-cell symbol

    Returns:
        True if row distance <= 1 and some column of the span is within 1
    """
    if abs(part_number.row - part.row) > 1:
        return False

    # Closed form of: any(|x - column| <= 1 for x in span)
    return part_number.column_start - 1 <= part.column <= part_number.column_end


def index_by_row(part_numbers: Iterable[PartNumber]) -> RowIndex:
    """Group part numbers by row, preserving scan order within each row."""
    index: RowIndex = defaultdict(list)
    for part_number in part_numbers:
        index[part_number.row].append(part_number)
    return dict(index)


def _neighbours(part: EnginePart, index: RowIndex) -> list[PartNumber]:
    """Adjacent numbers from the three rows around the part."""
    found = []
    for row in (part.row - 1, part.row, part.row + 1):
        for part_number in index.get(row, []):
            if is_adjacent(part_number, part):
                found.append(part_number)
    return found


def adjacent_part_numbers(
    part: EnginePart, part_numbers: Iterable[PartNumber]
) -> list[PartNumber]:
    """
    Every part number adjacent to a part.

    Args:
        part: Engine part to inspect
        part_numbers: Full part number collection

    Returns:
        Adjacent numbers ordered by row, then column
    """
    return _neighbours(part, index_by_row(part_numbers))


# =============================================================================
# Aggregates
# =============================================================================

def find_gears(
    parts: Iterable[EnginePart],
    part_numbers: Iterable[PartNumber],
    gear_symbol: str = GEAR_SYMBOL,
) -> list[Gear]:
    """
    Find every gear: a gear symbol adjacent to exactly two part numbers.

    Args:
        parts: Engine parts from the scanner
        part_numbers: Part numbers from the scanner
        gear_symbol: Symbol that marks a potential gear (default "*")

    Returns:
        Gears in the order their symbols appear in parts

    Raises:
        ValueError: If gear_symbol is not a single symbol character
    """
    if len(gear_symbol) != 1 or not is_symbol(gear_symbol):
        raise ValueError(
            f"Gear symbol must be one character other than a digit or '.', "
            f"got {gear_symbol!r}"
        )

    index = index_by_row(part_numbers)

    gears = []
    for part in parts:
        if part.value != gear_symbol:
            continue

        neighbours = _neighbours(part, index)
        if len(neighbours) != 2:
            continue

        first, second = neighbours
        gears.append(
            Gear(part=part, part_numbers=(first, second), ratio=first.value * second.value)
        )

    return gears


def sum_gear_ratios(
    parts: Iterable[EnginePart],
    part_numbers: Iterable[PartNumber],
    gear_symbol: str = GEAR_SYMBOL,
) -> int:
    """
    Sum of gear ratios over all gears.

    Symbols other than gear_symbol are ignored. Empty input yields 0.
    """
    return sum(gear.ratio for gear in find_gears(parts, part_numbers, gear_symbol))


def sum_part_numbers(
    parts: Iterable[EnginePart], part_numbers: Iterable[PartNumber]
) -> int:
    """
    Sum of part numbers adjacent to at least one engine part of any symbol.

    A number touching several parts is counted once.
    """
    index = index_by_row(part_numbers)

    touched: set[PartNumber] = set()
    for part in parts:
        touched.update(_neighbours(part, index))

    return sum(part_number.value for part_number in touched)
