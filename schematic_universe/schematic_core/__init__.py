"""
schematic_core: Token extraction and gear ratios for engine schematics.

Provides:
- types: Grid, EnginePart, PartNumber, ScanResult and error types
- scanner: Row/column state machine producing tokens from a grid
- adjacency: Span-aware 8-neighbour adjacency, gear ratio and part number sums

Pipeline (two passes, never fused):
    raw text → scan_schematic → ScanResult → sum_gear_ratios → int
"""

from typing import Union

from .adjacency import find_gears, is_adjacent, sum_gear_ratios, sum_part_numbers
from .scanner import scan_schematic
from .types import (
    EnginePart,
    Grid,
    NumericOverflow,
    PartNumber,
    ScanResult,
    SchematicError,
)

__all__ = [
    "EnginePart",
    "Grid",
    "NumericOverflow",
    "PartNumber",
    "ScanResult",
    "SchematicError",
    "find_gears",
    "gear_ratio_sum",
    "is_adjacent",
    "part_number_sum",
    "scan_schematic",
    "sum_gear_ratios",
    "sum_part_numbers",
]


def gear_ratio_sum(schematic: Union[str, Grid]) -> int:
    """Scan a schematic and return the sum of its gear ratios."""
    scan = scan_schematic(schematic)
    return sum_gear_ratios(scan.parts, scan.part_numbers)


def part_number_sum(schematic: Union[str, Grid]) -> int:
    """Scan a schematic and return the sum of numbers touching any symbol."""
    scan = scan_schematic(schematic)
    return sum_part_numbers(scan.parts, scan.part_numbers)
