#!/usr/bin/env python3
"""
Schematic runner: read an engine schematic and print its gear ratio sum.

Modes:
- gear-ratios (default): sum of products of numbers around each gear
- part-numbers: sum of numbers touching any symbol

Exit codes: 0 = success, 1 = input or schematic error, 2 = usage error.

Usage:
    python -m schematic_runner.run_schematic schematic.txt
    python -m schematic_runner.run_schematic schematic.txt --mode part-numbers
    cat schematic.txt | python -m schematic_runner.run_schematic -
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from schematic_core.adjacency import find_gears, sum_part_numbers
from schematic_core.scanner import scan_schematic
from schematic_core.types import GEAR_SYMBOL, SchematicError, is_symbol

from .utils import (
    build_receipt,
    compute_scan_stats,
    load_schematic,
    save_receipt,
    setup_logger,
)

MODES = ["gear-ratios", "part-numbers"]


def _gear_symbol(value: str) -> str:
    """argparse type for --gear-symbol."""
    if len(value) != 1 or not is_symbol(value):
        raise argparse.ArgumentTypeError(
            f"gear symbol must be one character other than a digit or '.', got {value!r}"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Compute gear ratio or part number sums for an engine schematic"
    )
    parser.add_argument(
        "input_file", type=str, help="Schematic file, or '-' to read stdin"
    )
    parser.add_argument(
        "--mode",
        type=str,
        default="gear-ratios",
        choices=MODES,
        help="Aggregate to compute (default: gear-ratios)",
    )
    parser.add_argument(
        "--gear-symbol",
        type=_gear_symbol,
        default=GEAR_SYMBOL,
        help=f"Symbol marking a gear (default: {GEAR_SYMBOL})",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, help="Also write logs to this file"
    )
    parser.add_argument(
        "--receipt-dir",
        type=Path,
        default=None,
        help="Write a JSON receipt for this run into this directory",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug details"
    )
    return parser


def compute(schematic: str, mode: str, gear_symbol: str, logger: logging.Logger):
    """
    Run the scan and the requested aggregate.

    Returns:
        Tuple of (result, stats)

    Raises:
        SchematicError: If the schematic can't be scanned
    """
    scan = scan_schematic(schematic)
    stats = compute_scan_stats(scan, gear_symbol)

    logger.debug(
        f"Scanned {stats['num_parts']} parts and "
        f"{stats['num_part_numbers']} part numbers"
    )

    if mode == "part-numbers":
        return sum_part_numbers(scan.parts, scan.part_numbers), stats

    gears = find_gears(scan.parts, scan.part_numbers, gear_symbol)
    for gear in gears:
        first, second = gear.part_numbers
        logger.debug(
            f"Gear at row {gear.part.row}, column {gear.part.column}: "
            f"{first.value} * {second.value} = {gear.ratio}"
        )

    stats["num_gears"] = len(gears)
    logger.debug(
        f"{len(gears)} of {stats['num_gear_candidates']} '{gear_symbol}' symbols are gears"
    )

    return sum(gear.ratio for gear in gears), stats


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logger = setup_logger("schematic_runner", args.log_file, level=level)

    result = None
    stats = None
    error = None

    try:
        schematic = load_schematic(args.input_file)
        result, stats = compute(schematic, args.mode, args.gear_symbol, logger)
    except (OSError, UnicodeDecodeError) as e:
        error = f"Error reading input file {args.input_file}: {e}"
    except SchematicError as e:
        error = f"Error calculating {args.mode.replace('-', ' ')} sum: {e}"

    if args.receipt_dir is not None:
        receipt = build_receipt(
            input_path=args.input_file,
            mode=args.mode,
            result=result,
            stats=stats,
            status="FAIL" if error else "PASS",
            error=error,
        )
        receipt_file = save_receipt(receipt, args.receipt_dir)
        logger.debug(f"Receipt saved to: {receipt_file}")

    if error:
        logger.error(error)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
