"""
Utility functions for the schematic runner.

Provides:
- Schematic loading from a file or standard input
- Logging setup
- Receipt generation
- Scan statistics
"""

import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from schematic_core.types import GEAR_SYMBOL, ScanResult

STDIN_PATH = "-"


def load_schematic(input_path: str) -> str:
    """
    Read the raw schematic text with LF line endings.

    CRLF and lone CR line endings become "\\n" so that no "\\r" reaches the
    scanner as a symbol.

    Args:
        input_path: Path to a schematic file, or "-" for standard input

    Returns:
        Schematic text, rows separated by "\\n"

    Raises:
        FileNotFoundError: If the file doesn't exist
        OSError: If the file can't be read
        UnicodeDecodeError: If the file isn't valid UTF-8
    """
    if input_path == STDIN_PATH:
        return sys.stdin.read().replace("\r\n", "\n").replace("\r", "\n")

    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(f"Schematic file not found: {path}")

    # Universal newlines translate CRLF and CR on read
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def setup_logger(
    name: str, log_file: Optional[Path] = None, level=logging.INFO
) -> logging.Logger:
    """
    Setup runner logger.

    Console output goes to stderr so stdout carries only the result.

    Args:
        name: Logger name
        log_file: Optional path to log file
        level: Console logging level

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers = []

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def compute_scan_stats(scan: ScanResult, gear_symbol: str = GEAR_SYMBOL) -> Dict[str, Any]:
    """
    Summarize a scan.

    Args:
        scan: Tokens from scan_schematic
        gear_symbol: Symbol counted as a gear candidate

    Returns:
        Counts of parts, part numbers, gear candidates and symbol frequencies
    """
    symbol_counts: Dict[str, int] = {}
    for part in scan.parts:
        symbol_counts[part.value] = symbol_counts.get(part.value, 0) + 1

    return {
        "num_parts": len(scan.parts),
        "num_part_numbers": len(scan.part_numbers),
        "num_gear_candidates": symbol_counts.get(gear_symbol, 0),
        "symbols": dict(sorted(symbol_counts.items())),
    }


def build_receipt(
    input_path: str,
    mode: str,
    result: Optional[int] = None,
    stats: Optional[Dict[str, Any]] = None,
    status: str = "PASS",
    error: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Build a receipt dictionary for one run.

    Args:
        input_path: Schematic path as given on the command line
        mode: "gear-ratios" or "part-numbers"
        result: Computed sum (omitted on failure)
        stats: Scan statistics
        status: "PASS" or "FAIL"
        error: Error message if status is FAIL

    Returns:
        Receipt dictionary
    """
    receipt = {
        "input": input_path,
        "mode": mode,
        "timestamp": datetime.now().isoformat(),
        "status": status,
    }

    if result is not None:
        receipt["result"] = result

    if stats is not None:
        receipt["stats"] = stats

    if error is not None:
        receipt["error"] = error

    return receipt


def save_receipt(receipt: Dict[str, Any], output_dir: Path) -> Path:
    """
    Save receipt to JSON file named after the input file.

    Args:
        receipt: Receipt dictionary
        output_dir: Directory to save receipt in

    Returns:
        Path of the written receipt
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    stem = "stdin" if receipt["input"] == STDIN_PATH else Path(receipt["input"]).stem
    receipt_file = output_dir / f"{stem}.json"

    with open(receipt_file, "w") as f:
        json.dump(receipt, f, indent=2)

    return receipt_file
