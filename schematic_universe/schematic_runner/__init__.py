"""
schematic_runner: Command-line entry point for schematic_core.

Provides:
- run_schematic: argparse CLI (`gear-ratios` console script)
- utils: Input loading, logging setup, receipts

Owns everything the core does not: reading input, logging, receipts,
printing the result and choosing the exit status.
"""

__all__ = [
    "run_schematic",
    "utils",
]
