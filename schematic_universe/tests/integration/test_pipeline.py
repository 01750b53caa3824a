"""
Integration tests for the scan → aggregate pipeline.

Covers:
- End-to-end: raw text → scan_schematic → sum_gear_ratios
- Facade functions in schematic_core
- Idempotence (no hidden state between runs)
"""

import json
from pathlib import Path

import pytest

import schematic_core
from schematic_core import (
    NumericOverflow,
    gear_ratio_sum,
    part_number_sum,
    scan_schematic,
    sum_gear_ratios,
)

FIXTURES = Path(__file__).parent.parent / "fixtures"


def load_text(name: str) -> str:
    with open(FIXTURES / name, "r") as f:
        return f.read()


def load_fixture(name: str) -> dict:
    with open(FIXTURES / name, "r") as f:
        return json.load(f)


class TestPipeline:

    def test_canonical_text(self):
        assert gear_ratio_sum(load_text("canonical.txt")) == 467835

    def test_canonical_grid(self):
        fixture = load_fixture("canonical.json")
        assert gear_ratio_sum(fixture["grid"]) == fixture["expected"]["gear_ratio_sum"]

    def test_part_number_sum(self):
        assert part_number_sum(load_text("canonical.txt")) == 4361

    def test_two_passes_match_facade(self):
        text = load_text("canonical.txt")
        scan = scan_schematic(text)

        assert sum_gear_ratios(scan.parts, scan.part_numbers) == gear_ratio_sum(text)

    def test_idempotent(self):
        text = load_text("canonical.txt")

        first = gear_ratio_sum(text)
        second = gear_ratio_sum(text)

        assert first == second == 467835
        assert scan_schematic(text) == scan_schematic(text)

    def test_scan_does_not_mutate_grid(self):
        fixture = load_fixture("canonical.json")
        grid = list(fixture["grid"])

        gear_ratio_sum(grid)

        assert grid == fixture["grid"]

    def test_overflow_propagates(self):
        with pytest.raises(NumericOverflow):
            gear_ratio_sum(load_text("overflow.txt"))

    def test_empty_schematic(self):
        assert gear_ratio_sum("") == 0
        assert part_number_sum([]) == 0

    def test_public_api(self):
        for name in schematic_core.__all__:
            assert hasattr(schematic_core, name), f"Missing export {name}"
