"""Guard patrol on a lab map."""

from __future__ import annotations

from aoc2024.walker import Walker


def part1(text: str) -> int:
    """Distinct tiles the guard steps onto before leaving."""
    return Walker.from_data(text).count_unique_steps()


def part2(text: str) -> int:
    """Positions where one new obstacle traps the guard in a loop."""
    return Walker.from_data(text).find_possible_loops2()