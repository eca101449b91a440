"""Safety of reactor level reports."""

from __future__ import annotations

from collections.abc import Iterable

from aoc2024.skip_at import skip_at


def _is_safe(levels: Iterable[int]) -> bool:
    previous = 0
    increasing = decreasing = stagnant = False
    max_change = 0
    for level in levels:
        if previous == 0:
            previous = level
            continue
        increasing = increasing or previous < level
        decreasing = decreasing or previous > level
        stagnant = stagnant or previous == level
        max_change = max(max_change, abs(previous - level))
        previous = level
    return increasing != decreasing and not stagnant and 1 <= max_change <= 3


def _reports(text: str) -> list[list[int]]:
    return [[int(level) for level in line.split()] for line in text.splitlines()]


def part1(text: str) -> int:
    """Number of safe reports."""
    return sum(_is_safe(levels) for levels in _reports(text))


def part2(text: str) -> int:
    """Number of reports that are safe with at most one level removed."""
    return sum(
        _is_safe(levels)
        or any(_is_safe(skip_at(levels, index)) for index in range(len(levels)))
        for levels in _reports(text)
    )