"""Stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping


def _parse(text: str) -> Counter[int]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("no stones in input")
    return Counter(int(value) for value in lines[0].split())


def _blink(stones: Mapping[int, int]) -> Counter[int]:
    result: Counter[int] = Counter()
    for value, count in stones.items():
        if value == 0:
            result[1] += count
            continue
        digits = str(value)
        if len(digits) % 2 == 0:
            half = len(digits) // 2
            result[int(digits[:half])] += count
            result[int(digits[half:])] += count
        else:
            result[value * 2024] += count
    return result


def evolve(stones: Mapping[int, int], blinks: int) -> Counter[int]:
    """Stone counts by engraved value after ``blinks`` blinks."""
    current: Counter[int] = Counter(stones)
    for _ in range(blinks):
        current = _blink(current)
    return current


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    return sum(evolve(_parse(text), 25).values())


def part2(text: str) -> int:
    """Number of stones after 75 blinks."""
    return sum(evolve(_parse(text), 75).values())