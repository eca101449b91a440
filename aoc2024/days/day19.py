"""Arranging striped towels into requested designs."""

from __future__ import annotations

from collections.abc import Callable

_STRIPES = "bwrgu"

Towels = dict[str, list[str]]


def _parse(text: str) -> tuple[Towels, list[str]]:
    lines = text.split("\n")
    if len(lines) < 2:
        raise ValueError("input needs a towel line and a separator line")
    towels: Towels = {stripe: [] for stripe in _STRIPES}
    for towel in lines[0].split(","):
        if towel.startswith(" "):
            towel = towel[1:]
        if not towel:
            raise ValueError("empty towel in towel list")
        if towel[0] not in towels:
            raise ValueError(f"invalid towel stripe {towel[0]!r}")
        towels[towel[0]].append(towel)
    return towels, [pattern for pattern in lines[2:] if pattern]


def _candidates(pattern: str, towels: Towels) -> list[str]:
    try:
        group = towels[pattern[0]]
    except KeyError:
        raise ValueError(f"invalid towel stripe {pattern[0]!r}") from None
    return [towel for towel in group if pattern.startswith(towel)]


def _possible_checker(towels: Towels) -> Callable[[str], bool]:
    cache: dict[str, bool] = {}

    def possible(pattern: str) -> bool:
        if not pattern:
            return True
        for towel in _candidates(pattern, towels):
            rest = pattern[len(towel) :]
            if rest not in cache:
                cache[rest] = possible(rest)
            if cache[rest]:
                return True
        return False

    return possible


def _arrangement_counter(towels: Towels) -> Callable[[str], int]:
    cache: dict[str, int] = {}

    def count(pattern: str) -> int:
        if not pattern:
            return 1
        total = 0
        for towel in _candidates(pattern, towels):
            rest = pattern[len(towel) :]
            if rest not in cache:
                cache[rest] = count(rest)
            total += cache[rest]
        return total

    return count


def part1(text: str) -> int:
    """Number of designs that can be made from the towels."""
    towels, patterns = _parse(text)
    possible = _possible_checker(towels)
    return sum(possible(pattern) for pattern in patterns)


def part2(text: str) -> int:
    """Total number of ways to make every design."""
    towels, patterns = _parse(text)
    count = _arrangement_counter(towels)
    return sum(count(pattern) for pattern in patterns)