"""Antinodes of resonant antennas."""

from __future__ import annotations

from collections.abc import Iterator
from itertools import combinations, islice


def _ray(
    start: tuple[int, int],
    d_row: int,
    d_column: int,
    row_limit: int | None,
    column_limit: int | None,
) -> Iterator[tuple[int, int]]:
    row, column = start
    while True:
        row += d_row
        column += d_column
        if row < 0 or column < 0:
            return
        if row_limit is not None and row > row_limit:
            return
        if column_limit is not None and column > column_limit:
            return
        yield row, column


def _antinodes(
    towers: list[tuple[int, int]],
    harmonics: int | None,
    row_limit: int,
    column_limit: int,
) -> Iterator[tuple[int, int]]:
    for tower, second in combinations(towers, 2):
        row_diff = abs(tower[0] - second[0])
        column_diff = abs(tower[1] - second[1])
        if tower[1] < second[1]:
            rays = (
                _ray(tower, -row_diff, -column_diff, None, None),
                _ray(second, row_diff, column_diff, row_limit, column_limit),
            )
        else:
            rays = (
                _ray(tower, -row_diff, column_diff, None, column_limit),
                _ray(second, row_diff, -column_diff, row_limit, None),
            )
        for ray in rays:
            yield from islice(ray, harmonics)


def _count_antinodes(text: str, harmonics: int | None) -> int:
    first, sep, rest = text.partition("\n")
    column_limit = len(first) - 1
    row_limit = (len(rest) + 1) // len(first) if sep else 0

    towers: dict[str, list[tuple[int, int]]] = {}
    for row, line in enumerate(text.split("\n")):
        for column, tile in enumerate(line):
            if tile != ".":
                towers.setdefault(tile, []).append((row, column))

    antinodes: set[tuple[int, int]] = set()
    for similar in towers.values():
        antinodes.update(_antinodes(similar, harmonics, row_limit, column_limit))
        if (harmonics is None or harmonics > 1) and len(similar) > 1:
            antinodes.update(similar)
    return len(antinodes)


def part1(text: str) -> int:
    """Distinct antinode positions at one harmonic."""
    return _count_antinodes(text, 1)


def part2(text: str) -> int:
    """Distinct antinode positions at every harmonic, antennas included."""
    return _count_antinodes(text, None)