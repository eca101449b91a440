"""Hiking trails on a topographic map."""

from __future__ import annotations

from collections import deque

Trail = tuple[tuple[int, int], ...]


def _trailheads(grid: list[str]) -> list[tuple[int, int]]:
    return [
        (row, column)
        for row, line in enumerate(grid)
        for column, height in enumerate(line)
        if height == "0"
    ]


def _neighbours(grid: list[str], row: int, column: int) -> list[tuple[int, int]]:
    size = len(grid)  # the map is assumed square
    candidates = [
        (row + 1, column) if row + 1 < size else None,
        (row - 1, column) if row > 0 else None,
        (row, column + 1) if column + 1 < size else None,
        (row, column - 1) if column > 0 else None,
    ]
    return [candidate for candidate in candidates if candidate is not None]


def _find_trails(grid: list[str]) -> set[Trail]:
    queue: deque[Trail] = deque((head,) for head in _trailheads(grid))
    trails: set[Trail] = set()
    while queue:
        trail = queue.popleft()
        height = len(trail) - 1
        for row, column in _neighbours(grid, *trail[-1]):
            next_height = ord(grid[row][column]) - ord("0")
            if next_height != height + 1:
                continue
            extended = (*trail, (row, column))
            if next_height == 9:
                trails.add(extended)
            else:
                queue.append(extended)
    return trails


def part1(text: str) -> int:
    """Sum of trailhead scores: distinct (trailhead, summit) pairs."""
    trails = _find_trails(text.split("\n"))
    return len({(trail[0], trail[9]) for trail in trails})


def part2(text: str) -> int:
    """Sum of trailhead ratings: number of distinct trails."""
    return len(_find_trails(text.split("\n")))