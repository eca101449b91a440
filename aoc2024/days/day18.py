"""Falling bytes blocking the way out of a memory grid."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from aoc2024.coord import Coord
from aoc2024.maze import UNVISITED
from aoc2024.vec2d import Vec2d

TARGET = Coord(70, 70)
SIMULATED_BYTES = 1024


@dataclass(frozen=True)
class _Memory:
    obstacles: frozenset[Coord]
    bounds: Coord

    def count_steps(self) -> int | None:
        """Fewest steps from the top-left to the bottom-right corner, if reachable."""
        steps_to = Vec2d.filled(UNVISITED, self.bounds.column, self.bounds.row)
        for obstacle in self.obstacles:
            steps_to[obstacle] = 0

        exit_coord = self.bounds - (1, 1)
        queue: deque[tuple[Coord, int]] = deque([(Coord(0, 0), 0)])
        steps_on_end: list[int] = []

        while queue:
            coord, steps = queue.popleft()
            if coord == exit_coord:
                steps_on_end.append(steps)
            elif steps_to[coord] > steps:
                steps_to[coord] = steps
                queue.extend(
                    (neighbour, steps + 1)
                    for neighbour in coord.adjacent_4_way(self.bounds)
                    if neighbour is not None
                )

        return min(steps_on_end, default=None)


def _parse(text: str) -> list[Coord]:
    coords = []
    for line in text.splitlines():
        column, sep, row = line.partition(",")
        if not sep:
            raise ValueError(f"malformed byte position {line!r}")
        coords.append(Coord(int(row), int(column)))
    return coords


def _memory(obstacles: list[Coord], target: Coord) -> _Memory:
    return _Memory(frozenset(obstacles), Coord(target.row + 1, target.column + 1))


def part1(
    text: str, target: Coord = TARGET, run_simulation_for: int = SIMULATED_BYTES
) -> int:
    """Fewest steps to the exit after the first ``run_simulation_for`` bytes fall."""
    obstacles = _parse(text)[:run_simulation_for]
    steps = _memory(obstacles, target).count_steps()
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text: str, target: Coord = TARGET) -> Coord:
    """The first byte that cuts off the exit, as Coord(x, y)."""
    obstacles = _parse(text)
    left, right = 0, len(obstacles)
    while left != right:
        mid = left + (right - left) // 2
        if _memory(obstacles[: mid + 1], target).count_steps() is not None:
            left = mid + 1
        else:
            right = mid
    if left >= len(obstacles):
        raise ValueError("no byte blocks the exit")
    blockage = obstacles[left]
    return Coord(blockage.column, blockage.row)