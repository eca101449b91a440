"""A guard walking a map, turning right at every obstacle."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, replace

from aoc2024.direction import Direction


@dataclass
class Walker:
    """Iterates the guard's steps as (direction, row, column) until it leaves the map."""

    lines: list[str]
    row: int
    column: int
    direction: Direction = Direction.NORTH
    extra_obstacles: frozenset[tuple[int, int]] = frozenset()

    @classmethod
    def from_data(cls, text: str) -> Walker:
        lines = text.split("\n")
        for row, line in enumerate(lines):
            column = line.find("^")
            if column >= 0:
                return cls(lines, row, column)
        raise ValueError("map holds no guard '^'")

    def __iter__(self) -> Walker:
        return self

    def __next__(self) -> tuple[Direction, int, int]:
        while True:
            ahead = self._ahead()
            if ahead is None:
                raise StopIteration
            if self._is_obstacle(*ahead):
                self.direction = self.direction.turn_right()
                continue
            self.row, self.column = ahead
            return self.direction, self.row, self.column

    def _ahead(self) -> tuple[int, int] | None:
        row, column = self.row, self.column
        if self.direction is Direction.NORTH:
            return (row - 1, column) if row > 0 else None
        if self.direction is Direction.SOUTH:
            return (row + 1, column) if row + 1 < len(self.lines) else None
        if self.direction is Direction.EAST:
            return (row, column + 1) if column + 1 < len(self.lines[row]) else None
        return (row, column - 1) if column > 0 else None

    def _is_obstacle(self, row: int, column: int) -> bool:
        return self.lines[row][column] == "#" or (row, column) in self.extra_obstacles

    def _with_obstacle(self, obstacle: tuple[int, int]) -> Walker:
        return replace(self, extra_obstacles=frozenset({obstacle}))

    def _is_loop(self) -> bool:
        seen = {(self.direction, self.row, self.column)}
        for step in self:
            if step in seen:
                return True
            seen.add(step)
        return False

    def count_unique_steps(self) -> int:
        """Number of distinct tiles stepped onto; consumes the walker."""
        return len({(row, column) for _, row, column in self})

    def find_possible_loops(self) -> int:
        """Count single extra obstacles on the route that trap the guard in a loop."""
        obstacles = {(self.row, self.column)}
        origin = replace(self)
        for _, row, column in self:
            obstacle = (row, column)
            if origin._with_obstacle(obstacle)._is_loop():
                obstacles.add(obstacle)
        return len(obstacles) - 1

    def find_possible_loops2(self) -> int:
        """Same count as find_possible_loops, checking candidates in a thread pool."""
        obstacles = {(self.row, self.column)}
        origin = replace(self)
        candidates = list({(row, column) for _, row, column in self})
        with ThreadPoolExecutor() as pool:
            looping = pool.map(
                lambda obstacle: origin._with_obstacle(obstacle)._is_loop(), candidates
            )
            obstacles.update(o for o, loops in zip(candidates, looping) if loops)
        return len(obstacles) - 1