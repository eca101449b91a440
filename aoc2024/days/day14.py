"""Robots wrapping around a bathroom floor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

Quadrants = tuple[int, int, int, int]

FLOOR = (101, 103)


@dataclass
class Robot:
    """A robot with a position and velocity on a wrapping floor of ``bounds``."""

    position: tuple[int, int]
    velocity: tuple[int, int]
    bounds: tuple[int, int]

    def step(self, steps: int) -> None:
        """Advance ``steps`` seconds, wrapping around the edges."""
        x = (self.position[0] + self.velocity[0] * steps) % self.bounds[0]
        y = (self.position[1] + self.velocity[1] * steps) % self.bounds[1]
        self.position = (x, y)


def _parse_pair(part: str, prefix: str) -> tuple[int, int]:
    first, sep, second = part.removeprefix(prefix).partition(",")
    if not sep:
        raise ValueError(f"malformed pair {part!r}")
    return int(first), int(second)


def _parse(text: str, bounds: tuple[int, int]) -> list[Robot]:
    robots = []
    for line in text.splitlines():
        position, sep, velocity = line.partition(" ")
        if not sep:
            raise ValueError(f"malformed robot {line!r}")
        robots.append(
            Robot(_parse_pair(position, "p="), _parse_pair(velocity, "v="), bounds)
        )
    return robots


def _quadrants(robots: Iterable[Robot], bounds: tuple[int, int]) -> Quadrants:
    counts = [0, 0, 0, 0]
    mid_x, mid_y = bounds[0] // 2, bounds[1] // 2
    for robot in robots:
        x, y = robot.position
        if x == mid_x or y == mid_y:
            continue
        counts[(x > mid_x) * 2 + (y > mid_y)] += 1
    return counts[0], counts[1], counts[2], counts[3]


def part1(text: str, bounds: tuple[int, int] = FLOOR) -> int:
    """Safety factor: product of quadrant counts after 100 seconds."""
    robots = _parse(text, bounds)
    for robot in robots:
        robot.step(100)
    a, b, c, d = _quadrants(robots, bounds)
    return a * b * c * d


def part2(text: str, bounds: tuple[int, int] = FLOOR) -> int:
    """Second (the last on ties) when the most robots crowd into one quadrant."""
    robots = _parse(text, bounds)
    best_second = 0
    best_score = -1
    for second in range(1, bounds[0] * bounds[1] + 1):
        for robot in robots:
            robot.step(1)
        score = max(_quadrants(robots, bounds))
        if score >= best_score:
            best_second, best_score = second, score
    return best_second