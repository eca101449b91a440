"""Claw machines: cheapest button presses to reach a prize."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice

PART2_PADDING = 10_000_000_000_000


def _trunc_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


@dataclass(frozen=True)
class Machine:
    """Two buttons moving the claw and the prize location."""

    button_a: tuple[int, int]
    button_b: tuple[int, int]
    prize: tuple[int, int]
    max_presses: int

    def find_cheapest_solution(self) -> int | None:
        """Token cost (3 per A, 1 per B) of the solution, or None if none fits."""
        (ax, ay), (bx, by), (px, py) = self.button_a, self.button_b, self.prize
        b = _trunc_div(px * ay - py * ax, bx * ay - ax * by)
        a = _trunc_div(py - b * by, ay)
        if (
            px == a * ax + b * bx
            and py == a * ay + b * by
            and 0 <= a <= self.max_presses
            and 0 <= b <= self.max_presses
        ):
            return a * 3 + b
        return None


def _parse_pair(line: str, header: str, operator: str) -> tuple[int, int]:
    label, sep, rest = line.partition(":")
    if not sep or label != header:
        raise ValueError(f"expected {header!r} line, got {line!r}")
    x_part, sep, y_part = rest.partition(",")
    if not sep:
        raise ValueError(f"malformed line {line!r}")
    x = x_part.strip().removeprefix(f"X{operator}")
    y = y_part.strip().removeprefix(f"Y{operator}")
    return int(x), int(y)


def _parse(text: str, padding: int, max_presses: int) -> list[Machine]:
    lines = iter(text.splitlines())
    machines = []
    while True:
        block = list(islice(lines, 3))
        if len(block) < 3:
            raise ValueError("incomplete machine description")
        prize = _parse_pair(block[2], "Prize", "=")
        machines.append(
            Machine(
                _parse_pair(block[0], "Button A", "+"),
                _parse_pair(block[1], "Button B", "+"),
                (prize[0] + padding, prize[1] + padding),
                max_presses,
            )
        )
        if next(lines, None) is None:
            return machines


def _total_cost(machines: list[Machine]) -> int:
    return sum(
        cost
        for cost in (machine.find_cheapest_solution() for machine in machines)
        if cost is not None
    )


def part1(text: str) -> int:
    """Fewest tokens for all winnable prizes, at most 100 presses per button."""
    return _total_cost(_parse(text, 0, 100))


def part2(text: str) -> int:
    """Fewest tokens with prizes moved far away."""
    return _total_cost(_parse(text, PART2_PADDING, PART2_PADDING))