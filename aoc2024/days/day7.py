"""Bridge calibration equations."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from functools import reduce
from itertools import product

Operator = Callable[[int, int], int]


def concatenate(lhs: int, rhs: int) -> int:
    """Join the decimal digits of ``lhs`` and ``rhs``."""
    if rhs < 1:
        raise ValueError("cannot concatenate a non-positive right operand")
    return lhs * 10 ** len(str(rhs)) + rhs


def _parse(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for line in text.splitlines():
        result, sep, operands = line.partition(":")
        if not sep:
            raise ValueError(f"malformed equation {line!r}")
        equations.append((int(result), [int(value) for value in operands.split()]))
    return equations


def is_valid_operation(
    result: int, operands: Sequence[int], operators: Sequence[Operator]
) -> bool:
    """Whether some left-to-right choice of operators turns operands into result."""
    if not operands:
        raise ValueError("an equation needs at least one operand")
    first, rest = operands[0], operands[1:]
    return any(
        reduce(lambda acc, pair: pair[0](acc, pair[1]), zip(choice, rest), first)
        == result
        for choice in product(operators, repeat=len(rest))
    )


def _calibration(text: str, operators: Sequence[Operator]) -> int:
    return sum(
        result
        for result, operands in _parse(text)
        if is_valid_operation(result, operands, operators)
    )


def part1(text: str) -> int:
    """Total of results reachable with + and *."""
    return _calibration(text, (operator.add, operator.mul))


def part2(text: str) -> int:
    """Total of results reachable with +, * and concatenation."""
    return _calibration(text, (operator.add, operator.mul, concatenate))