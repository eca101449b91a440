import pytest

from aoc2024.days import day2

EXAMPLE = """7 6 4 2 1
1 2 7 8 9
9 7 6 2 1
1 3 2 4 5
8 6 4 4 1
1 3 6 7 9
"""


def test_part1():
    assert day2.part1(EXAMPLE) == 2


def test_part2():
    assert day2.part2(EXAMPLE) == 4


def test_dampener_never_lowers_count():
    assert day2.part2(EXAMPLE) >= day2.part1(EXAMPLE)


def test_non_number_raises():
    with pytest.raises(ValueError):
        day2.part1("1 2 x\n")