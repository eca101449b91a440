import pytest

from aoc2024.coord import Coord
from aoc2024.days import day18

EXAMPLE = """5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_part1_example():
    assert day18.part1(EXAMPLE, Coord(6, 6), 12) == 22


def test_part2_example():
    assert day18.part2(EXAMPLE, Coord(6, 6)) == Coord(6, 1)


def test_part1_open_grid():
    assert day18.part1("", Coord(2, 2), 0) == 4


def test_part1_blocked_exit_raises():
    with pytest.raises(ValueError):
        day18.part1("0,1\n1,0\n", Coord(1, 1), 2)


def test_part2_without_blockage_raises():
    with pytest.raises(ValueError):
        day18.part2("1,1\n", Coord(2, 2))