import pytest

from aoc2024.days import day6

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""


def test_part1():
    assert day6.part1(EXAMPLE) == 41


def test_part2():
    assert day6.part2(EXAMPLE) == 6


def test_no_guard_raises():
    with pytest.raises(ValueError):
        day6.part1(EXAMPLE.replace("^", "."))