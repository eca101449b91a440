from aoc2024.days.day10 import part1, part2

EXAMPLE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732"""


def test_part1_example():
    assert part1(EXAMPLE) == 36


def test_part2_example():
    assert part2(EXAMPLE) == 81


def test_no_summits():
    assert part1("00\n00") == 0
    assert part2("00\n00") == 0


def test_rating_at_least_score():
    assert part2(EXAMPLE) >= part1(EXAMPLE)