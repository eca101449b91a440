from collections import Counter

import pytest

from aoc2024.days.day11 import evolve, part1, part2


def test_part1_example():
    assert part1("125 17") == 55312


def test_part2_exceeds_part1():
    assert part2("125 17") > part1("125 17")


def test_single_blink_rules():
    assert evolve({125: 1, 17: 1}, 1) == Counter({253000: 1, 1: 1, 7: 1})


def test_zero_becomes_one():
    assert evolve({0: 3}, 1) == Counter({1: 3})


def test_split_drops_leading_zeros():
    assert evolve({1000: 1}, 1) == Counter({10: 1, 0: 1})


def test_six_blinks_count():
    assert sum(evolve({125: 1, 17: 1}, 6).values()) == 22


def test_evolve_composes():
    stones = {125: 1, 17: 1}
    assert evolve(evolve(stones, 3), 2) == evolve(stones, 5)


def test_evolve_leaves_input_untouched():
    stones = {0: 1}
    evolve(stones, 4)
    assert stones == {0: 1}


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        part1("")