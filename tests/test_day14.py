import pytest

from aoc2024.days.day14 import Robot, part1, part2

TEST_BOUNDS = (11, 7)

ROBOTS = (
    ((0, 4), (3, -3)),
    ((6, 3), (-1, -3)),
    ((10, 3), (-1, 2)),
    ((2, 0), (2, -1)),
    ((0, 0), (1, 3)),
    ((3, 0), (-2, -2)),
    ((7, 6), (-1, -3)),
    ((3, 0), (-1, -2)),
    ((9, 3), (2, 3)),
    ((7, 3), (-1, 2)),
    ((2, 4), (2, -3)),
    ((9, 5), (-3, -3)),
)

EXAMPLE = "\n".join(
    f"p={px},{py} v={vx},{vy}" for (px, py), (vx, vy) in ROBOTS
)


def test_step():
    robot = Robot((2, 4), (2, -3), TEST_BOUNDS)
    expected = [(4, 1), (6, 5), (8, 2), (10, 6), (1, 3)]
    for position in expected:
        robot.step(1)
        assert robot.position == position


def test_step_many_at_once_matches_single_steps():
    single = Robot((2, 4), (2, -3), TEST_BOUNDS)
    for _ in range(5):
        single.step(1)
    bulk = Robot((2, 4), (2, -3), TEST_BOUNDS)
    bulk.step(5)
    assert bulk.position == single.position == (1, 3)


def test_part1_example():
    assert part1(EXAMPLE, TEST_BOUNDS) == 12


def test_part1_robot_on_middle_line_gives_zero():
    assert part1("p=5,3 v=0,0", TEST_BOUNDS) == 0


def test_part2_result_within_cycle():
    result = part2(EXAMPLE, TEST_BOUNDS)
    assert 1 <= result <= 77


def test_part2_ties_pick_last_second():
    assert part2("p=0,0 v=0,0", TEST_BOUNDS) == 77


def test_malformed_robot_raises():
    with pytest.raises(ValueError):
        part1("p=0,0", TEST_BOUNDS)