import pytest

from aoc2024.days.day9 import File, Free, move_file_to_free, part1, part2

EXAMPLE = "2333133121414131402"


def test_part1_example():
    assert part1(EXAMPLE) == 1928


def test_part2_example():
    assert part2(EXAMPLE) == 2858


def test_part1_ignores_trailing_newline():
    assert part1(EXAMPLE + "\n") == 1928


def test_part1_small_map():
    assert part1("12345") == 60


def test_invalid_digit_raises():
    with pytest.raises(ValueError):
        part1("12a4")


@pytest.mark.parametrize(
    ("disk", "dst", "src", "front", "back", "expected"),
    [
        (
            [File(0, 1), Free(0, 1), File(1, 1), File(2, 1)],
            1,
            3,
            1,
            1,
            [File(0, 1), File(2, 1), File(1, 1), Free(0, 1)],
        ),
        (
            [File(0, 1), Free(0, 2), File(1, 1), File(2, 1)],
            1,
            3,
            2,
            1,
            [File(0, 1), File(2, 1), Free(0, 1), File(1, 1), Free(0, 1)],
        ),
        (
            [File(0, 1), Free(0, 1), File(1, 1), File(2, 1), File(3, 1)],
            1,
            3,
            1,
            1,
            [File(0, 1), File(2, 1), File(1, 1), Free(0, 1), File(3, 1)],
        ),
        (
            [File(0, 1), Free(0, 2), File(1, 1), File(2, 1), File(3, 1)],
            1,
            3,
            2,
            1,
            [
                File(0, 1),
                File(2, 1),
                Free(0, 1),
                File(1, 1),
                Free(0, 1),
                File(3, 1),
            ],
        ),
    ],
)
def test_move_file_to_free(disk, dst, src, front, back, expected):
    move_file_to_free(disk, dst, src, front, back)
    assert disk == expected


def test_move_absorbs_following_free_space():
    disk = [File(0, 1), Free(0, 2), File(1, 1), Free(1, 2), File(2, 1), Free(2, 2)]
    move_file_to_free(disk, 1, 4, 2, 1)
    assert disk == [
        File(0, 1),
        File(2, 1),
        Free(0, 1),
        File(1, 1),
        Free(1, 2),
        Free(0, 3),
    ]


def test_move_into_non_free_raises():
    disk = [File(0, 1), File(1, 1), File(2, 1)]
    with pytest.raises(ValueError):
        move_file_to_free(disk, 1, 2, 2, 1)