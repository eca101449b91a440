import pytest

from aoc2024.coord import Coord
from aoc2024.vec2d import Vec2d


def test_reads_are_row_major():
    data = list(range(6))
    grid = Vec2d(data, 3, 2)
    read = [grid[Coord(r, c)] for r in range(2) for c in range(3)]
    assert read == data


def test_write_reaches_underlying_list():
    data = [0] * 6
    grid = Vec2d(data, 3, 2)
    grid[Coord(1, 2)] = 7
    assert data[-1] == 7
    assert grid[Coord(1, 2)] == 7


def test_filled():
    grid = Vec2d.filled("x", 4, 3)
    assert len(grid.data) == grid.width * grid.height
    assert set(grid.data) == {"x"}


def test_out_of_range_raises():
    grid = Vec2d([1, 2, 3, 4], 2, 2)
    with pytest.raises(IndexError):
        grid[Coord(2, 0)]