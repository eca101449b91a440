import pytest

from aoc2024.coord import Coord
from aoc2024.maze import UNVISITED, Maze

EXAMPLE = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""


@pytest.fixture
def maze():
    return Maze.parse(EXAMPLE, 1000)


def test_parse_finds_start_and_end(maze):
    assert maze.lines[maze.start.row][maze.start.column] == "S"
    assert maze.lines[maze.end.row][maze.end.column] == "E"
    assert maze.width == len(EXAMPLE.split("\n")[0])
    assert maze.height == len(EXAMPLE.split("\n"))


def test_best_score(maze):
    tiles, _ = maze.calculate_tile_scores()
    assert tiles[maze.end] == 7036
    assert tiles[maze.start] == 0


def test_best_path_tiles(maze):
    _, path = maze.calculate_tile_scores()
    assert len(path) == 45
    assert maze.start in path
    assert maze.end in path
    assert all(maze.lines[c.row][c.column] != "#" for c in path)


def test_walls_stay_unvisited(maze):
    tiles, _ = maze.calculate_tile_scores()
    walls = [
        Coord(r, c)
        for r, line in enumerate(maze.lines)
        for c, ch in enumerate(line)
        if ch == "#"
    ]
    assert walls
    assert all(tiles[w] == UNVISITED for w in walls)


def test_missing_start_raises():
    with pytest.raises(ValueError):
        Maze.parse(EXAMPLE.replace("S", "."), 1000).calculate_tile_scores()


def test_missing_end_raises():
    with pytest.raises(ValueError):
        Maze.parse(EXAMPLE.replace("E", "."), 1000).calculate_tile_scores()