"""Warehouse robot pushing boxes, in normal and double-wide layouts."""

from __future__ import annotations

from enum import Enum, auto

from aoc2024.coord import Coord
from aoc2024.direction import Direction
from aoc2024.vec2d import Vec2d


class _Tile(Enum):
    EMPTY = auto()
    WALL = auto()
    BOX_LEFT = auto()
    BOX_RIGHT = auto()
    ROBOT = auto()


# Each map character becomes one tile, or both tiles in the wide layout.
_TILES = {
    "#": (_Tile.WALL, _Tile.WALL),
    "O": (_Tile.BOX_LEFT, _Tile.BOX_RIGHT),
    ".": (_Tile.EMPTY, _Tile.EMPTY),
    "@": (_Tile.ROBOT, _Tile.EMPTY),
}

_MOVES = {
    "^": Direction.NORTH,
    "v": Direction.SOUTH,
    ">": Direction.EAST,
    "<": Direction.WEST,
}


class _Warehouse:
    def __init__(self, grid: Vec2d[_Tile], robot: Coord, wide: bool) -> None:
        self.grid = grid
        self.robot = robot
        self.wide = wide

    @classmethod
    def parse(cls, lines: list[str], wide: bool) -> _Warehouse:
        multiplier = 2 if wide else 1
        tiles: list[_Tile] = []
        robot = Coord()
        width = 0
        for row, line in enumerate(lines):
            width = len(line) * multiplier
            for column, char in enumerate(line):
                pair = _TILES.get(char)
                if pair is None:
                    raise ValueError(f"not a warehouse tile: {char!r}")
                tiles.append(pair[0])
                if wide:
                    tiles.append(pair[1])
                if char == "@":
                    robot = Coord(row, column * multiplier)
        return cls(Vec2d(tiles, width, len(lines)), robot, wide)

    def compute_gps(self) -> int:
        return sum(
            row * 100 + column
            for row, column in (
                divmod(index, self.grid.width)
                for index, tile in enumerate(self.grid.data)
                if tile is _Tile.BOX_LEFT
            )
        )

    def move_robot(self, move: Direction) -> None:
        ahead = move.step(self.robot)
        if self._can_push(ahead, move, True):
            self._push(self.robot, move, True)
            self.robot = ahead

    def _can_push(self, coord: Coord, move: Direction, check_sides: bool) -> bool:
        tile = self.grid[coord]
        if tile is _Tile.EMPTY:
            return True
        if tile is _Tile.WALL:
            return False
        if tile is _Tile.BOX_LEFT:
            ahead = move.step(coord)
            partner = coord + (0, 1)
            if partner == ahead:
                return self._can_push(ahead, move, False)
            return self._can_push(ahead, move, True) and (
                self._can_push(partner, move, False)
                if self.wide and check_sides
                else True
            )
        if tile is _Tile.BOX_RIGHT:
            ahead = move.step(coord)
            partner = coord - (0, 1)
            if partner == ahead:
                return self._can_push(ahead, move, False)
            return self._can_push(ahead, move, True) and (
                self._can_push(partner, move, False) if check_sides else True
            )
        raise ValueError(f"cannot push into {coord}")

    def _push(self, coord: Coord, move: Direction, propagate_sides: bool) -> None:
        tile = self.grid[coord]
        if tile is _Tile.EMPTY:
            return
        if tile is _Tile.WALL:
            raise ValueError(f"wall at {coord} cannot be pushed")
        ahead = move.step(coord)
        if tile is _Tile.ROBOT:
            self._push(ahead, move, True)
        else:
            partner = coord + (0, 1) if tile is _Tile.BOX_LEFT else coord - (0, 1)
            if partner == ahead:
                self._push(ahead, move, False)
            else:
                self._push(ahead, move, True)
                if self.wide and propagate_sides:
                    self._push(partner, move, False)
        self.grid[ahead] = tile
        self.grid[coord] = _Tile.EMPTY


def _run(text: str, wide: bool) -> int:
    lines = text.splitlines()
    try:
        blank = lines.index("")
    except ValueError:
        blank = len(lines)
    warehouse = _Warehouse.parse(lines[:blank], wide)
    for char in "".join(lines[blank + 1 :]):
        move = _MOVES.get(char)
        if move is None:
            raise ValueError(f"not a move: {char!r}")
        warehouse.move_robot(move)
    return warehouse.compute_gps()


def part1(text: str) -> int:
    """Sum of box GPS coordinates after all moves."""
    return _run(text, False)


def part2(text: str) -> int:
    """Sum of box GPS coordinates in the double-wide warehouse."""
    return _run(text, True)