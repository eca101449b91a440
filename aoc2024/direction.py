"""Compass directions on a grid."""

from __future__ import annotations

from enum import Enum

from aoc2024.coord import Coord


class Direction(Enum):
    """One of the four compass directions; rows grow southwards."""

    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3

    def turn_right(self) -> Direction:
        return _RIGHT[self]

    def turn_left(self) -> Direction:
        return _LEFT[self]

    def step(self, coord: Coord) -> Coord:
        """The coordinate one step from ``coord`` in this direction."""
        if self is Direction.NORTH:
            return coord - (1, 0)
        if self is Direction.SOUTH:
            return coord + (1, 0)
        if self is Direction.EAST:
            return coord + (0, 1)
        return coord - (0, 1)


_RIGHT = {
    Direction.NORTH: Direction.EAST,
    Direction.SOUTH: Direction.WEST,
    Direction.EAST: Direction.SOUTH,
    Direction.WEST: Direction.NORTH,
}

_LEFT = {after: before for before, after in _RIGHT.items()}