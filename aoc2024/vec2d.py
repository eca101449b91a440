"""A flat list viewed as a two-dimensional grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from aoc2024.coord import Coord

T = TypeVar("T")


@dataclass
class Vec2d(Generic[T]):
    """Row-major grid over a list, indexed by Coord."""

    data: list[T]
    width: int
    height: int

    @classmethod
    def filled(cls, value: T, width: int, height: int) -> Vec2d[T]:
        return cls([value] * (width * height), width, height)

    def _offset(self, coord: Coord) -> int:
        return coord.row * self.width + coord.column

    def __getitem__(self, coord: Coord) -> T:
        return self.data[self._offset(coord)]

    def __setitem__(self, coord: Coord, value: T) -> None:
        self.data[self._offset(coord)] = value