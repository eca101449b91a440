"""Grid coordinates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Coord:
    """A row/column position on a grid; orders by row, then column."""

    row: int = 0
    column: int = 0

    def dist(self, other: Coord) -> int:
        """Manhattan distance to another coordinate."""
        return abs(self.row - other.row) + abs(self.column - other.column)

    def adjacent_4_way(self, bounds: Coord) -> list[Coord | None]:
        """Neighbours north, south, west and east; None where off the grid."""
        return [
            Coord(self.row - 1, self.column) if self.row > 0 else None,
            Coord(self.row + 1, self.column) if self.row + 1 < bounds.row else None,
            Coord(self.row, self.column - 1) if self.column > 0 else None,
            Coord(self.row, self.column + 1)
            if self.column + 1 < bounds.column
            else None,
        ]

    def __add__(self, other: tuple[int, int]) -> Coord:
        d_row, d_column = other
        return Coord(self.row + d_row, self.column + d_column)

    def __sub__(self, other: tuple[int, int]) -> Coord:
        d_row, d_column = other
        if d_row > self.row or d_column > self.column:
            raise ValueError(f"{self} - {other} leaves the grid")
        return Coord(self.row - d_row, self.column - d_column)