"""Garden plot regions: fence prices by perimeter and by sides."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable

Cell = tuple[int, int]


class _Garden:
    def __init__(self, text: str) -> None:
        self.lines = text.split("\n")

    def crop(self, row: int, column: int) -> str | None:
        if row < 0 or column < 0 or row >= len(self.lines):
            return None
        line = self.lines[row]
        return line[column] if column < len(line) else None

    def cells(self) -> list[Cell]:
        return [
            (row, column)
            for row, line in enumerate(self.lines)
            for column in range(len(line))
        ]

    def perimeter(self, row: int, column: int) -> int:
        crop = self.crop(row, column)
        neighbours = (
            self.crop(row - 1, column),
            self.crop(row + 1, column),
            self.crop(row, column - 1),
            self.crop(row, column + 1),
        )
        return 4 - sum(neighbour == crop for neighbour in neighbours)

    def new_sides(self, row: int, column: int) -> int:
        """Sides of the cell's region that begin here, scanning top-left first."""
        c = self.crop(row, column)
        t = self.crop(row - 1, column) == c
        b = self.crop(row + 1, column) == c
        left = self.crop(row, column - 1) == c
        right = self.crop(row, column + 1) == c
        tl = self.crop(row - 1, column - 1) == c
        tr = self.crop(row - 1, column + 1) == c
        bl = self.crop(row + 1, column - 1) == c
        edges = (
            not t and not (left and not tl),
            not b and not (left and not bl),
            not left and not (t and not tl),
            not right and not (t and not tr),
        )
        return sum(edges)

    def regions(self) -> list[list[Cell]]:
        seen: set[Cell] = set()
        regions = []
        for start in self.cells():
            if start in seen:
                continue
            seen.add(start)
            crop = self.crop(*start)
            region = []
            queue = deque([start])
            while queue:
                row, column = queue.popleft()
                region.append((row, column))
                for neighbour in (
                    (row - 1, column),
                    (row + 1, column),
                    (row, column - 1),
                    (row, column + 1),
                ):
                    if neighbour not in seen and self.crop(*neighbour) == crop:
                        seen.add(neighbour)
                        queue.append(neighbour)
            regions.append(region)
        return regions


def _price(text: str, fence: Callable[[_Garden, int, int], int]) -> int:
    garden = _Garden(text)
    return sum(
        len(region) * sum(fence(garden, row, column) for row, column in region)
        for region in garden.regions()
    )


def part1(text: str) -> int:
    """Total price: area times perimeter for every region."""
    return _price(text, _Garden.perimeter)


def part2(text: str) -> int:
    """Total price with bulk discount: area times number of sides."""
    return _price(text, _Garden.new_sides)