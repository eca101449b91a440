"""Lowest-score paths through a maze of walls, with turn costs."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import NamedTuple

from aoc2024.coord import Coord
from aoc2024.direction import Direction
from aoc2024.vec2d import Vec2d

UNVISITED = 2**64 - 1


class _Step(NamedTuple):
    coord: Coord
    score: int
    direction: Direction
    path: frozenset[Coord]
    retry: bool


@dataclass
class _SidePath:
    score: int
    tiles: set[Coord]


@dataclass
class _Search:
    tiles: Vec2d[int]
    queue: deque[_Step] = field(default_factory=deque)
    main_path: set[Coord] = field(default_factory=set)
    side_paths: dict[Coord, dict[Direction, _SidePath]] = field(default_factory=dict)


@dataclass
class Maze:
    """A maze with start 'S', end 'E' and walls '#'."""

    lines: list[str]
    start: Coord
    end: Coord
    turn_cost: int

    @property
    def width(self) -> int:
        return len(self.lines[0])

    @property
    def height(self) -> int:
        return len(self.lines)

    @classmethod
    def parse(cls, text: str, turn_cost: int) -> Maze:
        lines = text.split("\n")
        start = end = Coord()
        for row, line in enumerate(lines):
            for column, tile in enumerate(line):
                if tile == "S":
                    start = Coord(row, column)
                elif tile == "E":
                    end = Coord(row, column)
        return cls(lines, start, end, turn_cost)

    def _tile(self, coord: Coord) -> str:
        line = self.lines[coord.row]
        return line[coord.column] if coord.column < len(line) else "\n"

    def calculate_tile_scores(self) -> tuple[Vec2d[int], set[Coord]]:
        """Score every reachable tile; return the scores and the tiles on best paths."""
        if self._tile(self.start) != "S":
            raise ValueError("maze has no start tile 'S'")
        if self._tile(self.end) != "E":
            raise ValueError("maze has no end tile 'E'")

        tiles = Vec2d.filled(UNVISITED, self.width, self.height)
        tiles[self.start] = 0
        search = _Search(tiles)
        search.queue.append(
            _Step(self.start, 0, Direction.EAST, frozenset({self.start}), True)
        )

        while search.queue:
            item = search.queue.popleft()
            self._try_step(item, search)
            turned = item.score + self.turn_cost
            self._try_step(
                item._replace(score=turned, direction=item.direction.turn_right()),
                search,
            )
            self._try_step(
                item._replace(score=turned, direction=item.direction.turn_left()),
                search,
            )

        main_path = search.main_path
        main_path.add(self.end)
        for side_end, by_direction in sorted(search.side_paths.items()):
            for side in by_direction.values():
                if side_end in main_path and side.score == tiles[side_end]:
                    main_path |= side.tiles

        return tiles, main_path

    def _try_step(self, item: _Step, search: _Search) -> None:
        step = item.direction.step(item.coord)
        if self._tile(step) == "#":
            return
        score = search.tiles[step]
        new_score = item.score + 1

        if score > new_score:
            if step != self.end:
                search.tiles[step] = new_score
                search.queue.append(
                    _Step(step, new_score, item.direction, item.path | {step}, item.retry)
                )
            else:
                search.main_path = set(item.path)
                search.tiles[step] = new_score
        elif score == new_score:
            by_direction = search.side_paths.get(step)
            if by_direction is None:
                search.side_paths[step] = {
                    item.direction: _SidePath(score, set(item.path))
                }
                return
            side = by_direction.get(item.direction)
            if side is None:
                by_direction[item.direction] = _SidePath(score, set(item.path | {step}))
            elif side.score > score:
                side.score = score
                side.tiles = set(item.path | {step})
            elif side.score == score:
                side.tiles |= item.path
        elif item.retry and step != self.end:
            # A junction may be valid for two merging paths, so retry once.
            search.queue.append(
                _Step(step, new_score, item.direction, item.path | {step}, False)
            )