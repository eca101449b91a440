"""Race condition: counting cheats that shortcut through walls."""

from __future__ import annotations

from collections import Counter

from aoc2024.coord import Coord
from aoc2024.maze import UNVISITED, Maze
from aoc2024.vec2d import Vec2d

MIN_SAVING = 100


def find_reachable(
    start: Coord, tile_cost: Vec2d[int], cheat_len: int
) -> set[tuple[Coord, int]]:
    """Tiles reachable from ``start`` within ``cheat_len`` moves and the time saved."""
    start_cost = tile_cost[start]
    if start_cost == UNVISITED:
        raise ValueError(f"{start} is not on the track")

    reachable: set[tuple[Coord, int]] = set()
    for row_offset in range(-cheat_len, cheat_len + 1):
        remaining = cheat_len - abs(row_offset)
        for column_offset in range(-remaining, remaining + 1):
            row = start.row + row_offset
            column = start.column + column_offset
            if not (0 <= row < tile_cost.height and 0 <= column < tile_cost.width):
                continue
            target = Coord(row, column)
            target_cost = tile_cost[target]
            if target == start or target_cost == UNVISITED or target_cost <= start_cost:
                continue
            clipped = abs(row_offset) + abs(column_offset)
            short_cut = target_cost - start_cost - clipped
            if short_cut > 0:
                reachable.add((target, short_cut))
    return reachable


def _cheats(main_path: set[Coord], tile_cost: Vec2d[int], cheat_len: int) -> Counter[int]:
    return Counter(
        saving
        for tile in main_path
        for _, saving in find_reachable(tile, tile_cost, cheat_len)
    )


def _count_good_cheats(text: str, cheat_len: int) -> int:
    maze = Maze.parse(text, 0)
    tile_cost, main_path = maze.calculate_tile_scores()
    cheats = _cheats(main_path, tile_cost, cheat_len)
    return sum(count for saving, count in cheats.items() if saving >= MIN_SAVING)


def part1(text: str) -> int:
    """Cheats of up to 2 moves that save at least 100 picoseconds."""
    return _count_good_cheats(text, 2)


def part2(text: str) -> int:
    """Cheats of up to 20 moves that save at least 100 picoseconds."""
    return _count_good_cheats(text, 20)