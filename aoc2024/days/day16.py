"""Reindeer maze: lowest score and the tiles on best paths."""

from __future__ import annotations

from aoc2024.maze import Maze

TURN_COST = 1000


def part1(text: str) -> int:
    """Lowest score from start to end."""
    maze = Maze.parse(text, TURN_COST)
    tiles, _ = maze.calculate_tile_scores()
    return tiles[maze.end]


def part2(text: str) -> int:
    """Number of tiles on any best path."""
    _, path = Maze.parse(text, TURN_COST).calculate_tile_scores()
    return len(path)