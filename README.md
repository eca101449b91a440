# aoc2024

Solutions to the 2024 Advent of Code puzzles, days 1 to 20, as a small
Python library with no dependencies outside the standard library.

Each day lives in its own module under `aoc2024.days` (`day1` to `day20`)
and exposes `part1(text)` and `part2(text)`. Both take the puzzle input as
a string and return the answer.

```python
from aoc2024.days import day1

data = """3   4
4   3
2   5
1   3
3   9
3   3
"""
print(day1.part1(data))  # 11
print(day1.part2(data))  # 31
```

Most answers are integers. `day17.part1` returns the program output as a
comma-separated string, and `day18.part2` returns the blocking byte as a
`Coord` whose `row` holds the x value and `column` the y value.

## Days with extra arguments

The grid size differs between the puzzle examples and the real input, so a
few days take optional arguments that default to the real puzzle sizes:

- `day14.part1(text, bounds=(101, 103))` and `day14.part2(text, bounds=(101, 103))`,
  where `bounds` is `(width, height)`; the example uses `(11, 7)`.
- `day18.part1(text, target=Coord(70, 70), run_simulation_for=1024)` and
  `day18.part2(text, target=Coord(70, 70))`, where `target` is the
  bottom-right corner; the example uses `Coord(6, 6)` and `12` bytes.

Some days also expose their inner pieces:

- `day3.collect_all_mul(text, disable_conditionals)`
- `day7.concatenate(lhs, rhs)` and `day7.is_valid_operation(result, operands, operators)`
- `day9.File`, `day9.Free` and `day9.move_file_to_free(disk_map, dst, src, front_size, back_size)`
- `day11.evolve(stones, blinks)`, taking and returning counts of stones by value
- `day13.Machine` with `find_cheapest_solution()`
- `day14.Robot` with `step(steps)`
- `day17.Vm` with `parse(text)`, `execute()` and `debug_a()`
- `day20.find_reachable(start, tile_cost, cheat_len)`

## Shared building blocks

- `aoc2024.coord.Coord` – an ordered, immutable row/column position with
  `dist(other)` (Manhattan distance), `adjacent_4_way(bounds)`, and `+` / `-`
  with a `(row, column)` tuple; subtraction below zero raises `ValueError`.
- `aoc2024.direction.Direction` – `NORTH`, `SOUTH`, `EAST`, `WEST` with
  `turn_right()`, `turn_left()` and `step(coord)`.
- `aoc2024.vec2d.Vec2d` – a flat row-major list addressed by `Coord`;
  `Vec2d.filled(value, width, height)` builds one.
- `aoc2024.skip_at.skip_at(iterable, index)` – iterate while leaving out one position.
- `aoc2024.maze.Maze` – `Maze.parse(text, turn_cost)` and
  `calculate_tile_scores()`, returning tile scores and the tiles on best
  paths; used by days 16 and 20.
- `aoc2024.walker.Walker` – the guard patrol of day 6: `Walker.from_data(text)`
  iterates `(direction, row, column)` steps and offers
  `count_unique_steps()`, `find_possible_loops()` and `find_possible_loops2()`
  (the same count, checked in a thread pool).

Malformed input generally raises `ValueError`.

## What it does not do

There is no command-line program: the package does not read input files or
fetch puzzle inputs. Read the input yourself and pass the text to a
`part1` or `part2` function. Days 21 to 25 are not included.

## Running the tests

```
pip install -e .[test]
pytest
```