"""Disk fragmenter: compacting blocks and whole files."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass
class File:
    """A run of ``length`` blocks belonging to file ``index``."""

    index: int
    length: int


@dataclass
class Free:
    """A run of ``length`` free blocks."""

    index: int
    length: int


DiskEntry = File | Free


def _disk_map(text: str) -> Iterator[DiskEntry]:
    for position, char in enumerate(text.strip()):
        if not char.isdigit():
            raise ValueError(f"invalid disk map digit {char!r}")
        kind = File if position % 2 == 0 else Free
        yield kind(position // 2, int(char))


def _get(disk_map: list[DiskEntry], position: int) -> DiskEntry | None:
    if 0 <= position < len(disk_map):
        return disk_map[position]
    return None


def part1(text: str) -> int:
    """Checksum after moving single blocks into the leftmost free space."""
    # File ids are stored shifted by one so that 0 marks a free block.
    blocks: list[int] = []
    for entry in _disk_map(text):
        value = entry.index + 1 if isinstance(entry, File) else 0
        blocks.extend([value] * entry.length)

    low, high = 0, len(blocks) - 1
    while True:
        while low <= high and blocks[high] == 0:
            high -= 1
        if low > high:
            break
        back = high
        high -= 1
        while low <= high and blocks[low] != 0:
            low += 1
        if low > high:
            break
        front = low
        low += 1
        blocks[front], blocks[back] = blocks[back], 0

    return sum(position * max(value - 1, 0) for position, value in enumerate(blocks))


def move_file_to_free(
    disk_map: list[DiskEntry],
    dst: int,
    src: int,
    front_size: int,
    back_size: int,
) -> None:
    """Move the file at ``src`` into the free run at ``dst``, in place."""
    moved = disk_map.pop(src)

    following = _get(disk_map, src)
    additional = following.length if isinstance(following, Free) else 0
    if additional > 0:
        disk_map.pop(src)

    here = _get(disk_map, src)
    if isinstance(here, Free):
        here.length += back_size + additional
    else:
        disk_map.insert(src, Free(0, back_size + additional))

    if front_size == back_size:
        if dst >= len(disk_map):
            raise IndexError("destination index is outside the disk map")
        disk_map[dst] = moved
    else:
        target = _get(disk_map, dst)
        if not isinstance(target, Free):
            raise ValueError("destination must be free space")
        target.length -= back_size
        disk_map.insert(dst, moved)


def _compact_files(disk_map: list[DiskEntry]) -> None:
    front, back = 0, len(disk_map) - 1
    while front <= back:
        while True:
            item = _get(disk_map, back)
            if item is None:
                return
            if isinstance(item, File):
                back_size = item.length
                break
            back -= 1

        front_size: int | None = None
        while front_size is None:
            if front >= back:
                back -= 1
                front = 1
                break
            item = _get(disk_map, front)
            if item is None:
                back -= 1
                front = 0
                break
            if isinstance(item, Free) and item.length >= back_size:
                front_size = item.length
            else:
                front += 1

        if front_size is None:
            continue
        move_file_to_free(disk_map, front, back, front_size, back_size)
        front = 0


def part2(text: str) -> int:
    """Checksum after moving whole files into the leftmost free space that fits."""
    disk_map = [
        entry
        for entry in _disk_map(text)
        if not (isinstance(entry, Free) and entry.length == 0)
    ]
    _compact_files(disk_map)

    blocks: list[int] = []
    for entry in disk_map:
        value = entry.index if isinstance(entry, File) else 0
        blocks.extend([value] * entry.length)
    return sum(position * value for position, value in enumerate(blocks))