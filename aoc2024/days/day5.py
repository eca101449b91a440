"""Print queue page ordering."""

from __future__ import annotations

from functools import cmp_to_key


def _parse(text: str) -> tuple[dict[int, list[int]], list[list[int]]]:
    lines = iter(text.splitlines())
    order: dict[int, list[int]] = {}
    for line in lines:
        if not line.strip():
            break
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"malformed ordering rule {line!r}")
        order.setdefault(int(before), []).append(int(after))
    updates = [[int(page) for page in line.split(",") if page] for line in lines]
    return order, updates


def _in_order(pages: list[int], order: dict[int, list[int]]) -> bool:
    return all(
        head not in order.get(later, ())
        for position, head in enumerate(pages)
        for later in pages[position + 1 :]
    )


def _sorted_pages(pages: list[int], order: dict[int, list[int]]) -> list[int]:
    def compare(left: int, right: int) -> int:
        if right in order.get(left, ()):
            return -1
        if left in order.get(right, ()):
            return 1
        return 0

    return sorted(pages, key=cmp_to_key(compare))


def part1(text: str) -> int:
    """Sum of middle pages of updates already in order."""
    order, updates = _parse(text)
    return sum(
        update[len(update) // 2] for update in updates if _in_order(update, order)
    )


def part2(text: str) -> int:
    """Sum of middle pages of out-of-order updates once sorted."""
    order, updates = _parse(text)
    total = 0
    for update in updates:
        if not _in_order(update, order):
            fixed = _sorted_pages(update, order)
            total += fixed[len(fixed) // 2]
    return total