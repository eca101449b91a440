"""Word search for XMAS and crossed MAS."""

from __future__ import annotations

PATTERN = "XMAS"
INVERSE_PATTERN = "SAMX"
X_PATTERN = "MAS"
X_INVERSE_PATTERN = "SAM"


def _windows(lines: list[str], size: int) -> list[list[str]]:
    return [lines[start : start + size] for start in range(len(lines) - size + 1)]


def _horizontal(lines: list[str], pattern: str) -> int:
    return sum(
        line[start : start + 4] == pattern
        for line in lines
        for start in range(len(line) - 3)
    )


def _count_columns(window: list[str], offsets: tuple[int, ...], pattern: str) -> int:
    columns = zip(*(line[offset:] for line, offset in zip(window, offsets)))
    return sum("".join(letters) == pattern for letters in columns)


def _vertical(lines: list[str], pattern: str) -> int:
    return sum(_count_columns(w, (0, 0, 0, 0), pattern) for w in _windows(lines, 4))


def _diagonal_right(lines: list[str], pattern: str) -> int:
    return sum(_count_columns(w, (0, 1, 2, 3), pattern) for w in _windows(lines, 4))


def _diagonal_left(lines: list[str], pattern: str) -> int:
    return sum(_count_columns(w, (3, 2, 1, 0), pattern) for w in _windows(lines, 4))


def _crosses(lines: list[str], pattern_left: str, pattern_right: str) -> int:
    count = 0
    for a, b, c in _windows(lines, 3):
        left = ("".join(t) for t in zip(a, b[1:], c[2:]))
        right = ("".join(t) for t in zip(a[2:], b[1:], c))
        count += sum(
            lhs == pattern_left and rhs == pattern_right
            for lhs, rhs in zip(left, right)
        )
    return count


def part1(text: str) -> int:
    """Occurrences of XMAS in any direction."""
    lines = text.split("\n")
    return sum(
        search(lines, pattern)
        for search in (_horizontal, _vertical, _diagonal_right, _diagonal_left)
        for pattern in (PATTERN, INVERSE_PATTERN)
    )


def part2(text: str) -> int:
    """Occurrences of two MAS crossing in an X."""
    lines = text.split("\n")
    return sum(
        _crosses(lines, left, right)
        for left in (X_PATTERN, X_INVERSE_PATTERN)
        for right in (X_PATTERN, X_INVERSE_PATTERN)
    )