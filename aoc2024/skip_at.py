"""Iterate while leaving out one position."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")


def skip_at(iterable: Iterable[T], index: int) -> Iterator[T]:
    """Yield every item of ``iterable`` except the one at ``index``."""
    for position, item in enumerate(iterable):
        if position != index:
            yield item