"""Small helpers for working with lists of integers (dice values and the like)."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

PROMPT = "INGRESE NUMERO: "


class _RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def position_of(values: Iterable[int], number: int) -> int:
    """Index of the first element equal to number, or -1 if there is none."""
    return next((i for i, value in enumerate(values) if value == number), -1)


def count_occurrences(values: Iterable[int], number: int) -> int:
    """How many elements are equal to number."""
    return sum(1 for value in values if value == number)


def _non_empty(values: Iterable[int]) -> list[int]:
    seq = list(values)
    if not seq:
        raise ValueError("the sequence is empty")
    return seq


def index_of_max(values: Iterable[int]) -> int:
    """Index of the first largest element."""
    seq = _non_empty(values)
    return max(range(len(seq)), key=seq.__getitem__)


def index_of_min(values: Iterable[int]) -> int:
    """Index of the first smallest element."""
    seq = _non_empty(values)
    return min(range(len(seq)), key=seq.__getitem__)


def random_values(
    count: int, limit: int, rng: _RandomSource | None = None
) -> list[int]:
    """A list of count random integers between 1 and limit, inclusive."""
    if count < 0:
        raise ValueError("count must be non-negative")
    if limit < 1:
        raise ValueError("limit must be at least 1")
    source = rng if rng is not None else random
    return [source.randint(1, limit) for _ in range(count)]


def selection_sorted(values: Iterable[int]) -> list[int]:
    """A new list holding the values in ascending order."""
    return sorted(values)


def sum_values(values: Iterable[int]) -> int:
    """Sum of all the values."""
    return sum(values)


def zeros(count: int) -> list[int]:
    """A list of count zeros."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return [0] * count


def copy_values(values: Iterable[int]) -> list[int]:
    """An independent copy of the values."""
    return list(values)


def same_values(first: Sequence[int], second: Sequence[int]) -> bool:
    """True when both sequences hold exactly the same values in the same order."""
    return list(first) == list(second)


def format_values(values: Iterable[int]) -> str:
    """The values as text, each followed by a space."""
    return "".join(f"{value} " for value in values)


def read_values(
    count: int, read_line: Callable[[str], str] = input
) -> list[int]:
    """Ask for count integers, one per call to read_line."""
    if count < 0:
        raise ValueError("count must be non-negative")
    return [int(read_line(PROMPT).strip()) for _ in range(count)]