"""Fixed-size array edits and a small bounded array with deletions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

SUBJECTS = 5
CAPACITY = 100


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def student_totals(marks: Iterable[Sequence[int]]) -> list[tuple[int, int]]:
    """Return ``(total, average)`` for each student's five subject marks.

    The average is the integer quotient of the total by five, truncated
    toward zero.
    """
    results = []
    for number, row in enumerate(marks, start=1):
        if len(row) != SUBJECTS:
            raise ValueError(
                f"student {number} has {len(row)} marks, expected {SUBJECTS}"
            )
        total = sum(row)
        results.append((total, _truncating_div(total, SUBJECTS)))
    return results


def _check_position(values: Sequence[Any], pos: int) -> None:
    if not 0 <= pos < len(values):
        raise IndexError(f"position {pos} out of range for length {len(values)}")


def delete_at(values: Sequence[int], pos: int) -> list[int]:
    """Remove the item at ``pos``; the array keeps its size and ends in 0."""
    _check_position(values, pos)
    return [*values[:pos], *values[pos + 1:], 0]


def insert_at(values: Sequence[Any], pos: int, value: Any) -> list[Any]:
    """Insert ``value`` at ``pos``; the array keeps its size, losing its last item."""
    _check_position(values, pos)
    return [*values[:pos], value, *values[pos:-1]]


def shift_in_front(values: Sequence[Any], item: Any) -> list[Any]:
    """Put ``item`` first and shift the rest right, dropping the last item."""
    if not values:
        raise IndexError("cannot shift into an empty array")
    return [item, *values[:-1]]


def replace_last(values: Sequence[Any], item: Any) -> list[Any]:
    """Return a copy of ``values`` with its last slot set to ``item``."""
    if not values:
        raise IndexError("cannot replace the last item of an empty array")
    return [*values[:-1], item]


class ShrinkingArray:
    """A bounded array that supports deletion from either end."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        items = list(values)
        if len(items) > CAPACITY:
            raise ValueError(f"overflow: at most {CAPACITY} elements fit")
        self._items = items

    def delete_first(self) -> Any:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("underflow: array is empty")
        return self._items.pop(0)

    def delete_last(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("underflow: array is empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"