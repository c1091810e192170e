"""Stacks backed by an array or by linked nodes, and two stack algorithms."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from dsakit.linked_list import Node

DEFAULT_CAPACITY = 100

_OPENERS = "([{"
_CLOSERS = {")": "(", "]": "[", "}": "{"}


class StackError(Exception):
    """Raised on stack overflow or underflow."""


class ArrayStack:
    """A stack with a fixed capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise StackError when full."""
        if self.is_full():
            raise StackError("stack overflow")
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item; raise StackError when empty."""
        if not self._items:
            raise StackError("stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item; raise StackError when empty."""
        if not self._items:
            raise StackError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: Node | None = None
        self._size = 0

    def push(self, item: Any) -> None:
        """Put ``item`` on top."""
        self._top = Node(item, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top item; raise StackError when empty."""
        if self._top is None:
            raise StackError("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the top item; raise StackError when empty."""
        if self._top is None:
            raise StackError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size


def is_balanced(text: str) -> bool:
    """Tell whether the brackets ``()[]{}`` in ``text`` nest and pair up."""
    pending: list[str] = []
    for char in text:
        if char in _OPENERS:
            pending.append(char)
        elif char in _CLOSERS:
            if not pending or pending.pop() != _CLOSERS[char]:
                return False
    return not pending


def next_greater(nums: Sequence[Any]) -> list[Any]:
    """Return, for each item, the first larger item to its right, or -1."""
    values = list(nums)
    result: list[Any] = [-1] * len(values)
    waiting: list[int] = []
    for index, value in enumerate(values):
        while waiting and value > values[waiting[-1]]:
            result[waiting.pop()] = value
        waiting.append(index)
    return result