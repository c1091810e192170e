"""A doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _DNode:
    __slots__ = ("data", "prev", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.prev: _DNode | None = None
        self.next: _DNode | None = None


class DoublyLinkedList:
    """A list whose nodes link to both neighbours."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _DNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def prepend(self, data: Any) -> None:
        """Put ``data`` at the front."""
        node = _DNode(data)
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, data: Any) -> None:
        """Put ``data`` at the back."""
        node = _DNode(data)
        self._size += 1
        if self._head is None:
            self._head = node
            return
        last = self._head
        while last.next is not None:
            last = last.next
        last.next = node
        node.prev = last

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._head
        if node is None:
            return
        while node.next is not None:
            node = node.next
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Render the list as ``List: a b c`` or ``List is empty.``."""
        if self._head is None:
            return "List is empty."
        return "List: " + " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"