"""A circular singly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dsakit.linked_list import Node


class CircularList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _last(self) -> Node:
        node = self._head
        while node.next is not self._head:
            node = node.next
        return node

    def _link_new(self, data: Any) -> Node | None:
        """Create a node closing the ring; return it, or None if it is the only node."""
        node = Node(data)
        self._size += 1
        if self._head is None:
            node.next = node
            self._head = node
            return None
        last = self._last()
        last.next = node
        node.next = self._head
        return node

    def prepend(self, data: Any) -> None:
        """Put ``data`` at the front of the ring."""
        node = self._link_new(data)
        if node is not None:
            self._head = node

    def append(self, data: Any) -> None:
        """Put ``data`` at the back of the ring."""
        self._link_new(data)

    def __iter__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head
        while True:
            yield node.data
            node = node.next
            if node is self._head:
                return

    def __len__(self) -> int:
        return self._size

    def format(self) -> str:
        """Render the list as ``List: a b c`` or ``List is empty.``."""
        if self._head is None:
            return "List is empty."
        return "List: " + " ".join(str(item) for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"