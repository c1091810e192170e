"""Singly linked list nodes and the algorithms that work on them.

A list is represented by its head node, or None when it is empty.
Functions that change the shape of a list return the (possibly new) head.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class Node:
    """One cell of a singly linked list."""

    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Node | None = None) -> None:
        self.data = data
        self.next = next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"


def _nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


def _length(head: Node | None) -> int:
    return sum(1 for _ in _nodes(head))


def _node_at(head: Node | None, pos: int) -> Node:
    """Return the node at 1-based position ``pos``."""
    if pos < 1:
        raise IndexError(f"position {pos} out of range")
    for index, node in enumerate(_nodes(head), start=1):
        if index == pos:
            return node
    raise IndexError(f"position {pos} out of range")


def from_iterable(values: Iterable[Any]) -> Node | None:
    """Build a list holding ``values`` in order and return its head."""
    head: Node | None = None
    tail: Node | None = None
    for value in values:
        node = Node(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_list(head: Node | None) -> list[Any]:
    """Return the data of every node, head first."""
    return [node.data for node in _nodes(head)]


def insert_front(head: Node | None, data: Any) -> Node:
    """Put a new node before ``head`` and return it as the new head."""
    return Node(data, head)


def delete_front(head: Node | None) -> Node | None:
    """Drop the first node and return the new head."""
    if head is None:
        raise IndexError("delete from an empty list")
    return head.next


def append(head: Node | None, data: Any) -> Node:
    """Add a node after the last one and return the head."""
    node = Node(data)
    if head is None:
        return node
    last = head
    while last.next is not None:
        last = last.next
    last.next = node
    return head


def delete_last(head: Node | None) -> Node | None:
    """Drop the last node and return the head."""
    if head is None:
        raise IndexError("delete from an empty list")
    if head.next is None:
        return None
    before = head
    while before.next.next is not None:
        before = before.next
    before.next = None
    return head


def insert_at(head: Node | None, pos: int, data: Any) -> Node:
    """Insert ``data`` so that it ends up at 1-based position ``pos``.

    ``pos`` may be one past the end, which appends.
    """
    if pos == 1:
        return Node(data, head)
    before = _node_at(head, pos - 1)
    before.next = Node(data, before.next)
    return head  # type: ignore[return-value]


def delete_at(head: Node | None, pos: int) -> Node | None:
    """Remove the node at 1-based position ``pos`` and return the head."""
    if pos == 1:
        return delete_front(head)
    before = _node_at(head, pos - 1)
    if before.next is None:
        raise IndexError(f"position {pos} out of range")
    before.next = before.next.next
    return head


def search(head: Node | None, value: Any) -> list[int]:
    """Return the 1-based positions of every node holding ``value``."""
    return [i for i, node in enumerate(_nodes(head), start=1) if node.data == value]


def reverse_between(head: Node | None, left: int, right: int) -> Node | None:
    """Reverse the nodes from 1-based position ``left`` to ``right`` inclusive."""
    if left < 1 or right < left:
        raise ValueError(f"invalid range {left}..{right}")
    if right > _length(head):
        raise IndexError(f"position {right} out of range")
    anchor = Node(None, head)
    before = anchor
    for _ in range(left - 1):
        before = before.next
    start = before.next
    prev: Node | None = None
    curr = start
    for _ in range(right - left + 1):
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    before.next = prev
    start.next = curr
    return anchor.next


def find_merge_node(head1: Node | None, head2: Node | None) -> Node | None:
    """Return the first node shared by both lists, or None."""
    a, b = head1, head2
    while a is not b:
        a = head2 if a is None else a.next
        b = head1 if b is None else b.next
    return a


def remove_cycle(head: Node | None) -> Node | None:
    """Break a cycle, if any, so that the list ends; return the head."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    else:
        return head
    slow = head
    while slow is not fast:
        slow = slow.next
        fast = fast.next
    while fast.next is not slow:
        fast = fast.next
    fast.next = None
    return head


def find_middle(head: Node | None) -> Node | None:
    """Return the middle node; with an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def merge_sorted(head1: Node | None, head2: Node | None) -> Node | None:
    """Splice two ascending lists into one ascending list; ties favour the first."""
    anchor = Node(None)
    tail = anchor
    while head1 is not None and head2 is not None:
        if head1.data <= head2.data:
            tail.next = head1
            head1 = head1.next
        else:
            tail.next = head2
            head2 = head2.next
        tail = tail.next
    tail.next = head1 if head1 is not None else head2
    return anchor.next


def reverse(head: Node | None) -> Node | None:
    """Reverse the list in place and return the new head."""
    prev: Node | None = None
    curr = head
    while curr is not None:
        following = curr.next
        curr.next = prev
        prev = curr
        curr = following
    return prev


def is_palindrome(head: Node | None) -> bool:
    """Tell whether the list reads the same both ways; the list is left intact."""
    if head is None or head.next is None:
        return True
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        slow = slow.next
        fast = fast.next.next
    second = reverse(slow.next)
    try:
        return all(
            a.data == b.data for a, b in zip(_nodes(head), _nodes(second))
        )
    finally:
        slow.next = reverse(second)


def nth_from_end(head: Node | None, n: int) -> Node | None:
    """Return the ``n``-th node counted from the end, or None if there is none."""
    if head is None:
        return None
    lead: Node | None = head
    for _ in range(n):
        if lead is None:
            return None
        lead = lead.next
    trail: Node | None = head
    while lead is not None:
        trail = trail.next
        lead = lead.next
    return trail