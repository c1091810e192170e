"""Binary tree nodes with traversals, measurements and views."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree; nodes compare and hash by identity."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def _postorder_nodes(root: TreeNode | None) -> list[TreeNode]:
    order: list[TreeNode] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        order.append(node)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    order.reverse()
    return order


def _levels(root: TreeNode | None) -> Iterator[list[tuple[TreeNode, int]]]:
    """Yield each level left to right as (node, horizontal distance) pairs."""
    level = [(root, 0)] if root is not None else []
    while level:
        yield level
        level = [
            (child, distance)
            for node, hd in level
            for child, distance in ((node.left, hd - 1), (node.right, hd + 1))
            if child is not None
        ]


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the data in root, left, right order."""
    result: list[Any] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, right, root order."""
    return [node.data for node in _postorder_nodes(root)]


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the data in left, root, right order."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.data)
        node = node.right
    return result


def height(root: TreeNode | None) -> int:
    """Return the number of levels; an empty tree has height 0."""
    return sum(1 for _ in _levels(root))


def diameter(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest path between two leaves."""
    heights: dict[TreeNode | None, int] = {None: 0}
    best = 0
    for node in _postorder_nodes(root):
        left_height = heights[node.left]
        right_height = heights[node.right]
        heights[node] = 1 + max(left_height, right_height)
        best = max(best, left_height + right_height + 1)
    return best


def lowest_common_ancestor(
    root: TreeNode | None, n1: Any, n2: Any
) -> TreeNode | None:
    """Return the lowest node that has nodes holding ``n1`` and ``n2`` below it.

    A node holding either value is returned as soon as it is met, so if only
    one value is present its node is returned; if neither is, None.
    """
    if root is None:
        return None
    if root.data == n1 or root.data == n2:
        return root
    left = lowest_common_ancestor(root.left, n1, n2)
    right = lowest_common_ancestor(root.right, n1, n2)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def top_view(root: TreeNode | None) -> list[Any]:
    """Return the first node met level by level at each horizontal distance."""
    seen: dict[int, Any] = {}
    for level in _levels(root):
        for node, hd in level:
            seen.setdefault(hd, node.data)
    return [seen[hd] for hd in sorted(seen)]


def bottom_view(root: TreeNode | None) -> list[Any]:
    """Return the last node met level by level at each horizontal distance."""
    seen: dict[int, Any] = {}
    for level in _levels(root):
        for node, hd in level:
            seen[hd] = node.data
    return [seen[hd] for hd in sorted(seen)]


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the leftmost node of every level, top down."""
    return [level[0][0].data for level in _levels(root)]


def right_view(root: TreeNode | None) -> list[Any]:
    """Return the rightmost node of every level, top down."""
    return [level[-1][0].data for level in _levels(root)]