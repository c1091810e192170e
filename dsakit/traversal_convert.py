"""Conversions between preorder and postorder of binary search trees.

An item smaller than the root belongs to its left subtree; the left
subtree is taken as the run of such items next to the root.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def preorder_to_postorder(pre: Iterable[Any]) -> list[Any]:
    """Return the postorder of the search tree with preorder ``pre``."""
    items = list(pre)
    result: list[Any] = []

    def convert(lo: int, hi: int) -> None:
        if lo >= hi:
            return
        root = items[lo]
        split = lo + 1
        while split < hi and items[split] < root:
            split += 1
        convert(lo + 1, split)
        convert(split, hi)
        result.append(root)

    convert(0, len(items))
    return result


def postorder_to_preorder(post: Iterable[Any]) -> list[Any]:
    """Return the preorder of the search tree with postorder ``post``."""
    items = list(post)
    result: list[Any] = []

    def convert(lo: int, hi: int) -> None:
        if lo >= hi:
            return
        root = items[hi - 1]
        result.append(root)
        split = lo
        while split < hi - 1 and items[split] < root:
            split += 1
        convert(lo, split)
        convert(split, hi - 1)

    convert(0, len(items))
    return result