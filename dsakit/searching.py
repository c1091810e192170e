"""Searches over plain and sorted (possibly rotated) sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def linear_search(values: Sequence[Any], key: Any) -> int | None:
    """Return the index of the first item equal to ``key``, or None."""
    return next((i for i, item in enumerate(values) if item == key), None)


def binary_search(values: Sequence[Any], key: Any) -> int | None:
    """Return an index of ``key`` in the ascending ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == key:
            return mid
        if values[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    return None


def find_pivot(values: Sequence[Any]) -> int | None:
    """Return the index of the largest item in a rotated sorted sequence.

    None is returned when the search finds no rotation point.
    """
    low, high = 0, len(values) - 1
    while True:
        if high < low:
            return None
        if high == low:
            return low
        mid = (low + high) // 2
        if mid < high and values[mid] > values[mid + 1]:
            return mid
        if mid > low and values[mid] < values[mid - 1]:
            return mid - 1
        if values[low] >= values[mid]:
            high = mid - 1
        else:
            low = mid + 1


def find_min(values: Sequence[Any]) -> Any:
    """Return the smallest item of a rotated sorted sequence."""
    if not values:
        raise ValueError("find_min() of an empty sequence")
    pivot = find_pivot(values)
    if pivot is None or pivot + 1 >= len(values):
        return values[0]
    return values[pivot + 1]


def find_floor(values: Sequence[Any], x: Any) -> Any:
    """Return the largest item not greater than ``x`` in ascending ``values``.

    Below the first item the first item is returned; above the last item
    the last item is returned.
    """
    if not values:
        raise ValueError("find_floor() of an empty sequence")
    if x < values[0]:
        return values[0]
    if x > values[-1]:
        return values[-1]
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == x:
            return values[mid]
        if values[mid] < x:
            low = mid + 1
        else:
            high = mid - 1
    return values[high]


def find_ceil(values: Sequence[Any], x: Any) -> Any | None:
    """Return the smallest item not less than ``x`` in ascending ``values``.

    Below the first item the first item is returned; above the last item
    there is no ceiling and None is returned.
    """
    if not values:
        raise ValueError("find_ceil() of an empty sequence")
    if x < values[0]:
        return values[0]
    if x > values[-1]:
        return None
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == x:
            return values[mid]
        if values[mid] < x:
            low = mid + 1
        else:
            high = mid - 1
    return values[low]


def find_peak(values: Sequence[Any]) -> int | None:
    """Return the index of an item not smaller than its neighbours, or None."""
    n = len(values)
    low, high = 0, n - 1
    while low <= high:
        mid = (low + high) // 2
        left_ok = mid == 0 or values[mid] >= values[mid - 1]
        right_ok = mid == n - 1 or values[mid] >= values[mid + 1]
        if left_ok and right_ok:
            return mid
        if mid > 0 and values[mid] < values[mid - 1]:
            high = mid - 1
        else:
            low = mid + 1
    return None