"""Comparison sorts and simple array rearrangements."""

from __future__ import annotations

from typing import Any, Iterable


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by insertion."""
    result = list(values)
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by a stable merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) + 1) // 2
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return the values in ascending order, sorted by selection."""
    result = list(values)
    for i in range(len(result)):
        smallest = min(range(i, len(result)), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result


def move_negatives_left(values: Iterable[int]) -> list[int]:
    """Return the values with every negative number moved before the others.

    Negative numbers keep their relative order.
    """
    result = list(values)
    boundary = 0
    for i, value in enumerate(result):
        if value < 0:
            if i != boundary:
                result[i], result[boundary] = result[boundary], result[i]
            boundary += 1
    return result


def reverse_array(values: Iterable[Any]) -> list[Any]:
    """Return the values in reverse order."""
    result = list(values)
    result.reverse()
    return result