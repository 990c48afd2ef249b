"""Searching in arrays, matrices and strings."""

from __future__ import annotations

from collections import Counter
from typing import Any, Iterable, Optional, Sequence


def binary_search(
    values: Sequence[Any], target: Any, low: int = 0, high: Optional[int] = None
) -> int:
    """Return an index of ``target`` in sorted ``values[low:high + 1]``, or -1."""
    if high is None:
        high = len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def exponential_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in sorted ``values``, or -1."""
    if not values:
        return -1
    if values[0] == target:
        return 0
    n = len(values)
    bound = 1
    while bound < n and values[bound] <= target:
        bound *= 2
    return binary_search(values, target, bound // 2, min(bound, n - 1))


def search_sorted_matrix(
    matrix: Sequence[Sequence[Any]], target: Any
) -> Optional[tuple[int, int]]:
    """Find ``target`` in a matrix sorted along rows and columns.

    Returns the (row, column) position, or None when absent.
    """
    if not matrix or not matrix[0]:
        return None
    if target < matrix[0][0] or target > matrix[-1][-1]:
        return None
    row, col = 0, len(matrix[0]) - 1
    while row < len(matrix) and col >= 0:
        value = matrix[row][col]
        if value == target:
            return row, col
        if value > target:
            col -= 1
        else:
            row += 1
    return None


def prefix_table(pattern: Sequence[Any]) -> list[int]:
    """Return the longest proper prefix-suffix length for each prefix of ``pattern``."""
    table = [0] * len(pattern)
    length = 0
    i = 1
    while i < len(pattern):
        if pattern[i] == pattern[length]:
            length += 1
            table[i] = length
            i += 1
        elif length:
            length = table[length - 1]
        else:
            table[i] = 0
            i += 1
    return table


def kmp_search(pattern: str, text: str) -> list[int]:
    """Return every start index of ``pattern`` in ``text``, overlaps included."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    table = prefix_table(pattern)
    found: list[int] = []
    i = j = 0
    while i < len(text):
        if pattern[j] == text[i]:
            i += 1
            j += 1
        if j == len(pattern):
            found.append(i - j)
            j = table[j - 1]
        elif i < len(text) and pattern[j] != text[i]:
            if j:
                j = table[j - 1]
            else:
                i += 1
    return found


def count_anagrams(pattern: str, text: str) -> int:
    """Count the windows of ``text`` that are anagrams of ``pattern``."""
    width = len(pattern)
    if not width:
        raise ValueError("pattern must not be empty")
    if len(text) < width:
        return 0
    wanted = Counter(pattern)
    window = Counter(text[:width])
    matches = int(window == wanted)
    for incoming, outgoing in zip(text[width:], text):
        window[incoming] += 1
        window[outgoing] -= 1
        if not window[outgoing]:
            del window[outgoing]
        if window == wanted:
            matches += 1
    return matches


def min_max(values: Iterable[Any]) -> tuple[Any, Any]:
    """Return the smallest and the largest value in one pass."""
    iterator = iter(values)
    try:
        smallest = largest = next(iterator)
    except StopIteration:
        raise ValueError("min_max() of an empty sequence") from None
    for value in iterator:
        if largest < value:
            largest = value
        elif smallest > value:
            smallest = value
    return smallest, largest


def bits_equal(a: int, b: int) -> bool:
    """Tell whether two integers are equal using only exclusive or."""
    return not (a ^ b)