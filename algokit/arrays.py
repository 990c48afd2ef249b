"""Array problems solved with dynamic programming, windows and greedy choices."""

from __future__ import annotations

import heapq
from collections import Counter, deque
from typing import Any, Iterable, Optional, Sequence


def longest_increasing_subsequence(values: Sequence[Any]) -> int:
    """Return the length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        best = 1
        for earlier, length in zip(values[:i], lengths):
            if value > earlier and best < length + 1:
                best = length + 1
        lengths.append(best)
    return max(lengths, default=0)


def replace_with_size_minus_frequency(values: Iterable[Any]) -> list[int]:
    """Replace each element by the array length minus its frequency."""
    items = list(values)
    frequency = Counter(items)
    return [len(items) - frequency[item] for item in items]


def sliding_window_max(values: Sequence[Any], k: int) -> list[Any]:
    """Return the maximum of every contiguous window of size ``k``."""
    if not 1 <= k <= len(values):
        raise ValueError("window size must be between 1 and the number of values")
    window: deque[int] = deque()
    maxima: list[Any] = []
    for i, value in enumerate(values):
        while window and window[0] <= i - k:
            window.popleft()
        while window and value >= values[window[-1]]:
            window.pop()
        window.append(i)
        if i >= k - 1:
            maxima.append(values[window[0]])
    return maxima


def count_triplets_below(values: Iterable[int], limit: int) -> int:
    """Count index triplets i < j < k whose values sum to less than ``limit``."""
    items = sorted(values)
    count = 0
    for i in range(len(items) - 2):
        j, k = i + 1, len(items) - 1
        while j < k:
            if items[i] + items[j] + items[k] < limit:
                count += k - j
                j += 1
            else:
                k -= 1
    return count


def min_refuels(
    stations: Iterable[tuple[int, int]], distance: int, fuel: int
) -> Optional[int]:
    """Return the fewest fuel stops needed to travel ``distance``.

    ``stations`` holds (distance from the destination, fuel available) pairs and
    ``fuel`` is the amount in the tank at the start. Returns None when the
    destination cannot be reached.
    """
    stops = sorted(
        ((distance - remaining, amount) for remaining, amount in stations),
        key=lambda stop: stop[0],
    )
    available: list[int] = []
    refuels = 0
    position = 0

    def refuel() -> bool:
        nonlocal fuel, refuels
        if not available:
            return False
        fuel += -heapq.heappop(available)
        refuels += 1
        return True

    for place, amount in stops:
        leg = place - position
        while fuel < leg:
            if not refuel():
                return None
        fuel -= leg
        heapq.heappush(available, -amount)
        position = place

    remaining = distance - position
    while fuel < remaining:
        if not refuel():
            return None
    return refuels