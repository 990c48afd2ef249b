"""Two stacks sharing one fixed-size array, growing towards each other."""

from __future__ import annotations

from typing import Any


class TwoStacks:
    """Stack 1 grows from the left end of the array, stack 2 from the right."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._items: list[Any] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _has_room(self) -> bool:
        return self._top1 < self._top2 - 1

    def push1(self, x: Any) -> None:
        """Push onto the first stack."""
        if not self._has_room():
            raise OverflowError("stack overflow")
        self._top1 += 1
        self._items[self._top1] = x

    def push2(self, x: Any) -> None:
        """Push onto the second stack."""
        if not self._has_room():
            raise OverflowError("stack overflow")
        self._top2 -= 1
        self._items[self._top2] = x

    def pop1(self) -> Any:
        """Pop from the first stack."""
        if self._top1 < 0:
            raise IndexError("stack underflow")
        value = self._items[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Pop from the second stack."""
        if self._top2 >= self._size:
            raise IndexError("stack underflow")
        value = self._items[self._top2]
        self._top2 += 1
        return value