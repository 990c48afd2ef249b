"""A double-ended queue stored in a fixed-size circular array."""

from __future__ import annotations

from typing import Any, Iterator

MAX_CAPACITY = 100


class CircularDeque:
    """A bounded deque over a circular array of ``size`` slots."""

    def __init__(self, size: int) -> None:
        if not 1 <= size <= MAX_CAPACITY:
            raise ValueError(f"size must be between 1 and {MAX_CAPACITY}")
        self._size = size
        self._items: list[Any] = [None] * size
        self._front = -1
        self._rear = 0

    def is_full(self) -> bool:
        """Return True when every slot is in use."""
        return (self._front == 0 and self._rear == self._size - 1) or self._front == self._rear + 1

    def is_empty(self) -> bool:
        """Return True when the deque holds nothing."""
        return self._front == -1

    def insert_front(self, key: Any) -> None:
        """Add an element at the front."""
        if self.is_full():
            raise OverflowError("deque overflow")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._front == 0:
            self._front = self._size - 1
        else:
            self._front -= 1
        self._items[self._front] = key

    def insert_rear(self, key: Any) -> None:
        """Add an element at the rear."""
        if self.is_full():
            raise OverflowError("deque overflow")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._rear == self._size - 1:
            self._rear = 0
        else:
            self._rear += 1
        self._items[self._rear] = key

    def delete_front(self) -> Any:
        """Remove and return the front element."""
        if self.is_empty():
            raise IndexError("deque underflow")
        value = self._items[self._front]
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._front == self._size - 1:
            self._front = 0
        else:
            self._front += 1
        return value

    def delete_rear(self) -> Any:
        """Remove and return the rear element."""
        if self.is_empty():
            raise IndexError("deque underflow")
        value = self._items[self._rear]
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._rear == 0:
            self._rear = self._size - 1
        else:
            self._rear -= 1
        return value

    def front(self) -> Any:
        """Return the front element."""
        if self.is_empty():
            raise IndexError("deque underflow")
        return self._items[self._front]

    def rear(self) -> Any:
        """Return the rear element."""
        if self.is_empty() or self._rear < 0:
            raise IndexError("deque underflow")
        return self._items[self._rear]

    def __iter__(self) -> Iterator[Any]:
        if self.is_empty():
            return
        if self._rear >= self._front:
            yield from self._items[self._front:self._rear + 1]
        else:
            yield from self._items[self._front:]
            yield from self._items[:self._rear + 1]

    def __repr__(self) -> str:
        return f"CircularDeque({list(self)!r})"