"""A singly linked list of values with an interactive menu front end."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Optional["_Node"] = None) -> None:
        self.data = data
        self.next = next


class SinglyLinkedList:
    """A singly linked list; positions are zero-based."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in reversed(list(values)):
            self.insert_front(value)

    def _node_at(self, index: int) -> _Node:
        if index < 0 or index >= self._size:
            raise IndexError(f"no node at position {index}")
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_front(self, value: Any) -> None:
        """Insert a value at the beginning."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert a value at the end."""
        new = _Node(value)
        if self._head is None:
            self._head = new
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = new
        self._size += 1

    def insert_after(self, location: int, value: Any) -> None:
        """Insert a value after the node at ``location``."""
        node = self._node_at(location)
        node.next = _Node(value, node.next)
        self._size += 1

    def delete_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("list is empty")
        value = self._head.data
        self._head = self._head.next
        self._size -= 1
        return value

    def delete_last(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("list is empty")
        if self._head.next is None:
            value = self._head.data
            self._head = None
        else:
            prev = self._head
            while prev.next.next is not None:
                prev = prev.next
            value = prev.next.data
            prev.next = None
        self._size -= 1
        return value

    def delete_after(self, location: int) -> Any:
        """Remove and return the value at ``location``, the node following position ``location - 1``."""
        if location < 0 or location >= self._size:
            raise IndexError(f"no node at position {location}")
        if location == 0:
            return self.delete_front()
        prev = self._node_at(location - 1)
        target = prev.next
        prev.next = target.next
        self._size -= 1
        return target.data

    def search(self, value: Any) -> list[int]:
        """Return every position holding ``value``."""
        return [index for index, item in enumerate(self) if item == value]

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous = None
        node = self._head
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self._head = previous

    def remove_smaller_than_right(self) -> None:
        """Remove every node that has a greater value somewhere after it."""
        if self._head is None:
            return
        self.reverse()
        largest = self._head.data
        prev = None
        node = self._head
        while node is not None:
            if node.data < largest:
                prev.next = node.next
                self._size -= 1
            else:
                largest = node.data
                prev = node
            node = node.next
        self.reverse()

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


_MENU = (
    "\n\n*********Main Menu*********\n"
    "\nChoose one option from the following list ...\n"
    "\n===============================================\n"
    "\n1.Insert in begining\n2.Insert at last\n3.Insert at any random location\n"
    "4.Delete from Beginning\n5.Delete from last\n6.Delete node after specified location\n"
    "7.Search for an element\n8.Show\n9.Exit\n"
)


def _ask(prompt: str) -> int:
    print(prompt)
    return int(input().strip())


def _run_choice(items: SinglyLinkedList, choice: int) -> None:
    if choice == 1:
        items.insert_front(_ask("\nEnter value"))
        print("\nNode inserted")
    elif choice == 2:
        items.append(_ask("\nEnter value?"))
        print("\nNode inserted")
    elif choice == 3:
        value = _ask("\nEnter element value")
        location = _ask("\nEnter the location after which you want to insert ")
        try:
            items.insert_after(location, value)
        except IndexError:
            print("\ncan't insert")
        else:
            print("\nNode inserted")
    elif choice == 4:
        try:
            items.delete_front()
        except IndexError:
            print("\nList is empty")
        else:
            print("\nNode deleted from the begining ...")
    elif choice == 5:
        only = len(items) == 1
        try:
            items.delete_last()
        except IndexError:
            print("\nlist is empty")
        else:
            print("\nOnly node of the list deleted ..." if only else "\nDeleted Node from the last ...")
    elif choice == 6:
        location = _ask("\n Enter the location of the node after which you want to perform deletion ")
        try:
            items.delete_after(location)
        except IndexError:
            print("\nCan't delete")
        else:
            print(f"\nDeleted node {location + 1} ")
    elif choice == 7:
        if not len(items):
            print("\nEmpty List")
            return
        found = items.search(_ask("\nEnter item which you want to search?"))
        for position in found:
            print(f"item found at location {position + 1} ")
        if not found:
            print("Item not found")
    elif choice == 8:
        if not len(items):
            print("Nothing to print")
            return
        print("\nprinting values . . . . .")
        for value in items:
            print(value)
    else:
        print("Please enter valid choice..")


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive list menu on standard input until option 9 or end of input."""
    items = SinglyLinkedList()
    while True:
        print(_MENU)
        try:
            choice = _ask("\nEnter your choice?")
            if choice == 9:
                return 0
            _run_choice(items, choice)
        except EOFError:
            return 0
        except ValueError:
            print("Please enter valid choice..")


if __name__ == "__main__":
    raise SystemExit(main())