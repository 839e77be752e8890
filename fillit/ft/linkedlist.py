"""A singly linked list with front and back insertion."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the node after it."""

    value: Any
    next: Optional["Node"] = field(default=None, repr=False)


class LinkedList:
    """A singly linked list that keeps track of its tail and length."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: Any) -> None:
        """Insert a value before the first element."""
        node = Node(value, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Add a value after the last element."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def at(self, position: int) -> Any:
        """Return the value at a 1-based position; raise IndexError if absent."""
        if not 1 <= position <= self._size:
            raise IndexError(f"no element at position {position}")
        return next(islice(self, position - 1, None))

    def last(self) -> Any:
        """Return the last value; raise IndexError on an empty list."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.value

    def pop_front(self, delete: Optional[Callable[[Any], None]] = None) -> Any:
        """Remove the first element, passing its value to delete if given."""
        if self.head is None:
            raise IndexError("pop_front() on an empty list")
        node = self.head
        if delete is not None:
            delete(node.value)
        self.head = node.next
        node.next = None
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every element, passing each value to delete if given."""
        while self.head is not None:
            self.pop_front(delete)

    def for_each(self, func: Callable[[Node], None]) -> None:
        """Call func on every node in order."""
        for node in self._nodes():
            func(node)

    def map(self, func: Callable[[Node], Any]) -> "LinkedList":
        """Return a new list of func applied to every node in order."""
        return LinkedList(func(node) for node in self._nodes())

    def merge(self, other: "LinkedList") -> None:
        """Move the elements of other onto the end of this list."""
        if other is self:
            raise ValueError("cannot merge a list into itself")
        if other.head is None:
            return
        if self._tail is None:
            self.head = other.head
        else:
            self._tail.next = other.head
        self._tail = other._tail
        self._size += other._size
        other.head = None
        other._tail = None
        other._size = 0

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        previous: Optional[Node] = None
        node = self.head
        self._tail = node
        while node is not None:
            following = node.next
            node.next = previous
            previous = node
            node = following
        self.head = previous