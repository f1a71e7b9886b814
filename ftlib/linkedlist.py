"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its first node as ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the front and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the back and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]]) -> None:
        """Pass each value to ``delete`` from front to back and empty the list.

        When ``delete`` is ``None`` the list is left as it is.
        """
        if delete is None:
            return
        while self.head is not None:
            node = self.head
            self.head = node.next
            delete(node.content)
            node.next = None

    def for_each(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on every value in order; ``None`` does nothing."""
        if f is None:
            return
        for node in self._nodes():
            f(node.content)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list of ``f(value)`` for each value.

        Results that are ``None`` are left out. The list itself is unchanged.
        """
        result = LinkedList()
        for node in self._nodes():
            mapped = f(node.content)
            if mapped is not None:
                result.add_back(mapped)
        return result

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"