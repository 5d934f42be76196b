"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Release = Optional[Callable[[Any], None]]


@dataclass(eq=False)
class Node:
    """One cell of a :class:`LinkedList`, holding a value and the next cell."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list that keeps its nodes reachable for removal by identity."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        for item in items or ():
            self.push_back(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None when the list is empty."""
        return self._head

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, value: Any) -> Node:
        """Insert ``value`` at the front and return its node."""
        node = Node(value, self._head)
        self._head = node
        return node

    def push_back(self, value: Any) -> Node:
        """Append ``value`` at the end and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, release: Release = None) -> None:
        """Remove every node, passing each value to ``release`` in order."""
        node = self._head
        self._head = None
        while node is not None:
            following = node.next
            if release is not None:
                release(node.value)
            node.next = None
            node = following

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every value, front to back."""
        for value in self:
            func(value)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func(value)`` for every value, in order."""
        return LinkedList(func(value) for value in self)

    def _unlink(self, match: Callable[[Node], bool], release: Release) -> bool:
        previous: Optional[Node] = None
        for node in self._nodes():
            if match(node):
                if previous is None:
                    self._head = node.next
                else:
                    previous.next = node.next
                node.next = None
                if release is not None:
                    release(node.value)
                return True
            previous = node
        return False

    def remove_node(self, node: Node, release: Release = None) -> bool:
        """Unlink ``node`` itself; True if it was part of this list."""
        return self._unlink(lambda current: current is node, release)

    def remove_value(self, value: Any, release: Release = None) -> bool:
        """Unlink the first node whose value equals ``value``; True if one was found."""
        return self._unlink(lambda current: current.value == value, release)

    def sorted(self, compare: Callable[[Any, Any], int]) -> "LinkedList":
        """A new list of the values ordered by insertion using ``compare``.

        ``compare(a, b)`` returns a negative number, zero or a positive
        number as ``a`` sorts before, alongside or after ``b``.
        """
        result = LinkedList()
        for value in self:
            node = Node(value)
            head = result._head
            if head is None or compare(head.value, value) > 0:
                node.next = head
                result._head = node
                continue
            current = head
            while current.next is not None and compare(current.next.value, value) < 0:
                current = current.next
            node.next = current.next
            current.next = node
        return result