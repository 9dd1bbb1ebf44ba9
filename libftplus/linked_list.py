"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["Node", "LinkedList"]


@dataclass(eq=False)
class Node:
    """One link of a LinkedList: its content and the node after it."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list whose head is the first node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert a new node holding *content* at the front; return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append a new node holding *content* at the end; return it."""
        node = Node(content)
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def clear(self, delete: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each content to *delete* first, front to back."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def for_each(self, f: Callable[[Any], object]) -> None:
        """Call *f* on the content of every node, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], object] | None = None,
    ) -> LinkedList:
        """Return a new list holding ``f(content)`` for each node.

        If *f* raises, the contents produced so far are passed to *delete*
        and the exception propagates.
        """
        mapped: list[Any] = []
        try:
            for content in self:
                mapped.append(f(content))
        except BaseException:
            if delete is not None:
                for content in mapped:
                    delete(content)
            raise
        return LinkedList(mapped)