"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: ListNode | None = None


class LinkedList:
    """A singly linked list that keeps its nodes reachable from ``head``."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: ListNode | None = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> ListNode:
        """Insert ``content`` at the front and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> ListNode:
        """Append ``content`` at the end and return its node."""
        node = ListNode(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> ListNode | None:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def for_each(self, func: Callable[[Any], object]) -> None:
        """Call ``func`` on the content of every node, front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding ``func(content)`` for every node."""
        if func is None:
            raise TypeError("func must be callable")
        return LinkedList(func(content) for content in self)

    def clear(self, on_delete: Callable[[Any], object] | None = None) -> None:
        """Remove every node, passing each content to ``on_delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if on_delete is not None:
                on_delete(node.content)
            node.next = None
            node = following
            self.head = node