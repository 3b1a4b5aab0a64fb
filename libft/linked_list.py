"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a LinkedList: its content and the node after it."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list supporting insertion at both ends.

    Iterating the list yields contents from front to back; ``len`` counts
    the nodes.
    """

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.push_back(content)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> Node:
        """Insert a new node holding ``content`` at the front; return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append a new node holding ``content`` at the back; return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The final node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, calling ``delete`` on each content in order."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def remove_first(self, delete: Optional[Callable[[Any], Any]] = None) -> Any:
        """Unlink the front node, calling ``delete`` on its content.

        Returns the removed content, or None when the list is empty.
        """
        node = self.head
        if node is None:
            return None
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on each content from front to back."""
        for content in self:
            func(content)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """A new list holding ``func(content)`` for each content, in order."""
        return LinkedList(func(content) for content in self)