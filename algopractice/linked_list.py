"""A singly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link holding ``data`` and a reference to the next node."""

    data: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list built from an iterable of values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail: Optional[Node] = None
        for value in values:
            node = Node(value)
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

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __contains__(self, data: object) -> bool:
        return any(value == data for value in self)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self)

    def remove(self, data: Any) -> None:
        """Remove the first node holding ``data``; raise ValueError if there is none."""
        previous: Optional[Node] = None
        for node in self._nodes():
            if node.data == data:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                node.next = None
                return
            previous = node
        raise ValueError(f"{data!r} is not in the list")