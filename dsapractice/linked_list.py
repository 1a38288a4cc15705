"""A singly linked list of integers with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class _Node:
    data: int
    next: Optional["_Node"] = None


class LinkedList:
    """Singly linked list; positions are counted from 1."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _node_at(self, position: int) -> _Node:
        for index, node in enumerate(self._nodes(), 1):
            if index == position:
                return node
        raise IndexError(f"position {position} out of range")

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value}->" for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    @property
    def head(self) -> int:
        """Value of the first node."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.data

    @property
    def tail(self) -> int:
        """Value of the last node."""
        if self._tail is None:
            raise IndexError("list is empty")
        return self._tail.data

    def insert_at_head(self, data: int) -> None:
        """Put a value at the front."""
        self._head = _Node(data, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def insert_at_tail(self, data: int) -> None:
        """Put a value at the end."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at_position(self, position: int, data: int) -> None:
        """Insert so that the value ends up at ``position`` (1 to len + 1)."""
        if not 1 <= position <= self._size + 1:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            self.insert_at_head(data)
        elif position == self._size + 1:
            self.insert_at_tail(data)
        else:
            previous = self._node_at(position - 1)
            previous.next = _Node(data, previous.next)
            self._size += 1

    def delete(self, position: int) -> int:
        """Remove the node at ``position`` and return its value."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} out of range")
        if position == 1:
            removed = self._head
            self._head = removed.next
            if self._head is None:
                self._tail = None
        else:
            previous = self._node_at(position - 1)
            removed = previous.next
            previous.next = removed.next
            if removed is self._tail:
                self._tail = previous
        removed.next = None
        self._size -= 1
        return removed.data

    def search(self, data: int) -> Optional[int]:
        """Return the position of the first node holding ``data``, or None."""
        for position, value in enumerate(self, 1):
            if value == data:
                return position
        return None