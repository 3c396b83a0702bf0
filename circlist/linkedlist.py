"""A circular doubly linked list of values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One element of a circular list; a lone node links to itself."""

    data: Any
    prev: "Node" = field(init=False, repr=False)
    next: "Node" = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.prev = self
        self.next = self


class CircularList:
    """A circular doubly linked list with 1-based positional access."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.data for node in self._nodes())

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def render(self) -> str:
        """Return the list as a single line, closed by a marker for the wrap-around."""
        if self._head is None:
            return ""
        return "".join(f"{data} <-> " for data in self) + "(Head->next)"

    # -- internal linking -------------------------------------------------

    def _link_before(self, anchor: Node, data: Any) -> Node:
        new = Node(data)
        new.prev = anchor.prev
        new.next = anchor
        anchor.prev.next = new
        anchor.prev = new
        self._size += 1
        return new

    def _unlink(self, node: Node) -> Any:
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        node.prev = node.next = node
        self._size -= 1
        return node.data

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self._size:
            raise IndexError(
                f"position {position} out of range for list of length {self._size}"
            )

    def _node_at(self, position: int) -> Node:
        self._check_position(position)
        for index, node in enumerate(self._nodes(), start=1):
            if index == position:
                return node
        raise IndexError(position)

    def _find(self, target: Any) -> Node:
        for node in self._nodes():
            if node.data == target:
                return node
        raise ValueError(f"{target!r} is not in the list")

    # -- public operations ------------------------------------------------

    def push_front(self, data: Any) -> None:
        """Insert ``data`` as the new first element."""
        if self._head is None:
            self._head = Node(data)
            self._size = 1
        else:
            self._head = self._link_before(self._head, data)

    def push_back(self, data: Any) -> None:
        """Insert ``data`` as the new last element."""
        if self._head is None:
            self._head = Node(data)
            self._size = 1
        else:
            self._link_before(self._head, data)

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._head)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("pop from empty list")
        return self._unlink(self._head.prev)

    def insert_at(self, data: Any, position: int) -> None:
        """Insert ``data`` so that it occupies 1-based ``position``."""
        anchor = self._node_at(position)
        new = self._link_before(anchor, data)
        if position == 1:
            self._head = new

    def insert_before(self, data: Any, target: Any) -> None:
        """Insert ``data`` before the first element equal to ``target``."""
        anchor = self._find(target)
        new = self._link_before(anchor, data)
        if anchor is self._head:
            self._head = new

    def insert_after(self, data: Any, target: Any) -> None:
        """Insert ``data`` after the first element equal to ``target``."""
        anchor = self._find(target)
        self._link_before(anchor.next, data)

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at 1-based ``position``."""
        return self._unlink(self._node_at(position))

    def remove(self, target: Any) -> None:
        """Remove the first element equal to ``target``."""
        self._unlink(self._find(target))