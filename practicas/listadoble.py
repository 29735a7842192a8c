"""Doubly linked list with pluggable comparison and formatting."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

Compare = Callable[[Any, Any], int]
Printer = Callable[[Any], str]


class _Node:
    __slots__ = ("data", "next", "prev")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: _Node | None = None
        self.prev: _Node | None = None


class DoublyLinkedList:
    """A doubly linked list; ``compare`` orders ``insert_sorted`` and is the default for lookups."""

    def __init__(self, compare: Compare | None = None, printer: Printer = str) -> None:
        self.compare = compare
        self.printer = printer
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def _pick(self, compare: Compare | None) -> Compare:
        chosen = compare if compare is not None else self.compare
        if chosen is None:
            raise TypeError("no comparison function given")
        return chosen

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._count -= 1
        return node.data

    def _link_before(self, item: Any, successor: _Node | None) -> None:
        new = _Node(item)
        if successor is None:
            new.prev = self._tail
            if self._tail is None:
                self._head = new
            else:
                self._tail.next = new
            self._tail = new
        else:
            new.next = successor
            new.prev = successor.prev
            if successor.prev is None:
                self._head = new
            else:
                successor.prev.next = new
            successor.prev = new
        self._count += 1

    def _node_at(self, pos: int) -> _Node:
        node = self._head
        for _ in range(pos):
            node = node.next
        return node

    def clear(self) -> None:
        """Remove every element."""
        self._head = self._tail = None
        self._count = 0

    def remove(self, item: Any, compare: Compare | None = None) -> Any:
        """Remove and return the first element equal to ``item``; raise ValueError if absent."""
        compare = self._pick(compare)
        node = self._head
        while node is not None:
            if compare(item, node.data) == 0:
                return self._unlink(node)
            node = node.next
        raise ValueError("item not in list")

    def find(self, item: Any, compare: Compare | None = None) -> Any:
        """Return the first element equal to ``item``, or None."""
        compare = self._pick(compare)
        for data in self:
            if compare(item, data) == 0:
                return data
        return None

    def insert_sorted(self, item: Any) -> None:
        """Insert before the first element that ``item`` compares less than."""
        compare = self._pick(None)
        node = self._head
        while node is not None and compare(item, node.data) >= 0:
            node = node.next
        self._link_before(item, node)

    def append(self, item: Any) -> None:
        """Add ``item`` at the end."""
        self._link_before(item, None)

    def prepend(self, item: Any) -> None:
        """Add ``item`` at the start."""
        self._link_before(item, self._head)

    def insert_at(self, item: Any, pos: int) -> None:
        """Insert ``item`` so that it ends up at index ``pos`` (0 to len inclusive)."""
        if not 0 <= pos <= self._count:
            raise IndexError("insert position out of range")
        successor = None if pos == self._count else self._node_at(pos)
        self._link_before(item, successor)

    def delete_at(self, pos: int) -> Any:
        """Remove and return the element at index ``pos``."""
        if not 0 <= pos < self._count:
            raise IndexError("delete position out of range")
        node = self._tail if pos == self._count - 1 else self._node_at(pos)
        return self._unlink(node)

    def reorder(self, compare: Compare) -> None:
        """Rebuild the list in ``compare`` order; the list's own ordering stays as it was."""
        items = list(self)
        self.clear()
        own = self.compare
        self.compare = compare
        try:
            for item in items:
                self.insert_sorted(item)
        finally:
            self.compare = own

    def show(self, ascending: bool = True, stream: TextIO | None = None) -> None:
        """Write the list front to back (or back to front) as ``Lista[n]:  a-> b->NULL``."""
        stream = stream if stream is not None else sys.stdout
        items = iter(self) if ascending else reversed(self)
        parts = [f"\n Lista[{self._count}]: "]
        parts.extend(f" {self.printer(data)}->" for data in items)
        parts.append("NULL\n")
        stream.write("".join(parts))