"""Singly linked list with pluggable comparison and formatting."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO

Compare = Callable[[Any, Any], int]
Printer = Callable[[Any], str]


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: _Node | None = None) -> None:
        self.data = data
        self.next = next


class LinkedList:
    """A singly linked list; ``compare`` orders ``insert_sorted`` and is the default for lookups."""

    def __init__(self, compare: Compare | None = None, printer: Printer = str) -> None:
        self.compare = compare
        self.printer = printer
        self._head: _Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def _pick(self, compare: Compare | None) -> Compare:
        chosen = compare if compare is not None else self.compare
        if chosen is None:
            raise TypeError("no comparison function given")
        return chosen

    def clear(self) -> None:
        """Remove every element."""
        self._head = None
        self._count = 0

    def remove(self, item: Any, compare: Compare | None = None) -> Any:
        """Remove and return the first element equal to ``item``; raise ValueError if absent."""
        compare = self._pick(compare)
        prev = None
        node = self._head
        while node is not None:
            if compare(item, node.data) == 0:
                if prev is None:
                    self._head = node.next
                else:
                    prev.next = node.next
                self._count -= 1
                return node.data
            prev, node = node, node.next
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
        prev = None
        node = self._head
        while node is not None and compare(item, node.data) >= 0:
            prev, node = node, node.next
        new = _Node(item, node)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        self._count += 1

    def append(self, item: Any) -> None:
        """Add ``item`` at the end."""
        new = _Node(item)
        if self._head is None:
            self._head = new
        else:
            node = self._head
            while node.next is not None:
                node = node.next
            node.next = new
        self._count += 1

    def prepend(self, item: Any) -> None:
        """Add ``item`` at the start."""
        self._head = _Node(item, self._head)
        self._count += 1

    def insert_at(self, item: Any, pos: int) -> None:
        """Insert ``item`` so that it ends up at index ``pos`` (0 to len inclusive)."""
        if not 0 <= pos <= self._count:
            raise IndexError("insert position out of range")
        if pos == 0:
            self.prepend(item)
            return
        prev = self._head
        for _ in range(pos - 1):
            prev = prev.next
        prev.next = _Node(item, prev.next)
        self._count += 1

    def delete_at(self, pos: int) -> Any:
        """Remove and return the element at index ``pos``."""
        if not 0 <= pos < self._count:
            raise IndexError("delete position out of range")
        if pos == 0:
            node = self._head
            self._head = node.next
        else:
            prev = self._head
            for _ in range(pos - 1):
                prev = prev.next
            node = prev.next
            prev.next = node.next
        self._count -= 1
        return node.data

    def reorder(self, compare: Compare) -> None:
        """Rebuild the list in ``compare`` order; ``compare`` becomes the list's ordering."""
        items = list(self)
        self.clear()
        self.compare = compare
        for item in items:
            self.insert_sorted(item)

    def show(self, stream: TextIO | None = None) -> None:
        """Write the list as ``Lista[n]:  a ->  b -> NULL``."""
        stream = stream if stream is not None else sys.stdout
        parts = [f"\n Lista[{self._count}]: "]
        parts.extend(f" {self.printer(data)} -> " for data in self)
        parts.append("NULL\n")
        stream.write("".join(parts))