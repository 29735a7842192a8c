"""Linked stack with optional capacity, formatting and release callbacks."""

from __future__ import annotations

import sys
from typing import Any, Callable, Iterator, TextIO


class StackOverflow(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when popping from an empty stack."""


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: _Node | None) -> None:
        self.data = data
        self.next = next


class Stack:
    """A LIFO stack; a negative ``capacity`` means no limit."""

    def __init__(
        self,
        capacity: int = -1,
        printer: Callable[[Any], str] = str,
        release: Callable[[Any], None] | None = None,
    ) -> None:
        self.capacity = capacity
        self.printer = printer
        self.release = release
        self._top: _Node | None = None
        self._count = 0

    def __len__(self) -> int:
        return self._count

    def _from_top(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def is_full(self) -> bool:
        """True when the stack holds ``capacity`` items."""
        return self._count == self.capacity

    def is_empty(self) -> bool:
        """True when the stack holds nothing."""
        return self._count == 0 and self._top is None

    def push(self, item: Any) -> None:
        """Put ``item`` on top; raise StackOverflow if full."""
        if self.is_full():
            raise StackOverflow("stack is full")
        self._top = _Node(item, self._top)
        self._count += 1

    def pop(self) -> Any:
        """Take the top item off; raise StackUnderflow if empty."""
        if self.is_empty():
            raise StackUnderflow("stack is empty")
        node = self._top
        self._top = node.next
        self._count -= 1
        return node.data

    def show(self, stream: TextIO | None = None) -> None:
        """Write the items from top to bottom."""
        stream = stream if stream is not None else sys.stdout
        lines = [f"\n\nPila [{self._count}]:"]
        lines.extend(f"\n {self.printer(data)}" for data in self._from_top())
        stream.write("".join(lines))

    def show_reversed(self, stream: TextIO | None = None) -> None:
        """Write the items from bottom to top."""
        stream = stream if stream is not None else sys.stdout
        lines = [f"\n\nPila Invertida [{self._count}]:"]
        items = list(self._from_top())
        lines.extend(f"\n {self.printer(data)}" for data in reversed(items))
        stream.write("".join(lines))

    def destroy(self) -> None:
        """Pop every item, handing each to ``release`` when one is set."""
        while not self.is_empty():
            item = self.pop()
            if self.release is not None:
                self.release(item)