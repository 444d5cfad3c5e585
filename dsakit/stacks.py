"""Bounded array-backed and unbounded linked stacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional


class StackOverflow(Exception):
    """Raised when pushing onto a full stack."""


class StackUnderflow(Exception):
    """Raised when popping from or reading the top of an empty stack."""


class ArrayStack:
    """A stack holding at most ``size`` items."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        if self.is_full():
            raise StackOverflow(f"stack of size {self.size} is full")
        self._items.append(x)

    def pop(self) -> Any:
        if self.is_empty():
            raise StackUnderflow("pop from an empty stack")
        return self._items.pop()

    def peek(self, index: int) -> Any:
        """Return the item at 1-based position ``index`` counted from the top."""
        if not 1 <= index <= len(self._items):
            raise IndexError(f"invalid index {index} for a stack of {len(self)} items")
        return self._items[-index]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.size

    def top(self) -> Any:
        if self.is_empty():
            raise StackUnderflow("empty stack has no top")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Link:
    data: Any
    next: Optional["_Link"]


class LinkedStack:
    """An unbounded stack built from linked nodes."""

    def __init__(self) -> None:
        self._head: Optional[_Link] = None
        self._count = 0

    def push(self, x: Any) -> None:
        self._head = _Link(x, self._head)
        self._count += 1

    def pop(self) -> Any:
        if self._head is None:
            raise StackUnderflow("pop from an empty stack")
        node = self._head
        self._head = node.next
        self._count -= 1
        return node.data

    def top(self) -> Any:
        if self._head is None:
            raise StackUnderflow("empty stack has no top")
        return self._head.data

    def is_empty(self) -> bool:
        return self._head is None

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._count