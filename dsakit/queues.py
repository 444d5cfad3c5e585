"""Array, circular and linked queues."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator


class QueueFull(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueEmpty(Exception):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A linear queue over a fixed array of ``size`` slots.

    Slots freed by dequeuing are not reused: after ``size`` enqueues the
    queue reports full.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.size = size
        self._slots: list[Any] = []
        self._front = 0

    def enqueue(self, x: Any) -> None:
        if len(self._slots) == self.size:
            raise QueueFull(f"queue of size {self.size} is full")
        self._slots.append(x)

    def dequeue(self) -> Any:
        if self._front == len(self._slots):
            raise QueueEmpty("dequeue from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue:
    """A queue over a ring of ``size`` slots, one of which is always left empty."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    @property
    def capacity(self) -> int:
        return self.size - 1

    def enqueue(self, x: Any) -> None:
        following = (self._rear + 1) % self.size
        if following == self._front:
            raise QueueFull(f"queue of capacity {self.capacity} is full")
        self._rear = following
        self._slots[self._rear] = x

    def dequeue(self) -> Any:
        if self._front == self._rear:
            raise QueueEmpty("dequeue from an empty queue")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value

    def __iter__(self) -> Iterator[Any]:
        for step in range(1, len(self) + 1):
            yield self._slots[(self._front + step) % self.size]

    def __len__(self) -> int:
        return (self._rear - self._front) % self.size


class LinkedQueue:
    """An unbounded queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, x: Any) -> None:
        self._items.append(x)

    def dequeue(self) -> Any:
        if not self._items:
            raise QueueEmpty("dequeue from an empty queue")
        return self._items.popleft()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)