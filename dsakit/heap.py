"""A max-heap kept in a 1-based list, and heap sort built on it."""

from __future__ import annotations

from typing import Iterable


def insert(heap: list, n: int) -> None:
    """Sift the element at heap[n] up into the max-heap heap[1:n]."""
    value = heap[n]
    i = n
    while i > 1 and value > heap[i // 2]:
        heap[i] = heap[i // 2]
        i //= 2
    heap[i] = value


def delete(heap: list, n: int):
    """Remove the maximum of heap[1:n+1], park it at heap[n] and return it."""
    if n < 1:
        raise IndexError("delete from an empty heap")
    top = heap[1]
    heap[1], heap[n] = heap[n], top
    i, j = 1, 2
    while j <= n - 1:
        if j < n - 1 and heap[j + 1] > heap[j]:
            j += 1
        if heap[i] < heap[j]:
            heap[i], heap[j] = heap[j], heap[i]
            i, j = j, 2 * j
        else:
            break
    return top


def heap_sort(values: Iterable) -> list:
    """Return the values in ascending order, sorted with the max-heap."""
    items = list(values)
    heap = [None, *items]
    size = len(items)
    for n in range(2, size + 1):
        insert(heap, n)
    for n in range(size, 1, -1):
        delete(heap, n)
    return heap[1:]