import random

import pytest

from dsakit.heap import delete, heap_sort, insert


def _is_max_heap(heap, size):
    return all(heap[i // 2] >= heap[i] for i in range(2, size + 1))


def _build(values):
    heap = [None, *values]
    for n in range(2, len(values) + 1):
        insert(heap, n)
    return heap


def test_insert_builds_heap():
    values = [10, 20, 30, 25, 5, 40, 35]
    heap = _build(values)
    assert _is_max_heap(heap, len(values))
    assert heap[1] == max(values)
    assert sorted(heap[1:]) == sorted(values)


def test_insert_two():
    heap = [None, 10, 20]
    insert(heap, 2)
    assert heap == [None, 20, 10]


def test_delete_returns_max_and_keeps_heap():
    values = [10, 20, 30, 25, 5, 40, 35]
    heap = _build(values)
    size = len(values)
    top = delete(heap, size)
    assert top == max(values)
    assert heap[size] == top
    assert _is_max_heap(heap, size - 1)


def test_delete_empty():
    with pytest.raises(IndexError):
        delete([None], 0)


def test_heap_sort_source_example():
    values = [10, 20, 30, 25, 5, 40, 35]
    assert heap_sort(values) == sorted(values)


@pytest.mark.parametrize("seed", range(5))
def test_heap_sort_random(seed):
    rng = random.Random(seed)
    values = [rng.randint(-50, 50) for _ in range(rng.randint(0, 40))]
    assert heap_sort(values) == sorted(values)


def test_heap_sort_empty_and_single():
    assert heap_sort([]) == []
    assert heap_sort([7]) == [7]