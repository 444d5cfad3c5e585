import pytest

from dsakit.queues import ArrayQueue, CircularQueue, LinkedQueue, QueueEmpty, QueueFull

VALUES = [10, 20, 30, 40, 50]


def test_array_queue_fifo():
    queue = ArrayQueue(5)
    for value in VALUES[:3]:
        queue.enqueue(value)
    assert list(queue) == VALUES[:3]
    assert queue.dequeue() == VALUES[0]
    assert list(queue) == VALUES[1:3]
    assert len(queue) == 2


def test_array_queue_full():
    queue = ArrayQueue(5)
    for value in VALUES:
        queue.enqueue(value)
    with pytest.raises(QueueFull):
        queue.enqueue(60)


def test_array_queue_does_not_reuse_slots():
    queue = ArrayQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    assert [queue.dequeue(), queue.dequeue()] == [1, 2]
    assert len(queue) == 0
    with pytest.raises(QueueFull):
        queue.enqueue(3)


def test_array_queue_empty():
    queue = ArrayQueue(3)
    with pytest.raises(QueueEmpty):
        queue.dequeue()


def test_circular_queue_holds_one_less_than_size():
    queue = CircularQueue(4)
    for value in VALUES[: queue.capacity]:
        queue.enqueue(value)
    assert len(queue) == queue.capacity == queue.size - 1
    with pytest.raises(QueueFull):
        queue.enqueue(99)


def test_circular_queue_wraps_around():
    queue = CircularQueue(3)
    seen = []
    for value in VALUES:
        queue.enqueue(value)
        seen.append(queue.dequeue())
    assert seen == VALUES
    assert len(queue) == 0
    queue.enqueue(VALUES[0])
    queue.enqueue(VALUES[1])
    assert list(queue) == VALUES[:2]


def test_circular_queue_empty_and_bad_size():
    with pytest.raises(QueueEmpty):
        CircularQueue(3).dequeue()
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linked_queue_fifo():
    queue = LinkedQueue()
    for value in VALUES:
        queue.enqueue(value)
    assert list(queue) == VALUES
    assert [queue.dequeue() for _ in VALUES] == VALUES
    assert len(queue) == 0
    with pytest.raises(QueueEmpty):
        queue.dequeue()