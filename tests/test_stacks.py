import pytest

from dsakit.stacks import ArrayStack, LinkedStack, StackOverflow, StackUnderflow

VALUES = [10, 20, 30, 40, 50]


def _filled_array(size=5):
    stack = ArrayStack(size)
    for value in VALUES[:size]:
        stack.push(value)
    return stack


def _filled_linked():
    stack = LinkedStack()
    for value in VALUES:
        stack.push(value)
    return stack


def test_array_stack_pops_in_reverse_order():
    stack = _filled_array()
    popped = [stack.pop() for _ in VALUES]
    assert popped == list(reversed(VALUES))
    assert stack.is_empty()


def test_array_stack_overflow():
    stack = _filled_array()
    assert stack.is_full()
    with pytest.raises(StackOverflow):
        stack.push(60)
    assert len(stack) == len(VALUES)


def test_array_stack_underflow():
    stack = ArrayStack(3)
    with pytest.raises(StackUnderflow):
        stack.pop()
    with pytest.raises(StackUnderflow):
        stack.top()


def test_array_stack_peek_counts_from_top():
    stack = _filled_array()
    assert stack.peek(1) == VALUES[-1]
    assert stack.peek(2) == VALUES[-2]
    assert stack.peek(len(VALUES)) == VALUES[0]


@pytest.mark.parametrize("index", [0, 6, -1])
def test_array_stack_peek_invalid_index(index):
    stack = _filled_array()
    with pytest.raises(IndexError):
        stack.peek(index)


def test_array_stack_iterates_top_to_bottom():
    stack = _filled_array()
    assert list(stack) == list(reversed(VALUES))
    assert stack.top() == VALUES[-1]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ArrayStack(-1)


def test_linked_stack_lifo():
    stack = _filled_linked()
    assert len(stack) == len(VALUES)
    assert stack.top() == VALUES[-1]
    assert [stack.pop() for _ in VALUES] == list(reversed(VALUES))
    assert stack.is_empty()
    assert len(stack) == 0


def test_linked_stack_iteration_matches_array_stack():
    assert list(_filled_linked()) == list(_filled_array())


def test_linked_stack_underflow():
    stack = LinkedStack()
    with pytest.raises(StackUnderflow):
        stack.pop()
    with pytest.raises(StackUnderflow):
        stack.top()