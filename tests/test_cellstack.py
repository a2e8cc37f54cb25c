import pytest

from sudokupad.cellstack import CellStack


def test_push_and_pop_are_last_in_first_out():
    stack = CellStack(4)
    stack.push((0, 1))
    stack.push((2, 3))
    stack.push((4, 5))
    assert stack.pop() == (4, 5)
    assert stack.pop() == (2, 3)
    assert stack.pop() == (0, 1)
    assert stack.is_empty()


def test_top_does_not_remove():
    stack = CellStack()
    stack.push((7, 8))
    assert stack.top() == (7, 8)
    assert stack.top() == (7, 8)
    assert len(stack) == 1


def test_push_beyond_capacity_raises_overflow():
    stack = CellStack(2)
    stack.push((0, 0))
    stack.push((1, 1))
    assert stack.is_full()
    with pytest.raises(OverflowError):
        stack.push((2, 2))
    assert len(stack) == 2


def test_pop_from_empty_raises():
    stack = CellStack()
    with pytest.raises(IndexError):
        stack.pop()


def test_top_of_empty_raises():
    stack = CellStack()
    with pytest.raises(IndexError):
        stack.top()


def test_clear_empties_stack():
    stack = CellStack(3)
    stack.push((1, 2))
    stack.push((3, 4))
    stack.clear()
    assert stack.is_empty()
    assert len(stack) == 0
    assert not stack.is_full()


def test_default_capacity():
    stack = CellStack()
    assert stack.capacity == 1024


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        CellStack(-1)


def test_len_tracks_pushes_and_pops():
    stack = CellStack(10)
    for n in range(5):
        stack.push((n, n))
    assert len(stack) == 5
    stack.pop()
    assert len(stack) == 4