import pytest

from algokit.deque_array import CircularDeque


def test_documented_driver_session():
    dq = CircularDeque(5)
    for num in (1, 2, 3, 4, 5):
        dq.insert_front(num)
    assert list(dq) == [5, 4, 3, 2, 1]
    assert dq.front() == 5
    assert dq.rear() == 1
    dq.delete_front()
    assert list(dq) == [4, 3, 2, 1]
    dq.delete_rear()
    assert list(dq) == [4, 3, 2]
    dq.insert_rear(10)
    assert list(dq) == [4, 3, 2, 10]


def test_full_and_overflow():
    dq = CircularDeque(3)
    for num in (1, 2, 3):
        dq.insert_rear(num)
    assert dq.is_full()
    with pytest.raises(OverflowError):
        dq.insert_front(0)
    with pytest.raises(OverflowError):
        dq.insert_rear(4)
    assert list(dq) == [1, 2, 3]


def test_empty_and_underflow():
    dq = CircularDeque(2)
    assert dq.is_empty()
    with pytest.raises(IndexError):
        dq.delete_front()
    with pytest.raises(IndexError):
        dq.delete_rear()
    with pytest.raises(IndexError):
        dq.front()
    with pytest.raises(IndexError):
        dq.rear()


def test_delete_returns_removed_values_and_empties():
    dq = CircularDeque(4)
    dq.insert_rear("a")
    dq.insert_front("b")
    assert dq.delete_rear() == "a"
    assert dq.delete_front() == "b"
    assert dq.is_empty()
    assert list(dq) == []


def test_reuse_after_emptying():
    dq = CircularDeque(2)
    dq.insert_front(1)
    dq.delete_front()
    dq.insert_rear(7)
    dq.insert_front(6)
    assert list(dq) == [6, 7]
    assert dq.is_full()


def test_wraps_around_both_ends():
    dq = CircularDeque(4)
    for num in range(4):
        dq.insert_rear(num)
    dq.delete_front()
    dq.delete_front()
    dq.insert_rear(4)
    dq.insert_rear(5)
    assert list(dq) == [2, 3, 4, 5]
    assert dq.front() == 2
    assert dq.rear() == 5


@pytest.mark.parametrize("size", [0, 101, -3])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        CircularDeque(size)