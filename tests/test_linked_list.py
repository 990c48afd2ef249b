import io

import pytest

from algokit.linked_list import SinglyLinkedList, main


def test_insert_front_and_append_order():
    items = SinglyLinkedList()
    items.insert_front(2)
    items.insert_front(1)
    items.append(3)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_constructor_keeps_order():
    assert list(SinglyLinkedList([4, 5, 6])) == [4, 5, 6]


def test_insert_after_position():
    items = SinglyLinkedList([1, 2, 3])
    items.insert_after(0, 9)
    items.insert_after(3, 8)
    assert list(items) == [1, 9, 2, 3, 8]


@pytest.mark.parametrize("location", [3, -1, 10])
def test_insert_after_invalid_location(location):
    items = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        items.insert_after(location, 7)
    assert list(items) == [1, 2, 3]


def test_insert_after_on_empty_list():
    with pytest.raises(IndexError):
        SinglyLinkedList().insert_after(0, 1)


def test_delete_front_and_last():
    items = SinglyLinkedList([1, 2, 3])
    assert items.delete_front() == 1
    assert items.delete_last() == 3
    assert list(items) == [2]
    assert items.delete_last() == 2
    assert len(items) == 0


def test_delete_on_empty_raises():
    items = SinglyLinkedList()
    with pytest.raises(IndexError):
        items.delete_front()
    with pytest.raises(IndexError):
        items.delete_last()


def test_delete_after_removes_node_at_location():
    items = SinglyLinkedList([10, 20, 30, 40])
    assert items.delete_after(2) == 30
    assert list(items) == [10, 20, 40]
    assert items.delete_after(0) == 10
    assert list(items) == [20, 40]


def test_delete_after_out_of_range():
    items = SinglyLinkedList([1, 2])
    with pytest.raises(IndexError):
        items.delete_after(2)
    assert len(items) == 2


def test_search_returns_all_positions():
    items = SinglyLinkedList([5, 1, 5, 2])
    assert items.search(5) == [0, 2]
    assert items.search(7) == []


def test_reverse():
    items = SinglyLinkedList([1, 2, 3, 4])
    items.reverse()
    assert list(items) == [4, 3, 2, 1]


def test_remove_smaller_than_right_documented_example():
    items = SinglyLinkedList([12, 15, 10, 11, 5, 6, 2, 3])
    items.remove_smaller_than_right()
    assert list(items) == [15, 11, 6, 3]
    assert len(items) == 4


def test_remove_smaller_than_right_result_is_non_increasing():
    items = SinglyLinkedList([3, 1, 4, 1, 5, 9, 2, 6])
    items.remove_smaller_than_right()
    values = list(items)
    assert values == sorted(values, reverse=True)
    assert values[-1] == 6


def test_remove_smaller_than_right_on_empty():
    items = SinglyLinkedList()
    items.remove_smaller_than_right()
    assert list(items) == []


def test_main_menu_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n5\n1\n7\n8\n9\n"))
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    start = lines.index("printing values . . . . .")
    assert lines[start + 1:start + 3] == ["7", "5"]


def test_main_reports_empty_list(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n8\n"))
    assert main() == 0
    out = capsys.readouterr().out
    assert "List is empty" in out
    assert "Nothing to print" in out