import pytest

from minishell.linkedlist import LinkedList, Node


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_init_from_items_keeps_order():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_last_returns_tail_node():
    lst = LinkedList([1, 2, 3])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 3
    assert tail.next is None


def test_push_back_returns_new_tail():
    lst = LinkedList([1])
    node = lst.push_back(5)
    assert lst.last() is node


def test_clear_calls_delete_on_each():
    deleted = []
    lst = LinkedList(["x", "y"])
    lst.clear(deleted.append)
    assert deleted == ["x", "y"]
    assert len(lst) == 0


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []


def test_iterate_visits_in_order():
    seen = []
    LinkedList([3, 1, 2]).iterate(seen.append)
    assert seen == [3, 1, 2]


def test_map_builds_new_list():
    original = LinkedList(["a", "b"])
    mapped = original.map(str.upper)
    assert list(mapped) == ["A", "B"]
    assert list(original) == ["a", "b"]


def test_map_failure_deletes_partial_results():
    deleted = []

    def f(x):
        if x == 3:
            raise ValueError("boom")
        return x * 10

    with pytest.raises(ValueError):
        LinkedList([1, 2, 3]).map(f, deleted.append)
    assert deleted == [10, 20]


def test_len_matches_iteration():
    lst = LinkedList(range(7))
    assert len(lst) == len(list(lst))