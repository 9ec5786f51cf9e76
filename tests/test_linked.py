import pytest

from ftlib.linked import LinkedList, Node


def test_empty_list_has_no_nodes():
    items = LinkedList()
    assert len(items) == 0
    assert list(items) == []
    assert items.last() is None
    assert not items


def test_add_back_keeps_order():
    items = LinkedList()
    items.add_back("a")
    items.add_back("b")
    items.add_back("c")
    assert list(items) == ["a", "b", "c"]
    assert len(items) == 3


def test_add_front_reverses_order():
    items = LinkedList()
    for value in ("a", "b", "c"):
        items.add_front(value)
    assert list(items) == ["c", "b", "a"]


def test_add_returns_the_linked_node():
    items = LinkedList()
    first = items.add_back(1)
    second = items.add_back(2)
    assert isinstance(first, Node)
    assert items.head is first
    assert first.next is second
    assert second.next is None


def test_constructor_takes_contents():
    items = LinkedList([1, 2, 3])
    assert list(items) == [1, 2, 3]


def test_last_returns_tail_node():
    items = LinkedList([1, 2, 3])
    assert items.last().content == 3
    items.add_back(4)
    assert items.last().content == 4


def test_clear_calls_delete_for_each_in_order():
    seen = []
    items = LinkedList(["x", "y", "z"])
    items.clear(seen.append)
    assert seen == ["x", "y", "z"]
    assert items.head is None
    assert len(items) == 0


def test_clear_without_delete_still_empties():
    items = LinkedList([1, 2])
    items.clear()
    assert list(items) == []


def test_delete_first_removes_head():
    seen = []
    items = LinkedList([1, 2, 3])
    items.delete_first(seen.append)
    assert seen == [1]
    assert list(items) == [2, 3]


def test_delete_first_on_empty_list_does_nothing():
    seen = []
    items = LinkedList()
    items.delete_first(seen.append)
    assert seen == []
    assert len(items) == 0


def test_each_visits_every_content():
    seen = []
    items = LinkedList([5, 6, 7])
    items.each(seen.append)
    assert seen == [5, 6, 7]


def test_map_builds_new_list_and_leaves_original():
    items = LinkedList([1, 2, 3])
    doubled = items.map(lambda value: value * 2)
    assert list(doubled) == [value * 2 for value in [1, 2, 3]]
    assert list(items) == [1, 2, 3]
    assert doubled is not items


def test_map_of_empty_list_is_empty():
    assert len(LinkedList().map(str)) == 0


def test_map_failure_deletes_partial_result_and_raises():
    deleted = []

    def convert(value):
        if value == 3:
            raise ValueError("bad value")
        return value * 10

    items = LinkedList([1, 2, 3, 4])
    with pytest.raises(ValueError):
        items.map(convert, deleted.append)
    assert deleted == [1 * 10, 2 * 10]
    assert list(items) == [1, 2, 3, 4]