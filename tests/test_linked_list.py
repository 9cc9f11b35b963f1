import pytest

from fdfview.libft.linked_list import LinkedList, Node


def test_items_keep_their_order():
    items = [3, 1, 2]
    assert list(LinkedList(items)) == items


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None
    assert lst.head is None


def test_len_counts_nodes():
    items = ["a", "b", "c", "d"]
    assert len(LinkedList(items)) == len(items)


def test_add_front_puts_value_first():
    lst = LinkedList([2, 3])
    node = lst.add_front(1)
    assert lst.head is node
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_add_back_puts_value_last():
    lst = LinkedList([1, 2])
    node = lst.add_back(3)
    assert lst.last() is node
    assert list(lst) == [1, 2, 3]


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    node = lst.add_front("x")
    assert lst.last() is node
    assert lst.head is node


def test_last_returns_final_node():
    lst = LinkedList(["a", "b", "c"])
    last = lst.last()
    assert last.content == "c"
    assert last.next is None


def test_nodes_are_linked():
    lst = LinkedList([1, 2])
    assert lst.head.content == 1
    assert lst.head.next.content == 2
    assert lst.head.next.next is None


def test_node_defaults_to_no_successor():
    node = Node("value")
    assert node.next is None
    assert node.content == "value"


def test_clear_calls_delete_in_order_and_empties():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    deleted = []
    lst.clear(deleted.append)
    assert deleted == items
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_clear_without_delete():
    lst = LinkedList([1, 2])
    lst.clear()
    assert len(lst) == 0


def test_list_is_usable_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.add_back(5)
    assert list(lst) == [5]


def test_for_each_visits_every_value():
    items = [4, 5, 6]
    seen = []
    LinkedList(items).for_each(seen.append)
    assert seen == items


def test_for_each_with_none_does_nothing():
    lst = LinkedList([1, 2])
    lst.for_each(None)
    assert list(lst) == [1, 2]


def test_map_builds_new_list():
    items = [1, 2, 3]
    lst = LinkedList(items)
    mapped = lst.map(str)
    assert list(mapped) == [str(i) for i in items]
    assert list(lst) == items
    assert mapped is not lst


def test_map_empty_list():
    mapped = LinkedList().map(str)
    assert len(mapped) == 0


def test_map_failure_deletes_produced_values():
    def f(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    deleted = []
    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(f, deleted.append)
    assert deleted == [10, 20]