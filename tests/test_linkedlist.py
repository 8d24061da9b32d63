import pytest

from sigtalk.linkedlist import LinkedList, Node

ITEMS = ["first node", "second node", "third node"]


def test_new_list_holds_items_in_order():
    lst = LinkedList(ITEMS)
    assert list(lst) == ITEMS
    assert len(lst) == 3


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.head is None


def test_add_front_puts_value_first():
    lst = LinkedList(["node 2"])
    lst.add_front("node 1")
    assert list(lst) == ["node 1", "node 2"]
    assert lst.head.content == "node 1"
    assert lst.head.next.content == "node 2"


def test_add_back_appends():
    lst = LinkedList()
    for item in ITEMS:
        lst.add_back(item)
    assert list(lst) == ITEMS
    assert lst.last() == "third node"


def test_add_front_on_empty_sets_last():
    lst = LinkedList()
    lst.add_front("only")
    assert lst.last() == "only"
    lst.add_back("after")
    assert list(lst) == ["only", "after"]


def test_last_of_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_size_counts_nodes():
    lst = LinkedList(ITEMS)
    lst.add_front("zero")
    lst.add_back("four")
    assert len(lst) == len(ITEMS) + 2


def test_pop_front_calls_delete_and_returns_value():
    deleted = []
    lst = LinkedList(ITEMS)
    value = lst.pop_front(deleted.append)
    assert value == "first node"
    assert deleted == ["first node"]
    assert list(lst) == ITEMS[1:]


def test_pop_front_without_delete():
    lst = LinkedList(["a"])
    assert lst.pop_front() == "a"
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.last()


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_value_in_order():
    deleted = []
    lst = LinkedList(ITEMS)
    lst.clear(deleted.append)
    assert deleted == ITEMS
    assert lst.head is None
    assert len(lst) == 0


def test_list_usable_after_clear():
    lst = LinkedList(ITEMS)
    lst.clear()
    lst.add_back("x")
    assert list(lst) == ["x"]
    assert lst.last() == "x"


def test_for_each_visits_every_value():
    seen = []
    LinkedList(ITEMS).for_each(seen.append)
    assert seen == ITEMS


def test_node_links():
    second = Node("second node")
    first = Node("first node", second)
    assert first.next is second
    assert second.next is None