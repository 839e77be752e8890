import pytest

from fillit.ft.linkedlist import LinkedList, Node


def test_init_keeps_order_and_length():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    assert list(lst) == items
    assert len(lst) == len(items)


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert lst.head is None


def test_push_front_prepends():
    lst = LinkedList([2, 3])
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_push_front_on_empty_sets_last():
    lst = LinkedList()
    lst.push_front("x")
    assert lst.last() == "x"
    assert list(lst) == ["x"]


def test_append_adds_at_end():
    lst = LinkedList([1])
    lst.append(2)
    lst.append(3)
    assert list(lst) == [1, 2, 3]
    assert lst.last() == 3


def test_at_is_one_based():
    lst = LinkedList(["a", "b", "c"])
    assert lst.at(1) == "a"
    assert lst.at(2) == "b"
    assert lst.at(3) == "c"


@pytest.mark.parametrize("position", [0, 4, -1])
def test_at_out_of_range(position):
    lst = LinkedList(["a", "b", "c"])
    with pytest.raises(IndexError):
        lst.at(position)


def test_at_on_empty_list():
    with pytest.raises(IndexError):
        LinkedList().at(1)


def test_last_on_empty_list():
    with pytest.raises(IndexError):
        LinkedList().last()


def test_pop_front_calls_delete():
    deleted = []
    lst = LinkedList(["a", "b"])
    value = lst.pop_front(deleted.append)
    assert value == "a"
    assert deleted == ["a"]
    assert list(lst) == ["b"]
    assert len(lst) == 1


def test_pop_front_until_empty():
    lst = LinkedList([1, 2])
    assert lst.pop_front() == 1
    assert lst.pop_front() == 2
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.last()
    with pytest.raises(IndexError):
        lst.pop_front()


def test_clear_deletes_every_value_in_order():
    deleted = []
    items = [1, 2, 3]
    lst = LinkedList(items)
    lst.clear(deleted.append)
    assert deleted == items
    assert list(lst) == []
    assert lst.head is None


def test_append_after_clear():
    lst = LinkedList([1, 2])
    lst.clear()
    lst.append(5)
    assert list(lst) == [5]
    assert lst.last() == 5


def test_for_each_visits_nodes_and_can_modify():
    lst = LinkedList([1, 2, 3])
    seen = []

    def bump(node):
        seen.append(node.value)
        node.value = node.value * 10

    lst.for_each(bump)
    assert seen == [1, 2, 3]
    assert list(lst) == [v * 10 for v in seen]


def test_for_each_passes_nodes():
    lst = LinkedList(["only"])
    nodes = []
    lst.for_each(nodes.append)
    assert len(nodes) == 1
    assert isinstance(nodes[0], Node) and nodes[0].value == "only"


def test_map_builds_new_list():
    lst = LinkedList(["a", "b"])
    mapped = lst.map(lambda node: node.value.upper())
    assert list(mapped) == ["A", "B"]
    assert list(lst) == ["a", "b"]
    assert len(mapped) == len(lst)


def test_map_of_empty_list():
    mapped = LinkedList().map(lambda node: node.value)
    assert list(mapped) == []
    assert len(mapped) == 0


def test_merge_moves_elements():
    first = LinkedList([1, 2])
    second = LinkedList([3, 4])
    first.merge(second)
    assert list(first) == [1, 2, 3, 4]
    assert len(first) == 4
    assert first.last() == 4
    assert list(second) == []
    assert len(second) == 0


def test_merge_into_empty():
    first = LinkedList()
    first.merge(LinkedList(["x", "y"]))
    assert list(first) == ["x", "y"]
    assert first.last() == "y"


def test_merge_with_empty_other():
    first = LinkedList([1])
    first.merge(LinkedList())
    assert list(first) == [1]
    assert first.last() == 1


def test_merge_with_itself_fails():
    lst = LinkedList([1])
    with pytest.raises(ValueError):
        lst.merge(lst)


@pytest.mark.parametrize("items", [[], [1], [1, 2], list(range(7))])
def test_reverse(items):
    lst = LinkedList(items)
    lst.reverse()
    assert list(lst) == items[::-1]
    assert len(lst) == len(items)


def test_reverse_twice_is_identity_and_append_works():
    items = ["a", "b", "c"]
    lst = LinkedList(items)
    lst.reverse()
    assert lst.last() == "a"
    lst.reverse()
    assert list(lst) == items
    lst.append("d")
    assert list(lst) == items + ["d"]