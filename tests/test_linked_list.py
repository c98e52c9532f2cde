import pytest

from linked_list_algorithms.linked_list import LinkedList


def test_append_prepend_insert():
    lst = LinkedList()
    lst.append("20")
    lst.prepend("10")
    lst.append("40")
    lst.insert_at(2, "30")
    lst.insert_at(0, "0")
    lst.insert_at(5, "50")
    assert list(lst) == ["0", "10", "20", "30", "40", "50"]
    assert len(lst) == 6


def test_insert_out_of_range():
    lst = LinkedList(["a"])
    with pytest.raises(IndexError):
        lst.insert_at(2, "b")
    with pytest.raises(IndexError):
        lst.insert_at(-1, "b")


def test_delete_by_value_first_occurrence():
    lst = LinkedList(["1", "2", "1", "3"])
    assert lst.delete("1")
    assert list(lst) == ["2", "1", "3"]
    assert lst.delete("3")
    assert list(lst) == ["2", "1"]
    assert not lst.delete("9")
    assert len(lst) == 2


def test_delete_at():
    lst = LinkedList(["a", "b", "c"])
    assert lst.delete_at(1) == "b"
    assert lst.delete_at(0) == "a"
    assert list(lst) == ["c"]
    with pytest.raises(IndexError):
        lst.delete_at(1)


def test_find_index():
    lst = LinkedList(["a", "b", "b"])
    assert lst.find_index("b") == 1
    assert lst.find_index("z") == -1


def test_snapshot_ids_are_stable():
    lst = LinkedList(["a", "b"])
    first = lst.snapshot()
    lst.append("c")
    second = lst.snapshot()
    assert [n.id for n in second[:2]] == [n.id for n in first]
    assert lst.to_array() == second


def test_from_nodes_keeps_ids():
    lst = LinkedList(["a", "b", "c"])
    nodes = lst.snapshot()[::-1]
    rebuilt = LinkedList.from_nodes(nodes)
    assert rebuilt.snapshot() == nodes
    assert len(rebuilt) == 3
