import pytest

from dsakit.containers import ContainerEmptyError
from dsakit.linked_lists import (
    CircularLinkedList,
    DoublyLinkedList,
    SinglyLinkedList,
    merge_sorted,
)


def test_singly_round_trip():
    values = [5, 1, 4, 1, 9]
    linked = SinglyLinkedList(values)
    assert list(linked) == values
    assert len(linked) == len(values)


def test_singly_demo_sequence():
    linked = SinglyLinkedList([100])
    linked.insert_at_head(12)
    linked.insert_at_head(0)
    linked.insert_at_tail(9)
    linked.insert_at_position(4, 69)
    assert list(linked) == [0, 12, 100, 69, 9]
    assert linked.head == 0
    assert linked.tail == 9
    assert linked.delete_at(5) == 9
    assert list(linked) == [0, 12, 100, 69]
    assert linked.tail == 69


def test_singly_insert_on_empty_sets_both_ends():
    linked = SinglyLinkedList()
    linked.insert_at_position(1, 7)
    assert linked.head == 7
    assert linked.tail == 7


@pytest.mark.parametrize("position", [0, 5])
def test_singly_insert_out_of_range(position):
    linked = SinglyLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        linked.insert_at_position(position, 8)


def test_singly_delete_from_empty():
    with pytest.raises(ContainerEmptyError):
        SinglyLinkedList().delete_at(1)


def test_singly_delete_only_node_empties_list():
    linked = SinglyLinkedList([3])
    assert linked.delete_at(1) == 3
    assert len(linked) == 0
    with pytest.raises(ContainerEmptyError):
        _ = linked.tail


def test_merge_sorted_interleaves_and_empties_inputs():
    first = SinglyLinkedList([1, 4, 6, 9])
    second = SinglyLinkedList([2, 3, 6, 10, 12])
    merged = merge_sorted(first, second)
    assert list(merged) == sorted([1, 4, 6, 9, 2, 3, 6, 10, 12])
    assert len(merged) == 9
    assert merged.tail == 12
    assert len(first) == 0 and list(second) == []


def test_merge_sorted_with_empty_side():
    merged = merge_sorted(SinglyLinkedList(), SinglyLinkedList([1, 2]))
    assert list(merged) == [1, 2]
    assert merged.tail == 2
    merged.insert_at_tail(5)
    assert list(merged) == [1, 2, 5]


def test_merge_sorted_both_empty():
    merged = merge_sorted(SinglyLinkedList(), SinglyLinkedList())
    assert list(merged) == []
    with pytest.raises(ContainerEmptyError):
        _ = merged.head


def test_doubly_demo_sequence():
    linked = DoublyLinkedList([10])
    for value in (6, 3, 7):
        linked.insert_at_head(value)
    linked.insert_at_tail(8)
    linked.insert_at_position(3, 0)
    assert list(linked) == [7, 3, 0, 6, 10, 8]
    assert list(reversed(linked)) == [8, 10, 6, 0, 3, 7]
    assert linked.delete_at(6) == 8
    assert list(linked) == [7, 3, 0, 6, 10]
    assert linked.head == 7
    assert linked.tail == 10


def test_doubly_delete_head_keeps_back_links():
    linked = DoublyLinkedList([1, 2, 3])
    assert linked.delete_at(1) == 1
    assert list(reversed(linked)) == [3, 2]


def test_doubly_delete_out_of_range():
    with pytest.raises(IndexError):
        DoublyLinkedList([1]).delete_at(2)


def test_doubly_merge_sort_demo():
    linked = DoublyLinkedList()
    for value in (5, 20, 4, 3, 30, 10):
        linked.insert_at_head(value)
    linked.merge_sort()
    assert list(linked) == [3, 4, 5, 10, 20, 30]
    assert list(reversed(linked)) == [30, 20, 10, 5, 4, 3]
    assert linked.tail == 30


@pytest.mark.parametrize(
    "values",
    [[], [1], [2, 1], [3, 3, 1, 2], [9, -4, 0, 7, 7, -4, 15, 2]],
)
def test_doubly_merge_sort_matches_sorted(values):
    linked = DoublyLinkedList(values)
    linked.merge_sort()
    assert list(linked) == sorted(values)
    assert list(reversed(linked)) == sorted(values, reverse=True)
    assert len(linked) == len(values)


def test_circular_demo_sequence():
    ring = CircularLinkedList()
    ring.insert_after(5, 1)
    ring.insert_after(1, 2)
    ring.insert_after(2, 4)
    ring.insert_after(2, 3)
    assert list(ring) == [1, 2, 3, 4]
    ring.delete(1)
    assert list(ring) == [4, 2, 3]
    assert len(ring) == 3


def test_check_circular_demo():
    ring = CircularLinkedList()
    ring.insert_after(0, 3)
    ring.insert_after(3, 5)
    ring.insert_after(3, 10)
    ring.insert_after(5, 0)
    ring.delete(5)
    ring.insert_after(0, 7)
    assert list(ring) == [3, 10, 0, 7]
    assert ring.is_circular() is True


def test_circular_empty_is_circular():
    assert CircularLinkedList().is_circular() is True


def test_circular_delete_from_empty():
    with pytest.raises(ContainerEmptyError):
        CircularLinkedList().delete(1)


def test_circular_missing_elements():
    ring = CircularLinkedList()
    ring.insert_after(None, 1)
    ring.insert_after(1, 2)
    with pytest.raises(ValueError):
        ring.insert_after(9, 3)
    with pytest.raises(ValueError):
        ring.delete(9)
    assert list(ring) == [1, 2]


def test_circular_delete_only_node():
    ring = CircularLinkedList()
    ring.insert_after(None, 4)
    ring.delete(4)
    assert list(ring) == []
    assert len(ring) == 0