"""Singly, doubly and circular linked lists, with merging and merge sort."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from dsakit.containers import ContainerEmptyError


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value, next_node: Optional["_Node"] = None) -> None:
        self.value = value
        self.next = next_node


class _DoubleNode:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value) -> None:
        self.value = value
        self.next: Optional[_DoubleNode] = None
        self.prev: Optional[_DoubleNode] = None


def _check_insert_position(position: int, size: int) -> None:
    if not 1 <= position <= size + 1:
        raise IndexError(f"position {position} out of range 1..{size + 1}")


def _check_delete_position(position: int, size: int) -> None:
    if size == 0:
        raise ContainerEmptyError("list is empty")
    if not 1 <= position <= size:
        raise IndexError(f"position {position} out of range 1..{size}")


class SinglyLinkedList:
    """Singly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    @property
    def head(self):
        """Value of the first node."""
        if self._head is None:
            raise ContainerEmptyError("list is empty")
        return self._head.value

    @property
    def tail(self):
        """Value of the last node."""
        if self._tail is None:
            raise ContainerEmptyError("list is empty")
        return self._tail.value

    def insert_at_head(self, value) -> None:
        """Put ``value`` in front of the first node."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert_at_tail(self, value) -> None:
        """Put ``value`` after the last node."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_at_position(self, position: int, value) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        _check_insert_position(position, self._size)
        if position == 1:
            self.insert_at_head(value)
        elif position == self._size + 1:
            self.insert_at_tail(value)
        else:
            before = self._node_at(position - 1)
            before.next = _Node(value, before.next)
            self._size += 1

    def delete_at(self, position: int):
        """Remove the node at 1-based ``position`` and return its value."""
        _check_delete_position(position, self._size)
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            before = self._node_at(position - 1)
            node = before.next
            before.next = node.next
            if node is self._tail:
                self._tail = before
        node.next = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


def merge_sorted(first: SinglyLinkedList, second: SinglyLinkedList) -> SinglyLinkedList:
    """Splice two ascending lists into one ascending list.

    The nodes are moved, not copied, so both inputs are left empty.
    """
    dummy = _Node(None)
    current = dummy
    left, right = first._head, second._head
    while left is not None and right is not None:
        if left.value < right.value:
            current.next = left
            left = left.next
        else:
            current.next = right
            right = right.next
        current = current.next
    merged = SinglyLinkedList()
    if left is not None:
        current.next = left
        merged._tail = first._tail
    elif right is not None:
        current.next = right
        merged._tail = second._tail
    else:
        merged._tail = current if current is not dummy else None
    merged._head = dummy.next
    merged._size = len(first) + len(second)
    for emptied in (first, second):
        emptied._head = emptied._tail = None
        emptied._size = 0
    return merged


def _merge_double(
    left: Optional[_DoubleNode], right: Optional[_DoubleNode]
) -> Optional[_DoubleNode]:
    dummy = _DoubleNode(None)
    current = dummy
    while left is not None and right is not None:
        if left.value < right.value:
            taken, left = left, left.next
        else:
            taken, right = right, right.next
        current.next = taken
        taken.prev = current
        current = taken
    rest = left if left is not None else right
    current.next = rest
    if rest is not None:
        rest.prev = current
    head = dummy.next
    if head is not None:
        head.prev = None
    return head


def _split_double(head: _DoubleNode) -> Optional[_DoubleNode]:
    slow = fast = head
    while fast.next is not None and fast.next.next is not None:
        fast = fast.next.next
        slow = slow.next
    second = slow.next
    slow.next = None
    if second is not None:
        second.prev = None
    return second


def _merge_sort_double(head: Optional[_DoubleNode]) -> Optional[_DoubleNode]:
    if head is None or head.next is None:
        return head
    second = _split_double(head)
    return _merge_double(_merge_sort_double(head), _merge_sort_double(second))


class DoublyLinkedList:
    """Doubly linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    @property
    def head(self):
        """Value of the first node."""
        if self._head is None:
            raise ContainerEmptyError("list is empty")
        return self._head.value

    @property
    def tail(self):
        """Value of the last node."""
        if self._tail is None:
            raise ContainerEmptyError("list is empty")
        return self._tail.value

    def insert_at_head(self, value) -> None:
        """Put ``value`` in front of the first node."""
        node = _DoubleNode(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def insert_at_tail(self, value) -> None:
        """Put ``value`` after the last node."""
        node = _DoubleNode(value)
        node.prev = self._tail
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _DoubleNode:
        node = self._head
        for _ in range(position - 1):
            node = node.next
        return node

    def insert_at_position(self, position: int, value) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``."""
        _check_insert_position(position, self._size)
        if position == 1:
            self.insert_at_head(value)
        elif position == self._size + 1:
            self.insert_at_tail(value)
        else:
            before = self._node_at(position - 1)
            node = _DoubleNode(value)
            node.next = before.next
            node.prev = before
            before.next.prev = node
            before.next = node
            self._size += 1

    def delete_at(self, position: int):
        """Remove the node at 1-based ``position`` and return its value."""
        _check_delete_position(position, self._size)
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.value

    def merge_sort(self) -> None:
        """Sort the list in place in ascending order by relinking its nodes."""
        self._head = _merge_sort_double(self._head)
        node = self._head
        while node is not None and node.next is not None:
            node = node.next
        self._tail = node

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularLinkedList:
    """Circular singly linked list reached through its tail node.

    Iteration starts at the tail and goes round once.
    """

    def __init__(self) -> None:
        self._tail: Optional[_Node] = None
        self._size = 0

    def insert_after(self, element, value) -> None:
        """Insert ``value`` after the first node holding ``element``.

        In an empty list ``element`` is ignored and ``value`` becomes the only node.
        """
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
            self._size = 1
            return
        current = self._tail
        while current.value != element:
            current = current.next
            if current is self._tail:
                raise ValueError(f"{element!r} is not in the list")
        node.next = current.next
        current.next = node
        self._size += 1

    def delete(self, element) -> None:
        """Remove the first node holding ``element``, searching after the tail."""
        if self._tail is None:
            raise ContainerEmptyError("list is already empty")
        before = self._tail
        current = before.next
        while current.value != element:
            before, current = current, current.next
            if before is self._tail:
                raise ValueError(f"{element!r} is not in the list")
        before.next = current.next
        if before is current:
            self._tail = None
        elif current is self._tail:
            self._tail = before
        current.next = None
        self._size -= 1

    def is_circular(self) -> bool:
        """Tell whether following the links from the tail leads back to it."""
        if self._tail is None:
            return True
        node = self._tail.next
        while node is not None and node is not self._tail:
            node = node.next
        return node is not None

    def __iter__(self) -> Iterator:
        if self._tail is None:
            return
        node = self._tail
        while True:
            yield node.value
            node = node.next
            if node is self._tail:
                return

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"