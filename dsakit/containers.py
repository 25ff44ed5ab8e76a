"""Caches, bounded and unbounded queues and stacks, and a snapshot array."""

from __future__ import annotations

from bisect import bisect_right
from collections import OrderedDict, deque
from typing import Hashable, Iterator


class ContainerFullError(OverflowError):
    """Raised when a value is added to a container that has no room left."""


class ContainerEmptyError(IndexError):
    """Raised when a value is read or removed from an empty container."""


class LRUCache:
    """Fixed-size mapping that evicts the least recently used key.

    Both ``get`` and ``put`` mark a key as the most recently used.
    """

    MISSING = -1

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._entries: OrderedDict = OrderedDict()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: Hashable):
        """Return the value stored for ``key``, or -1 if it is not cached."""
        if key not in self._entries:
            return self.MISSING
        self._entries.move_to_end(key)
        return self._entries[key]

    def put(self, key: Hashable, value) -> None:
        """Store ``value`` under ``key``, evicting the stalest entry if full."""
        if key in self._entries:
            self._entries.move_to_end(key)
            self._entries[key] = value
            return
        if len(self._entries) == self._capacity:
            self._entries.popitem(last=False)
        self._entries[key] = value

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class BoundedQueue:
    """First-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: deque = deque()

    @property
    def capacity(self) -> int:
        return self._capacity

    def enqueue(self, value) -> None:
        """Append ``value`` at the rear."""
        if self.is_full():
            raise ContainerFullError(f"queue is full for: {value!r}")
        self._items.append(value)

    def dequeue(self):
        """Remove and return the value at the front."""
        if not self._items:
            raise ContainerEmptyError("queue is empty")
        return self._items.popleft()

    def front(self):
        """Return the value at the front without removing it."""
        if not self._items:
            raise ContainerEmptyError("queue is empty")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)


class LinkedQueue:
    """Unbounded first-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque = deque()

    def enqueue(self, value) -> None:
        """Append ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self):
        """Remove and return the value at the front."""
        if not self._items:
            raise ContainerEmptyError("queue underflow")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)


class BoundedStack:
    """Last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self._capacity:
            raise ContainerFullError(f"stack overflow for: {value!r}")
        self._items.append(value)

    def pop(self):
        """Remove and return the top value."""
        if not self._items:
            raise ContainerEmptyError("stack underflow")
        return self._items.pop()

    def top(self):
        """Return the top value without removing it."""
        if not self._items:
            raise ContainerEmptyError("stack underflow")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


class QueueStack:
    """Stack kept in a single queue, rotated on every push so the newest is in front."""

    def __init__(self) -> None:
        self._queue: deque = deque()

    def push(self, value) -> None:
        """Put ``value`` on top."""
        self._queue.append(value)
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())

    def pop(self):
        """Remove and return the top value."""
        if not self._queue:
            raise ContainerEmptyError("stack is empty")
        return self._queue.popleft()

    def top(self):
        """Return the top value without removing it."""
        if not self._queue:
            raise ContainerEmptyError("stack is empty")
        return self._queue[0]

    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)


class SnapshotArray:
    """Array of zeros whose past states can be read back by snapshot id."""

    def __init__(self, length: int) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._length = length
        self._snaps_taken = 0
        self._history: dict[int, tuple[list[int], list]] = {}

    def __len__(self) -> int:
        return self._length

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._length:
            raise IndexError(f"index {index} out of range")

    def set(self, index: int, value) -> None:
        """Set the element at ``index`` in the current, unsnapped state."""
        self._check_index(index)
        snaps, values = self._history.setdefault(index, ([], []))
        if snaps and snaps[-1] == self._snaps_taken:
            values[-1] = value
        else:
            snaps.append(self._snaps_taken)
            values.append(value)

    def snap(self) -> int:
        """Take a snapshot and return its id."""
        self._snaps_taken += 1
        return self._snaps_taken - 1

    def get(self, index: int, snap_id: int):
        """Return the element at ``index`` as it was when ``snap_id`` was taken."""
        self._check_index(index)
        if not 0 <= snap_id < self._snaps_taken:
            raise ValueError(f"no snapshot with id {snap_id}")
        snaps, values = self._history.get(index, ([], []))
        position = bisect_right(snaps, snap_id)
        return values[position - 1] if position else 0