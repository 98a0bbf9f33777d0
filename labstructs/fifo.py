"""A FIFO queue kept in a circular buffer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from labstructs.vector import Vector

_INITIAL_CAPACITY = 2


class Queue:
    """First-in, first-out queue in a ring buffer that doubles when full."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._buffer = Vector()
        self._buffer.resize(_INITIAL_CAPACITY)
        self._head = 0
        self._size = 0
        for data in items:
            self.insert(data)

    def _grow(self) -> None:
        capacity = len(self._buffer)
        self._buffer = Vector(self)
        self._buffer.resize(capacity * 2)
        self._head = 0

    def insert(self, data: Any) -> None:
        """Append ``data`` at the rear."""
        if self._size == len(self._buffer):
            self._grow()
        rear = (self._head + self._size) % len(self._buffer)
        self._buffer[rear] = data
        self._size += 1

    def front(self) -> Any:
        """Return the element at the front without removing it."""
        if not self._size:
            raise IndexError("front of empty queue")
        return self._buffer[self._head]

    def remove(self) -> Any:
        """Remove and return the element at the front."""
        value = self.front()
        self._buffer[self._head] = None
        self._head = (self._head + 1) % len(self._buffer)
        self._size -= 1
        if not self._size:
            self._head = 0
        return value

    def __bool__(self) -> bool:
        return self._size > 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._buffer)
        for offset in range(self._size):
            yield self._buffer[(self._head + offset) % capacity]

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"

    def copy(self) -> Queue:
        """Return an independent queue with the same contents."""
        return Queue(self)