"""A LIFO stack backed by a linked list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from labstructs.linked_list import LinkedList


class Stack:
    """Last-in, first-out stack; the top is the head of a linked list."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._list = LinkedList()
        for data in items:
            self.push(data)

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        self._list.insert(data)

    def top(self) -> Any:
        """Return the top element without removing it."""
        head = self._list.first()
        if head is None:
            raise IndexError("top of empty stack")
        return head.data

    def pop(self) -> Any:
        """Remove and return the top element."""
        value = self.top()
        self._list.erase_first()
        return value

    def __bool__(self) -> bool:
        return self._list.first() is not None

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"Stack(top->{list(self._list)!r})"

    def copy(self) -> Stack:
        """Return an independent stack with the same contents."""
        duplicate = Stack()
        duplicate._list = self._list.copy()
        return duplicate