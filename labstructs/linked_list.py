"""A doubly linked list with item handles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class ListItem:
    """A node of a :class:`LinkedList`, linked both ways."""

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: ListItem | None = None
        self.prev: ListItem | None = None
        self._owner: LinkedList | None = None

    def __repr__(self) -> str:
        return f"ListItem({self.data!r})"


class LinkedList:
    """Doubly linked list that inserts at the head or after a given item."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: ListItem | None = None
        self._tail: ListItem | None = None
        self._length = 0
        for data in items:
            if self._tail is None:
                self.insert(data)
            else:
                self.insert_after(self._tail, data)

    def _own(self, data: Any) -> ListItem:
        item = ListItem(data)
        item._owner = self
        self._length += 1
        return item

    def _release(self, item: ListItem) -> None:
        item._owner = None
        item.next = None
        item.prev = None
        self._length -= 1

    def first(self) -> ListItem | None:
        """Return the head item, or None when the list is empty."""
        return self._head

    def insert(self, data: Any) -> ListItem:
        """Insert ``data`` at the beginning and return its item."""
        item = self._own(data)
        if self._head is None:
            self._tail = item
        else:
            item.next = self._head
            self._head.prev = item
        self._head = item
        return item

    def insert_after(self, item: ListItem, data: Any) -> ListItem:
        """Insert ``data`` right after ``item`` and return the new item."""
        if item._owner is not self:
            raise ValueError("item does not belong to this list")
        new_item = self._own(data)
        new_item.prev = item
        new_item.next = item.next
        if item.next is None:
            self._tail = new_item
        else:
            item.next.prev = new_item
        item.next = new_item
        return new_item

    def erase_first(self) -> ListItem | None:
        """Remove the head item; return the new head, or None."""
        removed = self._head
        if removed is None:
            return None
        self._head = removed.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._release(removed)
        return self._head

    def erase_next(self, item: ListItem) -> ListItem | None:
        """Remove the item after ``item``; return the one that now follows it."""
        if item._owner is not self:
            raise ValueError("item does not belong to this list")
        removed = item.next
        if removed is None:
            return None
        item.next = removed.next
        if removed.next is None:
            self._tail = item
        else:
            removed.next.prev = item
        self._release(removed)
        return item.next

    def __iter__(self) -> Iterator[Any]:
        item = self._head
        while item is not None:
            yield item.data
            item = item.next

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def copy(self) -> LinkedList:
        """Return an independent list with the same elements in order."""
        return LinkedList(self)