"""A growable array with explicit resizing."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Any


class Vector:
    """Dynamic array whose size changes only through :meth:`resize`.

    Newly exposed slots after growing hold ``fill``.
    """

    def __init__(self, items: Iterable[Any] = (), fill: Any = None) -> None:
        self._items: list[Any] = list(items)
        self.fill = fill

    def _checked(self, index: Any) -> int:
        position = operator.index(index)
        if not 0 <= position < len(self._items):
            raise IndexError(
                f"vector index {position} out of range for size {len(self._items)}"
            )
        return position

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[self._checked(index)]

    def __setitem__(self, index: int, value: Any) -> None:
        self._items[self._checked(index)] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Vector({self._items!r}, fill={self.fill!r})"

    def resize(self, size: int) -> None:
        """Grow or shrink to ``size`` elements, keeping the leading ones."""
        size = operator.index(size)
        if size < 0:
            raise ValueError("vector size cannot be negative")
        current = len(self._items)
        if size < current:
            del self._items[size:]
        else:
            self._items.extend([self.fill] * (size - current))

    def copy(self) -> Vector:
        """Return an independent vector with the same elements."""
        return Vector(self._items, fill=self.fill)