"""A binary min-heap over items ordered by ``<``."""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """Min-heap; the smallest item by ``<`` is popped first."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: List[T] = list(items)
        self.init()

    def init(self) -> None:
        """Restore the heap property over all stored items."""
        n = len(self._items)
        for i in reversed(range(n // 2)):
            self._down(i, n)

    def push(self, item: T) -> None:
        """Add ``item`` to the heap."""
        self._items.append(item)
        self._up(len(self._items) - 1)

    def pop(self) -> T:
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        last = len(self._items) - 1
        self._swap(0, last)
        self._down(0, last)
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate over the items in their internal heap order."""
        return iter(self._items)

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]

    def _up(self, j: int) -> None:
        items = self._items
        while j > 0:
            parent = (j - 1) // 2
            if not items[j] < items[parent]:
                break
            self._swap(parent, j)
            j = parent

    def _down(self, start: int, n: int) -> bool:
        items = self._items
        i = start
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and items[right] < items[left]:
                child = right
            if not items[child] < items[i]:
                break
            self._swap(i, child)
            i = child
        return i > start