"""Array-backed binary max-heap with a fixed capacity."""

from __future__ import annotations

from typing import Iterator, List

DEFAULT_CAPACITY = 100


class MaxHeap:
    """Binary max-heap of comparable keys."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = capacity
        self._items: List = []

    @staticmethod
    def _parent(i: int) -> int:
        return (i - 1) // 2

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    def _sift_up(self, index: int) -> None:
        while index and self._items[self._parent(index)] < self._items[index]:
            parent = self._parent(index)
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int) -> None:
        size = len(self._items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and self._items[child] > self._items[largest]:
                    largest = child
            if largest == index:
                return
            self._swap(index, largest)
            index = largest

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            raise IndexError("invalid index")

    def insert(self, key) -> None:
        """Add a key."""
        if len(self._items) >= self.capacity:
            raise OverflowError("heap is full")
        self._items.append(key)
        self._sift_up(len(self._items) - 1)

    def extract_max(self):
        """Remove and return the largest key."""
        if not self._items:
            raise IndexError("heap is empty")
        last = self._items.pop()
        if not self._items:
            return last
        root = self._items[0]
        self._items[0] = last
        self._sift_down(0)
        return root

    def peek(self):
        """Return the largest key without removing it."""
        if not self._items:
            raise IndexError("heap is empty")
        return self._items[0]

    def increase_key(self, index: int, new_value) -> None:
        """Raise the key at ``index``."""
        self._check_index(index)
        if new_value < self._items[index]:
            raise ValueError(
                "new value is smaller than current value; use change_priority instead"
            )
        self._items[index] = new_value
        self._sift_up(index)

    def delete_key(self, index: int) -> None:
        """Remove the key at ``index``."""
        self._check_index(index)
        while index:
            parent = self._parent(index)
            self._swap(index, parent)
            index = parent
        self.extract_max()

    def change_priority(self, index: int, new_value) -> None:
        """Replace the key at ``index`` and restore the heap order."""
        self._check_index(index)
        old_value = self._items[index]
        self._items[index] = new_value
        if new_value > old_value:
            self._sift_up(index)
        elif new_value < old_value:
            self._sift_down(index)

    def render(self) -> str:
        """The keys in array order, prefixed with ``Heap:``."""
        return " ".join(["Heap:", *(str(key) for key in self._items)])

    def __iter__(self) -> Iterator:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)