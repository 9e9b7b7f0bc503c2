"""A queue of linked nodes and a fixed-size circular queue."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional

DEFAULT_SIZE = 5
EMPTY_MESSAGE = "Queue is empty!"


class QueueFullError(OverflowError):
    """Raised when adding to a full queue."""


class QueueEmptyError(IndexError):
    """Raised when taking from or peeking at an empty queue."""


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any) -> None:
        self.data = data
        self.next: Optional[_Node] = None


class LinkedQueue:
    """Unbounded first-in first-out queue of linked nodes."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._front: Optional[_Node] = None
        self._rear: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.enqueue(item)

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmptyError("Queue underflow!")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self._front is None:
            raise QueueEmptyError(EMPTY_MESSAGE)
        return self._front.data

    def is_empty(self) -> bool:
        return self._front is None

    def clear(self) -> None:
        """Remove every value."""
        self._front = None
        self._rear = None
        self._size = 0

    def render(self) -> str:
        """The values from front to rear."""
        if self.is_empty():
            return EMPTY_MESSAGE
        return " ".join(["Queue:", *(str(value) for value in self)])

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size


class CircularQueue:
    """Queue holding at most ``size`` values in a ring of slots."""

    def __init__(self, size: int = DEFAULT_SIZE) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: List[Any] = [None] * size
        self._front = 0
        self._count = 0

    def is_empty(self) -> bool:
        return self._count == 0

    def is_full(self) -> bool:
        return self._count == self.size

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise QueueFullError(f"Queue is full! Cannot enqueue {value}")
        self._slots[(self._front + self._count) % self.size] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty! Cannot dequeue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.size
        self._count -= 1
        if self._count == 0:
            self._front = 0
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError(EMPTY_MESSAGE)
        return self._slots[self._front]

    def render(self) -> str:
        """The values from front to rear."""
        if self.is_empty():
            return EMPTY_MESSAGE
        return " ".join(["Queue elements:", *(str(value) for value in self)])

    def __iter__(self) -> Iterator[Any]:
        values = [
            self._slots[(self._front + offset) % self.size]
            for offset in range(self._count)
        ]
        return iter(values)

    def __len__(self) -> int:
        return self._count