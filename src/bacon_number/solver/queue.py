"""
Singly linked FIFO queue used by the path finder.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class QueueNode(Generic[T]):
    """A queue element wrapping a value and the link to the next element."""
    value: T
    next: Optional["QueueNode[T]"] = None


class LinkedQueue(Generic[T]):
    """FIFO with O(1) enqueue at the rear and O(1) dequeue at the front."""

    def __init__(self):
        self.front: Optional[QueueNode[T]] = None
        self.rear: Optional[QueueNode[T]] = None
        self._length = 0

    def enqueue(self, value: T) -> None:
        node = QueueNode(value)
        if self.rear is None:
            self.front = node
            self.rear = node
        else:
            self.rear.next = node
            self.rear = node
        self._length += 1

    def dequeue(self) -> Optional[T]:
        """Remove and return the front value, or None if the queue is empty."""
        if self.front is None:
            return None
        node = self.front
        self.front = node.next
        if self.front is None:
            self.rear = None
        self._length -= 1
        return node.value

    def is_empty(self) -> bool:
        return self.front is None

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self.front is not None
