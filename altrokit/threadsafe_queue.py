"""A first-in, first-out queue that can be shared between threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque


class ThreadSafeQueue:
    """FIFO queue whose operations are safe to call from several threads.

    None of the operations block waiting for data.
    """

    def __init__(self) -> None:
        self._items: Deque[Any] = deque()
        self._lock = threading.Lock()

    def push(self, value: Any) -> None:
        """Append ``value`` to the back of the queue."""
        with self._lock:
            self._items.append(value)

    def try_pop(self) -> Any:
        """Remove and return the front value without waiting.

        Raises IndexError if the queue is empty.
        """
        with self._lock:
            if not self._items:
                raise IndexError("pop from an empty queue")
            return self._items.popleft()

    def clear(self) -> None:
        """Discard every value in the queue."""
        with self._lock:
            self._items.clear()

    def is_empty(self) -> bool:
        """True if the queue holds no values."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)