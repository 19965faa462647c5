"""
Single-slot channel between a frame producer and a slower consumer.
"""
import threading
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class LatestValue(Generic[T]):
    """
    Holds only the most recent value. A put over an unread value drops the
    older one, so a slow reader always sees the latest result.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._value: Optional[T] = None
        self._last: Optional[T] = None
        self._unread = False
        self.dropped = 0

    def put(self, value: T) -> None:
        with self._lock:
            if self._unread:
                self.dropped += 1
            self._value = value
            self._last = value
            self._unread = True

    def get(self) -> Optional[T]:
        """Take the unread value, or None when nothing new arrived."""
        with self._lock:
            if not self._unread:
                return None
            value = self._value
            self._value = None
            self._unread = False
            return value

    def peek(self) -> Optional[T]:
        """Last value put, read or not."""
        with self._lock:
            return self._last
