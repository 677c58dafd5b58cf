"""Thread-safe FIFO queue with a one-shot ``close()``.

``queue.Queue`` has no notion of closing, so a closed queue is signalled with
a sentinel that every consumer re-posts after seeing it.  Items enqueued
before ``close()`` are still handed out (close-then-drain), unless the close
discards them.
"""

from __future__ import annotations

import queue
import threading
from typing import Generic, TypeVar

T = TypeVar("T")

_CLOSED = object()


class QueueClosed(Exception):
    """Raised by ``get``/``put`` once the queue has been closed."""


class ClosableQueue(Generic[T]):
    def __init__(self) -> None:
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def put(self, item: T) -> None:
        """Append *item*; raises :class:`QueueClosed` after ``close()``."""
        with self._lock:
            if self._closed:
                raise QueueClosed()
            self._queue.put(item)

    def get(self) -> T:
        """Block until an item is available.

        Raises:
            QueueClosed: When the queue is closed and nothing is left ahead
                of the close marker.
        """
        item = self._queue.get()
        if item is _CLOSED:
            # Leave the marker in place for the next consumer.
            self._queue.put(_CLOSED)
            raise QueueClosed()
        return item

    def close(self, discard_pending: bool = False) -> bool:
        """Close the queue, waking every blocked consumer.

        Only the first call has any effect; it returns ``True``, later calls
        return ``False``.  With *discard_pending* items still waiting in the
        queue are dropped instead of being drained.
        """
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            if discard_pending:
                with self._queue.mutex:
                    self._queue.queue.clear()
            self._queue.put(_CLOSED)
        return True
