from __future__ import annotations

import queue
from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

# End-of-stream marker; never visible to consumers.
_CLOSED = object()


class ChannelClosedError(RuntimeError):
    pass


class LineChannel(Generic[T]):
    """Single-consumer FIFO hand-off with an explicit end-of-stream signal.

    ``send`` blocks while the channel is full (``max_size`` > 0), iteration
    blocks while it is empty, and iteration ends once the producer has called
    ``close`` and every item sent before it has been delivered.
    """

    def __init__(self, max_size: int = 0) -> None:
        if max_size < 0:
            raise ValueError("max_size must be >= 0")
        self._queue: queue.Queue[object] = queue.Queue(maxsize=max_size)
        self._closed = False
        self._drained = False

    @property
    def closed(self) -> bool:
        return self._closed

    def send(self, item: T) -> None:
        if self._closed:
            raise ChannelClosedError("send on closed channel")
        self._queue.put(item)

    def close(self) -> None:
        # Idempotent; the marker is queued behind every pending item.
        if self._closed:
            return
        self._closed = True
        self._queue.put(_CLOSED)

    def __iter__(self) -> Iterator[T]:
        while not self._drained:
            item = self._queue.get()
            if item is _CLOSED:
                self._drained = True
                return
            yield item  # type: ignore[misc]
