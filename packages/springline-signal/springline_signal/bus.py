"""In-memory pub/sub bus. Publishing queues; flush() delivers."""
from __future__ import annotations

import logging
from typing import Any, Callable

logger = logging.getLogger(__name__)

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    @property
    def pending(self) -> int:
        return len(self._queue)

    def subscribe(self, signal_name: str, handler: Handler) -> Callable[[], None]:
        """Register handler; the returned callable unsubscribes it."""
        self._subscribers.setdefault(signal_name, []).append(handler)
        return lambda: self.unsubscribe(signal_name, handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def flush(self) -> int:
        """Deliver queued signals in publish order.

        Signals published by handlers during the flush wait for the
        next one. Returns the number of signals dispatched.

        A handler exception propagates. Signals after the failing one
        go back to the front of the queue for the next flush; remaining
        handlers of the failing signal are not called.
        """
        snapshot = self._queue
        self._queue = []
        for index, (signal_name, data) in enumerate(snapshot):
            handlers = self._subscribers.get(signal_name, [])
            if not handlers:
                logger.debug("No subscribers for %s", signal_name)
            try:
                for handler in list(handlers):
                    handler(signal_name, data)
            except Exception:
                self._queue[:0] = snapshot[index + 1:]
                raise
        return len(snapshot)

    def clear(self) -> None:
        self._queue.clear()
