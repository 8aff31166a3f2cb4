"""Event and error delivery shared by all backends."""

from __future__ import annotations

import queue
import threading
import time

from .op import Event

_POLL_INTERVAL = 0.05


class Shared:
    """Queues for events and errors, plus the watcher's closed state."""

    def __init__(self, events: queue.Queue, errors: queue.Queue) -> None:
        self.events = events
        self.errors = errors
        self.done = threading.Event()
        self._lock = threading.Lock()

    def _send(self, target: queue.Queue, item: object, timeout: float | None) -> bool:
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if self.done.is_set():
                return False
            wait = _POLL_INTERVAL
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    raise TimeoutError("fsnotify: timed out waiting for a reader")
                wait = min(wait, remaining)
            try:
                target.put(item, timeout=wait)
            except queue.Full:
                continue
            return True

    def send_event(self, event: Event, timeout: float | None = None) -> bool:
        """Queue an event; False if the watcher is closed.

        Events without any operation are dropped and count as sent.
        """
        if not event.op:
            return True
        return self._send(self.events, event, timeout)

    def send_error(self, err: BaseException | None, timeout: float | None = None) -> bool:
        """Queue an error; False if the watcher is closed. None counts as sent."""
        if err is None:
            return True
        return self._send(self.errors, err, timeout)

    def is_closed(self) -> bool:
        """Report whether close() was called."""
        return self.done.is_set()

    def close(self) -> bool:
        """Mark as closed; return True if it was already closed."""
        with self._lock:
            if self.done.is_set():
                return True
            self.done.set()
            return False