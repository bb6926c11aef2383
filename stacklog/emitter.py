"""Synchronous event emitter with per-subscriber failure isolation."""

import logging
import threading
from typing import Any, Callable, Dict, List

from .metrics import SUBSCRIBER_ERRORS_TOTAL

logger = logging.getLogger(__name__)


class EventEmitter:
    """Map of event name to an ordered list of callbacks.

    Callbacks run on the caller's thread, in registration order. A callback
    that raises is logged and skipped; the remaining callbacks still run and
    nothing propagates to the emitter's caller.
    """

    def __init__(self):
        self._listeners: Dict[str, List[Callable[..., Any]]] = {}
        self._lock = threading.Lock()

    def on(self, event: str, callback: Callable[..., Any]):
        """Register a callback for an event.

        Registering the same callback twice delivers each event to it twice.
        """
        with self._lock:
            self._listeners.setdefault(event, []).append(callback)

    def off(self, event: str, callback: Callable[..., Any]) -> bool:
        """Remove the earliest registration of a callback.

        Returns True if a registration was removed.
        """
        with self._lock:
            callbacks = self._listeners.get(event)
            if not callbacks or callback not in callbacks:
                return False
            callbacks.remove(callback)
            if not callbacks:
                del self._listeners[event]
            return True

    def listener_count(self, event: str) -> int:
        with self._lock:
            return len(self._listeners.get(event, ()))

    def emit(self, event: str, *args: Any) -> int:
        """Call every callback registered for the event.

        Returns the number of callbacks that raised.
        """
        with self._lock:
            callbacks = list(self._listeners.get(event, ()))

        failures = 0
        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                failures += 1
                SUBSCRIBER_ERRORS_TOTAL.labels(event=event).inc()
                logger.exception('Subscriber %r failed on %r event', callback, event)
        return failures
