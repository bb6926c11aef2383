"""Bounded in-memory history of log records."""

import threading
from collections import deque
from typing import List, Optional

from .record import LogRecord

DEFAULT_CAPACITY = 500


class RecordBuffer:
    """Insertion-ordered record store with oldest-first eviction.

    Append, evict and snapshot all happen under one lock so the capacity
    bound holds with concurrent writers.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """Initialize the buffer.

        Args:
            capacity: Maximum number of records to retain (default 500)
        """
        self._capacity = capacity
        self._records = deque()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def append(self, record: LogRecord) -> Optional[LogRecord]:
        """Add a record, evicting the single oldest one if over capacity.

        Returns:
            The evicted record, or None if nothing was evicted
        """
        with self._lock:
            self._records.append(record)
            if len(self._records) > self._capacity:
                return self._records.popleft()
        return None

    def snapshot(self) -> List[LogRecord]:
        """Return an independent copy of the retained records, oldest first."""
        with self._lock:
            return list(self._records)

    def snapshot_formatted(self) -> str:
        """Return all formatted lines joined by newlines, oldest first."""
        return '\n'.join(record.formatted_line for record in self.snapshot())

    def recent(self, lines: int = 100) -> List[str]:
        """Get the most recent formatted lines.

        Args:
            lines: Number of recent lines to return

        Returns:
            List of formatted lines, oldest first
        """
        if lines <= 0:
            return []
        records = self.snapshot()[-lines:]
        return [record.formatted_line for record in records]

    def clear(self):
        """Drop all retained records."""
        with self._lock:
            self._records.clear()
