"""Logger facade: create, retain, mirror and publish log records."""

import logging
import warnings
from typing import Callable, List, Optional

from colorama import just_fix_windows_console

from .buffer import RecordBuffer
from .clock import Clock
from .config import LoggerConfig
from .console import ConsoleSink
from .emitter import EventEmitter
from .formatter import RecordFormatter
from .metrics import RECORDS_EVICTED_TOTAL, RECORDS_TOTAL
from .record import LogRecord
from .severity import Severity

logger = logging.getLogger(__name__)

# Event fired with each newly created record
RECORD_EVENT = 'log'


class Logger:
    """Accumulates formatted log records in a bounded history.

    Every record-creation call reads the clock, renders the line, appends the
    record to the buffer (evicting the oldest if full), writes the line to the
    console sink and finally notifies 'log' subscribers.
    """

    def __init__(
        self,
        config: Optional[LoggerConfig] = None,
        *,
        clock: Optional[Callable[[], str]] = None,
        sink: Optional[ConsoleSink] = None,
    ):
        """Initialize the logger.

        Args:
            config: Capacity and color settings (defaults: 500, uncolored)
            clock: Zero-argument callable returning the timestamp string
            sink: Object with a write(line) method; stdout if omitted
        """
        self.config = config if config is not None else LoggerConfig()
        self._clock = clock if clock is not None else Clock()
        self._formatter = RecordFormatter(colored=self.config.colored)
        self._buffer = RecordBuffer(capacity=self.config.max_stack_size)
        self._sink = sink if sink is not None else ConsoleSink()
        self._events = EventEmitter()

        if self.config.colored:
            just_fix_windows_console()

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    def __len__(self) -> int:
        return len(self._buffer)

    # ------------------------------------------------------------------
    # Record creation
    # ------------------------------------------------------------------

    def add(self, severity: Severity, message: str, source: Optional[str] = None) -> LogRecord:
        """Create a record of the given severity and run it through the pipeline."""
        timestamp = self._clock()
        record = LogRecord(
            timestamp=timestamp,
            message=message,
            source=source,
            severity=severity,
            formatted_line=self._formatter.format(severity, timestamp, message, source),
        )

        RECORDS_TOTAL.labels(severity=severity.name).inc()
        if self._buffer.append(record) is not None:
            RECORDS_EVICTED_TOTAL.inc()

        self._sink.write(record.formatted_line)
        self._events.emit(RECORD_EVENT, record)
        return record

    def log(self, message: str, source: Optional[str] = None):
        self.add(Severity.DEFAULT, message, source)

    def info(self, message: str, source: Optional[str] = None):
        self.add(Severity.INFO, message, source)

    def warn(self, message: str, source: Optional[str] = None):
        self.add(Severity.WARN, message, source)

    def error(self, message: str, source: Optional[str] = None):
        self.add(Severity.ERROR, message, source)

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------

    def snapshot(self) -> List[LogRecord]:
        """Return a copy of the retained records, oldest first."""
        return self._buffer.snapshot()

    def snapshot_formatted(self) -> str:
        """Return the retained formatted lines joined by newlines."""
        return self._buffer.snapshot_formatted()

    def recent(self, lines: int = 100) -> List[str]:
        """Return the last `lines` formatted lines, oldest first."""
        return self._buffer.recent(lines)

    def clear(self):
        """Drop all retained records. Subscribers are kept."""
        self._buffer.clear()
        logger.debug('Record history cleared')

    def generate(self) -> str:
        """Deprecated alias of snapshot_formatted()."""
        warnings.warn(
            'Logger.generate() is deprecated, use snapshot_formatted()',
            DeprecationWarning,
            stacklevel=2,
        )
        return self.snapshot_formatted()

    def generate_array(self) -> List[LogRecord]:
        """Deprecated alias of snapshot()."""
        warnings.warn(
            'Logger.generate_array() is deprecated, use snapshot()',
            DeprecationWarning,
            stacklevel=2,
        )
        return self.snapshot()

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def on(self, event: str, callback: Callable[[LogRecord], None]):
        self._events.on(event, callback)

    def off(self, event: str, callback: Callable[[LogRecord], None]) -> bool:
        return self._events.off(event, callback)

    def subscribe(self, callback: Callable[[LogRecord], None]) -> Callable[[], bool]:
        """Receive every new record. Returns a function that unsubscribes."""
        self._events.on(RECORD_EVENT, callback)

        def unsubscribe() -> bool:
            return self._events.off(RECORD_EVENT, callback)

        return unsubscribe
