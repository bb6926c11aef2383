from dataclasses import dataclass
from typing import Any, Dict, Optional

from .severity import Severity


@dataclass(frozen=True)
class LogRecord:
    """A single log entry, rendered once at creation time."""

    timestamp: str
    # Clock output at creation, e.g. '2026-10-17 14:03:05.42'.

    message: str
    # Caller-supplied text, stored unmodified.

    source: Optional[str]
    # Tag naming the emitting component, if any.

    severity: Severity

    formatted_line: str
    # Fully rendered line. Never recomputed after creation.

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp,
            'message': self.message,
            'source': self.source,
            'severity': self.severity.name,
            'formatted': self.formatted_line,
        }
