"""Render log records into human-readable lines.

Line layout:

    [SEVERITY: ][<timestamp>] (<source>): <message>
    [SEVERITY: ][<timestamp>]: <message>

DEFAULT records carry no severity prefix. When colored, the severity label,
timestamp and source are wrapped in ANSI color codes; the message never is.
"""

from typing import Optional

from .colors import decorator
from .severity import Severity

SEVERITY_DECORATIONS = {
    Severity.DEFAULT: None,
    Severity.INFO: 'blue',
    Severity.WARN: 'bright_yellow',
    Severity.ERROR: 'red',
}

TIMESTAMP_DECORATION = 'yellow'
SOURCE_DECORATION = 'cyan'


class RecordFormatter:
    """Formatter bound to a fixed color setting.

    Decoration functions are resolved once here so formatting a line is a
    plain lookup.
    """

    def __init__(self, colored: bool = False):
        self.colored = colored
        self._severity_paint = {
            severity: decorator(name, enabled=colored)
            for severity, name in SEVERITY_DECORATIONS.items()
            if name is not None
        }
        self._timestamp_paint = decorator(TIMESTAMP_DECORATION, enabled=colored)
        self._source_paint = decorator(SOURCE_DECORATION, enabled=colored)

    def format(
        self,
        severity: Severity,
        timestamp: str,
        message: str,
        source: Optional[str] = None,
    ) -> str:
        parts = []

        if severity is not Severity.DEFAULT:
            parts.append(self._severity_paint[severity](severity.label))
            parts.append(': ')

        parts.append(f'[{self._timestamp_paint(timestamp)}]')

        # An empty source is still a source
        if source is not None:
            parts.append(f' ({self._source_paint(source)}): ')
        else:
            parts.append(': ')

        parts.append(message)
        return ''.join(parts)


_PLAIN = RecordFormatter(colored=False)
_COLORED = RecordFormatter(colored=True)


def format_line(
    severity: Severity,
    timestamp: str,
    message: str,
    source: Optional[str] = None,
    colored: bool = False,
) -> str:
    """Format a single line without keeping a formatter around."""
    formatter = _COLORED if colored else _PLAIN
    return formatter.format(severity, timestamp, message, source)
