"""Severity levels for log records."""

import logging
from enum import Enum
from typing import Optional


class Severity(Enum):
    """Closed set of record kinds.

    DEFAULT renders without a label; the others prefix the line with their
    uppercase name.
    """

    DEFAULT = 'default'
    INFO = 'info'
    WARN = 'warn'
    ERROR = 'error'

    @property
    def label(self) -> Optional[str]:
        """Uppercase prefix for the formatted line, or None for DEFAULT."""
        if self is Severity.DEFAULT:
            return None
        return self.name

    @classmethod
    def from_levelno(cls, levelno: int) -> 'Severity':
        """Map a stdlib logging level number onto a severity."""
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARN
        if levelno >= logging.INFO:
            return cls.INFO
        return cls.DEFAULT
