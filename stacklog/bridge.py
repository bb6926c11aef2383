"""Feed stdlib logging records into a stacklog Logger."""

import logging
import threading
from typing import Optional

from .config import load_config
from .logger import Logger
from .severity import Severity

logger = logging.getLogger(__name__)

# Records from our own loggers are never fed back in
_INTERNAL_PREFIX = 'stacklog'


class StackLogHandler(logging.Handler):
    """Logging handler that turns each record into a stacklog record.

    Severity comes from the level, the source tag is the logger name and the
    message is this handler's formatted text.
    """

    def __init__(self, target: Logger, level: int = logging.NOTSET):
        super().__init__(level)
        self.target = target

    def emit(self, record: logging.LogRecord):
        if record.name == _INTERNAL_PREFIX or record.name.startswith(_INTERNAL_PREFIX + '.'):
            return
        try:
            message = self.format(record)
            self.target.add(Severity.from_levelno(record.levelno), message, record.name)
        except Exception:
            self.handleError(record)


# Global logger instance
_default_logger: Optional[Logger] = None
_default_handler: Optional[StackLogHandler] = None
_default_lock = threading.Lock()


def get_default_logger() -> Logger:
    """Get or create the process-wide logger, attached to the root logger."""
    global _default_logger, _default_handler
    with _default_lock:
        if _default_logger is None:
            _default_logger = Logger(load_config())
            _default_handler = StackLogHandler(_default_logger)
            logging.getLogger().addHandler(_default_handler)
            logger.info('Default logger attached to root logger (capacity=%d)',
                        _default_logger.capacity)
        return _default_logger


def reset_default_logger():
    """Detach and forget the process-wide logger."""
    global _default_logger, _default_handler
    with _default_lock:
        if _default_handler is not None:
            logging.getLogger().removeHandler(_default_handler)
        _default_logger = None
        _default_handler = None
