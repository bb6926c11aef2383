"""Logger configuration and environment loading."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .buffer import DEFAULT_CAPACITY

logger = logging.getLogger(__name__)

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off', ''}


class ConfigError(ValueError):
    """Raised for invalid logger configuration."""


@dataclass(frozen=True)
class LoggerConfig:
    """Settings fixed for the lifetime of a Logger."""

    max_stack_size: int = DEFAULT_CAPACITY
    # Number of records retained before the oldest is evicted.

    colored: bool = False
    # Wrap severity, timestamp and source in ANSI colors.

    def __post_init__(self):
        size = self.max_stack_size
        if isinstance(size, bool) or not isinstance(size, int):
            raise ConfigError(f'max_stack_size must be an integer, got {size!r}')
        if size <= 0:
            raise ConfigError(f'max_stack_size must be positive, got {size}')
        if not isinstance(self.colored, bool):
            raise ConfigError(f'colored must be a bool, got {self.colored!r}')


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f'{name} must be true or false, got {raw!r}')


def load_config() -> LoggerConfig:
    """Load logger configuration from environment variables (and .env)."""
    load_dotenv()

    raw_size = os.getenv('STACKLOG_MAX_STACK_SIZE', str(DEFAULT_CAPACITY))
    try:
        max_stack_size = int(raw_size)
    except ValueError:
        raise ConfigError(f'STACKLOG_MAX_STACK_SIZE must be an integer, got {raw_size!r}') from None

    colored = _parse_bool('STACKLOG_COLORED', os.getenv('STACKLOG_COLORED', 'false'))

    config = LoggerConfig(max_stack_size=max_stack_size, colored=colored)
    logger.info('Configuration loaded (max_stack_size=%d, colored=%s)',
                config.max_stack_size, config.colored)
    return config
