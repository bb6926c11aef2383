"""Wall-clock timestamp strings for log records."""

import locale
from datetime import datetime
from typing import Optional

# Same layout as the stdlib logging datefmt used by run_api.py
DEFAULT_TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M:%S'

# Locale's own date and time representation
LOCALE_TIMESTAMP_FORMAT = '%x %X'


class Clock:
    """Render the current time as '<date-time>.<milliseconds>'.

    Milliseconds are appended without zero padding, so 5ms past the second
    renders as '.5'.

    With use_locale=True, LC_TIME is set from the environment and the
    format defaults to the locale's date and time representation. This
    changes process-wide locale state.
    """

    def __init__(self, fmt: Optional[str] = None, use_locale: bool = False):
        if use_locale:
            locale.setlocale(locale.LC_TIME, '')
        if fmt is None:
            fmt = LOCALE_TIMESTAMP_FORMAT if use_locale else DEFAULT_TIMESTAMP_FORMAT
        self.fmt = fmt
        self.use_locale = use_locale

    def __call__(self) -> str:
        return self.render(datetime.now())

    def render(self, moment: Optional[datetime] = None) -> str:
        """Render a specific moment (defaults to now)."""
        if moment is None:
            moment = datetime.now()
        return f'{moment.strftime(self.fmt)}.{moment.microsecond // 1000}'
